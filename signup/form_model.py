"""Validation model behind the sign-up page.

Holds the username and both password fields as observable state and derives
the password status, the inline password error and the overall validity
flag from them. Each derived check runs only after its input has settled
(see `debounce.Debouncer`), so typing does not re-validate on every key.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal # type: ignore

from .config import Settings
from .debounce import Debouncer, QtScheduler
from .validators import (
    PasswordStatus,
    inline_error_for,
    is_form_valid,
    is_password_empty,
    is_password_strong,
    is_username_valid,
    password_status,
    passwords_equal,
)

logger = logging.getLogger(__name__)


class FormViewModel(QObject):
    inline_error_changed = pyqtSignal(str)
    is_valid_changed = pyqtSignal(bool)
    # Emitted for every derived status, including repeats and the first one
    password_status_changed = pyqtSignal(object)

    def __init__(self, settings: Optional[Settings] = None, scheduler=None, parent: Optional[QObject] = None) -> None:
        """
        settings: debounce delays; defaults from `config` when omitted
        scheduler: timer source for the debouncers (a `QtScheduler` by default)
        """
        super().__init__(parent)
        settings = settings or Settings()
        self.scheduler = scheduler or QtScheduler(self)

        self._username = ""
        self._password = ""
        self._password_again = ""
        self._inline_error = ""
        self._is_valid = False

        self._username_check = Debouncer(settings.username_delay, self._on_username_settled,
                                         self.scheduler, dedupe=True, name="username")
        self._empty_check = Debouncer(settings.password_delay, self._on_password_empty_settled,
                                      self.scheduler, dedupe=True, name="password-empty")
        self._strength_check = Debouncer(settings.strength_delay, self._on_password_strength_settled,
                                         self.scheduler, dedupe=True, name="password-strength")
        # Compares the latest pair, so re-entering an already seen pair still counts
        self._match_check = Debouncer(settings.match_delay, self._on_passwords_match_settled,
                                      self.scheduler, name="passwords-match")

        self._start_session()

    # -----------------------------
    # Observable inputs
    # -----------------------------
    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = value
        self._username_check.push(value)

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        self._password = value
        self._empty_check.push(value)
        self._strength_check.push(value)
        self._match_check.push((value, self._password_again))

    @property
    def password_again(self) -> str:
        return self._password_again

    @password_again.setter
    def password_again(self, value: str) -> None:
        self._password_again = value
        self._match_check.push((self._password, value))

    # -----------------------------
    # Derived outputs
    # -----------------------------
    @property
    def inline_error_for_password(self) -> str:
        return self._inline_error

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def password_status(self) -> Optional[PasswordStatus]:
        """Latest derived status, None until every password check has settled once."""
        return self._status

    # -----------------------------
    # Session lifecycle
    # -----------------------------
    def reset(self) -> None:
        """Clear the form and start a fresh session."""
        self._username = ""
        self._password = ""
        self._password_again = ""
        self._set_inline_error("")
        self._set_is_valid(False)
        self._start_session()

    def close(self) -> None:
        for check in self._checks():
            check.cancel()

    def _checks(self):
        return (self._username_check, self._empty_check, self._strength_check, self._match_check)

    def _start_session(self) -> None:
        for check in self._checks():
            check.reset()
        self._username_valid: Optional[bool] = None
        self._password_empty: Optional[bool] = None
        self._password_strong: Optional[bool] = None
        self._passwords_equal: Optional[bool] = None
        self._status: Optional[PasswordStatus] = None
        self._first_status_seen = False

        # Replay the current values so every check settles once without input
        self.username = self._username
        self.password = self._password
        self.password_again = self._password_again

    # -----------------------------
    # Settled checks
    # -----------------------------
    def _on_username_settled(self, username: str) -> None:
        self._username_valid = is_username_valid(username)
        self._update_validity()

    def _on_password_empty_settled(self, password: str) -> None:
        self._password_empty = is_password_empty(password)
        self._update_status()

    def _on_password_strength_settled(self, password: str) -> None:
        self._password_strong = is_password_strong(password)
        self._update_status()

    def _on_passwords_match_settled(self, pair) -> None:
        self._passwords_equal = passwords_equal(*pair)
        self._update_status()

    def _update_status(self) -> None:
        if None in (self._password_empty, self._password_strong, self._passwords_equal):
            return
        status = password_status(self._password_empty, self._password_strong, self._passwords_equal)
        if status is not self._status:
            logger.debug("password status: %s -> %s", self._status, status)
        self._status = status
        self.password_status_changed.emit(status)
        self._update_validity()

        # The status derived for the untouched form must not show an error
        if not self._first_status_seen:
            self._first_status_seen = True
            return
        self._set_inline_error(inline_error_for(status))

    def _update_validity(self) -> None:
        if self._status is None or self._username_valid is None:
            return
        self._set_is_valid(is_form_valid(self._status, self._username_valid))

    def _set_inline_error(self, message: str) -> None:
        if message != self._inline_error:
            self._inline_error = message
            self.inline_error_changed.emit(message)

    def _set_is_valid(self, valid: bool) -> None:
        if valid != self._is_valid:
            logger.debug("form valid: %s", valid)
            self._is_valid = valid
            self.is_valid_changed.emit(valid)
