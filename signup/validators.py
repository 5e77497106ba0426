"""validators.py

Small validation helpers for the sign-up form.

Everything here is pure: the timing (debounce, dedup) lives in
`form_model.FormViewModel`, which feeds settled values into these helpers.
"""
import re
from enum import Enum

from .config import MIN_USERNAME_LENGTH

# At least one lowercase letter, at least one symbol from $@#!%*?& and a
# minimum length of six characters. `.` does not match a newline.
_STRONG_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[$@#!%*?&]).{6,}$")


class PasswordStatus(Enum):
    EMPTY = "empty"
    NOT_STRONG_ENOUGH = "not_strong_enough"
    REPEATED_PASSWORD_WRONG = "repeated_password_wrong"
    VALID = "valid"


INLINE_ERRORS = {
    PasswordStatus.EMPTY: "Password cannot be empty!",
    PasswordStatus.NOT_STRONG_ENOUGH: "Password is too weak!",
    PasswordStatus.REPEATED_PASSWORD_WRONG: "Passwords do not match",
    PasswordStatus.VALID: "",
}


def is_username_valid(username: str) -> bool:
    """Return True if `username` is long enough to be accepted."""
    return len(username) >= MIN_USERNAME_LENGTH


def is_password_empty(password: str) -> bool:
    return password == ""


def is_password_strong(password: str) -> bool:
    """Return True if `password` passes the strength rule.

    The whole string must match: a lowercase letter, one of the symbols
    ``$ @ # ! % * ? &`` and at least six characters overall.
    """
    return _STRONG_PASSWORD_RE.fullmatch(password) is not None


def passwords_equal(password: str, password_again: str) -> bool:
    return password == password_again


def password_status(is_empty: bool, is_strong: bool, are_equal: bool) -> PasswordStatus:
    """Combine the three password checks; the first failing one wins."""
    if is_empty:
        return PasswordStatus.EMPTY
    if not is_strong:
        return PasswordStatus.NOT_STRONG_ENOUGH
    if not are_equal:
        return PasswordStatus.REPEATED_PASSWORD_WRONG
    return PasswordStatus.VALID


def status_for(password: str, password_again: str) -> PasswordStatus:
    """Evaluate every password check on raw values, without any settling."""
    return password_status(
        is_password_empty(password),
        is_password_strong(password),
        passwords_equal(password, password_again),
    )


def inline_error_for(status: PasswordStatus) -> str:
    return INLINE_ERRORS[status]


def is_form_valid(status: PasswordStatus, username_valid: bool) -> bool:
    return status is PasswordStatus.VALID and username_valid
