"""Debouncing on top of the Qt event loop.

A `Debouncer` holds back values until its input has been quiet for `delay`
seconds, then hands the latest one to a callback. Timers come from a
scheduler object with a single method::

    handle = scheduler.call_later(delay_seconds, callback)
    handle.cancel()

`QtScheduler` is the one used by the application; tests plug in a virtual
clock instead.
"""

import logging
from typing import Any, Callable

from PyQt5.QtCore import QObject, QTimer # type: ignore

logger = logging.getLogger(__name__)

_MISSING = object()


class _QtTimerHandle:
    def __init__(self, delay: float, callback: Callable[[], None], parent: QObject) -> None:
        self._callback = callback
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self._timer.start(int(round(delay * 1000)))

    def _on_timeout(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.deleteLater()
        self._callback()

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """Schedules callbacks with single-shot QTimers owned by `parent`.

    Timers are released with `deleteLater` once they fire or are cancelled,
    which needs a parent to hold them in the meantime.
    """

    def __init__(self, parent: QObject) -> None:
        self.parent = parent

    def call_later(self, delay: float, callback: Callable[[], None]) -> _QtTimerHandle:
        return _QtTimerHandle(delay, callback, self.parent)


class Debouncer:
    """Deliver the latest pushed value once input has settled.

    - `delay` is the quiescence period in seconds.
    - `dedupe` drops a settled value equal to the previously delivered one.
    """

    def __init__(self, delay: float, callback: Callable[[Any], None], scheduler, dedupe: bool = False, name: str = "") -> None:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.delay = delay
        self.callback = callback
        self.scheduler = scheduler
        self.dedupe = dedupe
        self.name = name
        self._value: Any = _MISSING
        self._delivered: Any = _MISSING
        self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: Any) -> None:
        self._value = value
        if self._handle is not None:
            self._handle.cancel()
        self._handle = self.scheduler.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def reset(self) -> None:
        """Cancel any pending timer and forget what was delivered."""
        self.cancel()
        self._value = _MISSING
        self._delivered = _MISSING

    def _fire(self) -> None:
        self._handle = None
        value = self._value
        if self.dedupe and self._delivered is not _MISSING and value == self._delivered:
            logger.debug("%s: settled value unchanged, skipped", self.name or "debouncer")
            return
        self._delivered = value
        self.callback(value)
