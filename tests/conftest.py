"""Shared test fixtures: a virtual-clock scheduler and an offscreen QApplication."""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import itertools

import pytest
from PyQt5.QtWidgets import QApplication # type: ignore

from signup.form_model import FormViewModel


class FakeHandle:
    def __init__(self, when, seq, callback):
        self.when = when
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Scheduler with a virtual clock; timers only fire inside `advance`."""

    def __init__(self):
        self.now = 0.0
        self._timers = []
        self._seq = itertools.count()

    def call_later(self, delay, callback):
        handle = FakeHandle(self.now + delay, next(self._seq), callback)
        self._timers.append(handle)
        return handle

    @property
    def pending(self):
        return [t for t in self._timers if not t.cancelled and not t.fired]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [t for t in self.pending if t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self.now = timer.when
            timer.fired = True
            timer.callback()
        self.now = target


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication(["tests"])
    yield app


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def model(qapp, scheduler):
    m = FormViewModel(scheduler=scheduler)
    yield m
    m.close()


def settle(scheduler, seconds=1.0):
    scheduler.advance(seconds)
