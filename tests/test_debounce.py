"""Tests for the debouncer, on a virtual clock and on the real Qt event loop."""

import pytest
from PyQt5.QtCore import QObject # type: ignore
from PyQt5.QtTest import QTest # type: ignore

from signup.debounce import Debouncer, QtScheduler


@pytest.fixture
def owner(qapp):
    parent = QObject()
    yield parent
    parent.deleteLater()


def test_rapid_pushes_collapse_into_last_value(scheduler):
    seen = []
    d = Debouncer(0.3, seen.append, scheduler)
    for value in ("a", "ab", "abc"):
        d.push(value)
        scheduler.advance(0.1)
    assert seen == []
    assert d.pending
    scheduler.advance(0.5)
    assert seen == ["abc"]
    assert not d.pending


def test_value_is_delivered_only_after_quiet_period(scheduler):
    seen = []
    d = Debouncer(0.8, seen.append, scheduler)
    d.push("x")
    scheduler.advance(0.7)
    assert seen == []
    scheduler.advance(0.2)
    assert seen == ["x"]


def test_dedupe_drops_repeated_settled_value(scheduler):
    seen = []
    d = Debouncer(0.2, seen.append, scheduler, dedupe=True)
    d.push("x")
    scheduler.advance(1)
    d.push("y")
    d.push("x")
    scheduler.advance(1)
    d.push("z")
    scheduler.advance(1)
    assert seen == ["x", "z"]


def test_without_dedupe_repeats_are_delivered(scheduler):
    seen = []
    d = Debouncer(0.2, seen.append, scheduler)
    d.push(("a", "a"))
    scheduler.advance(1)
    d.push(("a", "a"))
    scheduler.advance(1)
    assert seen == [("a", "a"), ("a", "a")]


def test_cancel_and_reset(scheduler):
    seen = []
    d = Debouncer(0.2, seen.append, scheduler, dedupe=True)
    d.push("x")
    d.cancel()
    scheduler.advance(1)
    assert seen == []

    d.push("x")
    scheduler.advance(1)
    d.reset()
    # forgotten, so the same value goes through again
    d.push("x")
    scheduler.advance(1)
    assert seen == ["x", "x"]


def test_negative_delay_rejected(scheduler):
    with pytest.raises(ValueError):
        Debouncer(-0.1, lambda value: None, scheduler)


def test_qt_scheduler_fires_on_event_loop(owner):
    fired = []
    handle = QtScheduler(owner).call_later(0.01, lambda: fired.append(True))
    QTest.qWait(200)
    assert fired == [True]
    handle.cancel()


def test_qt_scheduler_cancel(owner):
    fired = []
    handle = QtScheduler(owner).call_later(0.05, lambda: fired.append(True))
    handle.cancel()
    handle.cancel()
    QTest.qWait(200)
    assert fired == []


def test_debouncer_on_qt_event_loop(owner):
    seen = []
    d = Debouncer(0.05, seen.append, QtScheduler(owner))
    d.push("a")
    d.push("ab")
    QTest.qWait(300)
    assert seen == ["ab"]


def test_fired_timers_are_released(owner):
    handle = QtScheduler(owner).call_later(0.01, lambda: None)
    assert len(owner.findChildren(QObject)) == 1
    QTest.qWait(200)
    assert owner.findChildren(QObject) == []
    handle.cancel()
