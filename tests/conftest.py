"""Shared fixtures for practice site tests."""

import pytest

from practice_site.pages import HistoryNavigator


class FakeTimer:
    """Timer handle driven by FakeScheduler."""

    def __init__(self, when: float, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock: timers fire only when the test advances time."""

    def __init__(self):
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self.timers if not t.cancelled)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted(
            (t for t in self.timers if t.when <= self.now and not t.cancelled),
            key=lambda t: t.when,
        )
        for timer in due:
            self.timers.remove(timer)
            timer.callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator()
