#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#

"""Manually advanced clock and scheduler for timer tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(order=True)
class _Timer:
    deadline: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class FakeScheduler:
    """
    Scheduler driven by advance() instead of a main loop.

    Usage:
        sched = FakeScheduler()
        sched.call_later(0.6, cb)
        sched.advance(0.6)   # cb runs here
    """

    def __init__(self):
        self.now = 0.0
        self._timers: list[_Timer] = []
        self._seq = 0
        self.cancelled_count = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> _Timer:
        self._seq += 1
        timer = _Timer(self.now + delay, self._seq, callback)
        self._timers.append(timer)
        return timer

    def cancel(self, handle: _Timer) -> None:
        if handle.cancelled or handle not in self._timers:
            raise AssertionError("cancel() of a timer that is not pending")
        handle.cancelled = True
        self._timers.remove(handle)
        self.cancelled_count += 1

    @property
    def pending(self) -> int:
        return len(self._timers)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running timers in deadline order."""
        target = self.now + seconds
        while True:
            due = sorted(t for t in self._timers if t.deadline <= target + 1e-9)
            if not due:
                break
            timer = due[0]
            self._timers.remove(timer)
            self.now = max(self.now, timer.deadline)
            timer.callback()
        self.now = target

    def advance_to(self, when: float) -> None:
        self.advance(when - self.now)
