"""Frame clocks. All times are milliseconds on a monotonic scale."""

from __future__ import annotations

import time
from typing import Protocol


class FrameClock(Protocol):
    """Source of the current frame time."""

    def now(self) -> float: ...


class MonotonicClock:
    """Wall clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to. Used to drive frames in tests."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Cannot move a clock backwards ({ms} ms).")
        self._now += ms
        return self._now

    def set(self, now: float) -> None:
        if now < self._now:
            raise ValueError(f"Cannot move a clock backwards to {now}.")
        self._now = now
