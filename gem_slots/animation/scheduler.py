"""
Gem Slots - Frame Scheduler

Single-threaded cooperative scheduler. Everything that moves advances inside
``FrameScheduler.tick``: due deferred calls fire first, in due order, then
every live animation task is stepped once. Cancelled tasks and deferred calls
are dropped and never called again.
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable

from gem_slots.animation.clock import FrameClock
from gem_slots.animation.tasks import AnimationTask, WaveTask

logger = logging.getLogger(__name__)


class DeferredCall:
    """A callback due at a fixed time. Fires at most once."""

    def __init__(self, due: float, seq: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.seq = seq
        self._callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if self.pending:
            self.cancelled = True

    def fire(self) -> None:
        if not self.pending:
            return
        self.fired = True
        self._callback()


class FrameScheduler:
    """Drives deferred calls and animation tasks from a frame clock."""

    def __init__(self, clock: FrameClock) -> None:
        self._clock = clock
        self._tasks: list[AnimationTask] = []
        self._deferred: list[DeferredCall] = []
        self._seq = itertools.count()
        self._frame_now: float | None = None

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def now(self) -> float:
        """Current frame time while ticking, else the clock reading."""
        if self._frame_now is not None:
            return self._frame_now
        return self._clock.now()

    def add(self, task: AnimationTask) -> AnimationTask:
        self._tasks.append(task)
        return task

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> DeferredCall:
        """Run ``callback`` on the first tick at or after ``delay_ms`` from now."""
        call = DeferredCall(self.now() + max(0.0, delay_ms), next(self._seq), callback)
        self._deferred.append(call)
        return call

    def tick(self, now: float | None = None) -> int:
        """Advance one frame.

        Args:
            now: Frame time; defaults to the clock reading

        Returns:
            Number of animation tasks still live after the frame
        """
        self._frame_now = self._clock.now() if now is None else now
        try:
            self._run_due(self._frame_now)
            for task in list(self._tasks):
                if not task.finished:
                    task.step(self._frame_now)
            self._tasks = [t for t in self._tasks if not t.finished]
        finally:
            self._frame_now = None
        return len(self._tasks)

    def _run_due(self, now: float) -> None:
        due = sorted(
            (c for c in self._deferred if c.due <= now),
            key=lambda c: (c.due, c.seq),
        )
        if not due:
            return
        self._deferred = [c for c in self._deferred if c.due > now]
        for call in due:
            call.fire()

    def cancel_all(self) -> None:
        """Cancel every pending deferred call and live task."""
        for call in self._deferred:
            call.cancel()
        for task in self._tasks:
            task.cancel()
        if self._deferred or self._tasks:
            logger.debug(
                "Cancelled %d deferred calls and %d tasks",
                len(self._deferred), len(self._tasks),
            )
        self._deferred = []
        self._tasks = []

    @property
    def active_tasks(self) -> list[AnimationTask]:
        return [t for t in self._tasks if not t.finished]

    @property
    def pending_calls(self) -> list[DeferredCall]:
        return [c for c in self._deferred if c.pending]

    @property
    def is_idle(self) -> bool:
        return not self.active_tasks and not self.pending_calls


class WaveHandle:
    """Owned handle to a running wave. Disposing it stops the wave for good."""

    def __init__(self, task: WaveTask) -> None:
        self._task = task

    @property
    def task(self) -> WaveTask:
        return self._task

    @property
    def active(self) -> bool:
        return not self._task.finished

    def dispose(self) -> None:
        self._task.cancel()


class WaveSlot:
    """Holds at most one wave handle.

    A new handle can only be installed once the previous one has been taken
    out (and disposed by whoever took it).
    """

    def __init__(self) -> None:
        self._handle: WaveHandle | None = None

    @property
    def handle(self) -> WaveHandle | None:
        return self._handle

    @property
    def active(self) -> bool:
        return self._handle is not None and self._handle.active

    def install(self, handle: WaveHandle) -> None:
        if self._handle is not None:
            raise RuntimeError("A wave is already installed; take and dispose it first.")
        self._handle = handle

    def take(self) -> WaveHandle | None:
        handle, self._handle = self._handle, None
        return handle
