"""
Gem Slots - Animation Tasks

Each animation is an explicit state object stepped by the frame scheduler.
A step returns True while the task wants more frames and False once it is
finished, so no task ever schedules itself.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Sequence

logger = logging.getLogger(__name__)


class TaskKind(Enum):
    """What an animation task drives."""
    REVEAL = auto()
    FADE_OUT = auto()
    RESULT = auto()
    WAVE = auto()


class TaskStatus(Enum):
    """Lifecycle of an animation task."""
    SCHEDULED = auto()
    RUNNING = auto()
    COMPLETED = auto()
    CANCELLED = auto()


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


class Completion:
    """One-shot completion signal.

    Resolves at most once. Callbacks added after resolution run immediately.
    A completion whose task was cancelled simply never resolves.
    """

    def __init__(self) -> None:
        self._done = False
        self._callbacks: list[Callable[[], None]] = []

    @property
    def done(self) -> bool:
        return self._done

    def add_callback(self, callback: Callable[[], None]) -> None:
        if self._done:
            callback()
        else:
            self._callbacks.append(callback)

    def resolve(self) -> None:
        if self._done:
            return
        self._done = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    @classmethod
    def resolved(cls) -> Completion:
        completion = cls()
        completion.resolve()
        return completion


def when_all(completions: Sequence[Completion]) -> Completion:
    """Completion that resolves once every input has resolved, in any order."""
    joined = Completion()
    remaining = len(completions)
    if remaining == 0:
        joined.resolve()
        return joined

    def _one_done() -> None:
        nonlocal remaining
        remaining -= 1
        if remaining == 0:
            joined.resolve()

    for completion in completions:
        completion.add_callback(_one_done)
    return joined


class AnimationTask:
    """Base class for scheduler-driven animations."""

    def __init__(self, kind: TaskKind, start: float) -> None:
        self.kind = kind
        self.start = start
        self.status = TaskStatus.SCHEDULED

    @property
    def finished(self) -> bool:
        return self.status in (TaskStatus.COMPLETED, TaskStatus.CANCELLED)

    def step(self, now: float) -> bool:
        raise NotImplementedError

    def cancel(self) -> None:
        if not self.finished:
            self.status = TaskStatus.CANCELLED
            logger.debug("Cancelled %s task started at %.1f", self.kind.name, self.start)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind.name} {self.status.name} start={self.start:.1f}>"


class TweenTask(AnimationTask):
    """
    Linear interpolation over a fixed duration.

    ``apply`` receives the progress in [0, 1] on every frame. The completion
    resolves exactly once, on the frame where progress reaches 1.
    """

    def __init__(
        self,
        kind: TaskKind,
        start: float,
        duration: float,
        apply: Callable[[float], None],
    ) -> None:
        super().__init__(kind, start)
        self.duration = duration
        self.completion = Completion()
        self._apply = apply

    def progress_at(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return clamp((now - self.start) / self.duration, 0.0, 1.0)

    def step(self, now: float) -> bool:
        if self.finished:
            return False
        if now < self.start:
            return True

        self.status = TaskStatus.RUNNING
        progress = self.progress_at(now)
        self._apply(progress)
        if progress >= 1.0:
            self.status = TaskStatus.COMPLETED
            self.completion.resolve()
            return False
        return True


class WaveTask(AnimationTask):
    """Endless idle motion. ``apply`` receives the elapsed time since start."""

    def __init__(self, start: float, apply: Callable[[float], None]) -> None:
        super().__init__(TaskKind.WAVE, start)
        self._apply = apply

    def step(self, now: float) -> bool:
        if self.finished:
            return False
        self.status = TaskStatus.RUNNING
        self._apply(max(0.0, now - self.start))
        return True
