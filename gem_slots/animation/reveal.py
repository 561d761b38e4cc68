"""
Gem Slots - Reveal Animator

Sequences the visuals of a round on top of the frame scheduler:

- staggered spawn tweens, one per slot, each dropping its gem into place
  while fading it in
- fade-out of the previous round's gems
- the animated result banner
- the endless idle wave between rounds

Every method returns either a ``Completion`` or a ``WaveHandle``; the
animator never decides what happens next.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from gem_slots.animation.board import ResultBanner, SlotBoard, SlotView
from gem_slots.animation.scheduler import DeferredCall, FrameScheduler, WaveHandle
from gem_slots.animation.tasks import (
    Completion,
    TaskKind,
    TweenTask,
    WaveTask,
    lerp,
    when_all,
)
from gem_slots.engine.base import Outcome

logger = logging.getLogger(__name__)

SlotCallback = Callable[[int], None]


@dataclass(frozen=True)
class AnimationTiming:
    """
    Timing and motion constants, in milliseconds and board units.

    Attributes:
        spawn_delay_ms: Stagger between consecutive slot reveals
        spawn_duration_ms: Length of one slot reveal
        spawn_drop: Height a gem falls from while revealing
        fade_duration_ms: Fade-out of the previous round's gems
        result_duration_ms: Count-up of the result banner
        wave_period_ms: Time scale of the idle wave
        wave_amplitude: Peak vertical offset of the idle wave
    """
    spawn_delay_ms: float = 500.0
    spawn_duration_ms: float = 500.0
    spawn_drop: float = 50.0
    fade_duration_ms: float = 500.0
    result_duration_ms: float = 1000.0
    wave_period_ms: float = 500.0
    wave_amplitude: float = 10.0


class RevealAnimator:
    """Schedules the per-round animations of a slot board."""

    def __init__(self, scheduler: FrameScheduler, timing: AnimationTiming | None = None) -> None:
        self._scheduler = scheduler
        self._timing = timing or AnimationTiming()
        self._calls: list[DeferredCall] = []
        self._tasks: list[TweenTask] = []

    @property
    def timing(self) -> AnimationTiming:
        return self._timing

    @property
    def in_flight(self) -> bool:
        """Whether any reveal, fade or result animation is still pending."""
        return any(c.pending for c in self._calls) or any(not t.finished for t in self._tasks)

    def reveal(
        self,
        board: SlotBoard,
        outcome: Outcome,
        on_slot_started: SlotCallback | None = None,
        on_slot_revealed: SlotCallback | None = None,
    ) -> Completion:
        """Mount ``outcome`` and reveal slot i after ``i * spawn_delay_ms``.

        Returns:
            Completion resolving once every slot has finished revealing
        """
        board.mount(outcome, self._timing.spawn_drop)

        signals = []
        for slot in board:
            signal = Completion()
            signals.append(signal)
            self._calls.append(
                self._scheduler.call_later(
                    slot.index * self._timing.spawn_delay_ms,
                    lambda s=slot, sig=signal: self._spawn(
                        s, sig, on_slot_started, on_slot_revealed
                    ),
                )
            )
        return when_all(signals)

    def _spawn(
        self,
        slot: SlotView,
        signal: Completion,
        on_started: SlotCallback | None,
        on_revealed: SlotCallback | None,
    ) -> None:
        start_offset = slot.offset_y

        def apply(progress: float) -> None:
            slot.offset_y = lerp(start_offset, 0.0, progress)
            slot.alpha = progress

        def finished() -> None:
            if on_revealed is not None:
                on_revealed(slot.index)
            signal.resolve()

        task = TweenTask(
            TaskKind.REVEAL, self._scheduler.now(), self._timing.spawn_duration_ms, apply
        )
        task.completion.add_callback(finished)
        self._track(task)
        if on_started is not None:
            on_started(slot.index)

    def fade_out(self, board: SlotBoard) -> Completion:
        """Fade every mounted gem to transparent, then unmount them."""
        start_alphas = [slot.alpha for slot in board]

        def apply(progress: float) -> None:
            for slot, alpha in zip(board, start_alphas):
                slot.alpha = lerp(alpha, 0.0, progress)

        task = TweenTask(
            TaskKind.FADE_OUT, self._scheduler.now(), self._timing.fade_duration_ms, apply
        )
        task.completion.add_callback(board.unmount)
        self._track(task)
        return task.completion

    def animate_result(self, banner: ResultBanner, amount: float, is_win: bool) -> Completion:
        """Count the banner up from 0 to ``amount`` while fading it in."""
        banner.show(0.0, is_win, 0.0)

        def apply(progress: float) -> None:
            banner.show(lerp(0.0, amount, progress), is_win, progress)

        task = TweenTask(
            TaskKind.RESULT, self._scheduler.now(), self._timing.result_duration_ms, apply
        )
        self._track(task)
        return task.completion

    def start_wave(self, board: SlotBoard) -> WaveHandle:
        """Start the idle wave. It runs until the returned handle is disposed."""
        period = self._timing.wave_period_ms
        amplitude = self._timing.wave_amplitude

        def apply(elapsed: float) -> None:
            for slot in board:
                if slot.mounted:
                    slot.offset_y = math.sin(elapsed / period + slot.index) * amplitude

        task = WaveTask(self._scheduler.now(), apply)
        self._scheduler.add(task)
        return WaveHandle(task)

    def cancel(self) -> None:
        """Cancel pending reveals, fades and banner animations."""
        pending = sum(1 for c in self._calls if c.pending)
        running = sum(1 for t in self._tasks if not t.finished)
        for call in self._calls:
            call.cancel()
        for task in self._tasks:
            task.cancel()
        self._calls = []
        self._tasks = []
        if pending or running:
            logger.debug("Cancelled %d pending reveals and %d animations", pending, running)

    def _track(self, task: TweenTask) -> None:
        self._tasks = [t for t in self._tasks if not t.finished]
        self._tasks.append(task)
        self._scheduler.add(task)
