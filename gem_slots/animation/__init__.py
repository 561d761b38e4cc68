"""
Gem Slots Animation.

Frame clocks, the cooperative frame scheduler, animation tasks and the
reveal animator that sequences a round's visuals.
"""

from gem_slots.animation.board import ResultBanner, SlotBoard, SlotView
from gem_slots.animation.clock import FrameClock, ManualClock, MonotonicClock
from gem_slots.animation.reveal import AnimationTiming, RevealAnimator
from gem_slots.animation.scheduler import (
    DeferredCall,
    FrameScheduler,
    WaveHandle,
    WaveSlot,
)
from gem_slots.animation.tasks import (
    Completion,
    TaskKind,
    TaskStatus,
    TweenTask,
    WaveTask,
    when_all,
)

__all__ = [
    "AnimationTiming",
    "Completion",
    "DeferredCall",
    "FrameClock",
    "FrameScheduler",
    "ManualClock",
    "MonotonicClock",
    "ResultBanner",
    "RevealAnimator",
    "SlotBoard",
    "SlotView",
    "TaskKind",
    "TaskStatus",
    "TweenTask",
    "WaveHandle",
    "WaveSlot",
    "WaveTask",
    "when_all",
]
