"""
Gem Slots - Game Session

Explicit session context wiring one clock, scheduler, bus, board and round
machine together. Several sessions can live in one process without sharing
any state.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable

from gem_slots.animation.board import ResultBanner, SlotBoard
from gem_slots.animation.clock import FrameClock, MonotonicClock
from gem_slots.animation.reveal import AnimationTiming, RevealAnimator
from gem_slots.animation.scheduler import FrameScheduler
from gem_slots.bus.notification_bus import NotificationBus
from gem_slots.engine.base import GameConfig, RoundResult
from gem_slots.engine.outcome import OutcomeGenerator
from gem_slots.engine.payout import PayoutEvaluator
from gem_slots.session.models import SessionSnapshot
from gem_slots.session.round_machine import RoundStateMachine

if TYPE_CHECKING:
    from gem_slots.config.settings import Settings


class GameSession:
    """One player's game: balance, board and animation clock."""

    def __init__(
        self,
        *,
        config: GameConfig | None = None,
        timing: AnimationTiming | None = None,
        starting_balance: float = 100.0,
        clock: FrameClock | None = None,
        rng: random.Random | None = None,
        bus: NotificationBus | None = None,
        on_win: Callable[[RoundResult], None] | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.clock = clock or MonotonicClock()
        self.scheduler = FrameScheduler(self.clock)
        self.bus = bus or NotificationBus()
        self.board = SlotBoard(self.config.slot_count)
        self.banner = ResultBanner()
        self.animator = RevealAnimator(self.scheduler, timing)
        self.machine = RoundStateMachine(
            self.bus,
            self.animator,
            self.board,
            generator=OutcomeGenerator(self.config.symbols, rng),
            evaluator=PayoutEvaluator(),
            config=self.config,
            starting_balance=starting_balance,
            banner=self.banner,
            on_win=on_win,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        clock: FrameClock | None = None,
        bus: NotificationBus | None = None,
        on_win: Callable[[RoundResult], None] | None = None,
    ) -> GameSession:
        """Build a session from application settings."""
        return cls(
            config=settings.game_config(),
            timing=settings.animation_timing(),
            starting_balance=settings.starting_balance,
            clock=clock,
            rng=random.Random(settings.rng_seed),
            bus=bus,
            on_win=on_win,
        )

    @property
    def balance(self) -> float:
        return self.machine.balance

    @property
    def is_busy(self) -> bool:
        return self.machine.is_busy

    def submit_bet(self, bet_amount: float) -> None:
        self.machine.submit_bet(bet_amount)

    def tick(self, now: float | None = None) -> int:
        """Advance the session's animations by one frame."""
        return self.scheduler.tick(now)

    def snapshot(self) -> SessionSnapshot:
        return self.machine.snapshot()

    def close(self) -> None:
        self.machine.dispose()
