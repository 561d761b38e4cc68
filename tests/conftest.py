"""
Gem Slots - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Sequence

import pytest

from gem_slots.animation import (
    AnimationTiming,
    FrameScheduler,
    ManualClock,
    ResultBanner,
    RevealAnimator,
    SlotBoard,
)
from gem_slots.bus import EventPayload, LogEntry, NotificationBus
from gem_slots.engine.base import GameConfig, Outcome, RoundResult, Symbol
from gem_slots.session.round_machine import RoundStateMachine

A, B, C, D, E, F, G = tuple(Symbol)


# =============================================================================
# PAYOUT TEST DATA
# =============================================================================

@pytest.fixture
def payout_outcomes() -> dict[str, tuple[tuple[Symbol, ...], int, str]]:
    """
    Seven-slot outcome patterns with expected multipliers.

    Returns:
        Dict mapping name to (symbols, expected_multiplier, category name)
    """
    return {
        "seven_of_a_kind": ((A, A, A, A, A, A, A), 1000, "ALL_OF_A_KIND"),
        "six_of_a_kind": ((B, B, B, B, B, B, A), 100, "ALL_BUT_ONE"),
        "five_of_a_kind": ((C, C, C, C, C, A, B), 50, "ALL_BUT_TWO"),
        "five_with_pair": ((C, C, C, C, C, A, A), 50, "ALL_BUT_TWO"),
        "four_of_a_kind": ((A, A, A, A, B, C, D), 5, "FOUR_OF_A_KIND"),
        "four_with_pair": ((A, A, A, A, B, B, C), 5, "FOUR_OF_A_KIND"),
        "four_with_three": ((A, A, A, A, B, B, B), 5, "FOUR_OF_A_KIND"),
        "full_house": ((A, A, A, B, B, C, D), 4, "FULL_HOUSE"),
        "full_house_two_pairs": ((A, A, A, B, B, C, C), 4, "FULL_HOUSE"),
        "three_of_a_kind": ((A, A, A, B, C, D, E), 3, "THREE_OF_A_KIND"),
        "two_triples": ((A, A, A, B, B, B, C), 3, "THREE_OF_A_KIND"),
        "three_pairs": ((A, A, B, B, C, C, D), 3, "THREE_PAIRS"),
        "two_pairs": ((A, A, B, B, C, D, E), 0, "NO_WIN"),
        "one_pair": ((A, A, B, C, D, E, F), 0, "NO_WIN"),
        "all_distinct": ((A, B, C, D, E, F, G), 0, "NO_WIN"),
    }


# =============================================================================
# ROUND MACHINE FIXTURES
# =============================================================================

class ScriptedGenerator:
    """Outcome generator returning predetermined outcomes in order."""

    def __init__(self, outcomes: Sequence[Outcome]) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[int] = []

    def generate(self, slot_count: int) -> Outcome:
        self.calls.append(slot_count)
        return self._outcomes.pop(0)


class BusRecorder:
    """Registers on every bus topic and keeps what was published."""

    def __init__(self, bus: NotificationBus) -> None:
        self.balances: list[float] = []
        self.logs: list[LogEntry] = []
        self.bet_states: list[float] = []
        self.events: list[EventPayload] = []
        bus.balance_changed.register(self.balances.append)
        bus.log.register(self.logs.append)
        bus.bet_submitted.register(self.bet_states.append)
        bus.round_events.register(self.events.append)

    def event_names(self) -> list[str]:
        return [p.event.name for p in self.events]


class RoundHarness:
    """Round machine wired to a manual clock, scripted outcomes and a recorder."""

    def __init__(
        self,
        outcomes: Sequence[Outcome],
        starting_balance: float = 100.0,
        timing: AnimationTiming | None = None,
        on_win: Callable[[RoundResult], None] | None = None,
    ) -> None:
        self.clock = ManualClock()
        self.scheduler = FrameScheduler(self.clock)
        self.bus = NotificationBus()
        self.recorder = BusRecorder(self.bus)
        self.board = SlotBoard(7)
        self.banner = ResultBanner()
        self.animator = RevealAnimator(self.scheduler, timing)
        self.generator = ScriptedGenerator(outcomes)
        self.machine = RoundStateMachine(
            self.bus,
            self.animator,
            self.board,
            generator=self.generator,
            config=GameConfig(),
            starting_balance=starting_balance,
            banner=self.banner,
            on_win=on_win,
        )

    def drive(self, ms: float, step: float = 50.0) -> None:
        """Tick now, then keep advancing the clock by ``step`` for ``ms``."""
        self.scheduler.tick()
        elapsed = 0.0
        while elapsed < ms:
            self.clock.advance(step)
            self.scheduler.tick()
            elapsed += step


@pytest.fixture
def harness() -> Callable[..., RoundHarness]:
    """Factory for a RoundHarness: harness(outcomes, starting_balance=...)."""
    return RoundHarness


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def scheduler(manual_clock: ManualClock) -> FrameScheduler:
    return FrameScheduler(manual_clock)
