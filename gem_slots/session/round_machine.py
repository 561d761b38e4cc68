"""
Gem Slots - Round State Machine

Orchestrates one betting round end to end:

    IDLE/WAVING --submit_bet--> [FADING] --> VALIDATING --> REVEALING
        --> EVALUATING --> PAYING --> WAVING

The machine owns the session balance. It is the only component that mutates
it, and every change is published on the injected notification bus. Only one
round is in flight at a time: a bet submitted while a round is between
FADING and PAYING is refused.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from gem_slots.animation.board import ResultBanner, SlotBoard
from gem_slots.animation.reveal import RevealAnimator
from gem_slots.animation.scheduler import WaveSlot
from gem_slots.bus.events import LogKind, RoundEvent
from gem_slots.bus.notification_bus import NotificationBus
from gem_slots.engine.base import GameConfig, Outcome, RoundResult
from gem_slots.engine.outcome import OutcomeGenerator
from gem_slots.engine.payout import PayoutEvaluator
from gem_slots.session.models import BoardSnapshot, RoundSnapshot, SessionSnapshot

logger = logging.getLogger(__name__)

INSUFFICIENT_BALANCE = "Insufficient balance"
ROUND_IN_PROGRESS = "Round in progress"


class RoundPhase(Enum):
    """Where the machine is in the current round."""
    IDLE = "idle"
    FADING = "fading"
    VALIDATING = "validating"
    REVEALING = "revealing"
    EVALUATING = "evaluating"
    PAYING = "paying"
    WAVING = "waving"


_BUSY_PHASES = frozenset({
    RoundPhase.FADING,
    RoundPhase.VALIDATING,
    RoundPhase.REVEALING,
    RoundPhase.EVALUATING,
    RoundPhase.PAYING,
})


class RoundStateMachine:
    """
    Betting round orchestrator for one game session.

    Args:
        bus: Notification bus the machine publishes on
        animator: Sequencer for the round's visuals
        board: Slot board the animator draws on
        generator: Outcome source, seeded for tests
        evaluator: Payout table
        config: Board size and gem pool
        starting_balance: Balance at the start of the session
        banner: Result banner view model
        on_win: Success cue, called with the result of every winning round
    """

    def __init__(
        self,
        bus: NotificationBus,
        animator: RevealAnimator,
        board: SlotBoard,
        *,
        generator: OutcomeGenerator | None = None,
        evaluator: PayoutEvaluator | None = None,
        config: GameConfig | None = None,
        starting_balance: float = 100.0,
        banner: ResultBanner | None = None,
        on_win: Callable[[RoundResult], None] | None = None,
    ) -> None:
        self._config = config or GameConfig()
        if len(board) != self._config.slot_count:
            raise ValueError(
                f"Board has {len(board)} slots, config expects {self._config.slot_count}."
            )
        if starting_balance < 0:
            raise ValueError(f"Starting balance cannot be negative, got {starting_balance}.")

        self._bus = bus
        self._animator = animator
        self._board = board
        self._generator = generator or OutcomeGenerator(self._config.symbols)
        self._evaluator = evaluator or PayoutEvaluator()
        self._banner = banner or ResultBanner()
        self._on_win = on_win

        self._balance = float(starting_balance)
        self._phase = RoundPhase.IDLE
        self._round_id = 0
        self._wave = WaveSlot()
        self._results: list[RoundResult] = []
        self._last_settled_id = 0

    # -- Read-only state -------------------------------------------------

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def is_busy(self) -> bool:
        """True while a round is between FADING and PAYING."""
        return self._phase in _BUSY_PHASES

    @property
    def round_id(self) -> int:
        return self._round_id

    @property
    def wave_running(self) -> bool:
        return self._wave.active

    @property
    def board(self) -> SlotBoard:
        return self._board

    @property
    def banner(self) -> ResultBanner:
        return self._banner

    @property
    def results(self) -> tuple[RoundResult, ...]:
        """Settled rounds of this session, oldest first."""
        return tuple(self._results)

    @property
    def last_result(self) -> RoundResult | None:
        return self._results[-1] if self._results else None

    def publish_initial_state(self) -> None:
        """Announce the starting balance to freshly registered subscribers."""
        self._bus.publish_balance(self._balance)

    # -- Round flow ------------------------------------------------------

    def submit_bet(self, bet_amount: float) -> None:
        """Start a round.

        ``bet_amount`` must already be a finite positive number; the caller
        validates user input. Completion is signalled on the bus.
        """
        if self.is_busy:
            logger.info(
                "Bet of %.2f refused: round %d is %s",
                bet_amount, self._round_id, self._phase.value,
            )
            self._bus.publish_log(LogKind.INFO, ROUND_IN_PROGRESS)
            return

        self._round_id += 1
        round_id = self._round_id

        self._stop_wave(round_id)
        self._animator.cancel()
        self._board.reset_highlights()
        self._banner.reset()

        if self._board.has_symbols:
            self._phase = RoundPhase.FADING
            self._bus.publish_round_event(RoundEvent.FADE_STARTED, round_id)
            self._animator.fade_out(self._board).add_callback(
                lambda: self._after_fade(round_id, bet_amount)
            )
        else:
            self._validate(round_id, bet_amount)

    def _after_fade(self, round_id: int, bet_amount: float) -> None:
        if round_id != self._round_id:
            return
        self._bus.publish_round_event(RoundEvent.FADE_COMPLETED, round_id)
        self._validate(round_id, bet_amount)

    def _validate(self, round_id: int, bet_amount: float) -> None:
        self._phase = RoundPhase.VALIDATING
        if bet_amount > self._balance:
            logger.info(
                "Round %d rejected: bet %.2f exceeds balance %.2f",
                round_id, bet_amount, self._balance,
            )
            self._bus.publish_log(LogKind.ERROR, INSUFFICIENT_BALANCE)
            self._phase = RoundPhase.IDLE
            return

        self._balance -= bet_amount
        self._bus.publish_balance(self._balance)
        self._bus.publish_bet_state(bet_amount)

        outcome = self._generator.generate(self._config.slot_count)
        logger.info(
            "Round %d: bet %.2f, outcome %s",
            round_id, bet_amount, [s.value for s in outcome],
        )
        self._reveal(round_id, outcome, bet_amount)

    def _reveal(self, round_id: int, outcome: Outcome, bet_amount: float) -> None:
        self._phase = RoundPhase.REVEALING
        self._bus.publish_round_event(
            RoundEvent.ROUND_STARTED,
            round_id,
            data={"bet_amount": bet_amount, "symbols": [s.value for s in outcome]},
        )

        done = self._animator.reveal(
            self._board,
            outcome,
            on_slot_started=lambda i: self._bus.publish_round_event(
                RoundEvent.SPAWN_STARTED, round_id, slot_index=i
            ),
            on_slot_revealed=lambda i: self._bus.publish_round_event(
                RoundEvent.SPAWN_COMPLETED, round_id, slot_index=i
            ),
        )
        done.add_callback(lambda: self._settle(round_id, outcome, bet_amount))

    def _settle(self, round_id: int, outcome: Outcome, bet_amount: float) -> None:
        if round_id != self._round_id:
            return
        self._bus.publish_round_event(RoundEvent.REVEAL_COMPLETED, round_id)

        self._phase = RoundPhase.EVALUATING
        result = self._evaluator.evaluate(outcome, bet_amount)

        self._phase = RoundPhase.PAYING
        if result.is_win:
            self._balance += result.winnings
            self._bus.publish_balance(self._balance)
            self._bus.publish_log(LogKind.SUCCESS, f"You won {result.winnings:.2f}$")
            self._board.highlight(result.winning_symbols)
            self._fire_win_cue(round_id, result)
            self._animator.animate_result(self._banner, result.winnings, True)
        else:
            self._bus.publish_log(LogKind.ERROR, f"You lost {bet_amount:.2f}$")
            self._animator.animate_result(self._banner, -bet_amount, False)

        self._results.append(result)
        self._last_settled_id = round_id
        logger.info("Round %d settled: %s (balance %.2f)", round_id, result, self._balance)

        self._bus.publish_bet_state(0.0)
        self._bus.publish_round_event(
            RoundEvent.ROUND_SETTLED,
            round_id,
            data={
                "multiplier": result.multiplier,
                "winnings": result.winnings,
                "category": result.category.name,
            },
        )
        self._start_wave(round_id)

    def _fire_win_cue(self, round_id: int, result: RoundResult) -> None:
        if self._on_win is None:
            return
        try:
            self._on_win(result)
        except Exception:
            logger.exception("Win cue failed for round %d", round_id)

    # -- Wave ownership --------------------------------------------------

    def _start_wave(self, round_id: int) -> None:
        self._wave.install(self._animator.start_wave(self._board))
        self._phase = RoundPhase.WAVING
        self._bus.publish_round_event(RoundEvent.WAVE_STARTED, round_id)

    def _stop_wave(self, round_id: int) -> None:
        handle = self._wave.take()
        if handle is None:
            return
        handle.dispose()
        self._bus.publish_round_event(RoundEvent.WAVE_STOPPED, round_id)

    def dispose(self) -> None:
        """Stop every animation of this session. Pending completions become moot."""
        self._round_id += 1
        self._stop_wave(self._round_id)
        self._animator.cancel()
        self._phase = RoundPhase.IDLE

    # -- Presentation ----------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        last = self.last_result
        return SessionSnapshot(
            balance=self._balance,
            phase=self._phase.value,
            round_id=self._round_id,
            wave_running=self.wave_running,
            board=BoardSnapshot.capture(self._board, self._banner),
            last_round=(
                RoundSnapshot.from_result(self._last_settled_id, last)
                if last is not None else None
            ),
        )
