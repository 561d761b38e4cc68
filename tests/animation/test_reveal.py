"""
Gem Slots - Reveal Animator Tests

Drives the animator with a manual clock and checks stagger, completion,
fade-out, the result banner and the idle wave.
"""

import pytest

from gem_slots.animation.board import ResultBanner, SlotBoard
from gem_slots.animation.reveal import AnimationTiming, RevealAnimator
from gem_slots.engine.base import Outcome, Symbol

A, B, C, D, E, F, G = tuple(Symbol)

OUTCOME = Outcome(symbols=(A, B, C, D, E, F, G))


@pytest.fixture
def animator(scheduler):
    return RevealAnimator(scheduler)


@pytest.fixture
def board():
    return SlotBoard(7)


def _run(clock, scheduler, until, step=50):
    scheduler.tick()
    while clock.now() < until:
        clock.advance(step)
        scheduler.tick()


# === Reveal ===


class TestReveal:
    """Tests for RevealAnimator.reveal()."""

    def test_slots_start_staggered(self, manual_clock, scheduler, animator, board):
        started = []
        animator.reveal(board, OUTCOME, on_slot_started=started.append)

        scheduler.tick()
        assert started == [0]

        manual_clock.advance(499)
        scheduler.tick()
        assert started == [0]

        manual_clock.advance(1)
        scheduler.tick()
        assert started == [0, 1]

        _run(manual_clock, scheduler, 3000)
        assert started == list(range(7))

    def test_spawn_tween_drops_and_fades_in(self, manual_clock, scheduler, animator, board):
        animator.reveal(board, OUTCOME)
        scheduler.tick()
        assert board[0].alpha == 0.0
        assert board[0].offset_y == -50

        manual_clock.advance(250)
        scheduler.tick()
        assert board[0].alpha == pytest.approx(0.5)
        assert board[0].offset_y == pytest.approx(-25)

        manual_clock.advance(250)
        scheduler.tick()
        assert board[0].alpha == 1.0
        assert board[0].offset_y == 0.0

    def test_completes_after_last_slot(self, manual_clock, scheduler, animator, board):
        revealed = []
        done = animator.reveal(board, OUTCOME, on_slot_revealed=revealed.append)

        _run(manual_clock, scheduler, 3450)
        assert done.done is False
        assert revealed == list(range(6))

        _run(manual_clock, scheduler, 3500)
        assert done.done is True
        assert revealed == list(range(7))
        assert all(slot.alpha == 1.0 for slot in board)
        assert animator.in_flight is False

    def test_late_frame_starts_tween_at_fire_time(self, manual_clock, scheduler, animator, board):
        done = animator.reveal(board, OUTCOME)

        scheduler.tick(now=10_000)
        assert done.done is False
        assert all(slot.alpha == 0.0 for slot in board)

        scheduler.tick(now=10_500)
        assert done.done is True

    def test_revealed_callback_before_completion(self, manual_clock, scheduler, animator, board):
        order = []
        done = animator.reveal(
            board, OUTCOME, on_slot_revealed=lambda i: order.append(("slot", i))
        )
        done.add_callback(lambda: order.append(("all", None)))
        _run(manual_clock, scheduler, 4000)
        assert order[-2:] == [("slot", 6), ("all", None)]

    def test_cancel_stops_pending_reveals(self, manual_clock, scheduler, animator, board):
        started = []
        done = animator.reveal(board, OUTCOME, on_slot_started=started.append)
        _run(manual_clock, scheduler, 1000)
        assert started == [0, 1, 2]

        animator.cancel()
        _run(manual_clock, scheduler, 5000)

        assert started == [0, 1, 2]
        assert done.done is False
        assert animator.in_flight is False

    def test_custom_timing(self, manual_clock, scheduler, board):
        timing = AnimationTiming(spawn_delay_ms=100, spawn_duration_ms=100)
        done = RevealAnimator(scheduler, timing).reveal(board, OUTCOME)
        _run(manual_clock, scheduler, 700, step=10)
        assert done.done is True


# === Fade Out ===


class TestFadeOut:
    """Tests for RevealAnimator.fade_out()."""

    def test_fades_then_unmounts(self, manual_clock, scheduler, animator, board):
        board.mount(OUTCOME, drop=0)
        for slot in board:
            slot.alpha = 1.0

        done = animator.fade_out(board)
        scheduler.tick()
        manual_clock.advance(250)
        scheduler.tick()
        assert board[3].alpha == pytest.approx(0.5)
        assert board.has_symbols is True

        manual_clock.advance(250)
        scheduler.tick()
        assert done.done is True
        assert board.has_symbols is False


# === Result Banner ===


class TestAnimateResult:
    """Tests for RevealAnimator.animate_result()."""

    def test_counts_up_and_fades_in(self, manual_clock, scheduler, animator):
        banner = ResultBanner()
        done = animator.animate_result(banner, 20, True)
        assert banner.alpha == 0.0

        scheduler.tick()
        manual_clock.advance(500)
        scheduler.tick()
        assert banner.amount == pytest.approx(10)
        assert banner.alpha == pytest.approx(0.5)

        manual_clock.advance(500)
        scheduler.tick()
        assert done.done is True
        assert banner.text == "+20.00$"

    def test_loss(self, manual_clock, scheduler, animator):
        banner = ResultBanner()
        animator.animate_result(banner, -5, False)
        _run(manual_clock, scheduler, 1000)
        assert banner.text == "-5.00$"
        assert banner.is_win is False


# === Wave ===


class TestWave:
    """Tests for RevealAnimator.start_wave()."""

    def test_offsets_stay_within_amplitude(self, manual_clock, scheduler, animator, board):
        board.mount(OUTCOME, drop=0)
        handle = animator.start_wave(board)

        for _ in range(100):
            manual_clock.advance(37)
            scheduler.tick()
            assert all(abs(slot.offset_y) <= 10.0 for slot in board)

        assert handle.active is True

    def test_slots_are_phase_shifted(self, manual_clock, scheduler, animator, board):
        board.mount(OUTCOME, drop=0)
        animator.start_wave(board)
        scheduler.tick()
        offsets = [slot.offset_y for slot in board]
        assert len(set(offsets)) == len(offsets)

    def test_empty_slots_do_not_move(self, manual_clock, scheduler, animator, board):
        animator.start_wave(board)
        manual_clock.advance(300)
        scheduler.tick()
        assert all(slot.offset_y == 0.0 for slot in board)

    def test_dispose_freezes_offsets(self, manual_clock, scheduler, animator, board):
        board.mount(OUTCOME, drop=0)
        handle = animator.start_wave(board)
        manual_clock.advance(100)
        scheduler.tick()
        frozen = [slot.offset_y for slot in board]

        handle.dispose()
        manual_clock.advance(400)
        scheduler.tick()

        assert [slot.offset_y for slot in board] == frozen
        assert scheduler.is_idle is True

    def test_animator_cancel_leaves_wave_running(self, manual_clock, scheduler, animator, board):
        board.mount(OUTCOME, drop=0)
        handle = animator.start_wave(board)
        animator.cancel()
        scheduler.tick()
        assert handle.active is True
