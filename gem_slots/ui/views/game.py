"""Game page — balance, bet controls, slot board and the frame loop."""

from __future__ import annotations

import logging
import time

import streamlit as st

from gem_slots.bus.events import LogEntry
from gem_slots.config.settings import Settings
from gem_slots.engine.validators import parse_bet_input
from gem_slots.session.game_session import GameSession
from gem_slots.ui.components.bet_controls import render_bet_controls
from gem_slots.ui.components.slot_board import render_slot_board
from gem_slots.ui.components.status_bar import render_balance, render_snackbar
from gem_slots.ui.themes.animations import render_result_banner
from gem_slots.ui.themes.sounds import has_pending_sfx, play_sfx, render_audio_system

logger = logging.getLogger(__name__)

# Snackbar messages stay visible this long
_SNACK_MS = 2000.0


def _on_log(entry: LogEntry) -> None:
    st.session_state["_snack"] = (entry, time.monotonic() * 1000.0)


def _on_balance(balance: float) -> None:
    st.session_state["_balance"] = balance


def _on_bet_state(amount: float) -> None:
    st.session_state["_bet_in_play"] = amount


def _get_session(settings: Settings) -> GameSession:
    """Create the player's game session on first visit."""
    ss = st.session_state
    session = ss.get("game_session")
    if session is None:
        session = GameSession.from_settings(
            settings,
            on_win=lambda result: play_sfx("win"),
        )
        session.bus.log.register(_on_log)
        session.bus.balance_changed.register(_on_balance)
        session.bus.bet_submitted.register(_on_bet_state)
        session.machine.publish_initial_state()
        ss["game_session"] = session
        logger.info("New game session with balance %.2f", session.balance)
    return session


def _current_snack() -> tuple[LogEntry | None, float]:
    """Latest log entry still inside its display window, and the ms it has left."""
    snack = st.session_state.get("_snack")
    if snack is None:
        return None, 0.0
    entry, shown_at = snack
    remaining = _SNACK_MS - (time.monotonic() * 1000.0 - shown_at)
    if remaining <= 0:
        return None, 0.0
    return entry, remaining


def _render_frame(slots: dict, session: GameSession) -> None:
    snapshot = session.snapshot()
    with slots["balance"].container():
        render_balance(st.session_state.get("_balance", snapshot.balance))
    with slots["banner"].container():
        render_result_banner(snapshot.board)
    with slots["board"].container():
        render_slot_board(snapshot.board)
    with slots["snack"].container():
        render_snackbar(*_current_snack())
    if has_pending_sfx():
        with slots["audio"].container():
            render_audio_system()


def _play_frames(session: GameSession, settings: Settings) -> None:
    """Tick the session until the round settles, then show a bit of the wave.

    With no round in flight a single static frame is drawn and the rerun
    returns immediately.
    """
    slots = {name: st.empty() for name in ("balance", "banner", "board", "snack", "audio")}

    if not session.is_busy:
        session.tick()
        _render_frame(slots, session)
        return

    frame_s = settings.frame_interval_ms / 1000.0
    wave_until: float | None = None

    while True:
        session.tick()
        _render_frame(slots, session)

        if not session.is_busy:
            now = session.clock.now()
            if wave_until is None:
                wave_until = now + settings.wave_preview_ms
            if now >= wave_until:
                break
        time.sleep(frame_s)


def render_game_page(settings: Settings) -> None:
    """Render the main game page."""
    session = _get_session(settings)

    st.title("Gem Slots")

    raw_bet = render_bet_controls(
        st.session_state.get("_bet_in_play", 0.0),
        disabled=session.is_busy,
    )
    if raw_bet is not None:
        try:
            amount = parse_bet_input(raw_bet)
        except ValueError as exc:
            logger.debug("Rejected bet input %r: %s", raw_bet, exc)
            session.bus.local_error("Invalid Input")
        else:
            session.submit_bet(amount)

    _play_frames(session, settings)
