"""Bet controls — amount field and Bet button."""

from __future__ import annotations

import streamlit as st


def render_bet_controls(bet_in_play: float, disabled: bool = False) -> str | None:
    """Render the bet field and button.

    Args:
        bet_in_play: Amount of the round currently revealing, 0 when idle.
        disabled: Force-disable the button.

    Returns:
        Raw text of the bet field when the button was pressed, else ``None``.
        The caller parses and validates it.
    """
    cols = st.columns([3, 1])
    with cols[0]:
        text = st.text_input(
            "Bet amount",
            value="10",
            key="_bet_text_widget",
            label_visibility="collapsed",
            placeholder="Bet amount",
        )
    with cols[1]:
        label = f"Betting {bet_in_play:.2f}$" if bet_in_play > 0 else "Bet"
        pressed = st.button(
            label,
            key="btn_bet",
            use_container_width=True,
            type="primary",
            disabled=disabled,
        )

    return text if pressed else None
