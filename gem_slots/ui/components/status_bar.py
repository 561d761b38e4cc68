"""Status bar component — balance display and snackbar log."""

from __future__ import annotations

import streamlit as st

from gem_slots.bus.events import LOG_COLORS, LogEntry


def render_balance(balance: float) -> None:
    """Render the player's balance."""
    st.markdown(
        f'<div class="balance">Balance: {balance:.2f}$</div>',
        unsafe_allow_html=True,
    )


def render_snackbar(entry: LogEntry | None, remaining_ms: float = 0.0) -> None:
    """Render the latest log message, coloured by kind.

    The bar hides itself through a CSS animation once ``remaining_ms`` has
    passed, so it disappears even when no further frame is drawn.
    """
    if entry is None:
        st.markdown('<div class="snackbar" style="visibility:hidden;">&nbsp;</div>',
                    unsafe_allow_html=True)
        return
    st.markdown(
        f'<div class="snackbar" style="background-color:{LOG_COLORS[entry.kind]};'
        f'animation-delay:{max(0.0, remaining_ms):.0f}ms;">'
        f"{entry.message}</div>",
        unsafe_allow_html=True,
    )
