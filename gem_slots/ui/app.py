"""Gem Slots — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

_RULES = """\
**Goal:** Grow your balance!

**Playing:**
- Enter a bet and press **Bet** — the bet is taken from your balance
- Seven gems drop into the slots one after another
- Matching gems pay a multiple of your bet

**Payouts:**
| Combo | Pays |
|---|---|
| 7 of a kind | 1000x |
| 6 of a kind | 100x |
| 5 of a kind | 50x |
| 4 of a kind | 5x |
| Full house (3 + 2) | 4x |
| 3 of a kind | 3x |
| Three pairs | 3x |
"""


def _render_sidebar_rules() -> None:
    """Show the payout table in the sidebar."""
    with st.sidebar:
        st.divider()
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Gem Slots",
        page_icon="💎",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from gem_slots.config import configure_logging, get_settings
    from gem_slots.ui.themes import load_css, render_sound_controls
    from gem_slots.ui.views.game import render_game_page

    settings = get_settings()
    configure_logging(settings)
    load_css()

    render_sound_controls(enabled=settings.enable_sounds)
    _render_sidebar_rules()

    render_game_page(settings)


if __name__ == "__main__":
    main()
