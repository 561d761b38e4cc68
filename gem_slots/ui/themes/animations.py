"""CSS injection and HTML helpers for the gem theme."""

from pathlib import Path

import streamlit as st

from gem_slots.session.models import BoardSnapshot


def load_css() -> None:
    """Inject the gem CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "gems.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_result_banner(board: BoardSnapshot) -> None:
    """Render the win/loss amount, faded in by the result animation."""
    if not board.banner_text:
        st.markdown('<div class="result-banner"></div>', unsafe_allow_html=True)
        return
    outcome_class = "win" if board.banner_is_win else "loss"
    st.markdown(
        f'<div class="result-banner {outcome_class}" '
        f'style="opacity:{board.banner_alpha:.3f};">{board.banner_text}</div>',
        unsafe_allow_html=True,
    )
