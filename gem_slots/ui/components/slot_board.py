"""Slot board component — renders the row of slots and their gems."""

from __future__ import annotations

import streamlit as st

from gem_slots.session.models import BoardSnapshot


def _tint_css(tint: int) -> str:
    return f"#{tint:06x}"


def render_slot_board(board: BoardSnapshot) -> None:
    """Render every slot with its gem at the animated offset and opacity.

    Args:
        board: Snapshot of the board for the current frame.
    """
    html_parts = ['<div class="slot-row">']
    for slot in board.slots:
        classes = ["slot"]
        style = ""
        if slot.highlighted:
            classes.append("highlighted")
            style = f'border-color:{_tint_css(slot.tint)};color:{_tint_css(slot.tint)};'

        gem_html = ""
        if slot.symbol is not None:
            gem_html = (
                f'<div class="gem {slot.symbol}" '
                f'style="opacity:{slot.alpha:.3f};'
                f'transform:translateY({slot.offset_y:.1f}px);"></div>'
            )
        html_parts.append(
            f'<div class="{" ".join(classes)}" style="{style}">{gem_html}</div>'
        )
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)
