"""UI components for Gem Slots."""

from gem_slots.ui.components.bet_controls import render_bet_controls
from gem_slots.ui.components.slot_board import render_slot_board
from gem_slots.ui.components.status_bar import render_balance, render_snackbar

__all__ = [
    "render_balance",
    "render_bet_controls",
    "render_slot_board",
    "render_snackbar",
]
