"""Page renderers for Gem Slots."""

from gem_slots.ui.views.game import render_game_page

__all__ = ["render_game_page"]
