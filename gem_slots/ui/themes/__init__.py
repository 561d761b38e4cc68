"""Gem theme for Gem Slots."""

from gem_slots.ui.themes.animations import load_css, render_result_banner
from gem_slots.ui.themes.sounds import (
    has_pending_sfx,
    play_sfx,
    render_audio_system,
    render_sound_controls,
)

__all__ = [
    "has_pending_sfx",
    "load_css",
    "play_sfx",
    "render_audio_system",
    "render_result_banner",
    "render_sound_controls",
]
