"""
Gem Slots - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from gem_slots.animation.reveal import AnimationTiming
from gem_slots.engine.base import GameConfig, Symbol

logger = logging.getLogger(__name__)

_SECRET_KEYS = (
    "STARTING_BALANCE",
    "SLOT_COUNT",
    "SYMBOL_COUNT",
    "RNG_SEED",
    "DEBUG",
    "LOG_LEVEL",
    "ENABLE_SOUNDS",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        logger.debug("Streamlit secrets unavailable", exc_info=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    starting_balance: float = Field(default=100.0, ge=0)
    slot_count: int = Field(default=7, ge=1)
    symbol_count: int = Field(default=len(Symbol), ge=1, le=len(Symbol))
    rng_seed: int | None = None

    # Animation (milliseconds / board units)
    spawn_delay_ms: float = Field(default=500.0, ge=0)
    spawn_duration_ms: float = Field(default=500.0, ge=0)
    spawn_drop: float = 50.0
    fade_duration_ms: float = Field(default=500.0, ge=0)
    result_duration_ms: float = Field(default=1000.0, ge=0)
    wave_period_ms: float = Field(default=500.0, gt=0)
    wave_amplitude: float = 10.0

    # Presentation frame loop
    frame_interval_ms: float = Field(default=16.0, gt=0)
    wave_preview_ms: float = Field(default=3000.0, ge=0)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Audio
    enable_sounds: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_config(self) -> GameConfig:
        """Board size and gem pool derived from the settings."""
        return GameConfig(
            slot_count=self.slot_count,
            symbols=tuple(Symbol)[: self.symbol_count],
        )

    def animation_timing(self) -> AnimationTiming:
        return AnimationTiming(
            spawn_delay_ms=self.spawn_delay_ms,
            spawn_duration_ms=self.spawn_duration_ms,
            spawn_drop=self.spawn_drop,
            fade_duration_ms=self.fade_duration_ms,
            result_duration_ms=self.result_duration_ms,
            wave_period_ms=self.wave_period_ms,
            wave_amplitude=self.wave_amplitude,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
