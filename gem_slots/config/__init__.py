"""
Gem Slots Configuration.

Environment variables, settings, and logging configuration.
"""

from gem_slots.config.log_setup import configure_logging
from gem_slots.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
