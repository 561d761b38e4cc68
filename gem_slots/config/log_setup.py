"""
Gem Slots - Logging Configuration

Modules log through ``logging.getLogger(__name__)``; this sets the root
handler and level once per process from the settings.
"""

import logging

from gem_slots.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def configure_logging(settings: Settings) -> None:
    """Configure the root logger. Later calls only adjust the level."""
    global _configured

    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    if not _configured:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _configured = True
    logging.getLogger("gem_slots").setLevel(level)
