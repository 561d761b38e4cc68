"""
Gem Slots - Notification Event Definitions

Log kinds, round lifecycle events and their payloads.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class LogKind(Enum):
    """Severity of a player-facing log message."""

    INFO = auto()
    ERROR = auto()
    SUCCESS = auto()


@dataclass(frozen=True)
class LogEntry:
    """Player-facing message, shown in the snackbar."""

    kind: LogKind
    message: str


class RoundEvent(Enum):
    """Lifecycle signals used to mount and unmount slot visuals."""

    FADE_STARTED = auto()
    FADE_COMPLETED = auto()
    ROUND_STARTED = auto()
    SPAWN_STARTED = auto()
    SPAWN_COMPLETED = auto()
    REVEAL_COMPLETED = auto()
    ROUND_SETTLED = auto()
    WAVE_STARTED = auto()
    WAVE_STOPPED = auto()


@dataclass
class EventPayload:
    """Wrapper for round lifecycle event data."""

    event: RoundEvent
    round_id: int
    slot_index: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Snackbar colour per log kind
LOG_COLORS: dict[LogKind, str] = {
    LogKind.INFO: "grey",
    LogKind.ERROR: "red",
    LogKind.SUCCESS: "green",
}
