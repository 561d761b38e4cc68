"""
Gem Slots Session.

Round state machine, the session context that wires it up, and the
snapshots handed to the presentation layer.
"""

from gem_slots.session.game_session import GameSession
from gem_slots.session.models import (
    BoardSnapshot,
    RoundSnapshot,
    SessionSnapshot,
    SlotSnapshot,
)
from gem_slots.session.round_machine import RoundPhase, RoundStateMachine

__all__ = [
    "BoardSnapshot",
    "GameSession",
    "RoundPhase",
    "RoundSnapshot",
    "RoundStateMachine",
    "SessionSnapshot",
    "SlotSnapshot",
]
