"""
Gem Slots - Notification Bus

Connects the round state machine to the presentation layer. One bus belongs
to one game session and is injected into the machine, so independent
sessions never see each other's events.
"""

from __future__ import annotations

import logging
from typing import Any

from gem_slots.bus.emitter import EventEmitter
from gem_slots.bus.events import EventPayload, LogEntry, LogKind, RoundEvent

logger = logging.getLogger(__name__)


class NotificationBus:
    """Topics published by a game session.

    Topics:
        balance_changed: authoritative balance after every change
        log: player-facing messages
        bet_submitted: amount currently in play, 0 once the round settles
        round_events: lifecycle signals for mounting slot visuals
    """

    def __init__(self) -> None:
        self.balance_changed: EventEmitter[float] = EventEmitter("balance_changed")
        self.log: EventEmitter[LogEntry] = EventEmitter("log")
        self.bet_submitted: EventEmitter[float] = EventEmitter("bet_submitted")
        self.round_events: EventEmitter[EventPayload] = EventEmitter("round_events")

    def publish_balance(self, balance: float) -> None:
        self.balance_changed.emit(balance)

    def publish_log(self, kind: LogKind, message: str) -> None:
        logger.debug("log[%s] %s", kind.name, message)
        self.log.emit(LogEntry(kind=kind, message=message))

    def publish_bet_state(self, amount: float) -> None:
        self.bet_submitted.emit(amount)

    def publish_round_event(
        self,
        event: RoundEvent,
        round_id: int,
        slot_index: int | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.round_events.emit(
            EventPayload(
                event=event,
                round_id=round_id,
                slot_index=slot_index,
                data=data or {},
            )
        )

    def local_error(self, message: str) -> None:
        """Report an error raised on the presentation side (e.g. bad input)."""
        self.publish_log(LogKind.ERROR, message)
