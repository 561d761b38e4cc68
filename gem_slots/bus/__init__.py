"""
Gem Slots Notification Bus.

Synchronous publish/subscribe channels between the round engine and the
presentation layer.
"""

from gem_slots.bus.emitter import EventEmitter
from gem_slots.bus.events import EventPayload, LogEntry, LogKind, RoundEvent
from gem_slots.bus.notification_bus import NotificationBus

__all__ = [
    "EventEmitter",
    "EventPayload",
    "LogEntry",
    "LogKind",
    "NotificationBus",
    "RoundEvent",
]
