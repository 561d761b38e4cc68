"""
Gem Slots - Event Emitter

Minimal synchronous publish/subscribe channel for a single topic.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

EventHandler = Callable[[T], None]


class EventEmitter(Generic[T]):
    """Delivers each emitted value to every handler, in registration order.

    Delivery happens inside ``emit``; nothing is queued. A handler that
    raises is logged and the remaining handlers still run.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._handlers: list[EventHandler[T]] = []

    def register(self, handler: EventHandler[T]) -> None:
        self._handlers.append(handler)

    def unregister(self, handler: EventHandler[T]) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        self._handlers = [h for h in self._handlers if h is not handler]

    def emit(self, data: T) -> None:
        for handler in list(self._handlers):
            try:
                handler(data)
            except Exception:
                logger.exception("Handler %r failed on topic %s", handler, self.name or "?")

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
