"""Tests for gem_slots/bus/emitter.py — synchronous single-topic delivery."""

import logging
from unittest.mock import MagicMock

from gem_slots.bus.emitter import EventEmitter


class TestEventEmitter:
    def test_delivers_in_registration_order(self):
        emitter = EventEmitter("t")
        seen = []
        emitter.register(lambda v: seen.append(("a", v)))
        emitter.register(lambda v: seen.append(("b", v)))

        emitter.emit(3)

        assert seen == [("a", 3), ("b", 3)]

    def test_delivery_is_synchronous(self):
        emitter = EventEmitter()
        handler = MagicMock()
        emitter.register(handler)
        emitter.emit("x")
        handler.assert_called_once_with("x")

    def test_emit_without_handlers(self):
        EventEmitter().emit(1)  # should not raise

    def test_unregister(self):
        emitter = EventEmitter()
        handler = MagicMock()
        emitter.register(handler)
        emitter.unregister(handler)
        emitter.emit(1)
        handler.assert_not_called()
        assert emitter.handler_count == 0

    def test_unregister_unknown_is_noop(self):
        emitter = EventEmitter()
        emitter.register(MagicMock())
        emitter.unregister(lambda v: None)  # should not raise
        assert emitter.handler_count == 1

    def test_unregister_during_emit(self):
        """Handlers removed mid-delivery still receive the current value."""
        emitter = EventEmitter()
        second = MagicMock()

        def first(value):
            emitter.unregister(second)

        emitter.register(first)
        emitter.register(second)
        emitter.emit(1)
        emitter.emit(2)

        second.assert_called_once_with(1)

    def test_failing_handler_is_logged(self, caplog):
        emitter = EventEmitter("balance_changed")
        after = MagicMock()

        def broken(value):
            raise RuntimeError("boom")

        emitter.register(broken)
        emitter.register(after)

        with caplog.at_level(logging.ERROR, logger="gem_slots.bus.emitter"):
            emitter.emit(5)

        after.assert_called_once_with(5)
        assert "balance_changed" in caplog.text
        assert "boom" in caplog.text
