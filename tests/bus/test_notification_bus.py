"""Tests for gem_slots/bus — notification topics and payload types."""

from unittest.mock import MagicMock

import pytest

from gem_slots.bus import EventPayload, LogEntry, LogKind, NotificationBus, RoundEvent
from gem_slots.bus.events import LOG_COLORS


class TestEventTypes:
    def test_log_entry_frozen(self):
        entry = LogEntry(LogKind.INFO, "hi")
        with pytest.raises(AttributeError):
            entry.message = "changed"

    def test_payload_defaults(self):
        payload = EventPayload(event=RoundEvent.ROUND_STARTED, round_id=1)
        assert payload.slot_index is None
        assert payload.data == {}

    def test_payload_data_not_shared(self):
        a = EventPayload(event=RoundEvent.WAVE_STARTED, round_id=1)
        b = EventPayload(event=RoundEvent.WAVE_STARTED, round_id=2)
        a.data["x"] = 1
        assert b.data == {}

    def test_every_log_kind_has_a_colour(self):
        assert set(LOG_COLORS) == set(LogKind)
        assert LOG_COLORS[LogKind.ERROR] == "red"
        assert LOG_COLORS[LogKind.SUCCESS] == "green"


class TestNotificationBus:
    def test_publish_balance(self):
        bus = NotificationBus()
        handler = MagicMock()
        bus.balance_changed.register(handler)
        bus.publish_balance(95.0)
        handler.assert_called_once_with(95.0)

    def test_publish_log(self):
        bus = NotificationBus()
        handler = MagicMock()
        bus.log.register(handler)
        bus.publish_log(LogKind.SUCCESS, "You won 15.00$")
        handler.assert_called_once_with(LogEntry(LogKind.SUCCESS, "You won 15.00$"))

    def test_local_error(self):
        bus = NotificationBus()
        seen = []
        bus.log.register(seen.append)
        bus.local_error("Invalid Input")
        assert seen == [LogEntry(LogKind.ERROR, "Invalid Input")]

    def test_publish_bet_state(self):
        bus = NotificationBus()
        seen = []
        bus.bet_submitted.register(seen.append)
        bus.publish_bet_state(5.0)
        bus.publish_bet_state(0.0)
        assert seen == [5.0, 0.0]

    def test_publish_round_event(self):
        bus = NotificationBus()
        seen = []
        bus.round_events.register(seen.append)
        bus.publish_round_event(RoundEvent.SPAWN_STARTED, 3, slot_index=2)

        assert len(seen) == 1
        assert seen[0].event == RoundEvent.SPAWN_STARTED
        assert seen[0].round_id == 3
        assert seen[0].slot_index == 2
        assert seen[0].data == {}

    def test_topics_are_independent(self):
        bus = NotificationBus()
        log_handler = MagicMock()
        bus.log.register(log_handler)
        bus.publish_balance(1.0)
        bus.publish_bet_state(1.0)
        log_handler.assert_not_called()

    def test_buses_are_independent(self):
        first, second = NotificationBus(), NotificationBus()
        handler = MagicMock()
        first.balance_changed.register(handler)
        second.publish_balance(50.0)
        handler.assert_not_called()
