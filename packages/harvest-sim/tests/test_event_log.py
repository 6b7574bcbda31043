"""Tests for harvest_sim.events module."""
from harvest_sim import Event, EventLog


class TestEventLog:
    def test_emit_and_len(self):
        log = EventLog()
        log.emit(1, 0.1, 0.4, "status", message="hi")
        assert len(log) == 1

    def test_event_fields(self):
        log = EventLog()
        event = log.emit(3, 0.3, 1.2, "tractor", old="idle", new="approaching")
        assert isinstance(event, Event)
        assert event.tick == 3
        assert event.sim_time == 1.2
        assert event.data == {"old": "idle", "new": "approaching"}

    def test_query_filters(self):
        log = EventLog()
        log.emit(1, 0.0, 0.0, "status")
        log.emit(2, 0.0, 0.0, "tractor")
        log.emit(3, 0.0, 0.0, "status")
        assert [e.tick for e in log.query(type="status")] == [1, 3]
        assert [e.tick for e in log.query(after=1)] == [2, 3]

    def test_last(self):
        log = EventLog()
        assert log.last("status") is None
        log.emit(1, 0.0, 0.0, "status", message="a")
        log.emit(2, 0.0, 0.0, "status", message="b")
        assert log.last("status").data["message"] == "b"

    def test_max_entries_drops_oldest(self):
        log = EventLog(max_entries=2)
        for tick in range(5):
            log.emit(tick, 0.0, 0.0, "status")
        assert len(log) == 2
        assert [e.tick for e in log.query()] == [3, 4]

    def test_clear(self):
        log = EventLog()
        log.emit(1, 0.0, 0.0, "status")
        log.clear()
        assert len(log) == 0


class TestSubscribers:
    def test_handler_receives_matching_events(self):
        log = EventLog()
        seen = []
        log.subscribe("tractor", seen.append)
        log.emit(1, 0.0, 0.0, "status")
        log.emit(2, 0.0, 0.0, "tractor", new="approaching")
        assert [e.tick for e in seen] == [2]

    def test_wildcard_handler(self):
        log = EventLog()
        seen = []
        log.subscribe("*", seen.append)
        log.emit(1, 0.0, 0.0, "status")
        log.emit(2, 0.0, 0.0, "tractor")
        assert len(seen) == 2

    def test_unsubscribe(self):
        log = EventLog()
        seen = []
        log.subscribe("status", seen.append)
        log.unsubscribe("status", seen.append)
        log.emit(1, 0.0, 0.0, "status")
        assert seen == []
