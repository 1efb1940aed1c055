import hashlib

import pytest

from stateerrors.core.logging_layer import (
    EVENT_FAILURE_ADDED,
    EVENT_NIL_SKIPPED,
    Event,
    EventFilter,
    EventLogger,
    LoggingError,
)


@pytest.fixture
def logger() -> EventLogger:
    log = EventLogger()
    log.log_event(EVENT_FAILURE_ADDED, {"severity": "degraded", "message": "a"})
    log.log_event(EVENT_NIL_SKIPPED, {"position": "failure_lists[0][1]"})
    log.log_event(EVENT_FAILURE_ADDED, {"severity": "unavailable", "message": "b"})
    return log


class TestLogEvent:
    def test_returns_sequential_ids(self):
        log = EventLogger()
        assert log.log_event("X", {}) == "EVT-0000000000000001"
        assert log.log_event("X", {}) == "EVT-0000000000000002"

    def test_event_count(self, logger):
        assert logger.event_count() == 3

    def test_empty_type_raises(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("", {})

    def test_non_dict_data_raises(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("X", ["not", "a", "dict"])  # type: ignore[arg-type]

    def test_failed_log_does_not_advance_counter(self):
        log = EventLogger()
        with pytest.raises(LoggingError):
            log.log_event("", {})
        assert log.log_event("X", {}) == "EVT-0000000000000001"

    def test_data_is_copied(self):
        log = EventLogger()
        data = {"k": 1}
        log.log_event("X", data)
        data["k"] = 2
        assert log.query_events(EventFilter())[0].data == {"k": 1}

    def test_hash_is_deterministic(self):
        a = EventLogger()
        b = EventLogger()
        a.log_event("X", {"b": 2, "a": 1})
        b.log_event("X", {"a": 1, "b": 2})
        assert a.query_events(EventFilter())[0].hash == b.query_events(EventFilter())[0].hash

    def test_hash_preimage(self):
        log = EventLogger()
        log.log_event("X", {"a": 1})
        expected = hashlib.sha256(
            "EVT-0000000000000001|X|[('a', 1)]".encode("utf-8")
        ).hexdigest()
        assert log.query_events(EventFilter())[0].hash == expected

    def test_non_ascii_messages_hash_distinctly(self):
        a = EventLogger()
        b = EventLogger()
        a.log_event("X", {"message": "d\u00e9bit"})
        b.log_event("X", {"message": "d\u00e8bit"})
        assert a.query_events(EventFilter())[0].hash != b.query_events(EventFilter())[0].hash

    def test_non_ascii_preimage_is_utf8(self):
        log = EventLogger()
        log.log_event("X", {"m": "\u00fc"})
        expected = hashlib.sha256(
            "EVT-0000000000000001|X|[('m', '\u00fc')]".encode("utf-8")
        ).hexdigest()
        assert log.query_events(EventFilter())[0].hash == expected


class TestQueryEvents:
    def test_no_filter_returns_all_in_order(self, logger):
        events = logger.query_events(EventFilter())
        assert [e.id for e in events] == [
            "EVT-0000000000000001",
            "EVT-0000000000000002",
            "EVT-0000000000000003",
        ]

    def test_type_filter(self, logger):
        events = logger.query_events(EventFilter(event_type=EVENT_FAILURE_ADDED))
        assert [e.data["message"] for e in events] == ["a", "b"]

    def test_limit(self, logger):
        assert len(logger.query_events(EventFilter(limit=1))) == 1

    def test_none_filter_raises(self, logger):
        with pytest.raises(LoggingError):
            logger.query_events(None)  # type: ignore[arg-type]

    def test_returns_event_instances(self, logger):
        assert all(isinstance(e, Event) for e in logger.query_events(EventFilter()))


class TestEventStream:
    def test_stream_from_start(self, logger):
        assert len(list(logger.get_event_stream())) == 3

    def test_stream_skips_prefix(self, logger):
        events = list(logger.get_event_stream(2))
        assert [e.id for e in events] == ["EVT-0000000000000003"]

    def test_negative_start_raises(self, logger):
        with pytest.raises(LoggingError):
            list(logger.get_event_stream(-1))

    def test_bool_start_raises(self, logger):
        with pytest.raises(LoggingError):
            list(logger.get_event_stream(True))
