# stateerrors/core/logging_layer.py
# Event Log for failure aggregation
# stateerrors v0.1.0
#
# Scope: In-memory, event-sourced record of what the aggregation components
# did with their inputs (added, skipped, appended, dropped). No file IO.
# No global mutable state. No wall-clock timestamps: events are ordered by
# a per-logger sequence counter. All hashes are deterministic.
#
# Canonical import:
#   from stateerrors.core.logging_layer import EventLogger, Event, EventFilter
#
# Components never create a logger themselves. A caller that wants an
# audit trail passes one in; without it nothing is recorded.

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

# ===========================================================================
# SECTION 2 -- CONSTANTS
# ===========================================================================

# Event types emitted by stateerrors components.
EVENT_FAILURE_ADDED: str = "FAILURE_ADDED"
EVENT_NIL_SKIPPED: str = "NIL_SKIPPED"
EVENT_CHAIN_APPENDED: str = "CHAIN_APPENDED"
EVENT_JOIN_OPERAND_DROPPED: str = "JOIN_OPERAND_DROPPED"

# Field separator used inside hash preimage.
_HASH_SEP: str = "|"

# ===========================================================================
# SECTION 3 -- DATACLASSES: Event, EventFilter
# ===========================================================================

@dataclass(frozen=True)
class Event:
    """
    Immutable record of a single aggregation event.

    Fields
    ------
    id    : Deterministic identifier derived from the logger's counter.
    type  : Category string (e.g. FAILURE_ADDED, JOIN_OPERAND_DROPPED).
    data  : Key-value payload. Values are stored as given.
    hash  : SHA-256 hex digest over (id, type, data).
    """
    id: str
    type: str
    data: Dict[str, Any]
    hash: str


@dataclass
class EventFilter:
    """
    Filter specification for EventLogger.query_events().

    Fields
    ------
    event_type : If set, only events whose .type equals this value are returned.
    limit      : If set, at most this many events are returned (oldest first).
    """
    event_type: Optional[str] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 4 -- INTERNAL HELPERS
# ===========================================================================

def _compute_hash(event_id: str, event_type: str, data: Dict[str, Any]) -> str:
    """
    Compute a deterministic SHA-256 hex digest for an event.

    Preimage: event_id + SEP + event_type + SEP + repr(sorted(data.items())).
    Sorting the items makes the digest independent of dict insertion order.
    The preimage is encoded as UTF-8, so non-ASCII messages hash distinctly.
    """
    sorted_items: str = repr(sorted(data.items()))
    preimage: str = event_id + _HASH_SEP + event_type + _HASH_SEP + sorted_items
    return hashlib.sha256(preimage.encode("utf-8")).hexdigest()


def _make_event_id(counter: int) -> str:
    """Format: "EVT-{counter:016d}", zero-padded for lexicographic order."""
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 5 -- EventLogger
# ===========================================================================

class EventLogger:
    """
    Event-sourced logger for the aggregation components.

    Storage
    -------
    Events are held in an instance-level list (_store). No file IO.
    Each EventLogger instance is fully independent.

    Zero lost events
    ----------------
    log_event() raises LoggingError instead of silently discarding an event.
    """

    def __init__(self) -> None:
        self._store: List[Event] = []
        self._counter: int = 0

    # -----------------------------------------------------------------------
    # SECTION 5.1 -- log_event
    # -----------------------------------------------------------------------

    def log_event(self, event_type: str, data: Dict[str, Any]) -> str:
        """
        Record one event. Return the assigned event ID.

        Raises
        ------
        LoggingError : If event_type is empty or data is not a dict.
        """
        if not isinstance(event_type, str) or not event_type:
            raise LoggingError("event_type must be a non-empty string")
        if not isinstance(data, dict):
            raise LoggingError(
                "data must be a dict; got: {}".format(type(data))
            )

        self._counter += 1
        event_id: str = _make_event_id(self._counter)
        payload: Dict[str, Any] = dict(data)
        event = Event(
            id=event_id,
            type=event_type,
            data=payload,
            hash=_compute_hash(event_id, event_type, payload),
        )
        self._store.append(event)
        return event_id

    # -----------------------------------------------------------------------
    # SECTION 5.2 -- query_events
    # -----------------------------------------------------------------------

    def query_events(self, filter: EventFilter) -> List[Event]:
        """
        Return events matching the filter, in insertion order.

        event_type equality is applied first, then limit truncation.

        Raises
        ------
        LoggingError : If filter is None.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results: List[Event] = [
            event for event in self._store
            if filter.event_type is None or event.type == filter.event_type
        ]
        if filter.limit is not None:
            results = results[: filter.limit]
        return results

    # -----------------------------------------------------------------------
    # SECTION 5.3 -- get_event_stream
    # -----------------------------------------------------------------------

    def get_event_stream(self, start_index: int = 0) -> Iterator[Event]:
        """
        Yield events one by one in insertion order, skipping the first
        start_index events.

        Raises
        ------
        LoggingError : If start_index is not a non-negative int.
        """
        if not isinstance(start_index, int) or isinstance(start_index, bool):
            raise LoggingError(
                "start_index must be an int; got: {}".format(type(start_index))
            )
        if start_index < 0:
            raise LoggingError(
                "start_index must be >= 0; got: {}".format(start_index)
            )
        for event in self._store[start_index:]:
            yield event

    # -----------------------------------------------------------------------
    # SECTION 5.4 -- event_count
    # -----------------------------------------------------------------------

    def event_count(self) -> int:
        """Return the total number of events currently stored."""
        return len(self._store)


# ===========================================================================
# SECTION 6 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by EventLogger when an invariant is violated.

    Never silently swallowed: callers of log_event() either handle it or
    let it propagate.
    """
