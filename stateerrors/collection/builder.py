# =============================================================================
# stateerrors v0.1.0 -- COLLECTION VARIANT
# File:   stateerrors/collection/builder.py
# =============================================================================
#
# SCOPE
# -----
# A flat, ordered sequence of discrete failures and the builder that
# accumulates it:
#
#   FailureList     -- Tuple[StateFailure, ...]; None and () both mean
#                      "no failure".
#   FailureBuilder  -- fluent accumulator; O(1) amortised append.
#   render_list()   -- one rendered line per failure.
#
# OWNERSHIP
# ---------
# The builder accumulates into a private list. result() hands out a tuple
# snapshot, so a FailureList can never be mutated by a second owner and
# later builder calls never change a snapshot already returned.
#
# NONE HANDLING
# -------------
#   - None / empty list arguments to append_lists() are skipped.
#   - None ELEMENTS inside a non-empty list are filtered out and, when an
#     EventLogger is attached, recorded as NIL_SKIPPED events.
#   - Any other non-StateFailure element raises FailureValidationError.
#     The whole call is validated before anything is appended, so a
#     rejected call leaves the accumulator unchanged.
#
# ORDERING
# --------
# Insertion order is preserved. Duplicates are allowed. Nothing reorders.
# =============================================================================

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from stateerrors.core.domain import Severity, StateFailure
from stateerrors.core.exceptions import FailureValidationError
from stateerrors.core.logging_layer import (
    EVENT_FAILURE_ADDED,
    EVENT_NIL_SKIPPED,
    EventLogger,
)
from stateerrors.utils.constants import REPORT_LINE_TERMINATOR


FailureList = Tuple[StateFailure, ...]


# =============================================================================
# SECTION 1 -- FAILURE BUILDER
# =============================================================================

class FailureBuilder:
    """
    Accumulates StateFailure values into a FailureList.

    Every mutating method returns the builder, so calls chain:

        failures = (
            FailureBuilder()
            .add_degraded("multiple")
            .add_degraded("another error")
            .add_unavailable("for some reason")
            .result()
        )

    A builder is owned by the call path that created it and is not meant
    to be shared between callers.
    """

    def __init__(self, logger: Optional[EventLogger] = None) -> None:
        self._failures: List[StateFailure] = []
        self._logger: Optional[EventLogger] = logger

    def __len__(self) -> int:
        return len(self._failures)

    def __repr__(self) -> str:
        return "FailureBuilder(failures=" + repr(self._failures) + ")"

    # -------------------------------------------------------------------------
    # Single failures
    # -------------------------------------------------------------------------

    def add_degraded(self, message: str) -> "FailureBuilder":
        return self._add_failure(Severity.DEGRADED, message)

    def add_unavailable(self, message: str) -> "FailureBuilder":
        return self._add_failure(Severity.UNAVAILABLE, message)

    def add_if_present(self, error: Any, severity: Severity) -> "FailureBuilder":
        """
        Record error as a failure of the given severity, unless it is None.

        The failure message is str(error). Any object is accepted; in
        practice it is an exception returned or caught by a check.
        """
        if error is None:
            return self
        return self._add_failure(severity, str(error))

    def add(self, *failures: Optional[StateFailure]) -> "FailureBuilder":
        """Append already-constructed failures verbatim, in order."""
        return self.append_lists(failures)

    # -------------------------------------------------------------------------
    # Whole lists
    # -------------------------------------------------------------------------

    def append_lists(
        self,
        *failure_lists: Optional[Sequence[Optional[StateFailure]]],
    ) -> "FailureBuilder":
        """
        Append every failure of every list, in argument order.

        None and empty lists are skipped. Zero arguments is a no-op.
        None elements are filtered; other non-StateFailure elements raise.

        Raises:
            FailureValidationError: if an argument is a bare StateFailure
                instead of a sequence, or an element is not a StateFailure.
        """
        staged: List[StateFailure] = []
        skipped: List[str] = []

        for list_index, failures in enumerate(failure_lists):
            if failures is None:
                continue
            if isinstance(failures, StateFailure):
                raise FailureValidationError(
                    field_name="failure_lists[" + str(list_index) + "]",
                    value=failures,
                    constraint="must be a sequence of StateFailure",
                )
            for position, failure in enumerate(failures):
                field_name = (
                    "failure_lists[" + str(list_index) + "]["
                    + str(position) + "]"
                )
                if failure is None:
                    skipped.append(field_name)
                    continue
                if not isinstance(failure, StateFailure):
                    raise FailureValidationError(
                        field_name=field_name,
                        value=failure,
                        constraint="must be a StateFailure or None",
                    )
                staged.append(failure)

        for field_name in skipped:
            self._log(EVENT_NIL_SKIPPED, {"position": field_name})
        for failure in staged:
            self._failures.append(failure)
            self._log_added(failure)
        return self

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def result(self) -> FailureList:
        """
        Return the accumulated failures as an immutable snapshot.

        Returns () when nothing has been added.
        """
        return tuple(self._failures)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _add_failure(self, severity: Severity, message: str) -> "FailureBuilder":
        failure = StateFailure(severity=severity, message=message)
        self._failures.append(failure)
        self._log_added(failure)
        return self

    def _log_added(self, failure: StateFailure) -> None:
        self._log(
            EVENT_FAILURE_ADDED,
            {"severity": failure.severity.value, "message": failure.message},
        )

    def _log(self, event_type: str, data: dict) -> None:
        if self._logger is not None:
            self._logger.log_event(event_type, data)


# =============================================================================
# SECTION 2 -- RENDERING
# =============================================================================

def render_list(failures: Optional[Iterable[StateFailure]]) -> str:
    """
    Render a FailureList as one "StateError: <severity>: <message>" line
    per failure, each terminated by a newline. None renders as "".
    """
    if failures is None:
        return ""
    return "".join(
        failure.error() + REPORT_LINE_TERMINATOR for failure in failures
    )


# =============================================================================
# SECTION 3 -- MODULE __all__
# =============================================================================

__all__ = [
    "FailureList",
    "FailureBuilder",
    "render_list",
]
