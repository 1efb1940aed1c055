# =============================================================================
# stateerrors v0.1.0 -- CORE: SEVERITY & MESSAGE MODEL
# File:   stateerrors/core/domain.py
# =============================================================================
#
# SCOPE
# -----
# The atomic unit of failure information, shared by both aggregate
# representations (stateerrors.collection and stateerrors.chain):
#
#   Severity       -- closed enumeration {DEGRADED, UNAVAILABLE}.
#   StateFailure   -- frozen (severity, message) pair.
#   StatusSummary  -- frozen per-severity reduction of an aggregate.
#
# Severity is defined exactly once, here. Neither variant declares its own.
#
# DEPENDENCIES
# ------------
#   stdlib:    dataclasses, enum, typing
#   internal:  stateerrors.utils.constants, .exceptions
#
# VALIDATION PHILOSOPHY
# ---------------------
# Validation is fail-fast in __post_init__. There is no silent coercion:
# a plain string "degraded" is NOT accepted in place of Severity.DEGRADED
# by StateFailure, because a typo would otherwise surface only at
# summary time. Use Severity("degraded") to convert explicitly.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from stateerrors.utils.constants import LIST_VARIANT_TAG, RENDER_FORMAT
from .exceptions import FailureValidationError


# =============================================================================
# SECTION 1 -- ENUMERATIONS
# =============================================================================

class Severity(str, Enum):
    """
    Classification of a failure. Inherits from str for clean rendering.

    DEGRADED     -- reduced functionality.
    UNAVAILABLE  -- no functionality.

    Using str inheritance means Severity.DEGRADED == "degraded" is True.
    """
    DEGRADED    = "degraded"
    UNAVAILABLE = "unavailable"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# SECTION 2 -- INTERNAL VALIDATION HELPERS
# =============================================================================

def _check_severity(field_name: str, value: object) -> None:
    """Value must be a Severity member."""
    if not isinstance(value, Severity):
        raise FailureValidationError(
            field_name=field_name,
            value=value,
            constraint=(
                "must be a Severity enum member "
                "(Severity.DEGRADED or Severity.UNAVAILABLE)"
            ),
        )


def _check_message(field_name: str, value: object) -> None:
    """Value must be a str. The empty string is permitted."""
    if not isinstance(value, str):
        raise FailureValidationError(
            field_name=field_name,
            value=value,
            constraint="must be a string",
        )


def render_failure(tag: str, severity: Severity, message: str) -> str:
    """Render one failure as "<tag>: <severity>: <message>"."""
    return RENDER_FORMAT.format(
        tag=tag,
        severity=severity.value,
        message=message,
    )


# =============================================================================
# SECTION 3 -- STATE FAILURE
# =============================================================================

@dataclass(frozen=True)
class StateFailure:
    """
    One (severity, message) pair -- the smallest unit of failure data.

    Immutable after construction. Both aggregate representations are built
    from it: the collection variant stores StateFailure values directly,
    the chain variant carries the same two fields on every node.

    Invariants:
      - severity: a Severity member.
      - message:  a str (may be empty).
    """

    severity: Severity
    """Failure classification."""

    message:  str
    """Free-text reason shown to the user."""

    def __post_init__(self) -> None:
        _check_severity("severity", self.severity)
        _check_message("message", self.message)

    @classmethod
    def degraded(cls, message: str) -> "StateFailure":
        return cls(severity=Severity.DEGRADED, message=message)

    @classmethod
    def unavailable(cls, message: str) -> "StateFailure":
        return cls(severity=Severity.UNAVAILABLE, message=message)

    def error(self) -> str:
        """Render as "StateError: <severity>: <message>"."""
        return render_failure(LIST_VARIANT_TAG, self.severity, self.message)

    def __str__(self) -> str:
        return self.error()


# =============================================================================
# SECTION 4 -- STATUS SUMMARY
# =============================================================================

@dataclass(frozen=True)
class StatusSummary:
    """
    Per-severity reduction of a failure aggregate.

    At most one combined message per severity. The identity of individual
    failures within a severity is not preserved, only their joined text.
    Produced by stateerrors.core.status.reduce_to_summary().

    Attributes:
        degraded_reason:    Joined DEGRADED messages, or None if there were
                            no degraded failures.
        unavailable_reason: Joined UNAVAILABLE messages, or None if there
                            were no unavailable failures.
    """

    degraded_reason:    Optional[str] = None
    unavailable_reason: Optional[str] = None

    @property
    def is_healthy(self) -> bool:
        """True when neither severity carries a reason."""
        return self.degraded_reason is None and self.unavailable_reason is None

    def reason_for(self, severity: Severity) -> Optional[str]:
        """Return the combined reason recorded for severity."""
        _check_severity("severity", severity)
        if severity is Severity.DEGRADED:
            return self.degraded_reason
        return self.unavailable_reason


# =============================================================================
# SECTION 5 -- MODULE __all__
# =============================================================================

__all__ = [
    "Severity",
    "StateFailure",
    "StatusSummary",
    "render_failure",
]
