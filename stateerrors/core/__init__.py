from .exceptions import (
    ChainCycleError,
    ChainIntegrityError,
    ChainOwnershipError,
    FailureValidationError,
    StateErrorsError,
)
from .domain import (
    Severity,
    StateFailure,
    StatusSummary,
)
from .logging_layer import (
    Event,
    EventFilter,
    EventLogger,
    LoggingError,
)
from .status import reduce_to_summary

__all__ = [
    # Exceptions
    "StateErrorsError",
    "FailureValidationError",
    "ChainIntegrityError",
    "ChainOwnershipError",
    "ChainCycleError",
    "LoggingError",
    # Domain
    "Severity",
    "StateFailure",
    "StatusSummary",
    # Event log
    "Event",
    "EventFilter",
    "EventLogger",
    # Reduction
    "reduce_to_summary",
]
