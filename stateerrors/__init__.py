# stateerrors
# Two interchangeable representations for aggregating degraded / unavailable
# failures reported by a set of checks:
#   stateerrors.collection  -- flat FailureList built by FailureBuilder
#   stateerrors.chain       -- linked FailureChain joined by wrap/unwrap
# Both reduce to a StatusSummary through reduce_to_summary().

from stateerrors.core import (
    ChainCycleError,
    ChainIntegrityError,
    ChainOwnershipError,
    Event,
    EventFilter,
    EventLogger,
    FailureValidationError,
    LoggingError,
    Severity,
    StateErrorsError,
    StateFailure,
    StatusSummary,
    reduce_to_summary,
)
from stateerrors.collection import (
    FailureBuilder,
    FailureList,
    render_list,
)
from stateerrors.chain import (
    FailureChain,
    for_each,
    iter_chain,
    join_all,
    join_chains,
    new_degraded,
    new_unavailable,
    recover_chain,
    report,
)

__version__ = "0.1.0"

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
    "reduce_to_summary",
    # Event log
    "Event",
    "EventFilter",
    "EventLogger",
    # Collection variant
    "FailureList",
    "FailureBuilder",
    "render_list",
    # Chain variant
    "FailureChain",
    "new_degraded",
    "new_unavailable",
    "iter_chain",
    "for_each",
    "report",
    "recover_chain",
    "join_chains",
    "join_all",
]
