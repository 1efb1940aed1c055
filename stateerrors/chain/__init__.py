from .node import (
    FailureChain,
    for_each,
    iter_chain,
    new_degraded,
    new_unavailable,
    report,
)
from .join import (
    join_all,
    join_chains,
    recover_chain,
)

__all__ = [
    # Node
    "FailureChain",
    "new_degraded",
    "new_unavailable",
    # Traversal and rendering
    "iter_chain",
    "for_each",
    "report",
    # Join
    "recover_chain",
    "join_chains",
    "join_all",
]
