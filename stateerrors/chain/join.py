# =============================================================================
# stateerrors v0.1.0 -- CHAIN VARIANT: JOIN
# File:   stateerrors/chain/join.py
# =============================================================================
#
# SCOPE
# -----
# Merges failure values that are statically just "some exception or None"
# into one FailureChain:
#
#   recover_chain(err)          -- find the FailureChain inside a generic
#                                  failure value, if any.
#   join_chains(first, second)  -- splice second onto first's tail.
#   join_all(*failures)         -- left fold of join_chains over N results.
#
# JOIN ASYMMETRY
# --------------
# If first does not recover as a FailureChain, first is returned unchanged
# and second is dropped, whatever second contains. A second operand that
# does not recover is dropped as well. Neither case raises. When an
# EventLogger is passed, each dropped operand is recorded as a
# JOIN_OPERAND_DROPPED event so the loss is observable.
#
# MUTATION
# --------
# join_chains() mutates the chain recovered from first (its tail gains a
# next link) and returns first itself, not a copy.
# =============================================================================

from __future__ import annotations

from typing import Any, Optional, Set

from stateerrors.core.logging_layer import EVENT_JOIN_OPERAND_DROPPED, EventLogger
from .node import FailureChain


# =============================================================================
# SECTION 1 -- TYPE RECOVERY
# =============================================================================

def recover_chain(err: Any) -> Optional[FailureChain]:
    """
    Return the FailureChain carried by err, or None.

    err itself is returned when it is a FailureChain. Otherwise the explicit
    cause chain (err.__cause__, as set by "raise X from chain") is followed
    and the first FailureChain found is returned. Non-exceptions and None
    recover as None.
    """
    seen: Set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, FailureChain):
            return current
        seen.add(id(current))
        current = getattr(current, "__cause__", None)
    return None


# =============================================================================
# SECTION 2 -- JOIN
# =============================================================================

def _log_dropped(
    logger:  Optional[EventLogger],
    first:   Any,
    second:  Any,
    dropped: str,
) -> None:
    if logger is None:
        return
    logger.log_event(
        EVENT_JOIN_OPERAND_DROPPED,
        {
            "first_type": type(first).__name__,
            "second_type": type(second).__name__,
            "dropped": dropped,
        },
    )


def join_chains(
    first:  Any,
    second: Any,
    logger: Optional[EventLogger] = None,
) -> Any:
    """
    Merge two failure-or-None values into one chain.

    - first does not recover as a FailureChain: return first unchanged;
      second is dropped.
    - first recovers: append the chain recovered from second (if any) to its
      tail and return first.

    Args:
        first:   Exception, FailureChain or None.
        second:  Exception, FailureChain or None.
        logger:  Optional event log for dropped operands.

    Returns:
        first, possibly with its chain extended.

    Raises:
        ChainCycleError: if the two chains share a node (including
            joining a chain with itself). Neither chain is modified.
        ChainOwnershipError: if the chain recovered from second is already
            linked under another node. Neither chain is modified.
    """
    head = recover_chain(first)
    if head is None:
        if second is not None:
            _log_dropped(logger, first, second, "second")
        return first

    tail_chain = recover_chain(second)
    if tail_chain is None:
        if second is not None:
            _log_dropped(logger, first, second, "second")
        return first

    head.append(tail_chain, logger=logger)
    return first


def join_all(*failures: Any, logger: Optional[EventLogger] = None) -> Any:
    """
    Left-fold join_chains over the results of several checks.

    None results are skipped, so a check that found nothing never hides the
    checks after it. The first non-None value is the fold seed; the usual
    join asymmetry applies from there on. Returns None if every value is None.
    """
    merged: Any = None
    for failure in failures:
        if failure is None:
            continue
        if merged is None:
            merged = failure
            continue
        merged = join_chains(merged, failure, logger=logger)
    return merged


# =============================================================================
# SECTION 3 -- MODULE __all__
# =============================================================================

__all__ = [
    "recover_chain",
    "join_chains",
    "join_all",
]
