# =============================================================================
# stateerrors v0.1.0 -- CORE: STATUS REDUCTION
# File:   stateerrors/core/status.py
# =============================================================================
#
# SCOPE
# -----
# Reduces either failure aggregate into a StatusSummary:
#
#   reduce_to_summary(aggregate) -> StatusSummary
#
# Accepted aggregates:
#   None                      -- no failure; healthy summary.
#   FailureList               -- tuple (or any iterable) of StateFailure.
#   FailureChain head         -- iterating a chain yields its nodes in link
#                                order; every node carries severity/message.
#
# This module does not import stateerrors.chain. Chain nodes are consumed
# through iteration and their severity/message attributes, which keeps the
# core package a leaf dependency of both variants.
#
# ALGORITHM
# ---------
#   1. Walk the aggregate once, in order. None elements are skipped.
#   2. Append each message to the list for its severity.
#   3. Join each non-empty list with SUMMARY_SEPARATOR.
#   4. Empty lists leave the corresponding reason as None.
# =============================================================================

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from stateerrors.utils.constants import SUMMARY_SEPARATOR
from .domain import Severity, StatusSummary
from .exceptions import FailureValidationError


def _read_failure(position: int, item: Any) -> Tuple[Severity, str]:
    """
    Return (severity, message) for one element of an aggregate.

    Raises FailureValidationError when the element does not carry a
    Severity member and a str message.
    """
    severity = getattr(item, "severity", None)
    message = getattr(item, "message", None)
    if not isinstance(severity, Severity) or not isinstance(message, str):
        raise FailureValidationError(
            field_name="aggregate[" + str(position) + "]",
            value=item,
            constraint="must be a StateFailure or FailureChain node",
        )
    return severity, message


def reduce_to_summary(aggregate: Optional[Iterable[Any]]) -> StatusSummary:
    """
    Reduce a FailureList or FailureChain into a StatusSummary.

    Messages are grouped per severity in traversal order and joined with
    ", ". Individual failures are not distinguishable in the result.

    Example:
        [Degraded:"x", Unavailable:"y", Degraded:"z"]
        -> StatusSummary(degraded_reason="x, z", unavailable_reason="y")

    Args:
        aggregate: None, an iterable of StateFailure, or a FailureChain head.

    Returns:
        StatusSummary. Both reasons are None for None or empty input.

    Raises:
        FailureValidationError: if aggregate is not iterable (a bare
            StateFailure or an unfinished FailureBuilder, for example), or an
            element is not a failure.
    """
    if aggregate is None:
        return StatusSummary()
    try:
        items = iter(aggregate)
    except TypeError:
        raise FailureValidationError(
            field_name="aggregate",
            value=aggregate,
            constraint="must be a FailureList, a FailureChain or None",
        ) from None

    grouped: Dict[Severity, List[str]] = {
        Severity.DEGRADED:    [],
        Severity.UNAVAILABLE: [],
    }
    for position, item in enumerate(items):
        if item is None:
            continue
        severity, message = _read_failure(position, item)
        grouped[severity].append(message)

    degraded = grouped[Severity.DEGRADED]
    unavailable = grouped[Severity.UNAVAILABLE]
    return StatusSummary(
        degraded_reason=SUMMARY_SEPARATOR.join(degraded) if degraded else None,
        unavailable_reason=(
            SUMMARY_SEPARATOR.join(unavailable) if unavailable else None
        ),
    )


__all__ = ["reduce_to_summary"]
