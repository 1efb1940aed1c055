# =============================================================================
# stateerrors v0.1.0 -- CHAIN VARIANT
# File:   stateerrors/chain/node.py
# =============================================================================
#
# SCOPE
# -----
# A singly-linked chain of failures joined by a wrap/unwrap relation:
#
#   FailureChain      -- node {severity, message, next}; an Exception
#                        subclass so a chain can travel through code that
#                        handles failures generically.
#   new_degraded()    -- single-node chain constructors.
#   new_unavailable()
#   iter_chain()      -- lazy link-order traversal (generator).
#   for_each()        -- visitor traversal with cooperative early stop.
#   report()          -- "<node>-><node>->..." rendering of a whole chain.
#
# OWNERSHIP
# ---------
# The head is the handle callers hold. Each node owns its successor, and a
# node has at most one predecessor: once linked (by append() or the next
# constructor argument) it cannot be linked under another head, so appends
# through one head never surface in another chain. There is no empty chain:
# "no failure" is None at the variable level. The (severity, message) pair
# of a node is immutable; only the next link changes, and only through
# append().
#
# TERMINATION
# -----------
# Chains must be acyclic. Every walk tracks visited nodes by identity and
# raises ChainCycleError on a revisit instead of looping. append() refuses
# to attach a chain that shares any node with the receiving chain, which
# includes joining a chain with itself.
#
# TYPE RECOVERY
# -------------
# A link that is not a FailureChain can only appear if the private _next
# attribute was written directly. Traversal treats it as an internal
# consistency fault and raises ChainIntegrityError.
# =============================================================================

from __future__ import annotations

from typing import Callable, Iterator, Optional, Set, Tuple

from stateerrors.core.domain import Severity, StateFailure, render_failure
from stateerrors.core.exceptions import (
    ChainCycleError,
    ChainIntegrityError,
    ChainOwnershipError,
)
from stateerrors.core.logging_layer import EVENT_CHAIN_APPENDED, EventLogger
from stateerrors.utils.constants import CHAIN_SEPARATOR, CHAIN_VARIANT_TAG


# =============================================================================
# SECTION 1 -- FAILURE CHAIN NODE
# =============================================================================

class FailureChain(Exception):
    """
    One node of a failure chain.

    Args:
        severity:  Severity member.
        message:   Free-text reason (str).
        next:      Optional successor node. Must be a FailureChain or None.

    Raises:
        FailureValidationError: on an invalid severity or message.
        ChainIntegrityError:    if next is neither None nor a FailureChain.
        ChainOwnershipError:    if next is already linked under another node.
    """

    def __init__(
        self,
        severity: Severity,
        message:  str,
        next:     Optional["FailureChain"] = None,
    ) -> None:
        failure = StateFailure(severity=severity, message=message)
        if next is not None and not isinstance(next, FailureChain):
            raise ChainIntegrityError(field_name="next", value=next)
        if next is not None and next._linked:
            raise ChainOwnershipError(field_name="next", value=next.error())
        super().__init__(failure.severity, failure.message)
        self._failure: StateFailure = failure
        self._next: Optional[FailureChain] = next
        # True once some node holds this one as its successor.
        self._linked: bool = False
        if next is not None:
            next._linked = True

    # -------------------------------------------------------------------------
    # Node fields
    # -------------------------------------------------------------------------

    @property
    def severity(self) -> Severity:
        return self._failure.severity

    @property
    def message(self) -> str:
        return self._failure.message

    @property
    def failure(self) -> StateFailure:
        """This node's (severity, message) pair as a StateFailure."""
        return self._failure

    @property
    def next(self) -> Optional["FailureChain"]:
        return self._next

    def unwrap(self) -> Optional["FailureChain"]:
        """Return the wrapped (next) failure, or None at the tail."""
        return self._next

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def error(self) -> str:
        """Render this node only: "WrappedStateError: <severity>: <message>"."""
        return render_failure(CHAIN_VARIANT_TAG, self.severity, self.message)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return (
            "FailureChain(severity=" + repr(self.severity.value)
            + ", message=" + repr(self.message)
            + ", has_next=" + repr(self._next is not None)
            + ")"
        )

    # -------------------------------------------------------------------------
    # Growth
    # -------------------------------------------------------------------------

    def append(
        self,
        other:  Optional["FailureChain"],
        logger: Optional[EventLogger] = None,
    ) -> "FailureChain":
        """
        Attach other at the current tail of this chain.

        None is a no-op. The walk always reaches the true tail, so repeated
        appends keep insertion order and never overwrite existing links.

        Returns self (the head), so calls chain:
            new_degraded("a").append(b).append(c)

        Raises:
            ChainIntegrityError: if other is not a FailureChain.
            ChainCycleError:     if either chain is cyclic, or other shares a
                                 node with this chain.
            ChainOwnershipError: if other is already linked under another
                                 node (it is not the head of its chain).

        Nothing is modified when an error is raised.
        """
        if other is None:
            return self
        if not isinstance(other, FailureChain):
            raise ChainIntegrityError(field_name="other", value=other)

        own: Set[int] = set()
        tail = self
        for node in _walk(self, "append"):
            own.add(id(node))
            tail = node

        appended = 0
        for node in _walk(other, "append"):
            if id(node) in own:
                raise ChainCycleError(operation="append", value=node.error())
            appended += 1
        if other._linked:
            raise ChainOwnershipError(field_name="other", value=other.error())

        tail._next = other
        other._linked = True
        if logger is not None:
            logger.log_event(
                EVENT_CHAIN_APPENDED,
                {"head": self.error(), "appended_length": appended},
            )
        return self

    # -------------------------------------------------------------------------
    # Aggregate views
    # -------------------------------------------------------------------------

    def tail(self) -> "FailureChain":
        """Return the last node of the chain."""
        last = self
        for node in _walk(self, "tail"):
            last = node
        return last

    def failures(self) -> Tuple[StateFailure, ...]:
        """Return every node's StateFailure in link order."""
        return tuple(node.failure for node in _walk(self, "failures"))

    def __iter__(self) -> Iterator["FailureChain"]:
        return iter_chain(self)

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self, "len"))

    def __bool__(self) -> bool:
        # A node is always a failure; truth tests must not walk the chain.
        return True


# =============================================================================
# SECTION 2 -- CONSTRUCTORS
# =============================================================================

def new_degraded(message: str) -> FailureChain:
    return FailureChain(severity=Severity.DEGRADED, message=message)


def new_unavailable(message: str) -> FailureChain:
    return FailureChain(severity=Severity.UNAVAILABLE, message=message)


# =============================================================================
# SECTION 3 -- TRAVERSAL
# =============================================================================

def _walk(head: Optional[FailureChain], operation: str) -> Iterator[FailureChain]:
    """
    Yield head and every successor in link order.

    Raises ChainIntegrityError on a link that is not a FailureChain and
    ChainCycleError when a node is reached twice.
    """
    seen: Set[int] = set()
    current = head
    field_name = "head"
    while current is not None:
        if not isinstance(current, FailureChain):
            raise ChainIntegrityError(field_name=field_name, value=current)
        if id(current) in seen:
            raise ChainCycleError(operation=operation, value=current.error())
        seen.add(id(current))
        yield current
        current = current._next
        field_name = "next"


def iter_chain(head: Optional[FailureChain]) -> Iterator[FailureChain]:
    """
    Lazily traverse a chain in link order.

    Single-pass and not restartable; call again for a new traversal.
    A None head yields nothing.

    Raises:
        ChainIntegrityError: if a link is not a FailureChain.
        ChainCycleError:     if the chain revisits a node.
    """
    return _walk(head, "iter_chain")


def for_each(
    head:  Optional[FailureChain],
    visit: Callable[[FailureChain], Optional[bool]],
) -> None:
    """
    Call visit(node) for every node in link order.

    Traversal stops early when visit returns False. Any other return value,
    None included, continues to the next node.
    """
    for node in _walk(head, "for_each"):
        if visit(node) is False:
            break


def report(head: Optional[FailureChain]) -> str:
    """
    Render a whole chain in link order, nodes joined by "->".

    A single node renders as error(node); None renders as "".
    """
    return CHAIN_SEPARATOR.join(node.error() for node in _walk(head, "report"))


# =============================================================================
# SECTION 4 -- MODULE __all__
# =============================================================================

__all__ = [
    "FailureChain",
    "new_degraded",
    "new_unavailable",
    "iter_chain",
    "for_each",
    "report",
]
