# =============================================================================
# stateerrors v0.1.0 -- CORE: EXCEPTION HIERARCHY
# File:   stateerrors/core/exceptions.py
# =============================================================================
#
# Misuse of the failure types raises one of the classes below. Degraded and
# unavailable failures themselves are returned as data, never raised here.
#
#   StateErrorsError
#     FailureValidationError   -- bad severity, message or list element
#     ChainIntegrityError      -- a chain link is not a FailureChain
#       ChainOwnershipError    -- node already linked into another chain
#     ChainCycleError          -- a walk or append would revisit a node
#
# Messages are built only from the arguments, so equal errors compare equal.
# This module imports nothing from the rest of the package.
# =============================================================================

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class StateErrorsError(Exception):
    """
    Base class for all stateerrors exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        field_name:  Name of the offending field or argument, or empty string
                     if not applicable.
        value:       The offending value, or None if the violation is
                     structural rather than field-local.
        message:     Human-readable description. Always non-empty.
    """

    def __init__(
        self,
        message:    str,
        field_name: str = "",
        value:      Any = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "StateErrorsError: message must be a non-empty string"
            )
        if not isinstance(field_name, str):
            raise ValueError(
                "StateErrorsError: field_name must be a string"
            )
        super().__init__(message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.message:    str = message

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(field_name=" + repr(self.field_name)
            + ", value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateErrorsError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field_name == other.field_name
            and self.value == other.value
            and self.message == other.message
        )

    __hash__ = Exception.__hash__


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class FailureValidationError(StateErrorsError):
    """
    Raised when a constructor argument or a collection element violates a
    type or value constraint.

    Covers:
      - severity that is not a Severity member.
      - message that is not a str.
      - collection elements that are neither None nor StateFailure.

    Message format:
        "FailureValidationError: field '<field_name>' violates constraint
         '<constraint>': got <value>."

    Raises:
        ValueError if field_name or constraint is empty.
    """

    def __init__(
        self,
        field_name: str,
        value:      Any,
        constraint: str,
    ) -> None:
        if not field_name:
            raise ValueError(
                "FailureValidationError: field_name must be a non-empty string"
            )
        if not isinstance(constraint, str) or not constraint:
            raise ValueError(
                "FailureValidationError: constraint must be a non-empty string"
            )
        message = (
            "FailureValidationError: field '"
            + field_name
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message=message, field_name=field_name, value=value)
        self.constraint: str = constraint


class ChainIntegrityError(StateErrorsError):
    """
    Raised when a link of a failure chain is not a FailureChain node.

    This indicates a corrupted chain or a caller that violated the closed
    node-type contract. It is never an expected outcome and callers are not
    meant to recover from it.

    Message format:
        "ChainIntegrityError: field '<field_name>' holds <type name>,
         expected FailureChain."
    """

    def __init__(self, field_name: str, value: Any) -> None:
        if not field_name:
            raise ValueError(
                "ChainIntegrityError: field_name must be a non-empty string"
            )
        message = (
            "ChainIntegrityError: field '"
            + field_name
            + "' holds "
            + type(value).__name__
            + ", expected FailureChain."
        )
        super().__init__(message=message, field_name=field_name, value=value)


class ChainOwnershipError(ChainIntegrityError):
    """
    Raised when a node that is already the successor of some node is linked
    in again, either through append() or a constructor's next argument.

    A node has at most one predecessor. Linking it under a second head would
    let appends through one head show up in the other chain.

    Message format:
        "ChainOwnershipError: field '<field_name>' holds node <value>, which
         is already linked into another chain."
    """

    def __init__(self, field_name: str, value: Any) -> None:
        if not field_name:
            raise ValueError(
                "ChainOwnershipError: field_name must be a non-empty string"
            )
        message = (
            "ChainOwnershipError: field '"
            + field_name
            + "' holds node "
            + repr(value)
            + ", which is already linked into another chain."
        )
        StateErrorsError.__init__(
            self, message=message, field_name=field_name, value=value
        )


class ChainCycleError(StateErrorsError):
    """
    Raised when a chain operation detects, or would create, a cycle.

    Args:
        operation:  Name of the operation that detected the cycle
                    (e.g. "append", "iter_chain"). Non-empty.
        value:      Rendered text of the node that was revisited or shared.

    Message format:
        "ChainCycleError: <operation> would revisit node <value>;
         failure chains must be acyclic."
    """

    def __init__(self, operation: str, value: Any) -> None:
        if not isinstance(operation, str) or not operation:
            raise ValueError(
                "ChainCycleError: operation must be a non-empty string"
            )
        message = (
            "ChainCycleError: "
            + operation
            + " would revisit node "
            + repr(value)
            + "; failure chains must be acyclic."
        )
        super().__init__(message=message, field_name="next", value=value)
        self.operation: str = operation


# =============================================================================
# MODULE __all__
# =============================================================================

__all__ = [
    "StateErrorsError",
    "FailureValidationError",
    "ChainIntegrityError",
    "ChainOwnershipError",
    "ChainCycleError",
]
