"""Domain error types.

Every guarded operation raises one of these before touching state, so a
failed call leaves the aggregate exactly as it was.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised by the domain core."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a caller supplies a missing or structurally invalid value."""


class CurrencyMismatchError(InvalidArgumentError):
    """Raised when two amounts in different currencies are combined or compared."""

    def __init__(self, expected: str, actual: str, message: str | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Currency mismatch: expected {expected}, got {actual}"
        )


class InvalidStateError(DomainError):
    """Raised when an operation is not legal from the aggregate's current state."""
