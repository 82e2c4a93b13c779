"""Opaque identifiers for aggregates.

Identifiers wrap a UUID and compare by value and by kind, so an
``EmployeeId`` never equals a ``DepartmentId`` built from the same UUID.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar
from uuid import UUID, uuid4

from hr_payroll.domain.errors import InvalidArgumentError

IdGenerator = Callable[[], UUID]
"""Source of fresh UUIDs. Injected into factories; ``uuid4`` by default."""

TId = TypeVar("TId", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """Base for typed UUID identifiers."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidArgumentError(f"{type(self).__name__} requires a UUID value")

    @classmethod
    def of(cls: type[TId], value: UUID) -> TId:
        return cls(value)

    @classmethod
    def generate(cls: type[TId], generator: IdGenerator = uuid4) -> TId:
        """Create a new identifier from ``generator``."""
        return cls(generator())

    @classmethod
    def from_string(cls: type[TId], value: str) -> TId:
        """Parse the canonical string form."""
        if value is None:
            raise InvalidArgumentError(f"{cls.__name__} cannot be null")
        try:
            return cls(UUID(str(value)))
        except ValueError:
            raise InvalidArgumentError(f"Invalid {cls.__name__}: {value!r}") from None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EmployeeId(EntityId):
    """Identifier of an Employee aggregate."""


@dataclass(frozen=True)
class DepartmentId(EntityId):
    """Identifier of a Department aggregate."""


@dataclass(frozen=True)
class PayrollId(EntityId):
    """Identifier of a Payroll aggregate."""
