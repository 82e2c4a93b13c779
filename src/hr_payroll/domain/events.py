"""Domain event types for employee, department and payroll aggregates.

All events are:
- Immutable (frozen dataclasses)
- Typed with explicit payloads
- Traceable via metadata
- Serializable for audit logs and downstream consumers

The event type name (the class name) is the contract consumers key off,
so classes here must not be renamed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from hr_payroll.domain.identifiers import DepartmentId, EmployeeId, EntityId, PayrollId
from hr_payroll.domain.money import Money
from hr_payroll.domain.pay_period import PayPeriod
from hr_payroll.domain.state_machine import EmploymentStatus


class EventCategory(str, Enum):
    """Event categories for routing and filtering."""

    EMPLOYEE = "employee"
    DEPARTMENT = "department"
    PAYROLL = "payroll"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata attached to every domain event."""

    event_id: UUID
    occurred_on: datetime
    aggregate_id: UUID
    version: int = 1  # Schema version for evolution

    @classmethod
    def create(cls, aggregate_id: EntityId | UUID) -> EventMetadata:
        """Create metadata with auto-generated fields."""
        if isinstance(aggregate_id, EntityId):
            aggregate_id = aggregate_id.value
        return cls(
            event_id=uuid4(),
            occurred_on=datetime.now(timezone.utc),
            aggregate_id=aggregate_id,
        )


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    metadata: EventMetadata

    @property
    def event_type(self) -> str:
        """Event type name for routing."""
        return self.__class__.__name__

    @property
    def event_id(self) -> UUID:
        return self.metadata.event_id

    @property
    def occurred_on(self) -> datetime:
        return self.metadata.occurred_on

    @property
    def category(self) -> EventCategory:
        """Event category for filtering."""
        raise NotImplementedError("Subclasses must define category")

    def payload(self) -> dict[str, Any]:
        """Event-specific fields, JSON-safe."""
        return {
            f.name: _serialize(getattr(self, f.name))
            for f in fields(self)
            if f.name != "metadata"
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize event to dictionary."""
        return {
            "event_type": self.event_type,
            "category": self.category.value,
            "metadata": _serialize(
                {f.name: getattr(self.metadata, f.name) for f in fields(self.metadata)}
            ),
            "payload": self.payload(),
        }

    def to_json(self) -> str:
        """Serialize event to JSON string."""
        return json.dumps(self.to_dict(), default=str)


def _serialize(obj: Any) -> Any:
    """Recursively serialize objects for JSON compatibility."""
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_serialize(v) for v in obj]
    elif isinstance(obj, Money):
        return {"amount": str(obj.amount), "currency": obj.currency}
    elif isinstance(obj, EntityId):
        return str(obj)
    elif isinstance(obj, UUID):
        return str(obj)
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, Decimal):
        return str(obj)
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, PayPeriod):
        return obj.isoformat()
    return obj


# =============================================================================
# Employee Events
# =============================================================================


@dataclass(frozen=True)
class _EmployeeEvent(DomainEvent):
    employee_id: EmployeeId

    @property
    def category(self) -> EventCategory:
        return EventCategory.EMPLOYEE


@dataclass(frozen=True)
class EmployeeCreated(_EmployeeEvent):
    """A new employee was hired."""

    email: str
    full_name: str


@dataclass(frozen=True)
class EmployeeUpdated(_EmployeeEvent):
    """Personal information of an employee changed."""


@dataclass(frozen=True)
class EmployeeDepartmentChanged(_EmployeeEvent):
    """Employee moved to another department."""

    old_department_id: DepartmentId | None
    new_department_id: DepartmentId


@dataclass(frozen=True)
class EmployeePromoted(_EmployeeEvent):
    """Employee received a new title and salary."""

    new_job_title: str
    old_salary: Money
    new_salary: Money


@dataclass(frozen=True)
class SalaryAdjusted(_EmployeeEvent):
    """Employee salary changed outside of a promotion."""

    old_salary: Money
    new_salary: Money


@dataclass(frozen=True)
class EmployeeTerminated(_EmployeeEvent):
    """Employment ended. Irreversible."""

    reason: str | None
    termination_date: date


@dataclass(frozen=True)
class EmployeeStatusChanged(_EmployeeEvent):
    """Employee status moved between non-terminal states."""

    old_status: EmploymentStatus
    new_status: EmploymentStatus


# =============================================================================
# Department Events
# =============================================================================


@dataclass(frozen=True)
class _DepartmentEvent(DomainEvent):
    department_id: DepartmentId

    @property
    def category(self) -> EventCategory:
        return EventCategory.DEPARTMENT


@dataclass(frozen=True)
class DepartmentCreated(_DepartmentEvent):
    """A department was created."""

    department_name: str


@dataclass(frozen=True)
class DepartmentManagerAssigned(_DepartmentEvent):
    """A manager was assigned to the department."""

    manager_id: EmployeeId


@dataclass(frozen=True)
class DepartmentBudgetUpdated(_DepartmentEvent):
    """Department budget changed."""

    old_budget: Money
    new_budget: Money


# =============================================================================
# Payroll Events
# =============================================================================


@dataclass(frozen=True)
class _PayrollEvent(DomainEvent):
    payroll_id: PayrollId

    @property
    def category(self) -> EventCategory:
        return EventCategory.PAYROLL


@dataclass(frozen=True)
class PayrollCreated(_PayrollEvent):
    """A payroll record was opened for an employee and period."""

    employee_id: EmployeeId
    pay_period: PayPeriod


@dataclass(frozen=True)
class BonusAdded(_PayrollEvent):
    """A bonus was added to the payroll."""

    bonus_amount: Money


@dataclass(frozen=True)
class DeductionAdded(_PayrollEvent):
    """A deduction was added to the payroll."""

    deduction_amount: Money
    reason: str | None


@dataclass(frozen=True)
class PayrollProcessed(_PayrollEvent):
    """Payroll was processed and its net pay fixed for payment."""

    employee_id: EmployeeId
    net_pay: Money


@dataclass(frozen=True)
class PayrollPaid(_PayrollEvent):
    """Payroll was paid out."""

    employee_id: EmployeeId
    amount: Money
    paid_date: date


@dataclass(frozen=True)
class PayrollCancelled(_PayrollEvent):
    """Payroll was cancelled before payment."""

    reason: str | None
