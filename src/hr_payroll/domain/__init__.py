"""Domain core: value objects, aggregates and their domain events."""

from hr_payroll.domain.errors import (
    CurrencyMismatchError,
    DomainError,
    InvalidArgumentError,
    InvalidStateError,
)
from hr_payroll.domain.money import Money
from hr_payroll.domain.identifiers import DepartmentId, EmployeeId, EntityId, PayrollId
from hr_payroll.domain.pay_period import PayPeriod
from hr_payroll.domain.state_machine import (
    EmploymentStateMachine,
    EmploymentStatus,
    InvalidTransitionError,
    PayrollStateMachine,
    PayrollStatus,
)
from hr_payroll.domain.events import DomainEvent, EventCategory, EventMetadata
from hr_payroll.domain.aggregate import AggregateRoot
from hr_payroll.domain.employee import Email, Employee
from hr_payroll.domain.department import Department
from hr_payroll.domain.payroll import Payroll

__all__ = [
    # Errors
    "DomainError",
    "InvalidArgumentError",
    "CurrencyMismatchError",
    "InvalidStateError",
    "InvalidTransitionError",
    # Value objects
    "Money",
    "Email",
    "PayPeriod",
    "EntityId",
    "EmployeeId",
    "DepartmentId",
    "PayrollId",
    # Status
    "EmploymentStatus",
    "EmploymentStateMachine",
    "PayrollStatus",
    "PayrollStateMachine",
    # Events
    "DomainEvent",
    "EventCategory",
    "EventMetadata",
    # Aggregates
    "AggregateRoot",
    "Employee",
    "Department",
    "Payroll",
]
