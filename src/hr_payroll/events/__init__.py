"""Domain event publishing.

This package provides:
- Event emitter for publishing drained aggregate events
- Event store used as the published-event audit log

Event types themselves live in ``hr_payroll.domain.events`` and are
re-exported here for convenience.
"""

from hr_payroll.domain.events import (
    # Base
    DomainEvent,
    EventMetadata,
    EventCategory,
    # Employee Events
    EmployeeCreated,
    EmployeeUpdated,
    EmployeeDepartmentChanged,
    EmployeePromoted,
    SalaryAdjusted,
    EmployeeTerminated,
    EmployeeStatusChanged,
    # Department Events
    DepartmentCreated,
    DepartmentManagerAssigned,
    DepartmentBudgetUpdated,
    # Payroll Events
    PayrollCreated,
    BonusAdded,
    DeductionAdded,
    PayrollProcessed,
    PayrollPaid,
    PayrollCancelled,
)
from hr_payroll.events.emitter import EventEmitter, EventHandler
from hr_payroll.events.store import EventStore, StoredEvent

__all__ = [
    # Base
    "DomainEvent",
    "EventMetadata",
    "EventCategory",
    # Employee Events
    "EmployeeCreated",
    "EmployeeUpdated",
    "EmployeeDepartmentChanged",
    "EmployeePromoted",
    "SalaryAdjusted",
    "EmployeeTerminated",
    "EmployeeStatusChanged",
    # Department Events
    "DepartmentCreated",
    "DepartmentManagerAssigned",
    "DepartmentBudgetUpdated",
    # Payroll Events
    "PayrollCreated",
    "BonusAdded",
    "DeductionAdded",
    "PayrollProcessed",
    "PayrollPaid",
    "PayrollCancelled",
    # Emitter
    "EventEmitter",
    "EventHandler",
    # Store
    "EventStore",
    "StoredEvent",
]
