"""Application services."""

from hr_payroll.services.base import (
    AggregateService,
    DuplicateEntityError,
    EntityNotFoundError,
    ServiceError,
)
from hr_payroll.services.employee_service import EmployeeService
from hr_payroll.services.department_service import DepartmentService
from hr_payroll.services.payroll_service import PayrollService

__all__ = [
    "AggregateService",
    "ServiceError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "EmployeeService",
    "DepartmentService",
    "PayrollService",
]
