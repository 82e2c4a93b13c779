"""Aggregate repositories."""

from hr_payroll.repositories.base import (
    DepartmentRepository,
    EmployeeRepository,
    PayrollRepository,
)
from hr_payroll.repositories.memory import (
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)

__all__ = [
    "EmployeeRepository",
    "DepartmentRepository",
    "PayrollRepository",
    "InMemoryEmployeeRepository",
    "InMemoryDepartmentRepository",
    "InMemoryPayrollRepository",
]
