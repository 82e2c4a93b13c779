"""Repository contracts for the aggregates.

The domain prescribes no storage format. Any object with these methods can
back the services; ``hr_payroll.repositories.memory`` ships dict-backed
implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hr_payroll.domain import (
    Department,
    DepartmentId,
    Email,
    Employee,
    EmployeeId,
    EmploymentStatus,
    PayPeriod,
    Payroll,
    PayrollId,
    PayrollStatus,
)


@runtime_checkable
class EmployeeRepository(Protocol):
    """Storage for Employee aggregates."""

    def save(self, employee: Employee) -> Employee: ...

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None: ...

    def find_by_email(self, email: Email) -> Employee | None: ...

    def find_all(self) -> list[Employee]: ...

    def find_by_department_id(self, department_id: DepartmentId) -> list[Employee]: ...

    def find_by_status(self, status: EmploymentStatus) -> list[Employee]: ...

    def delete(self, employee_id: EmployeeId) -> None: ...

    def exists_by_email(self, email: Email) -> bool: ...


@runtime_checkable
class DepartmentRepository(Protocol):
    """Storage for Department aggregates."""

    def save(self, department: Department) -> Department: ...

    def find_by_id(self, department_id: DepartmentId) -> Department | None: ...

    def find_by_name(self, name: str) -> Department | None: ...

    def find_all(self) -> list[Department]: ...

    def delete(self, department_id: DepartmentId) -> None: ...

    def exists_by_name(self, name: str) -> bool: ...


@runtime_checkable
class PayrollRepository(Protocol):
    """Storage for Payroll aggregates."""

    def save(self, payroll: Payroll) -> Payroll: ...

    def find_by_id(self, payroll_id: PayrollId) -> Payroll | None: ...

    def find_by_employee_id(self, employee_id: EmployeeId) -> list[Payroll]: ...

    def find_by_employee_id_and_pay_period(
        self, employee_id: EmployeeId, pay_period: PayPeriod
    ) -> Payroll | None:
        """A non-cancelled record wins over cancelled ones it replaced."""
        ...

    def find_by_status(self, status: PayrollStatus) -> list[Payroll]: ...

    def find_by_pay_period(self, pay_period: PayPeriod) -> list[Payroll]: ...

    def find_all(self) -> list[Payroll]: ...

    def delete(self, payroll_id: PayrollId) -> None: ...
