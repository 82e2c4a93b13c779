"""Dict-backed repositories.

Aggregates are stored by reference, so callers must follow the
single-writer rule: load, mutate, save and drain events in one operation.
Results preserve insertion order.
"""

from __future__ import annotations

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


class InMemoryEmployeeRepository:
    def __init__(self) -> None:
        self._items: dict[EmployeeId, Employee] = {}

    def save(self, employee: Employee) -> Employee:
        self._items[employee.id] = employee
        return employee

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return self._items.get(employee_id)

    def find_by_email(self, email: Email) -> Employee | None:
        for employee in self._items.values():
            if employee.email == email:
                return employee
        return None

    def find_all(self) -> list[Employee]:
        return list(self._items.values())

    def find_by_department_id(self, department_id: DepartmentId) -> list[Employee]:
        return [e for e in self._items.values() if e.department_id == department_id]

    def find_by_status(self, status: EmploymentStatus) -> list[Employee]:
        return [e for e in self._items.values() if e.status == status]

    def delete(self, employee_id: EmployeeId) -> None:
        self._items.pop(employee_id, None)

    def exists_by_email(self, email: Email) -> bool:
        return self.find_by_email(email) is not None


class InMemoryDepartmentRepository:
    def __init__(self) -> None:
        self._items: dict[DepartmentId, Department] = {}

    def save(self, department: Department) -> Department:
        self._items[department.id] = department
        return department

    def find_by_id(self, department_id: DepartmentId) -> Department | None:
        return self._items.get(department_id)

    def find_by_name(self, name: str) -> Department | None:
        # Names are unique case-insensitively
        wanted = name.strip().casefold()
        for department in self._items.values():
            if department.name.strip().casefold() == wanted:
                return department
        return None

    def find_all(self) -> list[Department]:
        return list(self._items.values())

    def delete(self, department_id: DepartmentId) -> None:
        self._items.pop(department_id, None)

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None


class InMemoryPayrollRepository:
    def __init__(self) -> None:
        self._items: dict[PayrollId, Payroll] = {}

    def save(self, payroll: Payroll) -> Payroll:
        self._items[payroll.id] = payroll
        return payroll

    def find_by_id(self, payroll_id: PayrollId) -> Payroll | None:
        return self._items.get(payroll_id)

    def find_by_employee_id(self, employee_id: EmployeeId) -> list[Payroll]:
        return [p for p in self._items.values() if p.employee_id == employee_id]

    def find_by_employee_id_and_pay_period(
        self, employee_id: EmployeeId, pay_period: PayPeriod
    ) -> Payroll | None:
        """Return the live payroll for the period, else the latest cancelled one."""
        matches = [
            p
            for p in self._items.values()
            if p.employee_id == employee_id and p.pay_period == pay_period
        ]
        for payroll in matches:
            if payroll.status != PayrollStatus.CANCELLED:
                return payroll
        return matches[-1] if matches else None

    def find_by_status(self, status: PayrollStatus) -> list[Payroll]:
        return [p for p in self._items.values() if p.status == status]

    def find_by_pay_period(self, pay_period: PayPeriod) -> list[Payroll]:
        return [p for p in self._items.values() if p.pay_period == pay_period]

    def find_all(self) -> list[Payroll]:
        return list(self._items.values())

    def delete(self, payroll_id: PayrollId) -> None:
        self._items.pop(payroll_id, None)
