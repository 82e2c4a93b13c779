"""Employee service - hiring and employee lifecycle operations."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from hr_payroll.domain import (
    DepartmentId,
    Email,
    Employee,
    EmployeeId,
    EmploymentStatus,
    Money,
)
from hr_payroll.domain.aggregate import Clock
from hr_payroll.domain.identifiers import IdGenerator
from hr_payroll.events import EventEmitter
from hr_payroll.repositories import DepartmentRepository, EmployeeRepository
from hr_payroll.services.base import (
    AggregateService,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class EmployeeService(AggregateService):
    """Service for managing the employee lifecycle.

    Operations:
    - hire_employee: create an ACTIVE employee (email must be unused)
    - update_personal_info, promote, adjust_salary
    - change_department: move an ACTIVE employee and update both rosters
    - suspend, reactivate, terminate
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository | None = None,
        emitter: EventEmitter | None = None,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(emitter, id_generator, clock)
        self.employees = employees
        self.departments = departments

    def hire_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: date,
        hire_date: date,
        job_title: str,
        salary: Money,
        phone_number: str | None = None,
        department_id: DepartmentId | None = None,
    ) -> Employee:
        """Create a new employee and add them to their department's roster."""
        email_value = Email.of(email)
        if self.employees.exists_by_email(email_value):
            raise DuplicateEntityError(f"Employee with email {email_value} already exists")

        department = None
        if department_id is not None and self.departments is not None:
            department = self.departments.find_by_id(department_id)
            if department is None:
                raise EntityNotFoundError("Department", department_id)

        employee = Employee.create(
            first_name,
            last_name,
            email_value,
            date_of_birth,
            hire_date,
            job_title,
            salary,
            phone_number=phone_number,
            department_id=department_id,
            id_generator=self.id_generator,
            clock=self.clock,
        )
        self._commit(self.employees, employee)

        if department is not None:
            department.add_employee(employee.id)
            self.departments.save(department)

        logger.info("Hired employee %s as %s", employee.id, employee.job_title)
        return employee

    def get_employee(self, employee_id: EmployeeId) -> Employee:
        employee = self.employees.find_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    def list_employees(
        self,
        status: EmploymentStatus | None = None,
        department_id: DepartmentId | None = None,
    ) -> list[Employee]:
        if department_id is not None:
            employees = self.employees.find_by_department_id(department_id)
        else:
            employees = self.employees.find_all()
        if status is not None:
            employees = [e for e in employees if e.status == status]
        return employees

    def update_personal_info(
        self,
        employee_id: EmployeeId,
        first_name: str,
        last_name: str,
        phone_number: str | None = None,
    ) -> Employee:
        employee = self.get_employee(employee_id)
        employee.update_personal_info(first_name, last_name, phone_number)
        logger.info("Updated personal info for employee %s", employee_id)
        return self._commit(self.employees, employee)

    def change_department(
        self, employee_id: EmployeeId, new_department_id: DepartmentId
    ) -> Employee:
        """Move an employee and keep department rosters in step."""
        employee = self.get_employee(employee_id)

        new_department = None
        if self.departments is not None and new_department_id is not None:
            new_department = self.departments.find_by_id(new_department_id)
            if new_department is None:
                raise EntityNotFoundError("Department", new_department_id)

        old_department_id = employee.department_id
        employee.change_department(new_department_id)
        self._commit(self.employees, employee)

        if self.departments is not None:
            if old_department_id is not None:
                old_department = self.departments.find_by_id(old_department_id)
                if old_department is not None:
                    old_department.remove_employee(employee.id)
                    self.departments.save(old_department)
            new_department.add_employee(employee.id)
            self.departments.save(new_department)

        logger.info(
            "Moved employee %s from department %s to %s",
            employee_id,
            old_department_id,
            new_department_id,
        )
        return employee

    def promote(
        self, employee_id: EmployeeId, new_job_title: str, new_salary: Money
    ) -> Employee:
        employee = self.get_employee(employee_id)
        employee.promote(new_job_title, new_salary)
        logger.info("Promoted employee %s to %s at %s", employee_id, new_job_title, new_salary)
        return self._commit(self.employees, employee)

    def adjust_salary(self, employee_id: EmployeeId, new_salary: Money) -> Employee:
        employee = self.get_employee(employee_id)
        old_salary = employee.salary
        employee.adjust_salary(new_salary)
        logger.info(
            "Adjusted salary of employee %s from %s to %s", employee_id, old_salary, new_salary
        )
        return self._commit(self.employees, employee)

    def suspend(self, employee_id: EmployeeId) -> Employee:
        employee = self.get_employee(employee_id)
        employee.suspend()
        logger.info("Suspended employee %s", employee_id)
        return self._commit(self.employees, employee)

    def reactivate(self, employee_id: EmployeeId) -> Employee:
        employee = self.get_employee(employee_id)
        employee.reactivate()
        logger.info("Reactivated employee %s", employee_id)
        return self._commit(self.employees, employee)

    def terminate(self, employee_id: EmployeeId, reason: str | None = None) -> Employee:
        employee = self.get_employee(employee_id)
        employee.terminate(reason)
        logger.info("Terminated employee %s: %s", employee_id, reason)
        return self._commit(self.employees, employee)
