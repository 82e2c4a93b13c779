"""Department service."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from hr_payroll.domain import Department, DepartmentId, EmployeeId, Money
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


class DepartmentService(AggregateService):
    """Service for departments: creation, managers, budgets and rosters."""

    def __init__(
        self,
        departments: DepartmentRepository,
        employees: EmployeeRepository | None = None,
        emitter: EventEmitter | None = None,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(emitter, id_generator, clock)
        self.departments = departments
        self.employees = employees

    def create_department(
        self, name: str, description: str | None, budget: Money
    ) -> Department:
        """Create a department. Names are unique."""
        if name and self.departments.exists_by_name(name):
            raise DuplicateEntityError(f"Department named {name!r} already exists")

        department = Department.create(
            name,
            description,
            budget,
            id_generator=self.id_generator,
            clock=self.clock,
        )
        self._commit(self.departments, department)
        logger.info("Created department %s (%s)", department.id, department.name)
        return department

    def get_department(self, department_id: DepartmentId) -> Department:
        department = self.departments.find_by_id(department_id)
        if department is None:
            raise EntityNotFoundError("Department", department_id)
        return department

    def list_departments(self) -> list[Department]:
        return self.departments.find_all()

    def assign_manager(
        self, department_id: DepartmentId, manager_id: EmployeeId
    ) -> Department:
        department = self.get_department(department_id)
        self._require_employee(manager_id)
        department.assign_manager(manager_id)
        logger.info("Assigned manager %s to department %s", manager_id, department_id)
        return self._commit(self.departments, department)

    def update_budget(self, department_id: DepartmentId, new_budget: Money) -> Department:
        department = self.get_department(department_id)
        department.update_budget(new_budget)
        logger.info("Updated budget of department %s to %s", department_id, new_budget)
        return self._commit(self.departments, department)

    def add_employee(self, department_id: DepartmentId, employee_id: EmployeeId) -> Department:
        department = self.get_department(department_id)
        self._require_employee(employee_id)
        department.add_employee(employee_id)
        return self._commit(self.departments, department)

    def remove_employee(
        self, department_id: DepartmentId, employee_id: EmployeeId
    ) -> Department:
        department = self.get_department(department_id)
        department.remove_employee(employee_id)
        return self._commit(self.departments, department)

    def _require_employee(self, employee_id: EmployeeId | None) -> None:
        if self.employees is None or employee_id is None:
            return
        if self.employees.find_by_id(employee_id) is None:
            raise EntityNotFoundError("Employee", employee_id)
