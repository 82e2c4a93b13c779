"""Department aggregate."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

from hr_payroll.domain.aggregate import AggregateRoot, Clock
from hr_payroll.domain.errors import InvalidArgumentError
from hr_payroll.domain.events import (
    DepartmentBudgetUpdated,
    DepartmentCreated,
    DepartmentManagerAssigned,
    EventMetadata,
)
from hr_payroll.domain.identifiers import DepartmentId, EmployeeId, IdGenerator
from hr_payroll.domain.money import Money


class Department(AggregateRoot[DepartmentId]):
    """Department aggregate root.

    Has no status machine. The member roster is an index kept in step by
    the caller: adding and removing members is idempotent and records no
    events.
    """

    def __init__(
        self,
        department_id: DepartmentId,
        name: str,
        description: str | None,
        budget: Money,
        created_date: date,
        manager_id: EmployeeId | None = None,
        employee_ids: list[EmployeeId] | None = None,
        clock: Clock = date.today,
    ) -> None:
        super().__init__(department_id, clock)
        self._name = name
        self._description = description
        self._budget = budget
        self._created_date = created_date
        self._manager_id = manager_id
        self._employee_ids: list[EmployeeId] = list(employee_ids or [])

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None,
        budget: Money,
        *,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> Department:
        if name is None or not name.strip():
            raise InvalidArgumentError("Department name cannot be null or empty")
        if budget is None:
            raise InvalidArgumentError("Budget cannot be null")

        department = cls(
            department_id=DepartmentId.generate(id_generator),
            name=name,
            description=description,
            budget=budget,
            created_date=clock(),
            clock=clock,
        )
        department._register_event(
            DepartmentCreated(
                metadata=EventMetadata.create(department.id),
                department_id=department.id,
                department_name=name,
            )
        )
        return department

    @classmethod
    def reconstitute(
        cls,
        department_id: DepartmentId,
        name: str,
        description: str | None,
        budget: Money,
        created_date: date,
        manager_id: EmployeeId | None,
        employee_ids: list[EmployeeId],
        *,
        clock: Clock = date.today,
    ) -> Department:
        """Rebuild a stored department without recording any event."""
        return cls(
            department_id=department_id,
            name=name,
            description=description,
            budget=budget,
            created_date=created_date,
            manager_id=manager_id,
            employee_ids=employee_ids,
            clock=clock,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def manager_id(self) -> EmployeeId | None:
        return self._manager_id

    @property
    def budget(self) -> Money:
        return self._budget

    @property
    def created_date(self) -> date:
        return self._created_date

    @property
    def employee_ids(self) -> tuple[EmployeeId, ...]:
        return tuple(self._employee_ids)

    @property
    def employee_count(self) -> int:
        return len(self._employee_ids)

    def has_employee(self, employee_id: EmployeeId) -> bool:
        return employee_id in self._employee_ids

    def assign_manager(self, manager_id: EmployeeId) -> None:
        if manager_id is None:
            raise InvalidArgumentError("Manager ID cannot be null")

        self._manager_id = manager_id
        self._register_event(
            DepartmentManagerAssigned(
                metadata=EventMetadata.create(self.id),
                department_id=self.id,
                manager_id=manager_id,
            )
        )

    def update_budget(self, new_budget: Money) -> None:
        """Replace the budget. Any amount is accepted."""
        if new_budget is None:
            raise InvalidArgumentError("Budget cannot be null")

        old_budget = self._budget
        self._budget = new_budget
        self._register_event(
            DepartmentBudgetUpdated(
                metadata=EventMetadata.create(self.id),
                department_id=self.id,
                old_budget=old_budget,
                new_budget=new_budget,
            )
        )

    def add_employee(self, employee_id: EmployeeId) -> None:
        if employee_id is None:
            raise InvalidArgumentError("Employee ID cannot be null")
        if employee_id not in self._employee_ids:
            self._employee_ids.append(employee_id)

    def remove_employee(self, employee_id: EmployeeId) -> None:
        if employee_id in self._employee_ids:
            self._employee_ids.remove(employee_id)
