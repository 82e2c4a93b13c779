"""Tests for application services.

Services run one unit of work per call: load, mutate, save, then publish
the drained events. The event store fixture records what was published.
"""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

import pytest

from hr_payroll.domain import (
    DepartmentId,
    EmployeeId,
    EmploymentStatus,
    InvalidArgumentError,
    InvalidStateError,
    Money,
    PayPeriod,
    PayrollId,
    PayrollStatus,
)
from hr_payroll.services import (
    DepartmentService,
    DuplicateEntityError,
    EmployeeService,
    EntityNotFoundError,
    PayrollService,
)

MARCH = PayPeriod.of(2025, 3)


def usd(amount: str) -> Money:
    return Money.of(amount, "USD")


@pytest.fixture
def employee_service(employee_repository, department_repository, emitter, clock):
    return EmployeeService(employee_repository, department_repository, emitter, clock=clock)


@pytest.fixture
def department_service(department_repository, employee_repository, emitter, clock):
    return DepartmentService(department_repository, employee_repository, emitter, clock=clock)


@pytest.fixture
def payroll_service(payroll_repository, employee_repository, emitter, clock):
    return PayrollService(payroll_repository, employee_repository, emitter, clock=clock)


@pytest.fixture
def hire(employee_service):
    def _hire(email: str = "john.doe@example.com", **overrides):
        params = {
            "first_name": "John",
            "last_name": "Doe",
            "email": email,
            "date_of_birth": date(1990, 1, 15),
            "hire_date": date(2020, 6, 1),
            "job_title": "Software Engineer",
            "salary": usd("75000.00"),
        }
        params.update(overrides)
        return employee_service.hire_employee(**params)

    return _hire


def published(event_store) -> list[str]:
    return [e.event_type for e in event_store.replay()]


class TestEmployeeService:
    """Test hiring and lifecycle operations."""

    def test_hire_saves_and_publishes(self, hire, employee_repository, event_store):
        employee = hire()

        assert employee_repository.find_by_id(employee.id) is employee
        assert employee.domain_events == ()
        assert published(event_store) == ["EmployeeCreated"]

    def test_hire_uses_injected_ids(self, employee_repository, emitter, clock, id_generator):
        service = EmployeeService(employee_repository, emitter=emitter, id_generator=id_generator, clock=clock)
        employee = service.hire_employee(
            "Jane", "Smith", "jane@example.com", date(1990, 1, 15), date(2020, 6, 1), "Analyst", usd("1")
        )
        assert employee.id == EmployeeId.of(UUID(int=1))

    def test_duplicate_email_rejected(self, hire, event_store):
        hire("john.doe@example.com")

        with pytest.raises(DuplicateEntityError):
            hire("John.Doe@Example.com", first_name="Johnny")

        assert published(event_store) == ["EmployeeCreated"]

    def test_invalid_input_publishes_nothing(self, hire, employee_repository, event_store):
        with pytest.raises(InvalidArgumentError):
            hire(first_name="J")

        assert employee_repository.find_all() == []
        assert len(event_store) == 0

    def test_hire_into_missing_department(self, hire):
        with pytest.raises(EntityNotFoundError) as exc_info:
            hire(department_id=DepartmentId.of(UUID(int=99)))
        assert exc_info.value.entity == "Department"

    def test_hire_into_department_updates_roster(self, hire, department_service):
        department = department_service.create_department("Engineering", None, usd("100000"))

        employee = hire(department_id=department.id)

        assert department.has_employee(employee.id)

    def test_get_missing_employee(self, employee_service):
        with pytest.raises(EntityNotFoundError):
            employee_service.get_employee(EmployeeId.of(UUID(int=1)))

    def test_not_found_is_lookup_error(self, employee_service):
        with pytest.raises(LookupError, match="not found"):
            employee_service.get_employee(EmployeeId.of(UUID(int=1)))

    def test_change_department_moves_roster(self, hire, employee_service, department_service):
        engineering = department_service.create_department("Engineering", None, usd("1"))
        sales = department_service.create_department("Sales", None, usd("1"))
        employee = hire(department_id=engineering.id)

        employee_service.change_department(employee.id, sales.id)

        assert employee.department_id == sales.id
        assert not engineering.has_employee(employee.id)
        assert sales.has_employee(employee.id)

    def test_change_to_missing_department(self, hire, employee_service, event_store):
        employee = hire()

        with pytest.raises(EntityNotFoundError):
            employee_service.change_department(employee.id, DepartmentId.of(UUID(int=99)))

        assert employee.department_id is None
        assert published(event_store) == ["EmployeeCreated"]

    def test_change_department_of_suspended_employee(
        self, hire, employee_service, department_service, event_store
    ):
        sales = department_service.create_department("Sales", None, usd("1"))
        employee = hire()
        employee_service.suspend(employee.id)
        published_before = published(event_store)

        with pytest.raises(InvalidStateError):
            employee_service.change_department(employee.id, sales.id)

        assert sales.employee_count == 0
        assert published(event_store) == published_before

    def test_lifecycle_events(self, hire, employee_service, event_store):
        employee = hire()

        employee_service.promote(employee.id, "Senior Engineer", usd("90000.00"))
        employee_service.adjust_salary(employee.id, usd("92000.00"))
        employee_service.update_personal_info(employee.id, "Jonathan", "Doe", None)
        employee_service.suspend(employee.id)
        employee_service.reactivate(employee.id)
        employee_service.terminate(employee.id, "Resigned")

        assert published(event_store) == [
            "EmployeeCreated",
            "EmployeePromoted",
            "SalaryAdjusted",
            "EmployeeUpdated",
            "EmployeeStatusChanged",
            "EmployeeStatusChanged",
            "EmployeeTerminated",
        ]
        assert employee.status == EmploymentStatus.TERMINATED

    def test_failed_promotion_publishes_nothing(self, hire, employee_service, event_store):
        employee = hire()

        with pytest.raises(InvalidArgumentError):
            employee_service.promote(employee.id, "Senior Engineer", usd("60000.00"))

        assert employee.salary == usd("75000.00")
        assert published(event_store) == ["EmployeeCreated"]

    def test_reactivate_terminated(self, hire, employee_service):
        employee = hire()
        employee_service.terminate(employee.id)

        with pytest.raises(InvalidStateError):
            employee_service.reactivate(employee.id)

        assert employee_service.get_employee(employee.id).status == EmploymentStatus.TERMINATED

    def test_list_filters(self, hire, employee_service, department_service):
        engineering = department_service.create_department("Engineering", None, usd("1"))
        first = hire("a@example.com", department_id=engineering.id)
        second = hire("b@example.com")
        employee_service.suspend(second.id)

        assert employee_service.list_employees() == [first, second]
        assert employee_service.list_employees(status=EmploymentStatus.SUSPENDED) == [second]
        assert employee_service.list_employees(department_id=engineering.id) == [first]

    def test_logs_operations(self, hire, caplog):
        with caplog.at_level(logging.INFO, logger="hr_payroll.services"):
            employee = hire()
        assert f"Hired employee {employee.id}" in caplog.text


class TestDepartmentService:
    def test_create_publishes(self, department_service, department_repository, event_store):
        department = department_service.create_department("Engineering", "Builds", usd("1000"))

        assert department_repository.find_by_id(department.id) is department
        assert published(event_store) == ["DepartmentCreated"]

    def test_duplicate_name_rejected(self, department_service):
        department_service.create_department("Engineering", None, usd("1"))
        with pytest.raises(DuplicateEntityError):
            department_service.create_department(" engineering ", None, usd("1"))

    def test_assign_manager(self, department_service, hire, event_store):
        department = department_service.create_department("Engineering", None, usd("1"))
        manager = hire()

        department_service.assign_manager(department.id, manager.id)

        assert department.manager_id == manager.id
        assert published(event_store)[-1] == "DepartmentManagerAssigned"

    def test_assign_unknown_manager(self, department_service):
        department = department_service.create_department("Engineering", None, usd("1"))

        with pytest.raises(EntityNotFoundError):
            department_service.assign_manager(department.id, EmployeeId.of(UUID(int=5)))

        assert department.manager_id is None

    def test_update_budget(self, department_service, event_store):
        department = department_service.create_department("Engineering", None, usd("1000"))

        department_service.update_budget(department.id, usd("500"))

        assert department.budget == usd("500")
        assert published(event_store)[-1] == "DepartmentBudgetUpdated"

    def test_roster_operations(self, department_service, hire):
        department = department_service.create_department("Engineering", None, usd("1"))
        employee = hire()

        department_service.add_employee(department.id, employee.id)
        assert department.employee_ids == (employee.id,)

        department_service.remove_employee(department.id, employee.id)
        assert department.employee_ids == ()

    def test_get_missing(self, department_service):
        with pytest.raises(EntityNotFoundError):
            department_service.get_department(DepartmentId.of(UUID(int=1)))


class TestPayrollService:
    def test_payroll_flow(self, payroll_service, hire, event_store):
        employee = hire()
        payroll = payroll_service.create_payroll(employee.id, MARCH, usd("5000.00"))

        payroll_service.add_bonus(payroll.id, usd("500.00"))
        payroll_service.add_deduction(payroll.id, usd("200.00"), "tax")
        payroll_service.process(payroll.id)
        payroll_service.mark_as_paid(payroll.id)

        assert payroll.net_pay == usd("5300.00")
        assert payroll.status == PayrollStatus.PAID
        assert published(event_store)[1:] == [
            "PayrollCreated",
            "BonusAdded",
            "DeductionAdded",
            "PayrollProcessed",
            "PayrollPaid",
        ]

    def test_base_salary_defaults_to_employee_salary(self, payroll_service, hire):
        employee = hire(salary=usd("6000.00"))
        payroll = payroll_service.create_payroll(employee.id, MARCH)
        assert payroll.base_salary == usd("6000.00")

    def test_unknown_employee(self, payroll_service):
        with pytest.raises(EntityNotFoundError):
            payroll_service.create_payroll(EmployeeId.of(UUID(int=1)), MARCH, usd("1"))

    def test_one_payroll_per_period(self, payroll_service, hire):
        employee = hire()
        payroll_service.create_payroll(employee.id, MARCH, usd("5000"))

        with pytest.raises(DuplicateEntityError):
            payroll_service.create_payroll(employee.id, MARCH, usd("5000"))

        payroll_service.create_payroll(employee.id, PayPeriod.of(2025, 4), usd("5000"))

    def test_cancelled_payroll_can_be_replaced(self, payroll_service, hire):
        employee = hire()
        first = payroll_service.create_payroll(employee.id, MARCH, usd("5000"))
        payroll_service.cancel(first.id, "Wrong base salary")

        second = payroll_service.create_payroll(employee.id, MARCH, usd("5200"))

        assert second.id != first.id
        assert second.status == PayrollStatus.PENDING

        with pytest.raises(DuplicateEntityError):
            payroll_service.create_payroll(employee.id, MARCH, usd("5300"))

    def test_pay_pending_fails(self, payroll_service, hire, event_store):
        employee = hire()
        payroll = payroll_service.create_payroll(employee.id, MARCH, usd("5000"))
        count = len(event_store)

        with pytest.raises(InvalidStateError, match="Only processed payrolls"):
            payroll_service.mark_as_paid(payroll.id)

        assert payroll.status == PayrollStatus.PENDING
        assert len(event_store) == count

    def test_negative_net_pay_logs_warning(self, payroll_service, hire, caplog):
        employee = hire()
        payroll = payroll_service.create_payroll(employee.id, MARCH, usd("100"))

        with caplog.at_level(logging.WARNING, logger="hr_payroll.services"):
            payroll_service.add_deduction(payroll.id, usd("150"), "advance repayment")

        assert payroll.has_negative_net_pay
        assert "net pay is negative" in caplog.text

    def test_list_filters(self, payroll_service, hire):
        first = hire("a@example.com")
        second = hire("b@example.com")
        march = payroll_service.create_payroll(first.id, MARCH, usd("1"))
        april = payroll_service.create_payroll(first.id, PayPeriod.of(2025, 4), usd("1"))
        other = payroll_service.create_payroll(second.id, MARCH, usd("1"))
        payroll_service.process(april.id)

        assert payroll_service.list_payrolls(employee_id=first.id) == [march, april]
        assert payroll_service.list_payrolls(pay_period=MARCH) == [march, other]
        assert payroll_service.list_payrolls(employee_id=first.id, pay_period=MARCH) == [march]
        assert payroll_service.list_payrolls(status=PayrollStatus.PROCESSED) == [april]

    def test_get_missing(self, payroll_service):
        with pytest.raises(EntityNotFoundError):
            payroll_service.get_payroll(PayrollId.of(UUID(int=1)))


class TestEventPublication:
    def test_handler_failure_does_not_fail_operation(self, hire, emitter, caplog):
        def broken(event):
            raise RuntimeError("downstream unavailable")

        emitter.on_all(broken)

        employee = hire()

        assert employee.status == EmploymentStatus.ACTIVE
        assert "1 event handler(s) failed" in caplog.text

    def test_services_share_one_emitter(self, emitter, hire, department_service):
        received = []
        emitter.on_all(received.append)

        hire()
        department_service.create_department("Engineering", None, usd("1"))

        assert [e.category.value for e in received] == ["employee", "department"]
