"""Pytest fixtures for HR payroll tests."""

from __future__ import annotations

import itertools
from datetime import date
from typing import Callable
from uuid import UUID

import pytest

from hr_payroll.domain import Department, Email, Employee, EmployeeId, Money, PayPeriod, Payroll
from hr_payroll.events import EventEmitter, EventStore
from hr_payroll.repositories import (
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)

TODAY = date(2025, 3, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock() -> Callable[[], date]:
    """Clock pinned to TODAY."""
    return lambda: TODAY


@pytest.fixture
def id_generator() -> Callable[[], UUID]:
    """Deterministic UUID source: 00000000-...-0001, -0002, ..."""
    counter = itertools.count(1)
    return lambda: UUID(int=next(counter))


@pytest.fixture
def make_employee(clock) -> Callable[..., Employee]:
    """Factory for a valid ACTIVE employee; keyword overrides replace defaults."""

    def _make(**overrides) -> Employee:
        params = {
            "first_name": "John",
            "last_name": "Doe",
            "email": Email.of("john.doe@example.com"),
            "date_of_birth": date(1990, 5, 20),
            "hire_date": date(2020, 1, 15),
            "job_title": "Software Engineer",
            "salary": Money.of("75000.00", "USD"),
            "clock": clock,
        }
        params.update(overrides)
        return Employee.create(**params)

    return _make


@pytest.fixture
def employee(make_employee) -> Employee:
    return make_employee()


@pytest.fixture
def make_department(clock) -> Callable[..., Department]:
    def _make(**overrides) -> Department:
        params = {
            "name": "Engineering",
            "description": "Builds the product",
            "budget": Money.of("500000.00", "USD"),
            "clock": clock,
        }
        params.update(overrides)
        return Department.create(**params)

    return _make


@pytest.fixture
def make_payroll(clock) -> Callable[..., Payroll]:
    def _make(**overrides) -> Payroll:
        params = {
            "employee_id": EmployeeId.of(UUID(int=42)),
            "pay_period": PayPeriod.of(2025, 3),
            "base_salary": Money.of("5000.00", "USD"),
            "clock": clock,
        }
        params.update(overrides)
        return Payroll.create(**params)

    return _make


@pytest.fixture
def payroll(make_payroll) -> Payroll:
    return make_payroll()


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def employee_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def department_repository() -> InMemoryDepartmentRepository:
    return InMemoryDepartmentRepository()


@pytest.fixture
def payroll_repository() -> InMemoryPayrollRepository:
    return InMemoryPayrollRepository()


@pytest.fixture
def event_store() -> EventStore:
    return EventStore()


@pytest.fixture
def emitter(event_store) -> EventEmitter:
    """Emitter with the event store registered as a catch-all handler."""
    emitter = EventEmitter()
    emitter.on_all(event_store)
    return emitter
