"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hr_payroll.domain import (
    Department,
    Employee,
    EmploymentStatus,
    Money,
    Payroll,
    PayrollStatus,
)
from hr_payroll.events import StoredEvent


# ============================================================================
# Money
# ============================================================================


class MoneyIn(BaseModel):
    """Monetary amount in a request. Currency falls back to the configured default."""

    amount: Decimal
    currency: str | None = Field(default=None, min_length=3, max_length=3)

    def to_money(self, default_currency: str) -> Money:
        return Money.of(self.amount, self.currency or default_currency)


class MoneyResponse(BaseModel):
    """Monetary amount in a response."""

    amount: Decimal
    currency: str

    @classmethod
    def from_money(cls, money: Money) -> MoneyResponse:
        return cls(amount=money.amount, currency=money.currency)


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeCreate(BaseModel):
    """Schema for hiring an employee."""

    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    date_of_birth: date
    hire_date: date
    job_title: str
    salary: MoneyIn
    department_id: UUID | None = None


class PersonalInfoUpdate(BaseModel):
    first_name: str
    last_name: str
    phone_number: str | None = None


class DepartmentChange(BaseModel):
    department_id: UUID


class PromotionRequest(BaseModel):
    job_title: str
    salary: MoneyIn


class SalaryAdjustment(BaseModel):
    salary: MoneyIn


class EmployeeResponse(BaseModel):
    """Schema for employee response."""

    model_config = ConfigDict(use_enum_values=True)

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone_number: str | None = None
    date_of_birth: date
    hire_date: date
    department_id: UUID | None = None
    job_title: str
    salary: MoneyResponse
    status: EmploymentStatus
    years_of_service: int
    last_modified_date: date

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeResponse:
        return cls(
            id=employee.id.value,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=str(employee.email),
            phone_number=employee.phone_number,
            date_of_birth=employee.date_of_birth,
            hire_date=employee.hire_date,
            department_id=employee.department_id.value if employee.department_id else None,
            job_title=employee.job_title,
            salary=MoneyResponse.from_money(employee.salary),
            status=employee.status,
            years_of_service=employee.years_of_service,
            last_modified_date=employee.last_modified_date,
        )


class EmployeeListResponse(BaseModel):
    items: list[EmployeeResponse]
    total: int


# ============================================================================
# Department schemas
# ============================================================================


class DepartmentCreate(BaseModel):
    """Schema for creating a department."""

    name: str
    description: str | None = None
    budget: MoneyIn


class ManagerAssignment(BaseModel):
    manager_id: UUID


class BudgetUpdate(BaseModel):
    budget: MoneyIn


class DepartmentResponse(BaseModel):
    """Schema for department response."""

    id: UUID
    name: str
    description: str | None = None
    manager_id: UUID | None = None
    budget: MoneyResponse
    created_date: date
    employee_ids: list[UUID]
    employee_count: int

    @classmethod
    def from_domain(cls, department: Department) -> DepartmentResponse:
        return cls(
            id=department.id.value,
            name=department.name,
            description=department.description,
            manager_id=department.manager_id.value if department.manager_id else None,
            budget=MoneyResponse.from_money(department.budget),
            created_date=department.created_date,
            employee_ids=[e.value for e in department.employee_ids],
            employee_count=department.employee_count,
        )


class DepartmentListResponse(BaseModel):
    items: list[DepartmentResponse]
    total: int


# ============================================================================
# Payroll schemas
# ============================================================================


class PayrollCreate(BaseModel):
    """Schema for opening a payroll.

    ``base_salary`` defaults to the employee's current salary.
    """

    employee_id: UUID
    pay_period: str = Field(pattern=r"^\d{4}-\d{2}$", examples=["2025-03"])
    base_salary: MoneyIn | None = None


class BonusRequest(BaseModel):
    amount: MoneyIn


class DeductionRequest(BaseModel):
    amount: MoneyIn
    reason: str | None = None


class CancelRequest(BaseModel):
    reason: str | None = None


class PayrollResponse(BaseModel):
    """Schema for payroll response."""

    model_config = ConfigDict(use_enum_values=True)

    id: UUID
    employee_id: UUID
    pay_period: str
    base_salary: MoneyResponse
    bonus: MoneyResponse
    deductions: MoneyResponse
    net_pay: MoneyResponse
    status: PayrollStatus
    processed_date: date | None = None
    paid_date: date | None = None

    @classmethod
    def from_domain(cls, payroll: Payroll) -> PayrollResponse:
        return cls(
            id=payroll.id.value,
            employee_id=payroll.employee_id.value,
            pay_period=payroll.pay_period.isoformat(),
            base_salary=MoneyResponse.from_money(payroll.base_salary),
            bonus=MoneyResponse.from_money(payroll.bonus),
            deductions=MoneyResponse.from_money(payroll.deductions),
            net_pay=MoneyResponse.from_money(payroll.net_pay),
            status=payroll.status,
            processed_date=payroll.processed_date,
            paid_date=payroll.paid_date,
        )


class PayrollListResponse(BaseModel):
    items: list[PayrollResponse]
    total: int


# ============================================================================
# Event schemas
# ============================================================================


class EventResponse(BaseModel):
    """Schema for a published domain event."""

    model_config = ConfigDict(from_attributes=True)

    sequence: int
    event_id: UUID
    event_type: str
    category: str
    aggregate_id: UUID
    occurred_on: datetime
    payload: dict[str, Any]
    version: int

    @classmethod
    def from_stored(cls, event: StoredEvent) -> EventResponse:
        return cls.model_validate(event)


class EventListResponse(BaseModel):
    items: list[EventResponse]
    total: int


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
