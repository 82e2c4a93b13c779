"""Payroll API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from hr_payroll.api.dependencies import AppSettings, Payrolls
from hr_payroll.api.schemas import (
    BonusRequest,
    CancelRequest,
    DeductionRequest,
    ErrorResponse,
    PayrollCreate,
    PayrollListResponse,
    PayrollResponse,
)
from hr_payroll.domain import EmployeeId, PayPeriod, PayrollId, PayrollStatus

router = APIRouter(prefix="/payrolls", tags=["payrolls"])

PayrollPath = Annotated[UUID, Path()]


# ============================================================================
# Payroll CRUD
# ============================================================================


@router.post(
    "",
    response_model=PayrollResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_payroll(
    service: Payrolls,
    settings: AppSettings,
    payload: PayrollCreate,
) -> PayrollResponse:
    """Open a PENDING payroll for an employee and pay period."""
    base_salary = None
    if payload.base_salary is not None:
        base_salary = payload.base_salary.to_money(settings.default_currency)
    payroll = service.create_payroll(
        EmployeeId.of(payload.employee_id),
        PayPeriod.parse(payload.pay_period),
        base_salary,
    )
    return PayrollResponse.from_domain(payroll)


@router.get("", response_model=PayrollListResponse)
async def list_payrolls(
    service: Payrolls,
    employee_id: UUID | None = None,
    pay_period: Annotated[str | None, Query(pattern=r"^\d{4}-\d{2}$")] = None,
    status_filter: Annotated[PayrollStatus | None, Query(alias="status")] = None,
) -> PayrollListResponse:
    """List payrolls with optional filters."""
    payrolls = service.list_payrolls(
        employee_id=EmployeeId.of(employee_id) if employee_id else None,
        pay_period=PayPeriod.parse(pay_period) if pay_period else None,
        status=status_filter,
    )
    return PayrollListResponse(
        items=[PayrollResponse.from_domain(p) for p in payrolls],
        total=len(payrolls),
    )


@router.get(
    "/{payroll_id}",
    response_model=PayrollResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_payroll(service: Payrolls, payroll_id: PayrollPath) -> PayrollResponse:
    return PayrollResponse.from_domain(service.get_payroll(PayrollId.of(payroll_id)))


# ============================================================================
# Payroll Amounts
# ============================================================================


@router.post(
    "/{payroll_id}/bonus",
    response_model=PayrollResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_bonus(
    service: Payrolls,
    settings: AppSettings,
    payroll_id: PayrollPath,
    payload: BonusRequest,
) -> PayrollResponse:
    payroll = service.add_bonus(
        PayrollId.of(payroll_id),
        payload.amount.to_money(settings.default_currency),
    )
    return PayrollResponse.from_domain(payroll)


@router.post(
    "/{payroll_id}/deductions",
    response_model=PayrollResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_deduction(
    service: Payrolls,
    settings: AppSettings,
    payroll_id: PayrollPath,
    payload: DeductionRequest,
) -> PayrollResponse:
    payroll = service.add_deduction(
        PayrollId.of(payroll_id),
        payload.amount.to_money(settings.default_currency),
        payload.reason,
    )
    return PayrollResponse.from_domain(payroll)


# ============================================================================
# Payroll State Transitions
# ============================================================================


@router.post(
    "/{payroll_id}/process",
    response_model=PayrollResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def process_payroll(service: Payrolls, payroll_id: PayrollPath) -> PayrollResponse:
    """Move a PENDING payroll to PROCESSED."""
    return PayrollResponse.from_domain(service.process(PayrollId.of(payroll_id)))


@router.post(
    "/{payroll_id}/pay",
    response_model=PayrollResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def mark_payroll_paid(service: Payrolls, payroll_id: PayrollPath) -> PayrollResponse:
    """Move a PROCESSED payroll to PAID."""
    return PayrollResponse.from_domain(service.mark_as_paid(PayrollId.of(payroll_id)))


@router.post(
    "/{payroll_id}/cancel",
    response_model=PayrollResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def cancel_payroll(
    service: Payrolls,
    payroll_id: PayrollPath,
    payload: CancelRequest | None = None,
) -> PayrollResponse:
    reason = payload.reason if payload else None
    return PayrollResponse.from_domain(service.cancel(PayrollId.of(payroll_id), reason))
