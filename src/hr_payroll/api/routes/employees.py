"""Employee API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from hr_payroll.api.dependencies import AppSettings, Employees
from hr_payroll.api.schemas import (
    DepartmentChange,
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    ErrorResponse,
    PersonalInfoUpdate,
    PromotionRequest,
    SalaryAdjustment,
)
from hr_payroll.domain import DepartmentId, EmployeeId, EmploymentStatus

router = APIRouter(prefix="/employees", tags=["employees"])

EmployeePath = Annotated[UUID, Path()]


# ============================================================================
# Employee CRUD
# ============================================================================


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def hire_employee(
    service: Employees,
    settings: AppSettings,
    payload: EmployeeCreate,
) -> EmployeeResponse:
    """Hire a new employee in ACTIVE status."""
    employee = service.hire_employee(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        date_of_birth=payload.date_of_birth,
        hire_date=payload.hire_date,
        job_title=payload.job_title,
        salary=payload.salary.to_money(settings.default_currency),
        phone_number=payload.phone_number,
        department_id=DepartmentId.of(payload.department_id) if payload.department_id else None,
    )
    return EmployeeResponse.from_domain(employee)


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    service: Employees,
    status_filter: Annotated[EmploymentStatus | None, Query(alias="status")] = None,
    department_id: UUID | None = None,
) -> EmployeeListResponse:
    """List employees with optional filters."""
    employees = service.list_employees(
        status=status_filter,
        department_id=DepartmentId.of(department_id) if department_id else None,
    )
    return EmployeeListResponse(
        items=[EmployeeResponse.from_domain(e) for e in employees],
        total=len(employees),
    )


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(service: Employees, employee_id: EmployeePath) -> EmployeeResponse:
    """Get a specific employee by ID."""
    return EmployeeResponse.from_domain(service.get_employee(EmployeeId.of(employee_id)))


@router.delete(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def terminate_employee(
    service: Employees,
    employee_id: EmployeePath,
    reason: str | None = None,
) -> EmployeeResponse:
    """Terminate an employee. The record is kept."""
    employee = service.terminate(EmployeeId.of(employee_id), reason)
    return EmployeeResponse.from_domain(employee)


# ============================================================================
# Employee Changes
# ============================================================================


@router.put(
    "/{employee_id}/personal-info",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_personal_info(
    service: Employees,
    employee_id: EmployeePath,
    payload: PersonalInfoUpdate,
) -> EmployeeResponse:
    employee = service.update_personal_info(
        EmployeeId.of(employee_id),
        payload.first_name,
        payload.last_name,
        payload.phone_number,
    )
    return EmployeeResponse.from_domain(employee)


@router.put(
    "/{employee_id}/department",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def change_department(
    service: Employees,
    employee_id: EmployeePath,
    payload: DepartmentChange,
) -> EmployeeResponse:
    """Move an active employee to another department."""
    employee = service.change_department(
        EmployeeId.of(employee_id), DepartmentId.of(payload.department_id)
    )
    return EmployeeResponse.from_domain(employee)


@router.put(
    "/{employee_id}/promote",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def promote_employee(
    service: Employees,
    settings: AppSettings,
    employee_id: EmployeePath,
    payload: PromotionRequest,
) -> EmployeeResponse:
    employee = service.promote(
        EmployeeId.of(employee_id),
        payload.job_title,
        payload.salary.to_money(settings.default_currency),
    )
    return EmployeeResponse.from_domain(employee)


@router.put(
    "/{employee_id}/salary",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def adjust_salary(
    service: Employees,
    settings: AppSettings,
    employee_id: EmployeePath,
    payload: SalaryAdjustment,
) -> EmployeeResponse:
    employee = service.adjust_salary(
        EmployeeId.of(employee_id),
        payload.salary.to_money(settings.default_currency),
    )
    return EmployeeResponse.from_domain(employee)


@router.put(
    "/{employee_id}/suspend",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def suspend_employee(service: Employees, employee_id: EmployeePath) -> EmployeeResponse:
    return EmployeeResponse.from_domain(service.suspend(EmployeeId.of(employee_id)))


@router.put(
    "/{employee_id}/reactivate",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def reactivate_employee(
    service: Employees, employee_id: EmployeePath
) -> EmployeeResponse:
    return EmployeeResponse.from_domain(service.reactivate(EmployeeId.of(employee_id)))
