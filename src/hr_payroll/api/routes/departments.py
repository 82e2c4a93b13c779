"""Department API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status

from hr_payroll.api.dependencies import AppSettings, Departments
from hr_payroll.api.schemas import (
    BudgetUpdate,
    DepartmentCreate,
    DepartmentListResponse,
    DepartmentResponse,
    ErrorResponse,
    ManagerAssignment,
)
from hr_payroll.domain import DepartmentId, EmployeeId

router = APIRouter(prefix="/departments", tags=["departments"])

DepartmentPath = Annotated[UUID, Path()]


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_department(
    service: Departments,
    settings: AppSettings,
    payload: DepartmentCreate,
) -> DepartmentResponse:
    """Create a department. Names are unique."""
    department = service.create_department(
        payload.name,
        payload.description,
        payload.budget.to_money(settings.default_currency),
    )
    return DepartmentResponse.from_domain(department)


@router.get("", response_model=DepartmentListResponse)
async def list_departments(service: Departments) -> DepartmentListResponse:
    departments = service.list_departments()
    return DepartmentListResponse(
        items=[DepartmentResponse.from_domain(d) for d in departments],
        total=len(departments),
    )


@router.get(
    "/{department_id}",
    response_model=DepartmentResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_department(
    service: Departments, department_id: DepartmentPath
) -> DepartmentResponse:
    return DepartmentResponse.from_domain(
        service.get_department(DepartmentId.of(department_id))
    )


@router.put(
    "/{department_id}/manager",
    response_model=DepartmentResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def assign_manager(
    service: Departments,
    department_id: DepartmentPath,
    payload: ManagerAssignment,
) -> DepartmentResponse:
    """Assign an existing employee as the department manager."""
    department = service.assign_manager(
        DepartmentId.of(department_id), EmployeeId.of(payload.manager_id)
    )
    return DepartmentResponse.from_domain(department)


@router.put(
    "/{department_id}/budget",
    response_model=DepartmentResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_budget(
    service: Departments,
    settings: AppSettings,
    department_id: DepartmentPath,
    payload: BudgetUpdate,
) -> DepartmentResponse:
    department = service.update_budget(
        DepartmentId.of(department_id),
        payload.budget.to_money(settings.default_currency),
    )
    return DepartmentResponse.from_domain(department)
