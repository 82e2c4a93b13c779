"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from hr_payroll.config import Settings, get_settings
from hr_payroll.events import EventStore
from hr_payroll.services import DepartmentService, EmployeeService, PayrollService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def get_department_service(request: Request) -> DepartmentService:
    return request.app.state.department_service


def get_payroll_service(request: Request) -> PayrollService:
    return request.app.state.payroll_service


def get_event_store(request: Request) -> EventStore:
    return request.app.state.event_store


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with, falling back to the environment."""
    return getattr(request.app.state, "settings", None) or get_settings()


# Type aliases for cleaner dependency injection
Employees = Annotated[EmployeeService, Depends(get_employee_service)]
Departments = Annotated[DepartmentService, Depends(get_department_service)]
Payrolls = Annotated[PayrollService, Depends(get_payroll_service)]
Events = Annotated[EventStore, Depends(get_event_store)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
