"""API routes."""

from hr_payroll.api.routes.departments import router as departments_router
from hr_payroll.api.routes.employees import router as employees_router
from hr_payroll.api.routes.events import router as events_router
from hr_payroll.api.routes.health import router as health_router
from hr_payroll.api.routes.payrolls import router as payrolls_router

__all__ = [
    "departments_router",
    "employees_router",
    "events_router",
    "health_router",
    "payrolls_router",
]
