"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hr_payroll.api.routes import (
    departments_router,
    employees_router,
    events_router,
    health_router,
    payrolls_router,
)
from hr_payroll.config import Settings, get_settings
from hr_payroll.domain import (
    CurrencyMismatchError,
    DomainError,
    InvalidStateError,
    InvalidTransitionError,
)
from hr_payroll.events import EventEmitter, EventStore
from hr_payroll.repositories import (
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)
from hr_payroll.services import (
    DepartmentService,
    DuplicateEntityError,
    EmployeeService,
    EntityNotFoundError,
    PayrollService,
)

logger = logging.getLogger(__name__)


def _error_code(exc: DomainError) -> str:
    if isinstance(exc, InvalidTransitionError):
        return "INVALID_TRANSITION"
    if isinstance(exc, InvalidStateError):
        return "INVALID_STATE"
    if isinstance(exc, CurrencyMismatchError):
        return "CURRENCY_MISMATCH"
    return "INVALID_ARGUMENT"


def _wire_services(app: FastAPI) -> None:
    """Build repositories, the emitter and services into ``app.state``."""
    employees = InMemoryEmployeeRepository()
    departments = InMemoryDepartmentRepository()
    payrolls = InMemoryPayrollRepository()

    emitter = EventEmitter()
    store = EventStore()
    emitter.on_all(store)

    app.state.emitter = emitter
    app.state.event_store = store
    app.state.employee_service = EmployeeService(employees, departments, emitter)
    app.state.department_service = DepartmentService(departments, employees, emitter)
    app.state.payroll_service = PayrollService(payrolls, employees, emitter)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Employee, department and payroll management",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    _wire_services(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Rejected arguments and illegal transitions."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "code": _error_code(exc)},
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "code": "NOT_FOUND"},
        )

    @app.exception_handler(DuplicateEntityError)
    async def duplicate_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "code": "DUPLICATE"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api/v1")
    app.include_router(departments_router, prefix="/api/v1")
    app.include_router(payrolls_router, prefix="/api/v1")
    app.include_router(events_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
