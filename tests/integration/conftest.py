"""Integration test fixtures for the HTTP adapter."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hr_payroll.api.app import create_app
from hr_payroll.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        app_name="HR Payroll API",
        app_version="test",
        host="127.0.0.1",
        port=8000,
        debug=False,
        log_level="INFO",
        default_currency="USD",
    )


@pytest_asyncio.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a freshly wired app."""
    app = create_app(test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def employee_payload() -> dict[str, Any]:
    return {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "date_of_birth": "1990-01-15",
        "hire_date": "2020-06-01",
        "job_title": "Software Engineer",
        "salary": {"amount": "75000.00", "currency": "USD"},
    }


@pytest_asyncio.fixture
async def employee(client: AsyncClient, employee_payload: dict[str, Any]) -> dict[str, Any]:
    response = await client.post("/api/v1/employees", json=employee_payload)
    assert response.status_code == 201, response.text
    return response.json()
