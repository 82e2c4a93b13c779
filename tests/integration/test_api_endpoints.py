"""API endpoint integration tests.

Tests the FastAPI endpoints for employee, department and payroll operations.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Health endpoint should return 200."""
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["events_recorded"] == 0
        assert "timestamp" in data

    async def test_readiness_check(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_liveness_check(self, client: AsyncClient):
        response = await client.get("/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    async def test_info(self, client: AsyncClient):
        response = await client.get("/api/info")
        assert response.status_code == 200
        assert response.json() == {
            "name": "HR Payroll API",
            "version": "test",
            "default_currency": "USD",
        }


class TestEmployeeEndpoints:
    """Test employee endpoints."""

    async def test_hire(self, client: AsyncClient, employee):
        assert employee["status"] == "ACTIVE"
        assert employee["full_name"] == "John Doe"
        assert employee["salary"] == {"amount": "75000.00", "currency": "USD"}
        assert employee["department_id"] is None

        response = await client.get(f"/api/v1/employees/{employee['id']}")
        assert response.status_code == 200
        assert response.json()["email"] == "john.doe@example.com"

    async def test_hire_uses_default_currency(self, client: AsyncClient, employee_payload):
        employee_payload["salary"] = {"amount": "1000"}
        response = await client.post("/api/v1/employees", json=employee_payload)

        assert response.status_code == 201, response.text
        assert response.json()["salary"] == {"amount": "1000.00", "currency": "USD"}

    async def test_hire_invalid_email(self, client: AsyncClient, employee_payload):
        employee_payload["email"] = "not-an-email"
        response = await client.post("/api/v1/employees", json=employee_payload)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"
        assert "Invalid email format" in response.json()["detail"]

    async def test_hire_negative_salary(self, client: AsyncClient, employee_payload):
        employee_payload["salary"] = {"amount": "-1", "currency": "USD"}
        response = await client.post("/api/v1/employees", json=employee_payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Amount cannot be negative"

    async def test_hire_duplicate_email(self, client: AsyncClient, employee, employee_payload):
        response = await client.post("/api/v1/employees", json=employee_payload)
        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE"

    async def test_get_unknown(self, client: AsyncClient):
        response = await client.get(f"/api/v1/employees/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_promote(self, client: AsyncClient, employee):
        response = await client.put(
            f"/api/v1/employees/{employee['id']}/promote",
            json={"job_title": "Senior Engineer", "salary": {"amount": "90000.00", "currency": "USD"}},
        )

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["job_title"] == "Senior Engineer"
        assert data["salary"]["amount"] == "90000.00"

    async def test_promote_with_lower_salary(self, client: AsyncClient, employee):
        response = await client.put(
            f"/api/v1/employees/{employee['id']}/promote",
            json={"job_title": "Senior Engineer", "salary": {"amount": "60000.00"}},
        )

        assert response.status_code == 400
        assert "cannot be less than current salary" in response.json()["detail"]

    async def test_adjust_salary_currency_mismatch(self, client: AsyncClient, employee):
        response = await client.put(
            f"/api/v1/employees/{employee['id']}/salary",
            json={"salary": {"amount": "70000", "currency": "EUR"}},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "CURRENCY_MISMATCH"

    async def test_personal_info(self, client: AsyncClient, employee):
        response = await client.put(
            f"/api/v1/employees/{employee['id']}/personal-info",
            json={"first_name": "Jonathan", "last_name": "Doe", "phone_number": "+1-555-0100"},
        )
        assert response.status_code == 200
        assert response.json()["full_name"] == "Jonathan Doe"
        assert response.json()["phone_number"] == "+1-555-0100"

    async def test_suspend_reactivate_terminate(self, client: AsyncClient, employee):
        base = f"/api/v1/employees/{employee['id']}"

        response = await client.put(f"{base}/suspend")
        assert response.json()["status"] == "SUSPENDED"

        response = await client.put(f"{base}/reactivate")
        assert response.json()["status"] == "ACTIVE"

        response = await client.delete(base, params={"reason": "Restructuring"})
        assert response.status_code == 200
        assert response.json()["status"] == "TERMINATED"

        response = await client.put(f"{base}/reactivate")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TRANSITION"

        response = await client.get(base)
        assert response.json()["status"] == "TERMINATED"

    async def test_list_with_filters(self, client: AsyncClient, employee, employee_payload):
        employee_payload["email"] = "second@example.com"
        second = (await client.post("/api/v1/employees", json=employee_payload)).json()
        await client.put(f"/api/v1/employees/{second['id']}/suspend")

        response = await client.get("/api/v1/employees")
        assert response.json()["total"] == 2

        response = await client.get("/api/v1/employees", params={"status": "SUSPENDED"})
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["id"] == second["id"]


class TestDepartmentEndpoints:
    """Test department endpoints."""

    async def _create(self, client: AsyncClient, name: str = "Engineering") -> dict:
        response = await client.post(
            "/api/v1/departments",
            json={"name": name, "description": "Builds things", "budget": {"amount": "500000"}},
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def test_create_and_get(self, client: AsyncClient):
        department = await self._create(client)

        assert department["budget"] == {"amount": "500000.00", "currency": "USD"}
        assert department["employee_count"] == 0

        response = await client.get(f"/api/v1/departments/{department['id']}")
        assert response.json()["name"] == "Engineering"

        response = await client.get("/api/v1/departments")
        assert response.json()["total"] == 1

    async def test_duplicate_name(self, client: AsyncClient):
        await self._create(client)
        response = await client.post(
            "/api/v1/departments", json={"name": "engineering", "budget": {"amount": "1"}}
        )
        assert response.status_code == 409

    async def test_assign_manager_and_budget(self, client: AsyncClient, employee):
        department = await self._create(client)
        base = f"/api/v1/departments/{department['id']}"

        response = await client.put(f"{base}/manager", json={"manager_id": employee["id"]})
        assert response.status_code == 200
        assert response.json()["manager_id"] == employee["id"]

        response = await client.put(f"{base}/budget", json={"budget": {"amount": "250000"}})
        assert response.json()["budget"]["amount"] == "250000.00"

    async def test_assign_unknown_manager(self, client: AsyncClient):
        department = await self._create(client)
        response = await client.put(
            f"/api/v1/departments/{department['id']}/manager", json={"manager_id": str(uuid4())}
        )
        assert response.status_code == 404

    async def test_employee_department_change_updates_rosters(
        self, client: AsyncClient, employee_payload
    ):
        engineering = await self._create(client, "Engineering")
        sales = await self._create(client, "Sales")
        employee_payload["department_id"] = engineering["id"]
        employee = (await client.post("/api/v1/employees", json=employee_payload)).json()

        response = await client.put(
            f"/api/v1/employees/{employee['id']}/department",
            json={"department_id": sales["id"]},
        )
        assert response.status_code == 200
        assert response.json()["department_id"] == sales["id"]

        engineering = (await client.get(f"/api/v1/departments/{engineering['id']}")).json()
        sales = (await client.get(f"/api/v1/departments/{sales['id']}")).json()
        assert engineering["employee_ids"] == []
        assert sales["employee_ids"] == [employee["id"]]

        response = await client.get("/api/v1/employees", params={"department_id": sales["id"]})
        assert response.json()["total"] == 1


class TestPayrollEndpoints:
    """Test payroll endpoints."""

    async def _create(self, client: AsyncClient, employee_id: str, **extra) -> dict:
        body = {"employee_id": employee_id, "pay_period": "2025-03", **extra}
        response = await client.post("/api/v1/payrolls", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    async def test_payroll_flow(self, client: AsyncClient, employee):
        payroll = await self._create(
            client, employee["id"], base_salary={"amount": "5000.00", "currency": "USD"}
        )
        base = f"/api/v1/payrolls/{payroll['id']}"
        assert payroll["status"] == "PENDING"
        assert payroll["pay_period"] == "2025-03"

        await client.post(f"{base}/bonus", json={"amount": {"amount": "500.00"}})
        response = await client.post(
            f"{base}/deductions", json={"amount": {"amount": "200.00"}, "reason": "tax"}
        )
        assert response.json()["net_pay"] == {"amount": "5300.00", "currency": "USD"}

        response = await client.post(f"{base}/process")
        assert response.json()["status"] == "PROCESSED"
        assert response.json()["processed_date"] is not None

        response = await client.post(f"{base}/pay")
        assert response.json()["status"] == "PAID"

        response = await client.post(f"{base}/bonus", json={"amount": {"amount": "1"}})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATE"

    async def test_base_salary_defaults_to_employee_salary(self, client: AsyncClient, employee):
        payroll = await self._create(client, employee["id"])
        assert payroll["base_salary"]["amount"] == "75000.00"

    async def test_pay_pending(self, client: AsyncClient, employee):
        payroll = await self._create(client, employee["id"])

        response = await client.post(f"/api/v1/payrolls/{payroll['id']}/pay")

        assert response.status_code == 400
        assert "Only processed payrolls can be marked as paid" in response.json()["detail"]
        response = await client.get(f"/api/v1/payrolls/{payroll['id']}")
        assert response.json()["status"] == "PENDING"

    async def test_duplicate_period(self, client: AsyncClient, employee):
        await self._create(client, employee["id"])
        response = await client.post(
            "/api/v1/payrolls", json={"employee_id": employee["id"], "pay_period": "2025-03"}
        )
        assert response.status_code == 409

    async def test_cancel(self, client: AsyncClient, employee):
        payroll = await self._create(client, employee["id"])
        base = f"/api/v1/payrolls/{payroll['id']}"

        response = await client.post(f"{base}/cancel", json={"reason": "Duplicate"})
        assert response.json()["status"] == "CANCELLED"

        response = await client.post(f"{base}/cancel")
        assert response.status_code == 400

    async def test_unknown_employee(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/payrolls", json={"employee_id": str(uuid4()), "pay_period": "2025-03"}
        )
        assert response.status_code == 404

    async def test_invalid_pay_period(self, client: AsyncClient, employee):
        response = await client.post(
            "/api/v1/payrolls", json={"employee_id": employee["id"], "pay_period": "2025-13"}
        )
        assert response.status_code == 400

    async def test_list_filters(self, client: AsyncClient, employee):
        march = await self._create(client, employee["id"])
        response = await client.post(
            "/api/v1/payrolls", json={"employee_id": employee["id"], "pay_period": "2025-04"}
        )
        april = response.json()
        await client.post(f"/api/v1/payrolls/{april['id']}/process")

        response = await client.get("/api/v1/payrolls", params={"employee_id": employee["id"]})
        assert response.json()["total"] == 2

        response = await client.get("/api/v1/payrolls", params={"pay_period": "2025-03"})
        assert [p["id"] for p in response.json()["items"]] == [march["id"]]

        response = await client.get("/api/v1/payrolls", params={"status": "PROCESSED"})
        assert [p["id"] for p in response.json()["items"]] == [april["id"]]


class TestEventEndpoints:
    """Test the published event log."""

    async def test_events_recorded_in_order(self, client: AsyncClient, employee):
        await client.put(f"/api/v1/employees/{employee['id']}/suspend")

        response = await client.get("/api/v1/events", params={"aggregate_id": employee["id"]})

        data = response.json()
        assert [e["event_type"] for e in data["items"]] == ["EmployeeCreated", "EmployeeStatusChanged"]
        assert data["items"][0]["payload"]["email"] == "john.doe@example.com"
        assert data["items"][1]["payload"]["new_status"] == "SUSPENDED"

    async def test_filters(self, client: AsyncClient, employee):
        await client.post(
            "/api/v1/departments", json={"name": "Engineering", "budget": {"amount": "1"}}
        )

        response = await client.get("/api/v1/events", params={"category": "department"})
        assert [e["event_type"] for e in response.json()["items"]] == ["DepartmentCreated"]

        response = await client.get("/api/v1/events", params={"event_type": "EmployeeCreated"})
        assert response.json()["total"] == 1

        response = await client.get("/api/v1/events", params={"after_sequence": 1})
        assert response.json()["total"] == 1

    async def test_combined_filters(self, client: AsyncClient, employee):
        await client.put(f"/api/v1/employees/{employee['id']}/suspend")
        await client.put(f"/api/v1/employees/{employee['id']}/reactivate")

        response = await client.get(
            "/api/v1/events",
            params={
                "aggregate_id": employee["id"],
                "event_type": "EmployeeStatusChanged",
                "after_sequence": 2,
            },
        )

        data = response.json()
        assert [e["sequence"] for e in data["items"]] == [3]
        assert data["items"][0]["payload"]["new_status"] == "ACTIVE"

        response = await client.get(
            "/api/v1/events", params={"event_type": "EmployeeCreated", "category": "payroll"}
        )
        assert response.json()["total"] == 0

    async def test_failed_operation_publishes_nothing(self, client: AsyncClient, employee):
        await client.put(
            f"/api/v1/employees/{employee['id']}/promote",
            json={"job_title": "Lead", "salary": {"amount": "1"}},
        )

        response = await client.get("/health")
        assert response.json()["events_recorded"] == 1
