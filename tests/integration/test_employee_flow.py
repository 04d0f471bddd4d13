"""
Integration tests: Employee Service against the mock upstream server.
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from mocks.employee_api.server import MockEmployeeServer
from service_employee.app.adapters.employee_client import EmployeeClient
from service_employee.app.main import create_app
from service_employee.app.models import CreateEmployeeRequest
from shared.errors import NotFoundError, UpstreamFailureError
from shared.retry import RetryConfig

BASE_URL = "http://upstream.test/api/v1/employee"


@pytest.fixture
def upstream():
    """Mock upstream seeded with four employees."""
    return MockEmployeeServer(employees=[
        {"id": "1", "name": "John Doe", "salary": 100000},
        {"id": "2", "name": "Jane Smith", "salary": 120000},
        {"id": "3", "name": "Alice Johnson", "salary": 90000},
        {"id": "4", "name": "Bob Brown", "salary": 110000},
    ])


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def employee_client(upstream, sleep):
    return EmployeeClient(
        BASE_URL,
        retry_config=RetryConfig(jitter=False),
        transport=httpx.ASGITransport(app=upstream.app),
        sleep=sleep
    )


class TestEmployeeFlow:
    """End-to-end flows through the client and the mock upstream."""

    @pytest.mark.asyncio
    async def test_aggregations(self, employee_client):
        assert await employee_client.highest_salary() == 120000
        assert await employee_client.top_earner_names() == ["Jane Smith", "Bob Brown", "John Doe", "Alice Johnson"]
        assert [e.name for e in await employee_client.search_by_name("jane")] == ["Jane Smith"]

    @pytest.mark.asyncio
    async def test_create_then_delete(self, employee_client, upstream):
        created = await employee_client.create(
            CreateEmployeeRequest(name="Charlie Day", salary=95000, age=41, title="Manager")
        )
        assert created.name == "Charlie Day"
        assert created.id in upstream.employees

        assert await employee_client.delete_by_id(created.id) == "Charlie Day"
        assert created.id not in upstream.employees

        with pytest.raises(NotFoundError):
            await employee_client.fetch_by_id(created.id)

    @pytest.mark.asyncio
    async def test_rate_limiting_is_absorbed(self, employee_client, upstream, sleep):
        upstream.rate_limited_requests = 4

        employees = await employee_client.fetch_all()

        assert len(employees) == 4
        assert upstream.request_count == 5
        assert sleep.await_count == 4

    @pytest.mark.asyncio
    async def test_persistent_rate_limiting_fails(self, employee_client, upstream):
        upstream.rate_limited_requests = 100

        with pytest.raises(UpstreamFailureError):
            await employee_client.fetch_all()

        assert upstream.request_count == 5

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_retried(self, employee_client, upstream, sleep):
        with pytest.raises(NotFoundError):
            await employee_client.delete_by_id("does-not-exist")

        assert upstream.request_count == 1
        sleep.assert_not_awaited()


def test_service_routes_against_mock_upstream(employee_client):
    client = TestClient(create_app(employee_client))

    assert client.get("/api/v1/employees/highestSalary").json() == 120000
    assert client.get("/api/v1/employees/2").json()["name"] == "Jane Smith"
    assert client.get("/api/v1/employees/nope").status_code == 404
    assert client.delete("/api/v1/employees/4").json() == "Bob Brown"
    assert len(client.get("/api/v1/employees").json()) == 3
