"""
Employee Service.

Thin HTTP boundary over ``EmployeeClient``: each route calls exactly one
client operation and returns its value. Error mapping lives in
``BaseService``.
"""

from typing import Dict, List, Optional

from shared.base_service import BaseService

from service_employee.app.adapters.employee_client import EmployeeClient
from service_employee.app.models import CreateEmployeeRequest, Employee


class EmployeeService(BaseService):
    """Employee façade service implementation."""

    def __init__(self, client: Optional[EmployeeClient] = None):
        super().__init__("employee", 8111)
        self.client = client or EmployeeClient.from_config(self.config, metrics=self.metrics)
        self.logger.info(
            "Employee service configured",
            upstream_base_url=self.client.base_url,
            max_attempts=self.client.retry_config.max_attempts
        )
        self._setup_employee_routes()

    async def _check_dependencies(self) -> Dict[str, str]:
        """The upstream is not probed; it rate limits aggressively."""
        return {"upstream": self.client.base_url}

    def _setup_employee_routes(self):
        """Set up employee routes."""
        client = self.client

        # Fixed paths are registered before "/{employee_id}" so they win the match.
        @self.app.get("/api/v1/employees", response_model=List[Employee])
        async def get_all_employees():
            """Get all employees."""
            return await client.fetch_all()

        @self.app.get("/api/v1/employees/search/{search_string}", response_model=List[Employee])
        async def search_employees_by_name(search_string: str):
            """Get employees whose name contains the search string."""
            return await client.search_by_name(search_string)

        @self.app.get("/api/v1/employees/highestSalary", response_model=int)
        async def get_highest_salary():
            """Get the highest salary."""
            return await client.highest_salary()

        @self.app.get("/api/v1/employees/topTenHighestEarningEmployeeNames", response_model=List[str])
        async def get_top_ten_highest_earning_employee_names():
            """Get the names of the ten best paid employees."""
            return await client.top_earner_names()

        @self.app.get("/api/v1/employees/{employee_id}", response_model=Employee)
        async def get_employee_by_id(employee_id: str):
            """Get one employee."""
            return await client.fetch_by_id(employee_id)

        @self.app.post("/api/v1/employees", response_model=Employee)
        async def create_employee(request: CreateEmployeeRequest):
            """Create an employee."""
            return await client.create(request)

        @self.app.delete("/api/v1/employees/{employee_id}", response_model=str)
        async def delete_employee_by_id(employee_id: str):
            """Delete an employee and return its name."""
            return await client.delete_by_id(employee_id)


def create_app(client: Optional[EmployeeClient] = None):
    """Create FastAPI application."""
    service = EmployeeService(client)
    return service.app


def main():
    service = EmployeeService()
    service.run()


if __name__ == "__main__":
    main()
