"""
Mock upstream employee-record server.

Mirrors the upstream wire contract: every response is wrapped in
``{"data": ..., "status": ...}``, records use ``employee_``-prefixed keys and
deletion is keyed by name. A configurable number of requests can be
answered with 429 to exercise client retries.
"""

import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from shared.logging import get_logger


class CreateEmployeeInput(BaseModel):
    name: str = Field(min_length=1)
    salary: int = Field(gt=0)
    age: int = Field(ge=0)
    title: str = Field(min_length=1)


class DeleteEmployeeInput(BaseModel):
    name: str = Field(min_length=1)


class MockEmployeeServer:
    """Mock employee-record server implementation."""

    def __init__(self, employees: Optional[List[Dict[str, Any]]] = None, rate_limited_requests: int = 0):
        self.logger = get_logger("mock.employee_api")
        self.app = FastAPI(title="Mock Employee API", version="1.0.0")

        self.employees: Dict[str, Dict[str, Any]] = {}
        for employee in employees or []:
            self.add_employee(**employee)

        # Requests left to reject with 429 before serving normally
        self.rate_limited_requests = rate_limited_requests
        self.request_count = 0

        self._setup_routes()

    def add_employee(self, name: str, salary: int, age: int = 30, title: str = "Engineer",
                     id: Optional[str] = None) -> Dict[str, Any]:
        """Insert a record in wire format."""
        employee_id = id or str(uuid.uuid4())
        record = {
            "id": employee_id,
            "employee_name": name,
            "employee_salary": salary,
            "employee_age": age,
            "employee_title": title,
            "employee_email": f"{name.split()[0].lower()}@company.com",
        }
        self.employees[employee_id] = record
        return record

    def _throttle(self) -> Optional[JSONResponse]:
        self.request_count += 1
        if self.rate_limited_requests > 0:
            self.rate_limited_requests -= 1
            self.logger.info("Rate limiting request", remaining=self.rate_limited_requests)
            return JSONResponse(status_code=429, content={"status": "Too many requests"})
        return None

    def _setup_routes(self):
        """Set up mock routes."""

        @self.app.get("/api/v1/employee")
        async def list_employees():
            throttled = self._throttle()
            if throttled:
                return throttled
            return {"data": list(self.employees.values()), "status": "Successfully processed request."}

        @self.app.get("/api/v1/employee/{employee_id}")
        async def get_employee(employee_id: str):
            throttled = self._throttle()
            if throttled:
                return throttled
            record = self.employees.get(employee_id)
            if record is None:
                return JSONResponse(status_code=404, content={"status": "Not found"})
            return {"data": record, "status": "Successfully processed request."}

        @self.app.post("/api/v1/employee")
        async def create_employee(body: CreateEmployeeInput):
            throttled = self._throttle()
            if throttled:
                return throttled
            record = self.add_employee(body.name, body.salary, body.age, body.title)
            return {"data": record, "status": "Successfully processed request."}

        @self.app.delete("/api/v1/employee")
        async def delete_employee(body: DeleteEmployeeInput):
            throttled = self._throttle()
            if throttled:
                return throttled
            for employee_id, record in list(self.employees.items()):
                if record["employee_name"] == body.name:
                    del self.employees[employee_id]
                    return {"data": True, "status": "Successfully processed request."}
            return {"data": False, "status": "Successfully processed request."}


def create_app():
    """Create mock employee API application."""
    server = MockEmployeeServer()
    return server.app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8112)
