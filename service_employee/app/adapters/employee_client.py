"""
Upstream employee-record service client.

Every public method performs one logical upstream operation and returns
either a domain value or raises ``NotFoundError`` / ``UpstreamFailureError``.
Transport exceptions never escape this module.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

import httpx

from shared.config import BaseConfig
from shared.errors import NotFoundError, UpstreamFailureError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from shared.retry import RetryConfig, RetryError, RetryPolicy

from service_employee.app.domain import aggregations
from service_employee.app.models import (
    CreateEmployeeRequest,
    DeleteAckEnvelope,
    Employee,
    EmployeeEnvelope,
    EmployeeListEnvelope,
    EnvelopeT,
    decode_envelope,
)


class EmployeeClient:
    """Client for the upstream employee-record service."""

    def __init__(self,
                 base_url: str,
                 retry_config: Optional[RetryConfig] = None,
                 timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
                 metrics: Optional[MetricsCollector] = None):
        self.base_url = base_url.rstrip('/')
        self.retry_config = retry_config or RetryConfig()
        self.timeout = timeout
        self.metrics = metrics
        self._transport = transport
        self._sleep = sleep
        self.logger = get_logger("employee.upstream_client")

    @classmethod
    def from_config(cls, config: BaseConfig, **kwargs) -> "EmployeeClient":
        """Build a client from process configuration."""
        return cls(
            config.upstream_base_url,
            retry_config=config.retry_config(),
            timeout=config.upstream_timeout_seconds,
            **kwargs
        )

    async def fetch_all(self) -> List[Employee]:
        """Fetch the full employee collection; empty when upstream sends no data."""
        self.logger.info("Fetching all employees")
        envelope = await self._exchange("fetch_all", "GET", self.base_url, EmployeeListEnvelope)
        self._record("fetch_all", "success")
        return list(envelope.data or [])

    async def fetch_by_id(self, employee_id: str) -> Employee:
        """Fetch one employee."""
        self.logger.info("Fetching employee", employee_id=employee_id)
        envelope = await self._exchange(
            "fetch_by_id",
            "GET",
            f"{self.base_url}/{employee_id}",
            EmployeeEnvelope,
            not_found_id=employee_id
        )

        if envelope.data is None:
            self.logger.info("Employee not found", employee_id=employee_id, reason="empty data")
            self._record("fetch_by_id", "not_found")
            raise NotFoundError(employee_id)

        self._record("fetch_by_id", "success")
        return envelope.data

    async def create(self, request: CreateEmployeeRequest) -> Employee:
        """Create an employee and return the record upstream assigned."""
        payload = request.to_payload()
        self.logger.info("Creating employee", name=request.name, title=request.title)
        envelope = await self._exchange(
            "create",
            "POST",
            self.base_url,
            EmployeeEnvelope,
            json=payload,
            require_data=True
        )

        self._record("create", "success")
        return envelope.data

    async def delete_by_id(self, employee_id: str) -> str:
        """Delete an employee by id and return its name.

        The upstream deletes by name, so the record is resolved first
        (``NotFoundError`` propagates unchanged). The boolean acknowledgement
        is logged but not required: the resolved name is returned even when
        upstream answers ``false``.
        """
        self.logger.info("Deleting employee", employee_id=employee_id)
        employee = await self.fetch_by_id(employee_id)

        envelope = await self._exchange(
            "delete",
            "DELETE",
            self.base_url,
            DeleteAckEnvelope,
            json={"name": employee.name}
        )

        if envelope.data is not True:
            self.logger.warning(
                "Delete was not acknowledged, returning resolved name anyway",
                employee_id=employee_id,
                name=employee.name,
                acknowledged=envelope.data
            )

        self._record("delete", "success")
        return employee.name

    async def search_by_name(self, term: str) -> List[Employee]:
        """Employees whose name contains ``term`` (case-insensitive)."""
        self.logger.info("Searching employees by name", term=term)
        return aggregations.search_by_name(await self.fetch_all(), term)

    async def highest_salary(self) -> int:
        """Highest salary across all employees, 0 when there are none."""
        self.logger.info("Fetching highest salary")
        return aggregations.highest_salary(await self.fetch_all())

    async def top_earner_names(self, limit: int = aggregations.TOP_EARNERS_LIMIT) -> List[str]:
        """Names of the best paid employees, highest first."""
        self.logger.info("Fetching top earning employee names", limit=limit)
        return aggregations.top_earner_names(await self.fetch_all(), limit)

    async def _exchange(self,
                        operation: str,
                        method: str,
                        url: str,
                        envelope_cls: Type[EnvelopeT],
                        json: Optional[Dict[str, Any]] = None,
                        not_found_id: Optional[str] = None,
                        require_data: bool = False) -> EnvelopeT:
        """Run one upstream request under the retry policy and decode it.

        With ``require_data`` a 2xx envelope without ``data`` counts as a
        failed attempt and is retried like any other.
        """

        async def _request() -> EnvelopeT:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=json)

            if response.status_code == 404 and not_found_id is not None:
                self.logger.info("Employee not found", employee_id=not_found_id, url=url)
                raise NotFoundError(not_found_id)

            if response.is_error:
                self.logger.warning(
                    "Upstream request failed",
                    operation=operation,
                    url=url,
                    status_code=response.status_code
                )
            response.raise_for_status()
            envelope = decode_envelope(response, envelope_cls)

            if require_data and envelope.data is None:
                self.logger.warning(
                    "Upstream response carried no data",
                    operation=operation,
                    url=url,
                    status=envelope.status,
                    error=envelope.error
                )
                raise UpstreamFailureError(
                    f"Upstream {operation} response carried no data",
                    details={"status": envelope.status, "error": envelope.error}
                )

            return envelope

        policy = RetryPolicy(
            self.retry_config,
            name=operation,
            sleep=self._sleep,
            on_retry=self._on_retry(operation)
        )

        try:
            return await policy.run(_request, give_up_on=(NotFoundError,))
        except NotFoundError:
            self._record(operation, "not_found")
            raise
        except RetryError as exc:
            self.logger.error(
                "Upstream operation failed",
                operation=operation,
                url=url,
                attempts=exc.attempts,
                error=str(exc.last_exception)
            )
            self._record(operation, "failure")
            raise UpstreamFailureError(
                f"Upstream {operation} failed after {exc.attempts} attempts",
                cause=exc.last_exception,
                details={"operation": operation, "attempts": exc.attempts}
            ) from exc.last_exception

    def _on_retry(self, operation: str) -> Optional[Callable[[int, Exception], None]]:
        if self.metrics is None:
            return None
        return lambda attempt, error: self.metrics.record_upstream_retry(operation)

    def _record(self, operation: str, outcome: str) -> None:
        if self.metrics is not None:
            self.metrics.record_upstream_outcome(operation, outcome)
