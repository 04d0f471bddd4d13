"""
Unit tests for shared errors, configuration and logging helpers.
"""

import pytest

from shared.config import BaseConfig, get_config
from shared.errors import EmployeeServiceException, NotFoundError, UpstreamFailureError
from shared.logging import clear_context, request_id_var, set_request_id


class TestErrors:
    """Test cases for the error taxonomy."""

    def test_not_found(self):
        error = NotFoundError("42")

        assert isinstance(error, EmployeeServiceException)
        assert error.resource_id == "42"
        assert error.code == "NOT_FOUND"
        assert error.to_response().model_dump() == {
            "code": "NOT_FOUND",
            "message": "Employee not found with id: 42",
            "details": {"resource_id": "42"},
        }

    def test_upstream_failure_keeps_cause(self):
        cause = ConnectionError("refused")
        error = UpstreamFailureError("Upstream fetch_all failed after 5 attempts", cause=cause,
                                     details={"attempts": 5})

        assert error.cause is cause
        assert error.code == "UPSTREAM_FAILURE"
        assert error.details == {"attempts": 5, "cause": "ConnectionError: refused"}
        assert str(error) == "Upstream fetch_all failed after 5 attempts"

    def test_upstream_failure_without_cause(self):
        error = UpstreamFailureError()
        assert error.cause is None
        assert error.details == {}


class TestConfig:
    """Test cases for configuration loading."""

    def test_defaults(self, monkeypatch):
        for key in ["EMPLOYEE_UPSTREAM_BASE_URL", "EMPLOYEE_RETRY_MAX_ATTEMPTS"]:
            monkeypatch.delenv(key, raising=False)

        retry = BaseConfig().retry_config()

        assert retry.max_attempts == 5
        assert retry.base_delay == 10.0
        assert retry.exponential_base == 2.0
        assert retry.max_delay == 60.0
        assert retry.jitter is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("EMPLOYEE_UPSTREAM_BASE_URL", "http://upstream.internal/api/v1/employee")
        monkeypatch.setenv("EMPLOYEE_RETRY_MAX_ATTEMPTS", "3")
        monkeypatch.setenv("EMPLOYEE_RETRY_JITTER", "false")

        config = get_config("employee", 8111)

        assert config.service_name == "employee"
        assert config.port == 8111
        assert config.upstream_base_url == "http://upstream.internal/api/v1/employee"
        assert config.retry_config().max_attempts == 3
        assert config.retry_config().jitter is False


class TestLoggingContext:
    """Test cases for request correlation context."""

    def test_set_and_clear_request_id(self):
        assert set_request_id("req-1") == "req-1"
        assert request_id_var.get() == "req-1"

        clear_context()
        assert request_id_var.get() is None

    def test_generates_request_id(self):
        request_id = set_request_id()
        assert request_id
        clear_context()
