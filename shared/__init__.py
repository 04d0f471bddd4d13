"""
Shared utilities for the employee service.

This package aggregates common building blocks consumed by the service:

- config: Service configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- retry: Explicit retry policy with exponential backoff
- base_service: FastAPI app skeleton, middleware and error mapping

Do not import from service packages into shared/.
"""
