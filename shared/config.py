"""
Shared configuration management for the employee service.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.retry import RetryConfig


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="EMPLOYEE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Upstream employee-record service
    upstream_base_url: str = "http://localhost:8112/api/v1/employee"
    upstream_timeout_seconds: float = 10.0

    # Retry policy applied to every upstream exchange
    retry_max_attempts: int = 5
    retry_base_delay_seconds: float = 10.0
    retry_multiplier: float = 2.0
    retry_max_delay_seconds: float = 60.0
    retry_jitter: bool = True

    def retry_config(self) -> RetryConfig:
        """Build the retry policy configuration."""
        return RetryConfig(
            max_attempts=self.retry_max_attempts,
            base_delay=self.retry_base_delay_seconds,
            max_delay=self.retry_max_delay_seconds,
            exponential_base=self.retry_multiplier,
            jitter=self.retry_jitter
        )


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port)
