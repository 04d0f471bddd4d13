"""
Retry policy for resilient upstream exchanges.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple, Type

from shared.logging import get_logger


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 5
    base_delay: float = 10.0
    max_delay: float = 60.0
    exponential_base: float = 2.0
    jitter: bool = True


class RetryError(Exception):
    """Exception raised when all retry attempts are exhausted."""
    def __init__(self, message: str, last_exception: Exception, attempts: int):
        super().__init__(message)
        self.last_exception = last_exception
        self.attempts = attempts


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Calculate the wait after a failed attempt (1-based)."""
    delay = config.base_delay * (config.exponential_base ** (attempt - 1))

    # Apply max delay cap
    delay = min(delay, config.max_delay)

    if config.jitter:
        jitter_amount = delay * 0.1  # 10% jitter
        delay += random.uniform(-jitter_amount, jitter_amount)

    return min(max(0.0, delay), config.max_delay)


class RetryPolicy:
    """Runs an async operation under a bounded exponential-backoff retry loop.

    The policy only holds immutable configuration, so a single instance can
    be shared by any number of concurrent callers. Each ``run`` keeps its own
    attempt accounting.
    """

    def __init__(self,
                 config: Optional[RetryConfig] = None,
                 name: str = "default",
                 sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
                 on_retry: Optional[Callable[[int, Exception], None]] = None):
        self.config = config or RetryConfig()
        self.name = name
        self._sleep = sleep
        self._on_retry = on_retry
        self.logger = get_logger(f"retry.{name}")

    async def run(self,
                  func: Callable[[], Awaitable[Any]],
                  give_up_on: Tuple[Type[BaseException], ...] = ()) -> Any:
        """Call ``func`` until it succeeds or the attempt budget is spent.

        Exceptions listed in ``give_up_on`` are re-raised straight away.
        Every other exception is retried; once ``max_attempts`` calls have
        failed a ``RetryError`` carrying the last exception is raised.
        """
        config = self.config
        last_exception: Optional[Exception] = None

        for attempt in range(1, config.max_attempts + 1):
            try:
                self.logger.debug(
                    "Retry attempt",
                    attempt=attempt,
                    max_attempts=config.max_attempts,
                    operation=self.name
                )

                result = await func()

                if attempt > 1:
                    self.logger.info(
                        "Retry succeeded",
                        attempt=attempt,
                        operation=self.name
                    )

                return result

            except give_up_on:
                raise
            except Exception as e:
                last_exception = e

                if attempt == config.max_attempts:
                    break

                delay = calculate_delay(attempt, config)

                self.logger.warning(
                    "Retry attempt failed, waiting before next attempt",
                    attempt=attempt,
                    delay=round(delay, 3),
                    operation=self.name,
                    error=str(e) or type(e).__name__
                )

                if self._on_retry is not None:
                    self._on_retry(attempt, e)

                await self._sleep(delay)

        self.logger.error(
            "All retry attempts exhausted",
            max_attempts=config.max_attempts,
            operation=self.name,
            error=str(last_exception)
        )
        raise RetryError(
            f"Operation {self.name} failed after {config.max_attempts} attempts",
            last_exception=last_exception,
            attempts=config.max_attempts
        )
