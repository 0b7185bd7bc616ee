"""Retry logic for transient HTTP errors."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import wraps

import aiohttp
from aiohttp import ClientResponse

__all__ = ["retry", "RETRYABLE_ERRORS"]

logger = logging.getLogger(__name__)

# Exceptions considered transient and eligible for retry
RETRYABLE_ERRORS = (
    aiohttp.ClientConnectorError,  # Connection refused, DNS failed
    aiohttp.ClientConnectionError,  # Connection error
    aiohttp.ClientOSError,  # OS-level network error
    aiohttp.ServerTimeoutError,  # Server timeout
)

AsyncHttpFn = Callable[..., Awaitable[ClientResponse]]


def retry(
    times: int = 3,
    delay_sec: tuple[float, ...] = (0.2, 0.5, 1.0),
) -> Callable[[AsyncHttpFn], AsyncHttpFn]:
    """Decorate async HTTP function with exponential backoff retry.

    Retries on transient connection errors only. Anything else, including
    request core errors, propagates on the first attempt.

    Args:
        times: Number of attempts (1 = no retry).
        delay_sec: Delays between attempts in seconds.

    Returns:
        Decorator function.

    Example:
        @retry(times=3, delay_sec=(0.2, 0.5, 1.0))
        async def _dispatch(self, request):
            return await self.session.request(...)
    """

    def decorator(func: AsyncHttpFn) -> AsyncHttpFn:
        @wraps(func)
        async def wrapper(*args: object, **kwargs: object) -> ClientResponse:
            for attempt in range(times):
                try:
                    return await func(*args, **kwargs)
                except RETRYABLE_ERRORS as e:
                    if attempt == times - 1:
                        logger.debug(f"Retry exhausted after {times} attempts: {e}")
                        raise
                    delay_idx = min(attempt, len(delay_sec) - 1)
                    logger.debug(f"Transient error on attempt {attempt + 1}/{times}: {e}")
                    await asyncio.sleep(delay_sec[delay_idx])

            raise RuntimeError("Retry wrapper exhausted")

        return wrapper

    return decorator
