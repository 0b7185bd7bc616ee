"""HTTP transport adapter dispatching HttpRequest descriptors with aiohttp."""

import asyncio
import logging
from types import TracebackType

import aiohttp
from aiohttp import ClientResponse, ClientTimeout

from src.adapters.driven.http.retry import retry
from src.core.request import HttpRequest
from src.ports.clock import Clock, utc_now
from src.ports.http import TransportPort
from src.ports.ratelimit import RateLimiterPort
from src.ports.settings import TransportSettingsPort

__all__ = ["HttpTransport"]

logger = logging.getLogger(__name__)

REQUEST_RETRIES = 3
FIRST_FAILING_HTTP_CODE = 400


class HttpTransport(TransportPort):
    """Transport sending HttpRequest descriptors over aiohttp.

    Features:
    - Marks every request as executed exactly once, at dispatch time.
    - Optional rate limiting based on execution timestamps.
    - Retry with exponential backoff on transient connection errors,
      for idempotent verbs only.
    - Context manager for proper resource cleanup.
    """

    def __init__(
        self,
        settings: TransportSettingsPort | None = None,
        rate_limiter: RateLimiterPort | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize transport.

        Args:
            settings: Scheme, timeout and User-Agent to use.
            rate_limiter: Optional limiter consulted before each dispatch.
            clock: Source of the execution timestamps.
        """
        self.settings = settings or TransportSettingsPort()
        self.rate_limiter = rate_limiter
        self.clock = clock
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpTransport":
        """Enter async context manager (start session).

        Returns:
            Self for use in async with statement.
        """
        self.session = aiohttp.ClientSession(
            timeout=ClientTimeout(total=self.settings.timeout_sec),
            headers={"User-Agent": self.settings.user_agent},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Exit async context manager (close session)."""
        if self.session:
            await self.session.close()

    def url_for(self, request: HttpRequest) -> str:
        """Absolute URL of a request, e.g. https://www.reddit.com/api/login."""
        path = request.path if request.path.startswith("/") else f"/{request.path}"
        return f"{self.settings.scheme}://{request.hostname}{path}"

    @staticmethod
    def request_kwargs(request: HttpRequest) -> dict[str, object]:
        """Map a request's arguments or JSON body onto aiohttp keyword arguments.

        GET and DELETE send arguments as the query string. Other verbs send the
        JSON body when there is one, and form-encoded arguments otherwise.
        """
        if not request.verb.carries_body:
            return {"params": dict(request.arguments)}
        if request.has_json_body:
            return {"json": request.json_body}
        return {"data": dict(request.arguments)}

    async def _wait_for_rate_limit(self) -> None:
        if self.rate_limiter is None:
            return
        delay = self.rate_limiter.delay_sec(self.clock())
        if delay > 0:
            logger.info(f"Rate limit reached, sleeping {delay:.2f}s ({self.rate_limiter})")
            await asyncio.sleep(delay)

    async def _dispatch(self, request: HttpRequest) -> ClientResponse:
        """Single HTTP request, one wire send.

        Raises:
            RuntimeError: If session not initialized.
            aiohttp exceptions: Network/timeout errors.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")

        return await self.session.request(
            request.verb.value,
            self.url_for(request),
            **self.request_kwargs(request),
        )

    async def send(self, request: HttpRequest) -> ClientResponse:
        """Dispatch a request and return its response.

        Idempotent verbs (GET, PUT, DELETE) are retried on transient errors;
        POST and PATCH are sent at most once. Every wire send, retries
        included, waits for and is recorded by the rate limiter.

        Args:
            request: Request that has not been executed yet.

        Returns:
            HTTP response.

        Raises:
            AlreadyExecutedError: If the request was already dispatched.
        """
        await self._wait_for_rate_limit()
        request.mark_executed(self.clock)

        sends = 0

        async def attempt() -> ClientResponse:
            nonlocal sends
            if sends:
                await self._wait_for_rate_limit()
            sent_at = request.executed_at if not sends else self.clock()
            sends += 1
            if self.rate_limiter is not None:
                self.rate_limiter.record(request, sent_at)
            return await self._dispatch(request)

        times = REQUEST_RETRIES if request.verb.is_idempotent else 1
        resp = await retry(times=times)(attempt)()

        if resp.status >= FIRST_FAILING_HTTP_CODE:
            logger.warning(f"{request.verb} {self.url_for(request)} returned status {resp.status}")
        else:
            logger.info(f"{request.verb} {self.url_for(request)} returned status {resp.status}")
        return resp
