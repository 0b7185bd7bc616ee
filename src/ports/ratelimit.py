"""Rate limiter port definition (interface)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.core.request import HttpRequest

__all__ = ["RateLimiterPort"]


class RateLimiterPort(Protocol):
    """Interface for throttling dispatch based on execution timestamps.

    Implementations only read HttpRequest.executed_at and never mutate a
    request.
    """

    def record(self, request: HttpRequest, /, at: datetime | None = None) -> None:
        """Take note of one wire send of an executed request.

        Args:
            request: Request whose executed_at is set.
            at: Time of this send; defaults to request.executed_at. Retried
                sends pass their own time.
        """
        ...

    def delay_sec(self, now: datetime, /) -> float:
        """Seconds to wait before the next request may be dispatched.

        Args:
            now: Current time.

        Returns:
            Non-negative delay in seconds.
        """
        ...

    def __str__(self) -> str:
        """Return concise textual summary for humans."""
        ...
