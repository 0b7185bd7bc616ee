"""In-memory sliding-window rate limiter driven by request execution times."""

from __future__ import annotations

from collections import deque
from datetime import datetime

from src.core.request import HttpRequest
from src.ports.ratelimit import RateLimiterPort

__all__ = ["SlidingWindowRateLimiter"]


class SlidingWindowRateLimiter(RateLimiterPort):
    """Allow at most max_requests dispatches per window_sec seconds.

    Keeps the execution timestamps of the most recent max_requests requests;
    the next dispatch must wait until the oldest of them has left the window.

    Not thread-safe; create one instance per event loop.
    """

    def __init__(self, *, max_requests: int = 60, window_sec: float = 60.0) -> None:
        """Initialize rate limiter.

        Args:
            max_requests: Requests allowed inside one window.
            window_sec: Length of the window in seconds.
        """
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if window_sec <= 0:
            raise ValueError("window_sec must be positive")
        self._window: deque[datetime] = deque(maxlen=max_requests)
        self._window_sec = window_sec
        self._total_seen: int = 0

    def record(self, request: HttpRequest, at: datetime | None = None) -> None:
        """Record one wire send of an executed request.

        Args:
            request: Request that has been marked as executed.
            at: Time of this send; defaults to request.executed_at.

        Raises:
            ValueError: If the request has not been executed.
        """
        executed_at = request.executed_at
        if executed_at is None:
            raise ValueError(f"Cannot record a request that has not been executed: {request!r}")
        self._window.append(at if at is not None else executed_at)
        self._total_seen += 1

    def delay_sec(self, now: datetime) -> float:
        """Return seconds until another request fits in the window."""
        if len(self._window) < (self._window.maxlen or 0):
            return 0.0
        elapsed = (now - self._window[0]).total_seconds()
        return max(0.0, self._window_sec - elapsed)

    def __str__(self) -> str:
        """Return human-readable one-line summary for logging.

        Returns:
            Formatted rate limiter string.
        """
        if not self._window:
            return "RateLimiter: no requests yet"

        return (
            f"win={len(self._window)}/{self._window.maxlen} per {self._window_sec:g}s | "
            f"last={self._window[-1].isoformat()} | "
            f"total={self._total_seen}"
        )
