"""Errors raised by the request core."""

from __future__ import annotations

from datetime import datetime

__all__ = ["RequestError", "InvalidRequestConfigError", "AlreadyExecutedError"]


class RequestError(Exception):
    """Base class for all request core errors."""


class InvalidRequestConfigError(RequestError, ValueError):
    """A request builder was configured in a way the request cannot honour."""


class AlreadyExecutedError(RequestError, RuntimeError):
    """A request was marked as executed more than once.

    Attributes:
        executed_at: Timestamp recorded by the first (successful) call.
    """

    def __init__(self, executed_at: datetime) -> None:
        super().__init__(f"Already executed ({executed_at.isoformat()})")
        self.executed_at = executed_at
