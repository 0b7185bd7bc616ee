"""Write-once execution timestamp."""

from __future__ import annotations

import threading
from datetime import datetime

from src.core.errors import AlreadyExecutedError

__all__ = ["ExecutionStamp"]


class ExecutionStamp:
    """Cell that accepts exactly one timestamp over its lifetime.

    The check-and-set in set() is atomic, so concurrent writers cannot both
    succeed. Reads never block on a completed stamp.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self) -> None:
        self._value: datetime | None = None
        self._lock = threading.Lock()

    @property
    def value(self) -> datetime | None:
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def set(self, when: datetime) -> datetime:
        """Record the timestamp.

        Args:
            when: Time the request was dispatched.

        Returns:
            The recorded timestamp.

        Raises:
            AlreadyExecutedError: If a timestamp was already recorded. The
                stored value is left untouched.
        """
        with self._lock:
            if self._value is not None:
                raise AlreadyExecutedError(self._value)
            self._value = when
        return when

    def __repr__(self) -> str:
        return f"ExecutionStamp({self._value!r})"
