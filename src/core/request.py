"""Immutable description of a single outbound HTTP request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from src.core.execution import ExecutionStamp
from src.core.request_config import RequestConfig
from src.core.verb import HttpVerb
from src.ports.clock import Clock, utc_now

__all__ = ["HttpRequest"]

logger = logging.getLogger(__name__)


class HttpRequest:
    """All the attributes of a RESTful HTTP request in one object.

    Instances are created by HttpRequestBuilder.build() (or a specialized
    builder) from a validated RequestConfig. Everything except the execution
    timestamp is fixed at construction; the timestamp is set exactly once by
    mark_executed(), normally by the transport that dispatches the request.

    Safe to share between readers (transport, logging, rate limiter) once
    built.
    """

    __slots__ = ("_config", "_executed")

    def __init__(self, config: RequestConfig) -> None:
        if not isinstance(config, RequestConfig):
            raise TypeError(f"Expected RequestConfig, got {type(config).__name__}")
        self._config = config
        self._executed = ExecutionStamp()

    @property
    def verb(self) -> HttpVerb:
        return self._config.verb

    @property
    def hostname(self) -> str:
        return self._config.hostname

    @property
    def path(self) -> str:
        """Path relative to the root of the host."""
        return self._config.path

    @property
    def arguments(self) -> Mapping[str, str]:
        """Query string arguments for GET/DELETE, form arguments otherwise."""
        return self._config.arguments

    @property
    def json_body(self) -> Any:
        return self._config.json_body

    @property
    def has_json_body(self) -> bool:
        return self._config.has_json_body

    @property
    def executed_at(self) -> datetime | None:
        """Time this request was executed, or None if it hasn't been yet.

        Mainly used for rate limiting.
        """
        return self._executed.value

    @property
    def is_executed(self) -> bool:
        return self._executed.is_set

    def mark_executed(self, clock: Clock = utc_now) -> datetime:
        """Take note of the time this request is dispatched.

        Args:
            clock: Source of the current time.

        Returns:
            The recorded timestamp.

        Raises:
            AlreadyExecutedError: If the request was already marked. The first
                timestamp is kept.
        """
        executed_at = self._executed.set(clock())
        logger.debug(f"{self.verb} {self.hostname}{self.path} executed at {executed_at.isoformat()}")
        return executed_at

    def _render_fields(self) -> list[str]:
        fields = [
            f"verb={self.verb}",
            f"path={self.path!r}",
            f"arguments={dict(self.arguments)!r}",
            f"hostname={self.hostname!r}",
        ]
        if self.has_json_body:
            # Payloads may hold credentials; never render them.
            fields.append("json=<redacted>")
        executed = self.executed_at.isoformat() if self.executed_at else None
        fields.append(f"executed_at={executed!r}")
        return fields

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._render_fields())})"
