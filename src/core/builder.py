"""Fluent builder producing HttpRequest instances."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.core.arguments import pair_arguments, validate_arguments
from src.core.errors import InvalidRequestConfigError
from src.core.request import HttpRequest
from src.core.request_config import RequestConfig, require_body_verb, require_hostname
from src.core.verb import HttpVerb

__all__ = ["HttpRequestBuilder", "RequestConfig"]

logger = logging.getLogger(__name__)


class HttpRequestBuilder:
    """Accumulates and validates the configuration of an HttpRequest.

    Verb, hostname and path are mandatory and fixed once the builder exists.
    Arguments and a JSON body are optional and mutually exclusive; each can
    be overwritten until build() is called. build() may be called several
    times, each call producing an independent request.

    Specialized request types do not subclass this builder. They wrap one,
    delegate the shared configuration to it, and construct their own request
    type from config() (see PagedRequestBuilder).

    Not thread-safe; configure and build from a single thread.

    Example:
        request = (
            HttpRequestBuilder(HttpVerb.POST, "www.reddit.com", "/api/login")
            .with_arguments({"user": "alice", "passwd": "hunter2"})
            .build()
        )
    """

    def __init__(self, verb: HttpVerb | str, hostname: str, path: str) -> None:
        """Initialize builder.

        Args:
            verb: HTTP verb to use.
            hostname: Host to use, e.g. "www.reddit.com" or "ssl.reddit.com".
            path: Path of the request, e.g. "/api/login".

        Raises:
            InvalidRequestConfigError: On an unknown verb or empty hostname.
        """
        self._verb = HttpVerb.parse(verb)
        self._hostname = require_hostname(hostname)
        if not isinstance(path, str):
            raise InvalidRequestConfigError(f"Path must be a string (got {path!r})")
        self._path = path
        self._arguments: dict[str, str] | None = None
        self._json_body: Any = None

    @property
    def verb(self) -> HttpVerb:
        return self._verb

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def path(self) -> str:
        return self._path

    def with_arguments(self, arguments: Mapping[str, str]) -> "HttpRequestBuilder":
        """Set the query arguments (GET, DELETE) or form arguments (other verbs).

        Replaces any previously set arguments.

        Raises:
            InvalidRequestConfigError: If a JSON body is already attached or
                the mapping is not str -> str.
        """
        if self._json_body is not None:
            raise InvalidRequestConfigError(
                "A request carries either arguments or a JSON body, not both"
            )
        self._arguments = validate_arguments(arguments)
        return self

    def with_argument_pairs(self, *pairs: object) -> "HttpRequestBuilder":
        """Set arguments from alternating keys and values.

        See pair_arguments() for the accepted input.
        """
        return self.with_arguments(pair_arguments(*pairs))

    def with_json_body(self, body: Any) -> "HttpRequestBuilder":
        """Attach a parsed JSON value as the request body.

        Raises:
            InvalidRequestConfigError: If the verb is GET or DELETE, the body
                is None, or arguments are already set.
        """
        require_body_verb(self._verb)
        if body is None:
            raise InvalidRequestConfigError("JSON body must not be None")
        if self._arguments is not None:
            raise InvalidRequestConfigError(
                "A request carries either arguments or a JSON body, not both"
            )
        self._json_body = body
        return self

    def config(self) -> RequestConfig:
        """Snapshot the current configuration."""
        return RequestConfig(
            verb=self._verb,
            hostname=self._hostname,
            path=self._path,
            arguments=dict(self._arguments or {}),
            json_body=self._json_body,
        )

    def build(self) -> HttpRequest:
        """Create a new HttpRequest from the current configuration."""
        request = HttpRequest(self.config())
        logger.debug(f"Built {request!r}")
        return request
