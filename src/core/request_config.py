"""Validated snapshot of a request's configuration."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.core.arguments import validate_arguments
from src.core.errors import InvalidRequestConfigError
from src.core.verb import HttpVerb

__all__ = ["RequestConfig", "require_hostname", "require_body_verb"]


def require_hostname(hostname: str) -> str:
    """Raise InvalidRequestConfigError unless hostname is a non-empty string."""
    if not isinstance(hostname, str) or not hostname.strip():
        raise InvalidRequestConfigError(f"Hostname must be a non-empty string (got {hostname!r})")
    return hostname


def require_body_verb(verb: HttpVerb) -> HttpVerb:
    """Raise InvalidRequestConfigError if verb cannot carry a request body."""
    if not verb.carries_body:
        raise InvalidRequestConfigError(
            f"Can't attach a JSON body to a {verb} request: {verb} sends its "
            "arguments in the query string"
        )
    return verb


def _no_arguments() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RequestConfig:
    """Immutable configuration a request is built from.

    Validation runs on construction, so every request built from a
    RequestConfig satisfies the same invariants as its builder. Arguments
    and the JSON body are copied, so later changes to the caller's objects
    do not reach the snapshot.

    Attributes:
        verb: HTTP verb.
        hostname: Target host, e.g. "www.reddit.com".
        path: Path relative to the host root, e.g. "/api/login".
        arguments: Query (GET/DELETE) or form (other verbs) arguments.
        json_body: Parsed JSON value sent as the body, or None.
    """

    verb: HttpVerb
    hostname: str
    path: str
    arguments: Mapping[str, str] = field(default_factory=_no_arguments)
    json_body: Any = None

    def __post_init__(self) -> None:
        verb = HttpVerb.parse(self.verb)
        require_hostname(self.hostname)
        if not isinstance(self.path, str):
            raise InvalidRequestConfigError(f"Path must be a string (got {self.path!r})")
        arguments = validate_arguments(self.arguments)

        if self.json_body is not None:
            require_body_verb(verb)
            if arguments:
                raise InvalidRequestConfigError(
                    "A request carries either arguments or a JSON body, not both"
                )

        object.__setattr__(self, "verb", verb)
        object.__setattr__(self, "arguments", MappingProxyType(arguments))
        object.__setattr__(self, "json_body", copy.deepcopy(self.json_body))

    @property
    def has_json_body(self) -> bool:
        return self.json_body is not None
