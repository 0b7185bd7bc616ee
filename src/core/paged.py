"""Requests against paginated listing endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from src.core.builder import HttpRequestBuilder
from src.core.errors import InvalidRequestConfigError
from src.core.request import HttpRequest
from src.core.request_config import RequestConfig
from src.core.verb import HttpVerb

__all__ = ["PagedRequest", "PagedRequestBuilder"]


class PagedRequest(HttpRequest):
    """HttpRequest for one page of a listing.

    Adds a page size (limit) and a cursor (after) that are sent alongside
    the regular arguments.
    """

    __slots__ = ("_limit", "_after", "_page_arguments")

    def __init__(
        self,
        config: RequestConfig,
        *,
        limit: int | None = None,
        after: str | None = None,
    ) -> None:
        super().__init__(config)
        self._limit = limit
        self._after = after

        arguments = dict(config.arguments)
        if limit is not None:
            arguments["limit"] = str(limit)
        if after is not None:
            arguments["after"] = after
        self._page_arguments = MappingProxyType(arguments)

    @property
    def limit(self) -> int | None:
        return self._limit

    @property
    def after(self) -> str | None:
        return self._after

    @property
    def arguments(self) -> Mapping[str, str]:
        return self._page_arguments

    def next_page(self, after: str) -> "PagedRequestBuilder":
        """Return a builder for the page that follows the given cursor."""
        builder = PagedRequestBuilder(self.verb, self.hostname, self.path)
        builder.with_arguments(self._config.arguments).with_after(after)
        if self._limit is not None:
            builder.with_limit(self._limit)
        return builder


class PagedRequestBuilder:
    """Builder for PagedRequest.

    Wraps an HttpRequestBuilder for the shared configuration. Listings carry
    no body, so no JSON body can be attached.
    """

    def __init__(self, verb: HttpVerb | str, hostname: str, path: str) -> None:
        self._base = HttpRequestBuilder(verb, hostname, path)
        self._limit: int | None = None
        self._after: str | None = None

    def with_arguments(self, arguments: Mapping[str, str]) -> "PagedRequestBuilder":
        self._base.with_arguments(arguments)
        return self

    def with_argument_pairs(self, *pairs: object) -> "PagedRequestBuilder":
        self._base.with_argument_pairs(*pairs)
        return self

    def with_limit(self, limit: int) -> "PagedRequestBuilder":
        """Set the maximum number of items per page.

        Raises:
            InvalidRequestConfigError: If limit is not a positive integer.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidRequestConfigError(f"Page limit must be a positive integer (got {limit!r})")
        self._limit = limit
        return self

    def with_after(self, after: str | None) -> "PagedRequestBuilder":
        self._after = after
        return self

    def build(self) -> PagedRequest:
        return PagedRequest(self._base.config(), limit=self._limit, after=self._after)
