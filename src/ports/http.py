"""HTTP transport port definition (interface)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from aiohttp import ClientResponse

if TYPE_CHECKING:
    from src.core.request import HttpRequest

__all__ = ["TransportPort"]


class TransportPort(Protocol):
    """Interface of the component that puts requests on the wire.

    Decouples callers building requests from the HTTP implementation.
    Implementations must call HttpRequest.mark_executed() exactly once per
    request, at dispatch time.
    """

    async def send(self, request: HttpRequest, /) -> ClientResponse:
        """Dispatch a request and return its response.

        Args:
            request: Fully built request that has not been executed yet.

        Returns:
            HTTP response.
        """
        ...
