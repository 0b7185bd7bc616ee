"""Settings port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["TransportSettingsPort"]


@dataclass
class TransportSettingsPort:
    """Runtime settings for the HTTP transport.

    Decouples the transport from concrete configuration sources, enabling
    easy testing and implementation swapping.

    Attributes:
        scheme: URL scheme used to reach hosts ("http" or "https").
        timeout_sec: Total timeout of one request in seconds.
        user_agent: Value of the User-Agent header.
        max_requests: Requests allowed per rate-limit window.
        window_sec: Length of the rate-limit window in seconds.
    """

    scheme: str = "https"
    timeout_sec: float = 30.0
    user_agent: str = "python:http-request-core:v0.1.0"
    max_requests: int = 60
    window_sec: float = 60.0
