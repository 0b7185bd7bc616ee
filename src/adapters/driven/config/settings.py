"""Configuration loading from environment variables."""

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.ports.settings import TransportSettingsPort

__all__ = ["Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Runtime configuration for the HTTP transport.

    Attributes:
        scheme: URL scheme used to reach hosts.
        timeout_sec: Total timeout of one request in seconds (must be positive).
        user_agent: User-Agent header sent with every request.
        max_requests: Requests allowed per rate-limit window (must be positive).
        window_sec: Rate-limit window in seconds (must be positive).
    """

    scheme: Literal["http", "https"] = Field(default="https", description="URL scheme.")
    timeout_sec: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")
    user_agent: str = Field(
        default="python:http-request-core:v0.1.0",
        description="User-Agent header sent with every request.",
    )
    max_requests: int = Field(default=60, gt=0, description="Requests per rate-limit window.")
    window_sec: float = Field(default=60.0, gt=0, description="Rate-limit window in seconds.")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Validate that the User-Agent is not blank.

        Args:
            v: User-Agent to validate.

        Returns:
            The stripped User-Agent.

        Raises:
            ValueError: If the value is blank.
        """
        if not v.strip():
            raise ValueError("User-Agent must not be blank")
        return v.strip()

    def to_port(self) -> TransportSettingsPort:
        """Wrap settings into the port consumed by the transport."""
        return TransportSettingsPort(
            scheme=self.scheme,
            timeout_sec=self.timeout_sec,
            user_agent=self.user_agent,
            max_requests=self.max_requests,
            window_sec=self.window_sec,
        )


def _read_number(name: str, default: str, kind: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        value = kind(raw)
        if value <= 0:
            raise ValueError("Must be positive")
    except ValueError as e:
        raise RuntimeError(f"{name} must be a positive {kind.__name__} (got: {raw})") from e
    return value


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Optional environment variables:
    - HTTP_SCHEME: "http" or "https" (default https).
    - HTTP_TIMEOUT_SECONDS: Positive number (default 30).
    - HTTP_USER_AGENT: Non-blank User-Agent header.
    - RATE_LIMIT_MAX_REQUESTS: Positive integer (default 60).
    - RATE_LIMIT_WINDOW_SECONDS: Positive number (default 60).

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If a numeric variable is malformed or not positive.
        ValueError: If configuration is invalid.
    """
    timeout_sec = _read_number("HTTP_TIMEOUT_SECONDS", "30", float)
    max_requests = _read_number("RATE_LIMIT_MAX_REQUESTS", "60", int)
    window_sec = _read_number("RATE_LIMIT_WINDOW_SECONDS", "60", float)

    settings = Settings(
        scheme=os.getenv("HTTP_SCHEME", "https").lower(),
        timeout_sec=timeout_sec,
        user_agent=os.getenv("HTTP_USER_AGENT", "python:http-request-core:v0.1.0"),
        max_requests=max_requests,
        window_sec=window_sec,
    )

    logger.info(
        f"Transport configured: scheme={settings.scheme}, "
        f"timeout={settings.timeout_sec}s, "
        f"rate_limit={settings.max_requests}/{settings.window_sec}s"
    )

    return settings
