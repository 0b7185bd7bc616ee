"""Configuration validator for container orchestration."""

import logging

from src.adapters.driven.config.settings import load_settings
from src.adapters.driven.logging.logging_config import configure_logs

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Run configuration check.

    Validates:
    - Numeric environment variables are well formed and positive.
    - Scheme and User-Agent are acceptable.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        _ = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(f"Transport configuration check FAILED: {exc}")
        return 1

    logger.info("Transport configuration check OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
