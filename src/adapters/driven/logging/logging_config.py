"""Console logging setup for request core and its adapters."""

import logging

__all__ = ["configure_logs", "HANDLER_NAME"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%d/%m/%y %H:%M:%S"
HANDLER_NAME = "src-console"


def configure_logs(app_level: int = logging.DEBUG) -> None:
    """Configure console logging.

    Sets up:
    - Root logger at INFO level with a single console handler.
    - aiohttp and asyncio loggers at WARNING level.
    - Application loggers (src) at app_level; request build/execution
      traces are logged at DEBUG.

    Calling it again does not stack additional handlers.

    Args:
        app_level: Level of the application loggers.
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("src").setLevel(app_level)
