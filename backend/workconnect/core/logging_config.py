import logging

from workconnect.core.config import settings


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Configure plain-text logging for the application.

    Uses a single format with time, level, logger name and message.
    """
    if logging.getLogger().handlers:
        # Already configured (avoid duplicate handlers under reload or tests)
        return
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    logging.basicConfig(level=level.upper(), format=fmt)
