"""Root logger setup applied once by the application factory."""
import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL (idempotent)."""
    global _configured
    if _configured:
        return

    level = getattr(logging, get_settings().log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _configured = True
