"""Root logger setup for the HRMS service."""
import logging
import sys
from typing import Optional

from hrms.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stdout handler.

    Does nothing if the root logger already has handlers, which happens when
    the app factory runs more than once or under a test runner.

    Args:
        level: Log level name. Falls back to LOG_LEVEL from settings.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or get_settings().log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # pymongo is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
