"""
Logging setup.

Analytics modules log through ``logging.getLogger(__name__)``; this
configures the root handler once at application start.
"""

import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply *level* (default ``settings.LOG_LEVEL``; DEBUG when ``settings.DEBUG``)."""
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level.upper())
