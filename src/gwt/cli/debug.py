"""Debug logging switched on by the GWT_DEBUG environment variable."""

import logging
import os

logger = logging.getLogger("gwt")

if os.getenv("GWT_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def debug_log(message: str) -> None:
    """Record a debug message; only visible when GWT_DEBUG is set."""
    logger.debug(message)
