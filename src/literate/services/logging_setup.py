"""Application-wide logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> int:
    """
    Configure root logging for the application.

    Unknown level names fall back to WARNING.

    Returns:
        The numeric level that was applied.
    """
    numeric_level = logging.getLevelName(level.strip().upper()) if level else logging.WARNING
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("literate").setLevel(numeric_level)
    return numeric_level
