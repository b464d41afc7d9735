"""Process-wide logging setup."""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG").
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Avoid duplicate handlers if logging is already configured
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
