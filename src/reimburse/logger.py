"""Logging configuration for reimburse.

Log records go to stderr so they never mix with command output.
"""

import logging

LOGGER_NAME = "reimburse"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Set up application logging with a console handler.

    Args:
        level: Log level name (e.g. "DEBUG", "INFO", "WARNING")

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level name is not a logging level
    """
    level_name = level.strip().upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError(f"Unknown log level '{level}'")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_name)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level_name)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the application logger, or a child of it.

    Args:
        name: Optional child logger suffix (e.g. "calculations")

    Returns:
        The reimburse logger instance
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
