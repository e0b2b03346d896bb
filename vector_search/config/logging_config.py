"""
Logging configuration.

Every module gets its logger through get_logger(__name__) so records keep
the package hierarchy. setup_logging() is called once by the app factory.
"""

# Python Packages
import logging
import sys

# Constants
from ..base import constants


_logging_configured = False





def setup_logging(log_level: str = None) -> logging.Logger:
    """
    Configure console logging for the application.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: LOG_LEVEL)

    Returns:
        The package logger.
    """

    global _logging_configured

    package_logger = logging.getLogger("vector_search")

    if _logging_configured:
        return package_logger

    level = getattr(logging, (log_level or constants.LOG_LEVEL).upper(), logging.INFO)

    # Format: timestamp | level | module:line | message
    formatter = logging.Formatter(
        fmt = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt = "%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    package_logger.setLevel(level)
    package_logger.addHandler(console_handler)

    # SDK transports log every request at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)

    _logging_configured = True
    package_logger.debug(f"Logging configured: level={logging.getLevelName(level)}")

    return package_logger



def get_logger(name: str) -> logging.Logger:
    """ Get a logger for a module, normally called with __name__... """

    return logging.getLogger(name)
