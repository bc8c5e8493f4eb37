"""
Logger configuration.

Single console handler with ISO timestamps, installed once by the
application factory.  Modules obtain loggers with
``logging.getLogger(__name__)``.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a timestamped console handler."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Engine echo is controlled by settings.DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
