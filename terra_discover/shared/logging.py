"""
Logging configuration for the application.

One stdout handler with a ``time | level | logger | message`` line
format. Modules log through ``logging.getLogger(__name__)``.
Never logs passwords, password hashes, tokens or raw request payloads.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that only add noise at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx", "multipart")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Install the application log handler.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Emit every SQL statement through the same handler.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQLAlchemy logs statements at INFO on this logger
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
