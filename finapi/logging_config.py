"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler.
Every module logs through ``logging.getLogger(__name__)`` so records
carry the module path as the logger name.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Calling this again (tests, repeated app creation) is a no-op
    when handlers are already attached.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive. Unknown names fall
        back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
