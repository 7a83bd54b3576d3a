"""Logging configuration for clerc-core.

Modules log through ``logging.getLogger(__name__)``; this module only sets
levels and the output format once, at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Client libraries are noisy at INFO
QUIET_LOGGERS = ("pymongo", "urllib3")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger and quiet third-party client loggers."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("clerc_core").setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
