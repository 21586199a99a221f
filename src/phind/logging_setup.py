"""
Logging configuration for the phind CLI.

Results go to stdout, so all log output goes to stderr. Library modules only
create loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PHIND_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_PACKAGE_LOGGER = "phind"


def configure_logging(log_level: str | None = None) -> logging.Logger:
    """
    Attach a stderr handler to the `phind` logger.

    Level precedence: `log_level` argument > `PHIND_LOG_LEVEL` > WARNING.
    Unknown level names fall back to WARNING. Safe to call more than once;
    earlier handlers are replaced.
    """
    level_str = log_level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    level = getattr(logging, level_str.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
