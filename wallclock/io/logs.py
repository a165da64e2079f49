"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "wallclock-stderr"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Send ``wallclock`` log records to stderr as bare messages.

    Calling it again only changes the level.
    """
    logger = logging.getLogger("wallclock")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
