"""Entry point: print the current time every second until killed."""

from __future__ import annotations

import logging

from .main import build_environment, start
from ..config.settings import load_settings
from ..io.logs import configure_logging

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - manual run
    settings = load_settings()
    configure_logging(settings.log_level)
    env = build_environment(settings)
    updater, display = start(env)
    logger.debug("started %s and %s", updater.name, display.name)


if __name__ == "__main__":  # pragma: no cover
    main()
