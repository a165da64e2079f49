"""Runtime settings.

Interval and format are fixed; only diagnostics can be tuned through the
environment (or a ``.env`` file): ``WALLCLOCK_DEBUG=1`` enables debug logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

from ..core.types import TIME_FORMAT


@dataclass(frozen=True)
class Settings:
    interval_s: float = 1.0
    time_format: str = TIME_FORMAT
    updater_niceness: int = 5  # updater yields to display
    display_niceness: int = 0
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()
    debug = os.getenv("WALLCLOCK_DEBUG") == "1"
    return Settings(log_level="DEBUG" if debug else "INFO")
