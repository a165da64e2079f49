"""Core type definitions shared by the clock and its workers."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

# 24-hour clock, zero padded: 14:03:07 05-06-2024
TIME_FORMAT = "%H:%M:%S %d-%m-%Y"


class Role(str, Enum):
    UPDATER = "Updater"
    DISPLAY = "Display"


def format_timestamp(dt: datetime, fmt: str = TIME_FORMAT) -> str:
    return dt.strftime(fmt)
