"""Shared clock holding the most recently formatted timestamp."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable

from .types import TIME_FORMAT, format_timestamp


class Clock:
    """Latest timestamp string, guarded by a single lock.

    ``update`` and ``read`` are mutually exclusive, so a reader always sees
    either the previous value or the new one. Before the first update the
    stored value is the empty string.
    """

    def __init__(
        self,
        now: Callable[[], datetime] = datetime.now,
        fmt: str = TIME_FORMAT,
    ):
        self._now = now
        self._fmt = fmt
        self._lock = threading.Lock()
        self._current = ""

    def update(self) -> None:
        with self._lock:
            self._current = format_timestamp(self._now(), self._fmt)

    def read(self) -> str:
        with self._lock:
            return self._current
