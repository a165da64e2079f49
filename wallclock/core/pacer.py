"""Interruptible sleep used to pace worker loops."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .errors import SleepInterrupted


@dataclass
class Pacer:
    speed: float = 1.0  # 1.0 = real-time; >1 faster in tests
    _wake: threading.Event = field(default_factory=threading.Event, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _reason: str = field(default="", repr=False)

    def sleep(self, seconds: float) -> None:
        """Wait ``seconds`` (scaled by ``speed``).

        Raises SleepInterrupted if ``interrupt`` was called during the wait
        or since the previous sleep; the pending interrupt is consumed.
        """
        if self._wake.wait(max(0.0, seconds) / max(1e-9, self.speed)):
            with self._lock:
                reason = self._reason
                self._reason = ""
                self._wake.clear()
            raise SleepInterrupted(reason)

    def interrupt(self, reason: str = "sleep interrupted") -> None:
        with self._lock:
            self._reason = reason
            self._wake.set()

    @property
    def interrupted(self) -> bool:
        return self._wake.is_set()
