"""Prints the shared clock, one line per tick."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .base import Worker
from ..core.clock import Clock
from ..core.pacer import Pacer
from ..core.types import Role
from ..io.metrics import inc_display_lines


class Display(Worker):
    role = Role.DISPLAY

    def __init__(
        self,
        clock: Clock,
        pacer: Optional[Pacer] = None,
        interval_s: float = 1.0,
        niceness: int = 0,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(clock, pacer, interval_s, niceness)
        self.stream = stream

    def step(self) -> None:
        # resolve stdout late so redirection (and capsys) is honored
        stream = self.stream if self.stream is not None else sys.stdout
        print(self.clock.read(), file=stream, flush=True)
        inc_display_lines()
