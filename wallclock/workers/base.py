"""Worker base class: a paced loop around a single step."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..core.clock import Clock
from ..core.errors import SleepInterrupted
from ..core.pacer import Pacer
from ..core.types import Role
from ..io.metrics import inc_interruptions
from ..sched.priority import apply_priority_hint

logger = logging.getLogger(__name__)


class Worker(ABC):
    role: Role

    def __init__(
        self,
        clock: Clock,
        pacer: Optional[Pacer] = None,
        interval_s: float = 1.0,
        niceness: int = 0,
    ):
        self.clock = clock
        self.pacer = pacer or Pacer()
        self.interval_s = interval_s
        self.niceness = niceness

    @abstractmethod
    def step(self) -> None: ...

    def run(self, iterations: Optional[int] = None) -> None:
        """Loop step + sleep; forever unless ``iterations`` is given.

        An interrupted sleep is logged and the loop goes on.
        """
        apply_priority_hint(self.niceness)
        done = 0
        while iterations is None or done < iterations:
            self.step()
            done += 1
            try:
                self.pacer.sleep(self.interval_s)
            except SleepInterrupted as e:
                inc_interruptions(self.role)
                logger.warning("%s thread interrupted: %s", self.role.value, e)

    def interrupt(self, reason: str = "sleep interrupted") -> None:
        self.pacer.interrupt(reason)
