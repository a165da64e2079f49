"""Keeps the shared clock fresh."""

from __future__ import annotations

from .base import Worker
from ..core.types import Role
from ..io.metrics import inc_updates


class Updater(Worker):
    role = Role.UPDATER

    def step(self) -> None:
        self.clock.update()
        inc_updates()
