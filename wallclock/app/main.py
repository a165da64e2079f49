"""App bootstrap: one clock, two workers, two threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, TextIO, Tuple

from ..config.settings import Settings
from ..core.clock import Clock
from ..core.pacer import Pacer
from ..workers.display import Display
from ..workers.updater import Updater


@dataclass
class Environment:
    clock: Clock
    updater: Updater
    display: Display


def build_environment(
    settings: Optional[Settings] = None,
    now: Callable[[], datetime] = datetime.now,
    speed: float = 1.0,
    stream: Optional[TextIO] = None,
) -> Environment:
    settings = settings or Settings()
    clock = Clock(now=now, fmt=settings.time_format)
    updater = Updater(
        clock,
        Pacer(speed=speed),
        interval_s=settings.interval_s,
        niceness=settings.updater_niceness,
    )
    display = Display(
        clock,
        Pacer(speed=speed),
        interval_s=settings.interval_s,
        niceness=settings.display_niceness,
        stream=stream,
    )
    return Environment(clock, updater, display)


def start(
    env: Environment,
    iterations: Optional[int] = None,
    daemon: bool = False,
) -> Tuple[threading.Thread, threading.Thread]:
    """Start updater then display; threads are not joined here."""
    updater = threading.Thread(
        target=env.updater.run, args=(iterations,), name="updater", daemon=daemon
    )
    display = threading.Thread(
        target=env.display.run, args=(iterations,), name="display", daemon=daemon
    )
    updater.start()
    display.start()
    return updater, display
