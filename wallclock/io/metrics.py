"""Metrics instrumentation.

Counters live in the default prometheus_client registry. Nothing serves
them; they are read in-process (tests, debugging).
"""

from __future__ import annotations

from prometheus_client import Counter

from ..core.types import Role

updates_total = Counter("wallclock_updates_total", "Clock updates performed")
display_lines_total = Counter(
    "wallclock_display_lines_total", "Lines written by the display worker"
)
interruptions_total = Counter(
    "wallclock_interruptions_total", "Swallowed sleep interruptions", ["role"]
)


def inc_updates(n: int = 1) -> None:
    updates_total.inc(n)


def inc_display_lines(n: int = 1) -> None:
    display_lines_total.inc(n)


def inc_interruptions(role: Role) -> None:
    interruptions_total.labels(role=role.value).inc()
