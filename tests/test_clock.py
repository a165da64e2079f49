import re
import threading
from datetime import datetime, timedelta

from wallclock.core.clock import Clock

PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2} \d{2}-\d{2}-\d{4}$")


def test_update_formats_known_time():
    clock = Clock(now=lambda: datetime(2024, 6, 5, 14, 3, 7))
    clock.update()
    assert clock.read() == "14:03:07 05-06-2024"


def test_read_before_update_is_empty():
    assert Clock().read() == ""


def test_read_after_update_matches_pattern():
    clock = Clock()
    clock.update()
    assert PATTERN.match(clock.read())


def test_read_is_idempotent_without_update():
    clock = Clock()
    clock.update()
    first = clock.read()
    assert all(clock.read() == first for _ in range(100))


def test_afternoon_hours_use_24h_clock():
    clock = Clock(now=lambda: datetime(2024, 12, 31, 23, 59, 59))
    clock.update()
    assert clock.read() == "23:59:59 31-12-2024"


def test_concurrent_reads_never_torn():
    start = datetime(2024, 1, 1)
    produced = set()
    ticks = iter(range(2000))
    produced_lock = threading.Lock()

    def now():
        value = start + timedelta(seconds=next(ticks))
        with produced_lock:
            produced.add(value.strftime("%H:%M:%S %d-%m-%Y"))
        return value

    clock = Clock(now=now)
    clock.update()
    seen = []

    def writer():
        for _ in range(1999):
            clock.update()

    def reader():
        for _ in range(2000):
            seen.append(clock.read())

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert seen
    assert set(seen) <= produced
