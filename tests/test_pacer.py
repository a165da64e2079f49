import threading
import time

import pytest

from wallclock.core.errors import SleepInterrupted, WallclockError
from wallclock.core.pacer import Pacer


def test_speed_compresses_sleep():
    pacer = Pacer(speed=100.0)
    t0 = time.monotonic()
    pacer.sleep(1.0)
    assert time.monotonic() - t0 < 0.5


def test_negative_sleep_returns_immediately():
    Pacer().sleep(-5)


def test_interrupt_wakes_sleeper_with_reason():
    pacer = Pacer()
    timer = threading.Timer(0.05, pacer.interrupt, args=("wake up",))
    timer.start()
    t0 = time.monotonic()
    with pytest.raises(SleepInterrupted, match="wake up"):
        pacer.sleep(10.0)
    assert time.monotonic() - t0 < 5.0
    timer.join()


def test_pending_interrupt_is_consumed_once():
    pacer = Pacer(speed=100.0)
    pacer.interrupt()
    assert pacer.interrupted
    with pytest.raises(SleepInterrupted):
        pacer.sleep(1.0)
    assert not pacer.interrupted
    pacer.sleep(1.0)


def test_sleep_interrupted_is_wallclock_error():
    assert issubclass(SleepInterrupted, WallclockError)
