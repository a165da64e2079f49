"""Exception hierarchy for wallclock."""


class WallclockError(Exception):
    """Base exception."""


class SleepInterrupted(WallclockError):
    """A worker's sleep was interrupted before the interval elapsed."""
