import time
from typing import Protocol


class Clock(Protocol):
    """Source of wall-clock timestamps, in float seconds since the Unix epoch."""

    def now(self) -> float:
        ...


class SystemClock:
    """Reads the host wall clock; sub-second resolution, not monotonic."""

    def now(self) -> float:
        return time.time()


class ManualClock:
    """Test clock under explicit control.

    Every read returns the current value and then moves it on by ``step``;
    ``step=0`` gives a frozen clock. ``advance`` jumps ahead between reads.
    """

    def __init__(self, start: float, step: float = 0.0) -> None:
        self.value = start
        self.step = step
        self.reads = 0

    def now(self) -> float:
        current = self.value
        self.value += self.step
        self.reads += 1
        return current

    def advance(self, seconds: float) -> None:
        self.value += seconds
