import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional


Timestamp = float
Interval = float

DEFAULT_INTERVAL: Interval = 0.5


class InvalidInterval(ValueError):
    """Raised when a tick interval is not a positive, finite number of seconds."""


def validate_interval(interval: object) -> Interval:
    """Return ``interval`` as a float, or raise InvalidInterval."""
    if isinstance(interval, bool) or not isinstance(interval, Real):
        raise InvalidInterval(f"Interval must be a number of seconds, got {interval!r}")
    value = float(interval)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInterval(f"Interval must be positive and finite, got {interval!r}")
    return value


def validate_seconds(name: str, value: object) -> float:
    """Return ``value`` as a float; TypeError for non-numbers, ValueError for NaN or infinity."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number of seconds, got {value!r}")
    seconds = float(value)
    if not math.isfinite(seconds):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return seconds


def resolve_interval(interval: Optional[Interval], default: Interval = DEFAULT_INTERVAL) -> Interval:
    if interval is None:
        return default
    return interval


@dataclass(frozen=True)
class CountdownArgs:
    """Configuration for one countdown stream.

    ``interval`` of None means the publisher's default interval is used.
    A negative ``countdown_from`` is accepted and simply starts below zero.
    """

    countdown_from: float
    reference_time: Timestamp
    interval: Optional[Interval] = None

    def __post_init__(self) -> None:
        validate_seconds("countdown_from", self.countdown_from)
        validate_seconds("reference_time", self.reference_time)
        if self.interval is not None:
            validate_interval(self.interval)
