from typing import Optional

from ..adapters.scheduler.asyncio_scheduler import AsyncioScheduler
from ..domain.models import (
    DEFAULT_INTERVAL,
    CountdownArgs,
    Interval,
    Timestamp,
    resolve_interval,
    validate_interval,
    validate_seconds,
)
from ..infrastructure.clock import Clock, SystemClock
from ..infrastructure.logging import get_logger
from ..ports.scheduler import Cancellable, SchedulerPort
from .stream import ErrorHandler, Handler, Stream

logger = get_logger(__name__)


class TimerPublisher:
    """Builds tick, elapsed and countdown streams over a clock and a periodic scheduler."""

    DEFAULT_INTERVAL = DEFAULT_INTERVAL

    def __init__(
        self,
        clock: Optional[Clock] = None,
        scheduler: Optional[SchedulerPort] = None,
        default_interval: Interval = DEFAULT_INTERVAL,
    ) -> None:
        self.clock = clock or SystemClock()
        self.scheduler = scheduler or AsyncioScheduler()
        self.default_interval = validate_interval(default_interval)

    def tick(self, interval: Optional[Interval] = None) -> Stream[Timestamp]:
        """Wall-clock timestamps every ``interval`` seconds, starting one interval after subscribe."""
        period = validate_interval(resolve_interval(interval, self.default_interval))
        clock = self.clock
        scheduler = self.scheduler

        def source(handler: Handler[Timestamp], on_error: ErrorHandler) -> Cancellable:
            async def fire() -> None:
                try:
                    now = clock.now()
                except Exception as exc:
                    on_error(exc)
                    return
                await handler(now)

            return scheduler.schedule_periodic(period, fire)

        return Stream(source, label=f"tick[{period}]")

    def elapsed(self, reference_time: Timestamp, interval: Optional[Interval] = None) -> Stream[float]:
        """Seconds between each tick and ``reference_time``; negative while the reference is ahead."""
        validate_seconds("reference_time", reference_time)
        return self.tick(interval).map(lambda timestamp: timestamp - reference_time, label="elapsed")

    def countdown(self, args: CountdownArgs) -> Stream[float]:
        """``args.countdown_from`` minus elapsed time. Carries on below zero until cancelled."""
        interval = resolve_interval(args.interval, self.default_interval)
        if args.countdown_from < 0:
            logger.debug("countdown_starts_negative", countdown_from=args.countdown_from)
        return self.elapsed(args.reference_time, interval).map(
            lambda elapsed: args.countdown_from - elapsed, label="countdown"
        )


_default_publisher = TimerPublisher()


def tick(interval: Interval = DEFAULT_INTERVAL) -> Stream[Timestamp]:
    return _default_publisher.tick(interval)


def elapsed(reference_time: Timestamp, interval: Interval = DEFAULT_INTERVAL) -> Stream[float]:
    return _default_publisher.elapsed(reference_time, interval)


def countdown(args: CountdownArgs) -> Stream[float]:
    return _default_publisher.countdown(args)
