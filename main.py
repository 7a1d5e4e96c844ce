import asyncio

from timer_publisher import config
from timer_publisher.application.publisher import TimerPublisher
from timer_publisher.domain.models import CountdownArgs
from timer_publisher.infrastructure.clock import Clock
from timer_publisher.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEMO_COUNTDOWN_FROM = 3.0
DEMO_TICKS = 8


async def run() -> None:
    components = config.build_components()
    configure_logging(components["settings"].logging.level)
    clock: Clock = components["clock"]
    publisher: TimerPublisher = components["publisher"]

    done = asyncio.Event()
    received = 0
    args = CountdownArgs(countdown_from=DEMO_COUNTDOWN_FROM, reference_time=clock.now())

    async def on_countdown(remaining: float) -> None:
        nonlocal received
        received += 1
        logger.info("countdown", remaining=round(remaining, 3), tick=received)
        if received >= DEMO_TICKS:
            subscription.cancel()
            done.set()

    subscription = publisher.countdown(args).subscribe(on_countdown)
    await done.wait()


if __name__ == "__main__":
    asyncio.run(run())
