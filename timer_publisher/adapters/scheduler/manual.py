from typing import Awaitable, Callable, List

from ...ports.scheduler import SchedulerPort


class ManualRegistration:
    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]]) -> None:
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(SchedulerPort):
    """Scheduler that only fires when advanced explicitly (used in tests)."""

    def __init__(self) -> None:
        self.registrations: List[ManualRegistration] = []

    def schedule_periodic(self, interval: float, callback: Callable[[], Awaitable[None]]) -> ManualRegistration:
        registration = ManualRegistration(interval, callback)
        self.registrations.append(registration)
        return registration

    @property
    def active(self) -> List[ManualRegistration]:
        return [r for r in self.registrations if not r.cancelled]

    async def advance(self, ticks: int = 1) -> None:
        """Fire every live registration ``ticks`` times, in registration order."""
        for _ in range(ticks):
            for registration in list(self.registrations):
                if not registration.cancelled:
                    await registration.callback()
