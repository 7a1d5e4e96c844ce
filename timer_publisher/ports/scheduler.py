from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Protocol


class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


class SchedulerPort(ABC):
    """Abstract periodic scheduler driving tick sources."""

    @abstractmethod
    def schedule_periodic(self, interval: float, callback: Callable[[], Awaitable[None]]) -> Cancellable:
        """Call ``callback`` every ``interval`` seconds, first after one interval, until cancelled."""
        raise NotImplementedError
