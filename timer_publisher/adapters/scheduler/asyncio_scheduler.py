import asyncio
from typing import Awaitable, Callable, Optional, Set

from ...infrastructure.logging import get_logger
from ...ports.scheduler import SchedulerPort

logger = get_logger(__name__)


class PeriodicTask:
    """Handle for one periodic registration running as an asyncio task."""

    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]]) -> None:
        self.interval = interval
        self._callback = callback
        self._cancelled = False
        self.task: Optional[asyncio.Task[None]] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        # From inside the callback, let the current delivery finish; the run loop exits after it.
        if self.task is not None and not self._inside_task():
            self.task.cancel()

    def _inside_task(self) -> bool:
        try:
            return asyncio.current_task() is self.task
        except RuntimeError:
            return False

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.interval
        while not self._cancelled:
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            if self._cancelled:
                return
            try:
                await self._callback()
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.error("periodic_callback_failed", interval=self.interval, error=str(exc))
                self._cancelled = True
                return
            # Fixed-rate: a late tick does not push back the ones after it.
            deadline += self.interval


class AsyncioScheduler(SchedulerPort):
    """Periodic scheduler running each registration as a task on the running event loop."""

    def __init__(self) -> None:
        self._tasks: Set[asyncio.Task[None]] = set()

    def schedule_periodic(self, interval: float, callback: Callable[[], Awaitable[None]]) -> PeriodicTask:
        loop = asyncio.get_running_loop()
        handle = PeriodicTask(interval, callback)
        handle.task = loop.create_task(handle.run())
        self._tasks.add(handle.task)
        handle.task.add_done_callback(self._tasks.discard)
        return handle

    @property
    def running(self) -> int:
        return len(self._tasks)
