from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from ..infrastructure.logging import get_logger
from ..ports.scheduler import Cancellable

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Handler = Callable[[T], Awaitable[None]]
ErrorHandler = Callable[[Exception], None]


class Subscription:
    """Cancellation handle for one subscriber of a stream."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._handle: Optional[Cancellable] = None
        self._active = True
        self.error: Optional[BaseException] = None

    @property
    def active(self) -> bool:
        return self._active

    def _bind(self, handle: Cancellable) -> None:
        self._handle = handle

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._handle is not None:
            self._handle.cancel()
        logger.debug("subscription_cancelled", stream=self.label)

    def _fail(self, exc: Exception) -> None:
        if not self._active:
            return
        self.error = exc
        logger.error("subscriber_failed", stream=self.label, error=str(exc))
        self.cancel()


class Stream(Generic[T]):
    """Cold push stream: every subscribe starts an independent source.

    ``source`` receives the downstream handler and an error callback, and
    returns the handle that stops the underlying producer. Stages report
    failures through the error callback rather than raising into the producer.
    """

    def __init__(
        self, source: Callable[[Handler[T], ErrorHandler], Cancellable], label: str = "stream"
    ) -> None:
        self._source = source
        self.label = label

    def map(self, transform: Callable[[T], R], label: Optional[str] = None) -> "Stream[R]":
        upstream = self._source

        def source(handler: Handler[R], on_error: ErrorHandler) -> Cancellable:
            async def forward(value: T) -> None:
                try:
                    result = transform(value)
                except Exception as exc:
                    on_error(exc)
                    return
                await handler(result)

            return upstream(forward, on_error)

        return Stream(source, label or self.label)

    def subscribe(self, handler: Handler[T]) -> Subscription:
        """Start delivering values to ``handler`` until the returned subscription is cancelled.

        Scheduler registration errors propagate from this call. A failing
        handler or transform closes the subscription and is kept on ``error``.
        """
        subscription = Subscription(self.label)

        async def deliver(value: Any) -> None:
            if not subscription.active:
                return
            try:
                await handler(value)
            except Exception as exc:
                subscription._fail(exc)

        subscription._bind(self._source(deliver, subscription._fail))
        logger.debug("subscription_started", stream=self.label)
        return subscription
