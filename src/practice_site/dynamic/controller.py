"""
Dynamic content controller.

Simulates an AJAX load: a user action shows a loading indicator, and after
a delay the indicator is replaced by page-defined content.

States: idle -> loading -> loaded. Triggering while loading is ignored, so
at most one simulated request is in flight per controller. Triggering while
loaded starts a fresh cycle.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


def simulated_delay(delay: float, jitter: float = 0.0, rng: random.Random | None = None) -> float:
    """Latency for one simulated request: ``delay + uniform(0, jitter)``."""
    if jitter:
        return delay + (rng or random.Random()).uniform(0, jitter)
    return delay


class ContentState(str, Enum):
    """Lifecycle of a dynamic content region."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Fire-and-forget timer capability."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class DynamicContentController:
    """
    Controls one dynamic content region.

    The region is modelled by three observable attributes:
    ``indicator_visible``, ``content_visible`` and ``content``.

    Usage:
        controller = DynamicContentController("Hello World!", AsyncioScheduler())
        controller.trigger()   # indicator shows
        ...                    # after `delay` seconds the content shows
    """

    def __init__(
        self,
        content: str,
        scheduler: Scheduler,
        delay: float = 2.0,
        jitter: float = 0.0,
        rng: random.Random | None = None,
    ):
        """
        Initialize the controller.

        Args:
            content: Content block shown once loading completes.
            scheduler: Timer used for the simulated latency.
            delay: Fixed part of the simulated latency, in seconds.
            jitter: Upper bound of a random extra delay, in seconds.
            rng: Random source for the jitter.
        """
        if delay < 0 or jitter < 0:
            raise ValueError("delay and jitter must be non-negative")

        self.content = content
        self.delay = delay
        self.jitter = jitter
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._pending: TimerHandle | None = None
        self._listeners: list[Callable[["DynamicContentController"], None]] = []

        self.state = ContentState.IDLE
        self.indicator_visible = False
        self.content_visible = False
        self.load_count = 0

    @property
    def is_loading(self) -> bool:
        return self.state is ContentState.LOADING

    def subscribe(self, listener: Callable[["DynamicContentController"], None]) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def next_delay(self) -> float:
        """Latency for the next simulated request."""
        return simulated_delay(self.delay, self.jitter, self._rng)

    def trigger(self) -> bool:
        """
        Start loading.

        Returns:
            True if a load started, False if one was already in flight.
        """
        if self.state is ContentState.LOADING:
            logger.debug("Load already in flight; ignoring trigger")
            return False

        if self.state is ContentState.LOADED:
            self._set_idle()
            self._notify()

        delay = self.next_delay()
        self.state = ContentState.LOADING
        self.content_visible = False
        self.indicator_visible = True
        self._pending = self._scheduler.call_later(delay, self._complete)
        logger.debug("Loading dynamic content (%.2fs)", delay)
        self._notify()
        return True

    def reset(self) -> None:
        """Cancel any pending load and return to idle."""
        if self._pending is not None:
            self._pending.cancel()
        self._set_idle()
        self._notify()

    def _set_idle(self) -> None:
        self._pending = None
        self.state = ContentState.IDLE
        self.indicator_visible = False
        self.content_visible = False

    def _complete(self) -> None:
        if self.state is not ContentState.LOADING:
            return
        self._pending = None
        self.state = ContentState.LOADED
        self.indicator_visible = False
        self.content_visible = True
        self.load_count += 1
        logger.debug("Dynamic content loaded (count=%d)", self.load_count)
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
