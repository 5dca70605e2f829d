"""The frame loop: asset delivery, update pacing and stopping."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Optional, Protocol, Union

from storm.assets import Asset
from storm.events import AssetRead, Event, Update

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class _AssetSource(Protocol):
    def try_pop_read(self) -> Optional[Asset]: ...


class _Poll:
    """Control flow that runs the loop again without waiting."""


_POLL = _Poll()
_Flow = Union[_Poll, float]


class Context:
    """Runs an event handler, pacing Update events and delivering finished asset reads."""

    def __init__(
        self,
        assets: _AssetSource,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._assets = assets
        self._clock = clock
        self._stop = False
        self._running = False
        self._pending_flow: Optional[_Flow] = _POLL
        self._flow: _Flow = _POLL
        now = clock()
        self._last_update = now
        self._wait_next = now
        self._wait_periodic: Optional[float] = None

    @property
    def stopped(self) -> bool:
        """Whether a stop has been requested."""
        return self._stop

    @property
    def next_update(self) -> float:
        """The earliest instant at which the next Update may be sent."""
        return self._wait_next

    def request_stop(self) -> None:
        """Stop the loop after the current iteration."""
        self._stop = True

    def wait_for(self, duration: float) -> None:
        """Hold back the next Update for at least `duration` seconds."""
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration!r}")
        self.wait_until(self._clock() + duration)

    def wait_until(self, instant: float) -> None:
        """Hold back the next Update until `instant`, if that is later than planned."""
        if instant > self._wait_next:
            self._wait_next = instant
            self._pending_flow = instant

    def wait_periodic(self, duration: Optional[float]) -> None:
        """Send Update no more often than every `duration` seconds; None disables it."""
        if duration is not None and duration < 0:
            raise ValueError(f"duration must not be negative, got {duration!r}")
        self._wait_periodic = duration

    def main_events_cleared(self, handler: Handler) -> bool:
        """Deliver finished asset reads, then an Update if one is due. Returns whether it was."""
        while (asset := self._assets.try_pop_read()) is not None:
            handler(AssetRead(asset))

        now = self._clock()
        if now < self._wait_next:
            return False
        if self._wait_periodic is not None:
            self._wait_next += self._wait_periodic
            if self._wait_next < now:
                self._wait_next = now
            self._pending_flow = self._wait_next
        delta = now - self._last_update
        self._last_update = now
        handler(Update(delta))
        return True

    def run(
        self,
        handler_creator: Callable[[], Handler],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Create the handler and run the loop until a stop is requested."""
        if self._running:
            raise RuntimeError("the context is already running")
        self._running = True
        logger.info("Starting the frame loop.")
        try:
            handler = handler_creator()
            while True:
                self.main_events_cleared(handler)
                if self._stop:
                    break
                if self._pending_flow is not None:
                    self._flow = self._pending_flow
                    self._pending_flow = None
                if not isinstance(self._flow, _Poll):
                    remaining = self._flow - self._clock()
                    if remaining > 0:
                        sleep(remaining)
        finally:
            self._stop = True
            logger.info("The frame loop has stopped.")