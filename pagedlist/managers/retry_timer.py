"""Cancel-safe one-second countdown gating a retry action."""

import logging
from typing import Callable, Optional

from pagedlist.core.protocols import Scheduler
from pagedlist.domain import CountdownSnapshot

logger = logging.getLogger("PagedList.RetryTimer")


class RetryTimer:
    """Counts down once per second and unlocks its action at zero."""

    def __init__(
        self,
        scheduler: Scheduler,
        seconds: int,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expired: Optional[Callable[[], None]] = None,
    ):
        """Initialize RetryTimer.

        Args:
            scheduler: Scheduler driving the periodic tick
            seconds: Countdown length
            on_tick: Called with the remaining seconds after every tick
            on_expired: Called once when the countdown reaches zero
        """
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        self.scheduler = scheduler
        self.seconds = seconds
        self.on_tick = on_tick
        self.on_expired = on_expired
        self.remaining_seconds = seconds
        self.active = False
        self._source_id: Optional[int] = None

    @property
    def expired(self) -> bool:
        return not self.active and self.remaining_seconds == 0

    def start(self) -> None:
        """Start (or restart) the countdown from the full length."""
        self.cancel()
        self.remaining_seconds = self.seconds

        if self.seconds == 0:
            self._expire()
            return

        self.active = True
        self._source_id = self.scheduler.call_every_second(self._tick)
        logger.debug(f"Countdown started at {self.seconds}s")

    def cancel(self) -> None:
        """Stop the countdown. No-op if it is not running."""
        if not self.active:
            return

        self.active = False
        if self._source_id is not None:
            self.scheduler.cancel(self._source_id)
            self._source_id = None

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            remaining_seconds=self.remaining_seconds, active=self.active
        )

    def _tick(self) -> bool:
        if not self.active:
            return False

        self.remaining_seconds -= 1
        if self.remaining_seconds <= 0:
            self.remaining_seconds = 0
            # The source is dropped by returning False, not via cancel().
            self.active = False
            self._source_id = None
            self._expire()
            return False

        if self.on_tick:
            self.on_tick(self.remaining_seconds)
        return True

    def _expire(self) -> None:
        logger.debug("Countdown expired")
        if self.on_expired:
            self.on_expired()
