"""Rate limiting for requests made to the NS API."""

import collections
import logging
import threading
import time
import typing as t

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class RateLimiter:
    """
    Class that keeps track of request slots to ensure safely staying below a ratelimit.

    Every admitted request claims a slot that expires `period` seconds after the
    request is allowed to proceed. At most `quota` slots may be live at once;
    once the quota is reached, the next request waits for the slot `quota`
    positions back to expire, which smooths bursts instead of rejecting them.

    Slots are reserved under a lock in call order, so waiters are admitted FIFO
    even when the limiter is shared between threads.
    Expired slots are cleaned up whenever the limiter is consulted.
    """

    def __init__(
        self,
        quota: int = 49,
        period: float = 30,
        *,
        clock: t.Callable[[], float] = time.monotonic,
        sleep: t.Callable[[float], None] = time.sleep,
    ) -> None:
        """Constructs a RateLimiter using direct arguments.
        quota: The maximum number of requests allowed within any trailing period.
        period: The length of the window (in seconds).
        clock and sleep can be replaced, e.g. with a fake clock in tests.
        """
        if quota < 1:
            raise ValueError("quota must be at least 1")

        self.quota = quota
        self.period = period
        self.clock = clock
        self.sleep = sleep

        # Expiry timestamps of live slots, oldest first
        self.slots: t.Deque[float] = collections.deque()
        self._lock = threading.Lock()

    def _purge(self, now: float) -> None:
        """Removes slots that have expired by now. Requires the lock."""
        while self.slots and self.slots[0] <= now:
            self.slots.popleft()

    def reserve(self) -> float:
        """Claims a slot and returns how long (in seconds) to wait before proceeding."""
        with self._lock:
            now = self.clock()
            self._purge(now)
            if len(self.slots) >= self.quota:
                # The slot quota positions back is the oldest one still counted
                delay = max(self.slots[-self.quota] - now, 0)
            else:
                delay = 0
            self.slots.append(now + delay + self.period)
            return delay

    def wait(self) -> float:
        """Will wait until it is safe to send another request.

        Returns the time waited.
        """
        delay = self.reserve()
        if delay > 0:
            logger.debug("Waiting %ss to avoid ratelimit", delay)
            self.sleep(delay)
        return delay

    def __len__(self) -> int:
        """Number of slots currently counted against the quota."""
        with self._lock:
            self._purge(self.clock())
            return len(self.slots)
