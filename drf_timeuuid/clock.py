"""
Monotonic tick allocation for time-based identifiers.

The wall clock only resolves milliseconds, while a version 1 UUID stores
100ns ticks. The arbiter fabricates up to 1000 ordered sub-millisecond
slots per millisecond and stalls callers once they are used up, so every
tick it hands out is distinct and non-decreasing in call order.

Limitation: a wall clock stepped backwards between two calls is not
corrected. The arbiter starts counting the earlier millisecond afresh, so
ticks issued afterwards may sort before, or repeat, earlier ones; the UUIDs
built from them still differ by their random node and clock sequence.
"""

import time
import logging
import threading
from collections import deque

from drf_timeuuid.types import Tick
from drf_timeuuid.compat import Self, Callable, Optional
from drf_timeuuid.exceptions import ClockBackoffError
from drf_timeuuid.signals import clock_backoff_interrupted
from drf_timeuuid.settings import drf_timeuuid_settings

logger = logging.getLogger(__name__)

SLOTS_PER_MILLISECOND = 1000
SLOT_WIDTH = 10


def wall_clock_millis() -> int:
    """Current Unix time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class FairLock:
    """
    A mutual-exclusion lock granted to waiters in arrival order.

    ``threading.Lock`` makes no ordering promise, so a busy caller can
    starve others. Here a releasing owner hands the lock directly to the
    oldest waiter.
    """

    __slots__ = ("_mutex", "_waiters", "_locked")

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._waiters = deque()
        self._locked = False

    def acquire(self) -> None:
        with self._mutex:
            if not self._locked and not self._waiters:
                self._locked = True
                return
            waiter = threading.Lock()
            waiter.acquire()
            self._waiters.append(waiter)
        # Blocks until a releasing owner hands over.
        waiter.acquire()

    def release(self) -> None:
        with self._mutex:
            if not self._locked:
                raise RuntimeError("release unlocked lock")
            if self._waiters:
                # Ownership passes on, the lock stays held.
                self._waiters.popleft().release()
            else:
                self._locked = False

    def locked(self) -> bool:
        return self._locked

    def __enter__(self) -> Self:
        self.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


class ClockArbiter:
    """
    Owns the clock state and hands out ``Tick`` values.

    Arguments left as ``None`` are read from ``DRF_TIMEUUID`` settings on
    every call, so the process-wide arbiter follows settings reloads.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], int]] = None,
        sleep: Callable[[float], None] = time.sleep,
        backoff_interval: Optional[float] = None,
        release_lock_during_backoff: Optional[bool] = None,
        raise_on_clock_error: Optional[bool] = None,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._backoff_interval = backoff_interval
        self._release_lock_during_backoff = release_lock_during_backoff
        self._raise_on_clock_error = raise_on_clock_error

        self._lock = FairLock()
        self._last_millis = self._now()
        self._counter = 0

    @property
    def clock(self) -> Callable[[], int]:
        if self._clock is not None:
            return self._clock
        return drf_timeuuid_settings.CLOCK or wall_clock_millis

    @property
    def backoff_interval(self) -> float:
        """Seconds to wait for the wall clock once a millisecond is used up."""
        if self._backoff_interval is not None:
            return self._backoff_interval
        return drf_timeuuid_settings.BACKOFF_INTERVAL.total_seconds()

    @property
    def release_lock_during_backoff(self) -> bool:
        if self._release_lock_during_backoff is not None:
            return self._release_lock_during_backoff
        return drf_timeuuid_settings.RELEASE_LOCK_DURING_BACKOFF

    @property
    def raise_on_clock_error(self) -> bool:
        if self._raise_on_clock_error is not None:
            return self._raise_on_clock_error
        return drf_timeuuid_settings.RAISE_ON_CLOCK_ERROR

    @property
    def last_millis(self) -> int:
        return self._last_millis

    @property
    def issued(self) -> int:
        """Number of slots issued for ``last_millis``."""
        return self._counter

    def _now(self) -> int:
        return int(self.clock())

    def next_tick(self) -> Tick:
        """
        Allocate the next ``(millis, sub_tick_offset)`` pair.

        Blocks while all slots of the current millisecond are taken.
        """
        with self._lock:
            now = self._now()

            saturated = self._counter >= SLOTS_PER_MILLISECOND
            while saturated and now == self._last_millis:
                self._backoff()
                saturated = self._counter >= SLOTS_PER_MILLISECOND
                now = self._now()

            # A clock stepped backwards also starts a fresh slot range.
            if now != self._last_millis:
                self._last_millis = now
                self._counter = 0

            slot = self._counter
            self._counter += 1

        return Tick(now, slot * SLOT_WIDTH)

    def _backoff(self) -> None:
        """Wait for the wall clock to move on. Called with the lock held."""
        logger.debug(
            "All %d slots issued for millisecond %d, backing off.",
            SLOTS_PER_MILLISECOND,
            self._last_millis,
        )
        try:
            if self.release_lock_during_backoff:
                self._lock.release()
                try:
                    self._sleep(self.backoff_interval)
                finally:
                    self._lock.acquire()
            else:
                self._sleep(self.backoff_interval)
        except OSError as exc:
            logger.warning("Clock backoff interrupted: %s", exc)
            clock_backoff_interrupted.send(
                sender=self.__class__, arbiter=self, error=exc
            )
            if self.raise_on_clock_error:
                raise ClockBackoffError("Clock backoff was interrupted.") from exc


_default_arbiter = None
_default_arbiter_lock = threading.Lock()


def get_clock_arbiter() -> ClockArbiter:
    """Return the process-wide arbiter, constructing it on first use."""
    global _default_arbiter

    if _default_arbiter is None:
        with _default_arbiter_lock:
            if _default_arbiter is None:
                _default_arbiter = ClockArbiter()
    return _default_arbiter
