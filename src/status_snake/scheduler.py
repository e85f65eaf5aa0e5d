"""Start/stop/pause state machine around a periodic event-loop timer."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

MIN_INTERVAL_MS = 10


class InvalidIntervalError(ValueError):
    """Raised for a tick interval below :data:`MIN_INTERVAL_MS`."""


class InvalidTransitionError(RuntimeError):
    """Raised when start/stop/pause is called from the wrong state."""


class LoopState(enum.Enum):
    """Lifecycle states of a :class:`TickScheduler`."""

    STOPPED = "stopped"
    STARTED = "started"
    PAUSED = "paused"


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    """The subset of :class:`asyncio.AbstractEventLoop` the scheduler uses."""

    def time(self) -> float: ...

    def call_at(
        self, when: float, callback: Callable[[], object],
    ) -> TimerHandle: ...


def _validate_interval(interval_ms: int) -> None:
    if interval_ms < MIN_INTERVAL_MS:
        raise InvalidIntervalError(
            f"timer interval must be at least {MIN_INTERVAL_MS}ms, "
            f"got {interval_ms}ms"
        )


class TickScheduler:
    """Calls *callback* every *interval_ms* milliseconds while started.

    The first call happens one full interval after :meth:`start`.
    Deadlines are measured from the moment the timer was armed so ticks
    do not drift. :meth:`stop` and :meth:`pause` cancel the pending
    deadline before returning, so no call can follow them.

    *clock* defaults to the running asyncio event loop, resolved when the
    timer is first armed.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        interval_ms: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        if interval_ms is not None:
            _validate_interval(interval_ms)
        self.callback = callback
        self._interval_ms = interval_ms
        self._clock = clock
        self._state = LoopState.STOPPED
        self._handle: TimerHandle | None = None
        self._origin = 0.0
        self._ticks = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def interval_ms(self) -> int | None:
        return self._interval_ms

    @property
    def is_started(self) -> bool:
        return self._state is LoopState.STARTED

    @property
    def is_stopped(self) -> bool:
        return self._state is LoopState.STOPPED

    @property
    def is_paused(self) -> bool:
        return self._state is LoopState.PAUSED

    def start(self) -> None:
        """Begin calling back every interval."""
        if self._state is LoopState.STARTED:
            raise InvalidTransitionError(
                "start() called while scheduler is already started"
            )
        if self._interval_ms is None:
            raise InvalidIntervalError(
                "timer interval must be set before timer can start"
            )
        self._arm()
        self._state = LoopState.STARTED

    def stop(self) -> None:
        """Stop calling back. The interval is kept."""
        if self._state is LoopState.STOPPED:
            raise InvalidTransitionError(
                "stop() called while scheduler is already stopped"
            )
        self._disarm()
        self._state = LoopState.STOPPED

    def pause(self) -> None:
        """Suspend calling back until the next :meth:`start`."""
        if self._state is not LoopState.STARTED:
            raise InvalidTransitionError(
                f"pause() called while scheduler is {self._state.value}"
            )
        self._disarm()
        self._state = LoopState.PAUSED

    def set_interval(self, interval_ms: int) -> None:
        """Change the interval, re-arming from now if started."""
        _validate_interval(interval_ms)
        self._interval_ms = interval_ms
        if self._state is LoopState.STARTED:
            self._disarm()
            self._arm()

    def _get_clock(self) -> Clock:
        if self._clock is None:
            self._clock = asyncio.get_running_loop()
        return self._clock

    def _arm(self) -> None:
        clock = self._get_clock()
        self._origin = clock.time()
        self._ticks = 0
        self._schedule_next(clock)

    def _schedule_next(self, clock: Clock) -> None:
        when = self._origin + (self._ticks + 1) * self._interval_ms / 1000
        self._handle = clock.call_at(when, self._fire)

    def _disarm(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        if self._state is not LoopState.STARTED:
            return
        clock = self._get_clock()
        self._ticks += 1
        now = clock.time()
        if self._origin + (self._ticks + 1) * self._interval_ms / 1000 <= now:
            # Ticks missed while the loop was blocked are dropped.
            logger.debug(
                "Tick ran %.0fms late; skipping missed ticks.",
                (now - self._origin) * 1000 - self._ticks * self._interval_ms,
            )
            self._origin = now
            self._ticks = 0
        # Re-arm first so the callback may stop, pause or retarget us.
        self._schedule_next(clock)
        try:
            self.callback()
        except Exception:
            logger.exception("Tick callback failed; stopping scheduler.")
            self._disarm()
            self._state = LoopState.STOPPED
            raise
