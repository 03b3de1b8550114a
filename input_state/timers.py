"""Timer scheduling for debounce and placeholder rotation.

Components never call the event loop directly. They receive a Scheduler,
which is either backed by asyncio (real UI runtime) or by a virtual clock
(replay and tests).
"""

import asyncio
import heapq
import itertools
import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class NoEventLoopError(RuntimeError):
    """Raised when an AsyncioScheduler needs a loop and none is running."""

    def __init__(self) -> None:
        super().__init__(
            "No running asyncio event loop. Create the component inside the "
            "loop or pass scheduler= (for example a ManualScheduler)."
        )


@runtime_checkable
class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    @property
    def active(self) -> bool:
        """Whether the callback may still fire."""
        ...

    def cancel(self) -> None:
        """Cancel the callback. Safe to call more than once."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for scheduling one-shot and repeating callbacks.

    Delays are expressed in milliseconds, matching the configuration
    values of the search bar.
    """

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay_ms."""
        ...

    def call_every(self, interval_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback every interval_ms until cancelled."""
        ...


class _AsyncioTimer:
    """One-shot or repeating timer on an asyncio event loop."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        delay_ms: float,
        callback: Callable[[], None],
        repeat: bool,
    ) -> None:
        self._loop = loop
        self._delay = delay_ms / 1000
        self._callback = callback
        self._repeat = repeat
        self._cancelled = False
        self._fired = False
        self._handle = loop.call_later(self._delay, self._run)

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._fired

    def _run(self) -> None:
        if self._cancelled:
            return
        if self._repeat:
            self._handle = self._loop.call_later(self._delay, self._run)
        else:
            self._fired = True
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        self._handle.cancel()


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    The loop is looked up lazily so the scheduler can be created before
    the loop starts running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise NoEventLoopError() from e
        return self._loop

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        return _AsyncioTimer(self.loop, delay_ms, callback, repeat=False)

    def call_every(self, interval_ms: float, callback: Callable[[], None]) -> TimerHandle:
        return _AsyncioTimer(self.loop, interval_ms, callback, repeat=True)


class _ManualTimer:
    """Timer entry on a ManualScheduler."""

    def __init__(
        self,
        due: float,
        interval: float | None,
        callback: Callable[[], None],
    ) -> None:
        self.due = due
        self.interval = interval
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not self.cancelled and not self.fired

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-clock scheduler.

    Time only moves when advance() is called, which makes timer-driven
    behaviour deterministic. Callbacks due at the same instant fire in the
    order they were scheduled.

    Example:
        >>> clock = ManualScheduler()
        >>> fired = []
        >>> _ = clock.call_later(300, lambda: fired.append(clock.now))
        >>> clock.advance(299); fired
        []
        >>> clock.advance(1); fired
        [300.0]
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualTimer]] = []
        self._seq = itertools.count()

    def _push(self, timer: _ManualTimer) -> None:
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = _ManualTimer(self.now + delay_ms, None, callback)
        self._push(timer)
        return timer

    def call_every(self, interval_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        timer = _ManualTimer(self.now + interval_ms, interval_ms, callback)
        self._push(timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of timers that may still fire."""
        return sum(1 for _, _, timer in self._queue if timer.active)

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing every timer that becomes due."""
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if not timer.active:
                continue
            self.now = due
            if timer.interval is None:
                timer.fired = True
            else:
                timer.due = due + timer.interval
                self._push(timer)
            timer.callback()
        self.now = target
