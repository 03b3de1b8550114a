"""Debounced search dispatch.

Coalesces a burst of text changes into one search call once typing pauses.
Text shorter than the minimum length is not searched, except for the empty
string, which is always delivered as an explicit "cleared" signal.
"""

import logging
from collections.abc import Callable

from input_state.timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300


class DebounceScheduler:
    """Schedules at most one pending search call per instance."""

    def __init__(
        self,
        scheduler: Scheduler,
        on_search: Callable[[str], None] | None,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        min_search_length: int = 0,
    ) -> None:
        """Initialize the debouncer.

        Args:
            scheduler: Timer source.
            on_search: Callback receiving the query. None disables delivery
                but timers are still managed.
            debounce_ms: Quiet period before a search fires.
            min_search_length: Shortest non-empty query that is searched.
        """
        self._scheduler = scheduler
        self.on_search = on_search
        self.debounce_ms = debounce_ms
        self.min_search_length = min_search_length
        self._pending: TimerHandle | None = None
        self._pending_text: str | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        """Whether a search is waiting to fire."""
        return self._pending is not None and self._pending.active

    def debounced_search(self, text: str) -> None:
        """Replace any pending search with one for text."""
        if self._closed:
            return
        self.cancel()
        self._pending_text = text
        self._pending = self._scheduler.call_later(self.debounce_ms, lambda: self._fire(text))

    def cancel(self) -> None:
        """Drop the pending search, if any."""
        if self._pending is not None:
            self._pending.cancel()
            logger.debug("debounced search cancelled")
        self._pending = None
        self._pending_text = None

    def flush(self) -> None:
        """Fire the pending search now instead of waiting."""
        if not self.pending or self._pending_text is None:
            return
        text = self._pending_text
        self.cancel()
        self._fire(text)

    def close(self) -> None:
        """Tear down: cancel the pending search and ignore further input."""
        self.cancel()
        self._closed = True

    def _fire(self, text: str) -> None:
        self._pending = None
        self._pending_text = None
        if self._closed or self.on_search is None:
            return

        if len(text) >= self.min_search_length:
            logger.debug("search fired: %r", text)
            self.on_search(text)
        elif len(text) == 0:
            logger.debug("search cleared")
            self.on_search("")
