"""Rotating placeholder text for the search bar.

The rotator is a small state machine:

- FOCUSED: the field has focus and no placeholder override is set. Shows
  every suggestion at once so the text does not change under the cursor.
- ROTATING: no override, at least one suggestion, not focused and no text.
  Cycles through the suggestions on a fixed interval.
- IDLE: anything else. Shows the override or the default text.

The rotation timer is started on entering ROTATING and cancelled on leaving
it; a recomputation that lands in the same state does nothing.
"""

import logging
from enum import Enum

from input_state.timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Search..."
DEFAULT_ROTATION_INTERVAL_MS = 5000


class RotatorState(str, Enum):
    """Placeholder rotator states."""

    IDLE = "idle"
    ROTATING = "rotating"
    FOCUSED = "focused"


def combined_placeholder(suggestions: list[str]) -> str:
    """Placeholder listing every suggestion."""
    return f"Search for {', '.join(suggestions)} and more"


class PlaceholderRotator:
    """Computes the placeholder and owns the rotation timer."""

    def __init__(
        self,
        scheduler: Scheduler,
        suggestions: list[str],
        interval_ms: float = DEFAULT_ROTATION_INTERVAL_MS,
        override: str | None = None,
    ) -> None:
        """Initialize the rotator in IDLE; call update() to start it.

        Args:
            scheduler: Timer source.
            suggestions: Suggestion strings to rotate through.
            interval_ms: Time each suggestion is shown.
            override: Fixed placeholder. The default text counts as no override.
        """
        self._scheduler = scheduler
        self.suggestions = list(suggestions)
        self.interval_ms = interval_ms
        self.override = None if override == DEFAULT_PLACEHOLDER else override
        self.index = 0
        self.state = RotatorState.IDLE
        self._timer: TimerHandle | None = None
        self._focused = False
        self._has_text = False
        self._closed = False

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    def _target_state(self) -> RotatorState:
        if self._focused and self.override is None:
            return RotatorState.FOCUSED
        if self.override is None and self.suggestions and not self._focused and not self._has_text:
            return RotatorState.ROTATING
        return RotatorState.IDLE

    def update(self, focused: bool, has_text: bool) -> RotatorState:
        """Recompute the state from focus and text presence.

        Returns:
            The state after the transition.
        """
        self._focused = focused
        self._has_text = has_text
        self._transition(self._target_state())
        return self.state

    def _transition(self, target: RotatorState) -> None:
        if self._closed or target == self.state:
            return
        if self.state == RotatorState.ROTATING:
            self._stop_timer()
        logger.debug("placeholder rotator: %s -> %s", self.state.value, target.value)
        self.state = target
        if target == RotatorState.ROTATING:
            self._start_timer()

    def _start_timer(self) -> None:
        self._timer = self._scheduler.call_every(self.interval_ms, self._advance)

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _advance(self) -> None:
        if not self.suggestions:
            return
        self.index = (self.index + 1) % len(self.suggestions)

    def set_suggestions(self, suggestions: list[str]) -> None:
        """Replace the suggestion list, restarting rotation if active."""
        self.suggestions = list(suggestions)
        if self.suggestions:
            self.index %= len(self.suggestions)
        else:
            self.index = 0

        if self.state == RotatorState.ROTATING:
            self._stop_timer()
            self.state = RotatorState.IDLE
        self._transition(self._target_state())

    @property
    def placeholder(self) -> str:
        """The placeholder text for the current state."""
        if self.state == RotatorState.FOCUSED:
            if not self.suggestions:
                return DEFAULT_PLACEHOLDER
            return combined_placeholder(self.suggestions)
        if self.state == RotatorState.ROTATING:
            return f'Search "{self.suggestions[self.index]}"'
        return self.override or DEFAULT_PLACEHOLDER

    def close(self) -> None:
        """Tear down: cancel the timer and stop reacting to updates."""
        self._stop_timer()
        self.state = RotatorState.IDLE
        self._closed = True
