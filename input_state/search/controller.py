"""Search bar controller.

Ties together value resolution, debounced search, placeholder rotation and
results projection behind the event handlers a search input view binds to.
The view renders from the read-only properties and forwards its events.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from input_state.controlled import ControlledValue
from input_state.search.debounce import DebounceScheduler
from input_state.search.models import SearchBarConfig
from input_state.search.placeholder import PlaceholderRotator, RotatorState
from input_state.search.results import ResultsProjection, project_results
from input_state.timers import AsyncioScheduler, Scheduler

logger = logging.getLogger(__name__)


class SearchBar:
    """State and event handling for one search input.

    The value is controlled when the owner passes value (via the
    constructor or set_value) and uncontrolled otherwise.
    """

    def __init__(
        self,
        config: SearchBarConfig | None = None,
        *,
        value: str | None = None,
        on_change_text: Callable[[str], None] | None = None,
        on_search: Callable[[str], None] | None = None,
        on_clear: Callable[[], None] | None = None,
        on_back: Callable[[], None] | None = None,
        on_result_select: Callable[[Any, int], None] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Static configuration. Defaults to SearchBarConfig().
            value: Controlled value from the owner, or None.
            on_change_text: Called with every text change.
            on_search: Called with debounced queries and "" on clear.
            on_clear: Called when the clear action is used.
            on_back: Called when the back action is used.
            on_result_select: Called with (result, index) on selection.
            scheduler: Timer source. Defaults to the running asyncio loop.

        Raises:
            NoEventLoopError: If no scheduler is given, no loop is running,
                and the configuration starts a timer right away (placeholder
                rotation with the default suggestions does).
        """
        self.config = config if config is not None else SearchBarConfig()
        self.on_clear = on_clear
        self.on_back = on_back
        self.on_result_select = on_result_select
        self.on_search = on_search

        self._scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._value = value
        self._text = ControlledValue(value or "", on_change=on_change_text, name="SearchBar")
        self._focused = False
        self._results: list[Any] = []
        self._show_results: bool | None = None
        self._closed = False

        self._debounce = DebounceScheduler(
            self._scheduler,
            on_search,
            debounce_ms=self.config.debounce_ms,
            min_search_length=self.config.min_search_length,
        )
        self._rotator = PlaceholderRotator(
            self._scheduler,
            self.config.placeholder_suggestions,
            interval_ms=self.config.placeholder_rotation_interval,
            override=self.config.placeholder,
        )
        self._text.check(value)
        self._sync_placeholder()

    # -- Derived state --

    @property
    def current_value(self) -> str:
        return self._text.get(self._value)

    @property
    def is_controlled(self) -> bool:
        return self._text.is_controlled(self._value)

    @property
    def is_focused(self) -> bool:
        return self._focused

    @property
    def has_text(self) -> bool:
        return len(self.current_value) > 0

    @property
    def meets_min_length(self) -> bool:
        return len(self.current_value) >= self.config.min_search_length

    @property
    def results_view(self) -> ResultsProjection:
        return project_results(
            self.current_value,
            self._results,
            max_results=self.config.max_results,
            show_results=self._show_results,
            min_search_length=self.config.min_search_length,
        )

    @property
    def should_show_results(self) -> bool:
        return self.results_view.should_show

    @property
    def placeholder(self) -> str:
        return self._rotator.placeholder

    @property
    def placeholder_index(self) -> int:
        return self._rotator.index

    @property
    def rotator_state(self) -> RotatorState:
        return self._rotator.state

    @property
    def search_pending(self) -> bool:
        return self._debounce.pending

    # -- Props --

    def set_value(self, value: str | None) -> None:
        """Update the controlled value (None switches to uncontrolled)."""
        self._value = value
        self._text.check(value)
        self._sync_placeholder()

    def set_results(self, results: Sequence[Any], show_results: bool | None = None) -> None:
        """Update the results supplied by the owner."""
        self._results = list(results)
        self._show_results = show_results

    def set_suggestions(self, suggestions: list[str]) -> None:
        self._rotator.set_suggestions(suggestions)
        self._sync_placeholder()

    # -- Event handlers --

    def handle_change_text(self, text: str) -> None:
        """The user typed: record, notify, and schedule a search."""
        if self._closed:
            return
        self._text.set(self._value, text)
        self._debounce.debounced_search(text)
        self._sync_placeholder()

    def handle_submit_editing(self) -> None:
        """The user pressed the submit key: run any pending search now."""
        if self._closed:
            return
        self._debounce.flush()

    def handle_clear(self) -> None:
        """Clear the text and notify owner callbacks in a fixed order."""
        if self._closed:
            return
        self._debounce.cancel()
        self._text.set(self._value, "")
        if self.on_clear is not None:
            self.on_clear()
        if self.on_search is not None:
            self.on_search("")
        self._sync_placeholder()

    def handle_focus(self) -> None:
        self._focused = True
        self._sync_placeholder()

    def handle_blur(self) -> None:
        self._focused = False
        self._sync_placeholder()

    def handle_back(self) -> None:
        if self.on_back is not None:
            self.on_back()

    def handle_result_select(self, result: Any, index: int) -> None:
        if self.on_result_select is not None:
            self.on_result_select(result, index)

    def close(self) -> None:
        """Tear down the instance. No callback fires afterwards."""
        self._closed = True
        self._debounce.close()
        self._rotator.close()
        logger.debug("search bar closed")

    def _sync_placeholder(self) -> None:
        if self._closed:
            return
        self._rotator.update(focused=self._focused, has_text=self.has_text)
