"""Tests for the search bar controller."""

import asyncio
import warnings

import pytest

from input_state.controlled import ControlledValueWarning
from input_state.search import RotatorState, SearchBar, SearchBarConfig
from input_state.timers import ManualScheduler, NoEventLoopError


@pytest.fixture
def events() -> list:
    """Ordered log of every callback invocation."""
    return []


@pytest.fixture
def bar(clock: ManualScheduler, events: list) -> SearchBar:
    return SearchBar(
        SearchBarConfig(),
        on_change_text=lambda text: events.append(("change", text)),
        on_search=lambda query: events.append(("search", query)),
        on_clear=lambda: events.append(("clear",)),
        on_back=lambda: events.append(("back",)),
        on_result_select=lambda result, index: events.append(("select", result, index)),
        scheduler=clock,
    )


class TestDefaults:
    """Tests for default configuration."""

    def test_config_defaults(self) -> None:
        config = SearchBarConfig()

        assert config.placeholder_suggestions == ["atta", "tomato", "onion"]
        assert config.placeholder_rotation_interval == 5000
        assert config.debounce_ms == 300
        assert config.min_search_length == 3
        assert config.max_results == 5

    def test_config_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError):
            SearchBarConfig(debounce=100)

    def test_initial_state(self, bar: SearchBar) -> None:
        assert bar.current_value == ""
        assert bar.has_text is False
        assert bar.is_controlled is False
        assert bar.rotator_state is RotatorState.ROTATING
        assert bar.placeholder == 'Search "atta"'


class TestTyping:
    """Tests for text changes and debounced search."""

    def test_typing_updates_value_and_debounces(
        self, clock: ManualScheduler, bar: SearchBar, events: list
    ) -> None:
        for text in ("a", "at", "att", "atta"):
            bar.handle_change_text(text)
            clock.advance(50)

        assert bar.current_value == "atta"
        assert [e for e in events if e[0] == "search"] == []

        clock.advance(300)
        assert [e for e in events if e[0] == "search"] == [("search", "atta")]
        assert [e[1] for e in events if e[0] == "change"] == ["a", "at", "att", "atta"]

    def test_text_pauses_rotation(self, clock: ManualScheduler, bar: SearchBar) -> None:
        bar.handle_change_text("rice")
        assert bar.rotator_state is RotatorState.IDLE
        assert bar.placeholder == "Search..."

        clock.advance(10000)
        assert bar.placeholder_index == 0

    def test_submit_editing_flushes_pending_search(
        self, clock: ManualScheduler, bar: SearchBar, events: list
    ) -> None:
        bar.handle_change_text("onion")
        bar.handle_submit_editing()

        assert ("search", "onion") in events
        assert bar.search_pending is False


class TestClear:
    """Tests for the clear action."""

    def test_clear_order_and_cancels_pending(
        self, clock: ManualScheduler, bar: SearchBar, events: list
    ) -> None:
        bar.handle_change_text("tomato")
        events.clear()

        bar.handle_clear()
        clock.advance(1000)

        assert events == [("change", ""), ("clear",), ("search", "")]
        assert bar.current_value == ""
        assert bar.rotator_state is RotatorState.ROTATING


class TestFocus:
    """Tests for focus handling."""

    def test_focus_shows_combined_placeholder(
        self, clock: ManualScheduler, bar: SearchBar
    ) -> None:
        bar.handle_focus()
        clock.advance(20000)

        assert bar.is_focused is True
        assert bar.placeholder == "Search for atta, tomato, onion and more"

        bar.handle_blur()
        assert bar.rotator_state is RotatorState.ROTATING

    def test_rotation_after_one_interval(self, clock: ManualScheduler, bar: SearchBar) -> None:
        clock.advance(5000)
        assert bar.placeholder == 'Search "tomato"'


class TestControlled:
    """Tests for controlled mode."""

    def test_controlled_value_wins(self, clock: ManualScheduler, events: list) -> None:
        bar = SearchBar(
            value="paneer",
            on_change_text=lambda text: events.append(("change", text)),
            scheduler=clock,
        )
        bar.handle_change_text("paneer tikka")

        assert bar.current_value == "paneer"
        assert events == [("change", "paneer tikka")]
        assert bar.rotator_state is RotatorState.IDLE

    def test_set_value_updates_projection(self, clock: ManualScheduler) -> None:
        bar = SearchBar(on_change_text=lambda text: None, scheduler=clock)
        bar.set_results(["atta", "atta premium"])

        with pytest.warns(ControlledValueWarning):
            bar.set_value("atta")

        assert bar.is_controlled is True
        assert bar.should_show_results is True
        assert bar.results_view.visible == ["atta", "atta premium"]

    def test_warns_without_change_callback(self, clock: ManualScheduler) -> None:
        with pytest.warns(ControlledValueWarning, match="SearchBar"):
            SearchBar(value="milk", scheduler=clock)

    def test_no_warning_when_uncontrolled(self, clock: ManualScheduler) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", ControlledValueWarning)
            bar = SearchBar(scheduler=clock)
            bar.handle_change_text("milk")


class TestResultsAndCallbacks:
    """Tests for results and forwarded callbacks."""

    def test_results_hidden_for_empty_query(self, bar: SearchBar) -> None:
        bar.set_results(["a", "b"], show_results=True)
        assert bar.should_show_results is False

    def test_results_capped(self, bar: SearchBar) -> None:
        bar.handle_change_text("atta")
        bar.set_results([f"atta {i}" for i in range(10)])

        assert len(bar.results_view.visible) == 5

    def test_back_and_select(self, bar: SearchBar, events: list) -> None:
        bar.handle_back()
        bar.handle_result_select("atta", 0)

        assert events == [("back",), ("select", "atta", 0)]


class TestTeardown:
    """Tests for close()."""

    def test_close_cancels_all_timers(
        self, clock: ManualScheduler, bar: SearchBar, events: list
    ) -> None:
        bar.handle_change_text("atta")
        events.clear()

        bar.close()
        clock.advance(60000)

        assert events == []
        assert clock.pending == 0
        assert bar.placeholder_index == 0

    def test_events_after_close_are_ignored(
        self, clock: ManualScheduler, bar: SearchBar, events: list
    ) -> None:
        bar.close()
        bar.handle_change_text("atta")
        bar.handle_clear()
        clock.advance(1000)

        assert events == []


class TestAsyncioRuntime:
    """Tests for the default asyncio scheduler."""

    def test_debounce_on_event_loop(self) -> None:
        async def scenario() -> list[str]:
            searches: list[str] = []
            bar = SearchBar(
                SearchBarConfig(debounce_ms=10, placeholder_suggestions=[]),
                on_search=searches.append,
            )
            bar.handle_change_text("tom")
            bar.handle_change_text("toma")
            await asyncio.sleep(0.05)
            bar.close()
            return searches

        assert asyncio.run(scenario()) == ["toma"]

    def test_default_bar_outside_loop_asks_for_scheduler(self) -> None:
        with pytest.raises(NoEventLoopError, match="scheduler="):
            SearchBar()

    def test_bar_without_timers_builds_outside_loop(self) -> None:
        bar = SearchBar(SearchBarConfig(placeholder_suggestions=[]))

        assert bar.rotator_state is RotatorState.IDLE
        assert bar.placeholder == "Search..."
