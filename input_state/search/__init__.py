"""Search input state: debounce, placeholder rotation and results."""

from input_state.search.controller import SearchBar
from input_state.search.debounce import DebounceScheduler
from input_state.search.models import SearchBarConfig
from input_state.search.placeholder import PlaceholderRotator, RotatorState, combined_placeholder
from input_state.search.results import ResultsProjection, project_results

__all__ = [
    "DebounceScheduler",
    "PlaceholderRotator",
    "ResultsProjection",
    "RotatorState",
    "SearchBar",
    "SearchBarConfig",
    "combined_placeholder",
    "project_results",
]
