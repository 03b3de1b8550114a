"""Configuration model for the search bar."""

from pydantic import BaseModel, Field

from input_state.search.debounce import DEFAULT_DEBOUNCE_MS
from input_state.search.placeholder import DEFAULT_PLACEHOLDER, DEFAULT_ROTATION_INTERVAL_MS
from input_state.search.results import DEFAULT_MAX_RESULTS, DEFAULT_MIN_SEARCH_LENGTH


class SearchBarConfig(BaseModel):
    """Static configuration of a search bar instance."""

    placeholder: str = DEFAULT_PLACEHOLDER
    placeholder_suggestions: list[str] = Field(default_factory=lambda: ["atta", "tomato", "onion"])
    placeholder_rotation_interval: int = Field(default=DEFAULT_ROTATION_INTERVAL_MS, gt=0)
    debounce_ms: int = Field(default=DEFAULT_DEBOUNCE_MS, ge=0)
    min_search_length: int = Field(default=DEFAULT_MIN_SEARCH_LENGTH, ge=0)
    max_results: int = DEFAULT_MAX_RESULTS

    model_config = {"extra": "forbid"}
