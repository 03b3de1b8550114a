"""Projection of search results for display."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_MAX_RESULTS = 5
DEFAULT_MIN_SEARCH_LENGTH = 3


class ResultsProjection(BaseModel):
    """What the results dropdown should show for a query."""

    has_text: bool
    meets_min_length: bool
    should_show: bool
    displayed: list[Any] = Field(default_factory=list)

    @property
    def visible(self) -> list[Any]:
        """Results to render; empty whenever the dropdown is hidden."""
        return self.displayed if self.should_show else []


def project_results(
    query: str,
    results: Sequence[Any],
    max_results: int = DEFAULT_MAX_RESULTS,
    show_results: bool | None = None,
    min_search_length: int = DEFAULT_MIN_SEARCH_LENGTH,
) -> ResultsProjection:
    """Decide whether and which results to show.

    An explicit show_results overrides the automatic rule, but never for
    an empty query.

    Args:
        query: The effective search text.
        results: Results supplied by the owner, in display order.
        max_results: Cap on displayed results (at least one is kept).
        show_results: Optional override of the automatic visibility rule.
        min_search_length: Query length needed for automatic visibility.

    Returns:
        ResultsProjection describing visibility and the capped result list.
    """
    has_text = len(query) > 0
    meets_min_length = len(query) >= min_search_length

    if show_results is not None:
        wanted = show_results
    else:
        wanted = len(results) > 0 and meets_min_length

    return ResultsProjection(
        has_text=has_text,
        meets_min_length=meets_min_length,
        should_show=has_text and wanted,
        displayed=list(results[: max(1, max_results)]),
    )
