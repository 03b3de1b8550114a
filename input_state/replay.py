"""Replay recorded input events against a form or search bar.

Used by the CLI to reproduce a user session deterministically: form events
run against a FormStore, search events against a SearchBar driven by a
virtual clock.
"""

import asyncio
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from input_state.form import FormConfig, FormStore
from input_state.search import SearchBar, SearchBarConfig
from input_state.timers import ManualScheduler
from input_state.validation import FieldRule, build_validator


class ScenarioError(ValueError):
    """Raised when a replay event or scenario config is malformed."""

    def __init__(self, message: str, step: int | None = None) -> None:
        self.step = step
        prefix = f"Event {step}: " if step is not None else ""
        super().__init__(f"{prefix}{message}")


class FormScenario(BaseModel):
    """Form replay configuration."""

    initial_values: dict[str, Any]
    rules: list[FieldRule] = Field(default_factory=list)
    validate_on_change: bool = False
    validate_on_blur: bool = True


class FormEvent(BaseModel):
    """A single recorded form interaction."""

    op: Literal["change", "blur", "error", "submit", "reset"]
    field: str | None = None
    value: Any = None
    touched: bool = True
    message: str | None = None


class SearchScenario(BaseModel):
    """Search replay configuration.

    catalog stands in for the search backend: each search filters it by
    case-insensitive substring and feeds the matches back as results.
    """

    search: SearchBarConfig = Field(default_factory=SearchBarConfig)
    catalog: list[str] = Field(default_factory=list)


class SearchEvent(BaseModel):
    """A single recorded search interaction."""

    op: Literal["type", "wait", "focus", "blur", "clear", "submit", "select"]
    text: str | None = None
    ms: float = 0
    index: int | None = None


def _parse(model: type[BaseModel], record: dict[str, Any], step: int | None = None):
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise ScenarioError(str(e), step) from e


def load_form_scenario(data: dict[str, Any]) -> FormScenario:
    return _parse(FormScenario, data)


def load_search_scenario(data: dict[str, Any]) -> SearchScenario:
    return _parse(SearchScenario, data)


def replay_form(scenario: FormScenario, events: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Apply form events in order and snapshot the state after each.

    Args:
        scenario: Initial values, rules and validation triggers.
        events: Raw event records (as read from JSONL).

    Returns:
        One snapshot dict per event.

    Raises:
        ScenarioError: If an event is malformed or names an unknown field.
    """
    submissions: list[dict[str, Any]] = []
    store = FormStore(
        scenario.initial_values,
        on_submit=submissions.append,
        validate=build_validator(scenario.rules) if scenario.rules else None,
        config=FormConfig(
            validate_on_change=scenario.validate_on_change,
            validate_on_blur=scenario.validate_on_blur,
        ),
    )

    snapshots: list[dict[str, Any]] = []
    for step, record in enumerate(events, 1):
        event: FormEvent = _parse(FormEvent, record, step)
        outcome = None

        if event.op in ("change", "blur", "error"):
            if event.field is None:
                raise ScenarioError(f"'{event.op}' requires a field", step)
            if event.field not in scenario.initial_values and event.op != "error":
                raise ScenarioError(f"unknown field {event.field!r}", step)

        if event.op == "change":
            store.set_field_value(event.field, event.value)
        elif event.op == "blur":
            store.set_field_touched(event.field, event.touched)
        elif event.op == "error":
            if event.message is None:
                raise ScenarioError("'error' requires a message", step)
            store.set_field_error(event.field, event.message)
        elif event.op == "submit":
            outcome = asyncio.run(store.handle_submit()).value
        elif event.op == "reset":
            store.reset_form()

        snapshots.append({
            "step": step,
            "op": event.op,
            "field": event.field,
            "values": store.values,
            "errors": store.errors,
            "touched": store.touched,
            "is_submitting": store.is_submitting,
            "outcome": outcome,
            "submissions": len(submissions),
        })

    return snapshots


def replay_search(scenario: SearchScenario, events: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Apply search events on a virtual clock and snapshot after each.

    Returns:
        One snapshot dict per event, including the searches fired during it.

    Raises:
        ScenarioError: If an event is malformed.
    """
    clock = ManualScheduler()
    fired: list[str] = []
    selected: list[Any] = []
    bar: SearchBar

    def on_search(query: str) -> None:
        fired.append(query)
        needle = query.lower()
        matches = [item for item in scenario.catalog if needle and needle in item.lower()]
        bar.set_results(matches)

    bar = SearchBar(
        scenario.search,
        on_search=on_search,
        on_result_select=lambda result, index: selected.append(result),
        scheduler=clock,
    )

    snapshots: list[dict[str, Any]] = []
    try:
        for step, record in enumerate(events, 1):
            event: SearchEvent = _parse(SearchEvent, record, step)
            seen = len(fired)

            if event.op == "type":
                if event.text is None:
                    raise ScenarioError("'type' requires text", step)
                bar.handle_change_text(event.text)
            elif event.op == "wait":
                clock.advance(event.ms)
            elif event.op == "focus":
                bar.handle_focus()
            elif event.op == "blur":
                bar.handle_blur()
            elif event.op == "clear":
                bar.handle_clear()
            elif event.op == "submit":
                bar.handle_submit_editing()
            elif event.op == "select":
                visible = bar.results_view.visible
                if event.index is None or not 0 <= event.index < len(visible):
                    raise ScenarioError(f"no visible result at index {event.index}", step)
                bar.handle_result_select(visible[event.index], event.index)

            snapshots.append({
                "step": step,
                "op": event.op,
                "clock_ms": clock.now,
                "value": bar.current_value,
                "placeholder": bar.placeholder,
                "rotator": bar.rotator_state.value,
                "searches": fired[seen:],
                "results": bar.results_view.visible,
                "selected": selected[-1] if event.op == "select" else None,
            })
    finally:
        bar.close()

    return snapshots
