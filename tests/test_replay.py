"""Tests for event replay."""

import pytest

from input_state.replay import (
    ScenarioError,
    load_form_scenario,
    load_search_scenario,
    replay_form,
    replay_search,
)


@pytest.fixture
def form_scenario():
    return load_form_scenario({
        "initial_values": {"email": "", "password": ""},
        "rules": [
            {"field": "email", "required": True, "message": "required"},
            {"field": "password", "min_length": 8},
        ],
    })


@pytest.fixture
def search_scenario():
    return load_search_scenario({
        "search": {"debounce_ms": 300, "min_search_length": 3},
        "catalog": ["Atta 5kg", "Atta 10kg", "Tomato", "Onion"],
    })


class TestReplayForm:
    """Tests for replay_form()."""

    def test_rejected_then_submitted(self, form_scenario) -> None:
        snapshots = replay_form(form_scenario, [
            {"op": "submit"},
            {"op": "change", "field": "email", "value": "a@b.c"},
            {"op": "change", "field": "password", "value": "long enough"},
            {"op": "submit"},
        ])

        assert snapshots[0]["outcome"] == "rejected"
        assert snapshots[0]["errors"] == {"email": "required"}
        assert snapshots[0]["touched"] == {"email": True, "password": True}
        assert snapshots[1]["errors"] == {}
        assert snapshots[3]["outcome"] == "submitted"
        assert snapshots[3]["submissions"] == 1

    def test_blur_and_reset(self, form_scenario) -> None:
        snapshots = replay_form(form_scenario, [
            {"op": "blur", "field": "email"},
            {"op": "error", "field": "_form", "message": "offline"},
            {"op": "reset"},
        ])

        assert snapshots[0]["errors"] == {"email": "required"}
        assert snapshots[1]["errors"]["_form"] == "offline"
        assert snapshots[2]["errors"] == {}
        assert snapshots[2]["touched"] == {}

    def test_unknown_field(self, form_scenario) -> None:
        with pytest.raises(ScenarioError, match="Event 1: unknown field 'phone'"):
            replay_form(form_scenario, [{"op": "change", "field": "phone", "value": "1"}])

    def test_bad_op(self, form_scenario) -> None:
        with pytest.raises(ScenarioError, match="Event 1"):
            replay_form(form_scenario, [{"op": "explode"}])

    def test_missing_field(self, form_scenario) -> None:
        with pytest.raises(ScenarioError, match="requires a field"):
            replay_form(form_scenario, [{"op": "blur"}])

    def test_bad_scenario(self) -> None:
        with pytest.raises(ScenarioError):
            load_form_scenario({"rules": []})


class TestReplaySearch:
    """Tests for replay_search()."""

    def test_debounced_search_and_results(self, search_scenario) -> None:
        snapshots = replay_search(search_scenario, [
            {"op": "type", "text": "a"},
            {"op": "type", "text": "at"},
            {"op": "type", "text": "att"},
            {"op": "wait", "ms": 300},
            {"op": "type", "text": "atta"},
            {"op": "wait", "ms": 300},
            {"op": "select", "index": 1},
        ])

        assert snapshots[3]["searches"] == ["att"]
        assert snapshots[5]["searches"] == ["atta"]
        assert snapshots[5]["results"] == ["Atta 5kg", "Atta 10kg"]
        assert snapshots[6]["selected"] == "Atta 10kg"

    def test_clear_and_placeholder(self, search_scenario) -> None:
        snapshots = replay_search(search_scenario, [
            {"op": "wait", "ms": 5000},
            {"op": "focus"},
            {"op": "type", "text": "onion"},
            {"op": "clear"},
        ])

        assert snapshots[0]["placeholder"] == 'Search "tomato"'
        assert snapshots[1]["rotator"] == "focused"
        assert snapshots[3]["searches"] == [""]
        assert snapshots[3]["value"] == ""
        assert snapshots[3]["results"] == []

    def test_select_without_results(self, search_scenario) -> None:
        with pytest.raises(ScenarioError, match="no visible result"):
            replay_search(search_scenario, [{"op": "select", "index": 0}])
