"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from input_state.timers import ManualScheduler


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config lookup at an empty directory and force development mode."""
    home = tmp_path / "input-state-home"
    monkeypatch.setenv("INPUT_STATE_HOME", str(home))
    monkeypatch.setenv("INPUT_STATE_ENV", "development")
    return home


@pytest.fixture
def clock() -> ManualScheduler:
    """A virtual-clock scheduler."""
    return ManualScheduler()


@pytest.fixture
def login_values() -> dict:
    """Initial values for a login form."""
    return {"email": "", "password": ""}


@pytest.fixture
def login_validator():
    """Validator requiring both login fields."""

    def validate(values: dict) -> dict:
        errors = {}
        if not values.get("email"):
            errors["email"] = "required"
        if not values.get("password"):
            errors["password"] = "required"
        return errors

    return validate


@pytest.fixture
def suggestions() -> list[str]:
    return ["atta", "tomato", "onion"]
