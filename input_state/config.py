"""Global configuration for input-state.

Settings live in ``~/.config/input-state/config.yaml`` (or under
``$INPUT_STATE_HOME``). The only setting that changes library behaviour is
the environment, which gates development-time warnings.
"""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ENV_VAR = "INPUT_STATE_ENV"
HOME_VAR = "INPUT_STATE_HOME"

Environment = Literal["development", "test", "production"]


class GlobalConfig(BaseModel):
    """Contents of config.yaml."""

    environment: Environment = "development"

    model_config = {"extra": "ignore"}


def get_input_state_home() -> Path:
    """Return the configuration directory."""
    env_path = os.environ.get(HOME_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "input-state"


def get_config_path() -> Path:
    """Return the path of config.yaml."""
    return get_input_state_home() / "config.yaml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load the global config, falling back to defaults.

    Args:
        path: Optional explicit config file. Defaults to get_config_path().

    Returns:
        The parsed GlobalConfig. A missing or empty file yields defaults.
    """
    config_path = path if path is not None else get_config_path()
    if not config_path.exists():
        return GlobalConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return GlobalConfig.model_validate(data)


def get_environment() -> Environment:
    """Resolve the active environment.

    The INPUT_STATE_ENV variable takes precedence over config.yaml. An
    unrecognised value or a malformed config file resolves to
    "development" and logs a warning; this never raises.
    """
    env_value = os.environ.get(ENV_VAR)
    if env_value:
        try:
            return GlobalConfig(environment=env_value).environment
        except ValidationError:
            logger.warning("Ignoring invalid %s=%r, using development", ENV_VAR, env_value)
            return "development"

    try:
        return load_global_config().environment
    except (ValidationError, yaml.YAMLError) as e:
        logger.warning("Ignoring invalid config at %s, using development: %s", get_config_path(), e)
        return "development"


def is_development() -> bool:
    """Whether development-time warnings should be emitted."""
    return get_environment() != "production"
