"""input-state: input state reconciliation and validation for forms and search bars."""

__version__ = "0.1.0"

from input_state.controlled import ControlledValue, ControlledValueWarning, resolve_value
from input_state.form import (
    FieldBinding,
    FormConfig,
    FormContextError,
    FormState,
    FormStore,
    SubmitOutcome,
    UnknownFieldError,
)
from input_state.search import (
    ResultsProjection,
    RotatorState,
    SearchBar,
    SearchBarConfig,
    project_results,
)
from input_state.timers import AsyncioScheduler, ManualScheduler, NoEventLoopError, Scheduler
from input_state.validation import FieldRule, ValidationEngine, build_validator

__all__ = [
    "__version__",
    # Controlled values
    "ControlledValue",
    "ControlledValueWarning",
    "resolve_value",
    # Forms
    "FieldBinding",
    "FormConfig",
    "FormContextError",
    "FormState",
    "FormStore",
    "SubmitOutcome",
    "UnknownFieldError",
    # Validation
    "FieldRule",
    "ValidationEngine",
    "build_validator",
    # Search
    "ResultsProjection",
    "RotatorState",
    "SearchBar",
    "SearchBarConfig",
    "project_results",
    # Timers
    "AsyncioScheduler",
    "ManualScheduler",
    "NoEventLoopError",
    "Scheduler",
]
