"""Form state: store, touched tracking, submission and field bindings."""

from input_state.form.field import FieldBinding, FormContextError
from input_state.form.state import FormConfig, FormState, SubmitOutcome
from input_state.form.store import FormStore, UnknownFieldError
from input_state.form.submission import SubmissionCoordinator, SubmitHandler
from input_state.form.touched import TouchedTracker

__all__ = [
    "FieldBinding",
    "FormConfig",
    "FormContextError",
    "FormState",
    "FormStore",
    "SubmissionCoordinator",
    "SubmitHandler",
    "SubmitOutcome",
    "TouchedTracker",
    "UnknownFieldError",
]
