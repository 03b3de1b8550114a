"""Form state store.

A FormStore is the single owner of one form's values, errors, touched
flags and submitting flag. Field views receive the store explicitly (see
FormStore.field) and may only change it through the methods below.

Within one call, updates are applied in the order
value -> validation / error clear -> touched.
"""

import logging
from collections.abc import Mapping
from typing import Any

from input_state.form.field import FieldBinding
from input_state.form.state import FormConfig, FormState, SubmitOutcome
from input_state.form.submission import SubmissionCoordinator, SubmitHandler
from input_state.form.touched import TouchedTracker
from input_state.validation.engine import ErrorMap, ValidationEngine, ValidatorFn

logger = logging.getLogger(__name__)


class UnknownFieldError(KeyError):
    """Raised when a field name is not part of the form's initial values."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown form field: {name!r} (known fields: {', '.join(known)})")


class FormStore:
    """Values, errors, touched and submitting state for one form."""

    def __init__(
        self,
        initial_values: Mapping[str, Any],
        on_submit: SubmitHandler | None = None,
        validate: ValidatorFn | None = None,
        config: FormConfig | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            initial_values: Field name -> initial value. Fixes the key set.
            on_submit: Handler called with the values on a valid submit.
            validate: Optional validator returning field -> message.
            config: Validation triggers. Defaults to blur-only validation.
        """
        self.initial_values = dict(initial_values)
        self.config = config if config is not None else FormConfig()

        self._state = FormState(values=dict(self.initial_values))
        self._engine = ValidationEngine(validate)
        self._touched = TouchedTracker(self._state)
        self._submission = SubmissionCoordinator(
            self._state,
            self._touched,
            self._engine,
            on_submit,
        )

    # -- Accessors --

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._state.values)

    @property
    def errors(self) -> ErrorMap:
        return dict(self._state.errors)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._state.touched)

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    @property
    def state(self) -> FormState:
        """A detached snapshot of the whole form state."""
        return self._state.model_copy(deep=True)

    # -- Mutators --

    def require_field(self, name: str) -> None:
        if name not in self._state.values:
            raise UnknownFieldError(name, self._state.field_names)

    def run_validation(self) -> ErrorMap:
        """Validate the current values without storing the result."""
        return self._engine.run(self._state.values)

    def set_field_value(self, name: str, value: Any) -> None:
        """Set a field's value and apply the on-change validation policy.

        With validate_on_change, the whole error map is replaced by a fresh
        validation. Otherwise only this field's error is cleared; it stays
        cleared until the next blur or submit even if the value is invalid.

        Raises:
            UnknownFieldError: If name is not a known field.
        """
        self.require_field(name)
        self._state.values = {**self._state.values, name: value}

        if self.config.validate_on_change:
            self._state.errors = self._engine.run(self._state.values)
        elif name in self._state.errors:
            errors = dict(self._state.errors)
            del errors[name]
            self._state.errors = errors

    def set_field_error(self, name: str, error: str) -> None:
        """Set an error message directly, bypassing the validator.

        Names outside the value set are allowed so that form-level messages
        can be stored.
        """
        self._state.errors = {**self._state.errors, name: error}

    def set_field_touched(self, name: str, is_touched: bool = True) -> None:
        """Mark a field touched (or untouched).

        Re-setting the current flag changes nothing and runs no validation.
        A change to touched runs blur validation against the current values
        when validate_on_blur is enabled.

        Raises:
            UnknownFieldError: If name is not a known field.
        """
        self.require_field(name)
        if not self._touched.set(name, is_touched):
            return

        if is_touched and self.config.validate_on_blur:
            self._state.errors = self._engine.run(self._state.values)
            logger.debug("blur validation on %r: %d error(s)", name, len(self._state.errors))

    async def handle_submit(self) -> SubmitOutcome:
        """Touch every field, validate, and submit if valid.

        See SubmissionCoordinator.submit for the full contract.
        """
        return await self._submission.submit()

    def reset_form(self) -> None:
        """Restore initial values and clear errors, touched and submitting.

        An in-flight submit handler is not cancelled. Because is_submitting
        is cleared, another handle_submit can start while the first handler
        is still awaited, and whichever finishes first clears the flag.
        """
        self._state.values = dict(self.initial_values)
        self._state.errors = {}
        self._touched.clear()
        self._state.is_submitting = False

    def field(self, name: str) -> FieldBinding:
        """Create a binding for one field of this form."""
        return FieldBinding(self, name)
