"""Submission coordination for forms.

Sequence for a submit:
1. Skip if a submission is already in flight
2. Mark every field touched so field errors become visible
3. Validate the current values and replace the error map
4. Stop if there are errors
5. Otherwise run the submit handler, tracking is_submitting around it
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from input_state.form.state import FormState, SubmitOutcome
from input_state.form.touched import TouchedTracker
from input_state.validation.engine import ValidationEngine, Values

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[Values], Awaitable[Any] | Any]


class SubmissionCoordinator:
    """Runs the touch-validate-submit sequence against a form's state."""

    def __init__(
        self,
        state: FormState,
        touched: TouchedTracker,
        engine: ValidationEngine,
        on_submit: SubmitHandler | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            state: The form state to operate on.
            touched: Tracker used to mark every field touched.
            engine: Validation engine run before submitting.
            on_submit: Owner's submit handler. May be sync or async.
        """
        self._state = state
        self._touched = touched
        self._engine = engine
        self.on_submit = on_submit

    async def submit(self) -> SubmitOutcome:
        """Validate the form and, if valid, call the submit handler.

        Returns:
            SKIPPED if a submission was in flight, REJECTED if validation
            failed, SUBMITTED once the handler completed.

        Raises:
            Exception: Whatever the submit handler raises. is_submitting is
                reset before the exception leaves this method.
        """
        state = self._state
        if state.is_submitting:
            logger.debug("submit skipped: submission already in flight")
            return SubmitOutcome.SKIPPED

        self._touched.touch_all(state.field_names)

        errors = self._engine.run(state.values)
        state.errors = errors
        if errors:
            logger.debug("submit rejected: %d field error(s)", len(errors))
            return SubmitOutcome.REJECTED

        snapshot = dict(state.values)
        state.is_submitting = True
        logger.debug("submitting %d field(s)", len(snapshot))
        try:
            if self.on_submit is not None:
                result = self.on_submit(snapshot)
                if inspect.isawaitable(result):
                    await result
        finally:
            state.is_submitting = False
            logger.debug("submission finished")

        return SubmitOutcome.SUBMITTED
