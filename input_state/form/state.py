"""Form state models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SubmitOutcome(str, Enum):
    """Result of a handle_submit() call."""

    SUBMITTED = "submitted"  # Validation passed and the handler ran
    REJECTED = "rejected"  # Validation produced errors; handler not called
    SKIPPED = "skipped"  # A submission was already in flight


class FormConfig(BaseModel):
    """Validation triggers for a form."""

    validate_on_change: bool = False
    validate_on_blur: bool = True


class FormState(BaseModel):
    """The mutable record of a single form.

    The key set of values is fixed at creation. errors only holds fields
    that are currently failing; a missing key means no error is known.
    """

    values: dict[str, Any]
    errors: dict[str, str] = Field(default_factory=dict)
    touched: dict[str, bool] = Field(default_factory=dict)
    is_submitting: bool = False

    @property
    def field_names(self) -> list[str]:
        """Names of every known field, in initial order."""
        return list(self.values.keys())

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0
