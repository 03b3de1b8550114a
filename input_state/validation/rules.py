"""Declarative validation rules.

Lets a validator be described as data (for example in a YAML file) instead
of code. Each FieldRule checks one field; the first failing check on a field
produces its message.
"""

import re
from typing import Any

from pydantic import BaseModel, Field

from input_state.validation.engine import ErrorMap, ValidatorFn, Values


class FieldRule(BaseModel):
    """Checks applied to a single field."""

    field: str
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    message: str | None = None

    def check(self, value: Any) -> str | None:
        """Return an error message for value, or None if it passes."""
        text = "" if value is None else str(value)

        if not text:
            if self.required:
                return self.message or f"{self.field} is required"
            # Optional and empty: nothing else to check
            return None

        if self.min_length is not None and len(text) < self.min_length:
            return self.message or f"{self.field} must be at least {self.min_length} characters"

        if self.max_length is not None and len(text) > self.max_length:
            return self.message or f"{self.field} must be at most {self.max_length} characters"

        if self.pattern is not None and re.fullmatch(self.pattern, text) is None:
            return self.message or f"{self.field} is invalid"

        return None


class RuleSet(BaseModel):
    """An ordered collection of field rules."""

    rules: list[FieldRule] = Field(default_factory=list)

    def validate_values(self, values: Values) -> ErrorMap:
        """Apply every rule and collect the first error per field."""
        errors: ErrorMap = {}
        for rule in self.rules:
            if rule.field in errors:
                continue
            message = rule.check(values.get(rule.field))
            if message is not None:
                errors[rule.field] = message
        return errors


def build_validator(rules: list[FieldRule] | list[dict[str, Any]]) -> ValidatorFn:
    """Build a validator function from rule definitions.

    Args:
        rules: FieldRule instances or plain dicts (as loaded from YAML).

    Returns:
        A function usable as a form validator.
    """
    rule_set = RuleSet(rules=[FieldRule.model_validate(r) if isinstance(r, dict) else r for r in rules])
    return rule_set.validate_values
