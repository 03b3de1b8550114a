"""Validation engine for form values.

Wraps an owner-supplied validator function. The engine holds no state:
the form store decides when to run it and what to do with the result.
"""

from collections.abc import Callable, Mapping
from typing import Any

ErrorMap = dict[str, str]
Values = dict[str, Any]

# A validator returns a field -> message mapping, or None for "no errors".
ValidatorFn = Callable[[Values], Mapping[str, str] | None]


class ValidationEngine:
    """Runs a validator against a snapshot of form values.

    Validation failures are data, never exceptions. An exception raised by
    the validator itself is a host error and propagates to the caller.
    """

    def __init__(self, validator: ValidatorFn | None = None) -> None:
        """Initialize the engine.

        Args:
            validator: Optional validator function. Without one, every value
                set is considered valid.
        """
        self.validator = validator

    def run(self, values: Mapping[str, Any]) -> ErrorMap:
        """Validate a set of values.

        Args:
            values: The current form values. The validator receives a copy.

        Returns:
            Mapping of field name to error message. Empty when valid.
        """
        if self.validator is None:
            return {}
        result = self.validator(dict(values))
        if result is None:
            return {}
        return dict(result)

    def is_valid(self, values: Mapping[str, Any]) -> bool:
        """Whether the values produce no errors."""
        return not self.run(values)
