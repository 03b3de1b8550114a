"""Validation layer: engine and declarative rules."""

from input_state.validation.engine import ErrorMap, ValidationEngine, ValidatorFn, Values
from input_state.validation.rules import FieldRule, RuleSet, build_validator

__all__ = [
    "ErrorMap",
    "FieldRule",
    "RuleSet",
    "ValidationEngine",
    "ValidatorFn",
    "Values",
    "build_validator",
]
