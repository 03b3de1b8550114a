"""Controlled vs. uncontrolled value resolution.

A component is *controlled* when its owner supplies the value (anything
other than None) and *uncontrolled* when it tracks the value itself. Every
read goes through resolve_value(), so a component switching modes sees the
new source on the very next read.
"""

import logging
import warnings
from collections.abc import Callable
from typing import Generic, TypeVar

from input_state.config import is_development

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ControlledValueWarning(UserWarning):
    """Development-time warning for a misconfigured controlled component."""


def resolve_value(external: T | None, internal: T) -> T:
    """Return the external value when supplied, otherwise the internal one."""
    return internal if external is None else external


class ControlledValue(Generic[T]):
    """Tracks the internal value of a component and resolves it on read.

    The internal value is always kept up to date, even while controlled,
    so that dropping the external value falls back to what the user last
    entered.

    Args:
        default: Initial internal value.
        on_change: Change callback supplied by the owner.
        name: Component name used in warning messages.
    """

    def __init__(
        self,
        default: T,
        on_change: Callable[[T], None] | None = None,
        name: str = "Component",
    ) -> None:
        self.internal = default
        self.on_change = on_change
        self.name = name
        self._was_controlled: bool | None = None
        self._warned_inert = False

    def get(self, external: T | None) -> T:
        """Resolve the effective value for this read."""
        self.check(external)
        return resolve_value(external, self.internal)

    def set(self, external: T | None, value: T) -> None:
        """Record a new value entered by the user and notify the owner."""
        self.check(external)
        self.internal = value
        if self.on_change is not None:
            self.on_change(value)

    def is_controlled(self, external: T | None) -> bool:
        return external is not None

    def check(self, external: T | None) -> None:
        """Emit development warnings for the current configuration.

        Warns once per controlled episode when no change callback exists,
        and whenever the component flips between modes.
        """
        controlled = external is not None

        if self._was_controlled is not None and self._was_controlled != controlled:
            before, after = (
                ("controlled", "uncontrolled") if self._was_controlled else ("uncontrolled", "controlled")
            )
            self._warn(
                f"{self.name} changed from {before} to {after}. "
                "Decide between a controlled or uncontrolled value for the "
                "lifetime of the component."
            )
        self._was_controlled = controlled

        if not controlled:
            self._warned_inert = False
            return

        if self.on_change is None and not self._warned_inert:
            self._warned_inert = True
            self._warn(
                f"{self.name}: value provided without a change callback. "
                "The component is controlled and will never update."
            )

    def _warn(self, message: str) -> None:
        if not is_development():
            return
        logger.debug("controlled value warning: %s", message)
        warnings.warn(message, ControlledValueWarning, stacklevel=4)
