"""Touched-state tracking for form fields."""

from collections.abc import Iterable

from input_state.form.state import FormState


class TouchedTracker:
    """Records which fields the user has interacted with.

    Setting a field to the touched value it already has is a no-op, which
    lets callers use the return value to decide whether anything else
    (such as blur validation) should run.
    """

    def __init__(self, state: FormState) -> None:
        self._state = state

    def is_touched(self, name: str) -> bool:
        """Absent and False both mean untouched."""
        return self._state.touched.get(name, False)

    def set(self, name: str, is_touched: bool = True) -> bool:
        """Set a field's touched flag.

        Returns:
            True if the flag changed, False if it already had that value.
        """
        if self.is_touched(name) == is_touched:
            return False
        self._state.touched = {**self._state.touched, name: is_touched}
        return True

    def touch_all(self, names: Iterable[str]) -> None:
        """Mark every given field as touched."""
        self._state.touched = {name: True for name in names}

    def clear(self) -> None:
        self._state.touched = {}
