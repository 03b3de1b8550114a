"""Per-field access to a form store.

A field view holds a FieldBinding instead of touching the store directly.
Errors are only surfaced once the field has been touched.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from input_state.form.store import FormStore


class FormContextError(RuntimeError):
    """Raised when a field is bound without a form store."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Field {name!r} must be bound to a FormStore")


class FieldBinding:
    """Reads and writes a single field through its form store."""

    def __init__(self, store: "FormStore | None", name: str) -> None:
        if store is None:
            raise FormContextError(name)
        store.require_field(name)
        self.store = store
        self.name = name

    @property
    def value(self) -> Any:
        """The field value; None is presented as an empty string."""
        value = self.store.values.get(self.name)
        return "" if value is None else value

    @property
    def error(self) -> str | None:
        return self.store.errors.get(self.name)

    @property
    def is_touched(self) -> bool:
        return self.store.touched.get(self.name, False)

    @property
    def show_error(self) -> bool:
        return self.is_touched and bool(self.error)

    @property
    def visible_error(self) -> str | None:
        """The error message if it should be displayed, else None."""
        return self.error if self.show_error else None

    def on_change(self, value: Any) -> None:
        self.store.set_field_value(self.name, value)

    def on_blur(self) -> None:
        self.store.set_field_touched(self.name, True)
