"""Bindable field protocol.

The field is owned by the host UI (or any other caller).
Validators read its value and report feedback to it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BindableField(Protocol):
    """Contract for a field a validator is bound to.

    Validators read `value` exactly once per evaluation and then call
    exactly one of the feedback methods. They never write `value`.

    A field may also expose a `label` attribute. It is used for logging
    and reports only, see field_label().

    Example:
        class EntryField:
            def __init__(self, entry: Entry) -> None:
                self._entry = entry
                self.label = entry.placeholder

            @property
            def value(self) -> str | None:
                return self._entry.text

            def mark_valid(self) -> None:
                self._entry.clear_error()

            def mark_invalid(self, message: str | None) -> None:
                self._entry.show_error(message or "")
    """

    @property
    def value(self) -> str | None:
        """Current field value. None if the field holds no text."""
        ...

    def mark_valid(self) -> None:
        """Clear any error indication."""
        ...

    def mark_invalid(self, message: str | None) -> None:
        """Show error indication.

        Args:
            message: Failure message of the first failing rule (may be None)
        """
        ...


def field_label(field: BindableField) -> str:
    """Return the field's label, or "" if it has none."""
    label = getattr(field, "label", "")
    return label if isinstance(label, str) else ""
