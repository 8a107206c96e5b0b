"""Preset lookup exceptions."""

from fieldcheck.domain.exceptions.base import FieldCheckError


class UnknownPresetError(FieldCheckError):
    """Requested preset name is not registered.

    Attributes:
        name: Requested preset name
        available: Registered preset names
    """

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        known = ", ".join(available) if available else "none"
        super().__init__(f"Unknown preset '{name}' (available: {known})")
