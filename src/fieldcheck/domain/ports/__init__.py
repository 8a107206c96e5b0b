"""Domain ports (interfaces to external collaborators)."""

from fieldcheck.domain.ports.field import BindableField, field_label

__all__ = [
    "BindableField",
    "field_label",
]
