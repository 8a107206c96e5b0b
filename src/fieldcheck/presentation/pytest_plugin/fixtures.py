"""pytest fixtures for field validation tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from fieldcheck.infrastructure.fields import InMemoryField

FieldFactory = Callable[..., InMemoryField]


def make_memory_field(value: str | None = None, label: str = "") -> InMemoryField:
    """Create an InMemoryField.

    Args:
        value: Initial value
        label: Field label

    Returns:
        Field with no feedback recorded
    """
    return InMemoryField(value=value, label=label)


@pytest.fixture
def memory_field() -> FieldFactory:
    """Factory fixture for in-memory fields.

    Example:
        def test_password(memory_field):
            field = memory_field("secret", label="Password")
            assert password_validator(field, 6).evaluate() == "secret"

    Returns:
        make_memory_field
    """
    return make_memory_field
