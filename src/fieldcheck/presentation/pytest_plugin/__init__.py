"""pytest plugin for fieldcheck.

Registered through the pytest11 entry point.

Provides fixtures:
    memory_field: Factory for InMemoryField instances
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldcheck.presentation.pytest_plugin.fixtures import memory_field

if TYPE_CHECKING:
    import pytest

__all__ = [
    "memory_field",
]


def pytest_configure(config: pytest.Config) -> None:
    """Register fieldcheck marker."""
    config.addinivalue_line(
        "markers",
        "fieldcheck: mark test as field validation test",
    )
