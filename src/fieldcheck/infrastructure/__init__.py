"""Infrastructure: concrete field implementations."""

from fieldcheck.infrastructure.fields import InMemoryField

__all__ = ["InMemoryField"]
