"""Predicate type aliases."""

from collections.abc import Callable

# Value predicate: takes optional field text, returns True if acceptable
ValuePredicate = Callable[[str | None], bool]
