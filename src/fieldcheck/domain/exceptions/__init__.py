"""Domain exceptions."""

from fieldcheck.domain.exceptions.base import FieldCheckError
from fieldcheck.domain.exceptions.definition import RuleDefinitionError
from fieldcheck.domain.exceptions.preset import UnknownPresetError

__all__ = [
    "FieldCheckError",
    "RuleDefinitionError",
    "UnknownPresetError",
]
