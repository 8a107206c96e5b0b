"""Preset registry: preset name -> factory."""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from fieldcheck.application.validators.presets import (
    amount_validator,
    code_validator,
    empty_value_validator,
    mobile_validator,
    password_validator,
)
from fieldcheck.domain.exceptions.preset import UnknownPresetError

if TYPE_CHECKING:
    from fieldcheck.application.validators.validator import Validator
    from fieldcheck.domain.ports.field import BindableField

PresetFactory = Callable[..., "Validator"]

# Read-only view: presets are fixed at import time
PRESETS = MappingProxyType(
    {
        "non-empty": empty_value_validator,
        "password": password_validator,
        "mobile": mobile_validator,
        "code": code_validator,
        "amount": amount_validator,
    }
)


def available_presets() -> tuple[str, ...]:
    """Registered preset names, sorted."""
    return tuple(sorted(PRESETS))


def build_preset(name: str, field: BindableField, **params: Any) -> Validator:
    """Build a preset validator by name.

    Args:
        name: Preset name (see available_presets())
        field: Field to bind
        **params: Preset parameters, e.g. min_length for "password"

    Returns:
        Configured validator

    Raises:
        UnknownPresetError: If name is not registered
        TypeError: If params do not match the preset's parameters
    """
    factory: PresetFactory | None = PRESETS.get(name)
    if factory is None:
        raise UnknownPresetError(name, available_presets())
    return factory(field, **params)
