"""Field validators.

- Validator: ordered, short-circuiting rule chain bound to a field
- Presets: password, mobile, code, amount (all on a non-empty base)
- Registry: build presets by name
- Batch: evaluate several validators and collect reports
"""

from fieldcheck.application.validators._registry import (
    PRESETS,
    available_presets,
    build_preset,
)
from fieldcheck.application.validators.batch import all_passed, evaluate_all
from fieldcheck.application.validators.presets import (
    amount_validator,
    code_validator,
    empty_value_validator,
    mobile_validator,
    password_validator,
)
from fieldcheck.application.validators.validator import Validator

__all__ = [
    # Core
    "Validator",
    # Presets
    "empty_value_validator",
    "password_validator",
    "mobile_validator",
    "code_validator",
    "amount_validator",
    # Registry
    "PRESETS",
    "available_presets",
    "build_preset",
    # Batch
    "evaluate_all",
    "all_passed",
]
