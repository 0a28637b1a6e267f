"""Validated UK Unique Learner Numbers (ULNs)."""

from __future__ import annotations

from uln.core.exceptions import (
    InvalidFormatError,
    InvalidValueError,
    NullInputError,
    ULNError,
)
from uln.models.uln import ULN
from uln.validator.uln_validator import (
    calculate_check_digit,
    is_valid_uln,
    require_valid_uln,
)

__all__ = [
    "ULN",
    "InvalidFormatError",
    "InvalidValueError",
    "NullInputError",
    "ULNError",
    "calculate_check_digit",
    "is_valid_uln",
    "require_valid_uln",
]
