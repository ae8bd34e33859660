"""
Types package for Shift_JIS validation.

This package contains enumerations, configuration and result classes used
throughout the validator.
"""

from kinsoku.types.config import ValidatorConfig
from kinsoku.types.modes import Reason, StrictnessMode, TableVariant
from kinsoku.types.results import BatchValidationResult, CharacterVerdict, ValidationResult

__all__ = [
    "BatchValidationResult",
    "CharacterVerdict",
    "Reason",
    "StrictnessMode",
    "TableVariant",
    "ValidationResult",
    "ValidatorConfig",
]
