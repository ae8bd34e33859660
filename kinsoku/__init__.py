"""
kinsoku: Shift_JIS character policy validation

Checks whether text can be stored in Shift_JIS and whether it contains
punctuation forbidden by business policy, and normalizes dash and tilde
variants before validation.
"""

__version__ = "0.1.0"

__all__ = [
    "EncodingError",
    "ShiftJISValidator",
    "StrictnessMode",
    "TableVariant",
    "ValidatorConfig",
    "classify",
    "contains_forbidden_symbol",
    "is_kanji_forbidden",
    "is_symbols_forbidden",
    "normalize_dashes_and_tildes",
]

_VALIDATOR_EXPORTS = {
    "ShiftJISValidator",
    "classify",
    "contains_forbidden_symbol",
    "is_kanji_forbidden",
    "is_symbols_forbidden",
    "normalize_dashes_and_tildes",
}


def __getattr__(name):
    """Lazy import so the tables are only built on first use."""
    if name in _VALIDATOR_EXPORTS:
        from kinsoku import validator
        return getattr(validator, name)
    if name in ("StrictnessMode", "TableVariant", "ValidatorConfig"):
        from kinsoku import types
        return getattr(types, name)
    if name == "EncodingError":
        from kinsoku.exceptions import EncodingError
        return EncodingError
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
