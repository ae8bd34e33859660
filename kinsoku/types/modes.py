"""
Enumerations controlling classification behaviour.
"""
from __future__ import annotations

from enum import Enum, IntEnum


class StrictnessMode(IntEnum):
    """Which permitted punctuation bypasses the byte-range tables.

    Integer values match the legacy ``checkType`` flag.
    """

    NONE = 0
    ALLOW_BARS_AND_DOTS = 1
    ALLOW_ALL = 2

    @classmethod
    def coerce(cls, value) -> StrictnessMode:
        """Convert an int, name or member into a mode, failing fast on anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise TypeError(f"strictness mode must be int, str or StrictnessMode, got {type(value).__name__}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"unknown strictness mode: {value!r}") from None
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown strictness mode: {value!r}") from None
        raise TypeError(f"strictness mode must be int, str or StrictnessMode, got {type(value).__name__}")


class TableVariant(Enum):
    """Which pair of byte-range tables approves two-byte characters."""

    SYMBOLS = "symbols"
    KANJI = "kanji"

    @classmethod
    def coerce(cls, value) -> TableVariant:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise ValueError(f"unknown table variant: {value!r}") from None
        raise TypeError(f"table variant must be str or TableVariant, got {type(value).__name__}")


class Reason(Enum):
    """Why the classifier permitted or rejected a character."""

    ALLOW_BARS_AND_DOTS = "permitted bar or dot"
    ALLOW_ALL = "permitted bar, dot or tilde"
    UNENCODABLE = "not representable in Shift_JIS"
    HALF_WIDTH = "half-width digit, letter, katakana or symbol"
    SINGLE_BYTE = "single-byte character"
    SAFE_RANGE = "full-width kana, digit, letter or symbol"
    KANJI_RANGE = "Shift_JIS kanji"
    OUT_OF_RANGE = "outside permitted byte ranges"

    @property
    def forbidden(self) -> bool:
        return self in (Reason.UNENCODABLE, Reason.OUT_OF_RANGE)
