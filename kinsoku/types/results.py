"""
Result types for Shift_JIS validation.

This module contains result classes that provide Either-like error handling
and immutable data structures.
"""
from __future__ import annotations

from dataclasses import dataclass

from kinsoku.types.modes import Reason


@dataclass(frozen=True)
class CharacterVerdict:
    """One classifier decision for a single character."""

    position: int
    character: str
    encoded: bytes
    reason: Reason

    @property
    def forbidden(self) -> bool:
        return self.reason.forbidden

    @property
    def hex_pair(self) -> str | None:
        """Lower-case 4-hex-digit pair for two-byte characters."""
        if len(self.encoded) != 2:
            return None
        return self.encoded.hex()


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation run - Either-like structure."""

    success: bool
    normalized: str
    error_message: str | None = None
    # First rejected character, when the encoding classifier rejected the text
    offending: CharacterVerdict | None = None

    @property
    def forbidden(self) -> bool:
        return not self.success

    @classmethod
    def ok(cls, normalized: str) -> ValidationResult:
        return cls(success=True, normalized=normalized)

    @classmethod
    def failure(cls, normalized: str, error_message: str, offending: CharacterVerdict | None = None) -> ValidationResult:
        return cls(success=False, normalized=normalized, error_message=error_message, offending=offending)


@dataclass(frozen=True)
class BatchValidationResult:
    """Immutable result of validating several texts with the same settings."""

    texts: tuple[str, ...]
    results: tuple[ValidationResult, ...]

    @property
    def forbidden_indices(self) -> tuple[int, ...]:
        return tuple(i for i, result in enumerate(self.results) if not result.success)

    @property
    def all_valid(self) -> bool:
        return not self.forbidden_indices

    @property
    def forbidden_count(self) -> int:
        return len(self.forbidden_indices)
