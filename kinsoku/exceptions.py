"""
Exceptions raised by the validator.
"""
from __future__ import annotations


class EncodingError(ValueError):
    """A character could not be converted to a 1- or 2-byte Shift_JIS sequence.

    This is distinct from the encoder substituting the fallback marker, which
    is a normal, handled outcome.
    """

    def __init__(self, character: str, position: int, detail: str):
        self.character = character
        self.position = position
        self.detail = detail
        super().__init__(f"cannot encode {character!r} at position {position}: {detail}")
