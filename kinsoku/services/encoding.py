"""
Byte oracle for Shift_JIS classification.

The classifier never transcodes text; it only asks the oracle how a single
character would be laid out in Shift_JIS. Unrepresentable characters come back
as the one-byte fallback marker rather than raising.
"""
from __future__ import annotations

from functools import cache
from typing import Protocol

from kinsoku.types import ValidatorConfig


class ByteOracle(Protocol):
    """Anything that maps one character to its target-encoding bytes."""

    def encode_character(self, ch: str) -> bytes: ...


@cache  # one entry per (character, codec)
def _encode_strict(ch: str, encoding: str) -> bytes | None:
    try:
        return ch.encode(encoding)
    except UnicodeEncodeError:
        return None


class ShiftJISByteOracle:
    """
    Encode one character at a time the way the legacy platform laid it out.

    Characters in the config's override map come back as mapped (``None``
    meaning unrepresentable); everything else goes through the configured
    codec. Anything unrepresentable comes back as the one-byte fallback marker.
    """

    def __init__(self, config: ValidatorConfig | None = None):
        self._config = config or ValidatorConfig.create_default()
        self._overrides = self._config.active_overrides
        self._marker = bytes([self._config.fallback_marker])

    def encode_character(self, ch: str) -> bytes:
        """Return the Shift_JIS bytes for ``ch``, or the fallback marker."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if ch in self._overrides:
            encoded = self._overrides[ch]
        else:
            encoded = _encode_strict(ch, self._config.encoding)
        return self._marker if encoded is None else encoded

    @property
    def cache_size(self) -> int:
        return _encode_strict.cache_info().currsize
