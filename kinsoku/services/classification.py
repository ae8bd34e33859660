"""
Encoding classification service for Shift_JIS validation.

This module decides, character by character, whether text can be stored in
Shift_JIS under the business policy. A character is rejected when the encoder
cannot represent it, or when its two-byte code falls outside the permitted
byte-range tables.

## Tables

Each entry point uses a pair of tables:

- **safe**: kana, full-width digits and letters (the ``KANJI`` variant also
  admits the full-width symbol, Greek, Cyrillic and box-drawing rows)
- **kanji**: JIS X 0208 level 1 and level 2 ideographs, shared by both variants

## Scan order

Unencodable characters mark the text as forbidden and scanning continues;
an out-of-range two-byte character marks it forbidden and stops the scan.
Callers relying on the trace (``explain``) see that difference.
"""
from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType

from kinsoku.exceptions import EncodingError
from kinsoku.kinsoku_data import (
    HALF_WIDTH_FIRST_BYTES,
    KANJI_RANGES,
    KANJI_SAFE_RANGES,
    PERMIT_ALL,
    PERMIT_EXCEPT_TILDE,
    SYMBOLS_SAFE_RANGES,
)
from kinsoku.services.encoding import ByteOracle, ShiftJISByteOracle
from kinsoku.types import CharacterVerdict, Reason, StrictnessMode, TableVariant, ValidatorConfig

TRACE_LOGGER_NAME = "kinsoku.trace"


# ════════════════════════════════════════════════════════════════════════════════
# BYTE RANGE TABLES
# ════════════════════════════════════════════════════════════════════════════════


def _parse_hex_pair(hex_pair: str) -> int:
    if len(hex_pair) != 4 or not all(c in string.hexdigits for c in hex_pair):
        raise ValueError(f"byte pair must be 4 hex digits, got {hex_pair!r}")
    return int(hex_pair, 16)


@dataclass(frozen=True)
class ByteRange:
    """Closed interval over two-byte values."""

    low: int
    high: int

    def __post_init__(self):
        if not 0 <= self.low <= self.high <= 0xFFFF:
            raise ValueError(f"invalid byte range {self.low:#06x}-{self.high:#06x}")

    def __contains__(self, value: int) -> bool:
        return self.low <= value <= self.high

    def __str__(self) -> str:
        return f"{self.low:04x}-{self.high:04x}"


@dataclass(frozen=True)
class ByteRangeTable:
    """Ordered, immutable list of permitted two-byte ranges."""

    name: str
    ranges: tuple[ByteRange, ...]

    @classmethod
    def from_hex_pairs(cls, name: str, pairs) -> ByteRangeTable:
        """Build a table from legacy ``("8140", "81ac")`` style literals."""
        return cls(name, tuple(ByteRange(_parse_hex_pair(low), _parse_hex_pair(high)) for low, high in pairs))

    def contains(self, value: int) -> bool:
        return any(value in byte_range for byte_range in self.ranges)

    def contains_hex(self, hex_pair: str) -> bool:
        """Case-insensitive membership test for a 4-hex-digit pair."""
        return self.contains(_parse_hex_pair(hex_pair))

    def __contains__(self, value: int) -> bool:
        return self.contains(value)


@dataclass(frozen=True)
class TablePair:
    """Safe and kanji tables used by one classifier entry point."""

    safe: ByteRangeTable
    kanji: ByteRangeTable


KANJI_TABLE = ByteRangeTable.from_hex_pairs("kanji", KANJI_RANGES)

TABLES = MappingProxyType(
    {
        TableVariant.SYMBOLS: TablePair(
            safe=ByteRangeTable.from_hex_pairs("symbols-safe", SYMBOLS_SAFE_RANGES),
            kanji=KANJI_TABLE,
        ),
        TableVariant.KANJI: TablePair(
            safe=ByteRangeTable.from_hex_pairs("kanji-safe", KANJI_SAFE_RANGES),
            kanji=KANJI_TABLE,
        ),
    },
)


def _is_half_width(first_byte: int) -> bool:
    return any(low <= first_byte <= high for low, high in HALF_WIDTH_FIRST_BYTES)


# ════════════════════════════════════════════════════════════════════════════════
# CLASSIFIER
# ════════════════════════════════════════════════════════════════════════════════


class EncodingClassificationService:
    """Per-character Shift_JIS policy classifier."""

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        oracle: ByteOracle | None = None,
        logger: logging.Logger | None = None,
    ):
        self._config = config or ValidatorConfig.create_default()
        self._oracle = oracle or ShiftJISByteOracle(self._config)
        self._logger = logger or logging.getLogger(TRACE_LOGGER_NAME)
        self._marker_char = chr(self._config.fallback_marker)

    def classify(self, text: str, mode: StrictnessMode, variant: TableVariant) -> bool:
        """Return True if ``text`` contains at least one rejected character."""
        forbidden = False
        # Consume the whole scan: an unencodable character does not stop it
        for verdict in self.scan(text, mode, variant):
            if verdict.forbidden:
                forbidden = True
        return forbidden

    def explain(self, text: str, mode: StrictnessMode, variant: TableVariant) -> tuple[CharacterVerdict, ...]:
        """Return every decision ``classify`` takes for ``text``, in order."""
        return tuple(self.scan(text, mode, variant))

    def scan(self, text: str, mode: StrictnessMode, variant: TableVariant) -> Iterator[CharacterVerdict]:
        """
        Yield one verdict per examined character.

        The scan ends early, after yielding it, at the first two-byte character
        outside both tables.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        mode = StrictnessMode.coerce(mode)
        tables = TABLES[TableVariant.coerce(variant)]

        for position, ch in enumerate(text):
            encoded = self._encode(ch, position)
            reason = self._classify_character(ch, encoded, mode, tables)
            self._logger.debug("[%s]: %s", ch, reason.value)
            yield CharacterVerdict(position, ch, encoded, reason)
            if reason is Reason.OUT_OF_RANGE:
                return

    def _encode(self, ch: str, position: int) -> bytes:
        try:
            encoded = self._oracle.encode_character(ch)
        except EncodingError:
            raise
        except (LookupError, UnicodeError, ValueError) as e:
            raise EncodingError(ch, position, str(e)) from e

        if not isinstance(encoded, (bytes, bytearray)) or len(encoded) not in (1, 2):
            raise EncodingError(ch, position, f"expected 1 or 2 bytes, got {encoded!r}")
        return bytes(encoded)

    def _classify_character(self, ch: str, encoded: bytes, mode: StrictnessMode, tables: TablePair) -> Reason:
        first_byte = encoded[0]

        if mode is StrictnessMode.ALLOW_BARS_AND_DOTS and ch in PERMIT_EXCEPT_TILDE:
            return Reason.ALLOW_BARS_AND_DOTS
        if mode is StrictnessMode.ALLOW_ALL and ch in PERMIT_ALL:
            return Reason.ALLOW_ALL

        # The encoder substitutes the marker for anything it cannot represent
        if first_byte == self._config.fallback_marker and ch != self._marker_char:
            return Reason.UNENCODABLE
        if _is_half_width(first_byte):
            return Reason.HALF_WIDTH
        if len(encoded) == 1:
            return Reason.SINGLE_BYTE

        pair = int.from_bytes(encoded, "big")
        if pair in tables.safe:
            return Reason.SAFE_RANGE
        if pair in tables.kanji:
            return Reason.KANJI_RANGE
        return Reason.OUT_OF_RANGE
