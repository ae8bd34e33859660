"""
Shift_JIS Character Policy Validation Module

This module answers two questions about text headed for a Shift_JIS column or
message: can every character be represented in Shift_JIS, and does the text
contain punctuation the business policy forbids even when representable.

## Overview

The core functionality is provided by the `ShiftJISValidator` class, which
wires three services together:

1. **DashTildeNormalizationService**: rewrites figure/en dashes to EM DASH and
   tilde variants to FULLWIDTH TILDE
2. **DenyPatternService**: rejects text containing denylisted punctuation
3. **EncodingClassificationService**: checks each character's Shift_JIS bytes
   against the permitted byte-range tables

## Usage Examples

```python
from kinsoku import ShiftJISValidator, StrictnessMode

validator = ShiftJISValidator()

validator.is_kanji_forbidden("東京都千代田区")  # False
validator.is_kanji_forbidden("髙橋")  # True, 髙 is not in Shift_JIS
validator.is_symbols_forbidden("※", StrictnessMode.NONE)  # True, symbol row
validator.is_symbols_forbidden("－", StrictnessMode.ALLOW_BARS_AND_DOTS)  # False

validator.normalize_dashes_and_tildes("10〜20")  # "10～20"
validator.contains_forbidden_symbol("a<b")  # True

result = validator.validate("山田 太郎")
if not result.success:
    print(result.error_message)
```

## Strictness modes

- `StrictnessMode.NONE` (0): every character goes through the byte tables
- `StrictnessMode.ALLOW_BARS_AND_DOTS` (1): permitted bars and dots bypass them
- `StrictnessMode.ALLOW_ALL` (2): permitted bars, dots and FULLWIDTH TILDE bypass them

## Error Handling

A character the encoder cannot turn into one or two bytes raises
`EncodingError`. With `ValidatorConfig(encoding_errors_are_forbidden=True)`
the validator instead reports the text as forbidden, as legacy callers expect.

## Thread Safety

The validator holds no mutable state after construction and can be shared
between threads.
"""

from __future__ import annotations

import logging
from functools import cache

from kinsoku.exceptions import EncodingError
from kinsoku.services import (
    BatchAnalysisService,
    BatchValidationResult,
    ByteOracle,
    DashTildeNormalizationService,
    DenyPatternService,
    EncodingClassificationService,
)
from kinsoku.types import (
    CharacterVerdict,
    StrictnessMode,
    TableVariant,
    ValidationResult,
    ValidatorConfig,
)

log = logging.getLogger("kinsoku")

# ════════════════════════════════════════════════════════════════════════════════
# MAIN VALIDATOR CLASS
# ════════════════════════════════════════════════════════════════════════════════


class ShiftJISValidator:
    """Main Shift_JIS policy validation service."""

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        oracle: ByteOracle | None = None,
        logger: logging.Logger | None = None,
    ):
        self._config = config or ValidatorConfig.create_default()
        self._normalizer = DashTildeNormalizationService()
        self._deny_service = DenyPatternService()
        self._classifier = EncodingClassificationService(self._config, oracle=oracle, logger=logger)
        self._batch_service = BatchAnalysisService(self)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    # Public API methods
    def normalize_dashes_and_tildes(self, text: str | None) -> str | None:
        """Replace disallowed dash and tilde variants; ``None`` passes through."""
        return self._normalizer.normalize(text)

    def contains_forbidden_symbol(self, text: str) -> bool:
        """True if ``text`` contains a denylisted punctuation symbol."""
        return self._deny_service.contains_forbidden_symbol(text)

    def is_symbols_forbidden(self, text: str, mode: StrictnessMode | int | None = None) -> bool:
        """
        Check for characters outside Shift_JIS or outside the narrow symbol tables.

        Returns False when ``text`` consists only of permitted punctuation (per
        ``mode``), half-width or single-byte characters, full-width kana, digits
        and letters, and JIS level 1/2 kanji.
        """
        return self.classify(text, mode, TableVariant.SYMBOLS)

    def is_kanji_forbidden(self, text: str, mode: StrictnessMode | int | None = None) -> bool:
        """
        Check for characters outside Shift_JIS, such as old-form kanji.

        Same as `is_symbols_forbidden` but additionally admits the full-width
        symbol, Greek, Cyrillic and box-drawing rows.
        """
        return self.classify(text, mode, TableVariant.KANJI)

    def classify(
        self,
        text: str,
        mode: StrictnessMode | int | None = None,
        variant: TableVariant | str = TableVariant.KANJI,
    ) -> bool:
        """Return True if ``text`` contains at least one character that must be rejected."""
        mode = self._resolve_mode(mode)
        try:
            return self._classifier.classify(text, mode, variant)
        except EncodingError as e:
            if not self._config.encoding_errors_are_forbidden:
                raise
            log.warning(f"Treating encoding failure as forbidden: {e}")
            return True

    def explain(
        self,
        text: str,
        mode: StrictnessMode | int | None = None,
        variant: TableVariant | str = TableVariant.KANJI,
    ) -> tuple[CharacterVerdict, ...]:
        """Per-character decisions, ending where `classify` stops scanning."""
        return self._classifier.explain(text, self._resolve_mode(mode), variant)

    def validate(
        self,
        text: str,
        mode: StrictnessMode | int | None = None,
        variant: TableVariant | str = TableVariant.KANJI,
        normalize: bool = True,
    ) -> ValidationResult:
        """
        Normalize (optionally), then run the symbol denylist and the encoding classifier.

        Returns ValidationResult with:
        - success=True, normalized=text if everything is permitted
        - success=False, error_message=reason otherwise
        """
        normalized = self._normalizer.normalize(text) if normalize else text
        if not isinstance(normalized, str):
            raise TypeError(f"text must be str, got {type(normalized).__name__}")

        symbols = self._deny_service.find_forbidden_symbols(normalized)
        if symbols:
            return ValidationResult.failure(normalized, f"contains forbidden symbols: {''.join(symbols)}")

        try:
            verdicts = self._classifier.explain(normalized, self._resolve_mode(mode), variant)
        except EncodingError as e:
            if not self._config.encoding_errors_are_forbidden:
                raise
            log.warning(f"Treating encoding failure as forbidden: {e}")
            return ValidationResult.failure(normalized, str(e))

        offending = next((verdict for verdict in verdicts if verdict.forbidden), None)
        if offending is not None:
            return ValidationResult.failure(
                normalized,
                f"character {offending.character!r} at position {offending.position}: {offending.reason.value}",
                offending,
            )
        return ValidationResult.ok(normalized)

    def validate_batch(
        self,
        texts: list[str],
        mode: StrictnessMode | int | None = None,
        variant: TableVariant | str = TableVariant.KANJI,
        normalize: bool = True,
    ) -> BatchValidationResult:
        """Validate several texts with the same settings."""
        return self._batch_service.analyze_batch(texts, mode=mode, variant=variant, normalize=normalize)

    def _resolve_mode(self, mode) -> StrictnessMode:
        if mode is None:
            return self._config.default_mode
        return StrictnessMode.coerce(mode)


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


@cache
def default_validator() -> ShiftJISValidator:
    """Shared validator with the default configuration."""
    return ShiftJISValidator()


def normalize_dashes_and_tildes(text: str | None) -> str | None:
    return default_validator().normalize_dashes_and_tildes(text)


def contains_forbidden_symbol(text: str) -> bool:
    return default_validator().contains_forbidden_symbol(text)


def is_symbols_forbidden(text: str, mode: StrictnessMode | int | None = None) -> bool:
    return default_validator().is_symbols_forbidden(text, mode)


def is_kanji_forbidden(text: str, mode: StrictnessMode | int | None = None) -> bool:
    return default_validator().is_kanji_forbidden(text, mode)


def classify(text: str, mode: StrictnessMode | int | None = None, variant: TableVariant | str = TableVariant.KANJI) -> bool:
    return default_validator().classify(text, mode, variant)
