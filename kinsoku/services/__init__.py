"""
Services package for Shift_JIS validation.

This package contains all service classes used by the validator, organized by
domain responsibility.
"""

from kinsoku.services.batch_analysis import BatchAnalysisService
from kinsoku.services.classification import (
    KANJI_TABLE,
    TABLES,
    TRACE_LOGGER_NAME,
    ByteRange,
    ByteRangeTable,
    EncodingClassificationService,
    TablePair,
)
from kinsoku.services.encoding import ByteOracle, ShiftJISByteOracle
from kinsoku.services.normalization import DASH_TILDE_TABLE, DashTildeNormalizationService
from kinsoku.services.symbols import DenyPatternService
from kinsoku.types import BatchValidationResult, ValidatorConfig

__all__ = [
    # Batch Services
    "BatchAnalysisService",
    # Types (re-exported for compatibility)
    "BatchValidationResult",
    "ValidatorConfig",
    # Tables
    "ByteRange",
    "ByteRangeTable",
    "DASH_TILDE_TABLE",
    "KANJI_TABLE",
    "TABLES",
    "TRACE_LOGGER_NAME",
    "TablePair",
    # Services
    "ByteOracle",
    "DashTildeNormalizationService",
    "DenyPatternService",
    "EncodingClassificationService",
    "ShiftJISByteOracle",
]
