"""
Normalization service for dash and tilde variants.

Figure and en dashes become EM DASH; wave dash, ASCII tilde, small tilde and
the tilde operator become FULLWIDTH TILDE. Every other character is left
alone, so output length always equals input length.
"""
from __future__ import annotations

from types import MappingProxyType

from kinsoku.kinsoku_data import EM_DASH, FULLWIDTH_TILDE, NG_DASHES, NG_TILDES


def _build_translation_table() -> MappingProxyType:
    table = {ord(ch): EM_DASH for ch in NG_DASHES}
    table.update({ord(ch): FULLWIDTH_TILDE for ch in NG_TILDES})
    return MappingProxyType(table)


DASH_TILDE_TABLE = _build_translation_table()


class DashTildeNormalizationService:
    """Pure normalization service."""

    def __init__(self, table=DASH_TILDE_TABLE):
        self._table = table

    def normalize(self, text: str | None) -> str | None:
        """
        Replace disallowed dash and tilde variants with their canonical forms.

        ``None`` passes through unchanged. Side-effect free.
        """
        if text is None:
            return None
        if not isinstance(text, str):
            raise TypeError(f"text must be str or None, got {type(text).__name__}")
        return text.translate(self._table)

    def is_normalized(self, text: str) -> bool:
        return not any(ord(ch) in self._table for ch in text)
