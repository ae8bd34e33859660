"""
Symbol denylist service.

Independent of encoding and strictness mode: a text is forbidden when it
contains any single character from ``DENY_SYMBOLS``.
"""
from __future__ import annotations

import re

from kinsoku.patterns import DENY_PATTERN


class DenyPatternService:
    """Policy check against the punctuation denylist."""

    def __init__(self, pattern: re.Pattern[str] = DENY_PATTERN):
        self._pattern = pattern

    def contains_forbidden_symbol(self, text: str) -> bool:
        """Return True if ``text`` contains at least one denied symbol."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        return self._pattern.search(text) is not None

    def find_forbidden_symbols(self, text: str) -> list[str]:
        """Return denied symbols in order of appearance, without duplicates."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        return list(dict.fromkeys(self._pattern.findall(text)))
