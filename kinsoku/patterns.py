"""
Compiled regex patterns for symbol policy checks.
"""

import re

from kinsoku.kinsoku_data import DENY_SYMBOLS


def _build_deny_pattern() -> re.Pattern[str]:
    """Build a character class matching any single denied symbol."""
    # Sort for a stable pattern string; escape everything since ] ^ [ are members
    members = "".join(re.escape(symbol) for symbol in sorted(DENY_SYMBOLS))
    return re.compile(f"[{members}]")


DENY_PATTERN = _build_deny_pattern()
