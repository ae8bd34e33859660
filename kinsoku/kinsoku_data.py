"""
Static character and byte-range data for Shift_JIS policy validation.

All values here are immutable and loaded once at import time. Byte ranges are
kept in their legacy form, as pairs of 4-hex-digit strings, and compiled into
numeric ``ByteRangeTable`` objects by ``kinsoku.services.classification``.

Byte layout reference: http://charset.7jp.net/sjis.html
"""

# ════════════════════════════════════════════════════════════════════════════════
# DASHES / BARS
# ════════════════════════════════════════════════════════════════════════════════

# Replaced by EM_DASH during normalization.
NG_DASHES = frozenset(
    {
        "‒",  # ‒ FIGURE DASH
        "–",  # – EN DASH
    },
)

EM_DASH = "—"  # — EM DASH

PERMIT_BARS = frozenset(
    {
        "-",  # - HYPHEN-MINUS
        "‐",  # ‐ HYPHEN
        "—",  # — EM DASH
        "─",  # ─ BOX DRAWINGS LIGHT HORIZONTAL
        "－",  # － FULLWIDTH HYPHEN-MINUS (not in Shift_JIS)
        "−",  # − MINUS SIGN
    },
)

# ════════════════════════════════════════════════════════════════════════════════
# TILDES
# ════════════════════════════════════════════════════════════════════════════════

# Replaced by FULLWIDTH_TILDE during normalization.
NG_TILDES = frozenset(
    {
        "〜",  # 〜 WAVE DASH
        "~",  # ~ TILDE
        "˜",  # ˜ SMALL TILDE
        "∼",  # ∼ TILDE OPERATOR
    },
)

FULLWIDTH_TILDE = "～"  # ～ FULLWIDTH TILDE

# ════════════════════════════════════════════════════════════════════════════════
# DOTS
# ════════════════════════════════════════════════════════════════════════════════

PERMIT_DOTS = frozenset(
    {
        "・",  # ・ KATAKANA MIDDLE DOT
        "･",  # ･ HALFWIDTH KATAKANA MIDDLE DOT
    },
)

# Allowed under StrictnessMode.ALLOW_BARS_AND_DOTS.
PERMIT_EXCEPT_TILDE = PERMIT_BARS | PERMIT_DOTS

# Allowed under StrictnessMode.ALLOW_ALL.
PERMIT_ALL = PERMIT_EXCEPT_TILDE | {FULLWIDTH_TILDE}

# ════════════════════════════════════════════════════════════════════════════════
# SYMBOL DENYLIST
# ════════════════════════════════════════════════════════════════════════════════

# Forbidden regardless of encodability. WAVE DASH is listed because only some
# database drivers fold it to FULLWIDTH TILDE on write.
DENY_SYMBOLS = frozenset(
    {
        "<", ">", '"', "&", ",", "*", "$", "%", "|",
        "∥",  # ∥ PARALLEL TO
        "£",  # £ POUND SIGN
        "€",  # € EURO SIGN
        "=", "`", "#", "~", "^", "[", "]", "(", ")", ";", ":", "{", "}",
        "〜",  # 〜 WAVE DASH
        "＾",  # ＾ FULLWIDTH CIRCUMFLEX ACCENT
        "―",  # ― HORIZONTAL BAR
    },
)

# ════════════════════════════════════════════════════════════════════════════════
# SINGLE-BYTE LAYOUT
# ════════════════════════════════════════════════════════════════════════════════

FALLBACK_MARKER = 0x3F  # "?"

# Half-width digits, letters, punctuation and katakana (closed intervals).
HALF_WIDTH_FIRST_BYTES = (
    (0x00, 0x7E),
    (0xA1, 0xDE),
)

# ════════════════════════════════════════════════════════════════════════════════
# TWO-BYTE PERMISSION TABLES
# ════════════════════════════════════════════════════════════════════════════════

# Full-width hiragana, katakana, digits and Latin letters, plus 々 and ー—‐.
SYMBOLS_SAFE_RANGES = (
    ("8158", "8158"),  # 々
    ("815b", "815d"),  # ー — ‐
    ("824f", "8258"),  # ０-９
    ("8260", "8279"),  # Ａ-Ｚ
    ("8281", "829a"),  # ａ-ｚ
    ("829f", "82f1"),  # hiragana
    ("8340", "8396"),  # katakana
)

# SYMBOLS_SAFE_RANGES widened with the full-width symbol, Greek, Cyrillic and
# box-drawing rows.
KANJI_SAFE_RANGES = (
    ("8140", "81ac"),
    ("81b8", "81bf"),
    ("81c8", "81ce"),
    ("81da", "81e8"),
    ("81f0", "81f7"),
    ("81fc", "81fc"),
    ("824f", "8258"),
    ("8260", "8279"),
    ("8281", "829a"),
    ("829f", "82f1"),
    ("8340", "8396"),
    ("839f", "83b6"),  # Greek upper
    ("83bf", "83d6"),  # Greek lower
    ("8440", "8460"),  # Cyrillic upper
    ("8470", "8491"),  # Cyrillic lower
    ("849f", "84be"),  # box drawing
)

# JIS X 0208 level 1 and level 2 kanji.
KANJI_RANGES = (
    ("889f", "9872"),
    ("989f", "9ffc"),
    ("e040", "eaa4"),
)

# ════════════════════════════════════════════════════════════════════════════════
# LEGACY CODEC DIFFERENCES
# ════════════════════════════════════════════════════════════════════════════════

# The legacy platform maps 0x815C to EM DASH, Python's shift_jis codec maps it
# to HORIZONTAL BAR. These overrides reproduce the legacy byte layout; None
# marks a character the legacy encoder cannot represent.
LEGACY_SJIS_OVERRIDES = {
    "—": b"\x81\x5c",
    "―": None,
}
