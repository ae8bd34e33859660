"""
Encoding Classification Test Suite

This module contains tests for the per-character Shift_JIS classifier:
- Real codec cases for both table variants and all strictness modes
- Exact byte-pair scenarios through a stub byte oracle
- Scan order: unencodable characters continue, out-of-range characters stop
- Encoder failures
"""

import logging

import pytest

from kinsoku import EncodingError, ShiftJISValidator, StrictnessMode, TableVariant, ValidatorConfig
from kinsoku.kinsoku_data import PERMIT_ALL, PERMIT_EXCEPT_TILDE
from kinsoku.services import TABLES, TRACE_LOGGER_NAME, ShiftJISByteOracle
from kinsoku.types import Reason

NONE = StrictnessMode.NONE
BARS = StrictnessMode.ALLOW_BARS_AND_DOTS
ALL = StrictnessMode.ALLOW_ALL

# (text, mode, symbols forbidden, kanji forbidden)
CLASSIFICATION_TEST_CASES = [
    # Plain text
    ("", NONE, False, False),
    ("abc XYZ 123", NONE, False, False),
    ("?", NONE, False, False),  # literal question mark is not the fallback marker
    ("東京都千代田区", NONE, False, False),
    ("やまだ たろう", NONE, False, False),
    ("ヤマダタロウ", NONE, False, False),
    ("ＡＢＣ０１２ａｂｃ", NONE, False, False),
    ("ｱｲｳｴｵ", NONE, False, False),  # half-width katakana
    ("C:\\temp", NONE, False, False),
    ("\x7f", NONE, False, False),  # single byte outside the half-width ranges
    ("佐々木", NONE, False, False),  # 々 is in both safe tables
    ("コーヒー", NONE, False, False),
    ("亜腕弌", NONE, False, False),  # level 1/2 kanji boundaries
    # Full-width symbol rows: only the kanji variant admits them
    ("　", NONE, True, False),  # IDEOGRAPHIC SPACE, 0x8140
    ("こんにちは、世界。", NONE, True, False),
    ("※", NONE, True, False),
    ("♪", NONE, True, False),
    ("∀∈", NONE, True, False),
    ("αβγΩ", NONE, True, False),
    ("Москва", NONE, True, False),
    ("─", NONE, True, False),  # box drawing, 0x849F
    ("・", NONE, True, False),  # KATAKANA MIDDLE DOT, 0x8145
    ("−", NONE, True, False),  # MINUS SIGN, 0x817C
    ("〜", NONE, True, False),  # WAVE DASH, 0x8160
    # Legacy 0x815C mapping
    ("—", NONE, False, False),  # EM DASH, 0x815C
    ("―", NONE, True, True),  # HORIZONTAL BAR is unrepresentable
    # Not in Shift_JIS at all
    ("髙橋", NONE, True, True),
    ("①", NONE, True, True),
    ("㈱", NONE, True, True),
    ("😀", NONE, True, True),
    ("한국어", NONE, True, True),
    ("\ud800", NONE, True, True),  # lone surrogate
    # Strictness modes
    ("・", BARS, False, False),
    ("−", BARS, False, False),
    ("─", BARS, False, False),
    ("－", BARS, False, False),  # FULLWIDTH HYPHEN-MINUS bypasses the encoder check
    ("－", ALL, False, False),
    ("～", ALL, False, False),
    ("10～20", ALL, False, False),
    ("髙", BARS, True, True),
    ("髙", ALL, True, True),
    ("※", BARS, True, False),
    ("※", ALL, True, False),
]


def test_classification_cases(validator):
    """Test both entry points against the real Shift_JIS codec."""
    passed = 0
    failed = 0

    for text, mode, symbols_expected, kanji_expected in CLASSIFICATION_TEST_CASES:
        result = (validator.is_symbols_forbidden(text, mode), validator.is_kanji_forbidden(text, mode))
        if result == (symbols_expected, kanji_expected):
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {text!r} ({mode.name}): expected {(symbols_expected, kanji_expected)}, got {result}")

    assert failed == 0, f"Classification tests: {failed} failures out of {len(CLASSIFICATION_TEST_CASES)} tests"


@pytest.mark.parametrize("variant", list(TableVariant))
@pytest.mark.parametrize("ch", sorted(PERMIT_ALL))
def test_permitted_characters_under_allow_all(validator, ch, variant):
    assert validator.classify(ch, ALL, variant) is False


@pytest.mark.parametrize("variant", list(TableVariant))
@pytest.mark.parametrize("ch", sorted(PERMIT_EXCEPT_TILDE))
def test_permitted_bars_and_dots_bypass_tables(validator, ch, variant):
    verdict = validator.explain(ch, BARS, variant)[0]
    assert verdict.reason is Reason.ALLOW_BARS_AND_DOTS


def test_fullwidth_tilde_needs_allow_all(make_validator):
    validator = make_validator({"～": b"?"})
    assert validator.is_kanji_forbidden("～", NONE)
    assert validator.is_kanji_forbidden("～", BARS)
    assert not validator.is_kanji_forbidden("～", ALL)


def _table_characters(variant):
    """Every character whose Shift_JIS bytes fall in the variant's tables."""
    oracle = ShiftJISByteOracle()
    tables = TABLES[variant]
    chars = []
    for table in (tables.safe, tables.kanji):
        for byte_range in table.ranges:
            for value in range(byte_range.low, byte_range.high + 1):
                encoded = value.to_bytes(2, "big")
                try:
                    ch = encoded.decode("shift_jis")
                except UnicodeDecodeError:
                    continue
                if len(ch) == 1 and oracle.encode_character(ch) == encoded:
                    chars.append(ch)
    return "".join(chars)


@pytest.mark.parametrize("variant", list(TableVariant))
@pytest.mark.parametrize("mode", [NONE, BARS])
def test_table_characters_are_permitted(validator, variant, mode):
    text = _table_characters(variant)
    assert len(text) > 6000
    assert validator.classify(text, mode, variant) is False


# ════════════════════════════════════════════════════════════════════════════════
# STUB ORACLE SCENARIOS
# ════════════════════════════════════════════════════════════════════════════════

GAP = "\ue000"  # pretend character encoded between 81bf and 81c8
LOST = "\ue001"  # pretend unencodable character


@pytest.fixture
def stub_validator(make_validator):
    return make_validator(
        {
            GAP: b"\x81\xc0",
            LOST: b"?",
            "　": b"\x81\x40",
            "\ue002": b"\x81\xc8",
            "\ue003": b"\x81\xbf",
            "\ue004": b"\xa0",  # single byte between the half-width ranges
            "\ue005": b"\xdf",
        },
    )


def test_ideographic_space_pair_is_in_kanji_variant(stub_validator):
    assert stub_validator.is_kanji_forbidden("　", NONE) is False
    assert stub_validator.explain("　", NONE, TableVariant.KANJI)[0].hex_pair == "8140"


def test_gap_between_disjoint_ranges_is_forbidden(stub_validator):
    assert stub_validator.is_kanji_forbidden(GAP, NONE) is True
    assert stub_validator.is_kanji_forbidden("\ue002", NONE) is False
    assert stub_validator.is_kanji_forbidden("\ue003", NONE) is False


def test_out_of_range_stops_the_scan(stub_validator):
    verdicts = stub_validator.explain(f"a{GAP}{LOST}{GAP}b", NONE, TableVariant.KANJI)
    assert [v.reason for v in verdicts] == [Reason.HALF_WIDTH, Reason.OUT_OF_RANGE]
    assert verdicts[-1].position == 1


def test_unencodable_continues_the_scan(stub_validator):
    verdicts = stub_validator.explain(f"{LOST}a{LOST}{GAP}b", NONE, TableVariant.KANJI)
    assert [v.reason for v in verdicts] == [
        Reason.UNENCODABLE,
        Reason.HALF_WIDTH,
        Reason.UNENCODABLE,
        Reason.OUT_OF_RANGE,
    ]
    assert stub_validator.is_kanji_forbidden(f"{LOST}abc", NONE) is True


def test_single_bytes_outside_half_width_ranges(stub_validator):
    verdicts = stub_validator.explain("\ue004\ue005", NONE, TableVariant.SYMBOLS)
    assert [v.reason for v in verdicts] == [Reason.SINGLE_BYTE, Reason.SINGLE_BYTE]
    assert not stub_validator.is_symbols_forbidden("\ue004\ue005", NONE)


def test_trace_events_stop_with_the_scan(stub_validator, caplog):
    caplog.set_level(logging.DEBUG, logger=TRACE_LOGGER_NAME)
    stub_validator.is_kanji_forbidden(f"ab{GAP}{GAP}{LOST}", NONE)

    records = [r for r in caplog.records if r.name == TRACE_LOGGER_NAME]
    assert len(records) == 3
    assert records[-1].getMessage() == f"[{GAP}]: {Reason.OUT_OF_RANGE.value}"


def test_injected_logger_receives_trace(make_validator, caplog):
    from kinsoku import ShiftJISValidator

    custom = logging.getLogger("tests.trace")
    caplog.set_level(logging.DEBUG, logger="tests.trace")
    ShiftJISValidator(logger=custom).is_kanji_forbidden("あ漢", NONE)

    assert [r.getMessage() for r in caplog.records if r.name == "tests.trace"] == [
        f"[あ]: {Reason.SAFE_RANGE.value}",
        f"[漢]: {Reason.KANJI_RANGE.value}",
    ]


def test_verdict_details(validator):
    verdicts = validator.explain("aあ漢髙", NONE, TableVariant.KANJI)
    assert [(v.position, v.character, v.reason) for v in verdicts] == [
        (0, "a", Reason.HALF_WIDTH),
        (1, "あ", Reason.SAFE_RANGE),
        (2, "漢", Reason.KANJI_RANGE),
        (3, "髙", Reason.UNENCODABLE),
    ]
    assert verdicts[1].encoded == b"\x82\xa0"
    assert verdicts[2].hex_pair == "8abf"
    assert verdicts[0].hex_pair is None
    assert [v.forbidden for v in verdicts] == [False, False, False, True]


# ════════════════════════════════════════════════════════════════════════════════
# ENCODER FAILURES
# ════════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    "bad_output",
    [b"", b"\x81\x40\x40", LookupError("no codec"), "not bytes"],
)
def test_encoder_failures_raise(make_validator, bad_output):
    validator = make_validator({"x": bad_output})
    with pytest.raises(EncodingError) as excinfo:
        validator.is_kanji_forbidden("abx", NONE)
    assert excinfo.value.character == "x"
    assert excinfo.value.position == 2


def test_encoder_failure_after_unencodable_still_raises(make_validator):
    validator = make_validator({LOST: b"?", "x": b""})
    with pytest.raises(EncodingError):
        validator.is_kanji_forbidden(f"{LOST}x", NONE)


def test_encoder_failure_after_out_of_range_is_not_reached(make_validator):
    validator = make_validator({GAP: b"\x81\xc0", "x": b""})
    assert validator.is_kanji_forbidden(f"{GAP}x", NONE) is True


def test_encoder_failure_as_forbidden(make_validator):
    validator = make_validator({"x": b""}, config=ValidatorConfig(encoding_errors_are_forbidden=True))
    assert validator.is_kanji_forbidden("abx", NONE) is True
    assert validator.is_symbols_forbidden("x", ALL) is True


# ════════════════════════════════════════════════════════════════════════════════
# CUSTOM FALLBACK MARKER
# ════════════════════════════════════════════════════════════════════════════════

MARKER_TEST_CASES = [
    # (text, expected forbidden) with fallback_marker=0x5F ("_")
    ("_", False),  # literal marker character is not a fallback
    ("a_b", False),
    ("?", False),  # "?" is an ordinary character once the marker changes
    ("髙", True),
    ("山_髙", True),
]


def test_custom_fallback_marker():
    validator = ShiftJISValidator(ValidatorConfig(fallback_marker=0x5F))
    passed = 0
    failed = 0

    for text, expected in MARKER_TEST_CASES:
        result = validator.is_kanji_forbidden(text, NONE)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {text!r}: expected {expected}, got {result}")

    assert failed == 0, f"Marker tests: {failed} failures out of {len(MARKER_TEST_CASES)} tests"


def test_custom_fallback_marker_reasons():
    validator = ShiftJISValidator(ValidatorConfig(fallback_marker=0x5F))
    verdicts = validator.explain("_?髙", NONE)
    assert [v.reason for v in verdicts] == [Reason.HALF_WIDTH, Reason.HALF_WIDTH, Reason.UNENCODABLE]
    assert verdicts[2].encoded == b"_"


# ════════════════════════════════════════════════════════════════════════════════
# ARGUMENT CHECKS
# ════════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("mode", [3, -1, "strict", True, 1.0])
def test_invalid_modes_fail_fast(validator, mode):
    with pytest.raises((ValueError, TypeError)):
        validator.is_kanji_forbidden("abc", mode)


def test_modes_accept_legacy_ints_and_names(validator):
    assert validator.is_symbols_forbidden("・", 1) is False
    assert validator.is_symbols_forbidden("・", "allow_all") is False
    assert validator.is_symbols_forbidden("・", 0) is True


def test_invalid_variant_fails_fast(validator):
    with pytest.raises(ValueError):
        validator.classify("abc", NONE, "hiragana")
    assert validator.classify("※", NONE, "symbols") is True
    assert validator.classify("※", NONE, "KANJI") is False


def test_rejects_none(validator):
    with pytest.raises(TypeError):
        validator.is_kanji_forbidden(None, NONE)
