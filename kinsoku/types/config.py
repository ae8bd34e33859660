"""
Configuration for Shift_JIS validation.
"""
from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from types import MappingProxyType

from kinsoku.kinsoku_data import FALLBACK_MARKER, LEGACY_SJIS_OVERRIDES
from kinsoku.types.modes import StrictnessMode

_SHIFT_JIS_CODEC = "shift_jis"


def _check_override(ch, encoded) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"override keys must be single characters, got {ch!r}")
    if encoded is not None and (not isinstance(encoded, bytes) or len(encoded) not in (1, 2)):
        raise ValueError(f"override for {ch!r} must be 1 or 2 bytes or None, got {encoded!r}")


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable validator configuration."""

    encoding: str = _SHIFT_JIS_CODEC
    fallback_marker: int = FALLBACK_MARKER
    legacy_mappings: bool = True
    default_mode: StrictnessMode = StrictnessMode.NONE
    # Legacy callers treat an encoder failure as "forbidden" instead of an error
    encoding_errors_are_forbidden: bool = False
    overrides: MappingProxyType = field(default_factory=lambda: LEGACY_SJIS_OVERRIDES, hash=False)

    def __post_init__(self):
        # Only the one target encoding is supported; aliases such as "sjis" are fine
        try:
            codec_name = codecs.lookup(self.encoding).name
        except LookupError as e:
            raise ValueError(f"unknown encoding {self.encoding!r}") from e
        if codec_name != _SHIFT_JIS_CODEC:
            raise ValueError(f"unsupported encoding {self.encoding!r}: only Shift_JIS is supported")
        if not 0 <= self.fallback_marker <= 0xFF:
            raise ValueError(f"fallback_marker must be a single byte, got {self.fallback_marker!r}")
        object.__setattr__(self, "default_mode", StrictnessMode.coerce(self.default_mode))

        # Snapshot the caller's mapping so later changes to it cannot leak in
        overrides = dict(self.overrides)
        for ch, encoded in overrides.items():
            _check_override(ch, encoded)
        object.__setattr__(self, "overrides", MappingProxyType(overrides))

    @property
    def active_overrides(self) -> MappingProxyType:
        """Character → bytes overrides applied before the codec."""
        return self.overrides if self.legacy_mappings else MappingProxyType({})

    @classmethod
    def create_default(cls) -> ValidatorConfig:
        return cls()
