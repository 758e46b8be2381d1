"""Engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

GRIND_SIZE_DEFAULTS = {
    "en": "medium-fine",
    "zh": "中细",
}


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class EngineConfig:
    locale: str = "en"
    default_temperature: str = "92°C"
    dictionary_version: str = "v1"
    fuzzy_threshold: float = 0.86

    @property
    def default_grind_size(self) -> str:
        return GRIND_SIZE_DEFAULTS.get(self.locale, GRIND_SIZE_DEFAULTS["en"])

    @classmethod
    def from_env(cls) -> "EngineConfig":
        locale = os.getenv("BREW_CODEC_LOCALE", "en").strip().lower() or "en"
        if locale not in GRIND_SIZE_DEFAULTS:
            locale = "en"
        return cls(
            locale=locale,
            default_temperature=(os.getenv("BREW_CODEC_DEFAULT_TEMP") or "92°C").strip(),
            dictionary_version=os.getenv("BREW_CODEC_DICTIONARY_VERSION", "v1").strip() or "v1",
            fuzzy_threshold=max(
                0.0, min(1.0, _safe_float(os.getenv("BREW_CODEC_FUZZY_THRESHOLD"), 0.86))
            ),
        )
