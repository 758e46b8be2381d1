"""Roast-level and usage normalization for brew-codec."""

from brew_codec.normalization.engine import NormalizationEngine
from brew_codec.normalization.types import NormalizedItem

__all__ = [
    "NormalizationEngine",
    "NormalizedItem",
]
