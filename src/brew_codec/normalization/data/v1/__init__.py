"""Normalization dictionary v1."""

from brew_codec.normalization.data.v1.aliases import ALIASES
from brew_codec.normalization.data.v1.terms import TERMS

__all__ = ["TERMS", "ALIASES"]
