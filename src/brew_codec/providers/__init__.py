"""Providers for brew-codec."""

from brew_codec.providers.base import BaseProvider
from brew_codec.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
