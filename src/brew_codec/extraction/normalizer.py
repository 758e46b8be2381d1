"""Input normalization and tagged-text sentinel detection."""

from __future__ import annotations

from brew_codec.notation import SENTINELS
from brew_codec.schema import EntityKind

_FENCES = ("```json", "```")


def normalize_input(text: str) -> str:
    """Trim whitespace and strip one code-fence wrapper if present."""
    cleaned = text.strip()
    for opener in _FENCES:
        if cleaned.startswith(opener) and cleaned.endswith("```") and len(cleaned) >= len(opener) + 3:
            return cleaned[len(opener) : -3].strip()
    return cleaned


def detect_sentinel(text: str) -> EntityKind | None:
    """Return the tagged-text kind whose header sentinel prefixes the text."""
    for sentinel, kind in SENTINELS:
        if text.startswith(sentinel):
            return kind
    return None
