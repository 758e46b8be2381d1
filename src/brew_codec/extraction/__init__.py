"""Input normalization, sentinel detection and JSON recovery."""

from brew_codec.extraction.json_recovery import classify_shape, extract_json, is_missing
from brew_codec.extraction.normalizer import detect_sentinel, normalize_input

__all__ = [
    "classify_shape",
    "detect_sentinel",
    "extract_json",
    "is_missing",
    "normalize_input",
]
