"""Entity grammar parsers producing drafts for the canonicalizer."""

from brew_codec.parsers.bean import bean_draft_from_json, parse_bean_text
from brew_codec.parsers.equipment import equipment_from_json
from brew_codec.parsers.method import method_draft_from_json, parse_method_text
from brew_codec.parsers.note import note_draft_from_json, parse_note_text

__all__ = [
    "bean_draft_from_json",
    "equipment_from_json",
    "method_draft_from_json",
    "note_draft_from_json",
    "parse_bean_text",
    "parse_method_text",
    "parse_note_text",
]
