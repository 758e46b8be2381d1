"""Brewing note grammar: tagged text and JSON objects to note drafts."""

from __future__ import annotations

from typing import Any

from brew_codec.notation import clean_value, header_name, is_terminator, split_label
from brew_codec.schema import EntityKind

_TOP_LABELS = {
    "equipment": "equipment",
    "method": "method_name",
    "bean": "bean_name",
    "roast level": "bean_roast_level",
}
_PARAM_LABELS = {
    "coffee": "coffee",
    "water": "water",
    "ratio": "ratio",
    "grind": "grind_size",
    "temperature": "temp",
}
_TASTE_LABELS = frozenset({"acidity", "sweetness", "bitterness", "body"})
_LABELS = (
    frozenset(_TOP_LABELS)
    | frozenset(_PARAM_LABELS)
    | _TASTE_LABELS
    | {"parameters", "taste", "rating", "notes"}
)


def parse_note_text(text: str) -> dict[str, Any]:
    lines = text.splitlines()
    title = header_name(lines[0], EntityKind.NOTE) if lines else ""
    draft: dict[str, Any] = {"params": {}, "taste": {}}

    in_notes = False
    notes: list[str] = []
    for line in lines[1:]:
        if is_terminator(line):
            break
        labelled = split_label(line, _LABELS)
        if labelled is None:
            if in_notes:
                notes.append(line.rstrip())
            continue

        label, value = labelled
        in_notes = label == "notes"
        value = clean_value(value)
        if in_notes:
            notes = [value] if value else []
        elif label in _TOP_LABELS:
            draft[_TOP_LABELS[label]] = value
        elif label in _PARAM_LABELS:
            draft["params"][_PARAM_LABELS[label]] = value
        elif label in _TASTE_LABELS:
            draft["taste"][label] = value
        elif label == "rating":
            draft["rating"] = value

    if not draft.get("method_name") and title:
        draft["method_name"] = title
    if notes:
        draft["notes"] = "\n".join(notes).strip()
    return draft


def note_draft_from_json(data: dict[str, Any]) -> dict[str, Any]:
    params = data.get("params") if isinstance(data.get("params"), dict) else {}
    taste = data.get("taste") if isinstance(data.get("taste"), dict) else {}
    bean_info = data.get("coffeeBeanInfo") if isinstance(data.get("coffeeBeanInfo"), dict) else {}
    return {
        "equipment": data.get("equipment"),
        "method_name": data.get("methodName") or data.get("method"),
        "bean_name": bean_info.get("name") or data.get("beanId"),
        "bean_roast_level": bean_info.get("roastLevel"),
        "params": {
            "coffee": params.get("coffee"),
            "water": params.get("water"),
            "ratio": params.get("ratio"),
            "grind_size": params.get("grindSize"),
            "temp": params.get("temp"),
        },
        "taste": {key: taste.get(key) for key in _TASTE_LABELS},
        "rating": data.get("rating"),
        "notes": data.get("notes"),
        "timestamp": data.get("timestamp"),
    }
