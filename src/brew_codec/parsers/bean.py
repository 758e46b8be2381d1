"""Coffee bean grammar: tagged text and JSON objects to bean drafts."""

from __future__ import annotations

import re
from typing import Any

from brew_codec.notation import (
    COMPONENT_LINE,
    MARKERS,
    clean_value,
    header_name,
    is_terminator,
    split_label,
)
from brew_codec.schema import EntityKind

_SCALAR_LABELS = {
    "roast level": "roast_level",
    "roast date": "roast_date",
    "origin": "origin",
    "process": "process",
    "variety": "variety",
    "usage": "bean_type",
}
_LABELS = frozenset(_SCALAR_LABELS) | {
    "type",
    "price",
    "capacity",
    "flavor",
    "rest period",
    "peak period",
    "blend components",
    "notes",
}

_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_CAPACITY_PAIR = re.compile(r"(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)")
_UNKNOWN_VALUES = frozenset({"", "unknown", "未知"})
_FLAVOR_SEPARATORS = re.compile(r"[,，、]")


def parse_bean_text(text: str) -> dict[str, Any]:
    """Scan a ``[Coffee Bean]`` block into a bean draft."""
    lines = text.splitlines()
    draft: dict[str, Any] = {"name": header_name(lines[0], EntityKind.BEAN) if lines else ""}
    marker = MARKERS[EntityKind.BEAN]

    section: str | None = None
    notes: list[str] = []
    for line in lines[1:]:
        if is_terminator(line):
            if line.strip() == marker:
                break
            section = None
            continue

        labelled = split_label(line, _LABELS)
        if labelled is not None:
            label, value = labelled
            section = None
            if label == "blend components":
                section = "components"
                draft["blend_components"] = []
            elif label == "notes":
                section = "notes"
                notes = [value] if value else []
            else:
                _apply_label(draft, label, clean_value(value))
            continue

        if section == "components" and line.strip():
            component = parse_component_line(line)
            if component is not None:
                draft["blend_components"].append(component)
        elif section == "notes":
            notes.append(line.rstrip())

    if notes:
        draft["notes"] = "\n".join(notes).strip()
    return draft


def _apply_label(draft: dict[str, Any], label: str, value: str) -> None:
    if label in _SCALAR_LABELS:
        if value.lower() not in _UNKNOWN_VALUES:
            draft[_SCALAR_LABELS[label]] = value
    elif label == "price":
        number = _NUMBER.search(value)
        if number:
            draft["price"] = number.group(0)
    elif label == "capacity":
        pair = _CAPACITY_PAIR.search(value)
        if pair:
            draft["remaining"], draft["capacity"] = pair.group(1), pair.group(2)
        else:
            number = _NUMBER.search(value)
            if number:
                draft["capacity"] = draft["remaining"] = number.group(0)
    elif label == "flavor":
        draft["flavor"] = [item.strip() for item in _FLAVOR_SEPARATORS.split(value) if item.strip()]
    elif label == "rest period":
        draft["start_day"] = value
    elif label == "peak period":
        draft["end_day"] = value


def parse_component_line(line: str) -> dict[str, Any] | None:
    """Parse ``1. 60% Ethiopia | Washed | Heirloom``; blank fields are omitted."""
    match = COMPONENT_LINE.match(line)
    if not match:
        return None
    component: dict[str, Any] = {}
    if match.group("percentage"):
        component["percentage"] = int(match.group("percentage"))
    fields = [part.strip() for part in match.group("details").split("|")]
    for key, value in zip(("origin", "process", "variety"), fields):
        if value:
            component[key] = value
    return component or None


def bean_draft_from_json(data: dict[str, Any]) -> dict[str, Any]:
    components = data.get("blendComponents")
    return {
        "name": data.get("name"),
        "capacity": data.get("capacity"),
        "remaining": data.get("remaining"),
        "price": data.get("price"),
        "roast_level": data.get("roastLevel"),
        "roast_date": data.get("roastDate"),
        "flavor": data.get("flavor"),
        "notes": data.get("notes"),
        "start_day": data.get("startDay"),
        "end_day": data.get("endDay"),
        "bean_type": data.get("beanType"),
        "origin": data.get("origin"),
        "process": data.get("process") or data.get("processingMethod"),
        "variety": data.get("variety"),
        "blend_components": components if isinstance(components, list) else [],
    }
