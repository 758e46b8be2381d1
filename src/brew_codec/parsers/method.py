"""Brewing method grammar: tagged text and JSON shapes to method drafts."""

from __future__ import annotations

from typing import Any

from brew_codec.notation import STAGE_LINE, clean_value, header_name, is_terminator, split_label
from brew_codec.schema import EntityKind
from brew_codec.vocabulary import PourTypeResolver

_PARAM_LABELS = {
    "coffee": "coffee",
    "water": "water",
    "ratio": "ratio",
    "grind": "grind_size",
    "grind size": "grind_size",
    "temperature": "temp",
    "temp": "temp",
    "video": "video_url",
}
_LABELS = frozenset(_PARAM_LABELS) | {"equipment type", "steps"}

_ESPRESSO_EQUIPMENT = frozenset({"espresso", "espresso machine", "意式咖啡机"})


def parse_method_text(text: str, resolver: PourTypeResolver) -> dict[str, Any]:
    """Scan a ``[Method]`` block into a method draft.

    Stage lines are recognised wherever they appear; the indented line right
    after a stage line is taken as its detail.
    """
    lines = text.splitlines()
    header = lines[0] if lines else ""
    draft: dict[str, Any] = {
        "name": header_name(header, EntityKind.METHOD),
        "espresso": False,
        "params": {},
        "stages": [],
    }

    i = 1
    while i < len(lines):
        line = lines[i]
        i += 1
        if not line.strip():
            continue
        if is_terminator(line):
            break

        match = STAGE_LINE.match(line)
        if match:
            stage = _stage_from_match(match, resolver)
            if i < len(lines) and _is_detail_line(lines[i]):
                stage["detail"] = lines[i].strip()
                i += 1
            draft["stages"].append(stage)
            continue

        labelled = split_label(line, _LABELS)
        if labelled is None:
            continue
        label, value = labelled
        if label == "equipment type":
            draft["espresso"] = clean_value(value).lower() in _ESPRESSO_EQUIPMENT
        elif label in _PARAM_LABELS:
            draft["params"][_PARAM_LABELS[label]] = clean_value(value)

    return draft


def _is_detail_line(line: str) -> bool:
    return (
        line[:1].isspace()
        and bool(line.strip())
        and not STAGE_LINE.match(line)
        and not is_terminator(line)
    )


def _stage_from_match(match, resolver: PourTypeResolver) -> dict[str, Any]:
    pour = match.group("pour")
    pour_type_name = (match.group("pour_type") or "").strip()
    return {
        "time": int(match.group("minutes")) * 60 + int(match.group("seconds")),
        "pour_time": int(pour) if pour is not None else None,
        "valve_status": match.group("valve"),
        "pour_type": resolver.resolve(pour_type_name) if pour_type_name else None,
        "label": match.group("label").strip(),
        "water": (match.group("water") or "").strip(),
        "detail": "",
    }


def method_draft_from_json(data: dict[str, Any], resolver: PourTypeResolver) -> dict[str, Any]:
    """Map a JSON method document (``params.stages`` shape) to a draft."""
    params = data.get("params") if isinstance(data.get("params"), dict) else {}
    bean_info = data.get("coffeeBeanInfo") if isinstance(data.get("coffeeBeanInfo"), dict) else {}
    equipment = data.get("equipment") if isinstance(data.get("equipment"), str) else ""

    stages = params.get("stages") if isinstance(params.get("stages"), list) else []
    return {
        "id": data.get("id"),
        "name": data.get("name") or data.get("method") or bean_info.get("method") or "",
        "equipment": equipment,
        "espresso": data.get("isEspresso") is True or equipment.strip().lower() in _ESPRESSO_EQUIPMENT,
        "params": {
            "coffee": params.get("coffee"),
            "water": params.get("water"),
            "ratio": params.get("ratio"),
            "grind_size": params.get("grindSize"),
            "temp": params.get("temp"),
            "video_url": params.get("videoUrl"),
        },
        "stages": [_stage_from_json(stage, resolver) for stage in stages if isinstance(stage, dict)],
    }


def _stage_from_json(stage: dict[str, Any], resolver: PourTypeResolver) -> dict[str, Any]:
    raw_pour_type = stage.get("pourType")
    pour_type = None
    if isinstance(raw_pour_type, str) and raw_pour_type.strip():
        pour_type = resolver.resolve_id(raw_pour_type)
    return {
        "time": stage.get("time"),
        "pour_time": stage.get("pourTime"),
        "valve_status": stage.get("valveStatus"),
        "pour_type": pour_type,
        "label": stage.get("label"),
        "water": stage.get("water"),
        "detail": stage.get("detail"),
    }
