"""Render canonical entities as shareable tagged text."""

from __future__ import annotations

import json

from brew_codec.notation import (
    BEAN_HEADERS,
    ESPRESSO_MACHINE,
    FOOTER,
    MARKERS,
    METHOD_HEADER,
    NOT_SET,
    NOTE_HEADER,
    format_clock,
)
from brew_codec.schema import BrewingMethod, BrewingNote, CoffeeBean, EntityKind, Stage
from brew_codec.vocabulary import ESPRESSO_POUR_TYPES, PourTypeResolver, PourTypeVocabulary

_BEAN_TYPE_LABELS = {"filter": "Filter", "espresso": "Espresso", "omni": "Omni"}


def _or_not_set(value: str) -> str:
    return value or NOT_SET


def _is_espresso(method: BrewingMethod, vocabulary: PourTypeVocabulary | None) -> bool:
    if vocabulary is not None and vocabulary.espresso:
        return True
    return any(stage.pour_type in ESPRESSO_POUR_TYPES for stage in method.params.stages)


def serialize_method(method: BrewingMethod, vocabulary: PourTypeVocabulary | None = None) -> str:
    """Render a method; pour-type names are always looked up, never echoed."""
    resolver = PourTypeResolver(vocabulary)
    params = method.params
    lines = [
        f"{METHOD_HEADER} {method.name}",
        "",
        f"Coffee: {_or_not_set(params.coffee)}",
        f"Water: {_or_not_set(params.water)}",
        f"Ratio: {_or_not_set(params.ratio)}",
        f"Grind: {_or_not_set(params.grind_size)}",
        f"Temperature: {_or_not_set(params.temp)}",
    ]
    if params.video_url:
        lines.append(f"Video: {params.video_url}")
    if _is_espresso(method, vocabulary):
        lines.append(f"Equipment Type: {ESPRESSO_MACHINE}")

    lines.extend(["", "Steps:", ""])
    for index, stage in enumerate(params.stages, start=1):
        lines.append(_stage_line(index, stage, resolver))
        if stage.detail:
            lines.append("   " + _single_line(stage.detail))
        lines.append("")

    lines.append(MARKERS[EntityKind.METHOD])
    return "\n".join(lines)


def _single_line(text: str) -> str:
    return " ".join(part.strip() for part in text.splitlines() if part.strip())


def _stage_line(index: int, stage: Stage, resolver: PourTypeResolver) -> str:
    parts = [f"{index}. [{format_clock(stage.time)}]"]
    if stage.pour_time is not None:
        parts.append(f"(pour {stage.pour_time}s)")
    if stage.valve_status:
        parts.append(f"(valve {stage.valve_status})")
    if stage.pour_type is not None:
        parts.append(f"[{resolver.display_name(stage.pour_type)}]")
    parts.append(f"{stage.label} - {stage.water}")
    return " ".join(parts)


def serialize_bean(bean: CoffeeBean) -> str:
    lines = [f"{BEAN_HEADERS[1]} {bean.name}"]
    lines.append(f"Type: {'Blend' if bean.is_blend else 'Single Origin'}")
    if bean.bean_type:
        lines.append(f"Usage: {_BEAN_TYPE_LABELS[bean.bean_type]}")
    if bean.price:
        lines.append(f"Price: {bean.price} CNY")
    if bean.capacity:
        lines.append(f"Capacity: {bean.remaining or bean.capacity}/{bean.capacity}g")
    lines.append(f"Roast Level: {_or_not_set(bean.roast_level)}")
    if bean.roast_date:
        lines.append(f"Roast Date: {bean.roast_date}")

    components = bean.blend_components
    if bean.is_blend or (components and components[0].percentage):
        lines.append("Blend Components:")
        for index, component in enumerate(components, start=1):
            fields = [component.origin or "", component.process or "", component.variety or ""]
            while fields and not fields[-1]:
                fields.pop()
            percentage = f"{component.percentage}% " if component.percentage else ""
            lines.append(f"{index}. {percentage}{' | '.join(fields)}".rstrip())
    else:
        for label, value in (
            ("Origin", bean.origin),
            ("Process", bean.process),
            ("Variety", bean.variety),
        ):
            if value:
                lines.append(f"{label}: {value}")

    if bean.flavor:
        lines.append(f"Flavor: {', '.join(bean.flavor)}")
    if bean.start_day is not None:
        lines.append(f"Rest Period: {bean.start_day} days")
    if bean.end_day is not None:
        lines.append(f"Peak Period: {bean.end_day} days")
    if bean.notes:
        lines.extend(["Notes:", bean.notes])

    lines.extend(["", FOOTER, MARKERS[EntityKind.BEAN]])
    return "\n".join(lines)


def serialize_note(note: BrewingNote) -> str:
    params = note.params
    taste = note.taste
    lines = [
        NOTE_HEADER,
        f"Equipment: {_or_not_set(note.equipment)}",
        f"Method: {_or_not_set(note.method_name)}",
        f"Bean: {_or_not_set(note.bean.name)}",
        f"Roast Level: {_or_not_set(note.bean.roast_level)}",
        "",
        "Parameters:",
        f"Coffee: {_or_not_set(params.coffee)}",
        f"Water: {_or_not_set(params.water)}",
        f"Ratio: {_or_not_set(params.ratio)}",
        f"Grind: {_or_not_set(params.grind_size)}",
        f"Temperature: {_or_not_set(params.temp)}",
        "",
        "Taste:",
        f"Acidity: {taste.acidity}/5",
        f"Sweetness: {taste.sweetness}/5",
        f"Bitterness: {taste.bitterness}/5",
        f"Body: {taste.body}/5",
        "",
        f"Rating: {note.rating}/5",
    ]
    if note.notes:
        lines.extend(["", "Notes:", note.notes])
    lines.append(MARKERS[EntityKind.NOTE])
    return "\n".join(lines)


def export_method_json(method: BrewingMethod) -> str:
    """Render the JSON sharing document accepted by ``parse_method_json``."""
    params = method.params
    document = {
        "method": method.name,
        "isEspresso": _is_espresso(method, None),
        "params": {
            "coffee": params.coffee,
            "water": params.water,
            "ratio": params.ratio,
            "grindSize": params.grind_size,
            "temp": params.temp,
            "videoUrl": params.video_url,
            "stages": [stage.model_dump(by_alias=True, exclude_none=True) for stage in params.stages],
        },
    }
    return json.dumps(document, ensure_ascii=False, indent=2)
