"""Example documents and assistant prompts for correctly shaped input."""

from __future__ import annotations

import json

from brew_codec.schema import CoffeeBean, EntityKind

_METHOD_TEMPLATE = {
    "equipment": "V60",
    "method": "Modified single-pour",
    "coffeeBeanInfo": {"name": "", "roastLevel": "medium-light roast", "roastDate": ""},
    "params": {
        "coffee": "15g",
        "water": "225g",
        "ratio": "1:15",
        "grindSize": "medium-fine",
        "temp": "92°C",
        "videoUrl": "",
        "stages": [
            {
                "time": 30,
                "pourTime": 15,
                "label": "Bloom",
                "water": "45g",
                "detail": "Spiral pour to wet the whole bed evenly",
                "pourType": "circle",
            },
            {
                "time": 60,
                "pourTime": 20,
                "label": "Center pour",
                "water": "90g",
                "detail": "Fast center pour to lift the bed",
                "pourType": "center",
            },
            {
                "time": 120,
                "pourTime": 30,
                "label": "Circle pour",
                "water": "225g",
                "detail": "Three spaced pours to control the pace",
                "pourType": "circle",
            },
        ],
    },
    "notes": "",
}

_BEAN_TEMPLATE = {
    "name": "",
    "price": "",
    "capacity": "",
    "remaining": "",
    "roastLevel": "light roast",
    "roastDate": "",
    "flavor": [],
    "origin": "",
    "process": "",
    "variety": "",
    "beanType": "",
    "startDay": None,
    "endDay": None,
    "blendComponents": [],
    "notes": "",
}

_NOTE_TEMPLATE = {
    "equipment": "",
    "methodName": "",
    "coffeeBeanInfo": {"name": "", "roastLevel": "light roast"},
    "params": {"coffee": "15g", "water": "225g", "ratio": "1:15", "grindSize": "", "temp": ""},
    "taste": {"acidity": 0, "sweetness": 0, "bitterness": 0, "body": 0},
    "rating": 0,
    "notes": "",
}

_EQUIPMENT_TEMPLATE = {
    "equipment": {
        "name": "",
        "description": "",
        "animationType": "v60",
        "hasValve": False,
        "customShapeSvg": "",
        "customValveSvg": "",
        "customValveOpenSvg": "",
        "customPourAnimations": [],
    },
    "methods": [],
}

_TEMPLATES = {
    EntityKind.METHOD: _METHOD_TEMPLATE,
    EntityKind.BEAN: _BEAN_TEMPLATE,
    EntityKind.BEANS: [_BEAN_TEMPLATE],
    EntityKind.NOTE: _NOTE_TEMPLATE,
    EntityKind.EQUIPMENT: _EQUIPMENT_TEMPLATE,
}


def example_template(kind: EntityKind | str) -> str:
    """Return the example JSON document for a record kind.

    Raises:
        ValueError: If ``kind`` is not a known record kind.
    """
    return json.dumps(_TEMPLATES[EntityKind(kind)], ensure_ascii=False, indent=2)


def bean_recognition_prompt() -> str:
    return f"""Analyze this coffee bean package or card image and extract the bean information.
Return a JSON object shaped exactly like this template (leave fields empty when unknown):

{example_template(EntityKind.BEAN)}

Important:
- roastLevel must be one of: extremely light roast, light roast, medium-light roast,
  medium roast, medium-dark roast, dark roast
- For blends, list each component in blendComponents with percentage, origin,
  process and variety
- Only include information clearly visible in the image
- Return valid JSON only, no additional text"""


def recipe_prompt(bean: CoffeeBean) -> str:
    """Prompt asking an assistant to design a method for ``bean``."""
    details = [f"- Name: {bean.name}", f"- Roast level: {bean.roast_level}"]
    if bean.is_blend:
        for component in bean.blend_components:
            parts = [p for p in (component.origin, component.process, component.variety) if p]
            share = f"{component.percentage}% " if component.percentage else ""
            details.append(f"- Component: {share}{' / '.join(parts)}")
    else:
        for label, value in (("Origin", bean.origin), ("Process", bean.process), ("Variety", bean.variety)):
            if value:
                details.append(f"- {label}: {value}")
    if bean.flavor:
        details.append(f"- Flavor notes: {', '.join(bean.flavor)}")
    if bean.roast_date:
        details.append(f"- Roast date: {bean.roast_date}")

    bean_block = "\n".join(details)
    return f"""As a championship-level barista, design a pour-over method for this coffee:

{bean_block}

Reply with a single JSON document in exactly this shape:

{example_template(EntityKind.METHOD)}

Rules:
- stage "time" is the cumulative end time in seconds and never decreases
- stage "water" is the cumulative water amount, e.g. "90g"
- "pourType" is one of: center, circle, ice, other
- Return valid JSON only, no additional text"""
