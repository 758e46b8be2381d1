"""Recover a JSON value from noisy text and classify its shape."""

from __future__ import annotations

import json
import logging
from typing import Any

from brew_codec.schema import EntityKind

logger = logging.getLogger(__name__)

_MISSING = object()


def extract_json(text: str) -> Any:
    """Parse text as JSON, retrying once on the first-{ / last-} slice.

    Returns ``_MISSING`` when neither attempt parses. No bracket balancing is
    attempted, so braces in surrounding prose can defeat the slice.
    """
    try:
        return json.loads(text)
    except ValueError:
        pass

    first = text.find("{")
    last = text.rfind("}")
    if first < 0 or last <= first:
        return _MISSING
    try:
        value = json.loads(text[first : last + 1])
    except ValueError:
        logger.debug("json slice %d..%d did not parse", first, last)
        return _MISSING
    logger.info("recovered json object from surrounding text")
    return value


def is_missing(value: Any) -> bool:
    return value is _MISSING


def classify_shape(data: Any) -> EntityKind | None:
    """Narrow a parsed JSON value to a record kind by its keys."""
    if isinstance(data, list):
        if data and all(isinstance(item, dict) and "roastLevel" in item for item in data):
            return EntityKind.BEANS
        return None
    if not isinstance(data, dict):
        return None
    if isinstance(data.get("equipment"), dict):
        return EntityKind.EQUIPMENT
    params = data.get("params")
    if isinstance(params, dict) and "stages" in params:
        return EntityKind.METHOD
    if "roastLevel" in data and "name" in data:
        return EntityKind.BEAN
    if "methodName" in data and "equipment" in data:
        return EntityKind.NOTE
    return None
