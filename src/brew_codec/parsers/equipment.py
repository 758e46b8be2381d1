"""Custom equipment records, optionally bundled with their methods."""

from __future__ import annotations

from typing import Any, get_args

from pydantic import ValidationError

from brew_codec.canonical import Canonicalizer
from brew_codec.exceptions import StructuralError
from brew_codec.parsers.method import method_draft_from_json
from brew_codec.schema import AnimationType, CustomEquipment, CustomEquipmentRecord
from brew_codec.vocabulary import PourTypeResolver, PourTypeVocabulary

ANIMATION_TYPES = frozenset(get_args(AnimationType))


def validate_equipment(equipment: dict[str, Any]) -> None:
    if not equipment.get("name"):
        raise StructuralError("equipment missing name")
    animation_type = equipment.get("animationType")
    if not isinstance(animation_type, str) or animation_type not in ANIMATION_TYPES:
        raise StructuralError("invalid equipment animation type")
    if animation_type == "custom" and not equipment.get("customShapeSvg"):
        raise StructuralError("custom equipment missing shape")
    if equipment.get("hasValve") and not (
        equipment.get("customValveSvg") and equipment.get("customValveOpenSvg")
    ):
        raise StructuralError("valved equipment missing valve shapes")


def equipment_from_json(data: dict[str, Any], canonicalizer: Canonicalizer) -> CustomEquipmentRecord:
    """Validate an ``{"equipment": {...}, "methods": [...]}`` document.

    Bundled methods resolve pour types against the equipment's own
    vocabulary; one bad method rejects the whole record.
    """
    raw_equipment = data["equipment"]
    validate_equipment(raw_equipment)

    raw_methods = data.get("methods")
    if raw_methods is None:
        raw_methods = []
    if not isinstance(raw_methods, list):
        raise StructuralError("equipment methods must be a list")

    try:
        equipment = CustomEquipment.model_validate(raw_equipment)
    except ValidationError as exc:
        raise StructuralError(f"invalid equipment: {exc.errors()[0]['msg']}") from exc

    vocabulary = PourTypeVocabulary.from_equipment(equipment)
    inner = Canonicalizer(config=canonicalizer.config, vocabulary=vocabulary)
    inner.warnings = canonicalizer.warnings
    resolver = PourTypeResolver(vocabulary)

    methods = []
    for index, raw_method in enumerate(raw_methods, start=1):
        if not isinstance(raw_method, dict):
            raise StructuralError(f"method {index}: not an object")
        try:
            methods.append(inner.method(method_draft_from_json(raw_method, resolver)))
        except StructuralError as exc:
            raise StructuralError(f"method {index}: {exc.reason}") from exc

    return CustomEquipmentRecord(equipment=equipment, methods=methods)
