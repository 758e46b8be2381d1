"""Tests for custom equipment validation."""

import pytest

from brew_codec.canonical import Canonicalizer
from brew_codec.exceptions import StructuralError
from brew_codec.parsers.equipment import equipment_from_json, validate_equipment
from brew_codec.vocabulary import SystemPourType


@pytest.mark.parametrize(
    ("equipment", "reason"),
    [
        ({"animationType": "v60"}, "equipment missing name"),
        ({"name": "X", "animationType": "siphon"}, "invalid equipment animation type"),
        ({"name": "X", "animationType": "custom"}, "custom equipment missing shape"),
        (
            {"name": "X", "animationType": "v60", "hasValve": True, "customValveSvg": "<svg/>"},
            "valved equipment missing valve shapes",
        ),
    ],
)
def test_validate_equipment_reasons(equipment, reason):
    with pytest.raises(StructuralError) as exc_info:
        validate_equipment(equipment)
    assert exc_info.value.reason == reason


def test_valid_valved_custom_equipment():
    validate_equipment(
        {
            "name": "Switch",
            "animationType": "custom",
            "customShapeSvg": "<svg/>",
            "hasValve": True,
            "customValveSvg": "<svg/>",
            "customValveOpenSvg": "<svg/>",
        }
    )


def test_methods_must_be_a_list():
    with pytest.raises(StructuralError) as exc_info:
        equipment_from_json(
            {"equipment": {"name": "X", "animationType": "v60"}, "methods": {"a": 1}},
            Canonicalizer(),
        )
    assert exc_info.value.reason == "equipment methods must be a list"


def test_espresso_equipment_methods_infer_extraction():
    canonicalizer = Canonicalizer()
    record = equipment_from_json(
        {
            "equipment": {"name": "Bar", "animationType": "espresso"},
            "methods": [
                {
                    "name": "Shot",
                    "params": {
                        "stages": [
                            {"time": 28, "pourTime": 28, "label": "Extract", "water": "36g"},
                            {"time": 40, "label": "Beverage", "water": "36g"},
                        ]
                    },
                }
            ],
        },
        canonicalizer,
    )

    stages = record.methods[0].params.stages
    assert stages[0].pour_type is SystemPourType.EXTRACTION
    assert stages[0].pour_time is None
    assert stages[1].pour_type is SystemPourType.BEVERAGE
    assert stages[1].time == 0
