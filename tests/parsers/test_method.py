"""Tests for the method grammar."""

from brew_codec.parsers.method import method_draft_from_json, parse_method_text
from brew_codec.vocabulary import PourTypeResolver, PourTypeVocabulary, SystemPourType

TEXT = """[Method] Three pours

Coffee: 18g
Water: 288g
Ratio: 1:16
Grind: medium
Temperature: not set
Video: https://example.com/v

Steps:

1. [0m40s] (pour 10s) (valve closed) [center-pour] Bloom - 50g
   Wet all grounds

2. [1m30s] (pour 20s) [circle-pour] Second pour - 180g
3. [2m10s] Drawdown - 288g

@DATA_TYPE:BREWING_METHOD@
"""


def test_parse_method_text_reads_header_and_params():
    draft = parse_method_text(TEXT, PourTypeResolver())

    assert draft["name"] == "Three pours"
    assert draft["params"]["coffee"] == "18g"
    assert draft["params"]["grind_size"] == "medium"
    assert draft["params"]["temp"] == ""
    assert draft["params"]["video_url"] == "https://example.com/v"
    assert draft["espresso"] is False


def test_parse_method_text_reads_stages():
    stages = parse_method_text(TEXT, PourTypeResolver())["stages"]

    assert len(stages) == 3
    assert stages[0] == {
        "time": 40,
        "pour_time": 10,
        "valve_status": "closed",
        "pour_type": SystemPourType.CENTER,
        "label": "Bloom",
        "water": "50g",
        "detail": "Wet all grounds",
    }
    assert stages[1]["time"] == 90
    assert stages[1]["detail"] == ""
    assert stages[2]["pour_time"] is None
    assert stages[2]["pour_type"] is None
    assert stages[2]["label"] == "Drawdown"


def test_label_with_dash_keeps_water_as_last_field():
    text = "[Method] X\n\nSteps:\n\n1. [0m30s] [circle-pour] Pour - slowly - 60g\n"

    stage = parse_method_text(text, PourTypeResolver())["stages"][0]

    assert stage["label"] == "Pour - slowly"
    assert stage["water"] == "60g"


def test_espresso_equipment_type_line():
    text = "[Method] Shot\nEquipment Type: Espresso Machine\n\nSteps:\n\n1. [0m28s] [extraction] Extract - 36g\n"

    draft = parse_method_text(text, PourTypeResolver())

    assert draft["espresso"] is True
    assert draft["stages"][0]["pour_type"] is SystemPourType.EXTRACTION


def test_custom_pour_type_display_name():
    resolver = PourTypeResolver(PourTypeVocabulary(names={"pulse-7": "Pulse pour"}))
    text = "[Method] X\n\n1. [0m30s] (pour 5s) [Pulse pour] Pulse - 30g\n"

    stage = parse_method_text(text, resolver)["stages"][0]

    assert stage["pour_type"].id == "pulse-7"


def test_method_draft_from_json_name_sources():
    resolver = PourTypeResolver()
    stages = {"stages": [{"time": 10, "pourType": "spiral"}]}

    assert method_draft_from_json({"name": "A", "params": stages}, resolver)["name"] == "A"
    assert method_draft_from_json({"method": "B", "params": stages}, resolver)["name"] == "B"
    from_bean_info = method_draft_from_json(
        {"coffeeBeanInfo": {"method": "C"}, "params": stages}, resolver
    )
    assert from_bean_info["name"] == "C"
    assert from_bean_info["stages"][0]["pour_type"] is SystemPourType.CIRCLE


def test_method_draft_from_json_espresso_flags():
    resolver = PourTypeResolver()
    params = {"stages": [{"time": 25}]}

    assert method_draft_from_json({"isEspresso": True, "params": params}, resolver)["espresso"]
    assert method_draft_from_json({"equipment": "Espresso Machine", "params": params}, resolver)["espresso"]
    assert not method_draft_from_json({"equipment": "V60", "params": params}, resolver)["espresso"]


LEGACY_TEXT = """【冲煮方案】经典三段

咖啡粉量: 15g
水量：225g
粉水比: 1:15
研磨度: 中细
水温: 未设置

冲煮步骤:

1. [0分30秒] (注水10秒) [绕圈注水] 焖蒸 - 30g
   均匀湿润
2. [1分30秒] (注水20秒) [中心注水] 主注水 - 225g

@DATA_TYPE:BREWING_METHOD@
"""


def test_parse_legacy_method_text():
    draft = parse_method_text(LEGACY_TEXT, PourTypeResolver())

    assert draft["name"] == "经典三段"
    assert draft["params"] == {
        "coffee": "15g",
        "water": "225g",
        "ratio": "1:15",
        "grind_size": "中细",
        "temp": "",
    }
    first, second = draft["stages"]
    assert first["time"] == 30
    assert first["pour_time"] == 10
    assert first["pour_type"] is SystemPourType.CIRCLE
    assert first["label"] == "焖蒸"
    assert first["detail"] == "均匀湿润"
    assert second["time"] == 90
    assert second["pour_type"] is SystemPourType.CENTER


def test_legacy_espresso_equipment_type():
    draft = parse_method_text("【冲煮方案】意式\n器具类型: 意式咖啡机\n1. [0分28秒] 萃取 - 36g", PourTypeResolver())

    assert draft["espresso"] is True
