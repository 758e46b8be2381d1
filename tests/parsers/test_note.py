"""Tests for the brewing note grammar."""

from brew_codec.parsers.note import note_draft_from_json, parse_note_text

NOTE = """[Brewing Note]
Equipment: V60
Method: Three pours
Bean: Ethiopia Guji
Roast Level: light roast

Parameters:
Coffee: 15g
Water: 225g
Ratio: 1:15
Grind: medium-fine
Temperature: 92°C

Taste:
Acidity: 4/5
Sweetness: 3/5
Bitterness: 1/5
Body: 2/5

Rating: 4/5

Notes:
Bright, a bit thin.
@DATA_TYPE:BREWING_NOTE@"""


def test_parse_note_text():
    draft = parse_note_text(NOTE)

    assert draft["equipment"] == "V60"
    assert draft["method_name"] == "Three pours"
    assert draft["bean_name"] == "Ethiopia Guji"
    assert draft["params"]["grind_size"] == "medium-fine"
    assert draft["taste"] == {"acidity": "4/5", "sweetness": "3/5", "bitterness": "1/5", "body": "2/5"}
    assert draft["rating"] == "4/5"
    assert draft["notes"] == "Bright, a bit thin."


def test_header_remainder_is_method_fallback():
    draft = parse_note_text("[Brewing Note] Morning cup\nEquipment: Kalita\n")

    assert draft["method_name"] == "Morning cup"
    assert draft["equipment"] == "Kalita"


def test_note_draft_from_json():
    draft = note_draft_from_json(
        {
            "equipment": "V60",
            "methodName": "House",
            "coffeeBeanInfo": {"name": "Guji", "roastLevel": "light"},
            "params": {"grindSize": "fine"},
            "taste": {"acidity": 3},
            "rating": 5,
            "timestamp": 1700000000000,
        }
    )

    assert draft["method_name"] == "House"
    assert draft["bean_name"] == "Guji"
    assert draft["params"]["grind_size"] == "fine"
    assert draft["taste"]["acidity"] == 3
    assert draft["taste"]["body"] is None
    assert draft["timestamp"] == 1700000000000


LEGACY_NOTE = """【冲煮记录】
设备: V60
方法: 三段式
咖啡豆: 古吉
烘焙度: 浅度烘焙

参数设置:
咖啡粉量: 15g
水量: 225g
粉水比: 1:15
研磨度: 中细
水温: 92°C

风味评分:
酸度: 4/5
甜度: 3/5
苦度: 1/5
醇厚度: 2/5

综合评分: 4/5

笔记:
明亮
@DATA_TYPE:BREWING_NOTE@
"""


def test_parse_legacy_note_text():
    draft = parse_note_text(LEGACY_NOTE)

    assert draft["equipment"] == "V60"
    assert draft["method_name"] == "三段式"
    assert draft["bean_name"] == "古吉"
    assert draft["bean_roast_level"] == "浅度烘焙"
    assert draft["params"]["grind_size"] == "中细"
    assert draft["params"]["temp"] == "92°C"
    assert draft["taste"] == {"acidity": "4/5", "sweetness": "3/5", "bitterness": "1/5", "body": "2/5"}
    assert draft["rating"] == "4/5"
    assert draft["notes"] == "明亮"
