"""Shared vocabulary of the tagged-text sharing format."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from brew_codec.schema import EntityKind

METHOD_HEADER = "[Method]"
BEAN_HEADERS = ("[Coffee Bean Info]", "[Coffee Bean]")
NOTE_HEADER = "[Brewing Note]"

# Older app builds shared records with Chinese headers and labels; accepted on
# input, never written.
SENTINELS: tuple[tuple[str, EntityKind], ...] = (
    (METHOD_HEADER, EntityKind.METHOD),
    (BEAN_HEADERS[0], EntityKind.BEAN),
    (BEAN_HEADERS[1], EntityKind.BEAN),
    (NOTE_HEADER, EntityKind.NOTE),
    ("【冲煮方案】", EntityKind.METHOD),
    ("【咖啡豆信息】", EntityKind.BEAN),
    ("【咖啡豆】", EntityKind.BEAN),
    ("【冲煮记录】", EntityKind.NOTE),
)

LEGACY_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "咖啡粉量": "coffee",
        "水量": "water",
        "粉水比": "ratio",
        "比例": "ratio",
        "研磨度": "grind",
        "水温": "temperature",
        "器具类型": "equipment type",
        "冲煮步骤": "steps",
        "设备": "equipment",
        "方法": "method",
        "咖啡豆": "bean",
        "烘焙度": "roast level",
        "参数设置": "parameters",
        "风味评分": "taste",
        "酸度": "acidity",
        "甜度": "sweetness",
        "苦度": "bitterness",
        "醇厚度": "body",
        "综合评分": "rating",
        "笔记": "notes",
        "类型": "type",
        "用途": "usage",
        "价格": "price",
        "容量": "capacity",
        "烘焙日期": "roast date",
        "产地": "origin",
        "处理法": "process",
        "品种": "variety",
        "拼配成分": "blend components",
        "养豆期": "rest period",
        "赏味期": "peak period",
        "风味标签": "flavor",
        "备注": "notes",
    }
)

MARKERS = {
    EntityKind.METHOD: "@DATA_TYPE:BREWING_METHOD@",
    EntityKind.BEAN: "@DATA_TYPE:COFFEE_BEAN@",
    EntityKind.NOTE: "@DATA_TYPE:BREWING_NOTE@",
}

FOOTER = "---"
NOT_SET = "not set"
_NOT_SET_VALUES = frozenset({NOT_SET, "未设置"})
ESPRESSO_MACHINE = "Espresso Machine"

# <n>. [<m>m<s>s] (pour <s>s)? (valve open|closed)? [<pour type>]? <label> - <water>
# The legacy form spells the clock as [<m>分<s>秒] and the pour as (注水<s>秒).
STAGE_LINE = re.compile(
    r"^\s*\d+\.\s*\[(?P<minutes>\d+)(?:m|分)(?P<seconds>\d+)(?:s|秒)\]"
    r"(?:\s*\((?:pour\s*|注水)(?P<pour>\d+)(?:s|秒)\))?"
    r"(?:\s*\(valve\s+(?P<valve>open|closed)\))?"
    r"(?:\s*\[(?P<pour_type>[^\]]*)\])?"
    r"\s*(?P<label>.*)\s+-(?:\s+(?P<water>.*?))?\s*$"
)

# <n>. <pct>%? origin | process | variety
COMPONENT_LINE = re.compile(r"^\s*\d+\.\s*(?:(?P<percentage>\d+)\s*%)?\s*(?P<details>.*)$")

LABEL_LINE = re.compile(r"^(?P<label>[^\W\d_][^:：]*?)\s*[:：]\s*(?P<value>.*)$")


def header_name(line: str, kind: EntityKind) -> str:
    """Return the name following a header sentinel of ``kind``, or ``""``."""
    for sentinel, sentinel_kind in SENTINELS:
        if sentinel_kind is kind and line.startswith(sentinel):
            return line[len(sentinel) :].strip()
    return ""


def split_label(line: str, labels: frozenset[str]) -> tuple[str, str] | None:
    """Return (label, value) when the line starts with one of the known labels."""
    match = LABEL_LINE.match(line.strip())
    if not match:
        return None
    label = match.group("label").strip().lower()
    label = LEGACY_LABELS.get(label, label)
    if label not in labels:
        return None
    return label, match.group("value").strip()


def clean_value(value: str) -> str:
    """Treat the serializer's placeholder as an absent value."""
    value = value.strip()
    return "" if value.lower() in _NOT_SET_VALUES else value


def format_clock(seconds: int) -> str:
    return f"{seconds // 60}m{seconds % 60}s"


def is_terminator(line: str) -> bool:
    stripped = line.strip()
    return stripped == FOOTER or stripped.startswith("@DATA_TYPE:")
