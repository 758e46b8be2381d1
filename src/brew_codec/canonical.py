"""Default filling and hard-invariant validation for parsed drafts.

Both the JSON path and the tagged-text path produce plain dict drafts with
snake_case keys; everything below treats them identically.
"""

from __future__ import annotations

import math
import re
from typing import Any

from brew_codec.config import EngineConfig
from brew_codec.exceptions import StructuralError
from brew_codec.normalization import NormalizationEngine
from brew_codec.schema import (
    BeanReference,
    BlendComponent,
    BrewingMethod,
    BrewingNote,
    BrewParams,
    CoffeeBean,
    MethodParams,
    Stage,
    TasteRating,
)
from brew_codec.vocabulary import (
    ESPRESSO_POUR_TYPES,
    EMPTY_VOCABULARY,
    PourTypeVocabulary,
    SystemPourType,
)

DEFAULT_COFFEE = "15g"
DEFAULT_WATER = "225g"
DEFAULT_RATIO = "1:15"
DEFAULT_ROAST_LEVEL = "light roast"

_NUMERIC_DISPLAY = re.compile(r"^\s*(?:[^\d\s.]{1,3}\s*)?(\d+(?:\.\d+)?)\s*[^\d\s]*(?:/g)?\s*$")


def as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = re.match(r"^\s*(\d+)", str(value))
    return int(match.group(1)) if match else None


def numeric_display(value: Any) -> str:
    """Keep only the number of values like ``88CNY`` or ``250g``."""
    text = as_text(value)
    match = _NUMERIC_DISPLAY.match(text)
    if match:
        return match.group(1)
    return text


def _clamp_rating(value: Any) -> int:
    number = as_int(value) or 0
    return max(0, min(5, number))


class Canonicalizer:
    """Turns drafts into canonical entities, collecting soft warnings."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        vocabulary: PourTypeVocabulary | None = None,
    ):
        self.config = config or EngineConfig()
        self.vocabulary = vocabulary or EMPTY_VOCABULARY
        self.warnings: list[str] = []
        self._normalizer = NormalizationEngine(config=self.config)

    def method(self, draft: dict[str, Any]) -> BrewingMethod:
        name = as_text(draft.get("name"))
        equipment = as_text(draft.get("equipment"))
        if not name and equipment:
            name = f"{equipment} optimized method"
        if not name:
            raise StructuralError("method has no name")

        raw_stages = draft.get("stages") or []
        if not raw_stages:
            raise StructuralError("method has no stages")

        espresso = (
            bool(draft.get("espresso"))
            or self.vocabulary.espresso
            or any(stage.get("pour_type") in ESPRESSO_POUR_TYPES for stage in raw_stages)
        )
        stages = [self._stage(stage, espresso) for stage in raw_stages]
        self._enforce_cumulative_time(stages)

        params = draft.get("params") or {}
        return BrewingMethod(
            id=as_text(draft.get("id")) or None,
            name=name,
            params=MethodParams(
                coffee=as_text(params.get("coffee")) or DEFAULT_COFFEE,
                water=as_text(params.get("water")) or DEFAULT_WATER,
                ratio=as_text(params.get("ratio")) or DEFAULT_RATIO,
                grind_size=as_text(params.get("grind_size")) or self.config.default_grind_size,
                temp=as_text(params.get("temp")) or self.config.default_temperature,
                video_url=as_text(params.get("video_url")),
                stages=stages,
            ),
        )

    def _stage(self, draft: dict[str, Any], espresso: bool) -> Stage:
        label = as_text(draft.get("label"))
        pour_type = draft.get("pour_type")
        if pour_type is None:
            if espresso:
                is_beverage = "beverage" in label.lower() or "饮料" in label
                pour_type = SystemPourType.BEVERAGE if is_beverage else SystemPourType.EXTRACTION
            else:
                pour_type = self.vocabulary.default_pour_type or SystemPourType.CIRCLE

        valve_status = as_text(draft.get("valve_status")).lower()
        time = max(0, as_int(draft.get("time")) or 0)
        pour_time = as_int(draft.get("pour_time"))

        if pour_type in ESPRESSO_POUR_TYPES:
            pour_time = None
        if pour_type is SystemPourType.BEVERAGE:
            time = 0

        return Stage(
            time=time,
            pour_time=pour_time,
            label=label,
            water=as_text(draft.get("water")),
            detail=as_text(draft.get("detail")),
            pour_type=pour_type,
            valve_status=valve_status if valve_status in ("open", "closed") else None,
        )

    def _enforce_cumulative_time(self, stages: list[Stage]) -> None:
        latest = 0
        for stage in stages:
            if stage.pour_type is SystemPourType.BEVERAGE:
                continue
            if stage.time < latest:
                stage.time = latest
                if "stage_time_adjusted" not in self.warnings:
                    self.warnings.append("stage_time_adjusted")
            latest = stage.time

    def bean(self, draft: dict[str, Any]) -> CoffeeBean:
        name = as_text(draft.get("name"))
        if not name:
            raise StructuralError("coffee bean has no name")

        flavor = draft.get("flavor") or []
        if isinstance(flavor, str):
            flavor = re.split(r"[,，]", flavor)
        elif not isinstance(flavor, list):
            flavor = []

        capacity = numeric_display(draft.get("capacity"))
        remaining = numeric_display(draft.get("remaining"))

        return CoffeeBean(
            name=name,
            capacity=capacity,
            remaining=remaining,
            price=numeric_display(draft.get("price")),
            roast_level=self._roast_level(draft.get("roast_level")) or DEFAULT_ROAST_LEVEL,
            roast_date=as_text(draft.get("roast_date")),
            flavor=[as_text(item) for item in flavor if as_text(item)],
            notes=as_text(draft.get("notes")),
            start_day=as_int(draft.get("start_day")),
            end_day=as_int(draft.get("end_day")),
            bean_type=self._bean_type(draft.get("bean_type")),
            blend_components=self._components(draft),
        )

    def _components(self, draft: dict[str, Any]) -> list[BlendComponent]:
        components: list[BlendComponent] = []
        for raw in draft.get("blend_components") or []:
            if not isinstance(raw, dict):
                continue
            percentage = as_int(raw.get("percentage"))
            component = BlendComponent(
                percentage=percentage if percentage is not None and 1 <= percentage <= 100 else None,
                origin=as_text(raw.get("origin")) or None,
                process=as_text(raw.get("process")) or None,
                variety=as_text(raw.get("variety")) or None,
            )
            if component.model_dump(exclude_none=True):
                components.append(component)

        if components:
            return components
        return [
            BlendComponent(
                origin=as_text(draft.get("origin")) or None,
                process=as_text(draft.get("process")) or None,
                variety=as_text(draft.get("variety")) or None,
            )
        ]

    def _roast_level(self, raw: Any) -> str:
        text = as_text(raw)
        if not text:
            return ""
        item = self._normalizer.normalize_one("roast_level", text)
        if item.mapped:
            return item.normalized_label_en or text
        if "roast_level_unmapped" not in self.warnings:
            self.warnings.append("roast_level_unmapped")
        return text

    def _bean_type(self, raw: Any):
        text = as_text(raw)
        if not text:
            return None
        item = self._normalizer.normalize_one("bean_type", text)
        if item.mapped:
            return item.normalized_key
        self.warnings.append("bean_type_unmapped")
        return None

    def note(self, draft: dict[str, Any]) -> BrewingNote:
        params = draft.get("params") or {}
        taste = draft.get("taste") or {}
        roast_level = as_text(draft.get("bean_roast_level"))
        if roast_level:
            item = self._normalizer.normalize_one("roast_level", roast_level)
            roast_level = item.normalized_label_en if item.mapped else roast_level

        return BrewingNote(
            equipment=as_text(draft.get("equipment")),
            method_name=as_text(draft.get("method_name")),
            bean=BeanReference(name=as_text(draft.get("bean_name")), roast_level=roast_level),
            params=BrewParams(
                coffee=as_text(params.get("coffee")),
                water=as_text(params.get("water")),
                ratio=as_text(params.get("ratio")),
                grind_size=as_text(params.get("grind_size")),
                temp=as_text(params.get("temp")),
            ),
            taste=TasteRating(
                acidity=_clamp_rating(taste.get("acidity")),
                sweetness=_clamp_rating(taste.get("sweetness")),
                bitterness=_clamp_rating(taste.get("bitterness")),
                body=_clamp_rating(taste.get("body")),
            ),
            rating=_clamp_rating(draft.get("rating")),
            notes=as_text(draft.get("notes")),
            timestamp=as_int(draft.get("timestamp")),
        )
