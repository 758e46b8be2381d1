"""Data models for brew-codec."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from brew_codec.vocabulary import PourType, pour_type_from_id, pour_type_id

AnimationType = Literal["v60", "kalita", "origami", "clever", "custom", "espresso"]
ValveStatus = Literal["open", "closed"]
BeanType = Literal["filter", "espresso", "omni"]


class EntityKind(str, Enum):
    METHOD = "brewing_method"
    BEAN = "coffee_bean"
    BEANS = "coffee_beans"
    NOTE = "brewing_note"
    EQUIPMENT = "custom_equipment"


class CodecModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Stage(CodecModel):
    """One timed pour, or one non-timed action, within a method."""

    time: int = 0
    pour_time: int | None = None
    label: str = ""
    water: str = ""
    detail: str = ""
    pour_type: PourType | None = None
    valve_status: ValveStatus | None = None

    @field_validator("pour_type", mode="before")
    @classmethod
    def _wrap_pour_type(cls, value):
        if isinstance(value, str):
            return pour_type_from_id(value) if value else None
        return value

    @field_serializer("pour_type")
    def _dump_pour_type(self, value: PourType | None) -> str | None:
        return pour_type_id(value) if value is not None else None


class BrewParams(CodecModel):
    """The five scalar brew parameters, kept as display strings."""

    coffee: str = ""
    water: str = ""
    ratio: str = ""
    grind_size: str = ""
    temp: str = ""


class MethodParams(BrewParams):
    video_url: str = ""
    stages: list[Stage] = Field(default_factory=list)


class BrewingMethod(CodecModel):
    """A named recipe: brew parameters plus an ordered list of stages."""

    id: str | None = None
    name: str
    params: MethodParams = Field(default_factory=MethodParams)


class BlendComponent(CodecModel):
    percentage: int | None = Field(default=None, ge=1, le=100)
    origin: str | None = None
    process: str | None = None
    variety: str | None = None


class CoffeeBean(CodecModel):
    """A bag of coffee, single origin or blend.

    Single-origin beans hold exactly one blend component so that both forms
    are processed the same way.
    """

    name: str
    capacity: str = ""
    remaining: str = ""
    price: str = ""
    roast_level: str = ""
    roast_date: str = ""
    flavor: list[str] = Field(default_factory=list)
    notes: str = ""
    start_day: int | None = None
    end_day: int | None = None
    bean_type: BeanType | None = None
    blend_components: list[BlendComponent] = Field(default_factory=list)

    @property
    def is_blend(self) -> bool:
        return len(self.blend_components) > 1

    @property
    def origin(self) -> str | None:
        return self._single("origin")

    @property
    def process(self) -> str | None:
        return self._single("process")

    @property
    def variety(self) -> str | None:
        return self._single("variety")

    def _single(self, attr: str) -> str | None:
        if self.is_blend or not self.blend_components:
            return None
        return getattr(self.blend_components[0], attr)


class BeanReference(CodecModel):
    name: str = ""
    roast_level: str = ""


class TasteRating(CodecModel):
    acidity: int = Field(default=0, ge=0, le=5)
    sweetness: int = Field(default=0, ge=0, le=5)
    bitterness: int = Field(default=0, ge=0, le=5)
    body: int = Field(default=0, ge=0, le=5)


class BrewingNote(CodecModel):
    """A tasting record for one brew."""

    equipment: str = ""
    method_name: str = ""
    bean: BeanReference = Field(default_factory=BeanReference)
    params: BrewParams = Field(default_factory=BrewParams)
    taste: TasteRating = Field(default_factory=TasteRating)
    rating: int = Field(default=0, ge=0, le=5)
    notes: str = ""
    timestamp: int | None = None


class CustomPourAnimation(CodecModel):
    id: str
    name: str
    custom_animation_svg: str = ""
    is_system_default: bool = False
    pour_type: Literal["center", "circle", "ice"] | None = None
    preview_frames: int | None = None


class CustomEquipment(CodecModel):
    """User-defined brewer, the origin of a pour-type vocabulary."""

    id: str = ""
    name: str
    description: str = ""
    animation_type: AnimationType
    has_valve: bool = False
    custom_shape_svg: str | None = None
    custom_valve_svg: str | None = None
    custom_valve_open_svg: str | None = None
    custom_pour_animations: list[CustomPourAnimation] = Field(default_factory=list)


class CustomEquipmentRecord(CodecModel):
    equipment: CustomEquipment
    methods: list[BrewingMethod] = Field(default_factory=list)


ParsedValue = BrewingMethod | CoffeeBean | list[CoffeeBean] | BrewingNote | CustomEquipmentRecord


class ParseResult(BaseModel):
    """Outcome of detect_and_parse: a canonical value or a failure reason."""

    kind: EntityKind | None = None
    value: ParsedValue | None = None
    reason: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None
