"""Pour-type vocabulary and the id <-> display-name resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from brew_codec.schema import CustomEquipment


class SystemPourType(str, Enum):
    """Pour types every piece of equipment understands."""

    CENTER = "center"
    CIRCLE = "circle"
    ICE = "ice"
    OTHER = "other"
    EXTRACTION = "extraction"
    BEVERAGE = "beverage"


@dataclass(frozen=True)
class CustomPourType:
    """Pour type defined by one equipment profile, referenced by id."""

    id: str


PourType = SystemPourType | CustomPourType

ESPRESSO_POUR_TYPES = frozenset({SystemPourType.EXTRACTION, SystemPourType.BEVERAGE})

SYSTEM_DISPLAY_NAMES: Mapping[SystemPourType, str] = MappingProxyType(
    {
        SystemPourType.CENTER: "center-pour",
        SystemPourType.CIRCLE: "circle-pour",
        SystemPourType.ICE: "add-ice",
        SystemPourType.OTHER: "other",
        SystemPourType.EXTRACTION: "extraction",
        SystemPourType.BEVERAGE: "beverage",
    }
)

# Accepted on input only; records shared from older app builds use these.
_LEGACY_DISPLAY_NAMES: Mapping[str, SystemPourType] = MappingProxyType(
    {
        "中心注水": SystemPourType.CENTER,
        "绕圈注水": SystemPourType.CIRCLE,
        "添加冰块": SystemPourType.ICE,
        "萃取": SystemPourType.EXTRACTION,
        "饮料": SystemPourType.BEVERAGE,
    }
)


def pour_type_from_id(value: str) -> PourType:
    """Wrap a raw id in the tagged union."""
    try:
        return SystemPourType(value)
    except ValueError:
        return CustomPourType(value)


def pour_type_id(pour_type: PourType) -> str:
    if isinstance(pour_type, SystemPourType):
        return pour_type.value
    return pour_type.id


@dataclass(frozen=True)
class PourTypeVocabulary:
    """Read-only table of custom pour-type ids for one equipment profile.

    ``default_pour_type`` fills stages that name no pour type; ``None`` means
    the engine-wide default (circle).
    """

    names: Mapping[str, str] = field(default_factory=dict)
    espresso: bool = False
    default_pour_type: PourType | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    @classmethod
    def from_equipment(cls, equipment: CustomEquipment) -> PourTypeVocabulary:
        names = {
            animation.id: animation.name
            for animation in equipment.custom_pour_animations
            if animation.id and animation.name
        }
        return cls(
            names=names,
            espresso=equipment.animation_type == "espresso",
            default_pour_type=_equipment_default_pour_type(equipment),
        )


def _equipment_default_pour_type(equipment: CustomEquipment) -> PourType:
    if equipment.animation_type == "espresso":
        return SystemPourType.EXTRACTION

    animations = equipment.custom_pour_animations
    if equipment.animation_type == "custom" and animations:
        for animation in animations:
            if animation.is_system_default and animation.pour_type:
                return SystemPourType(animation.pour_type)
        first = animations[0]
        return SystemPourType(first.pour_type) if first.pour_type else pour_type_from_id(first.id)

    if equipment.animation_type == "kalita":
        return SystemPourType.CENTER
    return SystemPourType.CIRCLE


EMPTY_VOCABULARY = PourTypeVocabulary()


class PourTypeResolver:
    """Bidirectional mapping between pour types and their display names.

    Custom names from the equipment vocabulary take precedence over the
    system table in both directions. Anything unresolved passes through as
    a raw id, so ids typed verbatim keep working.
    """

    def __init__(self, vocabulary: PourTypeVocabulary | None = None):
        self.vocabulary = vocabulary or EMPTY_VOCABULARY
        self._system_by_name = {name: key for key, name in SYSTEM_DISPLAY_NAMES.items()}

    def display_name(self, pour_type: PourType) -> str:
        raw_id = pour_type_id(pour_type)
        custom_name = self.vocabulary.names.get(raw_id)
        if custom_name:
            return custom_name
        if isinstance(pour_type, SystemPourType):
            return SYSTEM_DISPLAY_NAMES[pour_type]
        return raw_id

    def resolve(self, display_name: str) -> PourType:
        token = display_name.strip()
        for custom_id, name in self.vocabulary.names.items():
            if name == token:
                return pour_type_from_id(custom_id)
        system = self._system_by_name.get(token) or _LEGACY_DISPLAY_NAMES.get(token)
        if system is not None:
            return system
        return pour_type_from_id(token)

    def resolve_id(self, raw_id: str) -> PourType:
        """Resolve a value found where an id is expected.

        Known ids win; otherwise the value is treated as a display name, which
        covers assistants that echo display names into JSON.
        """
        token = raw_id.strip()
        if token == "spiral":
            return SystemPourType.CIRCLE
        if token in self.vocabulary.names:
            return pour_type_from_id(token)
        try:
            return SystemPourType(token)
        except ValueError:
            return self.resolve(token)
