"""brew-codec: Recover and share coffee-brewing records as text or JSON."""

from brew_codec.config import EngineConfig
from brew_codec.core import detect_and_parse, parse_method_json
from brew_codec.schema import (
    BlendComponent,
    BrewingMethod,
    BrewingNote,
    CoffeeBean,
    CustomEquipment,
    CustomEquipmentRecord,
    EntityKind,
    ParseResult,
    Stage,
)
from brew_codec.serializer import (
    export_method_json,
    serialize_bean,
    serialize_method,
    serialize_note,
)
from brew_codec.templates import bean_recognition_prompt, example_template, recipe_prompt
from brew_codec.vocabulary import (
    CustomPourType,
    PourTypeResolver,
    PourTypeVocabulary,
    SystemPourType,
)

__version__ = "0.1.0"

__all__ = [
    "detect_and_parse",
    "parse_method_json",
    "serialize_method",
    "serialize_bean",
    "serialize_note",
    "export_method_json",
    "example_template",
    "recipe_prompt",
    "bean_recognition_prompt",
    "BlendComponent",
    "BrewingMethod",
    "BrewingNote",
    "CoffeeBean",
    "CustomEquipment",
    "CustomEquipmentRecord",
    "EntityKind",
    "ParseResult",
    "Stage",
    "CustomPourType",
    "PourTypeResolver",
    "PourTypeVocabulary",
    "SystemPourType",
    "EngineConfig",
    "__version__",
]
