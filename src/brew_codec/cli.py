"""Command-line interface for brew-codec."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from brew_codec import __version__
from brew_codec.config import EngineConfig
from brew_codec.core import detect_and_parse
from brew_codec.schema import CustomEquipment, EntityKind, ParseResult
from brew_codec.serializer import serialize_bean, serialize_method, serialize_note
from brew_codec.templates import example_template
from brew_codec.vocabulary import PourTypeVocabulary


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="brew-codec",
        description="Parse and share coffee brewing records",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"brew-codec {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Recognise a record and print it")
    parse_cmd.add_argument("source", help="File to read, or - for stdin")
    parse_cmd.add_argument("--equipment", help="Custom equipment JSON providing pour types")
    parse_cmd.add_argument("--json", action="store_true", help="Output as JSON")

    share_cmd = subparsers.add_parser("share", help="Re-render a record as shareable text")
    share_cmd.add_argument("source", help="File to read, or - for stdin")
    share_cmd.add_argument("--equipment", help="Custom equipment JSON providing pour types")

    template_cmd = subparsers.add_parser("template", help="Print an example JSON document")
    template_cmd.add_argument("kind", choices=[kind.value for kind in EntityKind])

    args = parser.parse_args(argv)

    if args.command == "template":
        print(example_template(args.kind))
        return 0

    try:
        text = _read_source(args.source)
        vocabulary = _load_vocabulary(args.equipment) if args.equipment else None
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = detect_and_parse(text, vocabulary, config=EngineConfig.from_env())
    if not result.ok:
        print(f"Error: {result.reason}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.command == "share":
        print(render_shared(result, vocabulary))
    elif args.json:
        print(result.model_dump_json(indent=2, by_alias=True, exclude_none=True))
    else:
        _print_formatted(result)
    return 0


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _load_vocabulary(path: str) -> PourTypeVocabulary:
    """Load pour types from an equipment JSON file (bare or exported record)."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("equipment"), dict):
        data = data["equipment"]
    return PourTypeVocabulary.from_equipment(CustomEquipment.model_validate(data))


def render_shared(result: ParseResult, vocabulary: PourTypeVocabulary | None = None) -> str:
    """Render a successful parse result as tagged text."""
    value = result.value
    if result.kind is EntityKind.METHOD:
        return serialize_method(value, vocabulary)
    if result.kind is EntityKind.BEAN:
        return serialize_bean(value)
    if result.kind is EntityKind.BEANS:
        return "\n\n".join(serialize_bean(bean) for bean in value)
    if result.kind is EntityKind.NOTE:
        return serialize_note(value)
    equipment_vocabulary = PourTypeVocabulary.from_equipment(value.equipment)
    return "\n\n".join(serialize_method(method, equipment_vocabulary) for method in value.methods)


def _print_formatted(result: ParseResult) -> None:
    """Print result in human-readable format."""
    print()
    print(f"  brew-codec: {result.kind.value}")
    print()

    value = result.value
    if result.kind is EntityKind.METHOD:
        fields = [
            ("Name", value.name),
            ("Coffee", value.params.coffee),
            ("Water", value.params.water),
            ("Ratio", value.params.ratio),
            ("Grind", value.params.grind_size),
            ("Temperature", value.params.temp),
            ("Stages", str(len(value.params.stages))),
        ]
    elif result.kind is EntityKind.BEAN:
        fields = _bean_fields(value)
    elif result.kind is EntityKind.BEANS:
        fields = [(f"Bean {i}", bean.name) for i, bean in enumerate(value, start=1)]
    elif result.kind is EntityKind.NOTE:
        fields = [
            ("Equipment", value.equipment),
            ("Method", value.method_name),
            ("Bean", value.bean.name),
            ("Rating", f"{value.rating}/5"),
        ]
    else:
        fields = [
            ("Equipment", value.equipment.name),
            ("Animation", value.equipment.animation_type),
            ("Methods", str(len(value.methods))),
        ]

    for label, field_value in fields:
        display = field_value if field_value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


def _bean_fields(bean) -> list[tuple[str, str | None]]:
    return [
        ("Name", bean.name),
        ("Type", "Blend" if bean.is_blend else "Single Origin"),
        ("Roast Level", bean.roast_level),
        ("Origin", bean.origin),
        ("Process", bean.process),
        ("Flavor Notes", ", ".join(bean.flavor) or None),
    ]


if __name__ == "__main__":
    sys.exit(main())
