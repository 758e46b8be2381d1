"""Core detection and parsing entry points."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from brew_codec.canonical import Canonicalizer
from brew_codec.config import EngineConfig
from brew_codec.exceptions import StructuralError, UnrecognizedInputError
from brew_codec.extraction import (
    classify_shape,
    detect_sentinel,
    extract_json,
    is_missing,
    normalize_input,
)
from brew_codec.parsers import (
    bean_draft_from_json,
    equipment_from_json,
    method_draft_from_json,
    note_draft_from_json,
    parse_bean_text,
    parse_method_text,
    parse_note_text,
)
from brew_codec.schema import BrewingMethod, EntityKind, ParsedValue, ParseResult
from brew_codec.vocabulary import PourTypeResolver, PourTypeVocabulary

logger = logging.getLogger(__name__)


def detect_and_parse(
    raw_text: str,
    vocabulary: PourTypeVocabulary | None = None,
    *,
    config: EngineConfig | None = None,
) -> ParseResult:
    """Recognise and parse a shared record.

    Args:
        raw_text: Tagged text, bare JSON, or JSON buried in prose/code fences.
        vocabulary: Custom pour types of the equipment the record targets.
        config: Engine settings. Defaults to ``EngineConfig()``.

    Returns:
        ParseResult holding the canonical entity, or ``value=None`` and a
        human-readable ``reason``. Never raises for bad input.
    """
    if not raw_text or not raw_text.strip():
        return ParseResult(reason="empty input")

    text = normalize_input(raw_text)
    try:
        kind, payload = _classify(text)
    except UnrecognizedInputError as exc:
        logger.info("unrecognized input: %s", exc.reason)
        return ParseResult(reason=exc.reason)

    canonicalizer = Canonicalizer(config=config, vocabulary=vocabulary)
    resolver = PourTypeResolver(vocabulary)
    try:
        value = _build(kind, payload, resolver, canonicalizer)
    except StructuralError as exc:
        logger.info("rejected %s: %s", kind.value, exc.reason)
        return ParseResult(kind=kind, reason=exc.reason)
    except ValidationError as exc:
        logger.info("rejected %s: %s", kind.value, exc)
        return ParseResult(kind=kind, reason=f"invalid {kind.value.replace('_', ' ')}")
    except (TypeError, ValueError, OverflowError):
        logger.exception("unexpected %s shape", kind.value)
        return ParseResult(kind=kind, reason=f"invalid {kind.value.replace('_', ' ')}")

    return ParseResult(kind=kind, value=value, warnings=canonicalizer.warnings)


def parse_method_json(
    raw_json_text: str,
    vocabulary: PourTypeVocabulary | None = None,
    *,
    config: EngineConfig | None = None,
) -> BrewingMethod | None:
    """Parse a JSON method document when the caller already knows the kind."""
    data = extract_json(normalize_input(raw_json_text or ""))
    if is_missing(data) or not isinstance(data, dict):
        logger.info("method json could not be extracted")
        return None

    canonicalizer = Canonicalizer(config=config, vocabulary=vocabulary)
    try:
        return canonicalizer.method(method_draft_from_json(data, PourTypeResolver(vocabulary)))
    except (StructuralError, TypeError, ValueError, OverflowError) as exc:
        logger.info("rejected method json: %s", exc)
        return None


def _classify(text: str) -> tuple[EntityKind, Any]:
    kind = detect_sentinel(text)
    if kind is not None:
        logger.debug("tagged text detected: %s", kind.value)
        return kind, text

    data = extract_json(text)
    if is_missing(data):
        raise UnrecognizedInputError()
    kind = classify_shape(data)
    if kind is None:
        raise UnrecognizedInputError()
    logger.debug("json shape detected: %s", kind.value)
    return kind, data


def _build(
    kind: EntityKind,
    payload: Any,
    resolver: PourTypeResolver,
    canonicalizer: Canonicalizer,
) -> ParsedValue:
    tagged = isinstance(payload, str)

    if kind is EntityKind.METHOD:
        draft = parse_method_text(payload, resolver) if tagged else method_draft_from_json(payload, resolver)
        return canonicalizer.method(draft)

    if kind is EntityKind.BEAN:
        draft = parse_bean_text(payload) if tagged else bean_draft_from_json(payload)
        return canonicalizer.bean(draft)

    if kind is EntityKind.NOTE:
        draft = parse_note_text(payload) if tagged else note_draft_from_json(payload)
        return canonicalizer.note(draft)

    if kind is EntityKind.BEANS:
        beans = []
        for index, item in enumerate(payload, start=1):
            try:
                beans.append(canonicalizer.bean(bean_draft_from_json(item)))
            except StructuralError as exc:
                raise StructuralError(f"bean {index}: {exc.reason}") from exc
        return beans

    return equipment_from_json(payload, canonicalizer)
