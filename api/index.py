import logging
import os

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from brew_codec import __version__
from brew_codec.cli import render_shared
from brew_codec.config import EngineConfig
from brew_codec.core import detect_and_parse
from brew_codec.schema import CustomEquipment, EntityKind, ParseResult
from brew_codec.templates import example_template
from brew_codec.vocabulary import PourTypeVocabulary

app = FastAPI(title="brew-codec API", version=__version__)
logger = logging.getLogger(__name__)
ENGINE_CONFIG = EngineConfig.from_env()

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
max_text_bytes_raw = os.getenv("MAX_TEXT_BYTES")
try:
    MAX_TEXT_BYTES = int(max_text_bytes_raw) if max_text_bytes_raw else 256 * 1024
except ValueError:
    MAX_TEXT_BYTES = 256 * 1024

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class ParseRequest(BaseModel):
    text: str
    equipment: dict | None = None


class ParseResponse(BaseModel):
    kind: str | None = None
    value: dict | list | None = None
    reason: str | None = None
    warnings: list[str] = Field(default_factory=list)


class ShareResponse(BaseModel):
    kind: str
    text: str
    warnings: list[str] = Field(default_factory=list)


def _validate_text_size(text: str) -> None:
    if len(text.encode("utf-8")) > MAX_TEXT_BYTES:
        raise HTTPException(status_code=413, detail="text too large")


def _vocabulary(equipment: dict | None) -> PourTypeVocabulary | None:
    if equipment is None:
        return None
    if isinstance(equipment.get("equipment"), dict):
        equipment = equipment["equipment"]
    try:
        return PourTypeVocabulary.from_equipment(CustomEquipment.model_validate(equipment))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="invalid equipment") from exc


def _parse(body: ParseRequest) -> tuple[ParseResult, PourTypeVocabulary | None]:
    _validate_text_size(body.text)
    vocabulary = _vocabulary(body.equipment)
    return detect_and_parse(body.text, vocabulary, config=ENGINE_CONFIG), vocabulary


@app.post("/parse", response_model=ParseResponse)
def parse_record(body: ParseRequest) -> ParseResponse:
    result, _ = _parse(body)
    value = None
    if isinstance(result.value, list):
        value = [item.model_dump(by_alias=True, exclude_none=True) for item in result.value]
    elif result.value is not None:
        value = result.value.model_dump(by_alias=True, exclude_none=True)
    return ParseResponse(
        kind=result.kind.value if result.kind else None,
        value=value,
        reason=result.reason,
        warnings=result.warnings,
    )


@app.post("/share/{kind}", response_model=ShareResponse)
def share_record(kind: str, body: ParseRequest) -> ShareResponse:
    try:
        expected = EntityKind(kind)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=f"unknown record kind: {kind}") from exc

    result, vocabulary = _parse(body)
    if not result.ok:
        raise HTTPException(status_code=422, detail=result.reason)
    if result.kind is not expected:
        raise HTTPException(status_code=422, detail=f"expected {expected.value}, got {result.kind.value}")

    try:
        text = render_shared(result, vocabulary)
    except Exception:
        logger.exception("share failed")
        raise HTTPException(status_code=500, detail="internal_error")
    return ShareResponse(kind=expected.value, text=text, warnings=result.warnings)


@app.get("/templates/{kind}")
def template(kind: str) -> Response:
    try:
        body = example_template(kind)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=f"unknown record kind: {kind}") from exc
    return Response(
        content=body,
        media_type="application/json",
        headers={"Cache-Control": "public, max-age=86400"},
    )
