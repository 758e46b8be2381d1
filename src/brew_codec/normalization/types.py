"""Data models for normalization output."""

from typing import Literal

from pydantic import BaseModel, Field

Domain = Literal["roast_level", "bean_type"]
Method = Literal["exact", "alias", "regex", "fuzzy", "unmapped"]


class NormalizedItem(BaseModel):
    """Normalized representation for a single raw value."""

    domain: Domain
    raw: str
    normalized_key: str | None = None
    normalized_label_en: str | None = None
    normalized_label_zh: str | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    method: Method = "unmapped"
    candidates: list[str] = Field(default_factory=list)
    reason: str | None = None

    @property
    def mapped(self) -> bool:
        return self.normalized_key is not None
