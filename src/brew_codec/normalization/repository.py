"""Dictionary repository for normalization."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module

from brew_codec.normalization.types import Domain


@dataclass(frozen=True)
class Term:
    domain: Domain
    key: str
    label_en: str
    label_zh: str


@dataclass(frozen=True)
class Alias:
    domain: Domain
    key: str
    alias: str
    match_type: str
    priority: int


class DictionaryRepository:
    """Loads terms and aliases from packaged dictionary data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        module = import_module(f"brew_codec.normalization.data.{version}")
        self.terms: list[Term] = [Term(**item) for item in module.TERMS]
        self.aliases: list[Alias] = [Alias(**item) for item in module.ALIASES]

    def terms_by_domain(self, domain: Domain) -> list[Term]:
        return [term for term in self.terms if term.domain == domain]

    def aliases_by_domain(self, domain: Domain) -> list[Alias]:
        return [alias for alias in self.aliases if alias.domain == domain]
