"""Dictionary-first normalization of roast levels and bean usage."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from difflib import SequenceMatcher

from brew_codec.config import EngineConfig
from brew_codec.normalization.repository import Alias, DictionaryRepository, Term
from brew_codec.normalization.types import Domain, Method, NormalizedItem


@dataclass(frozen=True)
class MatchResult:
    key: str
    label_en: str
    label_zh: str
    confidence: float
    method: Method
    candidates: list[str]
    reason: str | None = None


class NormalizationEngine:
    """Maps free-text roast levels and usages onto dictionary terms."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.repo = DictionaryRepository(version=self.config.dictionary_version)
        self._term_index = self._build_term_index()

    def normalize_one(self, domain: Domain, raw: str | None) -> NormalizedItem:
        if not raw:
            return NormalizedItem(domain=domain, raw="", reason="empty_input")

        value = raw.strip()
        if not value:
            return NormalizedItem(domain=domain, raw=raw, reason="empty_input")

        match = (
            self._match_exact(domain, value)
            or self._match_alias(domain, value)
            or self._match_regex(domain, value)
            or self._match_contains(domain, value)
            or self._match_fuzzy(domain, value)
        )
        if match is None:
            return NormalizedItem(
                domain=domain,
                raw=raw,
                confidence=0.0,
                method="unmapped",
                reason="no_dictionary_match",
            )

        return NormalizedItem(
            domain=domain,
            raw=raw,
            normalized_key=match.key,
            normalized_label_en=match.label_en,
            normalized_label_zh=match.label_zh,
            confidence=match.confidence,
            method=match.method,
            candidates=match.candidates,
            reason=match.reason,
        )

    def _build_term_index(self) -> dict[Domain, dict[str, Term]]:
        index: dict[Domain, dict[str, Term]] = {"roast_level": {}, "bean_type": {}}
        for term in self.repo.terms:
            index[term.domain][term.key] = term
        return index

    def _match_exact(self, domain: Domain, raw: str) -> MatchResult | None:
        normalized_raw = _normalize_text(raw)
        for term in self.repo.terms_by_domain(domain):
            for candidate in (term.key, term.label_en, term.label_zh):
                if normalized_raw == _normalize_text(candidate):
                    return MatchResult(
                        key=term.key,
                        label_en=term.label_en,
                        label_zh=term.label_zh,
                        confidence=0.98,
                        method="exact",
                        candidates=[term.key],
                    )
        return None

    def _match_alias(self, domain: Domain, raw: str) -> MatchResult | None:
        normalized_raw = _normalize_text(raw)
        aliases = sorted(
            [a for a in self.repo.aliases_by_domain(domain) if a.match_type == "exact"],
            key=lambda item: item.priority,
        )
        for alias in aliases:
            if normalized_raw == _normalize_text(alias.alias):
                return self._match_from_alias(alias, confidence=0.9, method="alias")
        return None

    def _match_regex(self, domain: Domain, raw: str) -> MatchResult | None:
        aliases = sorted(
            [a for a in self.repo.aliases_by_domain(domain) if a.match_type == "regex"],
            key=lambda item: item.priority,
        )
        for alias in aliases:
            if re.search(alias.alias, raw, flags=re.IGNORECASE):
                return self._match_from_alias(alias, confidence=0.88, method="regex")
        return None

    def _match_contains(self, domain: Domain, raw: str) -> MatchResult | None:
        normalized_raw = _normalize_text(raw)
        aliases = sorted(
            [a for a in self.repo.aliases_by_domain(domain) if a.match_type == "contains"],
            key=lambda item: item.priority,
        )
        for alias in aliases:
            if _normalize_text(alias.alias) in normalized_raw:
                return self._match_from_alias(alias, confidence=0.86, method="alias")
        return None

    def _match_fuzzy(self, domain: Domain, raw: str) -> MatchResult | None:
        normalized_raw = _normalize_text(raw)
        best_ratio = 0.0
        best_term: Term | None = None

        for term in self.repo.terms_by_domain(domain):
            for candidate in (term.key, term.label_en, term.label_zh):
                ratio = SequenceMatcher(None, normalized_raw, _normalize_text(candidate)).ratio()
                if ratio > best_ratio:
                    best_ratio = ratio
                    best_term = term

        if best_term and best_ratio >= self.config.fuzzy_threshold:
            confidence = max(0.7, min(0.85, round(best_ratio, 2)))
            return MatchResult(
                key=best_term.key,
                label_en=best_term.label_en,
                label_zh=best_term.label_zh,
                confidence=confidence,
                method="fuzzy",
                candidates=[best_term.key],
                reason=f"fuzzy_score={best_ratio:.2f}",
            )
        return None

    def _match_from_alias(self, alias: Alias, confidence: float, method: Method) -> MatchResult:
        term = self._term_index[alias.domain][alias.key]
        return MatchResult(
            key=term.key,
            label_en=term.label_en,
            label_zh=term.label_zh,
            confidence=confidence,
            method=method,
            candidates=[term.key],
        )


def _normalize_text(value: str) -> str:
    text = unicodedata.normalize("NFKC", value).lower().strip()
    text = text.replace("_", " ").replace("-", " ")
    text = re.sub(r"[^\w\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()
