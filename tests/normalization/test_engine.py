"""Tests for normalization engine."""

from brew_codec.config import EngineConfig
from brew_codec.normalization import NormalizationEngine


def _roast_level(raw, config=None):
    return NormalizationEngine(config=config).normalize_one("roast_level", raw)


def test_roast_level_exact():
    result = _roast_level("Light Roast")

    assert result.normalized_key == "light"
    assert result.normalized_label_en == "light roast"
    assert result.method == "exact"


def test_roast_level_chinese_label():
    result = _roast_level("中深烘焙")

    assert result.normalized_key == "medium_dark"
    assert result.method == "exact"


def test_roast_level_alias_city():
    result = _roast_level("City")

    assert result.normalized_key == "medium"
    assert result.method == "alias"


def test_roast_level_medium_light():
    result = _roast_level("medium-light")

    assert result.normalized_key == "medium_light"
    assert result.method in {"alias", "exact"}


def test_roast_level_full_city():
    result = _roast_level("full city")

    assert result.normalized_key == "medium_dark"
    assert result.method == "alias"


def test_roast_level_regex():
    result = _roast_level("Nordic light-medium, washed lots")

    assert result.normalized_key == "medium_light"
    assert result.method == "regex"


def test_roast_level_contains():
    result = _roast_level("Dark and bold")

    assert result.normalized_key == "dark"
    assert result.normalized_label_zh == "深度烘焙"


def test_roast_level_fuzzy():
    result = _roast_level("medum roast")

    assert result.normalized_key == "medium"
    assert result.method == "fuzzy"
    assert result.reason.startswith("fuzzy_score=")


def test_fuzzy_threshold_comes_from_config():
    result = _roast_level("medum roast", config=EngineConfig(fuzzy_threshold=0.99))

    assert result.normalized_key is None
    assert result.method == "unmapped"


def test_unmapped_value():
    result = _roast_level("Roaster's choice")

    assert not result.mapped
    assert result.reason == "no_dictionary_match"


def test_empty_value():
    result = _roast_level("   ")

    assert not result.mapped
    assert result.reason == "empty_input"


def test_normalize_bean_type():
    engine = NormalizationEngine()

    assert engine.normalize_one("bean_type", "Espresso blend").normalized_key == "espresso"
    assert engine.normalize_one("bean_type", "both").normalized_key == "omni"
    assert engine.normalize_one("bean_type", "手冲").normalized_key == "filter"
