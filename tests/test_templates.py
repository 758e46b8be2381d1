"""Tests for example templates and assistant prompts."""

import json

import pytest

from brew_codec import (
    BlendComponent,
    CoffeeBean,
    EntityKind,
    bean_recognition_prompt,
    detect_and_parse,
    example_template,
    recipe_prompt,
)


@pytest.mark.parametrize("kind", [EntityKind.METHOD, EntityKind.BEAN, EntityKind.BEANS, EntityKind.NOTE])
def test_templates_are_valid_json_of_their_kind(kind):
    template = example_template(kind)

    json.loads(template)
    if kind is EntityKind.METHOD:
        assert detect_and_parse(template).kind is kind


def test_method_template_parses_to_three_stages():
    method = detect_and_parse(example_template("brewing_method")).value

    assert method.name == "Modified single-pour"
    assert [stage.time for stage in method.params.stages] == [30, 60, 120]


def test_unknown_template_kind():
    with pytest.raises(ValueError):
        example_template("espresso_shot")


def test_bean_recognition_prompt_embeds_bean_template():
    prompt = bean_recognition_prompt()

    assert '"roastLevel"' in prompt
    assert "Return valid JSON only" in prompt


def test_recipe_prompt_describes_blend():
    bean = CoffeeBean(
        name="House",
        roast_level="medium roast",
        flavor=["Cocoa"],
        blend_components=[
            BlendComponent(percentage=70, origin="Brazil", process="Natural"),
            BlendComponent(percentage=30, origin="Ethiopia"),
        ],
    )

    prompt = recipe_prompt(bean)

    assert "- Name: House" in prompt
    assert "- Component: 70% Brazil / Natural" in prompt
    assert "- Flavor notes: Cocoa" in prompt
    assert '"stages"' in prompt
