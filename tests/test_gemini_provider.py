"""Tests for the Gemini drafting provider."""

import json
from types import SimpleNamespace

import pytest
from PIL import Image

from brew_codec import CoffeeBean, EntityKind
from brew_codec.exceptions import AuthenticationError, BrewCodecError, ImageError
from brew_codec.providers import GeminiProvider


def _client(mocker, reply: str):
    client = mocker.MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=reply)
    return client


def test_requires_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        GeminiProvider()


def test_api_key_builds_client(mocker):
    client_cls = mocker.patch("brew_codec.providers.gemini.genai.Client")

    provider = GeminiProvider(api_key="test-key")

    client_cls.assert_called_once_with(api_key="test-key")
    assert provider.client is client_cls.return_value


def test_api_key_from_environment(mocker, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    client_cls = mocker.patch("brew_codec.providers.gemini.genai.Client")

    GeminiProvider()

    client_cls.assert_called_once_with(api_key="env-key")


def test_recognize_bean_parses_reply(mocker):
    reply = json.dumps({"name": "Ethiopia Guji", "roastLevel": "Light", "origin": "Ethiopia"})
    client = _client(mocker, reply)
    provider = GeminiProvider(client=client)

    result = provider.recognize_bean(Image.new("RGB", (20, 20), color="white"))

    assert result.kind is EntityKind.BEAN
    assert result.value.name == "Ethiopia Guji"
    assert result.value.roast_level == "light roast"
    contents = client.models.generate_content.call_args.kwargs["contents"]
    assert isinstance(contents[0], Image.Image)
    assert provider.get_extraction_metadata() == {
        "provider": "gemini",
        "model": "gemini-2.0-flash",
        "mode": "vision",
    }


def test_suggest_method_parses_fenced_reply(mocker):
    method = {
        "method": "Bright V60",
        "params": {"stages": [{"time": 30, "pourTime": 10, "label": "Bloom", "water": "45g", "pourType": "circle"}]},
    }
    client = _client(mocker, "```json\n" + json.dumps(method) + "\n```")
    provider = GeminiProvider(client=client, model="gemini-test")

    result = provider.suggest_method(CoffeeBean(name="Kenya AA", roast_level="light roast"))

    assert result.kind is EntityKind.METHOD
    assert result.value.name == "Bright V60"
    call = client.models.generate_content.call_args.kwargs
    assert "Kenya AA" in call["contents"][0]
    assert call["model"] == "gemini-test"
    assert provider.get_extraction_metadata()["mode"] == "text"


def test_empty_reply_is_reported(mocker):
    provider = GeminiProvider(client=_client(mocker, ""))

    result = provider.suggest_method(CoffeeBean(name="Kenya AA"))

    assert result.value is None
    assert result.reason == "empty input"


def test_missing_image_file(mocker, tmp_path):
    client = _client(mocker, "{}")
    provider = GeminiProvider(client=client)

    with pytest.raises(ImageError):
        provider.recognize_bean(tmp_path / "missing.jpg")
    client.models.generate_content.assert_not_called()


def test_request_failure_is_wrapped(mocker):
    client = mocker.MagicMock()
    client.models.generate_content.side_effect = RuntimeError("backend unavailable")
    provider = GeminiProvider(client=client)

    with pytest.raises(BrewCodecError):
        provider.generate("hello")
