"""Base provider interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image

from brew_codec.config import EngineConfig
from brew_codec.core import detect_and_parse
from brew_codec.schema import CoffeeBean, ParseResult
from brew_codec.templates import bean_recognition_prompt, recipe_prompt
from brew_codec.vocabulary import PourTypeVocabulary

ImageInput = str | Path | Image.Image


class BaseProvider(ABC):
    """Abstract base class for assistants that draft records as text.

    Replies are never trusted: they go through ``detect_and_parse`` like any
    other pasted text.
    """

    @abstractmethod
    def generate(self, prompt: str, image: ImageInput | None = None) -> str:
        """Send a prompt (and optionally an image) and return the reply text."""
        pass

    def recognize_bean(self, image: ImageInput, *, config: EngineConfig | None = None) -> ParseResult:
        """Draft a coffee bean record from a package or card image."""
        reply = self.generate(bean_recognition_prompt(), image)
        return detect_and_parse(reply, config=config)

    def suggest_method(
        self,
        bean: CoffeeBean,
        vocabulary: PourTypeVocabulary | None = None,
        *,
        config: EngineConfig | None = None,
    ) -> ParseResult:
        """Ask for a brewing method suited to ``bean``."""
        reply = self.generate(recipe_prompt(bean))
        return detect_and_parse(reply, vocabulary, config=config)

    def get_extraction_metadata(self) -> dict[str, str]:
        """Return provider-specific extraction metadata."""
        return {}
