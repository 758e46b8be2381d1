"""Gemini provider implementation."""

import logging
import os
from pathlib import Path

from google import genai
from google.genai import types
from PIL import Image

from brew_codec.exceptions import AuthenticationError, BrewCodecError, ImageError, RateLimitError
from brew_codec.providers.base import BaseProvider, ImageInput

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """Gemini API provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.0-flash",
        *,
        client=None,
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name to use.
            client: Preconfigured ``genai.Client``; skips key lookup.

        Raises:
            AuthenticationError: If no API key is provided or found.
        """
        self.model = model
        self._last_mode = "text"
        if client is not None:
            self.api_key = api_key
            self.client = client
            return

        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.client = genai.Client(api_key=self.api_key)

    def _load_image(self, image: ImageInput) -> Image.Image:
        """Load image from various input types."""
        if isinstance(image, Image.Image):
            return image

        path = Path(image) if isinstance(image, str) else image
        if not path.exists():
            raise ImageError(f"Image file not found: {path}")

        try:
            return Image.open(path)
        except Exception as e:
            raise ImageError(f"Failed to open image: {e}") from e

    def generate(self, prompt: str, image: ImageInput | None = None) -> str:
        """Send the prompt to Gemini and return the raw reply text.

        Raises:
            ImageError: If image cannot be loaded
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
        """
        contents: list = [prompt]
        if image is not None:
            contents.insert(0, self._load_image(image))
            self._last_mode = "vision"
        else:
            self._last_mode = "text"

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except genai.errors.ClientError as e:
            if "rate" in str(e).lower() or "quota" in str(e).lower():
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in str(e).lower() or "key" in str(e).lower():
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise
        except Exception as e:
            logger.exception("gemini request failed")
            raise BrewCodecError(f"Gemini request failed: {e}") from e

        return response.text or ""

    def get_extraction_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model, "mode": self._last_mode}
