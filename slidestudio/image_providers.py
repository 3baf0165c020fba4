import base64
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from google import genai
from google.genai import types
from openai import OpenAI

from slidestudio.config import settings
from slidestudio.exceptions import ImageProviderError, NoImageDataError

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai")


@dataclass
class GeneratedImage:
    """Raw image returned by a provider."""
    data: bytes
    mime_type: str = "image/png"


def _decode_payload(data: Any) -> bytes:
    # The SDK hands back bytes, the REST payload is base64 text
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data)


def _dump_response(response: Any) -> str:
    if hasattr(response, "model_dump_json"):
        try:
            return response.model_dump_json(indent=2, exclude_none=True)
        except (TypeError, ValueError):
            return repr(response)
    return repr(response)


def extract_image_from_response(response: Any) -> GeneratedImage:
    """Pull the first inline image part out of a generate_content response."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise NoImageDataError("No candidates returned", provider="gemini")

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []

    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if not inline_data or not inline_data.data:
            continue
        mime_type = inline_data.mime_type or ""
        if mime_type.startswith("image/"):
            return GeneratedImage(data=_decode_payload(inline_data.data), mime_type=mime_type)

    logger.error(f"Full response: {_dump_response(response)}")
    raise NoImageDataError("No image data found in response", provider="gemini")


class ImageProviderManager:
    """Image generation client manager for Gemini and OpenAI image models."""

    def __init__(self, provider: Optional[str] = None):
        self.provider = (provider or settings.IMAGE_PROVIDER).lower()
        self.client = None
        self._lock = threading.Lock()

    def initialize_client(self) -> None:
        """Initialize the client of the current provider."""
        if self.provider not in SUPPORTED_PROVIDERS:
            raise ImageProviderError(f"Unsupported image provider: {self.provider}", provider=self.provider)

        if self.provider == "gemini":
            if not settings.GEMINI_API_KEY:
                raise ImageProviderError("GEMINI_API_KEY is required", provider="gemini")
            self.client = genai.Client(api_key=settings.GEMINI_API_KEY)
        else:
            if not settings.OPENAI_API_KEY:
                raise ImageProviderError("OPENAI_API_KEY is required", provider="openai")
            self.client = OpenAI(api_key=settings.OPENAI_API_KEY)

        logger.info(f"{self.provider} image client initialized with model: {self.get_model()}")

    def _current(self) -> Tuple[str, Any]:
        """Provider name and its client, read together; builds the client on first use."""
        with self._lock:
            if not self.client:
                self.initialize_client()
            return self.provider, self.client

    def get_client(self):
        """Get the client instance, creating it on first use."""
        return self._current()[1]

    def get_model(self) -> str:
        if self.provider == "openai":
            return settings.OPENAI_IMAGE_MODEL
        return settings.GEMINI_IMAGE_MODEL

    def has_api_key(self, provider: Optional[str] = None) -> bool:
        provider = provider or self.provider
        if provider == "openai":
            return bool(settings.OPENAI_API_KEY)
        if provider == "gemini":
            return bool(settings.GEMINI_API_KEY)
        return False

    def switch_provider(self, provider: str) -> None:
        """Switch provider; the new client is built lazily on the next call."""
        provider = provider.lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported image provider: {provider}")
        with self._lock:
            self.provider = provider
            self.client = None
        logger.info(f"Switched image provider to {provider}")

    def get_current_provider_info(self) -> Dict[str, Any]:
        """Get current provider information."""
        info = {
            "provider": self.provider,
            "model": self.get_model(),
            "configured": self.has_api_key(),
        }
        if self.provider == "openai":
            info["image_size"] = settings.OPENAI_IMAGE_SIZE
        else:
            info["aspect_ratio"] = settings.IMAGE_ASPECT_RATIO
        return info

    def generate_image(self, prompt: str) -> GeneratedImage:
        """Run a single image generation call. No retries."""
        provider, client = self._current()
        if provider == "openai":
            return self._generate_openai(client, prompt)
        return self._generate_gemini(client, prompt)

    def _generate_gemini(self, client, prompt: str) -> GeneratedImage:
        try:
            response = client.models.generate_content(
                model=settings.GEMINI_IMAGE_MODEL,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_modalities=["TEXT", "IMAGE"],
                    image_config=types.ImageConfig(
                        aspect_ratio=settings.IMAGE_ASPECT_RATIO,
                    ),
                ),
            )
        except Exception as e:
            raise ImageProviderError(f"Gemini request failed: {e}", provider="gemini", original_error=e)

        return extract_image_from_response(response)

    def _generate_openai(self, client, prompt: str) -> GeneratedImage:
        try:
            response = client.images.generate(
                model=settings.OPENAI_IMAGE_MODEL,
                prompt=prompt,
                size=settings.OPENAI_IMAGE_SIZE,
                n=1,
            )
        except Exception as e:
            raise ImageProviderError(f"OpenAI request failed: {e}", provider="openai", original_error=e)

        if not response.data or not response.data[0].b64_json:
            logger.error(f"Full response: {_dump_response(response)}")
            raise NoImageDataError("No image data found in response", provider="openai")

        return GeneratedImage(data=_decode_payload(response.data[0].b64_json))

# Global instance
image_manager = ImageProviderManager()
