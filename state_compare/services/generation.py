"""
Generation backend - Google Gemini via the Google Gen AI Python SDK (google-genai)

The recommendation service only depends on the `GenerationBackend` protocol
(model id, prompt, optional system instruction -> text), so tests and other
providers can plug in without touching the handler.

Call policy:
- Exactly one generate_content call per request
- No retry, no timeout override (SDK transport defaults apply)
- Awaited on the event loop via the SDK's async client (client.aio)
"""

import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types

from state_compare.config import settings

logger = logging.getLogger(__name__)

# Lazily created client, rebuilt only if the configured key changes
_gemini_client = None
_gemini_client_key: Optional[str] = None


class GenerationBackend(Protocol):
    """A text-generation service invoked once per request."""

    async def generate(
        self,
        model: str,
        prompt: str,
        system_instruction: Optional[str] = None,
    ) -> Optional[str]:
        ...


def _get_gemini_client(api_key: str) -> genai.Client:
    """
    Lazy initialization of the Gemini client.
    Uses the Google Gen AI SDK.
    """
    global _gemini_client, _gemini_client_key

    if _gemini_client is not None and _gemini_client_key == api_key:
        return _gemini_client

    _gemini_client = genai.Client(api_key=api_key)
    _gemini_client_key = api_key
    logger.info("Gemini client initialized successfully for comparisons")
    return _gemini_client


def _extract_text(response) -> Optional[str]:
    """
    Get the response text, preferring the candidate parts.

    response.text can be None even when parts carry text, so parts are
    concatenated first and response.text is the fallback.
    """
    candidates = getattr(response, "candidates", None)
    if candidates:
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) if content else None
        if parts:
            texts = [
                part.text for part in parts
                if getattr(part, "text", None) and not getattr(part, "thought", False)
            ]
            if texts:
                return "".join(texts)

    return getattr(response, "text", None)


class GeminiBackend:
    """GenerationBackend backed by the Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        thinking_level: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        self._api_key = api_key
        self._thinking_level = thinking_level
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = _get_gemini_client(self._api_key or settings.GEMINI_API_KEY)
        return self._client

    def build_config(self, system_instruction: Optional[str] = None) -> types.GenerateContentConfig:
        """Build the generate_content config (system instruction + thinking level)."""
        thinking_level = (
            self._thinking_level
            if self._thinking_level is not None
            else settings.GEMINI_THINKING_LEVEL
        )

        config_kwargs = {}
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction
        if thinking_level:
            config_kwargs["thinking_config"] = types.ThinkingConfig(
                thinking_level=thinking_level.upper()
            )

        return types.GenerateContentConfig(**config_kwargs)

    async def generate(
        self,
        model: str,
        prompt: str,
        system_instruction: Optional[str] = None,
    ) -> Optional[str]:
        logger.info(f"Calling Gemini API (model={model})...")

        response = await self.client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=self.build_config(system_instruction),
        )

        return _extract_text(response)


def get_generation_backend() -> GenerationBackend:
    """FastAPI dependency returning the configured generation backend."""
    return GeminiBackend()
