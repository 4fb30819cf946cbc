"""
Recommendation Service - state comparison with Gemini

Builds the comparison prompt from two state profiles, calls the generation
backend exactly once and returns the generated text.

Architecture:
- Pattern: single LLM call (no tools, no structured output)
- Model: GEMINI_MODEL (default gemini-3-pro-preview)
- Output: plain text, returned as-is to the frontend

Errors raised by the backend are not handled here; the route maps them to
HTTP responses with `classify_backend_error`.
"""

import logging
from typing import Optional, Tuple

from google.genai import errors as genai_errors

from state_compare.agents.comparison.prompts import (
    COMPARISON_SYSTEM_PROMPT,
    build_comparison_prompt,
)
from state_compare.config import settings
from state_compare.schemas.comparison import StateProfile
from state_compare.services.generation import GenerationBackend

logger = logging.getLogger(__name__)

API_KEY_REJECTED_MESSAGE = "A chave de API foi rejeitada pelo serviço de IA. Verifique a configuração do servidor."
QUOTA_EXCEEDED_MESSAGE = "A cota do serviço de IA foi excedida. Tente novamente mais tarde."
BACKEND_ERROR_MESSAGE = "Erro interno ao comunicar com o serviço de IA. Detalhe: {detail}"
EMPTY_RESPONSE_MESSAGE = "Falha ao processar a resposta da Gemini API. Nenhuma recomendação foi gerada."


class RecommendationError(Exception):
    """Base error for the recommendation flow."""


class EmptyRecommendationError(RecommendationError):
    """The backend answered, but without any text."""

    def __init__(self, message: str = EMPTY_RESPONSE_MESSAGE):
        super().__init__(message)


async def generate_recommendation(
    state_a: StateProfile,
    state_b: StateProfile,
    backend: GenerationBackend,
    model: Optional[str] = None,
) -> str:
    """
    Generate a recommendation comparing two states.

    Args:
        state_a: First state profile
        state_b: Second state profile
        backend: Generation backend to call (called exactly once)
        model: Model id override (defaults to settings.GEMINI_MODEL)

    Returns:
        str: Non-empty recommendation text

    Raises:
        EmptyRecommendationError: If the backend returned no text
        Exception: Anything raised by the backend, unchanged
    """
    logger.info(f"generate_recommendation called for stateA='{state_a.nome}', stateB='{state_b.nome}'")

    prompt = build_comparison_prompt(state_a, state_b)

    recommendation = await backend.generate(
        model=model or settings.GEMINI_MODEL,
        prompt=prompt,
        system_instruction=COMPARISON_SYSTEM_PROMPT,
    )

    if not recommendation or not recommendation.strip():
        logger.error("Empty text in Gemini response")
        raise EmptyRecommendationError()

    logger.info(f"Recommendation generated (length={len(recommendation)})")
    return recommendation


def classify_backend_error(exc: Exception) -> Tuple[int, str]:
    """
    Map an exception from the generation call to (HTTP status, message).

    SDK errors are classified by their status code when it is conclusive
    (401, 403 naming the API key, 429);
    otherwise the message is inspected for "API key" (401) or "quota" (429).
    Anything else is a 500.
    """
    if isinstance(exc, EmptyRecommendationError):
        return 500, str(exc)

    detail = str(exc)
    lowered = detail.lower()

    if isinstance(exc, genai_errors.APIError):
        if exc.code == 401 or (exc.code == 403 and "api key" in lowered):
            return 401, API_KEY_REJECTED_MESSAGE
        if exc.code == 429:
            return 429, QUOTA_EXCEEDED_MESSAGE

    if "api key" in lowered:
        return 401, API_KEY_REJECTED_MESSAGE
    if "quota" in lowered:
        return 429, QUOTA_EXCEEDED_MESSAGE

    return 500, BACKEND_ERROR_MESSAGE.format(detail=detail)
