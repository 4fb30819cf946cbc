"""
Tests for the Recommendation Service and the Gemini generation backend.

These tests use mocked backends and a mocked google-genai client to avoid
actual API calls and keep results deterministic.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import errors as genai_errors
from google.genai import types

from state_compare.agents.comparison.prompts import COMPARISON_SYSTEM_PROMPT
from state_compare.schemas.comparison import StateProfile
from state_compare.services.generation import GeminiBackend, _extract_text
from state_compare.services.recommendation_service import (
    EmptyRecommendationError,
    classify_backend_error,
    generate_recommendation,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def state_a(texas):
    return StateProfile.model_validate(texas)


@pytest.fixture
def state_b(vermont):
    return StateProfile.model_validate(vermont)


def _gemini_response(*texts, text=None):
    """Build a response object shaped like google-genai's GenerateContentResponse."""
    parts = [SimpleNamespace(text=t, thought=None) for t in texts]
    candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
    return SimpleNamespace(candidates=[candidate], text=text)


@pytest.fixture
def mock_genai_client():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=_gemini_response("Recomendo o Texas.")
    )
    return client


# =============================================================================
# UNIT TESTS: generate_recommendation
# =============================================================================

class TestGenerateRecommendation:
    """Tests for generate_recommendation."""

    def test_returns_backend_text(self, state_a, state_b, mock_backend):
        result = asyncio.run(generate_recommendation(state_a, state_b, mock_backend))

        assert result == "Texas para carreira; Vermont para natureza."
        mock_backend.generate.assert_awaited_once()

    def test_passes_system_instruction(self, state_a, state_b, mock_backend):
        asyncio.run(generate_recommendation(state_a, state_b, mock_backend))

        kwargs = mock_backend.generate.await_args.kwargs
        assert kwargs["system_instruction"] == COMPARISON_SYSTEM_PROMPT
        assert "Texas" in kwargs["prompt"]
        assert "Vermont" in kwargs["prompt"]

    def test_model_override(self, state_a, state_b, mock_backend):
        asyncio.run(
            generate_recommendation(state_a, state_b, mock_backend, model="gemini-2.5-flash")
        )

        assert mock_backend.generate.await_args.kwargs["model"] == "gemini-2.5-flash"

    @pytest.mark.parametrize("text", ["", None, "\n  "])
    def test_empty_text_raises(self, state_a, state_b, mock_backend, text):
        mock_backend.generate.return_value = text

        with pytest.raises(EmptyRecommendationError):
            asyncio.run(generate_recommendation(state_a, state_b, mock_backend))

    def test_backend_error_propagates(self, state_a, state_b, mock_backend):
        mock_backend.generate.side_effect = RuntimeError("network down")

        with pytest.raises(RuntimeError, match="network down"):
            asyncio.run(generate_recommendation(state_a, state_b, mock_backend))


# =============================================================================
# UNIT TESTS: classify_backend_error
# =============================================================================

class TestClassifyBackendError:
    """Tests for the exception -> (status, message) mapping."""

    def test_quota_message_maps_to_429(self):
        status, message = classify_backend_error(Exception("Quota exceeded for metric"))
        assert status == 429
        assert message

    def test_api_key_message_maps_to_401(self):
        status, _ = classify_backend_error(Exception("API key not valid"))
        assert status == 401

    def test_unknown_error_maps_to_500_with_detail(self):
        status, message = classify_backend_error(ValueError("weird failure"))
        assert status == 500
        assert "weird failure" in message

    def test_empty_recommendation_maps_to_500(self):
        status, message = classify_backend_error(EmptyRecommendationError())
        assert status == 500
        assert message

    def test_sdk_rate_limit_code_maps_to_429(self):
        exc = genai_errors.ClientError(
            429,
            {"error": {"code": 429, "message": "Resource has been exhausted", "status": "RESOURCE_EXHAUSTED"}},
        )
        status, _ = classify_backend_error(exc)
        assert status == 429

    def test_sdk_invalid_key_maps_to_401(self):
        exc = genai_errors.ClientError(
            400,
            {"error": {"code": 400, "message": "API key not valid. Please pass a valid API key.", "status": "INVALID_ARGUMENT"}},
        )
        status, _ = classify_backend_error(exc)
        assert status == 401

    def test_sdk_forbidden_key_maps_to_401(self):
        exc = genai_errors.ClientError(
            403,
            {"error": {"code": 403, "message": "Method doesn't allow unregistered callers. Please use an API Key.", "status": "PERMISSION_DENIED"}},
        )
        status, _ = classify_backend_error(exc)
        assert status == 401

    def test_sdk_forbidden_without_key_maps_to_500(self):
        exc = genai_errors.ClientError(
            403,
            {"error": {"code": 403, "message": "The caller does not have permission", "status": "PERMISSION_DENIED"}},
        )
        status, _ = classify_backend_error(exc)
        assert status == 500


# =============================================================================
# UNIT TESTS: GeminiBackend
# =============================================================================

class TestGeminiBackend:
    """Tests for the google-genai backed GenerationBackend."""

    def test_generate_calls_sdk_once(self, mock_genai_client):
        backend = GeminiBackend(client=mock_genai_client, thinking_level="LOW")

        result = asyncio.run(
            backend.generate("gemini-3-pro-preview", "prompt", system_instruction="persona")
        )

        assert result == "Recomendo o Texas."
        mock_genai_client.aio.models.generate_content.assert_awaited_once()
        kwargs = mock_genai_client.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-3-pro-preview"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].system_instruction == "persona"

    def test_build_config_sets_thinking_level(self):
        backend = GeminiBackend(client=MagicMock(), thinking_level="low")

        config = backend.build_config("persona")

        assert config.thinking_config.thinking_level == types.ThinkingLevel.LOW

    def test_build_config_without_thinking_level(self):
        backend = GeminiBackend(client=MagicMock(), thinking_level="")

        config = backend.build_config()

        assert config.thinking_config is None
        assert config.system_instruction is None

    def test_sdk_error_propagates(self, mock_genai_client):
        mock_genai_client.aio.models.generate_content.side_effect = RuntimeError("quota")
        backend = GeminiBackend(client=mock_genai_client)

        with pytest.raises(RuntimeError):
            asyncio.run(backend.generate("m", "p"))


class TestExtractText:
    """Tests for _extract_text."""

    def test_joins_text_parts(self):
        assert _extract_text(_gemini_response("Parte 1. ", "Parte 2.")) == "Parte 1. Parte 2."

    def test_skips_thought_parts(self):
        response = _gemini_response("final")
        response.candidates[0].content.parts.insert(
            0, SimpleNamespace(text="reasoning", thought=True)
        )
        assert _extract_text(response) == "final"

    def test_falls_back_to_response_text(self):
        response = SimpleNamespace(candidates=[], text="fallback")
        assert _extract_text(response) == "fallback"

    def test_no_text_returns_none(self):
        response = SimpleNamespace(candidates=None, text=None)
        assert _extract_text(response) is None
