"""
FastAPI routes for the state comparison recommendation endpoint.

Endpoints:
- POST /api/gemini-recommendation: compare two states and get a recommendation
- any other method on the same path: 405 (mapped to a `message` body in main.py)

Every failure path answers with a JSON body carrying a `message` field, so the
frontend can display it directly. The body is read from the raw request
(not a Pydantic body parameter) so malformed input yields 400, not 422.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from state_compare.config import settings
from state_compare.schemas.comparison import (
    ComparisonRequest,
    ErrorResponse,
    RecommendationResponse,
)
from state_compare.services.generation import GenerationBackend, get_generation_backend
from state_compare.services.recommendation_service import (
    classify_backend_error,
    generate_recommendation,
)

logger = logging.getLogger(__name__)

RECOMMENDATION_PATH = "/gemini-recommendation"

METHOD_NOT_ALLOWED_MESSAGE = "Método não permitido."
MISSING_API_KEY_MESSAGE = (
    "A chave de API GEMINI_API_KEY não está configurada no servidor. "
    "Por favor, defina a variável de ambiente."
)
INVALID_BODY_MESSAGE = "Corpo da requisição inválido."
MISSING_STATES_MESSAGE = "Dados de comparação ausentes."
INVALID_STATES_MESSAGE = "Dados de comparação inválidos."

# Create router
router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


def _error(status_code: int, message: str, **kwargs) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
        **kwargs
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    RECOMMENDATION_PATH,
    response_model=RecommendationResponse,
    status_code=200,
    summary="Compare two states and get a recommendation",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON or missing stateA/stateB"},
        401: {"model": ErrorResponse, "description": "API key rejected by Gemini"},
        429: {"model": ErrorResponse, "description": "Gemini quota exceeded"},
        500: {"model": ErrorResponse, "description": "Missing API key, empty AI response or backend error"},
    },
    description="""
    Sends both state profiles to Gemini and returns its recommendation.

    **Request body:** `{"stateA": StateProfile, "stateB": StateProfile}`

    **Flow:**
    1. Check GEMINI_API_KEY is configured (500 otherwise)
    2. Parse JSON body and require stateA and stateB (400 otherwise)
    3. Build the comparison prompt and call Gemini once (no retry)
    4. Return `{"recommendation": "..."}`
    """
)
async def gemini_recommendation_endpoint(
    request: Request,
    backend: GenerationBackend = Depends(get_generation_backend),
):
    """
    Comparison recommendation endpoint.

    - Config check: API key must be present before anything else
    - Parse/Validate: raw JSON body, then ComparisonRequest
    - Call LLM: single call through the generation backend
    - Map errors: classify_backend_error -> 401 / 429 / 500
    """
    try:
        if not settings.GEMINI_API_KEY:
            logger.error("GEMINI_API_KEY not configured; refusing comparison request")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MISSING_API_KEY_MESSAGE)

        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Comparison request with unparseable body")
            return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

        if not isinstance(data, dict):
            logger.warning("Comparison request body is not a JSON object")
            return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

        if data.get("stateA") is None or data.get("stateB") is None:
            logger.warning("Comparison request missing stateA or stateB")
            return _error(status.HTTP_400_BAD_REQUEST, MISSING_STATES_MESSAGE)

        try:
            comparison = ComparisonRequest.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid state profiles: {e.error_count()} validation error(s)")
            return _error(status.HTTP_400_BAD_REQUEST, INVALID_STATES_MESSAGE)

        logger.info(
            f"POST /api/gemini-recommendation called: "
            f"stateA='{comparison.state_a.nome}', stateB='{comparison.state_b.nome}'"
        )

        recommendation = await generate_recommendation(
            state_a=comparison.state_a,
            state_b=comparison.state_b,
            backend=backend,
        )

        return RecommendationResponse(recommendation=recommendation)

    except Exception as e:
        status_code, message = classify_backend_error(e)
        logger.error(f"Error communicating with Gemini API (status={status_code}): {e}")
        return _error(status_code, message)

