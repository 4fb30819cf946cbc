"""
Service layer for the State Compare backend.

Services sit between routes (HTTP layer) and the generation backend:
- Build prompts from validated request models
- Call the backend once
- Raise domain errors that routes map to HTTP responses
"""

from .generation import GeminiBackend, GenerationBackend, get_generation_backend
from .recommendation_service import (
    EmptyRecommendationError,
    RecommendationError,
    classify_backend_error,
    generate_recommendation,
)

__all__ = [
    "GeminiBackend",
    "GenerationBackend",
    "get_generation_backend",
    "EmptyRecommendationError",
    "RecommendationError",
    "classify_backend_error",
    "generate_recommendation",
]
