"""
Pydantic schemas for API request and response validation.
"""

from .comparison import (
    ComparisonRequest,
    ErrorResponse,
    RecommendationResponse,
    StateProfile,
)
from .health import HealthResponse

__all__ = [
    "ComparisonRequest",
    "ErrorResponse",
    "HealthResponse",
    "RecommendationResponse",
    "StateProfile",
]
