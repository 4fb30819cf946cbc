"""
Pydantic schemas for the state comparison endpoint.

These models define the request/response contracts for
POST /api/gemini-recommendation.

The request body keeps the camelCase keys used by the web frontend
(`stateA`, `stateB`); profile fields keep their Portuguese names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class StateProfile(BaseModel):
    """
    Profile of a single state/region being compared.

    Only `nome` is required. Numeric values are trusted as sent by the
    caller (no range checks); unknown keys are ignored.
    """
    nome: str = Field(
        ...,
        description="State name",
        examples=["Texas", "Vermont"]
    )
    sigla: Optional[str] = Field(
        None,
        description="State abbreviation",
        examples=["TX", "VT"]
    )
    custo: Optional[float] = Field(
        None,
        description="Cost-of-living index (100 = national average)",
        examples=[90.0, 120.0]
    )
    salario: Optional[float] = Field(
        None,
        description="Hourly minimum wage in USD",
        examples=[15.0, 13.5]
    )
    poder_compra: Optional[float] = Field(
        None,
        description="Purchasing power as a percentage",
        examples=[85.5, 60.2]
    )
    acesso_natureza: Optional[float] = Field(
        None,
        description="Nature access score (0-10)",
        examples=[7, 9]
    )
    prob_neve: Optional[float] = Field(
        None,
        description="Snow probability score (0-10)",
        examples=[1, 8]
    )
    clima: Optional[str] = Field(
        None,
        description="Climate descriptor",
        examples=["quente", "frio"]
    )
    destaque: Optional[str] = Field(
        None,
        description="Main highlight of the state",
        examples=["sem imposto estadual", "natureza"]
    )
    ambiente_academico: Optional[str] = Field(
        None,
        description="Academic environment descriptor",
        examples=["UT Austin, Texas A&M"]
    )


class ComparisonRequest(BaseModel):
    """Body of POST /api/gemini-recommendation."""
    model_config = ConfigDict(populate_by_name=True)

    state_a: StateProfile = Field(..., alias="stateA")
    state_b: StateProfile = Field(..., alias="stateB")


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RecommendationResponse(BaseModel):
    """Successful response: the generated recommendation text."""
    recommendation: str = Field(
        ...,
        description="Free-text recommendation produced by Gemini",
        min_length=1
    )


class ErrorResponse(BaseModel):
    """
    Error body returned on every failure path.

    `message` is human-readable so the frontend can display it directly.
    """
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Dados de comparação ausentes."]
    )
