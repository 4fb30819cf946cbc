"""
State Comparison Prompt Templates

Contains the system prompt and user prompt builder for the comparison
recommendation endpoint.

Architecture:
- Pattern: single LLM call, plain-text output
- Model: Gemini (configured via GEMINI_MODEL)
- System prompt defines the persona only
- User prompt carries every field of both states plus the task and the
  expected output structure

The prompt is written in Portuguese because the frontend and its users are.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from state_compare.schemas.comparison import StateProfile

MISSING_VALUE = "não informado"

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

COMPARISON_SYSTEM_PROMPT = (
    "Você é um consultor de estilo de vida focado em mudança de país. "
    "Sua tarefa é analisar os dois estados fornecidos e fornecer uma "
    "recomendação personalizada de forma clara e profissional, separando "
    "as prioridades conforme solicitado."
)

COMPARISON_TASK = (
    "Com base nestes dados, qual estado seria ideal para o usuário se ele "
    "prioriza: 1) Economia e Carreira e 2) Qualidade de Vida e Natureza? "
    "Apresente a análise em dois parágrafos distintos para as duas "
    "prioridades e termine com uma recomendação final. "
    "Seja conciso e use português."
)


# =============================================================================
# FIELD FORMATTING
# =============================================================================

def _fmt_fixed(value: Optional[float], decimals: int, prefix: str = "", suffix: str = "") -> str:
    if value is None:
        return MISSING_VALUE
    return f"{prefix}{value:.{decimals}f}{suffix}"


def _fmt_score(value: Optional[float]) -> str:
    # Printed as sent: 7.0 -> "7", 7.123456789 -> "7.123456789", 1234567.0 -> "1234567"
    if value is None:
        return MISSING_VALUE
    if value.is_integer():
        return str(int(value))
    # repr keeps every digit; Decimal drops the exponent form (1e-07 -> 0.0000001)
    return format(Decimal(repr(value)), "f")


def _fmt_text(value: Optional[str]) -> str:
    if value is None:
        return MISSING_VALUE
    return value


def format_state_fields(state: StateProfile) -> List[Tuple[str, str]]:
    """
    Return (label, formatted value) pairs for every profile field after `nome`,
    in declaration order. Missing values are rendered, never skipped.
    """
    return [
        ("Sigla", _fmt_text(state.sigla)),
        ("Custo de Vida (Índice)", _fmt_fixed(state.custo, 1)),
        ("Salário Mínimo (USD)", _fmt_fixed(state.salario, 2, prefix="$")),
        ("Poder de Compra", _fmt_fixed(state.poder_compra, 2, suffix="%")),
        ("Acesso à Natureza (0-10)", _fmt_score(state.acesso_natureza)),
        ("Probabilidade de Neve (0-10)", _fmt_score(state.prob_neve)),
        ("Clima", _fmt_text(state.clima)),
        ("Destaque Principal", _fmt_text(state.destaque)),
        ("Ambiente Acadêmico", _fmt_text(state.ambiente_academico)),
    ]


def _render_state(label: str, state: StateProfile) -> str:
    lines = [f"{label} ({state.nome}):"]
    lines.extend(f"- {name}: {value}" for name, value in format_state_fields(state))
    return "\n".join(lines)


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_comparison_prompt(state_a: StateProfile, state_b: StateProfile) -> str:
    """
    Build the user prompt comparing two states.

    Deterministic: the same pair of profiles always yields the same string.
    State A is always rendered before State B.

    Args:
        state_a: First state profile
        state_b: Second state profile

    Returns:
        str: Prompt ready to be sent to Gemini
    """
    return "\n\n".join([
        "Analise a comparação entre o Estado A e o Estado B e forneça uma recomendação.",
        _render_state("Estado A", state_a),
        _render_state("Estado B", state_b),
        COMPARISON_TASK,
    ])
