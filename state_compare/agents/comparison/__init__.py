"""
State Comparison - Single-call LLM Architecture

This module contains the prompt templates for the Gemini-based comparison
recommendation.

The service layer is in:
- state_compare/services/recommendation_service.py

Prompt templates are in:
- state_compare/agents/comparison/prompts.py
"""

from state_compare.agents.comparison.prompts import (
    COMPARISON_SYSTEM_PROMPT,
    build_comparison_prompt,
)

__all__ = [
    "COMPARISON_SYSTEM_PROMPT",
    "build_comparison_prompt",
]
