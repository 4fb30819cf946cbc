#!/usr/bin/env python3
"""
State Comparison Test Script

Runs the comparison recommendation locally, without starting the API server.

Usage:
    python scripts/compare_states.py
    python scripts/compare_states.py --dry-run
    python scripts/compare_states.py --state-a texas.json --state-b vermont.json
    python scripts/compare_states.py --model gemini-2.5-flash

Each state file is a JSON object with the StateProfile fields
(nome, sigla, custo, salario, poder_compra, acesso_natureza, prob_neve,
clima, destaque, ambiente_academico).
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from state_compare.agents.comparison.prompts import build_comparison_prompt
from state_compare.config import settings
from state_compare.schemas.comparison import StateProfile
from state_compare.services.generation import GeminiBackend
from state_compare.services.recommendation_service import (
    classify_backend_error,
    generate_recommendation,
)
from state_compare.utils.logging import LOG_FORMAT, resolve_level


# Configure logging
logging.basicConfig(
    level=resolve_level(settings.LOG_LEVEL),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


SAMPLE_STATE_A = {
    "nome": "Texas",
    "sigla": "TX",
    "custo": 90,
    "salario": 15,
    "poder_compra": 85.5,
    "acesso_natureza": 7,
    "prob_neve": 1,
    "clima": "quente",
    "destaque": "sem imposto estadual",
}

SAMPLE_STATE_B = {
    "nome": "Vermont",
    "sigla": "VT",
    "custo": 120,
    "salario": 13.5,
    "poder_compra": 60.2,
    "acesso_natureza": 9,
    "prob_neve": 8,
    "clima": "frio",
    "destaque": "natureza",
}


def load_state(path: Optional[str], default: dict) -> StateProfile:
    """Load a StateProfile from a JSON file, or use the built-in sample."""
    if not path:
        return StateProfile.model_validate(default)

    with open(path, encoding="utf-8") as f:
        return StateProfile.model_validate(json.load(f))


async def run_comparison(
    state_a: StateProfile,
    state_b: StateProfile,
    model: Optional[str] = None,
    dry_run: bool = False,
) -> int:
    """Run a single comparison and print the result. Returns a process exit code."""
    print("\n" + "=" * 60)
    print("STATE COMPARISON TEST (Gemini)")
    print("=" * 60)
    print(f"\nState A:  {state_a.nome}")
    print(f"State B:  {state_b.nome}")
    print(f"Model:    {model or settings.GEMINI_MODEL}")

    if dry_run:
        print("\n--- Prompt ---\n")
        print(build_comparison_prompt(state_a, state_b))
        return 0

    # Check if the Gemini API key is configured
    if not settings.GEMINI_API_KEY:
        print("\n⚠️  ERROR: GEMINI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        return 1

    print("\nCalling Gemini API...")

    try:
        recommendation = await generate_recommendation(
            state_a=state_a,
            state_b=state_b,
            backend=GeminiBackend(),
            model=model,
        )
    except Exception as e:
        status_code, message = classify_backend_error(e)
        print(f"\n❌ Failed (HTTP {status_code}): {message}\n")
        return 1

    print("\n" + "=" * 60)
    print("RECOMMENDATION")
    print("=" * 60 + "\n")
    print(recommendation)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare two states with Gemini")
    parser.add_argument("--state-a", help="Path to a JSON file with the first state profile")
    parser.add_argument("--state-b", help="Path to a JSON file with the second state profile")
    parser.add_argument("--model", help="Gemini model id (defaults to GEMINI_MODEL)")
    parser.add_argument("--dry-run", action="store_true", help="Print the prompt without calling Gemini")
    args = parser.parse_args()

    state_a = load_state(args.state_a, SAMPLE_STATE_A)
    state_b = load_state(args.state_b, SAMPLE_STATE_B)

    return asyncio.run(run_comparison(state_a, state_b, model=args.model, dry_run=args.dry_run))


if __name__ == "__main__":
    sys.exit(main())
