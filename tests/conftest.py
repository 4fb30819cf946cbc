"""
Pytest configuration for State Compare backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")
os.environ.setdefault("CORS_ENABLED", "true")


@pytest.fixture
def texas():
    """Texas profile from the frontend dataset."""
    return {
        "nome": "Texas",
        "custo": 90,
        "salario": 15,
        "poder_compra": 85.5,
        "acesso_natureza": 7,
        "prob_neve": 1,
        "clima": "quente",
        "destaque": "sem imposto estadual",
    }


@pytest.fixture
def vermont():
    """Vermont profile from the frontend dataset."""
    return {
        "nome": "Vermont",
        "custo": 120,
        "salario": 13.5,
        "poder_compra": 60.2,
        "acesso_natureza": 9,
        "prob_neve": 8,
        "clima": "frio",
        "destaque": "natureza",
    }


@pytest.fixture
def mock_backend():
    """
    Mock GenerationBackend.
    generate() is an AsyncMock returning a fixed recommendation.
    """
    backend = MagicMock()
    backend.generate = AsyncMock(return_value="Texas para carreira; Vermont para natureza.")
    return backend
