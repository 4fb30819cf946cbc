"""
Logging utilities for the State Compare backend.

Handlers are configured once, on the root logger, by logging.basicConfig
(main.py for the API, scripts/compare_states.py for the CLI). Loggers from
get_logger() only carry a level and propagate to it, so nothing prints twice.

SECURITY RULES:
- NEVER log the Gemini API key or any other secret
- NEVER log the full prompt or the raw request body

Acceptable logging:
- High-level events (e.g., "Gemini call started", "Recommendation generated")
- Non-sensitive metadata (e.g., "stateA='Texas'", "recommendation length=812")
- Sanitized backend error messages
"""

import logging
from typing import Optional, Union

from state_compare.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name ("debug", "INFO") into its int; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional level, as int or name (defaults to settings.LOG_LEVEL)

    Usage:
        >>> from state_compare.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Recommendation generated")
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(settings.LOG_LEVEL if level is None else level))
    return logger
