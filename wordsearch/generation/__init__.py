"""LLM generation layer for word search puzzles."""

from .models import (
    Message,
    Role,
    PuzzleRequest,
    GeneratorConfig,
    AttemptResult,
    GenerationResult,
    MIN_GRID_SIZE,
    MAX_GRID_SIZE,
    DEFAULT_MAX_ATTEMPTS,
)
from .llm_client import LLMClient
from .puzzle_generator import WordSearchGenerator, generate_word_search

__all__ = [
    "Message",
    "Role",
    "PuzzleRequest",
    "GeneratorConfig",
    "AttemptResult",
    "GenerationResult",
    "MIN_GRID_SIZE",
    "MAX_GRID_SIZE",
    "DEFAULT_MAX_ATTEMPTS",
    "LLMClient",
    "WordSearchGenerator",
    "generate_word_search",
]
