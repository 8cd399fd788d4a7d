"""Prompt templates and output schema for puzzle generation."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .puzzle_prompt import build_puzzle_prompt, format_words, format_directions
from .schema import PUZZLE_SCHEMA, build_response_format

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_puzzle_prompt",
    "format_words",
    "format_directions",
    "PUZZLE_SCHEMA",
    "build_response_format",
]
