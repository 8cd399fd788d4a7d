"""Structured output schema for puzzle responses."""

from typing import Any, Dict


PLACEMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "description": "The placement of one word in the grid.",
    "properties": {
        "word": {"type": "string", "description": "The word placed in the grid."},
        "startRow": {"type": "integer", "description": "The 0-indexed starting row of the word."},
        "startCol": {"type": "integer", "description": "The 0-indexed starting column of the word."},
        "endRow": {"type": "integer", "description": "The 0-indexed ending row of the word."},
        "endCol": {"type": "integer", "description": "The 0-indexed ending column of the word."},
    },
    "required": ["word", "startRow", "startCol", "endRow", "endCol"],
    "additionalProperties": False,
}

PUZZLE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "grid": {
            "type": "array",
            "description": (
                "A 2D array of strings representing the word search grid, "
                "where each string is a single uppercase letter."
            ),
            "items": {"type": "array", "items": {"type": "string"}},
        },
        "solution": {
            "type": "array",
            "description": "An array of objects detailing the placement of each word.",
            "items": PLACEMENT_SCHEMA,
        },
        "wordsUsed": {
            "type": "array",
            "description": (
                "An array of the words that were successfully placed in the grid. "
                "This might be a subset of the requested words if some did not fit."
            ),
            "items": {"type": "string"},
        },
    },
    "required": ["grid", "solution", "wordsUsed"],
    "additionalProperties": False,
}

SCHEMA_NAME = "word_search_puzzle"


def build_response_format() -> Dict[str, Any]:
    """Wrap the puzzle schema in the json_schema response_format LiteLLM forwards to providers."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": SCHEMA_NAME,
            "schema": PUZZLE_SCHEMA,
            "strict": True,
        },
    }
