"""Word search puzzles generated by a language model, validated and repaired locally."""

from .errors import (
    WordSearchError,
    ConfigurationError,
    GenerationError,
    TransportError,
    ParseError,
    PuzzleValidationError,
    ShapeError,
    PlacementError,
    IntersectionError,
    ExhaustedRetriesError,
)
from .verifiers import Direction, Placement, Puzzle, validate
from .generation import GeneratorConfig, WordSearchGenerator, generate_word_search

__all__ = [
    "WordSearchError",
    "ConfigurationError",
    "GenerationError",
    "TransportError",
    "ParseError",
    "PuzzleValidationError",
    "ShapeError",
    "PlacementError",
    "IntersectionError",
    "ExhaustedRetriesError",
    "Direction",
    "Placement",
    "Puzzle",
    "validate",
    "GeneratorConfig",
    "WordSearchGenerator",
    "generate_word_search",
]

__version__ = "0.1.0"
