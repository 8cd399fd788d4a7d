"""Puzzle verification for model-generated word searches."""

from .verify import validate, validate_shape, validate_placement
from .models import Direction, DEFAULT_DIRECTIONS, Placement, Puzzle
from .parsing import parse_puzzle, parse_payload, extract_json_content
from .grid import walk_cells, solution_cells, read_word, render_grid

__all__ = [
    # Main verification
    "validate",
    "validate_shape",
    "validate_placement",
    # Models
    "Direction",
    "DEFAULT_DIRECTIONS",
    "Placement",
    "Puzzle",
    # Parsing
    "parse_puzzle",
    "parse_payload",
    "extract_json_content",
    # Grid utilities
    "walk_cells",
    "solution_cells",
    "read_word",
    "render_grid",
]
