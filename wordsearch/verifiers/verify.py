"""
Puzzle verification module for validating model-generated word searches.

Validates:
1. Grid shape (expected_size x expected_size single characters)
2. Placement rules (no corner start, listed in wordsUsed, in bounds, straight line of the word's length)
3. Non-intersection (no two words share a cell)

Letters in the grid that disagree with a declared placement are repaired
in place of rejecting the puzzle.
"""

import logging
from typing import Dict, List, Tuple

from ..errors import IntersectionError, PlacementError, ShapeError
from .grid import Cell, copy_grid, walk_cells
from .models import Placement, Puzzle


logger = logging.getLogger(__name__)


def validate_shape(grid: List[List[str]], expected_size: int) -> None:
    """Ensure the grid is an expected_size x expected_size matrix of single characters."""
    well_formed = len(grid) == expected_size and all(
        len(row) == expected_size
        and all(isinstance(cell, str) and len(cell) == 1 for cell in row)
        for row in grid
    )
    if not well_formed:
        raise ShapeError(
            f"The grid dimensions or structure are incorrect. Expected a "
            f"{expected_size}x{expected_size} array of single-character strings."
        )


def validate_placement(placement: Placement, words_used: List[str], expected_size: int) -> None:
    """Check the per-word rules that do not depend on other placements."""
    word = placement.word

    if placement.start == (0, 0):
        raise PlacementError(
            f"Invalid puzzle: The word \"{word}\" starts at the top-left corner (0,0), "
            "which is disallowed.",
            word=word,
        )

    if word not in words_used:
        raise PlacementError(
            f"Word \"{word}\" is in the solution but not in the 'wordsUsed' list.",
            word=word,
        )

    coords = (placement.start_row, placement.start_col, placement.end_row, placement.end_col)
    if any(value < 0 or value >= expected_size for value in coords):
        raise PlacementError(
            f"Coordinates for word \"{word}\" are out of the grid bounds.",
            word=word,
        )

    if not placement.is_straight:
        raise PlacementError(
            f"The coordinates for \"{word}\" do not form a horizontal, vertical or diagonal line.",
            word=word,
        )

    if placement.length != len(word):
        raise PlacementError(
            f"The coordinates for \"{word}\" produce a length of {placement.length}, "
            f"but the word's length is {len(word)}.",
            word=word,
        )


def validate(candidate: Puzzle, expected_size: int) -> Puzzle:
    """
    Validate a candidate puzzle and return a corrected copy.

    Raises ShapeError, PlacementError or IntersectionError on the first
    structural problem found. Grid letters that do not match a placement's
    word are overwritten with the word's uppercase letter.
    """
    validate_shape(candidate.grid, expected_size)

    grid = copy_grid(candidate.grid)
    # (row, col) -> (word, expected letter)
    occupied: Dict[Cell, Tuple[str, str]] = {}
    repairs = 0

    for placement in candidate.solution:
        validate_placement(placement, candidate.words_used, expected_size)

        for (row, col), letter in zip(walk_cells(placement), placement.word):
            if (row, col) in occupied:
                other_word, _ = occupied[(row, col)]
                raise IntersectionError(placement.word, other_word, row, col)

            # Some letters (e.g. "ß") uppercase to two characters; keep those as-is
            expected = letter.upper() if len(letter.upper()) == 1 else letter
            occupied[(row, col)] = (placement.word, expected)

            if grid[row][col].casefold() != letter.casefold():
                logger.debug(
                    "Repairing (%d, %d) for %s: %r -> %r",
                    row, col, placement.word, grid[row][col], expected,
                )
                grid[row][col] = expected
                repairs += 1

    if repairs:
        logger.info("Repaired %d grid cell(s) to match the declared solution", repairs)

    return candidate.model_copy(update={
        "grid": grid,
        "solution": list(candidate.solution),
        "words_used": list(candidate.words_used),
    })
