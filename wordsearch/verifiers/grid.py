"""Grid walking and rendering utilities."""

from typing import Dict, Iterator, List, Tuple

from .models import Placement, Puzzle


Cell = Tuple[int, int]

HIDDEN_CELL = "."


def walk_cells(placement: Placement) -> Iterator[Cell]:
    """Yield each (row, col) of a placement from start to end using its unit step."""
    d_row, d_col = placement.step
    row, col = placement.start
    for _ in range(placement.length):
        yield row, col
        row += d_row
        col += d_col


def copy_grid(grid: List[List[str]]) -> List[List[str]]:
    """Return a row-by-row copy of the grid."""
    return [list(row) for row in grid]


def solution_cells(puzzle: Puzzle) -> Dict[Cell, int]:
    """Map every cell covered by the solution to the index of its placement."""
    cells: Dict[Cell, int] = {}
    for index, placement in enumerate(puzzle.solution):
        for cell in walk_cells(placement):
            cells[cell] = index
    return cells


def read_word(grid: List[List[str]], placement: Placement) -> str:
    """Read the letters the grid currently holds along a placement."""
    return "".join(grid[row][col] for row, col in walk_cells(placement))


def render_grid(puzzle: Puzzle, show_solution: bool = False) -> str:
    """
    Render the grid as space-separated rows.

    With ``show_solution`` every cell outside a placed word is hidden so only
    the solution letters remain visible.
    """
    if not puzzle.grid:
        return ""

    highlighted = solution_cells(puzzle) if show_solution else {}

    lines = []
    for r, row in enumerate(puzzle.grid):
        letters = []
        for c, letter in enumerate(row):
            if show_solution and (r, c) not in highlighted:
                letters.append(HIDDEN_CELL)
            else:
                letters.append(letter.upper())
        lines.append(" ".join(letters))

    return "\n".join(lines)
