"""Data models for puzzle verification."""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Direction(str, Enum):
    """The eight straight-line directions a word can run in."""

    LEFT_TO_RIGHT = "LEFT_TO_RIGHT"
    RIGHT_TO_LEFT = "RIGHT_TO_LEFT"
    TOP_TO_BOTTOM = "TOP_TO_BOTTOM"
    BOTTOM_TO_TOP = "BOTTOM_TO_TOP"
    DIAGONAL_DOWN_RIGHT = "DIAGONAL_DOWN_RIGHT"
    DIAGONAL_DOWN_LEFT = "DIAGONAL_DOWN_LEFT"
    DIAGONAL_UP_RIGHT = "DIAGONAL_UP_RIGHT"
    DIAGONAL_UP_LEFT = "DIAGONAL_UP_LEFT"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit (row, col) step taken between consecutive letters."""
        return _STEPS[self]

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and the CLI."""
        return _LABELS[self]

    @classmethod
    def from_step(cls, d_row: int, d_col: int) -> Optional["Direction"]:
        """Return the direction for a unit step, or None for (0, 0)."""
        for direction, step in _STEPS.items():
            if step == (d_row, d_col):
                return direction
        return None


_STEPS = {
    Direction.LEFT_TO_RIGHT: (0, 1),
    Direction.RIGHT_TO_LEFT: (0, -1),
    Direction.TOP_TO_BOTTOM: (1, 0),
    Direction.BOTTOM_TO_TOP: (-1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
    Direction.DIAGONAL_UP_RIGHT: (-1, 1),
    Direction.DIAGONAL_UP_LEFT: (-1, -1),
}

_LABELS = {
    Direction.LEFT_TO_RIGHT: "Left to right",
    Direction.RIGHT_TO_LEFT: "Right to left",
    Direction.TOP_TO_BOTTOM: "Top to bottom",
    Direction.BOTTOM_TO_TOP: "Bottom to top",
    Direction.DIAGONAL_DOWN_RIGHT: "Diagonal left to right (downwards)",
    Direction.DIAGONAL_DOWN_LEFT: "Diagonal right to left (downwards)",
    Direction.DIAGONAL_UP_RIGHT: "Diagonal left to right (upwards)",
    Direction.DIAGONAL_UP_LEFT: "Diagonal right to left (upwards)",
}

DEFAULT_DIRECTIONS: List[Direction] = [
    Direction.LEFT_TO_RIGHT,
    Direction.TOP_TO_BOTTOM,
    Direction.DIAGONAL_DOWN_RIGHT,
]


class Placement(BaseModel):
    """Represents a word's declared start and end cell in the grid."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: str
    start_row: int = Field(..., alias="startRow")
    start_col: int = Field(..., alias="startCol")
    end_row: int = Field(..., alias="endRow")
    end_col: int = Field(..., alias="endCol")

    @property
    def start(self) -> Tuple[int, int]:
        return (self.start_row, self.start_col)

    @property
    def end(self) -> Tuple[int, int]:
        return (self.end_row, self.end_col)

    @property
    def length(self) -> int:
        """Number of cells spanned (Chebyshev distance plus one)."""
        return max(abs(self.end_row - self.start_row), abs(self.end_col - self.start_col)) + 1

    @property
    def step(self) -> Tuple[int, int]:
        return (_sign(self.end_row - self.start_row), _sign(self.end_col - self.start_col))

    @property
    def is_straight(self) -> bool:
        """True for horizontal, vertical and 45 degree diagonal lines."""
        d_row = abs(self.end_row - self.start_row)
        d_col = abs(self.end_col - self.start_col)
        return d_row == 0 or d_col == 0 or d_row == d_col

    @property
    def direction(self) -> Optional[Direction]:
        if not self.is_straight:
            return None
        return Direction.from_step(*self.step)


class Puzzle(BaseModel):
    """A word search grid together with its declared solution."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    grid: List[List[str]]
    solution: List[Placement] = Field(default_factory=list)
    words_used: List[str] = Field(default_factory=list, alias="wordsUsed")

    @property
    def size(self) -> int:
        return len(self.grid)

    def to_payload(self) -> dict:
        """Dump using the camelCase wire names."""
        return self.model_dump(by_alias=True)
