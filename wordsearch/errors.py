"""Exception hierarchy for word search generation."""

from typing import Optional


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when provider credentials for the model are missing."""


class GenerationError(WordSearchError):
    """Base class for failures that are worth another attempt."""


class TransportError(GenerationError):
    """Raised when the call to the language model fails."""


class ParseError(GenerationError):
    """Raised when the model response is not a well-formed puzzle payload."""


class PuzzleValidationError(GenerationError):
    """Base class for puzzles that fail structural validation."""


class ShapeError(PuzzleValidationError):
    """Raised when the grid is not a square of single characters."""


class PlacementError(PuzzleValidationError):
    """Raised when a single word placement breaks a placement rule."""

    def __init__(self, message: str, word: Optional[str] = None):
        super().__init__(message)
        self.word = word


class IntersectionError(PuzzleValidationError):
    """Raised when two placed words claim the same grid cell."""

    def __init__(self, word: str, other_word: str, row: int, col: int):
        super().__init__(
            f"Words \"{word}\" and \"{other_word}\" intersect at grid position "
            f"(row {row + 1}, col {col + 1}). Words are not allowed to intersect."
        )
        self.word = word
        self.other_word = other_word
        self.row = row
        self.col = col


class ExhaustedRetriesError(WordSearchError):
    """Raised once every generation attempt has failed."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(
            f"The model failed to generate a valid puzzle after {attempts} attempts. "
            "This can happen if words are too long for the grid size. "
            "Please try using a larger grid or shorter words."
        )
        self.attempts = attempts
        self.last_error = last_error
