"""
Pydantic models for the generation layer.

This module contains the data models (requests, configuration, attempt records
and results) used by the generation layer. The main logic classes (LLMClient,
WordSearchGenerator) remain in their respective files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..verifiers.models import Direction, DEFAULT_DIRECTIONS, Puzzle


# Type aliases
Role = Literal["system", "user", "assistant"]

MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 30
DEFAULT_MAX_ATTEMPTS = 3


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class PuzzleRequest(BaseModel):
    """What the caller asked for: words, grid size and permitted directions."""
    words: List[str]
    size: int = Field(15, ge=MIN_GRID_SIZE, le=MAX_GRID_SIZE)
    directions: List[Direction] = Field(default_factory=lambda: list(DEFAULT_DIRECTIONS))

    @field_validator("words")
    @classmethod
    def _clean_words(cls, words: List[str]) -> List[str]:
        cleaned = [w.strip() for w in words if w.strip()]
        if not cleaned:
            raise ValueError("at least one non-empty word is required")
        return cleaned

    @field_validator("directions")
    @classmethod
    def _unique_directions(cls, directions: List[Direction]) -> List[Direction]:
        if not directions:
            raise ValueError("at least one direction is required")
        return list(dict.fromkeys(directions))


class GeneratorConfig(BaseModel):
    """Configuration for the model and the retry policy."""
    model_config = ConfigDict(extra='allow')

    model: str = "gemini/gemini-2.5-flash"
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    max_attempts: int = Field(DEFAULT_MAX_ATTEMPTS, ge=1)
    # Additional kwargs are allowed and passed to LiteLLM


class AttemptResult(BaseModel):
    """Result of a single generation attempt."""
    attempt: int
    succeeded: bool = False
    error_type: Optional[str] = None
    error: Optional[str] = None
    raw_response: str = ""
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class GenerationResult(BaseModel):
    """Result of a complete generation run."""
    request: PuzzleRequest
    config: GeneratorConfig
    puzzle: Optional[Puzzle] = None
    attempts: List[AttemptResult] = Field(default_factory=list)
    error: Optional[str] = None
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_tokens: int = 0
