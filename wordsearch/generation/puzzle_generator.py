import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Any, Sequence
from pydantic import BaseModel, Field, ConfigDict

from ..errors import ExhaustedRetriesError, ParseError, TransportError
from ..verifiers import parse_puzzle, validate
from ..verifiers.models import Direction, Puzzle
from .llm_client import LLMClient
from .models import AttemptResult, GenerationResult, GeneratorConfig, PuzzleRequest
from .prompts import SYSTEM_PROMPT, build_puzzle_prompt, build_response_format


logger = logging.getLogger(__name__)


class WordSearchGenerator(BaseModel):
    """
    Top-level orchestrator for word search generation.

    Formulates the request, calls the model, parses and validates the
    response, and retries up to ``config.max_attempts`` times.

    Attributes:
        config: Model and retry configuration
        llm_client: LLM client used for every attempt
        request: The request of the current or last run
        attempts: History of attempts for the current or last run
        puzzle: The validated puzzle, once an attempt succeeds
        last_error: The exception raised by the most recent failed attempt
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
    llm_client: Optional[LLMClient] = None
    request: Optional[PuzzleRequest] = None
    attempts: List[AttemptResult] = Field(default_factory=list)
    puzzle: Optional[Puzzle] = None
    last_error: Optional[Exception] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[GeneratorConfig] = None,
        **config_kwargs: Any
    ) -> "WordSearchGenerator":
        """
        Factory method to create a generator with a configured LLM client.

        Args:
            config: Optional GeneratorConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured WordSearchGenerator instance
        """
        if config is None:
            config = GeneratorConfig(**config_kwargs)

        llm_kwargs = {}
        # Extra config keys (api_key, api_base, ...) go straight to LiteLLM
        if config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)

        llm_client = LLMClient(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **llm_kwargs
        )

        return cls(config=config, llm_client=llm_client)

    def setup(self, request: PuzzleRequest) -> None:
        """Reset run state for a new request."""
        self.request = request
        self.attempts = []
        self.puzzle = None
        self.last_error = None
        self.started_at = datetime.now()
        self.ended_at = None

    def request_candidate(self, prompt: str, record: AttemptResult) -> str:
        """
        Send one generation request and return the raw response text.

        Raises:
            TransportError: If the model call fails
            ParseError: If the response carries no message content
        """
        if self.llm_client is None:
            raise ValueError("Generator has no LLM client")

        self.llm_client.clear_messages()
        self.llm_client.add_message("system", SYSTEM_PROMPT)
        self.llm_client.add_message("user", prompt)

        try:
            response = self.llm_client.completion(response_format=build_response_format())
        except Exception as e:
            raise TransportError(f"LLM error: {e}") from e

        usage = getattr(response, "usage", None)
        if usage:
            record.prompt_tokens = getattr(usage, "prompt_tokens", None)
            record.completion_tokens = getattr(usage, "completion_tokens", None)
            record.total_tokens = getattr(usage, "total_tokens", None)

        try:
            raw_response = response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            raise ParseError(f"LLM response has no message content: {e}") from e

        record.raw_response = raw_response
        return raw_response

    def step(self, prompt: str, record: AttemptResult) -> Puzzle:
        """Run one attempt: call the model, parse the response and validate it."""
        raw_response = self.request_candidate(prompt, record)
        candidate = parse_puzzle(raw_response)
        return validate(candidate, self.request.size)

    def generate(
        self,
        words: Sequence[str],
        size: int,
        directions: Optional[Sequence[Direction]] = None,
    ) -> Puzzle:
        """
        Generate a validated word search puzzle.

        Args:
            words: Words to embed
            size: Grid side length (5 to 30)
            directions: Permitted directions (defaults to left-to-right,
                top-to-bottom and diagonal down-right)

        Returns:
            The corrected Puzzle from the first attempt that validates

        Raises:
            pydantic.ValidationError: If the request itself is invalid
            ConfigurationError: If provider credentials are missing
            ExhaustedRetriesError: If every attempt failed
        """
        request_kwargs: dict = {"words": list(words), "size": size}
        if directions is not None:
            request_kwargs["directions"] = list(directions)
        request = PuzzleRequest(**request_kwargs)

        if self.llm_client is None:
            raise ValueError("Generator has no LLM client. Use WordSearchGenerator.create().")
        self.llm_client.check_environment()

        self.setup(request)
        prompt = build_puzzle_prompt(request.words, request.size, request.directions)
        max_attempts = self.config.max_attempts

        for attempt in range(1, max_attempts + 1):
            record = AttemptResult(attempt=attempt)
            logger.info("Generation attempt %d/%d with %s", attempt, max_attempts, self.config.model)

            try:
                puzzle = self.step(prompt, record)
            except Exception as e:
                self.last_error = e
                record.error_type = type(e).__name__
                record.error = str(e)
                self.attempts.append(record)
                logger.warning("Attempt %d failed: %s: %s", attempt, record.error_type, record.error)
                continue

            record.succeeded = True
            self.attempts.append(record)
            self.puzzle = puzzle
            self.ended_at = datetime.now()
            logger.info(
                "Attempt %d produced a valid %dx%d puzzle with %d word(s)",
                attempt, request.size, request.size, len(puzzle.solution),
            )
            return puzzle

        self.ended_at = datetime.now()
        logger.error("All %d generation attempts failed. Last error: %s", max_attempts, self.last_error)
        raise ExhaustedRetriesError(max_attempts, self.last_error) from self.last_error

    def get_result(self) -> GenerationResult:
        """
        Get the result of the current or last run.

        Returns:
            GenerationResult containing the request, puzzle and attempt history
        """
        if self.request is None:
            raise ValueError("No generation has been run yet")

        ended_at = self.ended_at or datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        total_prompt_tokens = 0
        total_completion_tokens = 0
        total_tokens = 0

        for attempt in self.attempts:
            if attempt.prompt_tokens:
                total_prompt_tokens += attempt.prompt_tokens
            if attempt.completion_tokens:
                total_completion_tokens += attempt.completion_tokens
            if attempt.total_tokens:
                total_tokens += attempt.total_tokens

        error = None
        if self.puzzle is None and self.last_error is not None:
            error = str(ExhaustedRetriesError(len(self.attempts), self.last_error))

        return GenerationResult(
            request=self.request,
            config=self.config,
            puzzle=self.puzzle,
            attempts=self.attempts,
            error=error,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
            total_prompt_tokens=total_prompt_tokens,
            total_completion_tokens=total_completion_tokens,
            total_tokens=total_tokens,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the generation result to a JSON file.

        Args:
            path: Path to save the result file
        """
        data = self.get_result().model_dump(mode="json", by_alias=True)
        # Never write credentials to disk
        data["config"].pop("api_key", None)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(data, f, indent=2, default=str)


def generate_word_search(
    words: Sequence[str],
    size: int,
    directions: Optional[Sequence[Direction]] = None,
    config: Optional[GeneratorConfig] = None,
) -> Puzzle:
    """Generate a puzzle with a fresh generator. See WordSearchGenerator.generate."""
    generator = WordSearchGenerator.create(config=config)
    return generator.generate(words, size, directions)
