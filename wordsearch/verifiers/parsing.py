"""Response parsing utilities."""

import json
import re
from typing import Any, Dict

from pydantic import ValidationError

from ..errors import ParseError
from .models import Puzzle


REQUIRED_KEYS = ("grid", "solution", "wordsUsed")


def extract_json_content(response: str) -> str:
    """Extract content from a ```json fenced block, or return the stripped text."""
    match = re.search(r'```(?:json)?\s*(.*?)```', response, re.DOTALL | re.IGNORECASE)
    if match:
        return match.group(1).strip()
    return response.strip()


def parse_payload(payload: Any) -> Puzzle:
    """Build a Puzzle from an already-decoded JSON payload."""
    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")

    missing = [key for key in REQUIRED_KEYS if payload.get(key) is None]
    if missing:
        raise ParseError(
            f"Invalid puzzle data structure received from API: missing {', '.join(missing)}"
        )

    try:
        return Puzzle.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"Puzzle payload does not match the schema: {exc}") from exc


def parse_puzzle(response: str) -> Puzzle:
    """
    Parse a raw model response into a Puzzle.

    Accepts bare JSON or JSON wrapped in a markdown code fence.
    Raises ParseError if the text is not a JSON object with grid, solution and wordsUsed.
    """
    content = extract_json_content(response or "")
    if not content:
        raise ParseError("Model response is empty")

    try:
        payload: Dict[str, Any] = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Model response is not valid JSON: {exc}") from exc

    return parse_payload(payload)
