"""
Main entry point for generating word search puzzles.

Usage:
    python -m wordsearch.main --words CAT DOG BIRD --size 10
    python -m wordsearch.main config.yaml --output results/puzzle.json --html results/puzzle.html --verbose
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError, ExhaustedRetriesError
from .generation import GeneratorConfig, PuzzleRequest, WordSearchGenerator
from .utils import configure_logging
from .verifiers import Direction, render_grid


def load_config(config_path: str) -> Dict[str, Any]:
    """Load generator settings and puzzle defaults from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return data


def parse_direction(value: str) -> Direction:
    """Parse a direction name such as 'left-to-right' or 'DIAGONAL_DOWN_RIGHT'."""
    name = value.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return Direction[name]
    except KeyError:
        choices = ", ".join(d.name.lower().replace("_", "-") for d in Direction)
        raise argparse.ArgumentTypeError(f"unknown direction '{value}' (choose from {choices})")


def read_words_file(path: str) -> List[str]:
    """Read one word per line, skipping blank lines."""
    with open(path) as f:
        return [line.strip() for line in f if line.strip()]


def build_config(args: argparse.Namespace, data: Dict[str, Any]) -> GeneratorConfig:
    """Merge YAML settings with command-line overrides."""
    settings = {k: v for k, v in data.items() if k != "puzzle"}
    if args.model:
        settings["model"] = args.model
    if args.max_attempts is not None:
        settings["max_attempts"] = args.max_attempts
    if args.temperature is not None:
        settings["temperature"] = args.temperature
    return GeneratorConfig(**settings)


def build_request(args: argparse.Namespace, data: Dict[str, Any]) -> PuzzleRequest:
    """Merge the YAML puzzle section with command-line overrides."""
    puzzle: Dict[str, Any] = dict(data.get("puzzle") or {})
    if args.words_file:
        puzzle["words"] = read_words_file(args.words_file)
    if args.words:
        puzzle["words"] = args.words
    if args.size is not None:
        puzzle["size"] = args.size
    if args.direction:
        puzzle["directions"] = args.direction
    elif "directions" in puzzle:
        puzzle["directions"] = [parse_direction(d) for d in puzzle["directions"]]
    return PuzzleRequest(**puzzle)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a word search puzzle with a language model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  model: gemini/gemini-2.5-flash
  temperature: 0.7
  max_attempts: 3
  puzzle:
    size: 12
    words: [PYTHON, PYDANTIC, LITELLM, GRID]
    directions: [left-to-right, top-to-bottom, diagonal-down-right]
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument("--words", nargs="+", help="Words to embed")
    parser.add_argument("--words-file", help="File with one word per line")
    parser.add_argument("--size", type=int, help="Grid side length (5-30)")
    parser.add_argument(
        "--direction", "-d",
        action="append",
        type=parse_direction,
        help="Permitted direction, repeatable (default: left-to-right, top-to-bottom, diagonal-down-right)"
    )
    parser.add_argument("--model", help="LiteLLM model name")
    parser.add_argument("--temperature", type=float, help="Sampling temperature")
    parser.add_argument("--max-attempts", type=int, help="Number of generation attempts")
    parser.add_argument(
        "--show-solution",
        action="store_true",
        help="Print the solution overlay after the puzzle"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save result JSON (default: results/<timestamp>.json)"
    )
    parser.add_argument("--html", help="Also export the puzzle as an HTML page")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each attempt"
    )

    args = parser.parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        data = load_config(args.config) if args.config else {}
        config = build_config(args, data)
        request = build_request(args, data)
    except (OSError, ValueError, ValidationError, argparse.ArgumentTypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"wordsearch_{timestamp}.json"

    generator = WordSearchGenerator.create(config=config)

    try:
        puzzle = generator.generate(request.words, request.size, request.directions)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except ExhaustedRetriesError as e:
        print(f"Error: {e}", file=sys.stderr)
        generator.save_result(output_path)
        return 1

    generator.save_result(output_path)

    print(render_grid(puzzle))
    print()
    print("Words: " + ", ".join(puzzle.words_used))
    missing = [w for w in request.words if w not in puzzle.words_used]
    if missing:
        print("Not placed: " + ", ".join(missing))

    if args.show_solution:
        print()
        print("=== Solution ===")
        print(render_grid(puzzle, show_solution=True))

    if args.html:
        from .visualizer import generate_html
        html_path = generate_html(
            puzzle,
            args.html,
            show_solution=args.show_solution,
            title=f"Word Search ({request.size}x{request.size})",
        )
        print(f"HTML exported: {html_path}")

    result = generator.get_result()
    print()
    print(f"Attempts: {len(result.attempts)}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    print(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
