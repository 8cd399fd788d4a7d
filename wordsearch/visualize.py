"""
Standalone CLI for exporting saved puzzles to HTML.

Usage:
    python -m wordsearch.visualize results/puzzle.json
    python -m wordsearch.visualize results/puzzle.json --output puzzle.html --hide-solution
"""

import argparse
import sys
from pathlib import Path

from .visualizer import generate_visualizer


def main():
    parser = argparse.ArgumentParser(
        description="Generate an HTML page from a saved word search result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordsearch.visualize results/puzzle.json
  python -m wordsearch.visualize results/puzzle.json --output printable.html --hide-solution
        """
    )
    parser.add_argument(
        "results",
        help="Path to the results JSON file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output path for HTML file (default: same as input with .html extension)"
    )
    parser.add_argument(
        "--hide-solution",
        action="store_true",
        help="Leave the placed words unhighlighted"
    )

    args = parser.parse_args()

    results_path = Path(args.results)
    if not results_path.exists():
        print(f"Error: Results file not found: {args.results}", file=sys.stderr)
        sys.exit(1)

    if not results_path.suffix == ".json":
        print("Warning: Input file doesn't have .json extension", file=sys.stderr)

    try:
        output_path = generate_visualizer(
            results_path,
            args.output,
            show_solution=not args.hide_solution,
        )
        print(f"Visualizer generated: {output_path}")
    except Exception as e:
        print(f"Error generating visualizer: {e}", file=sys.stderr)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    sys.exit(main())
