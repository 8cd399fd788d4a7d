"""Generate self-contained HTML pages from puzzles and saved results."""

import html
import json
from pathlib import Path
from typing import Optional

from ..verifiers.grid import solution_cells
from ..verifiers.models import Puzzle


COLOR_PALETTE = [
    "#fef08a", "#d9f99d", "#bbf7d0", "#a7f3d0", "#99f6e4",
    "#a5f3fc", "#bae6fd", "#bfdbfe", "#c7d2fe", "#ddd6fe",
    "#e9d5ff", "#f5d0fe", "#fbcfe8", "#fecdd3",
]

TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
body { font-family: sans-serif; color: #1e293b; margin: 2rem; }
table.grid { border-collapse: collapse; }
table.grid td { width: {{ cell_size }}; height: {{ cell_size }}; text-align: center;
  border: 1px solid #e2e8f0; font-weight: bold; text-transform: uppercase; }
ul.words { columns: 3; list-style: none; padding: 0; }
</style>
</head>
<body>
<h1>{{ title }}</h1>
<table class="grid" aria-label="Word search puzzle grid">
{{ grid_rows }}
</table>
<h2>Words</h2>
<ul class="words">
{{ word_items }}
</ul>
</body>
</html>
"""


def _cell_size(size: int) -> str:
    if size > 20:
        return "1.4rem"
    if size > 15:
        return "1.8rem"
    return "2.2rem"


def render_html(puzzle: Puzzle, show_solution: bool = False, title: str = "Word Search") -> str:
    """
    Render a puzzle to a self-contained HTML page.

    When show_solution is set, the cells of each placed word are tinted with
    a colour from COLOR_PALETTE, cycling by placement index.
    """
    highlighted = solution_cells(puzzle) if show_solution else {}

    rows = []
    for r, row in enumerate(puzzle.grid):
        cells = []
        for c, letter in enumerate(row):
            index = highlighted.get((r, c))
            style = ""
            if index is not None:
                style = f' style="background:{COLOR_PALETTE[index % len(COLOR_PALETTE)]}"'
            cells.append(f"<td{style}>{html.escape(letter)}</td>")
        rows.append("<tr>" + "".join(cells) + "</tr>")

    word_items = "\n".join(f"<li>{html.escape(word)}</li>" for word in puzzle.words_used)

    page = TEMPLATE.replace("{{ title }}", html.escape(title))
    page = page.replace("{{ cell_size }}", _cell_size(puzzle.size))
    page = page.replace("{{ grid_rows }}", "\n".join(rows))
    page = page.replace("{{ word_items }}", word_items)
    return page


def generate_html(
    puzzle: Puzzle,
    output_path: str | Path,
    show_solution: bool = False,
    title: str = "Word Search",
) -> Path:
    """Write a puzzle as an HTML page and return the output path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(render_html(puzzle, show_solution=show_solution, title=title))
    return output_path


def generate_visualizer(
    results_path: str | Path,
    output_path: Optional[str | Path] = None,
    show_solution: bool = True,
) -> Path:
    """
    Generate a self-contained HTML page from a saved generation result.

    Args:
        results_path: Path to the results JSON file
        output_path: Output path for HTML (defaults to same name with .html)
        show_solution: Tint the cells of each placed word

    Returns:
        Path to the generated HTML file
    """
    results_path = Path(results_path)

    if output_path is None:
        output_path = results_path.with_suffix(".html")

    with open(results_path) as f:
        data = json.load(f)

    if not data.get("puzzle"):
        raise ValueError(f"No puzzle in results file: {data.get('error') or 'generation failed'}")

    puzzle = Puzzle.model_validate(data["puzzle"])
    size = data.get("request", {}).get("size", puzzle.size)

    return generate_html(
        puzzle,
        output_path,
        show_solution=show_solution,
        title=f"Word Search ({size}x{size})",
    )
