"""Test grid walking, text rendering and HTML export."""

import json

import pytest

from wordsearch.verifiers import Direction, Placement, Puzzle, render_grid, solution_cells, walk_cells
from wordsearch.visualizer import generate_html, generate_visualizer, render_html
from wordsearch.visualizer.generator import COLOR_PALETTE


def sample_puzzle():
    grid = [list(row) for row in ["QCATQ", "QQQQQ", "DQQQQ", "OQQQQ", "GQQQQ"]]
    return Puzzle(
        grid=grid,
        solution=[
            Placement(word="CAT", start_row=0, start_col=1, end_row=0, end_col=3),
            Placement(word="DOG", start_row=2, start_col=0, end_row=4, end_col=0),
        ],
        words_used=["CAT", "DOG"],
    )


class TestWalkCells:
    """Test the unit-step walk shared by validation and overlays."""

    def test_horizontal(self):
        placement = Placement(word="CAT", start_row=1, start_col=1, end_row=1, end_col=3)
        assert list(walk_cells(placement)) == [(1, 1), (1, 2), (1, 3)]

    def test_reverse_vertical(self):
        placement = Placement(word="CAT", start_row=4, start_col=2, end_row=2, end_col=2)
        assert list(walk_cells(placement)) == [(4, 2), (3, 2), (2, 2)]

    def test_diagonal_up_left(self):
        placement = Placement(word="BIRD", start_row=4, start_col=4, end_row=1, end_col=1)
        assert list(walk_cells(placement)) == [(4, 4), (3, 3), (2, 2), (1, 1)]
        assert placement.direction == Direction.DIAGONAL_UP_LEFT

    def test_single_letter(self):
        placement = Placement(word="A", start_row=2, start_col=3, end_row=2, end_col=3)
        assert list(walk_cells(placement)) == [(2, 3)]
        assert placement.direction is None

    def test_accepts_wire_names(self):
        placement = Placement.model_validate(
            {"word": "CAT", "startRow": 1, "startCol": 3, "endRow": 1, "endCol": 1}
        )
        assert placement.direction == Direction.RIGHT_TO_LEFT
        assert placement.length == 3


class TestSolutionCells:
    def test_maps_cells_to_placement_index(self):
        cells = solution_cells(sample_puzzle())
        assert cells[(0, 1)] == 0
        assert cells[(0, 3)] == 0
        assert cells[(3, 0)] == 1
        assert (1, 1) not in cells
        assert len(cells) == 6


class TestRenderGrid:
    def test_plain(self):
        lines = render_grid(sample_puzzle()).split("\n")
        assert lines[0] == "Q C A T Q"
        assert len(lines) == 5

    def test_uppercases_letters(self):
        puzzle = Puzzle(grid=[["a", "b"], ["c", "d"]])
        assert render_grid(puzzle) == "A B\nC D"

    def test_solution_hides_filler(self):
        lines = render_grid(sample_puzzle(), show_solution=True).split("\n")
        assert lines[0] == ". C A T ."
        assert lines[1] == ". . . . ."
        assert lines[2] == "D . . . ."

    def test_empty_grid(self):
        assert render_grid(Puzzle(grid=[])) == ""


class TestHtmlExport:
    def test_plain_page_has_no_highlight(self):
        page = render_html(sample_puzzle())
        assert "<td>C</td>" in page
        assert "background" not in page
        assert "<li>DOG</li>" in page

    def test_solution_page_tints_each_word(self):
        page = render_html(sample_puzzle(), show_solution=True)
        assert f'<td style="background:{COLOR_PALETTE[0]}">C</td>' in page
        assert f'<td style="background:{COLOR_PALETTE[1]}">D</td>' in page

    def test_title_is_escaped(self):
        page = render_html(sample_puzzle(), title="<Fun & Games>")
        assert "&lt;Fun &amp; Games&gt;" in page

    def test_generate_html_writes_file(self, tmp_path):
        path = generate_html(sample_puzzle(), tmp_path / "out" / "puzzle.html")
        assert path.exists()
        assert path.read_text().startswith("<!DOCTYPE html>")


class TestGenerateVisualizer:
    def test_from_saved_result(self, tmp_path):
        results = tmp_path / "result.json"
        results.write_text(json.dumps({
            "request": {"words": ["CAT", "DOG"], "size": 5},
            "puzzle": sample_puzzle().to_payload(),
        }))

        path = generate_visualizer(results)

        assert path == tmp_path / "result.html"
        page = path.read_text()
        assert "Word Search (5x5)" in page
        assert COLOR_PALETTE[0] in page

    def test_failed_result_raises(self, tmp_path):
        results = tmp_path / "failed.json"
        results.write_text(json.dumps({"puzzle": None, "error": "gave up"}))

        with pytest.raises(ValueError) as exc_info:
            generate_visualizer(results)

        assert "gave up" in str(exc_info.value)
