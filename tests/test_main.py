"""Test the command-line entry points."""

import json
import logging
import sys
from unittest.mock import Mock, patch

import pytest

from wordsearch import main as cli
from wordsearch import visualize
from wordsearch.verifiers import Direction


KEYS_PRESENT = {"keys_in_environment": True, "missing_keys": []}


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def create_mock_response(content: str) -> Mock:
    return Mock(
        choices=[Mock(message=Mock(content=content, role='assistant'))],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15),
    )


def puzzle_json(rows=5):
    grid = [["Q"] * 5 for _ in range(rows)]
    solution = [{"word": "CAT", "startRow": 2, "startCol": 1, "endRow": 2, "endCol": 3}]
    return json.dumps({"grid": grid, "solution": solution, "wordsUsed": ["CAT"]})


class TestParseDirection:
    @pytest.mark.parametrize("value, expected", [
        ("left-to-right", Direction.LEFT_TO_RIGHT),
        ("DIAGONAL_UP_LEFT", Direction.DIAGONAL_UP_LEFT),
        ("bottom to top", Direction.BOTTOM_TO_TOP),
    ])
    def test_valid(self, value, expected):
        assert cli.parse_direction(value) == expected

    def test_unknown(self):
        with pytest.raises(Exception) as exc_info:
            cli.parse_direction("sideways")
        assert "sideways" in str(exc_info.value)


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.load_config(str(tmp_path / "nope.yaml"))

    def test_yaml_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("model: gpt-4o-mini\nmax_attempts: 2\npuzzle:\n  size: 6\n  words: [CAT]\n")

        data = cli.load_config(str(path))

        assert data["model"] == "gpt-4o-mini"
        assert data["puzzle"]["words"] == ["CAT"]


class TestMain:
    @patch('litellm.completion')
    @patch('litellm.validate_environment', return_value=KEYS_PRESENT)
    def test_generates_and_saves(self, mock_validate, mock_completion, tmp_path, capsys):
        mock_completion.return_value = create_mock_response(puzzle_json())
        output = tmp_path / "result.json"
        html = tmp_path / "puzzle.html"

        code = cli.main([
            "--words", "CAT", "DOG", "--size", "5",
            "--model", "gpt-4o-mini",
            "--direction", "left-to-right",
            "--show-solution",
            "--output", str(output), "--html", str(html),
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert "Q C A T Q" in out
        assert ". C A T ." in out
        assert "Not placed: DOG" in out
        assert json.loads(output.read_text())["puzzle"]["wordsUsed"] == ["CAT"]
        assert html.exists()

    @patch('litellm.completion')
    def test_config_file_with_overrides(self, mock_completion, tmp_path):
        mock_completion.return_value = create_mock_response(puzzle_json())
        config = tmp_path / "config.yaml"
        config.write_text(
            "model: gpt-4o-mini\n"
            "api_key: sk-test\n"
            "puzzle:\n"
            "  size: 9\n"
            "  words: [CAT]\n"
            "  directions: [top-to-bottom]\n"
        )

        code = cli.main([str(config), "--size", "5", "--output", str(tmp_path / "r.json")])

        assert code == 0
        prompt = mock_completion.call_args[1]["messages"][1]["content"]
        assert "exactly 5x5" in prompt
        assert "Top to bottom" in prompt

    @patch('litellm.completion')
    @patch('litellm.validate_environment', return_value=KEYS_PRESENT)
    def test_exhausted_retries_exit_code(self, mock_validate, mock_completion, tmp_path, capsys):
        mock_completion.return_value = create_mock_response(puzzle_json(rows=4))
        output = tmp_path / "failed.json"

        code = cli.main([
            "--words", "CAT", "--size", "5", "--model", "gpt-4o-mini",
            "--max-attempts", "2", "--output", str(output),
        ])

        assert code == 1
        assert mock_completion.call_count == 2
        assert "after 2 attempts" in capsys.readouterr().err
        assert json.loads(output.read_text())["puzzle"] is None

    @patch('litellm.completion')
    @patch('litellm.validate_environment')
    def test_missing_credentials_exit_code(self, mock_validate, mock_completion, tmp_path, capsys):
        mock_validate.return_value = {"keys_in_environment": False, "missing_keys": ["GEMINI_API_KEY"]}

        code = cli.main(["--words", "CAT", "--size", "5", "--output", str(tmp_path / "r.json")])

        assert code == 1
        assert "GEMINI_API_KEY" in capsys.readouterr().err
        mock_completion.assert_not_called()

    def test_invalid_size_exit_code(self, capsys):
        code = cli.main(["--words", "CAT", "--size", "40"])
        assert code == 1
        assert "Error loading config" in capsys.readouterr().err


class TestVisualizeCli:
    def test_writes_html(self, tmp_path, capsys):
        results = tmp_path / "result.json"
        results.write_text(json.dumps({"request": {"size": 5}, "puzzle": json.loads(puzzle_json())}))

        with patch.object(sys, "argv", ["visualize", str(results), "--hide-solution"]):
            assert visualize.main() == 0

        assert (tmp_path / "result.html").exists()
        assert "Visualizer generated" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        with patch.object(sys, "argv", ["visualize", str(tmp_path / "missing.json")]):
            with pytest.raises(SystemExit):
                visualize.main()
