"""Unit tests for the built-in solution codecs."""

from pathlib import Path

import pytest
from pydantic import BaseModel
from structlog.testing import capture_logs

from problem_bench.persistence.codecs import JsonProblemIO, YamlProblemIO
from problem_bench.persistence.exceptions import ProblemIOError


class CodecQueens(BaseModel):
    n: int
    rows: list[int] = []


class TestYamlProblemIO:
    """Tests for YamlProblemIO."""

    def test_file_extension(self) -> None:
        assert YamlProblemIO().file_extension == "yaml"

    def test_tagged_solution_is_validated(self, tmp_path: Path) -> None:
        path = tmp_path / "queens.yaml"
        problem_io = YamlProblemIO((CodecQueens,))
        problem_io.write_solution(CodecQueens(n=4, rows=[1, 3, 0, 2]), path)

        assert path.read_text(encoding="utf-8").startswith("type: CodecQueens")
        solution = problem_io.read_solution(path)
        assert solution == CodecQueens(n=4, rows=[1, 3, 0, 2])

    def test_untagged_document_returned_as_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.yaml"
        path.write_text("n: 8\n", encoding="utf-8")
        assert YamlProblemIO((CodecQueens,)).read_solution(path) == {"n": 8}

    def test_unknown_class_model_written_untagged(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.yaml"
        YamlProblemIO().write_solution(CodecQueens(n=4), path)
        assert YamlProblemIO().read_solution(path) == {"n": 4, "rows": []}

    def test_invalid_tagged_document(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("type: CodecQueens\nn: many\n", encoding="utf-8")
        with pytest.raises(ProblemIOError, match="Invalid CodecQueens solution"):
            YamlProblemIO((CodecQueens,)).read_solution(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProblemIOError, match="Failed to read"):
            YamlProblemIO().read_solution(tmp_path / "missing.yaml")


class TestJsonProblemIO:
    """Tests for JsonProblemIO."""

    def test_file_extension(self) -> None:
        assert JsonProblemIO().file_extension == "json"

    def test_reads_plain_json(self, tmp_path: Path) -> None:
        path = tmp_path / "queens.json"
        path.write_text('{"n": 16}', encoding="utf-8")
        assert JsonProblemIO().read_solution(path) == {"n": 16}

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ProblemIOError, match="Failed to parse JSON"):
            JsonProblemIO().read_solution(path)

    def test_read_and_write_are_logged(self, tmp_path: Path) -> None:
        path = tmp_path / "queens.json"
        problem_io = JsonProblemIO((CodecQueens,))
        with capture_logs() as logs:
            problem_io.write_solution(CodecQueens(n=4), path)
            problem_io.read_solution(path)

        events = [(log["event"], log["codec"]) for log in logs]
        assert events == [("solution_written", "json"), ("solution_read", "json")]
