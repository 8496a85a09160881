"""Tests for reading scan input documents."""

import json

import pytest

from component_insight.decomposition.models import SourceFile
from component_insight.dependencies.models import FileDependency
from component_insight.exceptions import InvalidInputError
from component_insight.inputs import (
    AnalysisInput,
    coerce_dependencies,
    coerce_files,
    load_analysis_input,
)


class TestLoadAnalysisInput:
    def test_reads_document(self, tmp_path):
        path = tmp_path / "scan.json"
        path.write_text(
            json.dumps(
                {
                    "files": [
                        {"path": "a/x.py", "lines_of_code": 12},
                        {"path": "b/y.py", "lines_of_code": 3},
                    ],
                    "dependencies": [{"from": "a/x.py", "to": "b/y.py"}, ["b/y.py", "a/x.py"]],
                }
            )
        )
        analysis_input = load_analysis_input(path)

        assert analysis_input.files == (SourceFile("a/x.py", 12), SourceFile("b/y.py", 3))
        assert analysis_input.dependencies == (
            FileDependency("a/x.py", "b/y.py"),
            FileDependency("b/y.py", "a/x.py"),
        )
        assert analysis_input.file_lines == {"a/x.py": 12, "b/y.py": 3}

    def test_missing_sections_are_empty(self, tmp_path):
        path = tmp_path / "scan.json"
        path.write_text("{}")
        assert load_analysis_input(path) == AnalysisInput()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scan.json"
        path.write_text("{not json")
        with pytest.raises(InvalidInputError):
            load_analysis_input(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "scan.json"
        path.write_text("[]")
        with pytest.raises(InvalidInputError):
            load_analysis_input(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError):
            load_analysis_input(tmp_path / "absent.json")


class TestCoerce:
    def test_files_default_loc(self):
        assert coerce_files([{"path": "x.py"}]) == (SourceFile("x.py", 0),)

    def test_files_reject_duplicates(self):
        with pytest.raises(InvalidInputError):
            coerce_files([{"path": "x.py"}, SourceFile("x.py", 1)])

    def test_files_reject_negative_loc(self):
        with pytest.raises(InvalidInputError):
            coerce_files([{"path": "x.py", "lines_of_code": -1}])

    def test_files_reject_garbage(self):
        with pytest.raises(InvalidInputError):
            coerce_files(["x.py"])

    def test_dependencies_keep_duplicates(self):
        deps = coerce_dependencies([("a", "b"), ("a", "b")])
        assert deps == (FileDependency("a", "b"), FileDependency("a", "b"))

    def test_dependencies_reject_garbage(self):
        with pytest.raises(InvalidInputError):
            coerce_dependencies([{"from": "a"}])
        with pytest.raises(InvalidInputError):
            coerce_dependencies([("a", "b", "c")])
