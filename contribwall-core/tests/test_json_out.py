"""Tests for --json output formatting."""

import json
from pathlib import Path

from contribwall import __version__
from contribwall.builder import BuildResult
from contribwall.reporter.json_out import summary_json, to_json


def _result() -> BuildResult:
    return BuildResult(
        owner="o", repo="r", contributor_count=13, rows=2, width=664, height=104, output="w.svg"
    )


class TestToJson:
    """Sorted keys, two-space indent, one trailing newline."""

    def test_sorted_and_indented(self):
        text = to_json({"b": 1, "a": 2})
        assert text == '{\n  "a": 2,\n  "b": 1\n}\n'

    def test_model_input(self):
        data = json.loads(to_json(_result()))
        assert data["width"] == 664

    def test_paths_become_strings(self):
        assert json.loads(to_json({"output": Path("w.svg")})) == {"output": "w.svg"}


class TestSummaryJson:
    def test_version_stamped(self):
        data = json.loads(summary_json(_result()))
        assert data["contribwall_version"] == __version__
        assert data["contributor_count"] == 13

    def test_deterministic(self):
        assert summary_json(_result()) == summary_json(_result())
