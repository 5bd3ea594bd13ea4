"""Tests for the JSON and rich terminal formatters."""

import io
import json

import pytest
from rich.console import Console

from ts_analyzer.analysis.engine import AnalysisEngine
from ts_analyzer.config import AnalysisOptions
from ts_analyzer.formatters import JsonFormatter, RichFormatter, get_formatter, result_to_dict
from ts_analyzer.formatters import rich_formatter
from ts_analyzer.scanning.scanner import scan_source_files


@pytest.fixture
def sample_result(sample_project):
    return AnalysisEngine().run(scan_source_files(sample_project))


@pytest.fixture
def captured_console(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(rich_formatter, "console", Console(file=buf, width=200))
    return buf


class TestJsonFormatter:
    def test_structure(self, sample_result):
        data = result_to_dict(sample_result)
        assert set(data) == {"options", "summary", "files", "duplicates", "skipped"}
        assert data["options"] == {"duplicates": True, "complexity": True, "functions": True}
        assert data["summary"]["total_files"] == 3
        assert len(data["duplicates"]) == 1
        assert len(data["duplicates"][0]["files"]) == 2

    def test_format_is_valid_json(self, sample_result):
        data = json.loads(JsonFormatter().format(sample_result))
        app = next(f for f in data["files"] if f["file_name"] == "app.tsx")
        assert app["dependencies"] == ["./module"]
        assert sorted(app["function_names"]) == ["DataService", "helper", "processData"]

    def test_disabled_summary_fields_are_null(self, sample_project):
        options = AnalysisOptions(duplicates=False, complexity=False, functions=True)
        result = AnalysisEngine(options).run(scan_source_files(sample_project))
        summary = json.loads(JsonFormatter().format(result))["summary"]
        assert summary["total_complexity"] is None
        assert summary["duplicate_group_count"] is None
        assert summary["total_functions"] == 3


class TestRichFormatter:
    def test_render(self, sample_result, sample_project, captured_console):
        RichFormatter(root=str(sample_project)).render(sample_result)
        out = captured_console.getvalue()

        assert "TS ANALYZER" in out
        assert "Top 3 files by complexity" in out
        assert "src/app.tsx" in out
        assert "(dup)" in out
        assert "DUPLICATES" in out
        assert str(sample_project) not in out

    def test_top_n_truncates(self, sample_result, captured_console):
        RichFormatter(top_n=1).render(sample_result)
        assert "... and 2 more" in captured_console.getvalue()

    def test_size_ranking_without_complexity(self, sample_project, captured_console):
        options = AnalysisOptions(duplicates=False, complexity=False, functions=True)
        result = AnalysisEngine(options).run(scan_source_files(sample_project))
        RichFormatter().render(result)
        out = captured_console.getvalue()
        assert "files by size" in out
        assert "DUPLICATES" not in out


class TestGetFormatter:
    def test_known(self):
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("rich"), RichFormatter)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")
