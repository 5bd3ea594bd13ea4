"""Tests for the HTML report."""

import json
import re

from ts_analyzer.analysis.engine import AnalysisEngine
from ts_analyzer.config import AnalysisOptions
from ts_analyzer.models import AnalysisResult, FileResult, ProjectSummary
from ts_analyzer.scanning.scanner import scan_source_files
from ts_analyzer.visualization import generate_report


def _embedded_data(html: str) -> dict:
    match = re.search(r"const DATA = (.*?);\n", html)
    assert match is not None
    return json.loads(match.group(1))


def test_report_written(sample_project, tmp_path):
    result = AnalysisEngine().run(scan_source_files(sample_project))
    out = generate_report(
        result,
        project_name="demo",
        output_path=tmp_path / "reports" / "index.html",
        root=str(sample_project),
    )

    html = (tmp_path / "reports" / "index.html").read_text(encoding="utf-8")
    assert out == str((tmp_path / "reports" / "index.html").resolve())
    assert html.startswith("<!DOCTYPE html>")

    data = _embedded_data(html)
    assert data["project_name"] == "demo"
    assert data["root"] == str(sample_project)
    assert data["summary"]["total_files"] == 3
    assert len(data["duplicate_paths"]) == 2


def test_script_close_sequence_escaped(tmp_path):
    hostile = FileResult(
        path="/p/a.ts",
        file_name="a.ts",
        total_lines=1,
        code_lines=1,
        content_hash="h",
        dependencies=("</script><img src=x>",),
    )
    result = AnalysisResult(
        results=(hostile,),
        duplicate_groups=(),
        summary=ProjectSummary(total_files=1, total_lines=1, total_code_lines=1),
        options=AnalysisOptions(duplicates=False, complexity=False, functions=False),
    )
    out = generate_report(result, project_name="</title>", output_path=tmp_path / "r.html")
    html = open(out, encoding="utf-8").read()

    assert html.count("</script>") == 1
    assert "<\\/script><img src=x>" in html
    assert _embedded_data(html)["files"][0]["dependencies"] == ["</script><img src=x>"]
