"""JSON formatter for ts-analyzer."""

import json
from dataclasses import asdict
from typing import Any, Dict

from ..models import AnalysisResult
from .base import BaseFormatter


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Plain-data view of a result, shared by the JSON and HTML outputs."""
    return {
        "options": asdict(result.options),
        "summary": asdict(result.summary),
        "files": [asdict(r) for r in result.results],
        "duplicates": [asdict(g) for g in result.duplicate_groups],
        "skipped": [asdict(s) for s in result.skipped],
    }


class JsonFormatter(BaseFormatter):
    """Render the analysis result as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result_to_dict(result), indent=2)
