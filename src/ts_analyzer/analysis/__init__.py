"""Whole-project analysis: the engine driver, duplicate grouping, summaries."""

from .duplicates import duplicate_paths, find_duplicates
from .engine import AnalysisEngine
from .summary import build_summary, classify_complexity

__all__ = [
    "AnalysisEngine",
    "find_duplicates",
    "duplicate_paths",
    "build_summary",
    "classify_complexity",
]
