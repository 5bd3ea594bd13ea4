"""
ts-analyzer - static metrics for TypeScript projects.

Reads every source file once and reports lines of code, declared functions
and classes, imported modules, an approximate cyclomatic complexity and
exact-content duplicates, without running a TypeScript parser.
"""

__version__ = "0.1.0"

from .analysis import AnalysisEngine, build_summary, classify_complexity, find_duplicates
from .api import analyze
from .config import AnalysisConfig, AnalysisOptions, ThresholdConfig, load_config
from .models import AnalysisResult, DuplicateGroup, FileResult, ProjectSummary, SkippedFile
from .scanning import FileAnalyzer, analyze_file, scan_source_files

__all__ = [
    "analyze",  # Main entry point
    "AnalysisEngine",
    "FileAnalyzer",
    "analyze_file",
    "scan_source_files",
    "find_duplicates",
    "build_summary",
    "classify_complexity",
    "AnalysisConfig",
    "AnalysisOptions",
    "ThresholdConfig",
    "load_config",
    "AnalysisResult",
    "FileResult",
    "DuplicateGroup",
    "ProjectSummary",
    "SkippedFile",
]
