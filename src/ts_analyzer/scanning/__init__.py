"""Per-file scanning: traversal, normalization, detectors and fingerprints."""

from .detectors import (
    DECISION_POINTS,
    FUNCTION_SHAPES,
    complexity_score,
    extract_dependencies,
    extract_functions,
)
from .file_analyzer import FileAnalyzer, analyze_file, count_lines
from .fingerprint import content_hash
from .normalizer import PLACEHOLDER, normalize
from .scanner import SOURCE_EXTENSIONS, is_ignored, scan_source_files

__all__ = [
    # Normalizer
    "normalize",
    "PLACEHOLDER",
    # Detectors
    "extract_functions",
    "complexity_score",
    "extract_dependencies",
    "FUNCTION_SHAPES",
    "DECISION_POINTS",
    # Fingerprints
    "content_hash",
    # File analysis
    "FileAnalyzer",
    "analyze_file",
    "count_lines",
    # Traversal
    "scan_source_files",
    "is_ignored",
    "SOURCE_EXTENSIONS",
]
