"""Public API for ts-analyzer.

Example:
    >>> from ts_analyzer import analyze
    >>>
    >>> # All analyses, default ignore globs
    >>> result = analyze("/path/to/project")
    >>> result.summary.complexity_level
    'Medium'
    >>>
    >>> # Only complexity, with extra ignores and a thread pool
    >>> result = analyze(
    ...     "/path/to/project",
    ...     complexity=True,
    ...     extra_ignore_patterns=["**/__mocks__/**"],
    ...     workers=4,
    ... )
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analysis.engine import AnalysisEngine, ProgressCallback
from .config import AnalysisConfig, load_config
from .logging_config import get_logger
from .models import AnalysisResult
from .scanning.scanner import scan_source_files

logger = get_logger(__name__)


def analyze(
    path: str = ".",
    config_file: Optional[Union[str, Path]] = None,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[AnalysisConfig] = None,
    **overrides,
) -> AnalysisResult:
    """Scan a project directory and analyze every TypeScript file in it.

    Args:
        path: Project root (default: current directory)
        config_file: Optional explicit config file path
        on_progress: Called with ``(files_done, files_total)`` after each file
        config: Pre-built configuration; skips discovery and ``overrides``
        **overrides: Configuration overrides (e.g. ``complexity=True``)

    Returns:
        AnalysisResult with per-file results, duplicate groups, the project
        summary and any skipped files.

    Raises:
        ConfigurationError: If configuration is invalid
        InvalidPathError: If ``path`` is not a directory
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    logger.info(f"Scanning {path} ...")
    files = scan_source_files(path, config.all_ignore_patterns)
    if not files:
        logger.warning(f"No .ts or .tsx files found under {path}")

    result = AnalysisEngine.from_config(config).run(files, on_progress=on_progress)

    logger.info(
        f"Analysis complete: {result.summary.total_files} files analyzed, "
        f"{len(result.skipped)} skipped"
    )
    return result
