"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def split_patterns(raw: Optional[str]) -> List[str]:
    """Split a comma-separated ``--ignore`` value into glob patterns."""
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def resolve_config(
    config: Optional[Path] = None,
    duplicates: bool = False,
    complexity: bool = False,
    functions: bool = False,
    all_analyses: bool = False,
    ignore: Optional[str] = None,
    output_path: Optional[str] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options.

    Flags only override file settings when they are actually given.
    """
    overrides: dict = {}
    if all_analyses:
        duplicates = complexity = functions = True
    if duplicates:
        overrides["duplicates"] = True
    if complexity:
        overrides["complexity"] = True
    if functions:
        overrides["functions"] = True
    extra = split_patterns(ignore)
    if extra:
        overrides["extra_ignore_patterns"] = extra
    if output_path is not None:
        overrides["output_path"] = output_path
    if workers is not None:
        overrides["workers"] = workers
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
