"""Data models for ts-analyzer.

Every record is frozen: a value is computed once from finalized inputs and
never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import AnalysisOptions


@dataclass(frozen=True)
class FileResult:
    """Metrics for a single source file, keyed by its absolute path."""

    path: str
    file_name: str
    total_lines: int
    code_lines: int
    content_hash: str
    function_count: int = 0
    function_names: Tuple[str, ...] = ()
    dependencies: Tuple[str, ...] = ()
    complexity: int = 0


@dataclass(frozen=True)
class DuplicateGroup:
    """Paths of two or more files with byte-identical content."""

    hash: str
    files: Tuple[str, ...]


@dataclass(frozen=True)
class ProjectSummary:
    """Project-level totals.

    Optional fields are ``None`` when the corresponding analysis was not
    requested, which is different from a computed zero.
    """

    total_files: int
    total_lines: int
    total_code_lines: int
    total_functions: Optional[int] = None
    total_complexity: Optional[int] = None
    complexity_level: Optional[str] = None
    duplicate_group_count: Optional[int] = None


@dataclass(frozen=True)
class SkippedFile:
    """A file the engine could not read, with the reason it was left out."""

    path: str
    reason: str


@dataclass(frozen=True)
class AnalysisResult:
    """Fully computed output of one run, handed to renderers read-only."""

    results: Tuple[FileResult, ...]
    duplicate_groups: Tuple[DuplicateGroup, ...]
    summary: ProjectSummary
    options: AnalysisOptions
    skipped: Tuple[SkippedFile, ...] = field(default_factory=tuple)
