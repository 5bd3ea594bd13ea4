"""Project-level aggregation and the qualitative complexity rating."""

from typing import Optional, Sequence, Tuple

from ..config import DEFAULT_THRESHOLDS, AnalysisOptions, ThresholdConfig
from ..models import DuplicateGroup, FileResult, ProjectSummary

TOP_LEVEL = "Very High"


def classify_complexity(
    total: int, bands: Sequence[Tuple[int, str]] = DEFAULT_THRESHOLDS.bands
) -> str:
    """Map a total complexity to its band label.

    ``bands`` is ascending ``(upper_bound, label)`` pairs; bounds are
    inclusive, and anything above the last bound is ``"Very High"``.
    """
    for upper, label in bands:
        if total <= upper:
            return label
    return TOP_LEVEL


def build_summary(
    results: Sequence[FileResult],
    options: AnalysisOptions,
    duplicate_groups: Optional[Sequence[DuplicateGroup]] = None,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> ProjectSummary:
    """Sum per-file metrics into a ProjectSummary.

    Totals for analyses that were not enabled stay ``None``.
    """
    total_functions = None
    if options.functions:
        total_functions = sum(r.function_count for r in results)

    total_complexity = None
    complexity_level = None
    if options.complexity:
        total_complexity = sum(r.complexity for r in results)
        complexity_level = classify_complexity(total_complexity, thresholds.bands)

    duplicate_group_count = None
    if options.duplicates:
        duplicate_group_count = len(duplicate_groups or ())

    return ProjectSummary(
        total_files=len(results),
        total_lines=sum(r.total_lines for r in results),
        total_code_lines=sum(r.code_lines for r in results),
        total_functions=total_functions,
        total_complexity=total_complexity,
        complexity_level=complexity_level,
        duplicate_group_count=duplicate_group_count,
    )
