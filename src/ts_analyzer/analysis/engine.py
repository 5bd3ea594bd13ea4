"""Analysis engine — drives the file analyzer over a list of paths.

The engine owns the skip policy: a file that cannot be read becomes a
``SkippedFile`` and the run continues. Per-file results are only handed to
the duplicate grouper and aggregator once every file has been analyzed.

Usage:
    engine = AnalysisEngine(AnalysisOptions.resolve(complexity=True))
    result = engine.run(paths, on_progress=lambda done, total: ...)
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Union

from ..config import (
    DEFAULT_EXCLUDED_DEPENDENCIES,
    DEFAULT_THRESHOLDS,
    AnalysisConfig,
    AnalysisOptions,
    ThresholdConfig,
)
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import AnalysisResult, FileResult, SkippedFile
from ..scanning.file_analyzer import FileAnalyzer
from .duplicates import find_duplicates
from .summary import build_summary

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]
PathLike = Union[str, Path]


class AnalysisEngine:
    """Runs per-file analysis, then duplicate grouping and aggregation."""

    def __init__(
        self,
        options: Optional[AnalysisOptions] = None,
        excluded_dependencies: Iterable[str] = DEFAULT_EXCLUDED_DEPENDENCIES,
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        workers: int = 1,
    ):
        self.options = options or AnalysisOptions()
        self.thresholds = thresholds
        self.workers = max(1, workers)
        self._analyzer = FileAnalyzer(self.options, excluded_dependencies)

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "AnalysisEngine":
        return cls(
            options=config.options,
            excluded_dependencies=config.excluded_dependencies,
            thresholds=config.thresholds,
            workers=config.workers,
        )

    def run(
        self,
        paths: Sequence[PathLike],
        on_progress: Optional[ProgressCallback] = None,
    ) -> AnalysisResult:
        """Analyze every path and assemble the project snapshot.

        Results and skips keep the order of ``paths`` regardless of worker
        count.
        """
        total = len(paths)
        if total == 0:
            logger.debug("No input paths; returning an empty result")

        outcomes: list[Union[FileResult, SkippedFile, None]] = [None] * total

        if self.workers == 1 or total < 2:
            for index, path in enumerate(paths):
                outcomes[index] = self._analyze_one(path)
                if on_progress is not None:
                    on_progress(index + 1, total)
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = {
                    executor.submit(self._analyze_one, path): index
                    for index, path in enumerate(paths)
                }
                for done, future in enumerate(as_completed(futures), start=1):
                    outcomes[futures[future]] = future.result()
                    if on_progress is not None:
                        on_progress(done, total)

        results = tuple(o for o in outcomes if isinstance(o, FileResult))
        skipped = tuple(o for o in outcomes if isinstance(o, SkippedFile))

        duplicate_groups = find_duplicates(results) if self.options.duplicates else ()
        if self.options.duplicates:
            logger.info(f"Found {len(duplicate_groups)} duplicate group(s)")

        summary = build_summary(results, self.options, duplicate_groups, self.thresholds)

        return AnalysisResult(
            results=results,
            duplicate_groups=duplicate_groups,
            summary=summary,
            options=self.options,
            skipped=skipped,
        )

    def _analyze_one(self, path: PathLike) -> Union[FileResult, SkippedFile]:
        try:
            return self._analyzer.analyze(path)
        except FileAccessError as e:
            logger.warning(f"Skipped {path}: {e.reason}")
            return SkippedFile(path=str(Path(path).absolute()), reason=e.reason)
