"""Errors raised while reading and analyzing individual files."""

from pathlib import Path
from typing import Union

from .base import TsAnalyzerError


class AnalysisError(TsAnalyzerError):
    """Failure inside the per-file analysis stage."""


class FileAccessError(AnalysisError):
    """A source file could not be read, or its bytes are not UTF-8.

    The engine turns this into a ``SkippedFile`` instead of aborting the run.
    """

    def __init__(self, filepath: Union[str, Path], reason: str):
        self.filepath = Path(filepath)
        self.reason = reason
        super().__init__(
            f"Cannot access file: {self.filepath}",
            details={"filepath": self.filepath, "reason": reason},
        )
