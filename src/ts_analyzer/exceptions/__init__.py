"""Exception hierarchy for ts-analyzer.

    TsAnalyzerError
    ├── AnalysisError
    │   └── FileAccessError
    └── ConfigurationError
        ├── InvalidPathError
        └── InvalidConfigError
"""

from .analysis import AnalysisError, FileAccessError
from .base import TsAnalyzerError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "TsAnalyzerError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
