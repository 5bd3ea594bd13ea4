"""File analyzer — reads each file exactly once and extracts every metric.

The raw bytes feed the fingerprint, the decoded text feeds line counts and
dependency extraction, and a single normalized copy of the text feeds
whichever detectors are enabled.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import DEFAULT_EXCLUDED_DEPENDENCIES, AnalysisOptions
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import FileResult
from .detectors import complexity_score, extract_dependencies, extract_functions
from .fingerprint import content_hash
from .normalizer import normalize

logger = get_logger(__name__)

_COMMENT_PREFIXES = ("//", "*")


def count_lines(content: str) -> tuple[int, int]:
    """Return ``(total_lines, code_lines)``.

    Code lines exclude blank lines and lines starting with ``//`` or with the
    ``*`` of a block-comment continuation.
    """
    lines = content.split("\n")
    code = 0
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith(_COMMENT_PREFIXES):
            code += 1
    return len(lines), code


class FileAnalyzer:
    """Produces one FileResult per path."""

    def __init__(
        self,
        options: Optional[AnalysisOptions] = None,
        excluded_dependencies: Iterable[str] = DEFAULT_EXCLUDED_DEPENDENCIES,
    ):
        self.options = options or AnalysisOptions()
        self.excluded_dependencies = frozenset(excluded_dependencies)

    def analyze(self, filepath: Union[str, Path]) -> FileResult:
        """Analyze a single file.

        Raises:
            FileAccessError: If the file cannot be read or is not valid UTF-8.
        """
        path = Path(filepath).absolute()
        data = self._read(path)
        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FileAccessError(path, f"Encoding error: {e}")

        total_lines, code_lines = count_lines(content)

        names: tuple[str, ...] = ()
        complexity = 0
        if self.options.functions or self.options.complexity:
            normalized = normalize(content)
            if self.options.functions:
                names = extract_functions(normalized)
            if self.options.complexity:
                complexity = complexity_score(normalized)

        result = FileResult(
            path=str(path),
            file_name=path.name,
            total_lines=total_lines,
            code_lines=code_lines,
            content_hash=content_hash(data),
            function_count=len(names),
            function_names=names,
            dependencies=extract_dependencies(content, self.excluded_dependencies),
            complexity=complexity,
        )
        logger.debug(
            f"{path}: {total_lines} lines, {len(names)} functions, complexity {complexity}"
        )
        return result

    @staticmethod
    def _read(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, f"Cannot read file: {e}")


def analyze_file(
    filepath: Union[str, Path],
    options: Optional[AnalysisOptions] = None,
    excluded_dependencies: Iterable[str] = DEFAULT_EXCLUDED_DEPENDENCIES,
) -> FileResult:
    """Analyze one file with a throwaway FileAnalyzer."""
    return FileAnalyzer(options, excluded_dependencies).analyze(filepath)
