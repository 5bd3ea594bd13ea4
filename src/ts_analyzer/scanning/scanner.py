"""Filesystem scanner — finds TypeScript sources under a project root.

Ignore globs are matched against the POSIX path relative to the root using
``fnmatch`` semantics, where ``*`` also crosses ``/``. A leading ``**/`` in a
pattern matches at the root as well, so ``**/dist/**`` excludes ``dist/``.
Matching directories are pruned without being walked.
"""

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from ..config import DEFAULT_IGNORE_PATTERNS
from ..exceptions import InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

SOURCE_EXTENSIONS = (".ts", ".tsx")


def is_ignored(rel_path: str, patterns: Iterable[str], is_dir: bool = False) -> bool:
    """Check a root-relative POSIX path against the ignore globs."""
    candidates = [rel_path, "/" + rel_path]
    if is_dir:
        candidates += [c + "/" for c in candidates]
    return any(fnmatchcase(c, p) for p in patterns for c in candidates)


def scan_source_files(
    root_dir: Union[str, Path],
    ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS,
    extensions: Sequence[str] = SOURCE_EXTENSIONS,
) -> List[Path]:
    """Return sorted absolute paths of source files under ``root_dir``.

    Raises:
        InvalidPathError: If ``root_dir`` is not an existing directory.
    """
    root = Path(root_dir).absolute()
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")

    patterns = list(ignore_patterns)
    suffixes = tuple(extensions)
    found: List[Path] = []

    def _on_error(err: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {err.filename}: {err.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"

        dirnames[:] = [d for d in dirnames if not is_ignored(prefix + d, patterns, is_dir=True)]

        for name in filenames:
            if not name.endswith(suffixes):
                continue
            if is_ignored(prefix + name, patterns):
                continue
            found.append(current / name)

    found.sort()
    logger.info(f"Found {len(found)} source file(s) under {root}")
    return found
