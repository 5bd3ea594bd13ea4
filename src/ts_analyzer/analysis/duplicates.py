"""Duplicate detection — groups files whose raw content hashes are equal.

Grouping is by content fingerprint, not file name: two ``index.ts`` files
with different bodies are not duplicates, while a copied file under another
name is.
"""

from typing import Dict, Iterable, List, Set, Tuple

from ..models import DuplicateGroup, FileResult


def find_duplicates(results: Iterable[FileResult]) -> Tuple[DuplicateGroup, ...]:
    """Group paths by content hash, keeping only hashes shared by 2+ files.

    Groups come out in first-seen-hash order and list paths in input order,
    so sorted input gives reproducible output.
    """
    buckets: Dict[str, List[str]] = {}
    for result in results:
        buckets.setdefault(result.content_hash, []).append(result.path)

    return tuple(
        DuplicateGroup(hash=digest, files=tuple(paths))
        for digest, paths in buckets.items()
        if len(paths) > 1
    )


def duplicate_paths(groups: Iterable[DuplicateGroup]) -> Set[str]:
    """Every path that appears in any group, for highlighting report rows."""
    return {path for group in groups for path in group.files}
