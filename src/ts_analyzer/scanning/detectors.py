"""Pattern detectors over TypeScript source text.

Each detector is a pure function of its input text. Function detection and
complexity scoring expect normalized text (see ``normalizer``); dependency
extraction needs the raw text because the quoted module specifier is exactly
what normalization removes.
"""

import re
from typing import Iterable, Pattern, Tuple

from ..config import DEFAULT_EXCLUDED_DEPENDENCIES

# ── Declaration shapes ───────────────────────────────────────────
# Group 1 captures the declared name.

FUNCTION_SHAPES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("function", re.compile(r"\bfunction\s+(\w+)", re.ASCII)),
    (
        "arrow",
        re.compile(
            r"\b(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?"
            r"(?:\([^)]*\)|[a-zA-Z_$]\w*)\s*=>",
            re.ASCII,
        ),
    ),
    ("class", re.compile(r"\bclass\s+(\w+)", re.ASCII)),
    ("exported_function", re.compile(r"\bexport\s+(?:default\s+)?function\s+(\w+)", re.ASCII)),
)

# ── Decision points ──────────────────────────────────────────────
# Each match adds 1 to the file's complexity.

DECISION_POINTS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("if", re.compile(r"\bif\s*\(")),
    ("else_if", re.compile(r"\belse\s+if\s*\(")),
    ("for", re.compile(r"\bfor\s*\(")),
    ("for_of_in", re.compile(r"\bfor\s+(?:const|let|var)\s+\w+\s+(?:of|in)\b")),
    ("while", re.compile(r"\bwhile\s*\(")),
    ("do", re.compile(r"\bdo\s*\{")),
    ("case", re.compile(r"\bcase\s+")),
    ("catch", re.compile(r"\bcatch\s*\(")),
    ("nullish", re.compile(r"\?\?")),
    ("optional_chain", re.compile(r"\?\.")),
    ("and", re.compile(r"&&")),
    ("or", re.compile(r"\|\|")),
    # A lone "?" that is neither half of "??" nor the start of "?."
    ("ternary", re.compile(r"(?<!\?)\?(?![?.])")),
)

# ── Imports ──────────────────────────────────────────────────────

_BINDING = r"(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)"

IMPORT_PATTERN = re.compile(
    r"import\s+"
    rf"(?:(?:type\s+)?{_BINDING}(?:\s*,\s*{_BINDING})*\s+from\s+)?"
    r"""['"]([^'"]+)['"]"""
)


def extract_functions(normalized: str) -> Tuple[str, ...]:
    """Names introduced by function, arrow-binding and class declarations.

    Names are unique and keep first-seen order, shape by shape.
    """
    found: dict[str, None] = {}
    for _shape, pattern in FUNCTION_SHAPES:
        for match in pattern.finditer(normalized):
            found.setdefault(match.group(1), None)
    return tuple(found)


def complexity_score(normalized: str) -> int:
    """File-level cyclomatic complexity approximation: 1 + decision points."""
    score = 1
    for _name, pattern in DECISION_POINTS:
        score += len(pattern.findall(normalized))
    return score


def extract_dependencies(
    content: str, excluded: Iterable[str] = DEFAULT_EXCLUDED_DEPENDENCIES
) -> Tuple[str, ...]:
    """Sorted, unique module specifiers imported by ``content``.

    Specifiers listed in ``excluded`` are dropped (exact, case-sensitive match).
    """
    skip = frozenset(excluded)
    deps = {m.group(1) for m in IMPORT_PATTERN.finditer(content)}
    return tuple(sorted(deps - skip))
