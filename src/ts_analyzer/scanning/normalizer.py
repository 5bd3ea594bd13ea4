"""Normalizer: blanks out comments and string literals before pattern matching.

Detectors that look for keywords (``if (``, ``function``, ``class``) would
otherwise match inside comments and strings. The passes run in a fixed order:
template literals and block comments first, so that a quote or ``//`` inside
them is never mistaken for the start of another literal or comment.

This is a best-effort lexical pass, not a tokenizer: escape sequences are not
tracked and nested template expressions may be normalized incorrectly.
"""

import re

# Neutral stand-in for a literal; matches no detector pattern.
PLACEHOLDER = '""'

# (pattern, replacement) applied in order.
_PASSES = (
    (re.compile(r"`[^`]*`"), PLACEHOLDER),
    (re.compile(r"/\*.*?\*/", re.DOTALL), ""),
    (re.compile(r"//.*$", re.MULTILINE), ""),
    (re.compile(r"'[^']*'"), PLACEHOLDER),
    (re.compile(r'"[^"]*"'), PLACEHOLDER),
)


def normalize(text: str) -> str:
    """Return ``text`` with comments removed and literals replaced by ``""``."""
    for pattern, replacement in _PASSES:
        text = pattern.sub(replacement, text)
    return text
