"""
app/mappers/similarity.py

Normalized edit-distance similarity for column header tokens.
"""

from __future__ import annotations

import re

_SEPARATOR_PATTERN = re.compile(r"[_\s-]")


def normalize_token(text: str) -> str:
    """
    Case-fold a header and drop `_`, `-` and whitespace separators.
    """

    return _SEPARATOR_PATTERN.sub("", text.casefold())


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.
    """

    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a):
        current_row = [i + 1]
        for j, char_b in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (char_a != char_b)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def similarity(a: str, b: str) -> float:
    """
    Return ``1 - levenshtein(a, b) / max(len(a), len(b))`` in [0, 1].

    Two empty strings are identical and score 1.0. Callers normalize both
    inputs first (see :func:`normalize_token`).
    """

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest
