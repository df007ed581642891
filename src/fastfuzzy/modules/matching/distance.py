"""Levenshtein edit distance.

ASCII inputs are compared as raw bytes, everything else as Unicode scalar
values. Both paths run the same recurrence, so they can never disagree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "levenshtein_distance",
]


def levenshtein_distance(a: str, b: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform a into b.
    It is symmetric and satisfies the triangle inequality.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The edit distance, counted in Unicode scalar values.
    """
    if a == b:
        return 0

    if not a:
        return len(b)
    if not b:
        return len(a)

    if a.isascii() and b.isascii():
        return _edit_distance(a.encode("ascii"), b.encode("ascii"))

    # A str already indexes by code point
    return _edit_distance(a, b)


def _edit_distance(a: Sequence[object], b: Sequence[object]) -> int:
    """Run the two-row dynamic programming recurrence.

    Works over any indexable sequence of comparable units (bytes or
    code points). Rows are sized to the shorter operand.
    """
    if len(a) < len(b):
        a, b = b, a

    previous_row = list(range(len(b) + 1))
    current_row = [0] * (len(b) + 1)

    for i in range(1, len(a) + 1):
        current_row[0] = i
        unit = a[i - 1]
        for j in range(1, len(b) + 1):
            cost = 0 if unit == b[j - 1] else 1
            deletion = previous_row[j] + 1
            insertion = current_row[j - 1] + 1
            substitution = previous_row[j - 1] + cost
            current_row[j] = min(deletion, insertion, substitution)
        previous_row, current_row = current_row, previous_row

    return previous_row[-1]
