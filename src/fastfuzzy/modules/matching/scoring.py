"""Similarity scoring on top of edit distance."""

from __future__ import annotations

from fastfuzzy.modules.matching.distance import levenshtein_distance
from fastfuzzy.modules.matching.normalization import normalize_string

__all__ = [
    "byte_length",
    "similarity",
    "similarity_score",
]


def byte_length(text: str) -> int:
    """Length of text in UTF-8 bytes (equal to len() for ASCII)."""
    return len(text.encode("utf-8", errors="surrogatepass"))


def similarity_score(a: str, b: str) -> float:
    """Score two already-prepared strings in the range [0.0, 1.0].

    The distance is divided by the UTF-8 byte length of the longer operand.
    For multi-byte scripts this is larger than the code point count, which
    skews scores downward; both operands are measured the same way, so
    relative ranking is unaffected.

    Args:
        a: First string, compared as given.
        b: Second string, compared as given.

    Returns:
        1.0 for identical strings, 0.0 if exactly one side is empty,
        otherwise 1.0 - distance / max byte length.
    """
    if a == b:
        return 1.0

    if not a or not b:
        return 0.0

    distance = levenshtein_distance(a, b)
    max_len = max(byte_length(a), byte_length(b))

    return 1.0 - distance / max_len


def similarity(a: str, b: str, normalize: bool = True) -> float:
    """Compute fuzzy similarity between two strings.

    Args:
        a: First string.
        b: Second string.
        normalize: Strip diacritics, fold case and collapse whitespace on
            both inputs before comparing.

    Returns:
        Similarity score in [0.0, 1.0], higher is closer.
    """
    if normalize:
        a = normalize_string(a, fold=True)
        b = normalize_string(b, fold=True)

    return similarity_score(a, b)
