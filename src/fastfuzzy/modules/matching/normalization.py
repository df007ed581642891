"""Text normalization for fair fuzzy comparisons.

Strips diacritics, optionally folds case and collapses whitespace so that
"Café " and "cafe" compare as equal.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "COMBINING_MARK_RANGES",
    "collapse_whitespace",
    "fold_case",
    "is_combining_mark",
    "normalize_string",
    "strip_diacritics",
]

# Inclusive code point ranges of the combining mark blocks that are removed
COMBINING_MARK_RANGES: tuple[tuple[int, int], ...] = (
    (0x0300, 0x036F),  # Combining Diacritical Marks
    (0x1AB0, 0x1AFF),  # Combining Diacritical Marks Extended
    (0x1DC0, 0x1DFF),  # Combining Diacritical Marks Supplement
    (0x20D0, 0x20FF),  # Combining Diacritical Marks for Symbols
    (0xFE20, 0xFE2F),  # Combining Half Marks
)

# Unicode White_Space characters. Narrower than str.isspace, which also
# matches the information separators U+001C to U+001F.
_WHITESPACE_PATTERN = re.compile(
    r"[\t-\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def is_combining_mark(char: str) -> bool:
    """Check whether a character lies in one of the stripped mark blocks.

    Args:
        char: A single character.

    Returns:
        True if the character is a recognized combining mark.
    """
    code = ord(char)
    return any(start <= code <= end for start, end in COMBINING_MARK_RANGES)


def strip_diacritics(text: str) -> str:
    """Decompose text (NFD) and drop recognized combining marks.

    Base letters are kept, so "résumé" becomes "resume". Marks outside
    the recognized blocks survive decomposition untouched.

    Removing a blocking mark (such as U+034F) can leave the remaining marks
    out of canonical order, so the filtered text is decomposed again.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not is_combining_mark(ch))
    return unicodedata.normalize("NFD", stripped)


def fold_case(text: str) -> str:
    """Apply full Unicode case folding ("Straße" -> "strasse")."""
    return text.casefold()


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run into a single ASCII space.

    Whitespace means the Unicode White_Space property. Leading and trailing
    whitespace is dropped entirely.
    """
    return " ".join(part for part in _WHITESPACE_PATTERN.split(text) if part)


def normalize_string(text: str, fold: bool = True) -> str:
    """Normalize a string for comparison.

    Steps, in order:
        1. Canonical decomposition (NFD).
        2. Removal of combining diacritical marks.
        3. Full case folding, when ``fold`` is true.
        4. Whitespace collapsing.

    Case folding can emit characters that decompose to a base letter plus a
    mark (for example "ǰ"), so the folded text is decomposed and stripped
    once more. The result is therefore stable under repeated normalization.

    Args:
        text: Input text. Any string is valid, including the empty string.
        fold: Whether to case fold the text.

    Returns:
        The normalized text (possibly empty).
    """
    result = strip_diacritics(text)

    if fold:
        result = strip_diacritics(fold_case(result))

    return collapse_whitespace(result)
