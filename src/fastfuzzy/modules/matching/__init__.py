"""Fuzzy matching: normalization, edit distance, scoring and ranked search."""

from fastfuzzy.modules.matching.distance import levenshtein_distance
from fastfuzzy.modules.matching.normalization import normalize_string
from fastfuzzy.modules.matching.scoring import similarity, similarity_score
from fastfuzzy.modules.matching.search import (
    InvalidOptionsError,
    MatchingError,
    NonFiniteScoreError,
    SearchOptions,
    SearchResult,
    search,
)

__all__ = [
    "InvalidOptionsError",
    "MatchingError",
    "NonFiniteScoreError",
    "SearchOptions",
    "SearchResult",
    "levenshtein_distance",
    "normalize_string",
    "search",
    "similarity",
    "similarity_score",
]
