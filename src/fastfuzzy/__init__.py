"""fastfuzzy: typo-tolerant string similarity and ranked search."""

from fastfuzzy.modules.matching import (
    InvalidOptionsError,
    MatchingError,
    NonFiniteScoreError,
    SearchOptions,
    SearchResult,
    levenshtein_distance,
    normalize_string,
    search,
    similarity,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidOptionsError",
    "MatchingError",
    "NonFiniteScoreError",
    "SearchOptions",
    "SearchResult",
    "__version__",
    "levenshtein_distance",
    "normalize_string",
    "search",
    "similarity",
]
