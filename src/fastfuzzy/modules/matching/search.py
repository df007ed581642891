"""Ranked fuzzy search over a list of candidates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastfuzzy.modules.matching.normalization import fold_case, normalize_string
from fastfuzzy.modules.matching.scoring import similarity_score

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_THRESHOLD",
    "InvalidOptionsError",
    "MatchingError",
    "NonFiniteScoreError",
    "ResolvedSearchOptions",
    "SearchOptions",
    "SearchResult",
    "search",
]

DEFAULT_LIMIT = 10
DEFAULT_THRESHOLD = 0.0
DEFAULT_NORMALIZE = True
DEFAULT_IGNORE_CASE = True

# Host-style option names accepted by SearchOptions.from_mapping
_OPTION_KEYS = {
    "limit": "limit",
    "threshold": "threshold",
    "normalize": "normalize",
    "ignoreCase": "ignore_case",
    "ignore_case": "ignore_case",
}


class MatchingError(Exception):
    """Base exception for matching operations."""


class InvalidOptionsError(MatchingError, ValueError):
    """Raised when a search option has an invalid type or value."""


class NonFiniteScoreError(MatchingError):
    """Raised when a score that is NaN or infinite reaches the ranking step."""


@dataclass(frozen=True)
class ResolvedSearchOptions:
    """Search options with every default applied."""

    limit: int
    threshold: float
    normalize: bool
    ignore_case: bool

    def comparison_form(self, text: str) -> str:
        """Derive the form of text used for scoring under these options."""
        if self.normalize:
            return normalize_string(text, fold=self.ignore_case)
        if self.ignore_case:
            return fold_case(text)
        return text


@dataclass(frozen=True)
class SearchOptions:
    """Immutable search configuration.

    Every field is optional; None means "use the default".

    Attributes:
        limit: Maximum number of results (positive, default 10).
        threshold: Minimum score a candidate needs to be kept (default 0.0).
        normalize: Strip diacritics and collapse whitespace (default True).
        ignore_case: Compare case-insensitively (default True).
    """

    limit: int | None = None
    threshold: float | None = None
    normalize: bool | None = None
    ignore_case: bool | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and (
            isinstance(self.limit, bool)
            or not isinstance(self.limit, int)
            or self.limit <= 0
        ):
            raise InvalidOptionsError(
                f"limit must be a positive integer, got {self.limit!r}"
            )

        # NaN and infinite thresholds are accepted; the >= test filters them
        if self.threshold is not None and (
            isinstance(self.threshold, bool)
            or not isinstance(self.threshold, int | float)
        ):
            raise InvalidOptionsError(
                f"threshold must be a number, got {self.threshold!r}"
            )

        for name in ("normalize", "ignore_case"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, bool):
                raise InvalidOptionsError(f"{name} must be a boolean, got {value!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchOptions:
        """Build options from a mapping such as parsed JSON.

        Accepts ``ignoreCase`` as well as ``ignore_case``. Missing keys and
        None values fall back to defaults.

        Raises:
            InvalidOptionsError: If a key is unknown or a value is invalid.
        """
        unknown = sorted(key for key in data if key not in _OPTION_KEYS)
        if unknown:
            raise InvalidOptionsError(f"Unknown search options: {', '.join(unknown)}")

        fields = {_OPTION_KEYS[key]: value for key, value in data.items()}
        return cls(**fields)

    def merged_over(self, base: SearchOptions) -> SearchOptions:
        """Return options where fields set here override those of base."""
        return SearchOptions(
            limit=self.limit if self.limit is not None else base.limit,
            threshold=self.threshold if self.threshold is not None else base.threshold,
            normalize=self.normalize if self.normalize is not None else base.normalize,
            ignore_case=(
                self.ignore_case if self.ignore_case is not None else base.ignore_case
            ),
        )

    def resolve(self) -> ResolvedSearchOptions:
        """Apply defaults to every unset field."""
        return ResolvedSearchOptions(
            limit=self.limit if self.limit is not None else DEFAULT_LIMIT,
            threshold=(
                float(self.threshold)
                if self.threshold is not None
                else DEFAULT_THRESHOLD
            ),
            normalize=self.normalize if self.normalize is not None else DEFAULT_NORMALIZE,
            ignore_case=(
                self.ignore_case if self.ignore_case is not None else DEFAULT_IGNORE_CASE
            ),
        )


@dataclass(frozen=True)
class SearchResult:
    """A candidate that survived filtering.

    Attributes:
        item: The original, unmodified candidate text.
        score: Similarity score in [0.0, 1.0].
        index: Zero-based position in the candidate sequence.
    """

    item: str
    score: float
    index: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {"item": self.item, "score": self.score, "index": self.index}


def search(
    query: str,
    candidates: Iterable[str],
    options: SearchOptions | Mapping[str, Any] | None = None,
) -> list[SearchResult]:
    """Rank candidates by similarity to a query.

    Args:
        query: Text to search for.
        candidates: Candidate strings, consumed once in order.
        options: Search options, a mapping of option names, or None for
            defaults.

    Returns:
        Results sorted by score descending. Equal scores keep their
        original relative order. At most ``limit`` results are returned.

    Raises:
        InvalidOptionsError: If options are invalid.
        NonFiniteScoreError: If a computed score is NaN or infinite.
    """
    if options is None:
        options = SearchOptions()
    elif not isinstance(options, SearchOptions):
        options = SearchOptions.from_mapping(options)

    resolved = options.resolve()
    target = resolved.comparison_form(query)

    results: list[SearchResult] = []
    for index, candidate in enumerate(candidates):
        score = _checked_score(
            similarity_score(target, resolved.comparison_form(candidate)), index
        )
        if score >= resolved.threshold:
            results.append(SearchResult(item=candidate, score=score, index=index))

    # list.sort is stable, so equal scores stay in index order
    results.sort(key=lambda result: -result.score)

    return results[: resolved.limit]


def _checked_score(score: float, index: int) -> float:
    """Reject scores that cannot be compared against a threshold or sorted.

    Raises:
        NonFiniteScoreError: If the score is NaN or infinite.
    """
    if not math.isfinite(score):
        raise NonFiniteScoreError(
            f"Non-finite score {score!r} for candidate at index {index}"
        )
    return score
