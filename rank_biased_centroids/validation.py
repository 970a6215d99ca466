"""Input validation for rank fusion.

All checks run eagerly, before any weight is accumulated, so a call either
fails on its inputs or completes.
"""

import math
import numbers
from typing import Any, Hashable, Iterable, List, Optional, Sequence

from .errors import (
    DuplicateItemInRankingError,
    InvalidPersistenceError,
    InvalidRunWeightsError,
    NoRankingsError,
)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_persistence(persistence: Any) -> float:
    """Return ``persistence`` as a float, or raise ``InvalidPersistenceError``.

    NaN and infinities fail the range check, as do bools and non-numeric values.
    """
    if not _is_real(persistence):
        raise InvalidPersistenceError(persistence)
    try:
        value = float(persistence)
    except OverflowError:
        raise InvalidPersistenceError(persistence) from None
    if not (0.0 <= value < 1.0):
        raise InvalidPersistenceError(persistence)
    return value


def check_unique(ranking: Sequence[Hashable], ranking_index: int = 0) -> None:
    """Raise ``DuplicateItemInRankingError`` on the first repeated item."""
    seen = set()
    for rank, item in enumerate(ranking, start=1):
        if item in seen:
            raise DuplicateItemInRankingError(item, ranking_index, rank)
        seen.add(item)


def validate_rankings(rankings: Iterable[Iterable[Hashable]]) -> List[List[Hashable]]:
    """Materialize every ranking and check it for duplicates.

    Parameters
    - rankings: Iterable of iterables of hashable items, best item first

    Returns
    - A list of lists, safe to iterate more than once
    """
    materialized = [list(ranking) for ranking in rankings]
    if not materialized:
        raise NoRankingsError()
    for index, ranking in enumerate(materialized):
        check_unique(ranking, index)
    return materialized


def validate_run_weight(weight: Any) -> float:
    """Return a single run weight as a float if it is finite and non-negative."""
    if not _is_real(weight):
        raise InvalidRunWeightsError(f"Run weight must be a real number, got {weight!r}")
    try:
        value = float(weight)
    except OverflowError:
        raise InvalidRunWeightsError(
            f"Run weight must be finite and non-negative, got {weight!r}"
        ) from None
    if not math.isfinite(value) or value < 0.0:
        raise InvalidRunWeightsError(
            f"Run weight must be finite and non-negative, got {weight!r}"
        )
    return value


def validate_run_weights(
    run_weights: Optional[Iterable[Any]],
    ranking_count: int,
    normalize: bool = False,
) -> List[float]:
    """Check per-ranking weights, defaulting to 1.0 for every ranking.

    Parameters
    - run_weights: One weight per ranking, or ``None`` for uniform weights
    - ranking_count: Number of rankings being fused
    - normalize: Whether scores will be divided by the total weight, which
      must then be positive
    """
    if run_weights is None:
        return [1.0] * ranking_count

    weights = [validate_run_weight(w) for w in run_weights]
    if len(weights) != ranking_count:
        raise InvalidRunWeightsError(
            f"Expected {ranking_count} run weights, got {len(weights)}"
        )
    if normalize and math.fsum(weights) <= 0.0:
        raise InvalidRunWeightsError(
            "Run weights must have a positive total when normalizing"
        )
    return weights
