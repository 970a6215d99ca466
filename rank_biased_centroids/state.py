"""Accumulation state for Rank-Biased Centroids.

``RbcAccumulator`` collects the weighted contributions of each item across
rankings and turns them into a ``FusedRanking``. Contributions are kept per
item and summed with ``math.fsum`` at the end, which makes every score
exactly rounded and independent of the order rankings were added or merged.
"""

import math
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .errors import IncompatibleAccumulatorError, InvalidRunWeightsError
from .validation import check_unique, validate_run_weight
from .weights import DEFAULT_TABLE_SIZE, GeometricWeights

# scores agreeing to this many significant digits count as tied
TIE_SIGNIFICANT_DIGITS = 12


def tie_key(score: float) -> float:
    """Round ``score`` to ``TIE_SIGNIFICANT_DIGITS`` significant digits.

    Rounding is monotone, so ordering by the key never inverts two scores
    that differ beyond the last kept digit.
    """
    return float(f"{score:.{TIE_SIGNIFICANT_DIGITS}g}")


class FusedRanking:
    """Fused ranking of items in descending score order."""

    def __init__(self, entries: List[Tuple[Hashable, float]]):
        self._entries = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[Hashable, float]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"FusedRanking({self._entries!r})"

    def with_scores(self) -> List[Tuple[Hashable, float]]:
        """Return ``(item, score)`` pairs in fused order."""
        return list(self._entries)

    def items(self) -> List[Hashable]:
        """Return the fused items without scores."""
        return [item for item, _ in self._entries]

    def scores(self) -> Dict[Hashable, float]:
        """Return a mapping of item to score."""
        return dict(self._entries)

    def top(self, k: int) -> List[Tuple[Hashable, float]]:
        """Return the ``k`` best ``(item, score)`` pairs."""
        return self._entries[:max(k, 0)]


class RbcAccumulator:
    """Running per-item weights for one fusion.

    Parameters
    - persistence: RBC persistence ``p`` in ``[0, 1)``
    - weight_table_size: Number of rank weights precomputed up front
    - weights: Existing ``GeometricWeights`` to share instead of building one
    """

    def __init__(
        self,
        persistence: float,
        weight_table_size: int = DEFAULT_TABLE_SIZE,
        weights: Optional[GeometricWeights] = None,
    ):
        if weights is None:
            weights = GeometricWeights(persistence, weight_table_size)
        elif weights.persistence != persistence:
            raise IncompatibleAccumulatorError(persistence, weights.persistence)
        self.weights = weights
        self.persistence = weights.persistence

        self._contributions: Dict[Hashable, List[float]] = {}
        self._first_seen: Dict[Hashable, int] = {}
        self._position = 0
        self.rankings_seen = 0
        self.total_run_weight = 0.0
        self._run_weight_terms: List[float] = []

    def __len__(self) -> int:
        return len(self._contributions)

    def update(self, ranking: Iterable[Hashable], run_weight: float = 1.0) -> None:
        """Add one ranking, best item first.

        The ranking is checked for duplicates before anything is recorded, so
        a failed update leaves the accumulator unchanged.
        """
        items = list(ranking)
        check_unique(items, self.rankings_seen)
        self.update_validated(items, validate_run_weight(run_weight))

    def update_validated(self, items: List[Hashable], run_weight: float) -> None:
        """Add a ranking already checked by ``validate_rankings``.

        Skips the duplicate and run weight checks; callers that validated the
        whole input up front use this to avoid checking twice.
        """
        for item, weight in zip(items, self.weights.head(len(items))):
            terms = self._contributions.get(item)
            if terms is None:
                terms = self._contributions[item] = []
                self._first_seen[item] = self._position
            terms.append(run_weight * weight)
            self._position += 1
        self.rankings_seen += 1
        self._run_weight_terms.append(run_weight)
        self.total_run_weight = math.fsum(self._run_weight_terms)

    def merge(self, other: "RbcAccumulator") -> "RbcAccumulator":
        """Fold ``other`` into this accumulator and return ``self``.

        ``other``'s rankings are treated as coming after this accumulator's
        rankings, which decides tie order between equally scored items.
        """
        if other is self:
            raise ValueError("Cannot merge an accumulator into itself")
        if other.persistence != self.persistence:
            raise IncompatibleAccumulatorError(self.persistence, other.persistence)

        for item in sorted(other._contributions, key=other._first_seen.__getitem__):
            terms = self._contributions.get(item)
            if terms is None:
                terms = self._contributions[item] = []
                self._first_seen[item] = self._position + other._first_seen[item]
            terms.extend(other._contributions[item])

        self._position += other._position
        self.rankings_seen += other.rankings_seen
        self._run_weight_terms.extend(other._run_weight_terms)
        self.total_run_weight = math.fsum(self._run_weight_terms)
        return self

    def into_result(self, normalize: bool = False) -> FusedRanking:
        """Sum contributions, optionally normalize, and sort.

        Items are ordered by descending score. Scores equal to
        ``TIE_SIGNIFICANT_DIGITS`` significant digits are tied and keep the
        order in which items were first seen across the rankings, so rounding
        noise in mathematically equal sums never decides the order.
        """
        divisor = 1.0
        if normalize:
            if self.total_run_weight <= 0.0:
                raise InvalidRunWeightsError(
                    "Run weights must have a positive total when normalizing"
                )
            divisor = self.total_run_weight

        scored = [
            (item, math.fsum(terms) / divisor)
            for item, terms in self._contributions.items()
        ]
        scored.sort(key=lambda entry: (-tie_key(entry[1]), self._first_seen[entry[0]]))
        return FusedRanking(scored)
