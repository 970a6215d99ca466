"""Rank-Biased Centroids (RBC) rank fusion.

RBC fuses several rankings of items using rank information only, as described
in Bailey, Moffat, Scholer and Thomas, "Retrieval Consistency in the Presence
of Query Variations", SIGIR 2017 (https://doi.org/10.1145/3077136.3080839).

Each ranking is read by a notional agent who looks at the first item and then
continues to the next with probability ``p`` (the persistence). An item at
rank ``x`` therefore receives ``(1 - p) * p ** (x - 1)``, and an item's score
is the sum of those weights over all rankings. Smaller ``p`` concentrates on
the top of each list: at ``p = 0`` only first places count, like a
first-past-the-post vote. Larger ``p`` reads deeper; the expected depth is
``1 / (1 - p)``, so ``p = 0.9`` uses roughly the first ten items of each list.

Example (rankings from the paper)::

    >>> fused = fuse(
    ...     [
    ...         ["A", "D", "B", "C", "G", "F"],
    ...         ["B", "D", "E", "C"],
    ...         ["A", "B", "D", "C", "G", "F", "E"],
    ...         ["G", "D", "E", "A", "F", "C"],
    ...     ],
    ...     0.9,
    ... )
    >>> [(item, round(score, 2)) for item, score in fused]
    [('D', 0.35), ('C', 0.28), ('A', 0.27), ('B', 0.27), ('G', 0.23), ('E', 0.22), ('F', 0.18)]
"""

import time
from typing import Any, Hashable, Iterable, List, Optional, Tuple

from .common.config import FusionSettings, get_settings
from .common.logging import get_logger
from .state import FusedRanking, RbcAccumulator
from .validation import validate_persistence, validate_rankings, validate_run_weights
from .weights import DEFAULT_TABLE_SIZE, GeometricWeights

logger = get_logger(__name__)


class RankBiasedCentroids:
    """Rank-Biased Centroids fusion with a fixed persistence.

    The instance keeps its weight table between calls, so reusing one engine
    for many fusions avoids rebuilding it.
    """

    def __init__(
        self,
        persistence: float,
        normalize: bool = False,
        weight_table_size: int = DEFAULT_TABLE_SIZE,
    ):
        """Configure the engine.

        Parameters
        - persistence: Probability ``p`` in ``[0, 1)`` of reading past each rank
        - normalize: Divide scores by the total run weight (the number of
          rankings when unweighted) so they average instead of sum
        - weight_table_size: Rank weights precomputed up front; longer
          rankings extend the table
        """
        self.persistence = validate_persistence(persistence)
        self.normalize = normalize
        self.weights = GeometricWeights(self.persistence, weight_table_size)

    @classmethod
    def from_settings(cls, settings: Optional[FusionSettings] = None) -> "RankBiasedCentroids":
        """Create an engine from ``FusionSettings`` (environment by default)."""
        if settings is None:
            settings = get_settings()
        return cls(
            persistence=settings.persistence,
            normalize=settings.normalize,
            weight_table_size=settings.weight_table_size,
        )

    def accumulator(self) -> RbcAccumulator:
        """Return an empty accumulator sharing this engine's weight table."""
        return RbcAccumulator(self.persistence, weights=self.weights)

    def fuse_results(
        self,
        rankings: Iterable[Iterable[Hashable]],
        run_weights: Optional[Iterable[float]] = None,
    ) -> FusedRanking:
        """Fuse rankings into a single scored ranking.

        Parameters
        - rankings: Non-empty collection of rankings, best item first; an
          individual ranking may be empty
        - run_weights: Optional multiplier per ranking (default 1.0 each)

        Returns
        - ``FusedRanking`` covering every distinct item exactly once, ordered
          by descending score, ties in first-seen order

        Raises
        - ``NoRankingsError``, ``DuplicateItemInRankingError``,
          ``InvalidRunWeightsError``
        """
        started = time.perf_counter()

        materialized = validate_rankings(rankings)
        weights = validate_run_weights(run_weights, len(materialized), self.normalize)

        state = self.accumulator()
        for ranking, run_weight in zip(materialized, weights):
            state.update_validated(ranking, run_weight)
        result = state.into_result(normalize=self.normalize)

        logger.debug(
            "RBC fusion completed",
            rankings=len(materialized),
            items=len(result),
            persistence=self.persistence,
            normalize=self.normalize,
            duration_ms=(time.perf_counter() - started) * 1000.0,
        )

        return result


def fuse(
    rankings: Iterable[Iterable[Hashable]],
    p: Any,
    *,
    run_weights: Optional[Iterable[float]] = None,
    normalize: bool = False,
) -> List[Tuple[Hashable, float]]:
    """Fuse rankings and return ``(item, score)`` pairs, best first.

    Raises ``InvalidPersistenceError`` before looking at the rankings when
    ``p`` is not a finite number in ``[0, 1)``.
    """
    engine = RankBiasedCentroids(p, normalize=normalize)
    return engine.fuse_results(rankings, run_weights).with_scores()


def fuse_items_only(
    rankings: Iterable[Iterable[Hashable]],
    p: Any,
    *,
    run_weights: Optional[Iterable[float]] = None,
    normalize: bool = False,
) -> List[Hashable]:
    """Fuse rankings and return only the items, best first."""
    engine = RankBiasedCentroids(p, normalize=normalize)
    return engine.fuse_results(rankings, run_weights).items()
