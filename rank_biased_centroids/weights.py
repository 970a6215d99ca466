"""Geometric rank weights for Rank-Biased Centroids.

The weight of rank ``x`` (1-based) is ``(1 - p) * p ** (x - 1)``: the
probability that a reader who continues past each item with probability ``p``
stops exactly at depth ``x``. Weights are produced as a running product so
long rankings never exponentiate from scratch, and they decay towards zero
(eventually underflowing to exactly 0.0) rather than overflowing.
"""

from typing import List

import numpy as np

from .validation import validate_persistence

DEFAULT_TABLE_SIZE = 10000


def _running_product(first: float, factor: float, size: int) -> np.ndarray:
    """Return ``[first, first*factor, first*factor**2, ...]`` of length ``size``."""
    terms = np.full(size, factor, dtype=np.float64)
    terms[0] = first
    return np.cumprod(terms)


class GeometricWeights:
    """Precomputed table of per-rank weights, extended on demand.

    The table only ever grows by appending, so weights already handed out
    stay valid.
    """

    def __init__(self, persistence: float, table_size: int = DEFAULT_TABLE_SIZE):
        self.persistence = validate_persistence(persistence)
        if table_size < 1:
            raise ValueError(f"table_size must be at least 1, got {table_size}")
        self._table = _running_product(1.0 - self.persistence, self.persistence, table_size)

    def __len__(self) -> int:
        return len(self._table)

    def _ensure(self, depth: int) -> None:
        current = len(self._table)
        if depth <= current:
            return
        new_size = max(depth, 2 * current)
        # continue the product from the last entry instead of recomputing p**x
        tail = _running_product(
            float(self._table[-1]) * self.persistence,
            self.persistence,
            new_size - current,
        )
        self._table = np.concatenate([self._table, tail])

    def weight(self, rank: int) -> float:
        """Weight of a single 1-based rank."""
        if rank < 1:
            raise ValueError(f"rank is 1-based, got {rank}")
        self._ensure(rank)
        return float(self._table[rank - 1])

    def head(self, depth: int) -> List[float]:
        """Weights of ranks ``1..depth`` as Python floats."""
        if depth <= 0:
            return []
        self._ensure(depth)
        return self._table[:depth].tolist()

    @property
    def expected_depth(self) -> float:
        """Mean stopping depth ``1 / (1 - p)`` of the notional reader."""
        return 1.0 / (1.0 - self.persistence)
