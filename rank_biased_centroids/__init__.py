"""Rank-Biased Centroids (RBC) rank fusion.

Fuses several rankings of hashable items into one consensus ranking with
per-item scores, using a geometrically decaying weight per rank.

Contents
- ``fusion``: ``fuse``, ``fuse_items_only`` and the ``RankBiasedCentroids`` engine
- ``state``: ``RbcAccumulator`` for incremental or parallel accumulation
- ``weights``: the geometric rank weight table
- ``errors``: the ``FusionError`` taxonomy
- ``common``: settings and structured logging
"""

from .errors import (
    DuplicateItemInRankingError,
    FusionError,
    IncompatibleAccumulatorError,
    InvalidPersistenceError,
    InvalidRunWeightsError,
    NoRankingsError,
)
from .fusion import RankBiasedCentroids, fuse, fuse_items_only
from .state import FusedRanking, RbcAccumulator
from .weights import GeometricWeights

__all__ = [
    "DuplicateItemInRankingError",
    "FusedRanking",
    "FusionError",
    "GeometricWeights",
    "IncompatibleAccumulatorError",
    "InvalidPersistenceError",
    "InvalidRunWeightsError",
    "NoRankingsError",
    "RankBiasedCentroids",
    "RbcAccumulator",
    "fuse",
    "fuse_items_only",
]
