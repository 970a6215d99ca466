"""Error taxonomy for rank fusion.

Every failure is an input-validation failure detected before any weights are
accumulated, so each precondition gets its own exception class and callers
can branch on the type instead of parsing messages.
"""

from typing import Any, Hashable


class FusionError(ValueError):
    """Base class for all rank fusion errors."""
    pass


class NoRankingsError(FusionError):
    """The collection of input rankings is empty."""

    def __init__(self) -> None:
        super().__init__("At least one ranking is required for fusion")


class InvalidPersistenceError(FusionError):
    """Persistence parameter is not a finite real number in [0, 1)."""

    def __init__(self, persistence: Any):
        self.persistence = persistence
        super().__init__(
            f"Persistence parameter p must satisfy 0.0 <= p < 1.0, got {persistence!r}"
        )


class DuplicateItemInRankingError(FusionError):
    """An item occurs more than once within a single ranking."""

    def __init__(self, item: Hashable, ranking_index: int, rank: int):
        self.item = item
        self.ranking_index = ranking_index
        self.rank = rank
        super().__init__(
            f"Ranking {ranking_index} contains item {item!r} more than once "
            f"(repeated at rank {rank})"
        )


class InvalidRunWeightsError(FusionError):
    """Per-ranking weights do not match the rankings or are not usable."""
    pass


class IncompatibleAccumulatorError(FusionError):
    """Accumulators built with different persistence cannot be merged."""

    def __init__(self, left: float, right: float):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot merge accumulators with persistence {left!r} and {right!r}"
        )
