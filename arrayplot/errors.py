"""Domain errors."""

from __future__ import annotations


class InvalidRank(ValueError):
    """A tensor-like input was not exactly 2-dimensional."""

    def __init__(self, rank: int) -> None:
        self.rank = rank
        super().__init__(f"requires a 2D tensor, got rank {rank}")
