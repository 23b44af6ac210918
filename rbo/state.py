"""
Incremental overlap tracking for two ranked lists.

The overlap at the next depth is the overlap at the current depth, plus one
for each list whose newly revealed item already appeared in the other list:

    X_{d+1} = X_d + I(S_{d+1} in T_{1:d+1}) + I(T_{d+1} in S_{1:d+1})

A single lookup set is enough to evaluate both indicators: an item is only
recorded while it has been encountered once, and is dropped as soon as the
other list produces it.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from loguru import logger

from rbo.errors import InvalidPersistence
from rbo.estimators import compute_extrapolated, compute_min, compute_residual
from rbo.result import RboResult

# Marks the remainder phase, so that None stays usable as a list item
EXHAUSTED = object()


@dataclass
class OverlapState:
    """Running overlap between two ranked lists, one depth at a time."""

    persistence: float
    seen: set[Hashable] = field(default_factory=set)
    depth_long: int = 0  # every update, remainder included
    depth_short: int = 0  # updates made while both lists had items
    cur_overlap: float = 0.0  # X_d
    overlap_history: list[float] = field(default_factory=lambda: [0.0])

    @classmethod
    def with_persistence(cls, p: float) -> OverlapState:
        """Create an empty state, rejecting ``p`` outside ``[0.0, 1.0)``."""
        # NaN fails the comparison too
        if not 0.0 <= p < 1.0:
            logger.warning("Rejected persistence p={}", p)
            raise InvalidPersistence(p)
        return cls(persistence=p)

    def update(self, first: Hashable, second: Hashable = EXHAUSTED) -> None:
        """Advance one depth.

        Args:
            first: Item at this depth of the first list, or the next item of
                the longer list once the shorter one is exhausted.
            second: Item at this depth of the second list. Omitted during the
                remainder phase.
        """
        if second is EXHAUSTED:
            if first in self.seen:
                self.seen.remove(first)
                self.cur_overlap += 1.0
        elif second == first:
            self.depth_short += 1
            self.cur_overlap += 1.0
        else:
            self.depth_short += 1
            for item in (first, second):
                if item in self.seen:
                    self.seen.remove(item)
                    self.cur_overlap += 1.0
                else:
                    self.seen.add(item)

        self.overlap_history.append(self.cur_overlap)
        self.depth_long += 1

    def into_result(self) -> RboResult:
        """Run the three estimators over the finished state."""
        return RboResult(
            min=compute_min(self),
            residual=compute_residual(self),
            extrapolated=compute_extrapolated(self),
        )
