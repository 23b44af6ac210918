"""Rank-Biased Overlap between two indefinite rankings.

Implements RBO as described in:

    Webber, Moffat & Zobel, "A similarity measure for indefinite rankings",
    ACM Transactions on Information Systems 28(4), 2010.

Usage:
    from rbo.overlap import rbo

    result = rbo([1, 2, 3], [1, 3, 2], p=0.9)
    print(result)  # RBO(min=..., residual=..., extrapolated=...)
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from loguru import logger

from rbo.config import settings
from rbo.errors import DuplicatesInList
from rbo.result import RboResult
from rbo.state import OverlapState


def contains_duplicates(items: Sequence[Hashable]) -> bool:
    """True if any item appears more than once."""
    return len(set(items)) != len(items)


def rbo(
    first: Iterable[Hashable],
    second: Iterable[Hashable],
    p: float | None = None,
) -> RboResult:
    """Compute Rank-Biased Overlap between two ranked lists.

    The lists are walked in lock-step up to the shorter one's length, then the
    rest of the longer list is fed in on its own.

    Args:
        first: First ranking, best item first. Items must be hashable.
        second: Second ranking, best item first.
        p: Persistence, 0.0 <= p < 1.0. Higher values give deeper ranks more
            weight. Defaults to settings.DEFAULT_PERSISTENCE.

    Returns:
        RboResult with min, residual and extrapolated scores.

    Raises:
        InvalidPersistence: If p is outside [0.0, 1.0).
        DuplicatesInList: If either list repeats an item.
    """
    if p is None:
        p = settings.DEFAULT_PERSISTENCE
    state = OverlapState.with_persistence(p)

    first = list(first)
    second = list(second)
    if contains_duplicates(first) or contains_duplicates(second):
        logger.warning(
            "Rejected ranked lists with duplicate items (lengths {} and {})",
            len(first),
            len(second),
        )
        raise DuplicatesInList()

    for a, b in zip(first, second):
        state.update(a, b)

    # Remainder of the longer list, if any
    common = min(len(first), len(second))
    longer = first if len(first) > len(second) else second
    for item in longer[common:]:
        state.update(item)

    result = state.into_result()
    logger.debug(
        "RBO over depths short={} long={} (overlap {}) at p={}: {}",
        state.depth_short,
        state.depth_long,
        state.cur_overlap,
        p,
        result,
    )
    return result
