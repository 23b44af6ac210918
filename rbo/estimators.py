"""Closed-form RBO estimators over a finished overlap state.

Equation numbers refer to Webber, Moffat & Zobel, "A similarity measure for
indefinite rankings", ACM TOIS 28(4), 2010.

At ``p == 0`` the common ``(1 - p) / p`` factor is undefined; each estimator
returns its limit as ``p -> 0+`` instead, where only the first rank counts.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rbo.state import OverlapState


def _weighted_sum(p: float, lo: int, hi: int) -> float:
    """Sum of p^d / d for integer d in (lo, hi]; 0 for an empty range."""
    return sum(p**d / d for d in range(lo + 1, hi + 1))


def compute_min(state: OverlapState) -> float:
    """Lower bound RBO_min (equation 11), evaluated at the short list's depth."""
    p = state.persistence
    k = state.depth_short
    x_d = state.overlap_history
    x_k = x_d[k]

    if p == 0.0:
        return x_d[1] if k >= 1 else 0.0

    other = sum((x_d[d] - x_k) * p**d / d for d in range(1, k))
    return (1.0 - p) / p * (other - x_k * math.log1p(-p))


def compute_residual(state: OverlapState) -> float:
    """Residual RBO_res (equation 30).

    ``f`` is the depth at which the maximum possible agreement reaches 1,
    given the mismatches seen so far.
    """
    p = state.persistence
    s = state.depth_short
    l = state.depth_long
    x_l = state.cur_overlap
    f = int(s + l - x_l)

    if p == 0.0:
        # 0.0 ** 0 == 1.0
        return p**s + p**l - p**f

    sum_s = _weighted_sum(p, s, f)
    sum_l = _weighted_sum(p, l, f)
    sum_t = _weighted_sum(p, 0, f)
    ln_1p = -math.log1p(-p)
    return p**s + p**l - p**f - (1.0 - p) / p * (
        s * sum_s + l * sum_l + x_l * (ln_1p - sum_t)
    )


def compute_extrapolated(state: OverlapState) -> float:
    """Point estimate RBO_ext (equation 32).

    The agreement seen at the short list's depth is projected over the rest
    of the long list and then beyond it.
    """
    p = state.persistence
    s = state.depth_short
    l = state.depth_long
    if s == 0:
        return 0.0

    x_d = state.overlap_history
    x_s = x_d[s]
    x_l = x_d[l]

    if p == 0.0:
        return x_d[1]

    observed = sum(x_d[d] * p**d / d for d in range(1, l + 1))
    projected = sum(x_s * (d - s) / (s * d) * p**d for d in range(s + 1, l + 1))
    tail = ((x_l - x_s) / l + x_s / s) * p**l
    return (1.0 - p) / p * (observed + projected) + tail
