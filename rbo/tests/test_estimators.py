"""Tests for the RBO_min, RBO_res and RBO_ext estimators.

Expected values below are worked by hand from equations 11, 30 and 32.
"""

from __future__ import annotations

import math

import pytest

from rbo.estimators import compute_extrapolated, compute_min, compute_residual
from rbo.state import OverlapState


def _state(first: str, second: str, p: float) -> OverlapState:
    state = OverlapState.with_persistence(p)
    for a, b in zip(first, second):
        state.update(a, b)
    longer = first if len(first) > len(second) else second
    for item in longer[min(len(first), len(second)):]:
        state.update(item)
    return state


def test_swap_at_depth_two():
    """abc vs acb at p=0.5, overlaps X = 1, 1, 3."""
    state = _state("abc", "acb", 0.5)

    assert compute_min(state) == pytest.approx(-1.25 + 3 * math.log(2), abs=1e-12)
    assert compute_residual(state) == pytest.approx(
        0.125 - 3 * (math.log(2) - (0.5 + 0.125 + 1 / 24)), abs=1e-12
    )
    assert compute_extrapolated(state) == pytest.approx(0.875, abs=1e-12)


def test_full_agreement_bounds_meet():
    """When the prefixes agree completely, min + residual equals extrapolated."""
    state = _state("abc", "acb", 0.5)
    upper = compute_min(state) + compute_residual(state)
    assert upper == pytest.approx(compute_extrapolated(state), abs=1e-12)


def test_disjoint_lists():
    """No shared items: nothing is certain, the residual keeps the rest."""
    state = _state("abc", "def", 0.9)
    assert compute_min(state) == pytest.approx(0.0, abs=1e-12)
    assert compute_extrapolated(state) == pytest.approx(0.0, abs=1e-12)
    # f = 6: p^3 + p^3 - p^6 - (1-p)/p * 6 * (p^4/4 + p^5/5 + p^6/6)
    assert compute_residual(state) == pytest.approx(0.679428, abs=1e-6)


def test_residual_identical_lists():
    """Identical lists of length 7 at p=0.9."""
    state = _state("abcdefg", "abcdefg", 0.9)
    assert compute_residual(state) == pytest.approx(0.232860, abs=1.1e-6)
    assert compute_min(state) + compute_residual(state) == pytest.approx(1.0, abs=1e-6)


def test_residual_ignores_unmatched_long_tail():
    """Extra unmatched items in the long list do not change the residual."""
    short = _state("abcdefg", "abcdefg", 0.9)
    uneven = _state("abcdefg", "abcdefghijklmnopqrstuvwxyz", 0.9)
    assert compute_residual(uneven) == pytest.approx(compute_residual(short), abs=1e-9)


def test_extrapolated_equal_length_form():
    """With s == l the projection term vanishes."""
    p = 0.8
    state = _state("abcd", "badc", p)
    # X = 0, 2, 2, 4
    observed = 2 * p**2 / 2 + 2 * p**3 / 3 + 4 * p**4 / 4
    expected = (1 - p) / p * observed + p**4
    assert compute_extrapolated(state) == pytest.approx(expected, abs=1e-12)


def test_extrapolated_tail_weighted_by_depth():
    """The tail term carries p^l for both the new overlap and the short ratio."""
    p = 0.9
    state = _state("ab", "cdab", p)
    # s=2, l=4, X = 0, 0, 1, 2; x_s = 0
    observed = 1 * p**3 / 3 + 2 * p**4 / 4
    expected = (1 - p) / p * observed + ((2 - 0) / 4 + 0 / 2) * p**4
    assert compute_extrapolated(state) == pytest.approx(expected, abs=1e-12)


def test_empty_short_list():
    """An empty ranking carries no evidence: everything is residual."""
    state = _state("", "abc", 0.9)
    assert compute_min(state) == 0.0
    assert compute_extrapolated(state) == 0.0
    assert compute_residual(state) == pytest.approx(1.0, abs=1e-12)


def test_both_empty():
    state = _state("", "", 0.9)
    assert compute_min(state) == 0.0
    assert compute_extrapolated(state) == 0.0
    assert compute_residual(state) == pytest.approx(1.0, abs=1e-12)


# ── p == 0: only the first rank counts ────────────────────────────


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("ab", "ac", 1.0),
        ("abcdef", "a", 1.0),
        ("ba", "ab", 0.0),
        ("abc", "xyz", 0.0),
    ],
)
def test_zero_persistence_uses_first_rank(first, second, expected):
    """At p=0, min and extrapolated reduce to agreement at depth 1."""
    state = _state(first, second, 0.0)
    assert compute_min(state) == expected
    assert compute_extrapolated(state) == expected
    assert compute_residual(state) == 0.0


def test_zero_persistence_empty_short_list():
    """At p=0 an empty short list leaves the single decisive rank unknown."""
    state = _state("", "abc", 0.0)
    assert compute_min(state) == 0.0
    assert compute_extrapolated(state) == 0.0
    assert compute_residual(state) == 1.0


@pytest.mark.parametrize("first, second", [("ab", "ac"), ("bac", "abd"), ("abc", "cab")])
def test_zero_persistence_is_the_limit(first, second):
    """The p=0 branch agrees with the formulas as p approaches 0."""
    exact = _state(first, second, 0.0)
    near = _state(first, second, 1e-7)
    assert compute_min(near) == pytest.approx(compute_min(exact), abs=1e-5)
    assert compute_residual(near) == pytest.approx(compute_residual(exact), abs=1e-5)
    assert compute_extrapolated(near) == pytest.approx(compute_extrapolated(exact), abs=1e-5)


def test_estimators_do_not_mutate_state():
    state = _state("abcde", "aebfc", 0.7)
    history = list(state.overlap_history)
    seen = set(state.seen)
    compute_min(state)
    compute_residual(state)
    compute_extrapolated(state)
    assert state.overlap_history == history
    assert state.seen == seen
