"""Result record returned by an RBO computation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RboResult(BaseModel):
    """The three RBO statistics for one pair of ranked lists.

    Attributes:
        min: Lower bound estimate (RBO_min).
        residual: Uncertainty left by evaluating a prefix rather than the full
            rankings. ``min + residual`` is an upper bound.
        extrapolated: Point estimate assuming the agreement seen so far
            continues indefinitely (RBO_ext).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: float
    residual: float
    extrapolated: float

    @property
    def upper_bound(self) -> float:
        return self.min + self.residual

    def __str__(self) -> str:
        return (
            f"RBO(min={self.min:.3f}, residual={self.residual:.3f}, "
            f"extrapolated={self.extrapolated:.3f})"
        )
