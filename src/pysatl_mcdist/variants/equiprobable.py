"""
Equiprobable bins distribution.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_mcdist.distributions.constraints import as_float_array, constraint
from pysatl_mcdist.distributions.support import ContinuousSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName, FloatArray
from pysatl_mcdist.variants.base import (
    UnivariateDistribution,
    check_probabilities,
    scalar_or_array,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


@dataclass(frozen=True, slots=True, eq=False)
class Equiprobable(UnivariateDistribution):
    """
    ``n - 1`` bins of equal probability over ordered boundaries.

    A sample picks bin ``i = floor(u*(n-1))`` and interpolates linearly
    inside ``[x[i], x[i+1]]`` with the fractional part of ``u*(n-1)``.

    Parameters
    ----------
    x : array_like
        Non-decreasing bin boundaries, at least two.
    """

    x: FloatArray

    _name: ClassVar[DistributionName] = DistributionName.EQUIPROBABLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_float_array(self.x, "x", "Equiprobable"))
        self.validate()

    @constraint(description="len(x) >= 2")
    def check_enough_boundaries(self) -> bool:
        """Check that there is at least one bin."""
        return self.x.size >= 2

    @constraint(description="x is finite and non-decreasing")
    def check_ordered(self) -> bool:
        """Check that bin boundaries are finite and non-decreasing."""
        return bool(np.all(np.isfinite(self.x)) and np.all(np.diff(self.x) >= 0.0))

    @property
    def n_bins(self) -> int:
        return self.x.size - 1

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=float(self.x[0]), right=float(self.x[-1]))

    @property
    def mean(self) -> float:
        return float(np.mean(0.5 * (self.x[:-1] + self.x[1:])))

    def ppf(self, u: ArrayLike) -> float | FloatArray:
        arr = check_probabilities(u)
        t = arr * self.n_bins
        i = np.clip(np.floor(t).astype(np.intp), 0, self.n_bins - 1)
        left = self.x[i]
        return scalar_or_array(left + (t - i) * (self.x[i + 1] - left), u)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """Fraction of the bins lying below ``x``, each bin filled linearly."""
        pts = np.asarray(x, dtype=np.float64)[..., np.newaxis]
        left, right = self.x[:-1], self.x[1:]
        width = right - left
        with np.errstate(divide="ignore", invalid="ignore"):
            filled = np.where(
                width > 0.0, np.clip((pts - left) / width, 0.0, 1.0), (pts >= left).astype(float)
            )
        return scalar_or_array(filled.mean(axis=-1), x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        t = resolve_random_source(rng).random() * self.n_bins
        i = min(math.floor(t), self.n_bins - 1)
        left = self.x[i]
        return float(left + (t - i) * (self.x[i + 1] - left))
