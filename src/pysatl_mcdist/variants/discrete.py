"""
Discrete distribution (probability mass function over explicit outcomes).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_mcdist.distributions.constraints import as_float_array, constraint
from pysatl_mcdist.distributions.support import ExplicitTableDiscreteSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName, FloatArray, UnivariateDiscrete
from pysatl_mcdist.variants.base import (
    UnivariateDistribution,
    check_probabilities,
    scalar_or_array,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_mcdist.types import DistributionType


@dataclass(frozen=True, slots=True, eq=False)
class Discrete(UnivariateDistribution):
    """
    Finite probability mass function.

    Parameters
    ----------
    x : array_like
        Outcome values.
    p : array_like
        Probability of each outcome. Rescaled once at construction so that
        it sums to one.

    Raises
    ------
    DistributionConfigurationError
        If the arrays differ in length, are empty, contain negative or
        non-finite probabilities, or carry no mass.
    """

    x: FloatArray
    p: FloatArray
    _cdf: FloatArray = field(init=False, repr=False)

    _name: ClassVar[DistributionName] = DistributionName.DISCRETE
    _distribution_type: ClassVar[DistributionType] = UnivariateDiscrete

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_float_array(self.x, "x", "Discrete"))
        object.__setattr__(self, "p", as_float_array(self.p, "p", "Discrete"))
        self.validate()

        p = self.p / self.p.sum()
        p.flags.writeable = False
        cdf = np.cumsum(p)
        cdf[-1] = 1.0
        cdf.flags.writeable = False
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "_cdf", cdf)

    @constraint(description="len(x) == len(p)")
    def check_same_length(self) -> bool:
        """Check that every value has a probability."""
        return self.x.size == self.p.size

    @constraint(description="len(x) >= 1")
    def check_not_empty(self) -> bool:
        """Check that there is at least one outcome."""
        return self.x.size >= 1

    @constraint(description="x is finite")
    def check_finite_outcomes(self) -> bool:
        """Check that outcome values are finite."""
        return bool(np.all(np.isfinite(self.x)))

    @constraint(description="p >= 0 and finite")
    def check_nonnegative(self) -> bool:
        """Check that probabilities are non-negative."""
        return bool(np.all(np.isfinite(self.p)) and np.all(self.p >= 0.0))

    @constraint(description="sum(p) > 0 and finite")
    def check_positive_mass(self) -> bool:
        """Check that the total mass can be normalized."""
        with np.errstate(over="ignore"):
            total = float(self.p.sum())
        return math.isfinite(total) and total > 0.0

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        return ExplicitTableDiscreteSupport(self.x)

    @property
    def mean(self) -> float:
        return float(np.dot(self.x, self.p))

    def ppf(self, u: ArrayLike) -> float | FloatArray:
        """
        Outcome selected by cumulative probability ``u``.

        Returns ``x[i]`` for the smallest ``i`` whose cumulative probability
        exceeds ``u``, so ties go to the lower index. ``u == 1`` maps to the
        last outcome with positive probability.
        """
        arr = check_probabilities(u)
        last = int(np.searchsorted(self._cdf, 1.0, side="left"))
        idx = np.minimum(np.searchsorted(self._cdf, arr, side="right"), last)
        return scalar_or_array(self.x[idx], u)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """Total probability of outcomes not greater than ``x``."""
        arr = np.asarray(x, dtype=np.float64)
        below = self.x <= arr[..., np.newaxis]
        return scalar_or_array(below @ self.p, x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        u = resolve_random_source(rng).random()
        i = int(np.searchsorted(self._cdf, u, side="right"))
        return float(self.x[min(i, self.x.size - 1)])
