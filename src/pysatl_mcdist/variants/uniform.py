"""
Continuous uniform distribution over [a, b].
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_mcdist.distributions.constraints import as_float, constraint
from pysatl_mcdist.distributions.support import ContinuousSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName
from pysatl_mcdist.variants.base import (
    UnivariateDistribution,
    check_probabilities,
    scalar_or_array,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_mcdist.types import FloatArray


@dataclass(frozen=True, slots=True)
class Uniform(UnivariateDistribution):
    """
    Uniform distribution over the interval [a, b].

    Probability density function:
        f(x) = 1/(b - a) for x in [a, b], 0 otherwise

    ``a == b`` is accepted and always samples ``a``. Reversed bounds are a
    configuration error rather than being swapped.

    Parameters
    ----------
    a : float
        Lower bound.
    b : float
        Upper bound.
    """

    a: float
    b: float

    _name: ClassVar[DistributionName] = DistributionName.UNIFORM

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", as_float(self.a, "a", "Uniform"))
        object.__setattr__(self, "b", as_float(self.b, "b", "Uniform"))
        self.validate()

    @constraint(description="a and b are finite")
    def check_finite(self) -> bool:
        """Check that the bounds are finite."""
        return math.isfinite(self.a) and math.isfinite(self.b)

    @constraint(description="a <= b")
    def check_ordered(self) -> bool:
        """Check that the bounds are ordered."""
        return self.a <= self.b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.a, right=self.b)

    @property
    def mean(self) -> float:
        return 0.5 * (self.a + self.b)

    def ppf(self, u: ArrayLike) -> float | FloatArray:
        """Quantile ``a + u*(b - a)``."""
        arr = check_probabilities(u)
        return scalar_or_array(self.a + arr * (self.b - self.a), u)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """
        Cumulative distribution function.

        For the degenerate ``a == b`` case this is the unit step at ``a``.
        """
        arr = np.asarray(x, dtype=np.float64)
        width = self.b - self.a
        if width == 0.0:
            return scalar_or_array(np.where(arr >= self.a, 1.0, 0.0), x)
        return scalar_or_array(np.clip((arr - self.a) / width, 0.0, 1.0), x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        return self.a + resolve_random_source(rng).random() * (self.b - self.a)
