"""
Watt fission spectrum ``c*exp(-E/a)*sinh(sqrt(b*E))``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from scipy import integrate as _sp_integrate

from pysatl_mcdist.distributions.constraints import as_float, constraint
from pysatl_mcdist.distributions.sampling import RejectionSamplingStrategy
from pysatl_mcdist.distributions.support import ContinuousSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName
from pysatl_mcdist.variants.base import UnivariateDistribution, scalar_or_array
from pysatl_mcdist.variants.maxwell import Maxwell, maxwell_spectrum

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_mcdist.distributions.sampling import SamplingStrategy
    from pysatl_mcdist.types import FloatArray


@dataclass(frozen=True, slots=True)
class Watt(UnivariateDistribution):
    """
    Watt fission spectrum.

    A Watt spectrum is a Maxwellian of temperature ``a`` observed from a
    frame moving with energy ``a**2 * b / 4``. Sampling draws the Maxwellian
    energy ``w`` and a uniform direction cosine ``mu = 2u - 1``:

        E = w + a**2 b / 4 + mu * sqrt(a**2 b w)

    Parameters
    ----------
    a : float
        Factor in the exponential (energy units), ``a > 0``.
    b : float
        Factor in the square root (inverse energy units), ``b >= 0``.
        ``b == 0`` reduces to a Maxwellian of temperature ``a``.
    """

    a: float
    b: float

    _name: ClassVar[DistributionName] = DistributionName.WATT
    _sampling_strategy: ClassVar[SamplingStrategy] = RejectionSamplingStrategy()

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", as_float(self.a, "a", "Watt"))
        object.__setattr__(self, "b", as_float(self.b, "b", "Watt"))
        self.validate()

    @constraint(description="a > 0 and finite")
    def check_a_positive(self) -> bool:
        """Check that the exponential factor is positive."""
        return math.isfinite(self.a) and self.a > 0.0

    @constraint(description="b >= 0 and finite")
    def check_b_nonnegative(self) -> bool:
        """Check that the square-root factor is non-negative."""
        return math.isfinite(self.b) and self.b >= 0.0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    @property
    def mean(self) -> float:
        return 1.5 * self.a + 0.25 * self.a * self.a * self.b

    def pdf(self, x: ArrayLike) -> float | FloatArray:
        arr = np.asarray(x, dtype=np.float64)
        if self.b == 0.0:
            return Maxwell(self.a).pdf(x)
        e = np.maximum(arr, 0.0)
        ab = self.a * self.b
        # exp(-E/a - ab/4) * sinh(sqrt(bE)) as a difference of single exponentials
        s = np.sqrt(self.b * e)
        kernel = 0.5 * (np.exp(s - e / self.a - 0.25 * ab) - np.exp(-s - e / self.a - 0.25 * ab))
        density = 2.0 / math.sqrt(math.pi * self.a**3 * self.b) * kernel
        return scalar_or_array(np.where(arr >= 0.0, density, 0.0), x)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """Cumulative distribution by adaptive quadrature of :meth:`pdf`."""
        arr = np.asarray(x, dtype=np.float64)

        def _one(upper: float) -> float:
            if upper <= 0.0:
                return 0.0
            val, _ = _sp_integrate.quad(lambda t: float(self.pdf(t)), 0.0, upper, limit=200)
            return min(max(val, 0.0), 1.0)

        result = np.vectorize(_one, otypes=[np.float64])(arr)
        return scalar_or_array(result, x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        source = resolve_random_source(rng)
        shift = 0.25 * self.a * self.a * self.b
        while True:
            w = maxwell_spectrum(self.a, source)
            mu = 2.0 * source.random() - 1.0
            energy = w + shift + mu * math.sqrt(self.a * self.a * self.b * w)
            if energy >= 0.0 and math.isfinite(energy):
                return energy
