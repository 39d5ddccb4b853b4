"""
Maxwellian energy spectrum.

The density is

    f(E) = 2 / sqrt(pi) * theta**(-3/2) * sqrt(E) * exp(-E / theta),  E >= 0,

i.e. a gamma distribution with shape 3/2 and scale ``theta``. Samples are
produced by rule C64 of Everett & Cashwell: the sum of one exponential
variate and a second one scaled by ``cos^2(pi*r/2)``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from scipy.special import gammainc

from pysatl_mcdist.distributions.constraints import as_float, constraint
from pysatl_mcdist.distributions.sampling import RejectionSamplingStrategy
from pysatl_mcdist.distributions.support import ContinuousSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName
from pysatl_mcdist.variants.base import UnivariateDistribution, scalar_or_array

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_mcdist.distributions.sampling import SamplingStrategy
    from pysatl_mcdist.types import FloatArray


def maxwell_spectrum(theta: float, rng: np.random.Generator) -> float:
    """
    Draw one energy from a Maxwellian spectrum with temperature ``theta``.

    Parameters
    ----------
    theta : float
        Spectral temperature, in energy units. Must be positive.
    rng : numpy.random.Generator
        Source of uniform variates.

    Returns
    -------
    float
        Sampled energy, finite and non-negative.

    Notes
    -----
    A zero uniform makes the logarithm undefined, so such triples are
    rejected and redrawn. The rejection probability is below 2**-52 per
    trial.
    """
    while True:
        r1 = rng.random()
        r2 = rng.random()
        r3 = rng.random()
        if r1 > 0.0 and r2 > 0.0:
            c = math.cos(0.5 * math.pi * r3)
            return -theta * (math.log(r1) + math.log(r2) * c * c)


@dataclass(frozen=True, slots=True)
class Maxwell(UnivariateDistribution):
    """
    Maxwellian distribution ``c*sqrt(E)*exp(-E/theta)``.

    Parameters
    ----------
    theta : float
        Spectral temperature (energy units), ``theta > 0``.
    """

    theta: float

    _name: ClassVar[DistributionName] = DistributionName.MAXWELL
    _sampling_strategy: ClassVar[SamplingStrategy] = RejectionSamplingStrategy()

    def __post_init__(self) -> None:
        object.__setattr__(self, "theta", as_float(self.theta, "theta", "Maxwell"))
        self.validate()

    @constraint(description="theta > 0 and finite")
    def check_theta_positive(self) -> bool:
        """Check that temperature is positive."""
        return math.isfinite(self.theta) and self.theta > 0.0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    @property
    def mean(self) -> float:
        return 1.5 * self.theta

    def pdf(self, x: ArrayLike) -> float | FloatArray:
        arr = np.asarray(x, dtype=np.float64)
        e = np.maximum(arr, 0.0)
        density = 2.0 / math.sqrt(math.pi) * self.theta**-1.5 * np.sqrt(e) * np.exp(-e / self.theta)
        return scalar_or_array(np.where(arr >= 0.0, density, 0.0), x)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """Regularized lower incomplete gamma ``P(3/2, E/theta)``."""
        arr = np.asarray(x, dtype=np.float64)
        return scalar_or_array(gammainc(1.5, np.maximum(arr, 0.0) / self.theta), x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        return maxwell_spectrum(self.theta, resolve_random_source(rng))
