"""
Common base of the built-in distribution variants.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_mcdist.distributions.constraints import ConstrainedParameters
from pysatl_mcdist.distributions.distribution import Distribution
from pysatl_mcdist.distributions.sampling import DefaultSamplingUnivariateStrategy
from pysatl_mcdist.types import UnivariateContinuous

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_mcdist.distributions.sampling import SamplingStrategy
    from pysatl_mcdist.types import DistributionName, DistributionType, FloatArray


class UnivariateDistribution(ConstrainedParameters, Distribution):
    """
    Base class for the built-in variants.

    Subclasses are frozen dataclasses that set ``_name`` and, when they
    differ from the defaults, ``_distribution_type`` and
    ``_sampling_strategy``. They call :meth:`validate` at the end of field
    coercion in ``__post_init__``, before any derived data is computed.
    """

    __slots__ = ()

    _name: ClassVar[DistributionName]
    _distribution_type: ClassVar[DistributionType] = UnivariateContinuous
    _sampling_strategy: ClassVar[SamplingStrategy] = DefaultSamplingUnivariateStrategy()

    @property
    def name(self) -> DistributionName:
        """Type discriminator of the variant."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the batch sampling strategy."""
        return self._sampling_strategy


def check_probabilities(u: ArrayLike) -> FloatArray:
    """
    Convert ``u`` to a float array of probabilities.

    Raises
    ------
    ValueError
        If any value is outside [0, 1].
    """
    arr = np.asarray(u, dtype=np.float64)
    if np.any((arr < 0.0) | (arr > 1.0)) or np.any(np.isnan(arr)):
        raise ValueError("Probability must be in [0, 1]")
    return arr


def scalar_or_array(result: FloatArray, like: ArrayLike) -> float | FloatArray:
    """Return a Python float when ``like`` is a scalar, the array otherwise."""
    if np.ndim(like) == 0:
        return float(result)
    return result
