"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by
transport code. A distribution is immutable after construction and exposes a
single hot-path operation, :meth:`Distribution.sample`, which turns uniform
variates drawn from a random source into one scalar.

Notes
-----
- ``sample`` consumes one or more variates from ``rng`` (or from the calling
  thread's default source) and never raises for a constructed distribution.
- ``sample_n`` delegates to the distribution's
  :class:`~pysatl_mcdist.distributions.sampling.SamplingStrategy`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_mcdist.distributions.sampling import Sample, SamplingStrategy
    from pysatl_mcdist.distributions.support import Support
    from pysatl_mcdist.types import DistributionName, DistributionType


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by transport code and the factory."""

    @property
    def name(self) -> DistributionName: ...

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def mean(self) -> float: ...

    def sample(self, rng: np.random.Generator | None = None) -> float: ...

    def sample_n(self, n: int, rng: np.random.Generator | None = None, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)
