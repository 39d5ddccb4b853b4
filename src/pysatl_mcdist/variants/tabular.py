"""
Tabulated density with histogram or linear-linear interpolation.

The table ``(x, p)`` is integrated once at construction into a cumulative
distribution ``c`` at the grid points; both ``p`` and ``c`` are then scaled by
the total mass so that ``c[-1] == 1``. Sampling inverts ``c``:

- histogram:       x = x[i] + (u - c[i]) / p[i]
- linear-linear:   x = x[i] + (sqrt(p[i]**2 + 2 m (u - c[i])) - p[i]) / m,
                   m = (p[i+1] - p[i]) / (x[i+1] - x[i])

The quadratic root is evaluated in the rationalized form
``2 (u - c[i]) / (p[i] + sqrt(...))``, which has no cancellation for small
``m``. Numerically flat segments use the histogram formula. Zero-density bins
return their left edge.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_mcdist.distributions.constraints import (
    DistributionConfigurationError,
    as_float_array,
    constraint,
)
from pysatl_mcdist.distributions.support import ContinuousSupport
from pysatl_mcdist.random_source import resolve_random_source
from pysatl_mcdist.types import DistributionName, FloatArray, Interpolation
from pysatl_mcdist.variants.base import (
    UnivariateDistribution,
    check_probabilities,
    scalar_or_array,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

FLAT_SEGMENT_RTOL: float = 1e-10
"""Relative difference of end-point densities below which a segment is flat."""

CDF_END_ATOL: float = 1e-6
"""Tolerance on the last value of a supplied CDF before a warning is issued."""

_SUPPORTED = (Interpolation.HISTOGRAM, Interpolation.LINEAR_LINEAR)


def _integrate(x: FloatArray, p: FloatArray, interpolation: Interpolation) -> FloatArray:
    """Unnormalized cumulative integral of the interpolated density at the grid points."""
    dx = np.diff(x)
    if interpolation is Interpolation.HISTOGRAM:
        mass = p[:-1] * dx
    else:
        mass = 0.5 * (p[:-1] + p[1:]) * dx
    return np.concatenate(([0.0], np.cumsum(mass)))


@dataclass(frozen=True, slots=True, eq=False)
class Tabular(UnivariateDistribution):
    """
    Histogram or linear-linear interpolated tabular distribution.

    Parameters
    ----------
    x : array_like
        Strictly increasing grid of the independent variable.
    p : array_like
        Non-negative density at each grid point. For histogram interpolation
        ``p[i]`` is the density on ``[x[i], x[i+1])`` and the last value is
        ignored.
    interpolation : Interpolation, default HISTOGRAM
        Interpolation rule between grid points.
    c : array_like, optional
        Precomputed cumulative distribution at the grid points. Computed from
        ``x`` and ``p`` when omitted.

    Attributes
    ----------
    cdf_table : numpy.ndarray
        Normalized cumulative distribution at the grid points.

    Notes
    -----
    ``dataclasses.replace(t, p=new_p)`` builds a new table whose cumulative
    distribution is recomputed from the new arrays.
    """

    x: FloatArray
    p: FloatArray
    interpolation: Interpolation = Interpolation.HISTOGRAM
    c: InitVar[ArrayLike | None] = None
    cdf_table: FloatArray = field(init=False, repr=False)

    _name: ClassVar[DistributionName] = DistributionName.TABULAR

    def __post_init__(self, c: ArrayLike | None) -> None:
        object.__setattr__(self, "x", as_float_array(self.x, "x", "Tabular"))
        object.__setattr__(self, "p", as_float_array(self.p, "p", "Tabular"))
        try:
            object.__setattr__(self, "interpolation", Interpolation(self.interpolation))
        except ValueError as exc:
            raise DistributionConfigurationError(
                f"Tabular: unknown interpolation rule '{self.interpolation}'"
            ) from exc
        self.validate()

        if c is None:
            cdf = _integrate(self.x, self.p, self.interpolation)
        else:
            cdf = np.array(as_float_array(c, "c", "Tabular"))
            if cdf.size != self.x.size:
                raise DistributionConfigurationError(
                    'Tabular: constraint "len(c) == len(x)" does not hold'
                )
            if not (np.all(np.isfinite(cdf)) and np.all(np.diff(cdf) >= 0.0)):
                raise DistributionConfigurationError(
                    'Tabular: constraint "c is finite and non-decreasing" does not hold'
                )
            if abs(cdf[-1] - 1.0) > CDF_END_ATOL:
                warnings.warn(
                    f"Tabular: supplied CDF ends at {cdf[-1]:.6g}, renormalizing to 1.",
                    RuntimeWarning,
                    stacklevel=3,
                )

        total = cdf[-1]
        if not (np.isfinite(total) and total > 0.0):
            raise DistributionConfigurationError(
                f'Tabular: constraint "total probability > 0" does not hold (got {total})'
            )
        p = self.p / total
        cdf = cdf / total
        cdf[-1] = 1.0
        p.flags.writeable = False
        cdf.flags.writeable = False
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "cdf_table", cdf)

    @constraint(description="len(x) == len(p)")
    def check_same_length(self) -> bool:
        """Check that every grid point has a density."""
        return self.x.size == self.p.size

    @constraint(description="len(x) >= 2")
    def check_enough_points(self) -> bool:
        """Check that the grid has at least one segment."""
        return self.x.size >= 2

    @constraint(description="x is finite and strictly increasing")
    def check_grid_increasing(self) -> bool:
        """Check that the grid is strictly increasing."""
        return bool(np.all(np.isfinite(self.x)) and np.all(np.diff(self.x) > 0.0))

    @constraint(description="p >= 0 and finite")
    def check_density_nonnegative(self) -> bool:
        """Check that density is non-negative."""
        return bool(np.all(np.isfinite(self.p)) and np.all(self.p >= 0.0))

    @constraint(description="interpolation is histogram or linear-linear")
    def check_interpolation_supported(self) -> bool:
        """Check that the interpolation rule can be sampled."""
        return self.interpolation in _SUPPORTED

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=float(self.x[0]), right=float(self.x[-1]))

    @property
    def mean(self) -> float:
        x0, x1 = self.x[:-1], self.x[1:]
        p0 = self.p[:-1]
        if self.interpolation is Interpolation.HISTOGRAM:
            return float(np.sum(p0 * (x1 * x1 - x0 * x0)) / 2.0)
        p1 = self.p[1:]
        dx = x1 - x0
        # integral of x*p(x) over a linear segment
        return float(np.sum(dx * (p0 * (2.0 * x0 + x1) + p1 * (x0 + 2.0 * x1)) / 6.0))

    def _locate(self, u: FloatArray) -> np.ndarray:
        """Index ``i`` of the bin ``[c[i], c[i+1])`` containing ``u``."""
        idx = np.searchsorted(self.cdf_table, u, side="right") - 1
        return np.clip(idx, 0, self.x.size - 2)

    def _invert(self, u: FloatArray) -> FloatArray:
        i = self._locate(u)
        x_i, x_i1 = self.x[i], self.x[i + 1]
        p_i = self.p[i]
        du = u - self.cdf_table[i]

        with np.errstate(divide="ignore", invalid="ignore"):
            linear = np.where(p_i > 0.0, x_i + du / p_i, x_i)
            if self.interpolation is Interpolation.HISTOGRAM:
                result = linear
            else:
                p_i1 = self.p[i + 1]
                m = (p_i1 - p_i) / (x_i1 - x_i)
                flat = np.abs(p_i1 - p_i) <= FLAT_SEGMENT_RTOL * np.maximum(p_i, p_i1)
                denom = p_i + np.sqrt(np.maximum(0.0, p_i * p_i + 2.0 * m * du))
                quadratic = np.where(denom > 0.0, x_i + 2.0 * du / denom, x_i)
                result = np.where(flat, linear, quadratic)

        return np.clip(result, x_i, x_i1)

    def ppf(self, u: ArrayLike) -> float | FloatArray:
        """Inverse of the interpolated cumulative distribution."""
        arr = check_probabilities(u)
        return scalar_or_array(self._invert(arr), u)

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """Interpolated cumulative distribution, 0 below ``x[0]`` and 1 above ``x[-1]``."""
        arr = np.asarray(x, dtype=np.float64)
        i = np.clip(np.searchsorted(self.x, arr, side="right") - 1, 0, self.x.size - 2)
        dx = np.clip(arr, self.x[0], self.x[-1]) - self.x[i]
        p_i = self.p[i]
        value = self.cdf_table[i] + p_i * dx
        if self.interpolation is Interpolation.LINEAR_LINEAR:
            m = (self.p[i + 1] - p_i) / (self.x[i + 1] - self.x[i])
            value = value + 0.5 * m * dx * dx
        return scalar_or_array(np.clip(value, 0.0, 1.0), x)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        u = resolve_random_source(rng).random()
        return float(self._invert(np.asarray(u)))
