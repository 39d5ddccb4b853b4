"""
Core Type Definitions
=====================

Descriptors, numeric aliases, intervals and discriminators shared by the
distribution variants and the configuration layer.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether the outcomes of a distribution form a finite table or a continuum."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Outcome space of a univariate distribution.

    Parameters
    ----------
    kind : Kind
        Table of outcome values or real interval.
    """

    kind: Kind


UnivariateContinuous = DistributionType(kind=Kind.CONTINUOUS)
"""Outcomes on a real interval."""

UnivariateDiscrete = DistributionType(kind=Kind.DISCRETE)
"""Outcomes from a finite table."""

Number = np.floating[Any] | np.integer[Any] | int | float
NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
FloatArray = NDArray[np.float64]
BoolArray = NDArray[np.bool_]


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval ``[left, right]`` of the real line.

    Finite endpoints belong to the interval. Infinite endpoints are limits,
    so ``inf`` and ``-inf`` are never contained.

    Parameters
    ----------
    left : float, default=-inf
    right : float, default=inf
    """

    left: float = -inf
    right: float = inf

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Membership of a point, or elementwise membership of an array."""
        arr = np.asarray(x, dtype=np.float64)
        result = np.isfinite(arr) & (arr >= self.left) & (arr <= self.right)
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))




class Interpolation(StrEnum):
    """
    Interpolation rules for tabulated densities.

    Only ``HISTOGRAM`` and ``LINEAR_LINEAR`` can be sampled; the logarithmic
    ENDF rules are listed so that configuration naming them can be rejected
    with a precise message.

    Attributes
    ----------
    HISTOGRAM : str
        Piecewise-constant density between grid points.
    LINEAR_LINEAR : str
        Piecewise-linear density between grid points.
    LINEAR_LOG : str
        Density linear in ``ln(x)``.
    LOG_LINEAR : str
        ``ln(density)`` linear in ``x``.
    LOG_LOG : str
        ``ln(density)`` linear in ``ln(x)``.
    """

    HISTOGRAM = "histogram"
    LINEAR_LINEAR = "linear-linear"
    LINEAR_LOG = "linear-log"
    LOG_LINEAR = "log-linear"
    LOG_LOG = "log-log"


class DistributionName(StrEnum):
    """Type discriminators of the built-in distributions."""

    DISCRETE = "discrete"
    UNIFORM = "uniform"
    MAXWELL = "maxwell"
    WATT = "watt"
    TABULAR = "tabular"
    EQUIPROBABLE = "equiprobable"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "Interval1D",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "Interpolation",
    "DistributionName",
]
