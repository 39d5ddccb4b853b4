"""
Supports of univariate distributions: a continuous interval or a finite table
of outcome values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_mcdist.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


class ExplicitTableDiscreteSupport(Support):
    """
    Sorted, de-duplicated set of outcome values.

    Parameters
    ----------
    points : Iterable[Number]
        Outcome values, in any order and possibly repeated.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number]) -> None:
        arr = np.unique(np.asarray(list(points), dtype=np.float64))
        if arr.size == 0:
            raise ValueError("Points must be non-empty")
        arr.flags.writeable = False
        self._points = arr

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        idx = np.minimum(np.searchsorted(self._points, arr, side="left"), self._points.size - 1)
        result = self._points[idx] == arr

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def points(self) -> NumericArray:
        return self._points

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._points)


__all__ = [
    "Support",
    "ContinuousSupport",
    "ExplicitTableDiscreteSupport",
]
