"""
Sampling Interfaces
===================

Sample containers and the strategies that fill them:

- :class:`ArraySample`: ``(n, 1)`` array-backed sample.
- :class:`DefaultSamplingUnivariateStrategy`: vectorized inverse transform
  through the distribution's ``ppf``.
- :class:`RejectionSamplingStrategy`: repeated scalar draws, for
  distributions sampled by rejection (Maxwell, Watt).

Notes
-----
- Strategies are stateless; the random source is passed per call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_mcdist.random_source import resolve_random_source

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_mcdist.distributions.distribution import Distribution


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample of a univariate distribution.

    Parameters
    ----------
    data : numpy.ndarray
        Either a 1D array of ``n`` draws or a 2D array of shape ``(n, 1)``.

    Raises
    ------
    ValueError
        If data is neither 1D nor a single-column 2D array.
    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2 or arr.shape[1] != 1:
            raise ValueError("ArraySample expects a 1D array or a 2D array of shape (n, 1).")
        self.data = arr

    def __len__(self) -> int:
        """Return the number of draws."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over the draws as floats."""
        for value in self.data[:, 0]:
            yield float(value)

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing ``(n, 1)`` array."""
        return self.data

    @property
    def values(self) -> npt.NDArray[np.floating[Any]]:
        """Return the draws as a flat array of length ``n``."""
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array ``(n, 1)``."""
        n, d = self.data.shape
        return int(n), int(d)


class SamplingStrategy(Protocol):
    """Protocol for batch sampling strategies (return a :class:`Sample`)."""

    def sample(
        self, n: int, distr: Distribution, rng: np.random.Generator | None = None, **options: Any
    ) -> Sample: ...


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}")


class DefaultSamplingUnivariateStrategy:
    """
    Inverse transform sampler.

    Draws ``n`` i.i.d. uniforms ``U ~ U[0, 1)`` at once and maps them through
    the distribution's vectorized ``ppf``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: Distribution, rng: np.random.Generator | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        source = resolve_random_source(rng)
        u = source.random(n)
        ppf = getattr(distr, "ppf", None)
        if ppf is None:
            raise TypeError(f"{type(distr).__name__} does not provide a ppf for inverse sampling.")
        return ArraySample(np.asarray(ppf(u), dtype=np.float64))


class RejectionSamplingStrategy:
    """
    Batch sampler for distributions without a closed-form inverse.

    Calls the scalar :meth:`Distribution.sample` ``n`` times with the same
    random source.
    """

    def sample(
        self, n: int, distr: Distribution, rng: np.random.Generator | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        source = resolve_random_source(rng)
        values = np.fromiter((distr.sample(source) for _ in range(n)), dtype=np.float64, count=n)
        return ArraySample(values)


__all__ = [
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "RejectionSamplingStrategy",
]
