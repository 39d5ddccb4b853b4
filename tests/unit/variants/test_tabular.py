"""
Tests for the Tabular distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import dataclasses

import numpy as np
import pytest

from pysatl_mcdist.distributions.constraints import DistributionConfigurationError
from pysatl_mcdist.types import DistributionName, Interpolation
from pysatl_mcdist.variants import Tabular

from .base import BaseDistributionTest


class TestTabularHistogram(BaseDistributionTest):
    """Histogram interpolation."""

    def setup_method(self):
        self.dist = Tabular(x=[0.0, 1.0, 3.0], p=[2.0, 1.0, 5.0])

    def test_properties(self):
        assert self.dist.name == DistributionName.TABULAR
        assert self.dist.interpolation is Interpolation.HISTOGRAM
        assert self.dist.support.left == 0.0
        assert self.dist.support.right == 3.0

    def test_cdf_table_is_normalized(self):
        self.assert_arrays_almost_equal(self.dist.cdf_table, np.array([0.0, 0.5, 1.0]))
        self.assert_arrays_almost_equal(self.dist.p, np.array([0.5, 0.25, 1.25]))

    def test_ppf(self):
        result = self.dist.ppf(np.array([0.0, 0.25, 0.5, 0.75, 1.0]))
        self.assert_arrays_almost_equal(result, np.array([0.0, 0.5, 1.0, 2.0, 3.0]))

    def test_cdf(self):
        result = self.dist.cdf(np.array([-1.0, 0.5, 1.0, 2.0, 3.0, 4.0]))
        self.assert_arrays_almost_equal(result, np.array([0.0, 0.25, 0.5, 0.75, 1.0, 1.0]))

    def test_mean(self):
        assert self.dist.mean == pytest.approx(1.25)

    def test_zero_density_bin_never_sampled(self):
        dist = Tabular(x=[0.0, 1.0, 2.0, 3.0], p=[1.0, 0.0, 1.0, 0.0])
        values = dist.sample_n(self.SAMPLE_SIZE, rng=self.rng()).values
        assert not np.any((values > 1.0) & (values < 2.0))
        assert np.all((values >= 0.0) & (values <= 3.0))

    def test_samples_inside_grid(self):
        rng = self.rng()
        values = np.array([self.dist.sample(rng) for _ in range(1000)])
        assert np.all((values >= 0.0) & (values <= 3.0))

    def test_arrays_are_read_only(self):
        with pytest.raises(ValueError):
            self.dist.cdf_table[0] = 0.5
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.dist.x = np.array([0.0, 1.0])

    def test_replace_recomputes_cdf(self):
        other = dataclasses.replace(self.dist, p=[1.0, 1.0, 0.0])
        self.assert_arrays_almost_equal(other.cdf_table, np.array([0.0, 1.0 / 3.0, 1.0]))


class TestTabularLinear(BaseDistributionTest):
    """Linear-linear interpolation."""

    def setup_method(self):
        self.dist = Tabular(
            x=[0.0, 1.0, 2.0, 4.0], p=[0.5, 1.0, 0.2, 0.7], interpolation="linear-linear"
        )

    def test_interpolation_is_coerced(self):
        assert self.dist.interpolation is Interpolation.LINEAR_LINEAR

    def test_cdf_matches_table_at_grid_points(self):
        self.assert_arrays_almost_equal(self.dist.cdf(self.dist.x), self.dist.cdf_table)
        assert self.dist.cdf_table[-1] == 1.0

    def test_ppf_inverts_cdf(self):
        u = np.linspace(0.0, 1.0, 41)
        self.assert_arrays_almost_equal(self.dist.cdf(self.dist.ppf(u)), u, precision=1e-9)

    def test_triangle(self):
        dist = Tabular(
            x=[0.0, 1.0, 2.0], p=[0.0, 1.0, 0.0], interpolation=Interpolation.LINEAR_LINEAR
        )
        self.assert_arrays_almost_equal(dist.cdf_table, np.array([0.0, 0.5, 1.0]))
        assert dist.ppf(0.125) == pytest.approx(0.5)
        assert dist.ppf(0.5) == pytest.approx(1.0)
        assert dist.ppf(0.875) == pytest.approx(1.5)
        assert dist.mean == pytest.approx(1.0)

    def test_flat_segment_uses_linear_inverse(self):
        dist = Tabular(x=[0.0, 2.0], p=[3.0, 3.0], interpolation="linear-linear")
        assert dist.ppf(0.5) == pytest.approx(1.0)
        assert dist.ppf(0.25) == pytest.approx(0.5)

    def test_mean_matches_numerical_integration(self):
        grid = np.linspace(0.0, 4.0, 40001)
        density = np.interp(grid, self.dist.x, self.dist.p)
        expected = np.trapezoid(grid * density, grid)
        assert self.dist.mean == pytest.approx(expected, rel=1e-6)


class TestTabularConfiguration:
    """Construction checks."""

    def test_supplied_cdf_is_used(self):
        dist = Tabular(x=[0.0, 1.0, 2.0], p=[1.0, 1.0, 1.0], c=[0.0, 0.5, 1.0])
        np.testing.assert_array_almost_equal(dist.cdf_table, [0.0, 0.5, 1.0])

    def test_supplied_cdf_not_ending_at_one_warns(self):
        with pytest.warns(RuntimeWarning, match="renormalizing"):
            dist = Tabular(x=[0.0, 1.0], p=[1.0, 1.0], c=[0.0, 2.0])
        assert dist.cdf_table[-1] == 1.0
        np.testing.assert_array_almost_equal(dist.p, [0.5, 0.5])

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"x": [0.0, 1.0], "p": [1.0]}, "len\\(x\\) == len\\(p\\)"),
            ({"x": [0.0], "p": [1.0]}, "len\\(x\\) >= 2"),
            ({"x": [0.0, 2.0, 1.0], "p": [1.0, 1.0, 1.0]}, "strictly increasing"),
            ({"x": [0.0, 1.0, 1.0], "p": [1.0, 1.0, 1.0]}, "strictly increasing"),
            ({"x": [0.0, 1.0], "p": [-1.0, 1.0]}, "p >= 0"),
            ({"x": [0.0, 1.0], "p": [0.0, 0.0]}, "total probability > 0"),
            ({"x": [0.0, 1.0], "p": [1.0, 1.0], "interpolation": "log-log"}, "linear-linear"),
            ({"x": [0.0, 1.0], "p": [1.0, 1.0], "interpolation": "cubic"}, "unknown interpolation"),
            ({"x": [0.0, 1.0], "p": [1.0, 1.0], "c": [0.0, 0.5, 1.0]}, "len\\(c\\) == len\\(x\\)"),
            ({"x": [0.0, 1.0], "p": [1.0, 1.0], "c": [0.5, 0.0]}, "non-decreasing"),
        ],
    )
    def test_constraints(self, kwargs, message):
        with pytest.raises(DistributionConfigurationError, match=message):
            Tabular(**kwargs)
