"""
Tests for the Discrete distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest

from pysatl_mcdist.distributions.constraints import DistributionConfigurationError
from pysatl_mcdist.distributions.support import ExplicitTableDiscreteSupport
from pysatl_mcdist.types import DistributionName, Kind, UnivariateDiscrete
from pysatl_mcdist.variants import Discrete

from .base import BaseDistributionTest


class TestDiscrete(BaseDistributionTest):
    """Test suite for the Discrete distribution."""

    def setup_method(self):
        self.dist = Discrete(x=[1.0, 2.0, 3.0], p=[1.0, 2.0, 1.0])

    def test_properties(self):
        assert self.dist.name == DistributionName.DISCRETE
        assert self.dist.distribution_type == UnivariateDiscrete
        assert self.dist.distribution_type.kind is Kind.DISCRETE
        assert isinstance(self.dist.support, ExplicitTableDiscreteSupport)
        assert 2.0 in self.dist.support
        assert 2.5 not in self.dist.support

    def test_probabilities_are_normalized(self):
        self.assert_arrays_almost_equal(self.dist.p, np.array([0.25, 0.5, 0.25]))
        assert self.dist.mean == pytest.approx(2.0)

    def test_arrays_are_read_only(self):
        with pytest.raises(ValueError):
            self.dist.p[0] = 1.0
        with pytest.raises(ValueError):
            self.dist.x[0] = 1.0

    def test_input_is_copied(self):
        x = np.array([1.0, 2.0])
        dist = Discrete(x=x, p=[1.0, 1.0])
        x[0] = 10.0
        assert dist.x[0] == 1.0

    def test_ppf_selects_first_cumulative_above_u(self):
        result = self.dist.ppf(np.array([0.0, 0.2, 0.25, 0.74, 0.75, 0.99]))
        self.assert_arrays_almost_equal(result, np.array([1.0, 1.0, 2.0, 2.0, 3.0, 3.0]))

    def test_ppf_of_one_skips_trailing_zero_mass(self):
        dist = Discrete(x=[1.0, 2.0, 3.0], p=[0.0, 1.0, 0.0])
        assert dist.ppf(1.0) == 2.0
        assert dist.ppf(0.0) == 2.0

    def test_ppf_rejects_invalid_probabilities(self):
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            self.dist.ppf(1.5)

    def test_cdf(self):
        result = self.dist.cdf(np.array([0.5, 1.0, 2.5, 3.0, 10.0]))
        self.assert_arrays_almost_equal(result, np.array([0.0, 0.25, 0.75, 1.0, 1.0]))
        assert isinstance(self.dist.cdf(2.0), float)

    def test_zero_probability_outcomes_never_sampled(self):
        dist = Discrete(x=[1.0, 2.0, 3.0], p=[0.0, 1.0, 0.0])
        rng = self.rng()
        assert {dist.sample(rng) for _ in range(1000)} == {2.0}

    def test_single_outcome(self):
        dist = Discrete(x=[7.0], p=[3.0])
        assert dist.sample(self.rng()) == 7.0
        assert dist.p[0] == 1.0

    def test_sample_n(self):
        sample = self.dist.sample_n(500, rng=self.rng())
        assert sample.shape == (500, 1)
        assert set(np.unique(sample.values)) <= {1.0, 2.0, 3.0}

    @pytest.mark.parametrize(
        "x, p, message",
        [
            ([1.0, 2.0], [1.0], "len\\(x\\) == len\\(p\\)"),
            ([], [], "len\\(x\\) >= 1"),
            ([1.0, np.inf], [1.0, 1.0], "x is finite"),
            ([1.0, 2.0], [1.0, -0.5], "p >= 0 and finite"),
            ([1.0, 2.0], [1.0, np.nan], "p >= 0 and finite"),
            ([1.0, 2.0], [0.0, 0.0], "sum\\(p\\) > 0"),
            ([1.0, 2.0], [1e308, 1e308], "sum\\(p\\) > 0 and finite"),
        ],
    )
    def test_constraints(self, x, p, message):
        with pytest.raises(DistributionConfigurationError, match=message):
            Discrete(x=x, p=p)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError, match="Discrete: constraint"):
            Discrete(x=[1.0], p=[1.0, 2.0])
