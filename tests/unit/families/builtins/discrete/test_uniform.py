"""
Tests for Discrete Uniform Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math

import numpy as np
import pytest
from scipy.stats import randint

from pysatl_variates.families import DiscreteUniformDistribution
from pysatl_variates.types import FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import ConstantEngine


class TestDiscreteUniformFamily(BaseDistributionTest):
    """Test suite for discrete Uniform distribution family."""

    low, high = -2, 4

    @pytest.fixture(autouse=True)
    def _setup(self):
        self.dist = DiscreteUniformDistribution(self.low, self.high)
        self.reference = randint(self.low, self.high + 1)

    def test_creation(self):
        assert self.dist.family_name == FamilyName.DISCRETE_UNIFORM
        assert self.dist.parameters.parameters == {"low": -2, "high": 4}
        assert self.dist.derived.n == 7
        assert list(self.dist.support) == list(range(-2, 5))

    @pytest.mark.parametrize(
        "low, high, match",
        [
            (3, 3, "low < high"),
            (5, 1, "low < high"),
            (0.5, 3, "integers"),
            (0, math.inf, "integers"),
        ],
    )
    def test_invalid_bounds_raise(self, low, high, match):
        with pytest.raises(ValueError, match=match):
            DiscreteUniformDistribution(low, high)

    def test_set_bounds(self):
        self.dist.set_bounds(1, 3)
        assert (self.dist.low, self.dist.high, self.dist.derived.n) == (1, 3, 3)
        with pytest.raises(ValueError):
            self.dist.set_bounds(3, 1)
        assert (self.dist.low, self.dist.high) == (1, 3)

    def test_pointwise_characteristics(self):
        points = np.array([-3.0, -2.0, 0.0, 0.5, 4.0, 5.0])
        ref = self.reference
        self.assert_arrays_almost_equal(self.evaluate(self.dist.pmf, points), ref.pmf(points))
        self.assert_arrays_almost_equal(self.evaluate(self.dist.cdf, points), ref.cdf(points))

        levels = np.array([0.1, 0.5, 0.99, 1.0])
        self.assert_arrays_almost_equal(self.evaluate(self.dist.ppf, levels), ref.ppf(levels))
        assert self.dist.ppf(0.0) == self.low

    @pytest.mark.parametrize("t", [-1.3, 0.0, 0.4, 2.0 * math.pi, 5.0])
    def test_characteristic_function(self, t):
        expected = sum(cmath.exp(1j * t * k) for k in range(self.low, self.high + 1)) / 7.0
        assert self.dist.cf(t) == pytest.approx(expected, abs=1e-12)

    def test_moments(self):
        mean, var, skew, kurt = self.reference.stats(moments="mvsk")
        assert self.dist.mean() == pytest.approx(mean)
        assert self.dist.var() == pytest.approx(var)
        assert self.dist.skewness() == 0.0
        assert self.dist.excess_kurtosis() == pytest.approx(kurt)
        assert self.dist.median() == self.reference.median()
        assert self.dist.mode() == 1.0
        assert self.dist.entropy() == pytest.approx(math.log(7.0))

    def test_variate_reduces_engine_word(self):
        dist = DiscreteUniformDistribution(10, 14, engine=ConstantEngine(7))
        assert dist.variate() == 12.0

    def test_sampling(self):
        dist = DiscreteUniformDistribution(self.low, self.high, engine=self.make_engine())
        arr = dist.sample(self.SAMPLE_SIZE).array

        values, counts = np.unique(arr, return_counts=True)
        assert values.tolist() == list(range(-2, 5))
        np.testing.assert_allclose(counts / self.SAMPLE_SIZE, 1.0 / 7.0, atol=0.012)

    def test_sampling_range_wider_than_engine_word(self):
        low, high = -(2**20), 2**40
        dist = DiscreteUniformDistribution(low, high, engine=self.make_engine(2))
        arr = dist.sample(self.SAMPLE_SIZE).array.ravel()

        assert arr.min() >= low
        assert arr.max() <= high
        assert arr.max() > 2**32
        assert float(arr.mean()) == pytest.approx(dist.mean(), rel=0.02)


class TestDiscreteUniformEstimation(BaseDistributionTest):
    def test_mle_uses_extremes(self):
        dist = DiscreteUniformDistribution()
        assert dist.fit_mle([3, 7, 5])
        assert (dist.low, dist.high) == (3, 7)

    @pytest.mark.parametrize(
        "sample", [[], [2, 2], [1, 2.5]], ids=["empty", "constant", "fractional"]
    )
    def test_refused_samples(self, sample):
        dist = DiscreteUniformDistribution(0, 1)
        assert not dist.fit_mle(sample)
        assert (dist.low, dist.high) == (0, 1)
