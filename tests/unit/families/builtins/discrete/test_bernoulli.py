"""
Tests for Bernoulli Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math

import numpy as np
import pytest
from scipy.stats import bernoulli

from pysatl_variates.families import BernoulliDistribution, BetaDistribution
from pysatl_variates.types import FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestBernoulliFamily(BaseDistributionTest):
    """Test suite for Bernoulli distribution family."""

    def test_creation(self):
        dist = BernoulliDistribution(0.3)
        assert dist.family_name == FamilyName.BERNOULLI
        assert dist.parameters.parameters == {"p": 0.3}
        assert list(dist.support) == [0.0, 1.0]

    @pytest.mark.parametrize(
        "p, expected", [(1.5, 0.5), (-0.1, 0.5), (math.nan, 0.5), (0.0, 0.0), (1.0, 1.0)]
    )
    def test_probability_domain(self, p, expected):
        assert BernoulliDistribution(p).p == expected

    @pytest.mark.parametrize("p", [0.2, 0.5, 0.9])
    def test_pointwise_characteristics(self, p):
        dist = BernoulliDistribution(p)
        reference = bernoulli(p)
        points = np.array([-1.0, 0.0, 0.5, 1.0, 2.0])

        self.assert_arrays_almost_equal(self.evaluate(dist.pmf, points), reference.pmf(points))
        self.assert_arrays_almost_equal(self.evaluate(dist.cdf, points), reference.cdf(points))

        levels = np.array([0.05, 0.5, 0.95, 1.0])
        self.assert_arrays_almost_equal(self.evaluate(dist.ppf, levels), reference.ppf(levels))
        assert dist.ppf(0.0) == 0.0

    @pytest.mark.parametrize("p", [0.2, 0.5, 0.9])
    def test_moments(self, p):
        dist = BernoulliDistribution(p)
        mean, var, skew, kurt = bernoulli(p).stats(moments="mvsk")

        assert dist.mean() == pytest.approx(mean)
        assert dist.var() == pytest.approx(var)
        assert dist.skewness() == pytest.approx(skew, abs=1e-12)
        assert dist.excess_kurtosis() == pytest.approx(kurt)
        assert dist.entropy() == pytest.approx(bernoulli(p).entropy())

    @pytest.mark.parametrize("p, mode", [(0.2, 0.0), (0.5, 0.0), (0.7, 1.0)])
    def test_mode(self, p, mode):
        assert BernoulliDistribution(p).mode() == mode

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_degenerate(self, p):
        dist = BernoulliDistribution(p)
        assert dist.var() == 0.0
        assert dist.entropy() == 0.0
        assert math.isnan(dist.skewness())
        assert math.isnan(dist.excess_kurtosis())
        assert {dist.variate() for _ in range(20)} == {p}

    def test_characteristic_function(self):
        dist = BernoulliDistribution(0.3)
        assert dist.cf(1.2) == pytest.approx(0.7 + 0.3 * cmath.exp(1.2j))

    def test_sampling(self):
        dist = BernoulliDistribution(0.3, engine=self.make_engine())
        arr = dist.sample(self.SAMPLE_SIZE).array
        assert set(np.unique(arr).tolist()) == {0.0, 1.0}
        assert float(arr.mean()) == pytest.approx(0.3, abs=0.015)


class TestBernoulliEstimation(BaseDistributionTest):
    def test_mle(self):
        dist = BernoulliDistribution()
        assert dist.fit_mle([0, 1, 1, 1])
        assert dist.p == 0.75
        assert dist.fit_mm([0, 0, 0, 1])
        assert dist.p == 0.25

    @pytest.mark.parametrize("sample", [[], [0, 2], [0.5]], ids=["empty", "two", "fraction"])
    def test_refused_samples(self, sample):
        dist = BernoulliDistribution(0.3)
        assert not dist.fit_mle(sample)
        assert dist.fit_bayes(sample, BetaDistribution()) is None
        assert dist.p == 0.3

    def test_bayes_update(self):
        prior = BetaDistribution(2.0, 2.0)
        dist = BernoulliDistribution()

        posterior = dist.fit_bayes([1, 1, 0], prior)

        assert (posterior.alpha, posterior.beta) == (4.0, 3.0)
        assert dist.p == pytest.approx(4.0 / 7.0)
        assert (prior.alpha, prior.beta) == (2.0, 2.0)
