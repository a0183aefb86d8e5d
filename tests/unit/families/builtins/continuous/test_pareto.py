"""
Tests for Pareto Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import pareto

from pysatl_variates.families import ParetoDistribution
from pysatl_variates.types import FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestParetoFamily(BaseDistributionTest):
    """Test suite for Pareto distribution family."""

    shape, scale = 5.0, 2.0

    @pytest.fixture(autouse=True)
    def _setup(self):
        self.dist = ParetoDistribution(self.shape, self.scale)
        self.reference = pareto(b=self.shape, scale=self.scale)

    def test_creation(self):
        assert self.dist.family_name == FamilyName.PARETO
        assert self.dist.parameters.parameters == {"shape": 5.0, "scale": 2.0}
        assert self.dist.support.left == 2.0

    @pytest.mark.parametrize(
        "shape, scale, expected",
        [(-1.0, 2.0, (1.0, 2.0)), (3.0, 0.0, (3.0, 1.0)), (math.nan, -5.0, (1.0, 1.0))],
    )
    def test_fallback(self, shape, scale, expected):
        dist = ParetoDistribution(shape, scale)
        assert (dist.shape, dist.scale) == expected

    def test_pointwise_characteristics(self):
        points = np.array([1.0, 2.0, 2.5, 4.0, 50.0])
        ref = self.reference
        self.assert_arrays_almost_equal(self.evaluate(self.dist.pdf, points), ref.pdf(points))
        self.assert_arrays_almost_equal(self.evaluate(self.dist.cdf, points), ref.cdf(points))
        self.assert_arrays_almost_equal(self.evaluate(self.dist.sf, points), ref.sf(points))

    def test_ppf(self):
        levels = np.array([0.0, 0.1, 0.5, 0.99])
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.ppf, levels), self.reference.ppf(levels)
        )
        assert self.dist.ppf(1.0) == math.inf
        assert math.isnan(self.dist.ppf(2.0))

    def test_hazard(self):
        assert self.dist.hazard(4.0) == pytest.approx(self.shape / 4.0)
        assert self.dist.hazard(1.0) == 0.0

    def test_moments(self):
        mean, var, skew, kurt = self.reference.stats(moments="mvsk")
        assert self.dist.mean() == pytest.approx(mean)
        assert self.dist.var() == pytest.approx(var)
        assert self.dist.skewness() == pytest.approx(skew)
        assert self.dist.excess_kurtosis() == pytest.approx(kurt)
        assert self.dist.median() == pytest.approx(self.reference.median())
        assert self.dist.mode() == self.scale
        assert self.dist.entropy() == pytest.approx(self.reference.entropy())

    @pytest.mark.parametrize(
        "shape, mean_inf, var_inf, skew_nan, kurt_nan",
        [
            (1.0, True, True, True, True),
            (2.0, False, True, True, True),
            (3.0, False, False, True, True),
            (4.0, False, False, False, True),
            (4.5, False, False, False, False),
        ],
    )
    def test_divergent_moments(self, shape, mean_inf, var_inf, skew_nan, kurt_nan):
        dist = ParetoDistribution(shape, 1.0)
        assert (dist.mean() == math.inf) is mean_inf
        assert (dist.var() == math.inf) is var_inf
        assert math.isnan(dist.skewness()) is skew_nan
        assert math.isnan(dist.excess_kurtosis()) is kurt_nan

    def test_characteristic_function(self):
        assert self.dist.cf(0.0) == 1.0
        h = 1e-3
        # cf'(0) = i E[X]
        derivative = (self.dist.cf(h) - self.dist.cf(-h)) / (2.0 * h)
        assert derivative.imag == pytest.approx(self.dist.mean(), rel=1e-3)
        assert abs(self.dist.cf(3.0)) <= 1.0

    def test_sampling(self):
        dist = ParetoDistribution(self.shape, self.scale, engine=self.make_engine())
        arr = dist.sample(self.SAMPLE_SIZE).array

        assert (arr >= self.scale).all()
        assert float(np.median(arr)) == pytest.approx(dist.median(), rel=0.01)
        assert float(arr.mean()) == pytest.approx(dist.mean(), rel=0.01)


class TestParetoEstimation(BaseDistributionTest):
    def test_mle_recovers_parameters(self):
        sample = ParetoDistribution(3.0, 2.0, engine=self.make_engine(2)).sample(
            self.SAMPLE_SIZE
        )
        dist = ParetoDistribution()

        assert dist.fit_mle(sample)
        assert dist.scale == pytest.approx(2.0, rel=1e-3)
        assert dist.scale >= 2.0
        assert dist.shape == pytest.approx(3.0, rel=0.05)

    def test_mle_closed_form(self):
        dist = ParetoDistribution()
        assert dist.fit_mle([1.0, math.e, math.e**2])
        assert dist.scale == 1.0
        assert dist.shape == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "sample",
        [[], [0.0, 1.0], [-1.0, 2.0], [2.0, 2.0, 2.0], [1.0, math.inf]],
        ids=["empty", "zero", "negative", "constant", "infinite"],
    )
    def test_refused_samples(self, sample):
        dist = ParetoDistribution(4.0, 3.0)
        assert not dist.fit_mle(sample)
        assert (dist.shape, dist.scale) == (4.0, 3.0)
