"""
Tests for Zeta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import special
from scipy.stats import zipf

from pysatl_variates.families import ZetaDistribution
from pysatl_variates.types import FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


def truncated_masses(s: float, terms: int = 200_000) -> tuple[np.ndarray, np.ndarray]:
    k = np.arange(1, terms + 1, dtype=float)
    return k, k**-s / special.zeta(s)


class TestZetaFamily(BaseDistributionTest):
    """Test suite for Zeta distribution family."""

    def test_creation(self):
        dist = ZetaDistribution(3.0)
        assert dist.family_name == FamilyName.ZETA
        assert dist.parameters.parameters == {"s": 3.0}
        assert dist.derived.zeta_s == pytest.approx(special.zeta(3.0))
        assert dist.support.first() == 1

    @pytest.mark.parametrize("s", [1.0, 0.5, -3.0, math.inf, math.nan])
    def test_out_of_domain_exponent_falls_back(self, s):
        assert ZetaDistribution(s).s == 2.0

    @pytest.mark.parametrize("s", [1.5, 3.0, 6.0])
    def test_pointwise_characteristics(self, s):
        dist = ZetaDistribution(s)
        reference = zipf(s)
        points = np.array([0.0, 1.0, 2.0, 2.5, 5.0, 40.0])

        self.assert_arrays_almost_equal(self.evaluate(dist.pmf, points), reference.pmf(points))
        self.assert_arrays_almost_equal(
            self.evaluate(dist.cdf, points), reference.cdf(points), precision=1e-9
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.sf, points), reference.sf(points), precision=1e-9
        )

    @pytest.mark.parametrize("s", [1.5, 3.0])
    def test_ppf(self, s):
        dist = ZetaDistribution(s)
        for level in (0.1, 0.5, 0.7, 0.95, 0.999):
            k = dist.ppf(level)
            assert k >= 1
            assert dist.cdf(k) >= level
            assert k == 1 or dist.cdf(k - 1) < level
        assert dist.ppf(0.0) == 1.0
        assert dist.ppf(1.0) == math.inf

    def test_ppf_heavy_tail(self):
        # tail mass ~ k^(1 - s) / ((s - 1) zeta(s)): the 0.99 quantile is near 5.6e39
        dist = ZetaDistribution(1.05)
        k = dist.ppf(0.99)
        assert math.isfinite(k)
        assert 1e39 < k < 1e41
        assert dist.cdf(k) >= 0.99
        assert dist.cdf(k / 2) < 0.99

    def test_moments(self):
        dist = ZetaDistribution(6.5)
        mean, var, skew, kurt = zipf(6.5).stats(moments="mvsk")

        assert dist.mean() == pytest.approx(mean)
        assert dist.var() == pytest.approx(var)
        assert dist.skewness() == pytest.approx(skew)
        assert dist.excess_kurtosis() == pytest.approx(kurt)
        assert dist.median() == 1.0
        assert dist.mode() == 1.0

    @pytest.mark.parametrize(
        "s, mean_inf, var_inf, skew_nan, kurt_nan",
        [
            (1.5, True, True, True, True),
            (2.0, True, True, True, True),
            (2.5, False, True, True, True),
            (3.5, False, False, True, True),
            (4.5, False, False, False, True),
            (5.5, False, False, False, False),
        ],
    )
    def test_divergent_moments(self, s, mean_inf, var_inf, skew_nan, kurt_nan):
        dist = ZetaDistribution(s)
        assert (dist.mean() == math.inf) is mean_inf
        assert (dist.var() == math.inf) is var_inf
        assert math.isnan(dist.skewness()) is skew_nan
        assert math.isnan(dist.excess_kurtosis()) is kurt_nan

    @pytest.mark.parametrize("t", [-1.0, 0.0, 0.8])
    def test_characteristic_function(self, t):
        dist = ZetaDistribution(5.0)
        k, masses = truncated_masses(5.0)
        expected = complex(np.sum(masses * np.exp(1j * t * k)))
        assert dist.cf(t) == pytest.approx(expected, abs=1e-12)

    def test_entropy(self):
        dist = ZetaDistribution(5.0)
        _, masses = truncated_masses(5.0)
        expected = float(-np.sum(masses * np.log(masses)))
        assert dist.entropy() == pytest.approx(expected, abs=1e-12)

    def test_sampling(self):
        dist = ZetaDistribution(4.0, engine=self.make_engine())
        arr = dist.sample(self.SAMPLE_SIZE).array

        assert (arr >= 1).all()
        assert np.all(arr == np.floor(arr))
        assert float(np.mean(arr == 1)) == pytest.approx(dist.pmf(1), abs=0.01)
        assert float(np.mean(arr == 2)) == pytest.approx(dist.pmf(2), abs=0.01)
        assert float(arr.mean()) == pytest.approx(dist.mean(), abs=0.03)


class TestZetaEstimation(BaseDistributionTest):
    def test_mle_recovers_exponent(self):
        sample = ZetaDistribution(3.0, engine=self.make_engine(3)).sample(self.SAMPLE_SIZE)
        dist = ZetaDistribution()

        assert dist.fit_mle(sample)
        assert dist.s == pytest.approx(3.0, abs=0.1)

    def test_mle_is_likelihood_maximiser(self):
        data = [1, 1, 1, 2, 3, 1, 5, 2, 1, 12]
        dist = ZetaDistribution()
        assert dist.fit_mle(data)

        best = dist.log_likelihood(data)
        for step in (-1e-3, 1e-3):
            assert ZetaDistribution(dist.s + step).log_likelihood(data) <= best + 1e-12

    def test_mle_score_equation(self):
        # d/ds log zeta(s) = -mean(log x) at the estimate
        data = np.array([1, 2, 1, 4, 1, 1, 3, 7])
        dist = ZetaDistribution()
        assert dist.fit_mle(data)

        h = 1e-5
        slope = (
            math.log(special.zeta(dist.s + h)) - math.log(special.zeta(dist.s - h))
        ) / (2 * h)
        assert slope == pytest.approx(-float(np.mean(np.log(data))), rel=1e-4)

    @pytest.mark.parametrize(
        "sample",
        [[], [1, 1, 1], [0, 2], [1.5, 2]],
        ids=["empty", "only_ones", "outside", "fractional"],
    )
    def test_refused_samples(self, sample):
        dist = ZetaDistribution(2.5)
        assert not dist.fit_mle(sample)
        assert dist.s == 2.5
