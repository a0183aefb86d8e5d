"""
Exponential distribution family implementation.

Contains the Exponential family in rate parametrization, sampled by the
ziggurat standard exponential.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import ContinuousDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable, sample_mean
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.ziggurat import standard_exponential
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine


@parametrization(name="rate")
class ExponentialRate(Parametrization):
    """
    Rate parametrization of exponential distribution.

    Parameters
    ----------
    rate : float
        Rate parameter (λ) of the distribution; falls back to 1.0 outside
        ``(0, inf)``.
    """

    rate: float = 1.0

    @constraint(description="0 < rate < inf", fallback={"rate": 1.0})
    def check_rate_positive(self) -> bool:
        """Check that rate parameter is positive and finite."""
        return 0.0 < self.rate < math.inf


class ExponentialDistribution(
    ParametricDistribution[ExponentialRate, None], ContinuousDistribution
):
    """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process.

    Probability density function:
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Parameters
    ----------
    rate : float, default 1.0
        Rate λ; non-positive values fall back to 1.0.
    engine : RandEngine or None, default None
        Bit generator for :meth:`variate`.
    """

    family_name = FamilyName.EXPONENTIAL
    kind = Kind.CONTINUOUS
    parametrization_cls = ExponentialRate

    def __init__(self, rate: float = 1.0, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine, rate=rate)

    @property
    def rate(self) -> float:
        return self.parameters.rate

    @property
    def scale(self) -> float:
        """Scale β = 1/λ."""
        return 1.0 / self.parameters.rate

    def set_rate(self, rate: float) -> None:
        self.set_parameters(rate=rate)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return self.rate * math.exp(-self.rate * x)

    def log_pdf(self, x: float) -> float:
        if x < 0.0:
            return -math.inf
        return math.log(self.rate) - self.rate * x

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return -math.expm1(-self.rate * x)

    def sf(self, x: float) -> float:
        if x <= 0.0:
            return 1.0
        return math.exp(-self.rate * x)

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.rate

    def hazard(self, x: float) -> float:
        return self.rate if x >= 0.0 else 0.0

    def cf(self, t: float) -> complex:
        return self.rate / complex(self.rate, -t)

    def mean(self) -> float:
        return 1.0 / self.rate

    def var(self) -> float:
        return 1.0 / self.rate**2

    def median(self) -> float:
        return math.log(2.0) / self.rate

    def mode(self) -> float:
        return 0.0

    def skewness(self) -> float:
        return 2.0

    def excess_kurtosis(self) -> float:
        return 6.0

    def entropy(self) -> float:
        return 1.0 - math.log(self.rate)

    def moment(self, n: int) -> float:
        """Raw moment ``E[X^n] = n! / λ^n``."""
        if n < 0:
            return UNDEFINED
        return math.factorial(n) / self.rate**n

    def variate(self) -> float:
        return standard_exponential(self.engine) / self.rate

    def fit_mle(self, sample: Observations, *, unbiased: bool = False) -> bool:
        """
        Maximum-likelihood estimate of the rate, ``1 / mean``.

        Parameters
        ----------
        sample : Sample or array_like
            Non-negative observations.
        unbiased : bool, default False
            Use the unbiased estimator ``(n - 1) / (n * mean)``; needs ``n > 1``.

        Returns
        -------
        bool
            ``False`` (parameters unchanged) for an empty, invalid or
            all-zero sample.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return False
        n = observations.size
        if unbiased and n < 2:
            return False
        mean = sample_mean(observations)
        if not 0.0 < mean < math.inf:
            return False
        rate = (n - 1) / (n * mean) if unbiased else 1.0 / mean
        self.set_parameters(rate=rate)
        return True

    def fit_mm(self, sample: Observations) -> bool:
        """Method of moments; coincides with :meth:`fit_mle`."""
        return self.fit_mle(sample)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return
    ParametricFamilyRegister.register(ExponentialDistribution)
