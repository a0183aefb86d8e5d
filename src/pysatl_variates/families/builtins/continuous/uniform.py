"""
Uniform distribution family implementation.

Contains the continuous Uniform family on ``[low, high]``. Unlike the other
families its range is a strict precondition: ``low >= high`` raises.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import ContinuousDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.uniform import standard_uniform, uniform
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine


@parametrization(name="standard")
class UniformBounds(Parametrization):
    """
    Standard parametrization of uniform distribution.

    Parameters
    ----------
    low : float
        Lower bound of the distribution
    high : float
        Upper bound of the distribution
    """

    low: float = 0.0
    high: float = 1.0

    @constraint(description="bounds are finite")
    def check_bounds_finite(self) -> bool:
        return math.isfinite(self.low) and math.isfinite(self.high)

    @constraint(description="low < high")
    def check_low_less_than_high(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.low < self.high


class ContinuousUniformDistribution(
    ParametricDistribution[UniformBounds, None], ContinuousDistribution
):
    """
    Uniform (continuous) distribution.

    Probability density function:
        f(x) = 1/(high - low) for x in [low, high], 0 otherwise

    Raises
    ------
    ValueError
        If ``low >= high`` or a bound is not finite.
    """

    family_name = FamilyName.CONTINUOUS_UNIFORM
    kind = Kind.CONTINUOUS
    parametrization_cls = UniformBounds

    def __init__(
        self, low: float = 0.0, high: float = 1.0, *, engine: RandEngine | None = None
    ) -> None:
        super().__init__(engine, low=low, high=high)

    @staticmethod
    def standard_variate(engine: RandEngine | None = None) -> float:
        """Draw from ``Uniform(0, 1)``; never returns 0.0 or 1.0."""
        return standard_uniform(engine)

    @property
    def low(self) -> float:
        return self.parameters.low

    @property
    def high(self) -> float:
        return self.parameters.high

    @property
    def width(self) -> float:
        return self.high - self.low

    def set_bounds(self, low: float, high: float) -> None:
        self.set_parameters(low=low, high=high)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.low, right=self.high)

    def pdf(self, x: float) -> float:
        if x < self.low or x > self.high:
            return 0.0
        return 1.0 / self.width

    def cdf(self, x: float) -> float:
        if x <= self.low:
            return 0.0
        if x >= self.high:
            return 1.0
        return (x - self.low) / self.width

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        return self.low + p * self.width

    def cf(self, t: float) -> complex:
        if t == 0.0:
            return 1.0 + 0.0j
        num = cmath.exp(1j * t * self.high) - cmath.exp(1j * t * self.low)
        return num / (1j * t * self.width)

    def mean(self) -> float:
        return 0.5 * (self.low + self.high)

    def var(self) -> float:
        return self.width**2 / 12.0

    def median(self) -> float:
        return self.mean()

    def mode(self) -> float:
        """Every point of ``[low, high]`` is a mode; the midpoint is reported."""
        return self.mean()

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        return -1.2

    def entropy(self) -> float:
        return math.log(self.width)

    def variate(self) -> float:
        return uniform(self.low, self.high, self.engine)

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate: ``low = min(x)``, ``high = max(x)``.

        The gate is finiteness rather than the current support. A constant
        sample is refused.
        """
        observations = as_observations(sample)
        if not is_fittable(ContinuousSupport(), observations):
            return False
        low, high = float(observations.min()), float(observations.max())
        if low >= high:
            return False
        self.set_parameters(low=low, high=high)
        return True


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return
    ParametricFamilyRegister.register(ContinuousUniformDistribution)
