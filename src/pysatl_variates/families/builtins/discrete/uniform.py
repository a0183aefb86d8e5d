"""
Discrete uniform distribution family implementation.

Equally likely integers ``low, low + 1, ..., high``. As for the continuous
uniform family the range is a strict precondition: ``low >= high`` raises.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import DiscreteDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable
from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.discrete import uniform_index
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine


@parametrization(name="bounds")
class DiscreteUniformBounds(Parametrization):
    """
    Integer bounds of discrete uniform distribution (both inclusive).

    Parameters
    ----------
    low : int
        Smallest value.
    high : int
        Largest value.
    """

    low: int = 0
    high: int = 1

    @constraint(description="bounds are integers")
    def check_bounds_integer(self) -> bool:
        return all(
            math.isfinite(v) and float(v).is_integer() for v in (self.low, self.high)
        )

    @constraint(description="low < high")
    def check_low_less_than_high(self) -> bool:
        return self.low < self.high


@dataclass(frozen=True, slots=True)
class _DiscreteUniformConstants:
    n: int
    log_n: float


class DiscreteUniformDistribution(
    ParametricDistribution[DiscreteUniformBounds, _DiscreteUniformConstants],
    DiscreteDistribution,
):
    """
    Discrete uniform distribution.

    Probability mass function:
        P(X = k) = 1 / n for k = low, ..., high, with n = high - low + 1

    Raises
    ------
    ValueError
        If ``low >= high`` or a bound is not an integer.
    """

    family_name = FamilyName.DISCRETE_UNIFORM
    kind = Kind.DISCRETE
    parametrization_cls = DiscreteUniformBounds

    def __init__(self, low: int = 0, high: int = 1, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine, low=low, high=high)

    def _derive(self, params: DiscreteUniformBounds) -> _DiscreteUniformConstants:
        n = int(params.high) - int(params.low) + 1
        return _DiscreteUniformConstants(n=n, log_n=math.log(n))

    @property
    def low(self) -> int:
        return int(self.parameters.low)

    @property
    def high(self) -> int:
        return int(self.parameters.high)

    def set_bounds(self, low: int, high: int) -> None:
        self.set_parameters(low=low, high=high)

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=self.low, max_k=self.high)

    def pmf(self, k: float) -> float:
        return 1.0 / self.derived.n if self.support.contains(k) else 0.0

    def log_pmf(self, k: float) -> float:
        return -self.derived.log_n if self.support.contains(k) else -math.inf

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < self.low:
            return 0.0
        if x >= self.high:
            return 1.0
        return (math.floor(x) - self.low + 1) / self.derived.n

    def ppf(self, p: float) -> float:
        """Smallest ``k`` with ``cdf(k) >= p``."""
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 0.0:
            return float(self.low)
        return float(self.low + max(math.ceil(p * self.derived.n) - 1, 0))

    def cf(self, t: float) -> complex:
        """Dirichlet-kernel form ``exp(it(low + high)/2) sin(nt/2) / (n sin(t/2))``."""
        n = self.derived.n
        half = 0.5 * t
        s = math.sin(half)
        if abs(s) < 1e-9:
            # t is a multiple of 2π: every term of the sum equals one
            return cmath.exp(1j * t * self.low)
        return cmath.exp(1j * half * (self.low + self.high)) * (math.sin(n * half) / (n * s))

    def mean(self) -> float:
        return 0.5 * (self.low + self.high)

    def var(self) -> float:
        n = self.derived.n
        return (n * n - 1.0) / 12.0

    def median(self) -> float:
        return self.ppf(0.5)

    def mode(self) -> float:
        """Every point of the support is a mode; the midpoint is reported."""
        return self.mean()

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        n = self.derived.n
        return -1.2 * (n * n + 1.0) / (n * n - 1.0)

    def entropy(self) -> float:
        return self.derived.log_n

    def variate(self) -> float:
        return self.low + uniform_index(self.derived.n, self.engine)

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate: ``low = min(x)``, ``high = max(x)``.

        Observations must be integers; a constant sample is refused.
        """
        observations = as_observations(sample)
        if not is_fittable(IntegerLatticeDiscreteSupport(), observations):
            return False
        low, high = int(observations.min()), int(observations.max())
        if low >= high:
            return False
        self.set_parameters(low=low, high=high)
        return True


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the discrete Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return
    ParametricFamilyRegister.register(DiscreteUniformDistribution)
