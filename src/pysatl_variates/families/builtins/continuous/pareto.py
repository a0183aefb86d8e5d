"""
Pareto distribution family implementation.

Contains the Pareto (type I) family with shape and scale parameters.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.distributions.distribution import ContinuousDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable
from pysatl_variates.distributions.numeric import cf_from_pdf
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

_POSITIVE = ContinuousSupport(left=0.0, left_closed=False)


@parametrization(name="shape-scale")
class ParetoShapeScale(Parametrization):
    """
    Shape/scale parametrization of Pareto distribution.

    Parameters
    ----------
    shape : float
        Tail index α; falls back to 1.0 outside ``(0, inf)``.
    scale : float
        Minimum value x_m; falls back to 1.0 outside ``(0, inf)``.
    """

    shape: float = 1.0
    scale: float = 1.0

    @constraint(description="0 < shape < inf", fallback={"shape": 1.0})
    def check_shape_positive(self) -> bool:
        return 0.0 < self.shape < math.inf

    @constraint(description="0 < scale < inf", fallback={"scale": 1.0})
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf


class ParetoDistribution(
    ParametricDistribution[ParetoShapeScale, None], ContinuousDistribution
):
    """
    Pareto distribution.

    Probability density function:
        f(x) = α * x_m^α / x^(α + 1) for x ≥ x_m

    Variates are ``x_m * exp(E / α)`` for a standard exponential ``E``.
    Moments of order ``k >= α`` diverge: mean and variance report ``inf``,
    skewness and excess kurtosis report ``UNDEFINED``.
    """

    family_name = FamilyName.PARETO
    kind = Kind.CONTINUOUS
    parametrization_cls = ParetoShapeScale

    def __init__(
        self, shape: float = 1.0, scale: float = 1.0, *, engine: RandEngine | None = None
    ) -> None:
        super().__init__(engine, shape=shape, scale=scale)

    @property
    def shape(self) -> float:
        return self.parameters.shape

    @property
    def scale(self) -> float:
        return self.parameters.scale

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.scale)

    def pdf(self, x: float) -> float:
        if x < self.scale:
            return 0.0
        return math.exp(self.log_pdf(x))

    def log_pdf(self, x: float) -> float:
        if x < self.scale:
            return -math.inf
        a, m = self.shape, self.scale
        return math.log(a) + a * math.log(m) - (a + 1.0) * math.log(x)

    def cdf(self, x: float) -> float:
        if x <= self.scale:
            return 0.0
        return -math.expm1(self.shape * math.log(self.scale / x))

    def sf(self, x: float) -> float:
        if x <= self.scale:
            return 1.0
        return (self.scale / x) ** self.shape

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 1.0:
            return math.inf
        return self.scale * math.exp(-math.log1p(-p) / self.shape)

    def hazard(self, x: float) -> float:
        return self.shape / x if x >= self.scale else 0.0

    def cf(self, t: float) -> complex:
        return cf_from_pdf(self.pdf, t, self.support)

    def mean(self) -> float:
        a = self.shape
        if a <= 1.0:
            return math.inf
        return a * self.scale / (a - 1.0)

    def var(self) -> float:
        a = self.shape
        if a <= 2.0:
            return math.inf
        return self.scale**2 * a / ((a - 1.0) ** 2 * (a - 2.0))

    def median(self) -> float:
        return self.scale * 2.0 ** (1.0 / self.shape)

    def median_hint(self) -> float:
        return self.median()

    def mode(self) -> float:
        return self.scale

    def skewness(self) -> float:
        a = self.shape
        if a <= 3.0:
            return UNDEFINED
        return 2.0 * (1.0 + a) / (a - 3.0) * math.sqrt((a - 2.0) / a)

    def excess_kurtosis(self) -> float:
        a = self.shape
        if a <= 4.0:
            return UNDEFINED
        return 6.0 * (a**3 + a**2 - 6.0 * a - 2.0) / (a * (a - 3.0) * (a - 4.0))

    def entropy(self) -> float:
        return math.log(self.scale / self.shape) + 1.0 / self.shape + 1.0

    def variate(self) -> float:
        e = standard_exponential(self.engine)
        with np.errstate(over="ignore"):
            return float(self.scale * np.exp(e / self.shape))

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate: ``scale = min(x)``,
        ``shape = n / sum(log(x / scale))``.

        The gate is positivity of every observation rather than the current
        support, which depends on the scale being estimated. A sample with
        all observations equal has no finite shape estimate and is refused.
        """
        observations = as_observations(sample)
        if not is_fittable(_POSITIVE, observations) or not np.all(np.isfinite(observations)):
            return False
        scale = float(observations.min())
        log_sum = math.fsum(np.log(observations / scale).tolist())
        if log_sum <= 0.0:
            return False
        self.set_parameters(shape=observations.size / log_sum, scale=scale)
        return True


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return
    ParametricFamilyRegister.register(ParetoDistribution)
