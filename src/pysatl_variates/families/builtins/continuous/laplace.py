"""
Laplace distribution family implementation.

Contains the symmetric Laplace (double exponential) family with location and
scale parameters.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from typing import TYPE_CHECKING

import numpy as np

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
from pysatl_variates.stats.uniform import random_sign
from pysatl_variates.stats.ziggurat import standard_exponential
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine


@parametrization(name="location-scale")
class LaplaceLocationScale(Parametrization):
    """
    Location/scale parametrization of Laplace distribution.

    Parameters
    ----------
    location : float
        Location μ; falls back to 0.0 when not finite.
    scale : float
        Scale b; falls back to 1.0 outside ``(0, inf)``.
    """

    location: float = 0.0
    scale: float = 1.0

    @constraint(description="location is finite", fallback={"location": 0.0})
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    @constraint(description="0 < scale < inf", fallback={"scale": 1.0})
    def check_scale_positive(self) -> bool:
        return 0.0 < self.scale < math.inf


class LaplaceDistribution(
    ParametricDistribution[LaplaceLocationScale, None], ContinuousDistribution
):
    """
    Laplace distribution.

    Probability density function:
        f(x) = exp(-|x - μ| / b) / (2b)

    Variates are ``μ ± b * E``: a standard exponential draw with a sign taken
    from one engine bit.
    """

    family_name = FamilyName.LAPLACE
    kind = Kind.CONTINUOUS
    parametrization_cls = LaplaceLocationScale

    def __init__(
        self, location: float = 0.0, scale: float = 1.0, *, engine: RandEngine | None = None
    ) -> None:
        super().__init__(engine, location=location, scale=scale)

    @property
    def location(self) -> float:
        return self.parameters.location

    @property
    def scale(self) -> float:
        return self.parameters.scale

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def pdf(self, x: float) -> float:
        return 0.5 / self.scale * math.exp(-abs(x - self.location) / self.scale)

    def log_pdf(self, x: float) -> float:
        return -math.log(2.0 * self.scale) - abs(x - self.location) / self.scale

    def cdf(self, x: float) -> float:
        z = (x - self.location) / self.scale
        if z < 0.0:
            return 0.5 * math.exp(z)
        return 1.0 - 0.5 * math.exp(-z)

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p < 0.5:
            return self.location + self.scale * math.log(2.0 * p)
        return self.location - self.scale * math.log(2.0 - 2.0 * p)

    def cf(self, t: float) -> complex:
        bt = self.scale * t
        return cmath.exp(1j * self.location * t) / (1.0 + bt * bt)

    def mean(self) -> float:
        return self.location

    def var(self) -> float:
        return 2.0 * self.scale**2

    def median(self) -> float:
        return self.location

    def mode(self) -> float:
        return self.location

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        return 3.0

    def entropy(self) -> float:
        return 1.0 + math.log(2.0 * self.scale)

    def variate(self) -> float:
        e = standard_exponential(self.engine)
        return self.location + random_sign(self.engine) * self.scale * e

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate: location is the sample median, scale the
        mean absolute deviation from it. A constant sample is refused.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return False
        location = float(np.median(observations))
        scale = math.fsum(np.abs(observations - location).tolist()) / observations.size
        if scale <= 0.0:
            return False
        self.set_parameters(location=location, scale=scale)
        return True


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return
    ParametricFamilyRegister.register(LaplaceDistribution)
