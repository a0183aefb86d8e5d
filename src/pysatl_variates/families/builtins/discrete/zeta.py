"""
Zeta distribution family implementation.

Zipf law on the positive integers with exponent ``s > 1``. Variates come from
Devroye's rejection sampler; the CDF uses the Hurwitz zeta function and the
quantile, characteristic function and entropy fall back to numeric series. The
exponent is fitted by numerically maximising the likelihood.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy import optimize as _sp_optimize
from scipy import special as _sp_special

from pysatl_variates.distributions.distribution import DiscreteDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable
from pysatl_variates.distributions.numeric import (
    cf_from_pmf,
    discrete_ppf_from_cdf,
    entropy_from_pmf,
)
from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.discrete import zeta_variate
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine

MAX_FITTED_EXPONENT = 100.0
"""Upper end of the search interval of :meth:`ZetaDistribution.fit_mle`."""


@parametrization(name="exponent")
class ZetaExponent(Parametrization):
    """
    Exponent of zeta distribution.

    Parameters
    ----------
    s : float
        Exponent; falls back to 2.0 outside ``(1, inf)``.
    """

    s: float = 2.0

    @constraint(description="1 < s < inf", fallback={"s": 2.0})
    def check_exponent(self) -> bool:
        return 1.0 < self.s < math.inf


@dataclass(frozen=True, slots=True)
class _ZetaConstants:
    zeta_s: float
    log_zeta_s: float


class ZetaDistribution(
    ParametricDistribution[ZetaExponent, _ZetaConstants], DiscreteDistribution
):
    """
    Zeta distribution.

    Probability mass function:
        P(X = k) = k^(-s) / ζ(s) for k = 1, 2, ...

    The raw moment of order ``m`` exists only for ``s > m + 1``: mean and
    variance report ``inf`` beyond that, skewness and excess kurtosis report
    ``UNDEFINED``.
    """

    family_name = FamilyName.ZETA
    kind = Kind.DISCRETE
    parametrization_cls = ZetaExponent

    def __init__(self, s: float = 2.0, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine, s=s)

    def _derive(self, params: ZetaExponent) -> _ZetaConstants:
        zeta_s = float(_sp_special.zeta(params.s))
        return _ZetaConstants(zeta_s=zeta_s, log_zeta_s=math.log(zeta_s))

    @property
    def s(self) -> float:
        return self.parameters.s

    def set_exponent(self, s: float) -> None:
        self.set_parameters(s=s)

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=1)

    def pmf(self, k: float) -> float:
        if not math.isfinite(k) or k < 1 or k != math.floor(k):
            return 0.0
        return math.exp(-self.s * math.log(k) - self.derived.log_zeta_s)

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < 1.0:
            return 0.0
        if math.isinf(x):
            return 1.0
        tail = float(_sp_special.zeta(self.s, math.floor(x) + 1.0))
        return 1.0 - tail / self.derived.zeta_s

    def sf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < 1.0:
            return 1.0
        if math.isinf(x):
            return 0.0
        return float(_sp_special.zeta(self.s, math.floor(x) + 1.0)) / self.derived.zeta_s

    def ppf(self, p: float) -> float:
        return discrete_ppf_from_cdf(self.cdf, start=1)(p)

    def cf(self, t: float) -> complex:
        return cf_from_pmf(self.pmf, t, self.support)

    def _raw_moment_ratio(self, order: int) -> float:
        return float(_sp_special.zeta(self.s - order)) / self.derived.zeta_s

    def mean(self) -> float:
        if self.s <= 2.0:
            return math.inf
        return self._raw_moment_ratio(1)

    def var(self) -> float:
        if self.s <= 3.0:
            return math.inf
        m1 = self._raw_moment_ratio(1)
        return self._raw_moment_ratio(2) - m1 * m1

    def median(self) -> float:
        return self.ppf(0.5)

    def mode(self) -> float:
        return 1.0

    def skewness(self) -> float:
        if self.s <= 4.0:
            return UNDEFINED
        m1, m2, m3 = (self._raw_moment_ratio(k) for k in (1, 2, 3))
        variance = m2 - m1 * m1
        return (m3 - 3.0 * m2 * m1 + 2.0 * m1**3) / variance**1.5

    def excess_kurtosis(self) -> float:
        if self.s <= 5.0:
            return UNDEFINED
        m1, m2, m3, m4 = (self._raw_moment_ratio(k) for k in (1, 2, 3, 4))
        variance = m2 - m1 * m1
        central4 = m4 - 4.0 * m3 * m1 + 6.0 * m2 * m1**2 - 3.0 * m1**4
        return central4 / variance**2 - 3.0

    def entropy(self) -> float:
        return entropy_from_pmf(self.pmf, self.support)

    def variate(self) -> float:
        return zeta_variate(self.s, self.engine)

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate of the exponent.

        The mean log-likelihood ``-s * mean(log x) - log ζ(s)`` is concave in
        ``s``; its maximiser on ``(1, MAX_FITTED_EXPONENT]`` is found by bounded
        scalar minimisation. A sample of ones only drives ``s`` to infinity and
        is refused.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return False
        mean_log = math.fsum(np.log(observations).tolist()) / observations.size
        if mean_log == 0.0:
            return False

        def neg_log_likelihood(s: float) -> float:
            return s * mean_log + math.log(float(_sp_special.zeta(s)))

        result = _sp_optimize.minimize_scalar(
            neg_log_likelihood,
            bounds=(1.0 + 1e-9, MAX_FITTED_EXPONENT),
            method="bounded",
            options={"xatol": 1e-10},
        )
        if not result.success:
            return False
        self.set_parameters(s=float(result.x))
        return True


def configure_zeta_family() -> None:
    """
    Configure and register the Zeta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.ZETA):
        return
    ParametricFamilyRegister.register(ZetaDistribution)
