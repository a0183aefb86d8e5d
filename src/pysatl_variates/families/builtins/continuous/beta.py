"""
Beta distribution family implementation.

Contains the Beta family on ``[0, 1]``. Besides being a regular continuous
family it is the conjugate prior of the Bernoulli and Geometric
probabilities: :meth:`BetaDistribution.updated` produces the posterior.
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
from pysatl_variates.stats.uniform import standard_uniform
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.stats.engines import RandEngine


@parametrization(name="shapes")
class BetaShapes(Parametrization):
    """
    Shape parametrization of Beta distribution.

    Parameters
    ----------
    alpha : float
        First shape α; falls back to 1.0 outside ``(0, inf)``.
    beta : float
        Second shape β; falls back to 1.0 outside ``(0, inf)``.
    """

    alpha: float = 1.0
    beta: float = 1.0

    @constraint(description="0 < alpha < inf", fallback={"alpha": 1.0})
    def check_alpha_positive(self) -> bool:
        return 0.0 < self.alpha < math.inf

    @constraint(description="0 < beta < inf", fallback={"beta": 1.0})
    def check_beta_positive(self) -> bool:
        return 0.0 < self.beta < math.inf


@dataclass(frozen=True, slots=True)
class _BetaConstants:
    log_beta: float


class BetaDistribution(
    ParametricDistribution[BetaShapes, _BetaConstants], ContinuousDistribution
):
    """
    Beta distribution.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) for x in [0, 1]

    Variates are drawn by inverse transform through the regularised
    incomplete beta inverse.
    """

    family_name = FamilyName.BETA
    kind = Kind.CONTINUOUS
    parametrization_cls = BetaShapes

    def __init__(
        self, alpha: float = 1.0, beta: float = 1.0, *, engine: RandEngine | None = None
    ) -> None:
        super().__init__(engine, alpha=alpha, beta=beta)

    def _derive(self, params: BetaShapes) -> _BetaConstants:
        return _BetaConstants(log_beta=float(_sp_special.betaln(params.alpha, params.beta)))

    @property
    def alpha(self) -> float:
        return self.parameters.alpha

    @property
    def beta(self) -> float:
        return self.parameters.beta

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    def pdf(self, x: float) -> float:
        if x < 0.0 or x > 1.0:
            return 0.0
        return float(np.exp(self.log_pdf(x)))

    def log_pdf(self, x: float) -> float:
        if x < 0.0 or x > 1.0:
            return -math.inf
        with np.errstate(divide="ignore"):
            return float(
                _sp_special.xlogy(self.alpha - 1.0, x)
                + _sp_special.xlog1py(self.beta - 1.0, -x)
                - self.derived.log_beta
            )

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return float(_sp_special.betainc(self.alpha, self.beta, x))

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        return float(_sp_special.betaincinv(self.alpha, self.beta, p))

    def cf(self, t: float) -> complex:
        """Confluent hypergeometric form ``1F1(α; α + β; it)``."""
        return complex(_sp_special.hyp1f1(self.alpha, self.alpha + self.beta, 1j * t))

    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def var(self) -> float:
        a, b = self.alpha, self.beta
        s = a + b
        return a * b / (s * s * (s + 1.0))

    def median(self) -> float:
        return self.ppf(0.5)

    def mode(self) -> float:
        """Mode; ``UNDEFINED`` for the flat (α = β = 1) and U-shaped (α, β < 1) cases."""
        a, b = self.alpha, self.beta
        if a > 1.0 and b > 1.0:
            return (a - 1.0) / (a + b - 2.0)
        if a <= 1.0 < b:
            return 0.0
        if b <= 1.0 < a:
            return 1.0
        if a < 1.0 and b == 1.0:
            return 0.0
        if b < 1.0 and a == 1.0:
            return 1.0
        return UNDEFINED

    def skewness(self) -> float:
        a, b = self.alpha, self.beta
        return 2.0 * (b - a) * math.sqrt(a + b + 1.0) / ((a + b + 2.0) * math.sqrt(a * b))

    def excess_kurtosis(self) -> float:
        a, b = self.alpha, self.beta
        num = (a - b) ** 2 * (a + b + 1.0) - a * b * (a + b + 2.0)
        return 6.0 * num / (a * b * (a + b + 2.0) * (a + b + 3.0))

    def entropy(self) -> float:
        a, b = self.alpha, self.beta
        psi = _sp_special.digamma
        return float(
            self.derived.log_beta
            - (a - 1.0) * psi(a)
            - (b - 1.0) * psi(b)
            + (a + b - 2.0) * psi(a + b)
        )

    def variate(self) -> float:
        return self.ppf(standard_uniform(self.engine))

    def updated(self, successes: float, failures: float) -> BetaDistribution:
        """
        Conjugate posterior ``Beta(α + successes, β + failures)``.

        Returns a new instance sharing this one's engine; ``self`` is unchanged.
        """
        return BetaDistribution(
            self.alpha + successes, self.beta + failures, engine=self.engine
        )

    def fit_mm(self, sample: Observations) -> bool:
        """
        Method-of-moments estimate from the sample mean ``m`` and variance ``v``:
        ``α = m c``, ``β = (1 - m) c`` with ``c = m (1 - m) / v - 1``.

        Refused when ``v`` is zero or not smaller than ``m (1 - m)``.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations) or observations.size < 2:
            return False
        m = sample_mean(observations)
        v = float(np.var(observations))
        if not 0.0 < v < m * (1.0 - m):
            return False
        common = m * (1.0 - m) / v - 1.0
        self.set_parameters(alpha=m * common, beta=(1.0 - m) * common)
        return True

    def fit_mle(self, sample: Observations) -> bool:
        """
        Maximum-likelihood estimate of both shapes.

        Solves the score equations

            ψ(α) - ψ(α + β) = mean(log x)
            ψ(β) - ψ(α + β) = mean(log(1 - x))

        in ``(log α, log β)``, starting from the method-of-moments estimate.
        Samples touching 0 or 1 (unbounded log-likelihood) and constant
        samples are refused.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations) or observations.size < 2:
            return False
        if not np.all((observations > 0.0) & (observations < 1.0)):
            return False
        m = sample_mean(observations)
        v = float(np.var(observations))
        if not 0.0 < v < m * (1.0 - m):
            return False

        n = observations.size
        mean_log = math.fsum(np.log(observations).tolist()) / n
        mean_log1m = math.fsum(np.log1p(-observations).tolist()) / n
        common = m * (1.0 - m) / v - 1.0
        start = np.log([m * common, (1.0 - m) * common])
        psi = _sp_special.digamma

        def score(log_shapes: npt.NDArray[np.float64]) -> list[float]:
            a, b = np.exp(log_shapes)
            total = psi(a + b)
            return [psi(a) - total - mean_log, psi(b) - total - mean_log1m]

        result = _sp_optimize.root(score, start)
        if not result.success:
            return False
        alpha, beta = np.exp(result.x)
        self.set_parameters(alpha=float(alpha), beta=float(beta))
        return True


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return
    ParametricFamilyRegister.register(BetaDistribution)
