"""
Geometric distribution family implementation.

Number of failures before the first success, support ``{0, 1, 2, ...}``.
Variates come from a 16-entry cumulative table for ``p >= 0.2`` and from the
floor of an exponential draw for heavier tails.
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
from pysatl_variates.distributions.estimators import as_observations, is_fittable, sample_mean
from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.discrete import CumulativeTable, geometric_by_exponential
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.families.builtins.continuous.beta import BetaDistribution
    from pysatl_variates.stats.engines import RandEngine

TABLE_THRESHOLD = 0.2
"""Below this probability the table scan gets long and the exponential branch is used."""


@parametrization(name="probability")
class GeometricProbability(Parametrization):
    """
    Success probability of geometric distribution.

    Parameters
    ----------
    p : float
        Probability of success; falls back to 0.5 outside ``(0, 1]``.
    """

    p: float = 0.5

    @constraint(description="0 < p <= 1", fallback={"p": 0.5})
    def check_probability(self) -> bool:
        return 0.0 < self.p <= 1.0


@dataclass(frozen=True, slots=True)
class _GeometricConstants:
    log_q: float
    table: CumulativeTable | None


class GeometricDistribution(
    ParametricDistribution[GeometricProbability, _GeometricConstants], DiscreteDistribution
):
    """
    Geometric distribution.

    Probability mass function:
        P(X = k) = p (1 - p)^k for k = 0, 1, 2, ...
    """

    family_name = FamilyName.GEOMETRIC
    kind = Kind.DISCRETE
    parametrization_cls = GeometricProbability

    def __init__(self, p: float = 0.5, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine, p=p)

    def _derive(self, params: GeometricProbability) -> _GeometricConstants:
        p = params.p
        log_q = math.log1p(-p) if p < 1.0 else -math.inf
        table = CumulativeTable.geometric(p) if p >= TABLE_THRESHOLD else None
        return _GeometricConstants(log_q=log_q, table=table)

    @property
    def p(self) -> float:
        return self.parameters.p

    def set_probability(self, p: float) -> None:
        self.set_parameters(p=p)

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    def pmf(self, k: float) -> float:
        if not math.isfinite(k) or k < 0 or k != math.floor(k):
            return 0.0
        if k == 0:
            return self.p
        return self.p * math.exp(k * self.derived.log_q)

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < 0.0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return -math.expm1((math.floor(x) + 1.0) * self.derived.log_q)

    def sf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < 0.0:
            return 1.0
        if math.isinf(x):
            return 0.0
        return math.exp((math.floor(x) + 1.0) * self.derived.log_q)

    def ppf(self, p: float) -> float:
        """Smallest ``k`` with ``cdf(k) >= p``."""
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 1.0:
            return math.inf
        if p == 0.0 or self.p == 1.0:
            return 0.0
        k = max(0, math.ceil(math.log1p(-p) / self.derived.log_q) - 1)
        # the logarithm ratio may round up at exact cdf levels
        if k > 0 and self.cdf(k - 1) >= p:
            k -= 1
        return float(k)

    def hazard(self, k: float) -> float:
        return self.p if math.isfinite(k) and k >= 0 and k == math.floor(k) else 0.0

    def cf(self, t: float) -> complex:
        return self.p / (1.0 - (1.0 - self.p) * cmath.exp(1j * t))

    def mean(self) -> float:
        return (1.0 - self.p) / self.p

    def var(self) -> float:
        return (1.0 - self.p) / self.p**2

    def median(self) -> float:
        return self.ppf(0.5)

    def mode(self) -> float:
        return 0.0

    def skewness(self) -> float:
        if self.p == 1.0:
            return UNDEFINED
        return (2.0 - self.p) / math.sqrt(1.0 - self.p)

    def excess_kurtosis(self) -> float:
        if self.p == 1.0:
            return UNDEFINED
        return 6.0 + self.p**2 / (1.0 - self.p)

    def entropy(self) -> float:
        p = self.p
        if p == 1.0:
            return 0.0
        q = 1.0 - p
        return -(q * math.log(q) + p * math.log(p)) / p

    def variate(self) -> float:
        table = self.derived.table
        if table is not None:
            return table.variate(self.engine)
        return geometric_by_exponential(-self.derived.log_q, self.engine)

    def fit_mle(self, sample: Observations) -> bool:
        """Maximum-likelihood estimate ``p = 1 / (mean + 1)``."""
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return False
        self.set_parameters(p=1.0 / (sample_mean(observations) + 1.0))
        return True

    def fit_mm(self, sample: Observations) -> bool:
        """Method of moments; coincides with :meth:`fit_mle`."""
        return self.fit_mle(sample)

    def fit_bayes(
        self, sample: Observations, prior: BetaDistribution
    ) -> BetaDistribution | None:
        """
        Conjugate update of a Beta prior on ``p``.

        The posterior is ``Beta(α + n, β + sum(x))``; this distribution's
        probability is set to the posterior mean.

        Returns
        -------
        BetaDistribution or None
            A new posterior, or ``None`` (nothing changed) for an invalid
            sample. ``prior`` is never modified.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return None
        posterior = prior.updated(
            successes=observations.size, failures=math.fsum(observations.tolist())
        )
        self.set_parameters(p=posterior.mean())
        return posterior


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return
    ParametricFamilyRegister.register(GeometricDistribution)
