"""
Bernoulli distribution family implementation.

Single trial with success probability ``p`` on ``{0, 1}``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.distributions.distribution import DiscreteDistribution
from pysatl_variates.distributions.estimators import as_observations, is_fittable, sample_mean
from pysatl_variates.distributions.support import ExplicitTableDiscreteSupport
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
    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.families.builtins.continuous.beta import BetaDistribution
    from pysatl_variates.stats.engines import RandEngine

_BINARY_SUPPORT = ExplicitTableDiscreteSupport([0, 1])


@parametrization(name="probability")
class BernoulliProbability(Parametrization):
    """
    Success probability of Bernoulli distribution.

    Parameters
    ----------
    p : float
        Probability of success; falls back to 0.5 outside ``[0, 1]``.
    """

    p: float = 0.5

    @constraint(description="0 <= p <= 1", fallback={"p": 0.5})
    def check_probability(self) -> bool:
        return 0.0 <= self.p <= 1.0


class BernoulliDistribution(
    ParametricDistribution[BernoulliProbability, None], DiscreteDistribution
):
    """
    Bernoulli distribution.

    Probability mass function:
        P(X = 1) = p, P(X = 0) = 1 - p
    """

    family_name = FamilyName.BERNOULLI
    kind = Kind.DISCRETE
    parametrization_cls = BernoulliProbability

    def __init__(self, p: float = 0.5, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine, p=p)

    @property
    def p(self) -> float:
        return self.parameters.p

    def set_probability(self, p: float) -> None:
        self.set_parameters(p=p)

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        return _BINARY_SUPPORT

    def pmf(self, k: float) -> float:
        if k == 0:
            return 1.0 - self.p
        if k == 1:
            return self.p
        return 0.0

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return UNDEFINED
        if x < 0.0:
            return 0.0
        if x < 1.0:
            return 1.0 - self.p
        return 1.0

    def ppf(self, p: float) -> float:
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        return 0.0 if p <= 1.0 - self.p else 1.0

    def cf(self, t: float) -> complex:
        return 1.0 - self.p + self.p * cmath.exp(1j * t)

    def mean(self) -> float:
        return self.p

    def var(self) -> float:
        return self.p * (1.0 - self.p)

    def median(self) -> float:
        return self.ppf(0.5)

    def mode(self) -> float:
        """Mode; ``0`` when both outcomes are equally likely."""
        return 1.0 if self.p > 0.5 else 0.0

    def skewness(self) -> float:
        pq = self.var()
        if pq == 0.0:
            return UNDEFINED
        return (1.0 - 2.0 * self.p) / math.sqrt(pq)

    def excess_kurtosis(self) -> float:
        pq = self.var()
        if pq == 0.0:
            return UNDEFINED
        return (1.0 - 6.0 * pq) / pq

    def entropy(self) -> float:
        return -math.fsum(m * math.log(m) for m in (self.p, 1.0 - self.p) if m > 0.0)

    def variate(self) -> float:
        return 1.0 if standard_uniform(self.engine) < self.p else 0.0

    def fit_mle(self, sample: Observations) -> bool:
        """Maximum-likelihood estimate: the fraction of ones."""
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return False
        self.set_parameters(p=sample_mean(observations))
        return True

    def fit_mm(self, sample: Observations) -> bool:
        """Method of moments; coincides with :meth:`fit_mle`."""
        return self.fit_mle(sample)

    def fit_bayes(
        self, sample: Observations, prior: BetaDistribution
    ) -> BetaDistribution | None:
        """
        Conjugate update of a Beta prior on ``p``.

        The posterior is ``Beta(α + successes, β + failures)``; this
        distribution's probability is set to the posterior mean.

        Returns
        -------
        BetaDistribution or None
            A new posterior, or ``None`` (nothing changed) for a sample with
            values other than 0 and 1. ``prior`` is never modified.
        """
        observations = as_observations(sample)
        if not is_fittable(self.support, observations):
            return None
        successes = int(np.count_nonzero(observations))
        posterior = prior.updated(
            successes=successes, failures=observations.size - successes
        )
        self.set_parameters(p=posterior.mean())
        return posterior


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return
    ParametricFamilyRegister.register(BernoulliDistribution)
