"""
Distribution Interfaces
=======================

Runtime-checkable protocols describing the capability sets of univariate
distributions:

- :class:`Distribution`: contract shared by every family (CDF, quantile,
  characteristic function, moments, variates, sampling);
- :class:`ContinuousDistribution`: adds the density ``pdf``;
- :class:`DiscreteDistribution`: adds the mass function ``pmf`` and
  integer-valued variates;
- :class:`SingularDistribution`: continuous CDF without density; hazard,
  expected value and mode are ``UNDEFINED``.

Notes
-----
- Moments are computed from the current parameters on every call. A moment
  that does not exist for the current parameters is ``UNDEFINED`` (NaN); a
  moment that diverges to plus infinity is ``inf``.
- Default method bodies delegate to the free functions of
  :mod:`pysatl_variates.distributions.numeric`.
- Instances are not synchronised; confine each one to a single thread or
  lock it externally.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_variates.distributions.estimators import as_observations
from pysatl_variates.distributions.numeric import (
    expected_value_from_pdf,
    expected_value_from_pmf,
    ppf_from_cdf,
)
from pysatl_variates.types import UNDEFINED

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import SamplingStrategy
    from pysatl_variates.distributions.support import (
        ContinuousSupport,
        DiscreteSupport,
        Support,
    )
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.stats.engines import RandEngine
    from pysatl_variates.types import DistributionType, ScalarFunc


@runtime_checkable
class Distribution(Protocol):
    """Contract shared by every univariate distribution."""

    engine: RandEngine | None

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support: ...

    @property
    def parameters(self) -> Parametrization: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def set_parameters(self, **params: Any) -> None: ...

    def cdf(self, x: float) -> float: ...
    def ppf(self, p: float) -> float: ...
    def cf(self, t: float) -> complex: ...

    def mean(self) -> float: ...
    def var(self) -> float: ...
    def median(self) -> float: ...
    def mode(self) -> float: ...
    def skewness(self) -> float: ...
    def excess_kurtosis(self) -> float: ...
    def entropy(self) -> float: ...

    def variate(self) -> float: ...

    def sf(self, x: float) -> float:
        """Survival function ``1 - cdf(x)``."""
        return 1.0 - self.cdf(x)

    def std(self) -> float:
        """Standard deviation (``UNDEFINED`` propagates, ``inf`` stays ``inf``)."""
        variance = self.var()
        return UNDEFINED if math.isnan(variance) else math.sqrt(variance)

    def sample(self, n: int, **options: Any) -> Sample:
        """Draw ``n`` independent variates through the sampling strategy."""
        return self.sampling_strategy.sample(n, distr=self, **options)


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    """Distribution with a density."""

    @property
    def support(self) -> ContinuousSupport: ...

    def pdf(self, x: float) -> float: ...

    def ppf(self, p: float) -> float:
        """Quantile by numeric inversion of :meth:`cdf`."""
        return ppf_from_cdf(self.cdf, x0=self.median_hint())(p)

    def median_hint(self) -> float:
        """Starting point for numeric quantile searches."""
        return 0.0

    def log_pdf(self, x: float) -> float:
        density = self.pdf(x)
        return math.log(density) if density > 0.0 else -math.inf

    def hazard(self, x: float) -> float:
        """Hazard rate ``pdf(x) / (1 - cdf(x))``."""
        survival = self.sf(x)
        if survival <= 0.0:
            return UNDEFINED
        return self.pdf(x) / survival

    def expected_value(self, func: ScalarFunc) -> float:
        """``E[func(X)]`` by quadrature over the support."""
        return expected_value_from_pdf(self.pdf, func, self.support)

    def log_likelihood(self, sample: Sample | npt.ArrayLike) -> float:
        """Sum of ``log pdf`` over the observations."""
        return math.fsum(self.log_pdf(float(x)) for x in as_observations(sample))


@runtime_checkable
class DiscreteDistribution(Distribution, Protocol):
    """Integer-valued distribution with a mass function."""

    @property
    def support(self) -> DiscreteSupport: ...

    def pmf(self, k: float) -> float: ...

    def log_pmf(self, k: float) -> float:
        mass = self.pmf(k)
        return math.log(mass) if mass > 0.0 else -math.inf

    def hazard(self, k: float) -> float:
        """Discrete hazard ``P(X = k) / P(X >= k)``."""
        mass = self.pmf(k)
        at_least = self.sf(k) + mass
        if at_least <= 0.0:
            return UNDEFINED
        return mass / at_least

    def expected_value(self, func: ScalarFunc) -> float:
        """``E[func(X)]`` as a truncated series over the support."""
        return expected_value_from_pmf(self.pmf, func, self.support)

    def log_likelihood(self, sample: Sample | npt.ArrayLike) -> float:
        """Sum of ``log pmf`` over the observations."""
        return math.fsum(self.log_pmf(float(k)) for k in as_observations(sample))


@runtime_checkable
class SingularDistribution(Distribution, Protocol):
    """
    Distribution with a continuous CDF but no density (e.g. Cantor).

    Quantities defined through a density integral have no meaning here and
    report ``UNDEFINED`` rather than raising.
    """

    def hazard(self, x: float) -> float:
        return UNDEFINED

    def expected_value(self, func: ScalarFunc) -> float:
        return UNDEFINED

    def mode(self) -> float:
        return UNDEFINED


__all__ = [
    "ContinuousDistribution",
    "DiscreteDistribution",
    "Distribution",
    "SingularDistribution",
]
