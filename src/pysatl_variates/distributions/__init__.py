"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Variates:

- distribution protocols per capability set (:mod:`.distribution`);
- estimator helpers (:mod:`.estimators`);
- numeric fallbacks for quantiles, characteristic functions and series
  (:mod:`.numeric`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    SingularDistribution,
)
from .estimators import as_observations, check_validity
from .numeric import (
    cf_from_pdf,
    cf_from_pmf,
    discrete_ppf_from_cdf,
    entropy_from_pmf,
    ppf_from_cdf,
)
from .sampling import ArraySample, Sample
from .strategies import (
    InverseTransformSamplingStrategy,
    SamplingStrategy,
    VariateSamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # distribution
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "SingularDistribution",
    # estimators
    "as_observations",
    "check_validity",
    # numeric fallbacks
    "cf_from_pdf",
    "cf_from_pmf",
    "discrete_ppf_from_cdf",
    "entropy_from_pmf",
    "ppf_from_cdf",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "VariateSamplingStrategy",
    "InverseTransformSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
