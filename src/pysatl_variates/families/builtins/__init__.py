"""
Built-in distribution families for PySATL Variates.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Variates.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import (
    BetaDistribution,
    ContinuousUniformDistribution,
    ExponentialDistribution,
    LaplaceDistribution,
    ParetoDistribution,
    configure_beta_family,
    configure_exponential_family,
    configure_laplace_family,
    configure_pareto_family,
    configure_uniform_family,
)
from pysatl_variates.families.builtins.discrete import (
    BernoulliDistribution,
    DiscreteUniformDistribution,
    GeometricDistribution,
    ZetaDistribution,
    configure_bernoulli_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
    configure_zeta_family,
)
from pysatl_variates.families.builtins.singular import (
    CantorDistribution,
    configure_cantor_family,
)

__all__ = [
    # continuous
    "BetaDistribution",
    "ContinuousUniformDistribution",
    "ExponentialDistribution",
    "LaplaceDistribution",
    "ParetoDistribution",
    "configure_beta_family",
    "configure_exponential_family",
    "configure_laplace_family",
    "configure_pareto_family",
    "configure_uniform_family",
    # discrete
    "BernoulliDistribution",
    "DiscreteUniformDistribution",
    "GeometricDistribution",
    "ZetaDistribution",
    "configure_bernoulli_family",
    "configure_discrete_uniform_family",
    "configure_geometric_family",
    "configure_zeta_family",
    # singular
    "CantorDistribution",
    "configure_cantor_family",
]
