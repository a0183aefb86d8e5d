"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.beta import (
    BetaDistribution,
    configure_beta_family,
)
from pysatl_variates.families.builtins.continuous.exponential import (
    ExponentialDistribution,
    configure_exponential_family,
)
from pysatl_variates.families.builtins.continuous.laplace import (
    LaplaceDistribution,
    configure_laplace_family,
)
from pysatl_variates.families.builtins.continuous.pareto import (
    ParetoDistribution,
    configure_pareto_family,
)
from pysatl_variates.families.builtins.continuous.uniform import (
    ContinuousUniformDistribution,
    configure_uniform_family,
)

__all__ = [
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
]
