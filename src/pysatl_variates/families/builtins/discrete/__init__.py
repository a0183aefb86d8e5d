"""
Built-in discrete distribution families.

This module contains implementations of integer-valued parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.discrete.bernoulli import (
    BernoulliDistribution,
    configure_bernoulli_family,
)
from pysatl_variates.families.builtins.discrete.geometric import (
    GeometricDistribution,
    configure_geometric_family,
)
from pysatl_variates.families.builtins.discrete.uniform import (
    DiscreteUniformDistribution,
    configure_discrete_uniform_family,
)
from pysatl_variates.families.builtins.discrete.zeta import (
    ZetaDistribution,
    configure_zeta_family,
)

__all__ = [
    "BernoulliDistribution",
    "DiscreteUniformDistribution",
    "GeometricDistribution",
    "ZetaDistribution",
    "configure_bernoulli_family",
    "configure_discrete_uniform_family",
    "configure_geometric_family",
    "configure_zeta_family",
]
