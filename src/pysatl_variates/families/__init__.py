"""
Parametric Families module for working with statistical distribution families.

This package provides the built-in distribution families, their
parametrizations with domain fallbacks, and the global family registry.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    BernoulliDistribution,
    BetaDistribution,
    CantorDistribution,
    ContinuousUniformDistribution,
    DiscreteUniformDistribution,
    ExponentialDistribution,
    GeometricDistribution,
    LaplaceDistribution,
    ParetoDistribution,
    ZetaDistribution,
)
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricDistribution
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricDistribution",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    # families
    "BernoulliDistribution",
    "BetaDistribution",
    "CantorDistribution",
    "ContinuousUniformDistribution",
    "DiscreteUniformDistribution",
    "ExponentialDistribution",
    "GeometricDistribution",
    "LaplaceDistribution",
    "ParetoDistribution",
    "ZetaDistribution",
]
