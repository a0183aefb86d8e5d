"""
Distribution Families Configuration
====================================

This module registers the built-in distribution families of PySATL Variates:

- continuous: Beta, continuous Uniform, Exponential, Laplace, Pareto;
- discrete: Bernoulli, discrete Uniform, Geometric, Zeta;
- singular: Cantor.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; each ``configure_*_family`` skips a family that
  is already present.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_cantor_family,
    configure_discrete_uniform_family,
    configure_exponential_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_pareto_family,
    configure_uniform_family,
    configure_zeta_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of distribution families.
    """
    configure_beta_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_laplace_family()
    configure_pareto_family()
    configure_bernoulli_family()
    configure_discrete_uniform_family()
    configure_geometric_family()
    configure_zeta_family()
    configure_cantor_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
