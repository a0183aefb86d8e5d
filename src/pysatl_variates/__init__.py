"""
PySATL Variates
===============

Univariate probability distributions centred on variate generation and
parameter estimation: bit generators, uniform conversion, ziggurat, table and
rejection samplers, distribution protocols, built-in families and their
estimators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import VariatesConfig, configure, get_config, reset_config
from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .stats import (
    JKissRandEngine,
    JLKiss64RandEngine,
    PCGRandEngine,
    RandEngine,
    create_engine,
    default_engine,
    random_seed,
    seed_default_engine,
    standard_uniform,
)
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    # configuration
    "VariatesConfig",
    "configure",
    "get_config",
    "reset_config",
    # engines
    "RandEngine",
    "JKissRandEngine",
    "JLKiss64RandEngine",
    "PCGRandEngine",
    "create_engine",
    "default_engine",
    "random_seed",
    "seed_default_engine",
    "standard_uniform",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
