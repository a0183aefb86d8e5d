"""
Variate generation engine
=========================

Bit generators, the uniform conversion point and the specialised samplers
used by the built-in families:

- bit generators and seeding (:mod:`.engines`);
- uniform conversion (:mod:`.uniform`);
- rejection-loop ceiling (:mod:`.rejection`);
- ziggurat standard exponential (:mod:`.ziggurat`);
- table and rejection samplers for discrete laws (:mod:`.discrete`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .discrete import (
    TABLE_SIZE,
    CumulativeTable,
    geometric_by_exponential,
    uniform_index,
    zeta_variate,
)
from .engines import (
    ENGINES,
    JKissRandEngine,
    JLKiss64RandEngine,
    PCGRandEngine,
    RandEngine,
    create_engine,
    default_engine,
    mix,
    random_seed,
    seed_default_engine,
)
from .rejection import bounded_rejection, max_iterations
from .uniform import random_sign, standard_uniform, uniform
from .ziggurat import ZigguratTables, standard_exponential, ziggurat_tables

__all__ = [
    # engines
    "ENGINES",
    "RandEngine",
    "JKissRandEngine",
    "JLKiss64RandEngine",
    "PCGRandEngine",
    "create_engine",
    "default_engine",
    "mix",
    "random_seed",
    "seed_default_engine",
    # uniform
    "random_sign",
    "standard_uniform",
    "uniform",
    # loops
    "bounded_rejection",
    "max_iterations",
    # specialised samplers
    "ZigguratTables",
    "standard_exponential",
    "ziggurat_tables",
    "TABLE_SIZE",
    "CumulativeTable",
    "geometric_by_exponential",
    "uniform_index",
    "zeta_variate",
]
