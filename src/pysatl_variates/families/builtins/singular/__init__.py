"""
Built-in singular distribution families.

Families with a continuous CDF but no density.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.singular.cantor import (
    CantorDistribution,
    configure_cantor_family,
)

__all__ = [
    "CantorDistribution",
    "configure_cantor_family",
]
