"""
Global registry for distribution families using singleton pattern.

This module implements a centralized registry that maps family names to the
distribution classes implementing them, enabling lookup and construction by
name across the application.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_variates.types import FamilyName

if TYPE_CHECKING:
    from typing import Any, ClassVar, TypeAlias

    from pysatl_variates.families.distribution import ParametricDistribution

    FamilyClass: TypeAlias = type[ParametricDistribution[Any, Any]]

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton registry for distribution families.

    Maintains a global registry of all family classes, allowing them to be
    accessed by name. Calling a registered class constructs an instance.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, FamilyClass]

    def __new__(cls) -> ParametricFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: FamilyName | str) -> FamilyClass:
        """
        Retrieve a family class by name.

        Parameters
        ----------
        name : FamilyName or str
            Name of the family to retrieve.

        Returns
        -------
        type[ParametricDistribution]
            The requested family class.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        try:
            return self._registered_families[str(name)]
        except KeyError as exc:
            raise ValueError(f"No family {name} found in register") from exc

    @classmethod
    def register(cls, family: FamilyClass) -> None:
        """
        Register a new family class under its ``family_name``.

        Parameters
        ----------
        family : type[ParametricDistribution]
            The family to register.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        name = str(family.family_name)
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family
        logger.debug("Registered family %s -> %s", name, family.__qualname__)

    @classmethod
    def contains(cls, name: FamilyName | str) -> bool:
        """Return ``True`` if a family with this name is registered."""
        return str(name) in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families, sorted."""
        return sorted(cls()._registered_families)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (used by configuration resets and tests)."""
        cls._instance = None


__all__ = [
    "ParametricFamilyRegister",
]
