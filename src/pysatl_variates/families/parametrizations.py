"""
Parameterization classes for distribution families.

This module provides the core abstractions for defining the parameters of a
distribution family: frozen dataclasses whose instance methods, marked with
:func:`constraint`, describe the parameter domain. A constraint either carries
a fallback (out-of-domain values are replaced, never rejected) or is strict
(out-of-domain values raise ``ValueError``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass, replace
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self

from pysatl_variates.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, ClassVar

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    fallback : Mapping[str, Any] or None
        Parameter values substituted when the check fails. ``None`` marks a
        strict precondition.
    """

    description: str
    check: Callable[[Any], bool]
    fallback: Mapping[str, Any] | None = None

    @property
    def is_strict(self) -> bool:
        return self.fallback is None


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    This class defines the interface for parametrizations, including
    parameter validation and domain sanitisation.
    """

    # These attributes are set by the @parametrization decorator
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        if not is_dataclass(self):
            return {}
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def violations(self) -> list[ParametrizationConstraint]:
        """Return the constraints that do not hold for the current values."""
        return [c for c in self._constraints if not c.check(self)]

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')

    def sanitize(self) -> Self:
        """
        Bring the parameters into their domain.

        Constraints are checked in declaration order; each violated one with a
        fallback replaces the offending values, so later checks see the
        corrected parametrization.

        Returns
        -------
        Parametrization
            ``self`` if every constraint holds, else a corrected copy.

        Raises
        ------
        ValueError
            If a strict constraint is violated.
        """
        current = self
        for constraint in self._constraints:
            if constraint.check(current):
                continue
            if constraint.fallback is None:
                raise ValueError(
                    f'Constraint "{constraint.description}" does not hold '
                    f"for {current.parameters}"
                )
            logger.debug(
                "%s: %s violated by %s, falling back to %s",
                self.name,
                constraint.description,
                current.parameters,
                dict(constraint.fallback),
            )
            current = replace(current, **constraint.fallback)
        return current


P = ParamSpec("P")


def constraint(
    description: str, *, fallback: Mapping[str, Any] | None = None
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    fallback : Mapping[str, Any] or None, default None
        Values substituted when the predicate fails; ``None`` makes the
        constraint strict.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool. Comparisons
    with NaN are false, so a NaN parameter fails its predicate.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        setattr(wrapper, "__constraint_fallback", fallback)
        return wrapper

    return decorator


def parametrization(
    *,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to declare a class as a parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    Collects constraint methods marked with @constraint in declaration order.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, not @staticmethod"
                )
            if isinstance(attr, classmethod):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, not @classmethod"
                )

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                constraints.append(
                    ParametrizationConstraint(
                        description=getattr(func, "__constraint_description", func.__name__),
                        check=func,
                        fallback=getattr(func, "__constraint_fallback", None),
                    )
                )
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
