"""
Concrete distribution instances with specific parameter values.

This module provides the shared state handling of the built-in families:
parameter storage, derived per-parameter constants, the engine reference and
the validity gate used by the estimators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from pysatl_variates.distributions.estimators import check_validity
from pysatl_variates.distributions.strategies import VariateSamplingStrategy
from pysatl_variates.families.parametrizations import Parametrization
from pysatl_variates.types import EuclideanDistributionType

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_variates.distributions.estimators import Observations
    from pysatl_variates.distributions.strategies import SamplingStrategy
    from pysatl_variates.stats.engines import RandEngine
    from pysatl_variates.types import FamilyName, Kind

logger = logging.getLogger(__name__)

_DEFAULT_SAMPLING_STRATEGY = VariateSamplingStrategy()


P = TypeVar("P", bound=Parametrization)
C = TypeVar("C")


class ParametricDistribution(Generic[P, C]):
    """
    A distribution instance of a built-in family.

    Holds the family parametrization ``P`` together with constants ``C``
    derived from it (tables, logarithms, normalisers). Both are replaced in a
    single assignment by :meth:`set_parameters`, so a reader never observes
    new parameters with stale constants.

    Parameters
    ----------
    engine : RandEngine or None, default None
        Bit generator used by :meth:`variate`; ``None`` uses the calling
        thread's default engine at draw time.
    **params
        Values of the family parametrization.

    Notes
    -----
    Subclasses set :attr:`family_name`, :attr:`kind` and
    :attr:`parametrization_cls` and may override :meth:`_derive`.
    """

    family_name: ClassVar[FamilyName]
    kind: ClassVar[Kind]
    parametrization_cls: ClassVar[type[Parametrization]]

    engine: RandEngine | None
    _state: tuple[P, C]

    def __init__(self, engine: RandEngine | None = None, **params: Any) -> None:
        self.engine = engine
        self._state = self._build_state(params)

    def _derive(self, params: P) -> C:
        """Compute per-parameter constants; families without any return ``None``."""
        return None  # type: ignore[return-value]

    def _build_state(self, params: dict[str, Any]) -> tuple[P, C]:
        parameters = self.parametrization_cls(**params).sanitize()
        return parameters, self._derive(parameters)  # type: ignore[arg-type]

    @property
    def parameters(self) -> P:
        """Current (sanitised) parameters."""
        return self._state[0]

    @property
    def derived(self) -> C:
        """Constants derived from the current parameters."""
        return self._state[1]

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return EuclideanDistributionType(kind=self.kind, dimension=1)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return _DEFAULT_SAMPLING_STRATEGY

    def set_parameters(self, **params: Any) -> None:
        """
        Replace some or all parameters.

        Out-of-domain values are replaced by the family's documented fallback;
        strict preconditions raise before anything is changed.

        Raises
        ------
        TypeError
            If an unknown parameter name is passed.
        ValueError
            If a strict precondition does not hold.
        """
        current = self.parameters.parameters
        unknown = set(params) - set(current)
        if unknown:
            raise TypeError(f"Unknown parameters for {self.family_name}: {sorted(unknown)}")
        self._state = self._build_state({**current, **params})

    def check_validity(self, sample: Observations) -> bool:
        """Return ``True`` when every observation lies in the support."""
        return check_validity(self.support, sample)  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters.parameters.items())
        return f"{type(self).__name__}({args})"


__all__ = [
    "ParametricDistribution",
]
