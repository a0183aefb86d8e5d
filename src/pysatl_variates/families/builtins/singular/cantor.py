"""
Cantor distribution family implementation.

The Cantor distribution is the law of ``sum 2 * B_k / 3^k`` for independent
fair bits ``B_k``: its CDF is the Cantor function, continuous but without a
density, so the family implements :class:`SingularDistribution`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import SingularDistribution
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.distribution import ParametricDistribution
from pysatl_variates.families.parametrizations import Parametrization, parametrization
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.stats.engines import default_engine
from pysatl_variates.types import UNDEFINED, FamilyName, Kind

if TYPE_CHECKING:
    from pysatl_variates.stats.engines import RandEngine

TERNARY_DIGITS = 34
"""Ternary digits per variate; ``3**-34`` is below double resolution on ``[0, 1]``."""

_CF_CUTOFF = 1e-9


@parametrization(name="standard")
class CantorParameters(Parametrization):
    """The Cantor distribution has no parameters."""


class CantorDistribution(ParametricDistribution[CantorParameters, None], SingularDistribution):
    """
    Cantor distribution on the middle-thirds Cantor set.

    Hazard, expected value, mode and entropy are ``UNDEFINED``.
    """

    family_name = FamilyName.CANTOR
    kind = Kind.SINGULAR
    parametrization_cls = CantorParameters

    def __init__(self, *, engine: RandEngine | None = None) -> None:
        super().__init__(engine)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    def cdf(self, x: float) -> float:
        """Cantor function, read off the ternary expansion of ``x``."""
        if math.isnan(x):
            return UNDEFINED
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        result, weight = 0.0, 0.5
        for _ in range(64):
            x *= 3.0
            digit = math.floor(x)
            x -= digit
            if digit == 1:
                return result + weight
            if digit == 2:
                result += weight
            weight *= 0.5
        return result

    def ppf(self, p: float) -> float:
        """
        Smallest ``x`` with ``cdf(x) >= p``.

        The binary digits of ``p`` become the ternary digits ``0``/``2`` of
        ``x``. A terminating expansion names the right end of a plateau, so
        its last ``2`` is exchanged for ``0222...`` to reach the left end.

        Ternary digits past :data:`TERNARY_DIGITS` are below double resolution
        and get lost, so the expansion can land just short of the level; it is
        then moved up by bisection on :meth:`cdf`.
        """
        if not 0.0 <= p <= 1.0:
            return UNDEFINED
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return 1.0
        x, scale, last, rest = 0.0, 1.0, 0.0, p
        for _ in range(64):
            scale /= 3.0
            rest *= 2.0
            if rest >= 1.0:
                rest -= 1.0
                x += 2.0 * scale
                last = scale
            if rest == 0.0:
                x -= last
                break
        if self.cdf(x) >= p:
            return x

        lo, hi = x, min(1.0, x + 3.0 ** (1 - TERNARY_DIGITS))
        while self.cdf(hi) < p and hi < 1.0:
            hi = min(1.0, 2.0 * hi - lo)
        while True:
            mid = 0.5 * (lo + hi)
            if not lo < mid < hi:
                return hi
            if self.cdf(mid) >= p:
                hi = mid
            else:
                lo = mid

    def cf(self, t: float) -> complex:
        """``exp(it/2) * prod_k cos(t / 3^k)``, truncated once the factors equal one."""
        product = 1.0
        u = t / 3.0
        while abs(u) > _CF_CUTOFF:
            product *= math.cos(u)
            u /= 3.0
        return cmath.exp(0.5j * t) * product

    def mean(self) -> float:
        return 0.5

    def var(self) -> float:
        return 0.125

    def median(self) -> float:
        """Every point of the plateau ``[1/3, 2/3]`` is a median; its centre is reported."""
        return 0.5

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        return -1.6

    def entropy(self) -> float:
        return UNDEFINED

    def variate(self) -> float:
        engine = self.engine if self.engine is not None else default_engine()
        x, scale = 0.0, 1.0
        word, remaining = 0, 0
        for _ in range(TERNARY_DIGITS):
            if remaining == 0:
                word, remaining = engine.next(), engine.bits
            scale /= 3.0
            if word & 1:
                x += 2.0 * scale
            word >>= 1
            remaining -= 1
        return x


def configure_cantor_family() -> None:
    """
    Configure and register the Cantor distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CANTOR):
        return
    ParametricFamilyRegister.register(CantorDistribution)
