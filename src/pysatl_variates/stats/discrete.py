"""
Discrete Variate Samplers
=========================

- :class:`CumulativeTable`: 16 cumulative geometric probabilities with
  tail shifting (geometric law, ``p >= 0.2``).
- :func:`geometric_by_exponential`: ``floor`` of an exponential draw
  (geometric law, heavy tails).
- :func:`zeta_variate`: rejection from a rounded-down Pareto proposal.
- :func:`uniform_index`: unbiased integer below ``n`` from as many engine
  words as ``n`` needs.

All loops are bounded by :func:`pysatl_variates.stats.rejection.max_iterations`
and return ``UNDEFINED`` on exhaustion.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.stats.engines import default_engine
from pysatl_variates.stats.rejection import bounded_rejection, exhausted, max_iterations
from pysatl_variates.stats.uniform import standard_uniform
from pysatl_variates.stats.ziggurat import standard_exponential

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.stats.engines import RandEngine

TABLE_SIZE = 16


@dataclass(frozen=True, slots=True)
class CumulativeTable:
    """
    Cumulative probabilities ``P(X <= k)``, ``k < TABLE_SIZE``, of ``Geometric(p)``.

    Attributes
    ----------
    values : numpy.ndarray
        Read-only array of ``TABLE_SIZE`` non-decreasing entries.
    """

    values: npt.NDArray[np.float64]

    @classmethod
    def geometric(cls, p: float) -> CumulativeTable:
        values = np.empty(TABLE_SIZE, dtype=np.float64)
        q = 1.0 - p
        values[0] = p
        prod = p
        for i in range(1, TABLE_SIZE):
            prod *= q
            values[i] = values[i - 1] + prod
        values.flags.writeable = False
        return cls(values)

    def variate(self, engine: RandEngine | None = None) -> float:
        """
        Draw one geometric variate by table lookup.

        A uniform beyond the last entry means the draw lies past the table;
        since the geometric tail beyond ``TABLE_SIZE - 1`` is again geometric,
        the support is shifted by ``TABLE_SIZE`` and a fresh uniform is drawn.
        """
        values = self.values
        last = values[-1]
        shift = 0
        for _ in range(max_iterations()):
            u = standard_uniform(engine)
            if u > last:
                shift += TABLE_SIZE
                continue
            k = 0
            while u > values[k]:
                k += 1
            return float(shift + k)
        return exhausted("Geometric")


def geometric_by_exponential(rate: float, engine: RandEngine | None = None) -> float:
    """
    Draw ``Geometric(p)`` as ``floor(E / rate)`` with ``rate = -log(1 - p)``.

    Used where the table scan would be long (small ``p``).
    """
    return float(np.floor(standard_exponential(engine) / rate))


def uniform_index(n: int, engine: RandEngine | None = None) -> float:
    """
    Draw an integer uniformly from ``0, 1, ..., n - 1``.

    Engine words are concatenated (first word most significant) until the
    draw spans ``n``; draws from the incomplete top block ``[limit, 2**width)``
    are rejected, so no value is favoured by the final reduction modulo ``n``.

    Returns
    -------
    float
        Integer-valued float, or ``UNDEFINED`` on exhaustion.
    """
    engine = engine if engine is not None else default_engine()
    bits = engine.bits
    words = max(1, -(-(n - 1).bit_length() // bits))
    limit = ((1 << (words * bits)) // n) * n
    for _ in range(max_iterations()):
        u = 0
        for _ in range(words):
            u = (u << bits) | engine.next()
        if u < limit:
            return float(u % n)
    return exhausted("DiscreteUniform")


def zeta_variate(s: float, engine: RandEngine | None = None) -> float:
    """
    Draw from ``Zeta(s)``, ``s > 1`` (L. Devroye, *Non-Uniform Random Variate
    Generation*, p. 551).

    The proposal is ``X = floor(exp(E / (s - 1)))`` with ``E`` standard
    exponential, i.e. a Pareto(``s - 1``) variate rounded down. With
    ``T = (1 + 1/X)**(s - 1)`` and ``b = 1 - 2**(1 - s)`` the draw is accepted
    when ``V * X * (T - 1) <= b * T`` for an independent uniform ``V``.

    Returns
    -------
    float
        Integer-valued float ``>= 1``, or ``UNDEFINED`` on exhaustion.
    """
    sm1 = s - 1.0
    b = 1.0 - 2.0**-sm1

    def trial() -> float | None:
        e = standard_exponential(engine)
        if math.isnan(e):
            return None
        try:
            x = math.floor(math.exp(e / sm1))
        except OverflowError:
            # proposal beyond the double range
            return None
        t = (1.0 + 1.0 / x) ** sm1
        v = standard_uniform(engine)
        if v * x * (t - 1.0) <= b * t:
            return float(x)
        return None

    return bounded_rejection(trial, sampler="Zeta")


__all__ = [
    "TABLE_SIZE",
    "CumulativeTable",
    "geometric_by_exponential",
    "uniform_index",
    "zeta_variate",
]
