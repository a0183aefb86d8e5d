"""
Uniform Conversion
==================

The single point where integer entropy becomes floating-point randomness.

A draw ``u`` of a ``bits``-wide engine is reduced to its top ``k = min(bits, 52)``
bits and mapped to ``(u' + 0.5) / 2**k``. Every value is exactly representable,
so the result lies in the open interval ``(0, 1)``:

- ``1.0`` is never returned, ``log(1 - U)`` is always finite;
- ``0.0`` is never returned either, ``log(U)`` is always finite.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import ldexp
from typing import TYPE_CHECKING

from pysatl_variates.stats.engines import default_engine

if TYPE_CHECKING:
    from pysatl_variates.stats.engines import RandEngine

_MANTISSA_BITS = 52


def standard_uniform(engine: RandEngine | None = None) -> float:
    """
    Draw ``U ~ Uniform(0, 1)`` from one engine output.

    Parameters
    ----------
    engine : RandEngine or None, default None
        Source of bits; ``None`` uses the thread's default engine.

    Returns
    -------
    float
        Value strictly between 0 and 1.
    """
    if engine is None:
        engine = default_engine()
    k = min(engine.bits, _MANTISSA_BITS)
    u = engine.next() >> (engine.bits - k)
    return ldexp(u + 0.5, -k)


def uniform(low: float, high: float, engine: RandEngine | None = None) -> float:
    """Draw from ``Uniform(low, high)`` by rescaling :func:`standard_uniform`."""
    return low + (high - low) * standard_uniform(engine)


def random_sign(engine: RandEngine | None = None) -> float:
    """Return ``+1.0`` or ``-1.0`` from the top bit of one engine draw."""
    if engine is None:
        engine = default_engine()
    return -1.0 if engine.next() >> (engine.bits - 1) else 1.0


__all__ = [
    "random_sign",
    "standard_uniform",
    "uniform",
]
