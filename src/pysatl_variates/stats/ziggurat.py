"""
Ziggurat Sampler for the Standard Exponential Law
=================================================

The standard (rate 1) exponential density is covered by 256 horizontal
stairs of equal area ``A``. The stairs are shared by every Exponential
instance regardless of rate: a rate-``λ`` draw is a standard draw divided
by ``λ``.

Tables
------
``stair_width[i]`` is the right edge of stair ``i`` and ``stair_height[i]`` its
top. Stair 0 is the base: a rectangle of width ``A / exp(-x1)`` whose area
includes the tail beyond ``x1``. ``stair_width[256] = 0`` closes the top.

Thread safety
-------------
:func:`ziggurat_tables` builds the tables exactly once per process under a
lock (double-checked). The arrays are flagged read-only, so any number of
threads may read them concurrently once the build has returned.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.stats.engines import default_engine
from pysatl_variates.stats.rejection import exhausted, max_iterations
from pysatl_variates.stats.uniform import standard_uniform, uniform

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.stats.engines import RandEngine

logger = logging.getLogger(__name__)

STAIRS = 256
X1 = 7.69711747013104972
"""Right edge of the ziggurat; draws beyond it come from the tail."""
STAIR_AREA = 3.9496598225815571993e-3
"""Common area of every stair (the base stair includes the tail)."""


@dataclass(frozen=True, slots=True)
class ZigguratTables:
    """
    Read-only ziggurat layer boundaries.

    Attributes
    ----------
    stair_width : numpy.ndarray
        ``STAIRS + 1`` right edges, ``stair_width[STAIRS] == 0``.
    stair_height : numpy.ndarray
        ``STAIRS`` stair tops, increasing towards ``exp(0) = 1``.
    """

    stair_width: npt.NDArray[np.float64]
    stair_height: npt.NDArray[np.float64]

    @classmethod
    def build(cls) -> ZigguratTables:
        width = np.zeros(STAIRS + 1, dtype=np.float64)
        height = np.zeros(STAIRS, dtype=np.float64)

        height[0] = math.exp(-X1)
        width[0] = STAIR_AREA / height[0]
        width[STAIRS] = 0.0

        for i in range(1, STAIRS):
            # x_{i+1} solves f(x) = y_i
            width[i] = -math.log(height[i - 1])
            height[i] = height[i - 1] + STAIR_AREA / width[i]

        width.flags.writeable = False
        height.flags.writeable = False
        return cls(stair_width=width, stair_height=height)


_tables: ZigguratTables | None = None
_tables_lock = threading.Lock()


def ziggurat_tables() -> ZigguratTables:
    """Return the process-wide tables, building them on first call."""
    global _tables
    tables = _tables
    if tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = ZigguratTables.build()
                logger.debug("Built exponential ziggurat tables (%d stairs)", STAIRS)
            tables = _tables
    return tables


def standard_exponential(engine: RandEngine | None = None) -> float:
    """
    Draw ``E ~ Exponential(1)`` with the ziggurat method.

    Per iteration a stair is picked by the low 8 bits of an engine draw and a
    horizontal offset is drawn uniformly across it:

    - offset under the next stair: accept (about 99% of draws);
    - base stair: continue in the tail, shifting the result by ``X1``;
    - otherwise: accept if a uniform height on the stair falls under
      ``exp(-x)``, else start over.

    Parameters
    ----------
    engine : RandEngine or None, default None
        Source of bits; ``None`` uses the thread's default engine.

    Returns
    -------
    float
        Non-negative variate, or ``UNDEFINED`` if the configured iteration
        ceiling is exhausted.
    """
    if engine is None:
        engine = default_engine()
    tables = ziggurat_tables()
    width = tables.stair_width
    height = tables.stair_height

    offset = 0.0
    for _ in range(max_iterations()):
        stair = engine.next() & (STAIRS - 1)
        x = standard_uniform(engine) * width[stair]

        if x < width[stair + 1]:
            return offset + float(x)

        if stair == 0:
            # the tail beyond X1 is again exponential
            offset += X1
            continue

        if uniform(height[stair - 1], height[stair], engine) < math.exp(-x):
            return offset + float(x)

    return exhausted("Exponential")


__all__ = [
    "STAIRS",
    "STAIR_AREA",
    "X1",
    "ZigguratTables",
    "standard_exponential",
    "ziggurat_tables",
]
