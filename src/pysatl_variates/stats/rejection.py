"""
Bounded Rejection Loops
=======================

Every unbounded accept/reject or tail-recursion loop in the package runs
through the ceiling defined here:

- :func:`max_iterations`: the configured ceiling (default ``10**9``);
- :func:`exhausted`: warns and returns the ``UNDEFINED`` sentinel;
- :func:`bounded_rejection`: generic loop over a trial callable.

Notes
-----
Reaching the ceiling is not an expected path: with the default bound it only
happens when the engine or the parameters are broken. The loop then returns
``UNDEFINED`` instead of hanging, which bounds the latency of every draw.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

from pysatl_variates.config import get_config
from pysatl_variates.types import UNDEFINED

if TYPE_CHECKING:
    from collections.abc import Callable


def max_iterations() -> int:
    """Return the configured rejection-loop ceiling."""
    return get_config().max_rejection_iterations


def exhausted(sampler: str) -> float:
    """
    Report a loop that ran out of iterations.

    Parameters
    ----------
    sampler : str
        Name of the sampler, used in the warning message.

    Returns
    -------
    float
        The ``UNDEFINED`` sentinel.
    """
    warnings.warn(
        f"{sampler}: rejection loop exceeded {max_iterations()} iterations, "
        "returning UNDEFINED",
        RuntimeWarning,
        stacklevel=3,
    )
    return UNDEFINED


def bounded_rejection(trial: Callable[[], float | None], *, sampler: str) -> float:
    """
    Repeat ``trial`` until it returns a value.

    Parameters
    ----------
    trial : Callable[[], float | None]
        One proposal plus acceptance test; returns the accepted value or
        ``None`` on rejection.
    sampler : str
        Name used when the ceiling is hit.

    Returns
    -------
    float
        The first accepted value, or ``UNDEFINED`` after
        :func:`max_iterations` rejections.
    """
    for _ in range(max_iterations()):
        value = trial()
        if value is not None:
            return value
    return exhausted(sampler)


__all__ = [
    "bounded_rejection",
    "exhausted",
    "max_iterations",
]
