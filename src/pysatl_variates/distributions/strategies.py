"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its implementations:

- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`VariateSamplingStrategy`: draws ``(n, 1)`` samples by repeated
  calls to the distribution's own ``variate``; used by every built-in family.
- :class:`InverseTransformSamplingStrategy`: draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates from the distribution's engine.

Notes
-----
- Strategies are stateless; one instance may be shared by all families.
- Draws are independent; no batch-level shortcuts are taken.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

from pysatl_variates.stats.uniform import standard_uniform

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_variates.stats.engines import RandEngine

    from .distribution import Distribution


def _check_size(n: int) -> int:
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")
    return int(n)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class VariateSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler: ``n`` independent calls to ``distr.variate()``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        n = _check_size(n)
        return ArraySample.from_values(distr.variate() for _ in range(n))


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy applies the distribution's ``ppf`` to i.i.d. uniforms
    ``U ~ U(0, 1)``. Uniforms come from ``engine`` if given as an option,
    else from the distribution's engine, else from the thread's default one.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        n = _check_size(n)
        engine: RandEngine | None = options.get("engine", distr.engine)
        return ArraySample.from_values(
            distr.ppf(standard_uniform(engine)) for _ in range(n)
        )


__all__ = [
    "InverseTransformSamplingStrategy",
    "SamplingStrategy",
    "VariateSamplingStrategy",
]
