"""
Numeric Fallbacks
=================

Generic numeric routines used by families that lack a closed form for a
characteristic. Every function takes the distribution's own scalar
characteristic (``cdf``, ``pdf`` or ``pmf``) as input:

- :func:`ppf_from_cdf`: continuous quantile by bracket expansion and bisection;
- :func:`discrete_ppf_from_cdf`: integer quantile by doubling and binary search;
- :func:`cf_from_pdf`, :func:`expected_value_from_pdf`: quadrature over the support;
- :func:`cf_from_pmf`, :func:`entropy_from_pmf`, :func:`expected_value_from_pmf`
 : truncated series over a discrete support.

Notes
-----
Series stop once the accumulated mass reaches ``1 - tol`` or after
``max_terms`` points, so very heavy tails are truncated.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from typing import TYPE_CHECKING

from scipy import integrate as _sp_integrate

from pysatl_variates.types import UNDEFINED

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from pysatl_variates.distributions.support import ContinuousSupport, DiscreteSupport
    from pysatl_variates.types import ScalarFunc

SERIES_TOLERANCE = 1e-15
SERIES_MAX_TERMS = 1_000_000


def ppf_from_cdf(
    cdf: ScalarFunc,
    *,
    most_left: bool = False,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``ppf`` from a scalar ``cdf`` using bracket expansion
    and a bisection search.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Monotone CDF ``[-inf, +inf] -> [0, 1]``.
    most_left : bool, default False
        If ``True``, return the leftmost quantile on flat CDF plateaus.
    x0 : float, default 0.0
        Initial bracket center.
    init_step : float, default 1.0
        Initial half-width for the bracket.
    expand_factor : float, default 2.0
        Multiplicative factor for exponential bracket growth.
    max_expand : int, default 60
        Maximum expansions while searching for a valid bracket.
    x_tol : float, default 1e-12
        Relative tolerance in ``x`` for the stopping criterion.
    max_iter : int, default 200
        Maximum bisection iterations.

    Returns
    -------
    Callable[[float], float]
        Scalar ``ppf`` such that ``cdf(ppf(q)) ≈ q``; ``q`` outside ``[0, 1]``
        maps to ``UNDEFINED``, ``q = 0`` to ``-inf`` and ``q = 1`` to ``+inf``.
    """

    def _expand_bracket(q: float) -> tuple[float, float]:
        step = init_step
        L = x0 - step
        R = x0 + step
        FL = float(cdf(L))
        FR = float(cdf(R))

        for _ in range(max_expand):
            if most_left:
                grow_left = not (q > FL)
                grow_right = not (q <= FR)
            else:
                grow_left = not (q >= FL)
                grow_right = not (q < FR)

            if not (grow_left or grow_right):
                break

            if grow_left:
                step *= expand_factor
                L -= step
                FL = float(cdf(L))
            if grow_right:
                step *= expand_factor
                R += step
                FR = float(cdf(R))

        return L, R

    def _ppf(q: float) -> float:
        if not 0.0 <= q <= 1.0:
            return UNDEFINED
        if q == 0.0:
            return float("-inf")
        if q == 1.0:
            return float("inf")

        L, R = _expand_bracket(q)

        it = 0
        while it < max_iter and x_tol * (1.0 + max(abs(L), abs(R))) < (R - L):
            M = 0.5 * (L + R)
            FM = float(cdf(M))

            if (q <= FM) if most_left else (q < FM):
                R = M
            else:
                L = M

            it += 1

        return R if most_left else L

    return _ppf


def discrete_ppf_from_cdf(
    cdf: ScalarFunc, start: int, *, max_doublings: int = 1000
) -> Callable[[float], float]:
    """
    Build the quantile ``min{k >= start : cdf(k) >= q}`` of an integer-valued law.

    Parameters
    ----------
    cdf : Callable[[float], float]
        CDF evaluated at integers.
    start : int
        Smallest support point.
    max_doublings : int, default 1000
        Upper bound on bracket doublings, keeping the bracket inside the double
        range; a CDF still below ``q`` there gives ``inf``.

    Returns
    -------
    Callable[[float], float]
        Scalar quantile returning integer-valued floats; ``q = 0`` gives
        ``start``, ``q = 1`` gives ``inf`` and ``q`` outside ``[0, 1]`` gives
        ``UNDEFINED``.
    """

    def _ppf(q: float) -> float:
        if not 0.0 <= q <= 1.0:
            return UNDEFINED
        if q == 0.0:
            return float(start)
        if q == 1.0:
            return float("inf")

        if cdf(start) >= q:
            return float(start)

        lo, step = start, 1
        for _ in range(max_doublings):
            hi = start + step
            if cdf(hi) >= q:
                break
            lo = hi
            step *= 2
        else:
            return float("inf")

        # invariant: cdf(lo) < q <= cdf(hi)
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if cdf(mid) >= q:
                hi = mid
            else:
                lo = mid
        return float(hi)

    return _ppf


def cf_from_pdf(pdf: ScalarFunc, t: float, support: ContinuousSupport) -> complex:
    """
    Characteristic function ``E[exp(itX)]`` by quadrature of ``pdf`` over ``support``.
    """
    if t == 0.0:
        return 1.0 + 0.0j
    if math.isinf(support.left):
        re, _ = _sp_integrate.quad(
            lambda x: pdf(x) * math.cos(t * x), support.left, support.right, limit=200
        )
        im, _ = _sp_integrate.quad(
            lambda x: pdf(x) * math.sin(t * x), support.left, support.right, limit=200
        )
    else:
        # QUADPACK Fourier weights (QAWO on finite, QAWF on right-infinite ranges)
        omega = abs(t)
        re, _ = _sp_integrate.quad(
            pdf, support.left, support.right, weight="cos", wvar=omega, limit=200
        )
        im, _ = _sp_integrate.quad(
            pdf, support.left, support.right, weight="sin", wvar=omega, limit=200
        )
        if t < 0.0:
            im = -im
    return complex(re, im)


def expected_value_from_pdf(
    pdf: ScalarFunc, func: ScalarFunc, support: ContinuousSupport
) -> float:
    """``E[func(X)]`` by quadrature of ``func * pdf`` over ``support``."""
    val, _ = _sp_integrate.quad(
        lambda x: func(x) * pdf(x), support.left, support.right, limit=200
    )
    return float(val)


def _iter_masses(
    pmf: ScalarFunc,
    support: DiscreteSupport,
    tol: float,
    max_terms: int,
) -> Iterator[tuple[float, float]]:
    total = 0.0
    for i, k in enumerate(support.iter_points()):
        if i >= max_terms or total >= 1.0 - tol:
            break
        p = float(pmf(float(k)))
        total += p
        yield float(k), p


def cf_from_pmf(
    pmf: ScalarFunc,
    t: float,
    support: DiscreteSupport,
    *,
    tol: float = SERIES_TOLERANCE,
    max_terms: int = SERIES_MAX_TERMS,
) -> complex:
    """Characteristic function as a truncated series ``sum p(k) exp(itk)``."""
    if t == 0.0:
        return 1.0 + 0.0j
    return sum(
        (p * cmath.exp(1j * t * k) for k, p in _iter_masses(pmf, support, tol, max_terms)),
        start=0.0j,
    )


def entropy_from_pmf(
    pmf: ScalarFunc,
    support: DiscreteSupport,
    *,
    tol: float = SERIES_TOLERANCE,
    max_terms: int = SERIES_MAX_TERMS,
) -> float:
    """Shannon entropy (nats) as a truncated series ``-sum p(k) log p(k)``."""
    return -math.fsum(
        p * math.log(p) for _, p in _iter_masses(pmf, support, tol, max_terms) if p > 0.0
    )


def expected_value_from_pmf(
    pmf: ScalarFunc,
    func: ScalarFunc,
    support: DiscreteSupport,
    *,
    tol: float = SERIES_TOLERANCE,
    max_terms: int = SERIES_MAX_TERMS,
) -> float:
    """``E[func(X)]`` as a truncated series over ``support``."""
    return math.fsum(func(k) * p for k, p in _iter_masses(pmf, support, tol, max_terms))


__all__ = [
    "SERIES_MAX_TERMS",
    "SERIES_TOLERANCE",
    "cf_from_pdf",
    "cf_from_pmf",
    "discrete_ppf_from_cdf",
    "entropy_from_pmf",
    "expected_value_from_pdf",
    "expected_value_from_pmf",
    "ppf_from_cdf",
]
