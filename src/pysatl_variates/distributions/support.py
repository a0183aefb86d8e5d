"""
Distribution Supports
=====================

Supports answer membership queries for scalars and arrays. Estimators use
them to reject samples with observations outside the support; series-based
numeric fallbacks enumerate discrete supports point by point.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_variates.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    import numpy.typing as npt


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains_all(self, observations: npt.ArrayLike) -> bool:
        """Check that every observation lies in the support (``True`` for empty input)."""
        arr = np.asarray(observations, dtype=float)
        if arr.size == 0:
            return True
        return bool(np.all(self.contains(arr.ravel())))


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def first(self) -> Number | None: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """Finite support given by an explicit set of points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number]) -> None:
        arr = np.unique(np.asarray(list(points), dtype=float))

        if arr.size == 0:
            raise ValueError("Points must be non-empty")

        self._points = arr

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        result = np.isin(arr, self._points)

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[Number]:
        return iter(self._points)

    def first(self) -> Number:
        return cast(Number, self._points[0])

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integers ``min_k, min_k + 1, ..., max_k``; either bound may be open (``None``).
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            mask = np.isfinite(xf) & (xf == np.floor(xf))
            if self.min_k is not None:
                mask &= xf >= self.min_k
            if self.max_k is not None:
                mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        return self.min_k

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = cast(int, self.min_k)
            while self.max_k is None or current <= self.max_k:
                yield current
                current += 1

        return _gen()

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
