"""
Pseudo-Random Bit Generators
============================

Integer engines underlying every sampler in the package:

- :class:`JKissRandEngine`: 32-bit KISS (LCG + xorshift + multiply-with-carry).
- :class:`JLKiss64RandEngine`: 64-bit KISS with two multiply-with-carry lanes.
- :class:`PCGRandEngine`: permuted congruential generator (XSH-RR, 32-bit output).

Seeding helpers:

- :func:`mix`: Bob Jenkins' 96-bit integer mix on 64-bit words.
- :func:`random_seed`: per-thread seed from clock, thread identity and a counter.
- :func:`default_engine`: lazily created engine of the calling thread.

Notes
-----
Engines are not synchronised. Sharing one instance between threads without
external locking interleaves state updates and yields an unspecified stream;
use the thread-local :func:`default_engine` or one engine per thread.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pysatl_variates.config import get_config
from pysatl_variates.types import EngineName

if TYPE_CHECKING:
    from typing import ClassVar

logger = logging.getLogger(__name__)

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def mix(a: int, b: int, c: int) -> int:
    """
    Bob Jenkins' 3-word integer mix, computed on unsigned 64-bit words.

    Parameters
    ----------
    a, b, c : int
        Input words (reduced modulo 2**64).

    Returns
    -------
    int
        Mixed 64-bit value (the final ``c`` word).
    """
    a &= _MASK64
    b &= _MASK64
    c &= _MASK64

    a = (a - b - c) & _MASK64
    a ^= c >> 13
    b = (b - c - a) & _MASK64
    b ^= (a << 8) & _MASK64
    c = (c - a - b) & _MASK64
    c ^= b >> 13
    a = (a - b - c) & _MASK64
    a ^= c >> 12
    b = (b - c - a) & _MASK64
    b ^= (a << 16) & _MASK64
    c = (c - a - b) & _MASK64
    c ^= b >> 5
    a = (a - b - c) & _MASK64
    a ^= c >> 3
    b = (b - c - a) & _MASK64
    b ^= (a << 10) & _MASK64
    c = (c - a - b) & _MASK64
    c ^= b >> 15
    return c


_seed_state = threading.local()


def random_seed() -> int:
    """
    Produce a 64-bit seed that differs between threads and successive calls.

    Mixes the wall-clock time in seconds, a hash of the calling thread's
    identity and a thread-local counter, so two threads reseeding within the
    same clock tick still obtain different seeds.
    """
    counter = getattr(_seed_state, "counter", 123456789) + 1
    _seed_state.counter = counter
    return mix(int(time.time()), hash(threading.get_ident()), counter)


class RandEngine(ABC):
    """
    Base class of the bit generators.

    Parameters
    ----------
    seed : int or None, default None
        Initial seed. ``None`` draws one from :func:`random_seed`.

    Attributes
    ----------
    name : EngineName
        Algorithm identifier.
    bits : int
        Width of the values returned by :meth:`next`.
    """

    name: ClassVar[EngineName]
    bits: ClassVar[int]

    __slots__ = ()

    def __init__(self, seed: int | None = None) -> None:
        self.reseed(random_seed() if seed is None else seed)

    @abstractmethod
    def reseed(self, seed: int) -> None:
        """Reset the internal state deterministically from ``seed``."""

    @abstractmethod
    def next(self) -> int:
        """Advance the state and return one value in ``[0, max_value]``."""

    @property
    def max_value(self) -> int:
        """Largest value :meth:`next` can return."""
        return (1 << self.bits) - 1

    def __iter__(self) -> RandEngine:
        return self

    def __next__(self) -> int:
        return self.next()


class JKissRandEngine(RandEngine):
    """
    JKISS generator (David Jones) on 32-bit words X, Y, Z, C.

    X follows a linear congruential step, Y a 13/17/5 xorshift and (Z, C) a
    multiply-with-carry step; the output is ``X + Y + Z`` modulo 2**32.
    """

    name = EngineName.JKISS
    bits = 32

    __slots__ = ("_x", "_y", "_z", "_c")

    def reseed(self, seed: int) -> None:
        # Y and (Z, C) are fixed non-zero, so neither the xorshift nor the
        # multiply-with-carry lane can start in its all-zero fixed point.
        self._x = (123456789 ^ seed) & _MASK32
        self._c = 6543217
        self._y = 987654321
        self._z = 43219876

    def next(self) -> int:
        t = 698769069 * self._z + self._c

        self._x = (69069 * self._x + 12345) & _MASK32

        y = self._y
        y ^= (y << 13) & _MASK32
        y ^= y >> 17
        y ^= (y << 5) & _MASK32
        self._y = y

        self._c = t >> 32
        self._z = t & _MASK32

        return (self._x + self._y + self._z) & _MASK32


class JLKiss64RandEngine(RandEngine):
    """
    64-bit JLKISS generator.

    Combines a 64-bit LCG, a 21/17/30 xorshift and two independent 32-bit
    multiply-with-carry lanes whose outputs are concatenated into one 64-bit
    word; the sum of all parts is taken modulo 2**64.
    """

    name = EngineName.JLKISS64
    bits = 64

    __slots__ = ("_x", "_y", "_z1", "_z2", "_c1", "_c2")

    def reseed(self, seed: int) -> None:
        self._x = (123456789123 ^ seed) & _MASK64
        self._y = 987654321987
        self._z1 = 43219876
        self._z2 = 6543217
        self._c1 = 21987643
        self._c2 = 1732654

    def next(self) -> int:
        self._x = (1490024343005336237 * self._x + 123456789) & _MASK64

        y = self._y
        y ^= (y << 21) & _MASK64
        y ^= y >> 17
        y ^= (y << 30) & _MASK64
        self._y = y

        t = 4294584393 * self._z1 + self._c1
        self._c1 = t >> 32
        self._z1 = t & _MASK32
        t = 4246477509 * self._z2 + self._c2
        self._c2 = t >> 32
        self._z2 = t & _MASK32

        return (self._x + self._y + self._z1 + (self._z2 << 32)) & _MASK64


class PCGRandEngine(RandEngine):
    """
    PCG32 (XSH-RR): 64-bit LCG state, 32-bit output.

    The output xor-shifts the high bits of the previous state into a 32-bit
    word and rotates it right by the top five state bits.
    """

    name = EngineName.PCG
    bits = 32

    __slots__ = ("_state", "_inc")

    def reseed(self, seed: int) -> None:
        self._state = seed & _MASK64
        self._inc = seed & _MASK64

    def next(self) -> int:
        old = self._state
        self._state = (old * 6364136223846793005 + (self._inc | 1)) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32


ENGINES: dict[EngineName, type[RandEngine]] = {
    EngineName.JKISS: JKissRandEngine,
    EngineName.JLKISS64: JLKiss64RandEngine,
    EngineName.PCG: PCGRandEngine,
}


def create_engine(name: EngineName | str, seed: int | None = None) -> RandEngine:
    """
    Instantiate an engine by algorithm name.

    Raises
    ------
    ValueError
        If ``name`` is not a known algorithm.
    """
    try:
        engine_cls = ENGINES[EngineName(name)]
    except ValueError as exc:
        raise ValueError(f"Unknown engine '{name}', expected one of {list(ENGINES)}") from exc
    return engine_cls(seed)


_thread_engines = threading.local()


def default_engine() -> RandEngine:
    """
    Return the calling thread's default engine, creating it on first use.

    The algorithm comes from :func:`pysatl_variates.config.get_config`; the
    engine is recreated (with a fresh random seed) if the configured algorithm
    changed since it was built.
    """
    engine: RandEngine | None = getattr(_thread_engines, "engine", None)
    wanted = get_config().engine
    if engine is None or engine.name != wanted:
        engine = create_engine(wanted)
        _thread_engines.engine = engine
        logger.debug(
            "Created default %s engine for thread %d", wanted.value, threading.get_ident()
        )
    return engine


def seed_default_engine(seed: int) -> None:
    """Reseed the calling thread's default engine."""
    default_engine().reseed(seed)
    logger.debug("Reseeded default engine of thread %d", threading.get_ident())


__all__ = [
    "ENGINES",
    "JKissRandEngine",
    "JLKiss64RandEngine",
    "PCGRandEngine",
    "RandEngine",
    "create_engine",
    "default_engine",
    "mix",
    "random_seed",
    "seed_default_engine",
]
