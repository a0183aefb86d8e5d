from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import cmath
import math
from collections.abc import Iterable
from itertools import cycle
from typing import Any

import numpy as np

from pysatl_variates.distributions import (
    ArraySample,
    ContinuousDistribution,
    ContinuousSupport,
    DiscreteDistribution,
    Distribution,
    IntegerLatticeDiscreteSupport,
    InverseTransformSamplingStrategy,
    Sample,
    SamplingStrategy,
    discrete_ppf_from_cdf,
)
from pysatl_variates.stats.engines import RandEngine
from pysatl_variates.stats.uniform import standard_uniform
from pysatl_variates.types import (
    EngineName,
    EuclideanDistributionType,
    UnivariateContinuous,
    UnivariateDiscrete,
)


class MockSamplingStrategy(SamplingStrategy):
    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample:
        return ArraySample(np.full((n, 1), 0.5))


class ConstantEngine(RandEngine):
    """
    Engine returning the same word forever.

    ``ConstantEngine()`` returns ``max_value``: every uniform is just below 1,
    which drives the ziggurat into the top stair where each draw is rejected.
    """

    name = EngineName.JKISS
    bits = 32

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None) -> None:
        self._value = self.max_value if value is None else value

    def reseed(self, seed: int) -> None:
        self._value = seed & self.max_value

    def next(self) -> int:
        return self._value


class SequenceEngine(RandEngine):
    """Engine cycling through a fixed list of words."""

    name = EngineName.JKISS
    bits = 32

    __slots__ = ("_words", "_source")

    def __init__(self, words: Iterable[int]) -> None:
        self._source = [w & self.max_value for w in words]
        self._words = cycle(self._source)

    def reseed(self, seed: int) -> None:
        self._words = cycle(self._source)

    def next(self) -> int:
        return next(self._words)


class StandaloneLogisticDistribution(ContinuousDistribution):
    """
    Standard logistic law given only by ``cdf`` and ``pdf``.

    Quantile, hazard, expected values and likelihood come from the protocol
    defaults.
    """

    def __init__(self, engine: RandEngine | None = None) -> None:
        self.engine = engine

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    @property
    def parameters(self) -> Any:
        return None

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return InverseTransformSamplingStrategy()

    def set_parameters(self, **params: Any) -> None:
        if params:
            raise TypeError(f"Unknown parameters: {sorted(params)}")

    def cdf(self, x: float) -> float:
        return 0.5 * (1.0 + math.tanh(0.5 * x))

    def pdf(self, x: float) -> float:
        e = math.exp(-abs(x))
        return e / (1.0 + e) ** 2

    def cf(self, t: float) -> complex:
        if t == 0.0:
            return 1.0 + 0.0j
        return complex(math.pi * t / math.sinh(math.pi * t))

    def mean(self) -> float:
        return 0.0

    def var(self) -> float:
        return math.pi**2 / 3.0

    def median(self) -> float:
        return 0.0

    def mode(self) -> float:
        return 0.0

    def skewness(self) -> float:
        return 0.0

    def excess_kurtosis(self) -> float:
        return 1.2

    def entropy(self) -> float:
        return 2.0

    def variate(self) -> float:
        return self.ppf(standard_uniform(self.engine))


class StandaloneHalfGeometricDistribution(DiscreteDistribution):
    """``P(X = k) = 2**-(k + 1)`` on ``0, 1, 2, ...`` given only by ``cdf`` and ``pmf``."""

    def __init__(self, engine: RandEngine | None = None) -> None:
        self.engine = engine

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    @property
    def parameters(self) -> Any:
        return None

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return MockSamplingStrategy()

    def set_parameters(self, **params: Any) -> None:
        if params:
            raise TypeError(f"Unknown parameters: {sorted(params)}")

    def pmf(self, k: float) -> float:
        return 0.5 ** (k + 1) if self.support.contains(k) else 0.0

    def cdf(self, x: float) -> float:
        return 0.0 if x < 0 else 1.0 - 0.5 ** (math.floor(x) + 1)

    def ppf(self, p: float) -> float:
        return discrete_ppf_from_cdf(self.cdf, start=0)(p)

    def cf(self, t: float) -> complex:
        return 0.5 / (1.0 - 0.5 * cmath.exp(1j * t))

    def mean(self) -> float:
        return 1.0

    def var(self) -> float:
        return 2.0

    def median(self) -> float:
        return 0.0

    def mode(self) -> float:
        return 0.0

    def skewness(self) -> float:
        return 1.5 / math.sqrt(0.5)

    def excess_kurtosis(self) -> float:
        return 6.5

    def entropy(self) -> float:
        return 2.0 * math.log(2.0)

    def variate(self) -> float:
        return self.ppf(standard_uniform(self.engine))
