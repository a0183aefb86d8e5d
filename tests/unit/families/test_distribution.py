from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates.distributions import ArraySample, VariateSamplingStrategy
from pysatl_variates.families import (
    ContinuousUniformDistribution,
    ExponentialDistribution,
    GeometricDistribution,
)
from pysatl_variates.stats.engines import JKissRandEngine
from pysatl_variates.types import Kind, UnivariateContinuous, UnivariateDiscrete


class TestParametricDistribution:
    def test_distribution_type(self):
        assert ExponentialDistribution().distribution_type == UnivariateContinuous
        assert GeometricDistribution().distribution_type == UnivariateDiscrete
        assert GeometricDistribution.kind is Kind.DISCRETE

    def test_default_sampling_strategy(self):
        assert isinstance(ExponentialDistribution().sampling_strategy, VariateSamplingStrategy)

    def test_set_parameters_rebuilds_derived_constants(self):
        distr = GeometricDistribution(p=0.5)
        assert distr.derived.table is not None

        distr.set_parameters(p=0.05)
        assert distr.p == 0.05
        assert distr.derived.table is None

    def test_unknown_parameter_raises(self):
        distr = ExponentialDistribution(rate=2.0)
        with pytest.raises(TypeError, match="Unknown parameters"):
            distr.set_parameters(scale=3.0)
        assert distr.rate == 2.0

    def test_unknown_constructor_parameter_raises(self):
        with pytest.raises(TypeError):
            ExponentialDistribution(2.0, shape=1.0)  # type: ignore[call-arg]

    def test_failed_precondition_leaves_state(self):
        distr = ContinuousUniformDistribution(0.0, 1.0)
        state = distr.parameters, distr.derived

        with pytest.raises(ValueError):
            distr.set_parameters(low=5.0)

        assert (distr.parameters, distr.derived) == state
        assert distr.low == 0.0

    def test_fallback_on_set(self):
        distr = ExponentialDistribution(rate=3.0)
        distr.set_parameters(rate=-1.0)
        assert distr.rate == 1.0

    def test_engine_is_used_for_variates(self):
        first = ExponentialDistribution(engine=JKissRandEngine(7))
        second = ExponentialDistribution(engine=JKissRandEngine(7))
        assert [first.variate() for _ in range(5)] == [second.variate() for _ in range(5)]

    def test_sample_shape(self):
        sample = ExponentialDistribution(engine=JKissRandEngine(1)).sample(25)
        assert isinstance(sample, ArraySample)
        assert sample.shape == (25, 1)
        assert (sample.array >= 0.0).all()

    def test_check_validity(self):
        distr = ExponentialDistribution()
        assert distr.check_validity([0.0, 2.0])
        assert not distr.check_validity([-1.0])

    def test_repr(self):
        assert repr(ExponentialDistribution(rate=2.5)) == "ExponentialDistribution(rate=2.5)"
        assert repr(GeometricDistribution(p=0.25)) == "GeometricDistribution(p=0.25)"
