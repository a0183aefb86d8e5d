from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_variates.config import DEFAULT_MAX_REJECTION_ITERATIONS, configure
from pysatl_variates.stats.rejection import bounded_rejection, max_iterations


def test_default_ceiling():
    assert max_iterations() == DEFAULT_MAX_REJECTION_ITERATIONS == 10**9


def test_returns_first_accepted_value():
    calls = []

    def trial():
        calls.append(1)
        return 2.5 if len(calls) == 3 else None

    assert bounded_rejection(trial, sampler="Test") == 2.5
    assert len(calls) == 3


def test_accepts_zero():
    assert bounded_rejection(lambda: 0.0, sampler="Test") == 0.0


def test_stops_at_the_ceiling():
    configure(max_rejection_iterations=7)
    calls = []

    def trial():
        calls.append(1)
        return None

    with pytest.warns(RuntimeWarning, match="Test: rejection loop exceeded 7 iterations"):
        value = bounded_rejection(trial, sampler="Test")

    assert math.isnan(value)
    assert len(calls) == 7
