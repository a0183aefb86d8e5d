from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import special

from pysatl_variates.config import configure
from pysatl_variates.stats.discrete import (
    TABLE_SIZE,
    CumulativeTable,
    geometric_by_exponential,
    uniform_index,
    zeta_variate,
)
from pysatl_variates.stats.engines import JKissRandEngine
from tests.utils.mocks import ConstantEngine, SequenceEngine


class TestCumulativeTable:
    def test_geometric_table_values(self):
        table = CumulativeTable.geometric(0.5)
        assert table.values.shape == (TABLE_SIZE,)
        assert table.values[0] == 0.5
        assert table.values[-1] == pytest.approx(1.0 - 0.5**TABLE_SIZE)
        assert np.all(np.diff(table.values) > 0.0)
        assert not table.values.flags.writeable

    def test_table_variates_have_geometric_moments(self):
        engine = JKissRandEngine(17)
        table = CumulativeTable.geometric(0.5)
        values = np.array([table.variate(engine) for _ in range(100_000)])

        assert (values >= 0).all()
        assert np.all(values == np.floor(values))
        assert values.mean() == pytest.approx(1.0, abs=0.02)
        assert values.var() == pytest.approx(2.0, abs=0.08)

    def test_tail_shifting_reaches_beyond_table(self):
        engine = JKissRandEngine(3)
        table = CumulativeTable.geometric(0.2)
        values = [table.variate(engine) for _ in range(50_000)]
        # P(X >= 16) = 0.8**16 ~ 2.8%
        assert max(values) >= TABLE_SIZE

    def test_exhaustion_returns_undefined(self):
        configure(max_rejection_iterations=10)
        table = CumulativeTable.geometric(0.3)
        with pytest.warns(RuntimeWarning, match="Geometric"):
            value = table.variate(ConstantEngine())
        assert math.isnan(value)


class TestGeometricByExponential:
    def test_moments_for_small_probability(self):
        p = 0.05
        engine = JKissRandEngine(23)
        rate = -math.log1p(-p)
        values = np.array([geometric_by_exponential(rate, engine) for _ in range(100_000)])

        assert (values >= 0).all()
        assert np.all(values == np.floor(values))
        assert values.mean() == pytest.approx((1 - p) / p, abs=0.3)


class TestZetaVariate:
    def test_support_and_mass_at_one(self):
        s = 4.0
        engine = JKissRandEngine(41)
        values = np.array([zeta_variate(s, engine) for _ in range(50_000)])

        assert (values >= 1).all()
        assert np.all(values == np.floor(values))
        assert np.mean(values == 1) == pytest.approx(1.0 / special.zeta(s), abs=0.01)
        assert values.mean() == pytest.approx(special.zeta(s - 1) / special.zeta(s), abs=0.02)

    def test_heavy_tail_still_terminates(self):
        engine = JKissRandEngine(2)
        values = [zeta_variate(1.5, engine) for _ in range(5_000)]
        assert all(v >= 1 for v in values)

    def test_exhaustion_returns_undefined(self):
        configure(max_rejection_iterations=5)
        with pytest.warns(RuntimeWarning, match="Zeta"):
            value = zeta_variate(2.0, ConstantEngine())
        assert math.isnan(value)


class TestUniformIndex:
    def test_single_word_reduction(self):
        assert uniform_index(5, ConstantEngine(7)) == 2.0
        assert uniform_index(1, ConstantEngine()) == 0.0

    def test_words_concatenated_for_wide_ranges(self):
        n = 2**40 + 1
        assert uniform_index(n, SequenceEngine([1, 2])) == float((1 << 32) | 2)

    def test_covers_range_wider_than_engine_word(self):
        engine = JKissRandEngine(3)
        n = 2**40 + 1
        values = np.array([uniform_index(n, engine) for _ in range(20_000)])
        assert values.min() >= 0.0
        assert values.max() < n
        assert values.max() > 2**32
        assert values.mean() == pytest.approx(n / 2.0, rel=0.02)

    def test_top_block_is_rejected(self):
        # 2**32 - 1 is divisible by 3, so the all-ones word lies past the last full block
        configure(max_rejection_iterations=25)
        with pytest.warns(RuntimeWarning, match="DiscreteUniform"):
            value = uniform_index(3, ConstantEngine())
        assert math.isnan(value)

    def test_no_modulo_bias_near_word_size(self):
        engine = JKissRandEngine(11)
        n = 3 * 2**30
        values = np.array([uniform_index(n, engine) for _ in range(30_000)])
        # modulo reduction would put half of the mass below 2**30
        assert np.mean(values < 2**30) == pytest.approx(1.0 / 3.0, abs=0.015)
