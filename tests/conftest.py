from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_variates.config import reset_config
from pysatl_variates.families.configuration import reset_families_register
from pysatl_variates.stats.engines import seed_default_engine

pytest.importorskip("scipy")

SEED = 20250101


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_config()
    reset_families_register()
    seed_default_engine(SEED)
    yield
    reset_config()
