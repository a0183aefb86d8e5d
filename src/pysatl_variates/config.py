"""
Runtime Configuration
=====================

Process-wide knobs of the variate engine:

- which bit generator backs the per-thread default engine;
- the iteration ceiling shared by every rejection / recursion loop.

Notes
-----
- The configuration object is immutable; :func:`configure` swaps in a new one.
- Thread-local default engines compare their algorithm with the current
  configuration on access and are recreated when it changed.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

from pysatl_variates.types import EngineName

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MAX_REJECTION_ITERATIONS = 10**9


@dataclass(frozen=True, slots=True)
class VariatesConfig:
    """
    Immutable runtime configuration.

    Parameters
    ----------
    engine : EngineName, default EngineName.JKISS
        Algorithm of the per-thread default bit generator.
    max_rejection_iterations : int, default 10**9
        Ceiling on rejection-loop iterations. A loop that exhausts it returns
        the ``UNDEFINED`` sentinel instead of spinning forever.
    """

    engine: EngineName = EngineName.JKISS
    max_rejection_iterations: int = DEFAULT_MAX_REJECTION_ITERATIONS

    def __post_init__(self) -> None:
        object.__setattr__(self, "engine", EngineName(self.engine))
        if self.max_rejection_iterations < 1:
            raise ValueError(
                f"max_rejection_iterations must be positive, got {self.max_rejection_iterations}"
            )


_config = VariatesConfig()


def get_config() -> VariatesConfig:
    """Return the active configuration."""
    return _config


def configure(**changes: Any) -> VariatesConfig:
    """
    Replace selected fields of the active configuration.

    Parameters
    ----------
    **changes
        Field values, e.g. ``engine="pcg"`` or ``max_rejection_iterations=1000``.

    Returns
    -------
    VariatesConfig
        The new active configuration.

    Raises
    ------
    TypeError
        If an unknown field is passed.
    ValueError
        If a value is invalid.
    """
    global _config

    known = {f.name for f in fields(VariatesConfig)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"Unknown configuration fields: {sorted(unknown)}")

    _config = replace(_config, **changes)
    logger.debug("Configuration updated: %s", _config)
    return _config


def reset_config() -> None:
    """Restore the default configuration."""
    global _config
    _config = VariatesConfig()


__all__ = [
    "DEFAULT_MAX_REJECTION_ITERATIONS",
    "VariatesConfig",
    "configure",
    "get_config",
    "reset_config",
]
