"""
Estimator Helpers
=================

Shared pieces of the per-family ``fit_*`` methods:

- :func:`as_observations`: normalises a :class:`Sample`, a numpy array or any
  sequence of numbers to a flat float array (the caller's data is copied,
  never mutated);
- :func:`check_validity`: support membership gate run before every fit;
- :func:`is_fittable`: validity plus a non-empty, finite sample;
- :func:`sample_mean`: the sufficient statistic of most closed-form fits.

Estimators return ``False`` (MLE / method of moments) or ``None`` (Bayesian
update) and leave the distribution untouched when the gate fails.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, TypeAlias

import numpy as np

from pysatl_variates.distributions.sampling import Sample

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.distributions.support import Support

logger = logging.getLogger(__name__)

Observations: TypeAlias = "Sample | npt.ArrayLike"


def as_observations(sample: Observations) -> npt.NDArray[np.float64]:
    """
    Flatten a sample to a one-dimensional float array.

    Parameters
    ----------
    sample : Sample or array_like
        Observations; a univariate :class:`Sample` has shape ``(n, 1)``.

    Returns
    -------
    numpy.ndarray
        Fresh 1D ``float64`` array of the ``n`` observations.
    """
    data = sample.array if isinstance(sample, Sample) else sample
    return np.array(data, dtype=np.float64).ravel()


def check_validity(support: Support, sample: Observations) -> bool:
    """Return ``True`` when every observation lies in ``support``."""
    return support.contains_all(as_observations(sample))


def is_fittable(support: Support, observations: npt.NDArray[np.float64]) -> bool:
    """
    Gate shared by the closed-form estimators.

    A sample is fittable when it is non-empty and lies in the support.
    """
    if observations.size == 0:
        logger.debug("Refusing to fit an empty sample")
        return False
    if not support.contains_all(observations):
        logger.debug("Refusing to fit a sample with observations outside the support")
        return False
    return True


def sample_mean(observations: npt.NDArray[np.float64]) -> float:
    """Arithmetic mean computed with compensated summation."""
    return math.fsum(observations.tolist()) / observations.size


__all__ = [
    "Observations",
    "as_observations",
    "check_validity",
    "is_fittable",
    "sample_mean",
]
