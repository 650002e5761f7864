# src/labor_smd/moment_calculator/compute_smd_moments.py
"""Moment vector targeted by the SMD estimator."""

from typing import List

import numpy as np
import tensorflow as tf

from labor_smd.core.conversions import to_python_float
from labor_smd.core.types import NUMPY_DTYPE
from .compute_correlation import compute_correlation
from .compute_mean import compute_global_mean
from .compute_variance import compute_global_variance


MOMENT_NAMES: List[str] = [
    "Corr(w, c)",
    "E[l]",
    "Var[c]",
]
"""Moment ordering: [corr(w, c), mean(l), var(c)]."""

K_MOMENTS: int = len(MOMENT_NAMES)


def compute_smd_moments(
    wage: tf.Tensor,
    consumption: tf.Tensor,
    leisure: tf.Tensor,
) -> np.ndarray:
    """
    Compute the 3-moment identification vector.

    Index  Moment       Role
    -----  -----------  ---------------------------------------
    0      Corr(w, c)   Identifies gamma * (1 - tau) against sigma
    1      E[l]         Identifies gamma
    2      Var[c]       Identifies sigma given gamma and tau

    The same function is applied to the observed and the simulated data.
    Degenerate inputs are not special-cased: a constant wage or
    consumption series gives a NaN correlation, and non-finite entries
    propagate into the moments they enter.

    Args:
        wage: Wages, shape (n,).
        consumption: Consumption, shape (n,).
        leisure: Leisure, shape (n,).

    Returns:
        Float64 array of shape (3,).

    Raises:
        ValueError: If the three inputs differ in length or have fewer
            than two elements.
    """
    sizes = {int(tf.size(t)) for t in (wage, consumption, leisure)}
    if len(sizes) != 1:
        raise ValueError(f"Moment inputs must have equal length, got sizes {sorted(sizes)}")
    if sizes.pop() < 2:
        raise ValueError("Moment inputs need at least two observations")

    moments = np.zeros(K_MOMENTS, dtype=NUMPY_DTYPE)
    moments[0] = to_python_float(compute_correlation(wage, consumption))
    moments[1] = to_python_float(compute_global_mean(leisure))
    moments[2] = to_python_float(compute_global_variance(consumption))
    return moments
