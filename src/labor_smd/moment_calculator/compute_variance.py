# src/labor_smd/moment_calculator/compute_variance.py
"""Compute variance statistics."""

import tensorflow as tf
from labor_smd.core.types import TENSORFLOW_DTYPE
from .compute_mean import compute_global_mean


def compute_global_variance(data: tf.Tensor) -> tf.Tensor:
    """
    Compute global population variance (divisor n) across all dimensions.

    Args:
        data: Tensor of any shape.

    Returns:
        Scalar tensor with global variance
    """
    data = tf.cast(data, dtype=TENSORFLOW_DTYPE)
    mean = compute_global_mean(data)
    return tf.reduce_mean(tf.square(data - mean))
