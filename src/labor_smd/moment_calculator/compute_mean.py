# src/labor_smd/moment_calculator/compute_mean.py
"""Compute mean statistics."""

import tensorflow as tf
from labor_smd.core.types import TENSORFLOW_DTYPE


def compute_global_mean(data: tf.Tensor) -> tf.Tensor:
    """
    Compute global mean across all dimensions.

    Non-finite entries are not masked: a NaN or inf anywhere in ``data``
    propagates into the result.

    Args:
        data: Tensor of any shape.

    Returns:
        Scalar tensor with global mean
    """
    data_casted = tf.cast(data, dtype=TENSORFLOW_DTYPE)
    return tf.reduce_mean(data_casted)
