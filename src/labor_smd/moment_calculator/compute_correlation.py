# src/labor_smd/moment_calculator/compute_correlation.py
"""Compute correlation statistics."""

import tensorflow as tf
from labor_smd.core.types import TENSORFLOW_DTYPE


def compute_correlation(x: tf.Tensor, y: tf.Tensor) -> tf.Tensor:
    """
    Compute the Pearson correlation of two equally sized tensors.

    Both inputs are flattened and pooled. A constant input has zero
    spread and yields 0 / 0 = NaN; no epsilon is added and the result is
    not clipped.

    Args:
        x: Tensor of any shape.
        y: Tensor with the same number of elements as ``x``.

    Returns:
        Scalar tensor with the correlation coefficient

    Raises:
        ValueError: If ``x`` and ``y`` have different sizes.
    """
    x_flat = tf.reshape(tf.cast(x, TENSORFLOW_DTYPE), [-1])
    y_flat = tf.reshape(tf.cast(y, TENSORFLOW_DTYPE), [-1])

    if int(x_flat.shape[0]) != int(y_flat.shape[0]):
        raise ValueError(
            f"Correlation inputs differ in size: {x_flat.shape[0]} vs {y_flat.shape[0]}"
        )

    x_dev = x_flat - tf.reduce_mean(x_flat)
    y_dev = y_flat - tf.reduce_mean(y_flat)

    cov = tf.reduce_mean(x_dev * y_dev)
    var_x = tf.reduce_mean(tf.square(x_dev))
    var_y = tf.reduce_mean(tf.square(y_dev))

    return tf.math.divide(cov, tf.sqrt(var_x * var_y))
