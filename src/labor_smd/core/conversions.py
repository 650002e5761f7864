# labor_smd/core/conversions.py
"""Conversions between TensorFlow tensors and Python scalars."""

from typing import Any

import tensorflow as tf

from labor_smd.core.types import TENSORFLOW_DTYPE, Tensor


def as_tensor(value: Any) -> Tensor:
    """Cast any array-like to a tensor of the global precision."""
    return tf.cast(tf.convert_to_tensor(value, dtype_hint=TENSORFLOW_DTYPE), TENSORFLOW_DTYPE)


def to_python_float(value: Any) -> float:
    """Coerce a tensor, numpy scalar, or number to a plain Python *float*.

    Parameters
    ----------
    value:
        The value to convert.  Accepts TensorFlow tensors, NumPy arrays,
        Python scalars, or ``None``.

    Returns
    -------
    float
        The value as a native Python float.  Returns ``nan`` for ``None``.
    """
    if value is None:
        return float("nan")
    if hasattr(value, "numpy"):
        return float(value.numpy())
    if hasattr(value, "item"):
        return float(value.item())
    return float(value)

