"""Core utilities shared by the simulator, moments and estimation layers."""

from labor_smd.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE, Tensor, Array
