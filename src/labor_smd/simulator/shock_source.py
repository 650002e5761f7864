# labor_smd/simulator/shock_source.py
"""
Explicit, reseedable random source for income shocks.

All randomness in the estimator flows through a ``ShockSource`` passed in
by the caller; nothing reads TensorFlow's global seed. Each draw asks the
underlying ``tf.random.Generator`` for a fresh stateless seed, so the
stream is reproducible from ``seed`` and ``reset()`` rewinds it.
"""

import logging
from typing import Sequence, Union

import tensorflow as tf
import tensorflow_probability as tfp

from labor_smd.core.types import TENSORFLOW_DTYPE, Tensor

tfd = tfp.distributions

logger = logging.getLogger(__name__)


class ShockSource:
    """Seeded stream of Gaussian and log-normal draws.

    Args:
        seed: Integer seed the stream starts from and ``reset()`` returns to.
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._generator = tf.random.Generator.from_seed(self.seed)
        self.n_draws = 0

    def reset(self, seed: Union[int, None] = None) -> None:
        """Rewind the stream to its seed, or switch to a new one."""
        if seed is not None:
            self.seed = int(seed)
        self._generator.reset_from_seed(self.seed)
        self.n_draws = 0

    def _next_seed(self) -> Tensor:
        self.n_draws += 1
        return tf.cast(self._generator.make_seeds(1)[:, 0], tf.int32)

    def normal(
        self,
        shape: Sequence[int],
        scale: float = 1.0,
        loc: float = 0.0,
    ) -> Tensor:
        """Draw iid N(loc, scale^2) values of the given shape.

        Draws are ``loc + scale * z`` with ``z`` standard normal, so two
        draws taken from the same stream position differ only by scale.
        """
        dist = tfd.Normal(
            loc=tf.convert_to_tensor(loc, dtype=TENSORFLOW_DTYPE),
            scale=tf.convert_to_tensor(scale, dtype=TENSORFLOW_DTYPE),
        )
        return dist.sample(sample_shape=tuple(shape), seed=self._next_seed())

    def lognormal(
        self,
        shape: Sequence[int],
        log_scale: float = 1.0,
        log_loc: float = 0.0,
    ) -> Tensor:
        """Draw iid values whose logarithm is N(log_loc, log_scale^2)."""
        dist = tfd.LogNormal(
            loc=tf.convert_to_tensor(log_loc, dtype=TENSORFLOW_DTYPE),
            scale=tf.convert_to_tensor(log_scale, dtype=TENSORFLOW_DTYPE),
        )
        return dist.sample(sample_shape=tuple(shape), seed=self._next_seed())
