"""Shared test fixtures and helper utilities for SMD unit tests."""

from __future__ import annotations

import numpy as np
import pytest
import tensorflow as tf

# Force CPU for CI; must be called before any TF ops
tf.config.set_visible_devices([], 'GPU')

from labor_smd.config.model_params import ModelParams
from labor_smd.simulator import SyntheticDataGenerator


def make_test_params(**overrides) -> ModelParams:
    """Return ModelParams at the benchmark values unless overridden."""
    defaults = dict(
        consumption_weight=0.5,
        tax_rate=0.2,
        shock_std_dev=1.0,
    )
    defaults.update(overrides)
    return ModelParams(**defaults)


@pytest.fixture
def true_params() -> ModelParams:
    return make_test_params()


@pytest.fixture
def small_sample(true_params):
    """Observed sample of 2 000 agents from the benchmark parameters."""
    return SyntheticDataGenerator(true_params, n_obs=2000, seed=11).gen()


@pytest.fixture
def benchmark_sample(true_params):
    """Observed sample of 10 000 agents from the benchmark parameters."""
    return SyntheticDataGenerator(true_params, n_obs=10_000, seed=2026).gen()
