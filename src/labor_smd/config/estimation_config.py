# labor_smd/config/estimation_config.py
"""
Configuration for a Simulated Minimum Distance estimation run.

This module bundles everything a run needs besides the data itself: the
true parameters used to generate the synthetic sample, the optimizer's
starting point, sample and replication sizes, seeds, the wage distribution
and the optimizer tolerances.

Example:
    >>> from labor_smd.config.estimation_config import load_estimation_config
    >>> config = load_estimation_config("hyperparam/smd_params.json")
    >>> print(f"Replications per wage: {config.n_sim}")
"""

from dataclasses import dataclass, field, fields
from typing import Dict
import os
import logging

from labor_smd.config.model_params import ModelParams
from labor_smd.io.file_utils import load_json_file

logger = logging.getLogger(__name__)


def _default_true_params() -> Dict[str, float]:
    return {"consumption_weight": 0.5, "tax_rate": 0.2, "shock_std_dev": 1.0}


def _default_initial_guess() -> Dict[str, float]:
    return {"consumption_weight": 0.4, "tax_rate": 0.15, "shock_std_dev": 0.9}


@dataclass(frozen=True)
class EstimationConfig:
    """
    Immutable settings for one SMD estimation run.

    Attributes:
        true_params: Parameters that generate the observed sample.
        initial_guess: Starting point theta_0 for the optimizer.
        n_obs: Number of observed agents (n).
        n_sim: Simulation replications per observed wage (S).
        data_seed: Seed for the observed sample.
        sim_seed: Seed for the shock source used inside the objective.
        wage_log_mean: Mean of log wages.
        wage_log_std: Standard deviation of log wages.
        gtol: Gradient-norm tolerance for BFGS.
        xtol: Step-size tolerance used for the step convergence flag.
        max_iter: BFGS iteration limit.
        common_random_numbers: Reset the shock source before every
            objective call so the surface is deterministic in theta.
        penalty_weight: Weight of the quadratic penalty applied to
            proposals outside the admissible parameter box.
        output_dir: Directory for the JSON summary and plots.
    """

    true_params: Dict[str, float] = field(default_factory=_default_true_params)
    initial_guess: Dict[str, float] = field(default_factory=_default_initial_guess)

    n_obs: int = 10_000
    n_sim: int = 100
    data_seed: int = 2026
    sim_seed: int = 1234

    wage_log_mean: float = 0.0
    wage_log_std: float = 1.0

    gtol: float = 1e-8
    xtol: float = 1e-10
    max_iter: int = 1000

    common_random_numbers: bool = True
    penalty_weight: float = 1e4

    output_dir: str = "./results/smd"

    def __post_init__(self) -> None:
        """Validate sizes and parameter dictionaries."""
        if self.n_obs < 2:
            raise ValueError(f"n_obs must be at least 2, got {self.n_obs}")
        if self.n_sim < 1:
            raise ValueError(f"n_sim must be at least 1, got {self.n_sim}")
        if self.wage_log_std < 0:
            raise ValueError(
                f"wage_log_std must be nonnegative, got {self.wage_log_std}"
            )
        # Raises ValueError on bad or missing entries.
        self.true_model_params()
        self.initial_model_params()

    def true_model_params(self) -> ModelParams:
        return ModelParams.from_dict(self.true_params)

    def initial_model_params(self) -> ModelParams:
        return ModelParams.from_dict(self.initial_guess)


def load_estimation_config(filename: str) -> EstimationConfig:
    """
    Load an estimation configuration from a JSON file.

    Unknown keys are ignored. A missing file falls back to the defaults.

    Args:
        filename: Path to the JSON configuration file.

    Returns:
        Populated EstimationConfig instance.

    Raises:
        ValueError: If the file holds invalid values.
    """
    if not os.path.exists(filename):
        logger.warning(
            f"Estimation config file '{filename}' not found. Using defaults."
        )
        return EstimationConfig()

    data = load_json_file(filename)
    valid_keys = {f.name for f in fields(EstimationConfig)}
    unknown = sorted(set(data) - valid_keys)
    if unknown:
        logger.warning(f"Ignoring unknown keys in {filename}: {unknown}")
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}

    return EstimationConfig(**filtered_data)
