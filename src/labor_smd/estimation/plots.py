# labor_smd/estimation/plots.py
"""Objective-profile plot around the estimate."""

import logging
import os
from typing import Callable, Dict, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from labor_smd.config.model_params import PARAM_LABELS, PARAM_ORDER
from labor_smd.core.types import NUMPY_DTYPE

logger = logging.getLogger(__name__)


def objective_profile(
    objective: Callable[[np.ndarray], float],
    theta_center: np.ndarray,
    index: int,
    grid: np.ndarray,
) -> np.ndarray:
    """Evaluate the objective along one parameter axis, others held at theta_center."""
    values = np.empty(len(grid), dtype=NUMPY_DTYPE)
    for k, x in enumerate(grid):
        theta = np.array(theta_center, dtype=NUMPY_DTYPE)
        theta[index] = x
        values[k] = objective(theta)
    return values


def plot_objective_profile(
    objective: Callable[[np.ndarray], float],
    theta_hat: np.ndarray,
    output_path: str,
    true_theta: Optional[np.ndarray] = None,
    half_width: float = 0.1,
    n_points: int = 41,
) -> Dict[str, np.ndarray]:
    """Plot Q along each parameter through theta_hat, one panel per parameter.

    The grid for parameter j spans ``theta_hat[j] * (1 ± half_width)``.

    Returns:
        Mapping parameter name -> (grid, values) stacked as shape (2, n_points).
    """
    theta_hat = np.asarray(theta_hat, dtype=NUMPY_DTYPE)
    profiles: Dict[str, np.ndarray] = {}

    fig, axes = plt.subplots(1, len(PARAM_ORDER), figsize=(5 * len(PARAM_ORDER), 4))
    for j, (key, label) in enumerate(zip(PARAM_ORDER, PARAM_LABELS)):
        center = theta_hat[j]
        span = max(abs(center) * half_width, 1e-3)
        grid = np.linspace(center - span, center + span, n_points)
        values = objective_profile(objective, theta_hat, j, grid)
        profiles[key] = np.vstack([grid, values])

        ax = axes[j]
        ax.plot(grid, values, "b-", linewidth=1.5)
        ax.axvline(center, color="b", linestyle="--", label="Estimate")
        if true_theta is not None:
            ax.axvline(true_theta[j], color="r", linestyle=":", label="True")
        ax.set_xlabel(label, fontsize=12)
        ax.set_ylabel(r"$Q(\theta)$", fontsize=12)
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    fig.suptitle("SMD objective profile", fontsize=13)
    plt.tight_layout()
    os.makedirs(
        os.path.dirname(output_path) if os.path.dirname(output_path) else ".",
        exist_ok=True,
    )
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Objective profile saved: %s", output_path)
    return profiles
