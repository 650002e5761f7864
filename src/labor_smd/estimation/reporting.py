# labor_smd/estimation/reporting.py
"""Parameter-recovery and moment-fit tables for an SMD run."""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from labor_smd.config.model_params import PARAM_LABELS, PARAM_ORDER
from labor_smd.moment_calculator import MOMENT_NAMES

logger = logging.getLogger(__name__)


def parameter_recovery_table(
    theta_hat: np.ndarray,
    initial_guess: np.ndarray,
    true_theta: Optional[np.ndarray] = None,
) -> List[Dict[str, Any]]:
    """Compare theta_hat with the starting point and, when known, the truth.

    Returns one row per parameter and logs the table.
    """
    table: List[Dict[str, Any]] = []
    for j, key in enumerate(PARAM_ORDER):
        row: Dict[str, Any] = {
            "param": key,
            "initial": float(initial_guess[j]),
            "estimate": float(theta_hat[j]),
            "true": float("nan"),
            "error": float("nan"),
            "pct_error": float("nan"),
        }
        if true_theta is not None:
            true_val = float(true_theta[j])
            err = row["estimate"] - true_val
            row["true"] = true_val
            row["error"] = err
            row["pct_error"] = 100.0 * err / true_val if abs(true_val) > 1e-10 else 0.0
        table.append(row)

    logger.info("=" * 72)
    logger.info("PARAMETER RECOVERY")
    logger.info(
        "%-10s  %10s  %10s  %10s  %10s  %10s",
        "Param", "True", "Initial", "Estimate", "Error", "Error%",
    )
    logger.info("-" * 72)
    for label, row in zip(PARAM_LABELS, table):
        logger.info(
            "%-10s  %10.5f  %10.5f  %10.5f  %+10.5f  %+9.2f%%",
            label, row["true"], row["initial"], row["estimate"],
            row["error"], row["pct_error"],
        )
    logger.info("=" * 72)
    return table


def moment_fit_table(
    empirical_moments: np.ndarray,
    simulated_moments: np.ndarray,
) -> List[Dict[str, Any]]:
    """Data vs model moment at theta_hat, with absolute errors; logged."""
    table: List[Dict[str, Any]] = []
    for i, name in enumerate(MOMENT_NAMES):
        data_m = float(empirical_moments[i])
        model_m = float(simulated_moments[i])
        table.append({
            "moment": name,
            "data": data_m,
            "model": model_m,
            "abs_error": abs(model_m - data_m),
        })

    logger.info("=" * 72)
    logger.info("MOMENT FIT TABLE")
    logger.info("%-22s  %12s  %12s  %12s", "Moment", "Data", "Model", "|Error|")
    logger.info("-" * 72)
    for row in table:
        logger.info(
            "%-22s  %12.6f  %12.6f  %12.3e",
            row["moment"], row["data"], row["model"], row["abs_error"],
        )
    logger.info("=" * 72)
    return table
