"""
SMD estimation layer.

Builds the moment-distance objective, hands it to BFGS and reports the
result.
"""

from labor_smd.estimation.objective import (
    PARAM_BOUNDS,
    compute_smd_loss,
    make_smd_objective,
    project_to_bounds,
)
from labor_smd.estimation.optimizer import EstimationResult, run_smd_estimation
from labor_smd.estimation.reporting import moment_fit_table, parameter_recovery_table
from labor_smd.estimation.pipeline import SMDRun, run_smd

__all__ = [
    'PARAM_BOUNDS',
    'compute_smd_loss',
    'make_smd_objective',
    'project_to_bounds',
    'EstimationResult',
    'run_smd_estimation',
    'moment_fit_table',
    'parameter_recovery_table',
    'SMDRun',
    'run_smd',
]
