# labor_smd/estimation/optimizer.py
"""BFGS minimization of the SMD objective."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np
from scipy.optimize import minimize

from labor_smd.config.model_params import PARAM_ORDER
from labor_smd.core.types import NUMPY_DTYPE

logger = logging.getLogger(__name__)


@dataclass
class EstimationResult:
    """Outcome of one SMD optimization.

    Attributes:
        theta_hat: Minimizer, ordered as ``PARAM_ORDER``.
        objective_value: Q(theta_hat).
        n_iterations: BFGS iterations.
        n_evals: Objective evaluations, finite-difference calls included.
        success: scipy's success flag.
        message: scipy's termination message.
        gradient_norm: Infinity norm of the final gradient estimate.
        gradient_converged: ``gradient_norm <= gtol``.
        step_converged: Infinity norm of the last accepted step ``<= xtol``.
        wall_time: Seconds spent in the optimizer.
        path: Accepted iterates, starting point first.
    """

    theta_hat: np.ndarray
    objective_value: float
    n_iterations: int
    n_evals: int
    success: bool
    message: str
    gradient_norm: float
    gradient_converged: bool
    step_converged: bool
    wall_time: float
    path: List[np.ndarray] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.gradient_converged or self.step_converged

    def theta_dict(self) -> Dict[str, float]:
        return {k: float(v) for k, v in zip(PARAM_ORDER, self.theta_hat)}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theta_hat": self.theta_dict(),
            "objective_value": self.objective_value,
            "n_iterations": self.n_iterations,
            "n_evals": self.n_evals,
            "success": self.success,
            "message": self.message,
            "gradient_norm": self.gradient_norm,
            "gradient_converged": self.gradient_converged,
            "step_converged": self.step_converged,
            "wall_time": self.wall_time,
        }


def run_smd_estimation(
    objective: Callable[[np.ndarray], float],
    initial_guess: np.ndarray,
    gtol: float = 1e-8,
    xtol: float = 1e-10,
    max_iter: int = 1000,
    fd_step: Optional[float] = None,
) -> EstimationResult:
    """Minimize ``objective`` with BFGS and finite-difference gradients.

    No bounds are passed to the optimizer; the objective handles proposals
    outside the admissible region itself. Non-convergence is reported on
    the result and logged, never raised.

    Args:
        objective: theta -> Q(theta).
        initial_guess: Starting point theta_0.
        gtol: Gradient-norm tolerance (infinity norm).
        xtol: Step-size tolerance for ``step_converged``.
        max_iter: Iteration limit.
        fd_step: Absolute finite-difference step; scipy's default if None.

    Returns:
        EstimationResult
    """
    x0 = np.asarray(initial_guess, dtype=NUMPY_DTYPE).copy()
    path: List[np.ndarray] = [x0.copy()]

    def _record(xk: np.ndarray) -> None:
        path.append(np.asarray(xk, dtype=NUMPY_DTYPE).copy())

    options: Dict[str, Any] = {"gtol": gtol, "maxiter": max_iter, "norm": np.inf}
    if fd_step is not None:
        options["eps"] = fd_step

    logger.info(
        "BFGS from θ0=%s (gtol=%.1e, max_iter=%d)",
        np.array2string(x0, precision=5), gtol, max_iter,
    )
    t_start = time.perf_counter()
    res = minimize(objective, x0, method="BFGS", callback=_record, options=options)
    wall_time = time.perf_counter() - t_start

    jac = np.asarray(getattr(res, "jac", np.full_like(x0, np.nan)), dtype=NUMPY_DTYPE)
    gradient_norm = float(np.max(np.abs(jac))) if jac.size else float("nan")
    last_step = (
        float(np.max(np.abs(path[-1] - path[-2]))) if len(path) > 1 else float("inf")
    )

    result = EstimationResult(
        theta_hat=np.asarray(res.x, dtype=NUMPY_DTYPE),
        objective_value=float(res.fun),
        n_iterations=int(res.nit),
        n_evals=int(res.nfev),
        success=bool(res.success),
        message=str(res.message),
        gradient_norm=gradient_norm,
        gradient_converged=bool(gradient_norm <= gtol),
        step_converged=bool(last_step <= xtol),
        wall_time=wall_time,
        path=path,
    )

    logger.info(
        "BFGS done: Q=%.6e  iters=%d  evals=%d  |g|=%.3e  success=%s  (%.1f s)",
        result.objective_value, result.n_iterations, result.n_evals,
        result.gradient_norm, result.success, wall_time,
    )
    if not result.success:
        logger.warning("BFGS did not report success: %s", result.message)
    return result
