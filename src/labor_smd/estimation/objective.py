# labor_smd/estimation/objective.py
"""SMD objective: theta -> squared distance between empirical and simulated moments."""

import logging
import time
from typing import Callable, Optional, Tuple

import numpy as np

from labor_smd.config.model_params import ModelParams, PARAM_ORDER
from labor_smd.core.types import NUMPY_DTYPE
from labor_smd.moment_calculator import compute_smd_moments
from labor_smd.simulator.model_simulator import LaborSupplySimulator
from labor_smd.simulator.shock_source import ShockSource

logger = logging.getLogger(__name__)


CONSUMPTION_WEIGHT_MIN: float = 1e-6
"""Smallest consumption weight the objective simulates at; at 0 consumption is constant."""

TAX_RATE_MAX: float = 1.0 - 1e-6
"""Largest tax rate the objective simulates at; leisure divides by 1 - tau."""

PARAM_BOUNDS: dict = {
    "consumption_weight": (CONSUMPTION_WEIGHT_MIN, 1.0),
    "tax_rate": (0.0, TAX_RATE_MAX),
    "shock_std_dev": (0.0, np.inf),
}
"""Admissible box for theta, keyed by ``PARAM_ORDER`` names."""

MomentFn = Callable[..., np.ndarray]


def compute_smd_loss(
    moments_simulated: np.ndarray,
    moments_empirical: np.ndarray,
    weighting_matrix: Optional[np.ndarray] = None,
) -> float:
    r"""Compute the quadratic moment distance.

    .. math::

        Q(\theta) = (\Lambda_{emp} - \Lambda_{sim})^\top W (\Lambda_{emp} - \Lambda_{sim})

    With ``W = I`` (the default) this is the squared Euclidean norm. NaN
    moments give a NaN loss.
    """
    diff = np.asarray(moments_empirical, dtype=NUMPY_DTYPE) - np.asarray(
        moments_simulated, dtype=NUMPY_DTYPE
    )
    if weighting_matrix is None:
        return float(diff @ diff)
    return float(diff @ weighting_matrix @ diff)


def project_to_bounds(theta: np.ndarray) -> Tuple[np.ndarray, float]:
    """Clip theta into the admissible box.

    Returns:
        (theta_clipped, squared distance between theta and theta_clipped)
    """
    theta = np.asarray(theta, dtype=NUMPY_DTYPE)
    lo = np.array([PARAM_BOUNDS[k][0] for k in PARAM_ORDER], dtype=NUMPY_DTYPE)
    hi = np.array([PARAM_BOUNDS[k][1] for k in PARAM_ORDER], dtype=NUMPY_DTYPE)
    theta_clipped = np.clip(theta, lo, hi)
    return theta_clipped, float(np.sum((theta - theta_clipped) ** 2))


def make_smd_objective(
    observed_wage,
    empirical_moments: np.ndarray,
    shock_source: ShockSource,
    n_sim: int = 100,
    moment_fn: MomentFn = compute_smd_moments,
    common_random_numbers: bool = True,
    penalty_weight: float = 1e4,
    weighting_matrix: Optional[np.ndarray] = None,
    log_every: int = 50,
) -> Callable[[np.ndarray], float]:
    """Build a standalone objective theta -> Q(theta) for scipy optimizers.

    Every call simulates ``n_sim`` choices per observed wage at the
    proposed theta, applies ``moment_fn`` to the replicated wages and
    simulated choices, and returns the distance to ``empirical_moments``.

    Proposals outside the admissible box (gamma at or below 0 or above 1, tau at or
    above 1, negative sigma) are clipped back into it and charged a smooth
    penalty ``penalty_weight * ||theta - theta_clipped||^2``, so the
    optimizer always receives a finite number there.

    Parameters
    ----------
    observed_wage : array-like, shape (n,)
        Observed wages, reused (never re-drawn) for every simulation.
    empirical_moments : np.ndarray, shape (3,)
        Moments of the observed data, computed once by ``moment_fn``.
    shock_source : ShockSource
        Random source consumed by the simulation.
    n_sim : int
        Replications S per observed wage.
    moment_fn : callable
        ``moment_fn(wage, consumption, leisure) -> np.ndarray``.
    common_random_numbers : bool
        If True the shock source is reset to its seed before every call,
        so the objective is a deterministic function of theta. If False
        the stream advances and repeated calls at the same theta differ
        by Monte Carlo noise.
    penalty_weight : float
        Weight of the out-of-bounds penalty.
    weighting_matrix : np.ndarray, optional
        Moment weighting matrix; identity when None.
    log_every : int
        Log progress every ``log_every`` evaluations (0 disables).

    Returns
    -------
    callable
        objective(theta) -> float, where theta = [γ, τ, σ].
    """
    empirical_moments = np.asarray(empirical_moments, dtype=NUMPY_DTYPE)
    simulator = LaborSupplySimulator(observed_wage, shock_source, n_sim=n_sim)

    eval_count = [0]
    t_obj_start = [time.perf_counter()]
    best_eval = {"theta": None, "moments": None, "Q": np.inf}

    def objective(theta: np.ndarray) -> float:
        if not np.all(np.isfinite(theta)):
            eval_count[0] += 1
            return float("nan")

        theta_clipped, out_of_bounds = project_to_bounds(theta)
        penalty = penalty_weight * out_of_bounds

        if common_random_numbers:
            shock_source.reset()

        params = ModelParams.from_vector(theta_clipped)
        sim = simulator.simulate(params)
        moments_sim = np.asarray(
            moment_fn(sim.wage, sim.consumption, sim.leisure), dtype=NUMPY_DTYPE
        )
        Q = compute_smd_loss(moments_sim, empirical_moments, weighting_matrix)

        val = Q + penalty
        eval_count[0] += 1
        if val < best_eval["Q"]:
            best_eval["Q"] = val
            best_eval["theta"] = theta_clipped.copy()
            best_eval["moments"] = moments_sim.copy()

        if log_every and eval_count[0] % log_every == 0:
            elapsed = time.perf_counter() - t_obj_start[0]
            logger.info(
                "    [eval %4d | %.0fs] Q=%.6e  best=%.6e  θ=[%.4f, %.4f, %.4f]",
                eval_count[0], elapsed, val, best_eval["Q"], *theta_clipped,
            )

        return val

    def simulated_moments(theta: np.ndarray) -> np.ndarray:
        """Moments simulated at theta without touching the counters."""
        theta_clipped, _ = project_to_bounds(theta)
        if common_random_numbers:
            shock_source.reset()
        sim = simulator.simulate(ModelParams.from_vector(theta_clipped))
        return np.asarray(
            moment_fn(sim.wage, sim.consumption, sim.leisure), dtype=NUMPY_DTYPE
        )

    def reset_counters():
        """Reset eval counter, best point and timer."""
        eval_count[0] = 0
        t_obj_start[0] = time.perf_counter()
        best_eval.update({"theta": None, "moments": None, "Q": np.inf})

    objective.eval_count = eval_count  # type: ignore[attr-defined]
    objective.best_eval = best_eval  # type: ignore[attr-defined]
    objective.empirical_moments = empirical_moments  # type: ignore[attr-defined]
    objective.simulated_moments = simulated_moments  # type: ignore[attr-defined]
    objective.reset_counters = reset_counters  # type: ignore[attr-defined]
    return objective
