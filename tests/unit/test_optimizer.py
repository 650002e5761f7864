"""Unit tests for the BFGS wrapper and EstimationResult."""

from __future__ import annotations

import numpy as np
import pytest

from labor_smd.estimation.optimizer import EstimationResult, run_smd_estimation


TARGET = np.array([0.5, 0.2, 1.0])


def _quadratic(theta):
    d = np.asarray(theta) - TARGET
    return float(d @ np.diag([1.0, 4.0, 0.5]) @ d)


class TestRunSMDEstimation:

    def test_recovers_quadratic_minimum(self):
        res = run_smd_estimation(_quadratic, np.array([0.4, 0.15, 0.9]), gtol=1e-8)
        assert isinstance(res, EstimationResult)
        np.testing.assert_allclose(res.theta_hat, TARGET, atol=1e-5)
        assert res.objective_value < 1e-10
        assert res.n_evals > res.n_iterations > 0

    def test_path_starts_at_initial_guess(self):
        x0 = np.array([0.4, 0.15, 0.9])
        res = run_smd_estimation(_quadratic, x0)
        np.testing.assert_array_equal(res.path[0], x0)
        assert len(res.path) == res.n_iterations + 1

    def test_does_not_mutate_initial_guess(self):
        x0 = np.array([0.4, 0.15, 0.9])
        run_smd_estimation(_quadratic, x0)
        np.testing.assert_array_equal(x0, [0.4, 0.15, 0.9])

    def test_iteration_limit_reported_not_raised(self):
        res = run_smd_estimation(_quadratic, np.array([5.0, -3.0, 8.0]), max_iter=1)
        assert res.n_iterations <= 1
        assert not res.success
        assert not res.gradient_converged

    def test_gradient_flag_consistent_with_norm(self):
        res = run_smd_estimation(_quadratic, np.array([0.4, 0.15, 0.9]), gtol=1e-5)
        assert res.gradient_converged == (res.gradient_norm <= 1e-5)
        assert res.converged

    def test_custom_finite_difference_step(self):
        res = run_smd_estimation(_quadratic, np.array([0.4, 0.15, 0.9]), fd_step=1e-7)
        np.testing.assert_allclose(res.theta_hat, TARGET, atol=1e-4)


class TestEstimationResult:

    def test_to_dict_uses_parameter_names(self):
        res = run_smd_estimation(_quadratic, np.array([0.4, 0.15, 0.9]))
        d = res.to_dict()
        assert set(d["theta_hat"]) == {"consumption_weight", "tax_rate", "shock_std_dev"}
        for key in ("objective_value", "n_iterations", "n_evals", "success",
                    "gradient_converged", "step_converged"):
            assert key in d
