"""Unit tests for recovery/moment-fit tables and the objective-profile plot."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from labor_smd.estimation.plots import objective_profile, plot_objective_profile
from labor_smd.estimation.reporting import moment_fit_table, parameter_recovery_table


TARGET = np.array([0.5, 0.2, 1.0])


def _quadratic(theta):
    d = np.asarray(theta) - TARGET
    return float(d @ d)


class TestParameterRecoveryTable:

    def test_errors_against_truth(self):
        table = parameter_recovery_table(
            np.array([0.55, 0.2, 0.9]), np.array([0.4, 0.15, 0.9]), TARGET
        )
        assert [row["param"] for row in table] == [
            "consumption_weight", "tax_rate", "shock_std_dev",
        ]
        np.testing.assert_allclose(table[0]["error"], 0.05)
        np.testing.assert_allclose(table[0]["pct_error"], 10.0)
        np.testing.assert_allclose(table[2]["error"], -0.1)
        assert table[1]["initial"] == 0.15

    def test_without_truth(self):
        table = parameter_recovery_table(TARGET, TARGET)
        assert all(np.isnan(row["true"]) for row in table)

    def test_logs_table(self, caplog):
        with caplog.at_level(logging.INFO):
            parameter_recovery_table(TARGET, TARGET, TARGET)
        assert "PARAMETER RECOVERY" in caplog.text


class TestMomentFitTable:

    def test_rows(self):
        table = moment_fit_table(np.array([0.87, 0.48, 1.0]), np.array([0.86, 0.5, 1.0]))
        assert [row["moment"] for row in table] == ["Corr(w, c)", "E[l]", "Var[c]"]
        np.testing.assert_allclose([row["abs_error"] for row in table], [0.01, 0.02, 0.0],
                                   atol=1e-12)


class TestObjectiveProfile:

    def test_profile_minimum_at_center(self):
        grid = np.linspace(0.0, 0.4, 41)
        values = objective_profile(_quadratic, TARGET, 1, grid)
        assert grid[np.argmin(values)] == pytest.approx(0.2)

    def test_plot_written(self, tmp_path):
        out = tmp_path / "plots" / "profile.png"
        profiles = plot_objective_profile(
            _quadratic, TARGET, str(out), true_theta=TARGET, n_points=11
        )
        assert out.exists()
        assert set(profiles) == {"consumption_weight", "tax_rate", "shock_std_dev"}
        assert profiles["tax_rate"].shape == (2, 11)
        assert np.min(profiles["tax_rate"][1]) == pytest.approx(0.0, abs=1e-12)
