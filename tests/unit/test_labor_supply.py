"""Unit tests for LaborSupplyFunctions: closed-form consumption and leisure."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

import pytest

from labor_smd.config.model_params import ModelParams
from labor_smd.econ import LaborSupplyFunctions


def _make_params(**overrides):
    defaults = dict(consumption_weight=0.5, tax_rate=0.2, shock_std_dev=1.0)
    defaults.update(overrides)
    return ModelParams(**defaults)


def _t(values):
    return tf.constant(values, dtype=tf.float64)


class TestConsumption:
    """c = gamma * (1 - tau) * w + gamma * eps."""

    def test_known_value(self):
        c = LaborSupplyFunctions.consumption(_t([2.0]), _t([0.5]), _make_params())
        np.testing.assert_allclose(c.numpy(), [1.05], rtol=1e-12)

    def test_zero_weight_consumes_nothing(self):
        params = _make_params(consumption_weight=0.0)
        c = LaborSupplyFunctions.consumption(_t([1.0, 3.0]), _t([0.2, -0.4]), params)
        np.testing.assert_allclose(c.numpy(), [0.0, 0.0])

    def test_linear_in_shock(self):
        params = _make_params()
        w = _t([1.5, 1.5])
        c = LaborSupplyFunctions.consumption(w, _t([0.0, 1.0]), params)
        np.testing.assert_allclose(c.numpy()[1] - c.numpy()[0], 0.5, rtol=1e-12)


class TestLeisure:
    """l = (1 - gamma) + (1 - gamma) * eps / ((1 - tau) * w)."""

    def test_known_value(self):
        l = LaborSupplyFunctions.leisure(_t([2.0]), _t([0.5]), _make_params())
        np.testing.assert_allclose(l.numpy(), [0.65625], rtol=1e-12)

    def test_no_shock_gives_one_minus_gamma(self):
        params = _make_params(consumption_weight=0.3)
        l = LaborSupplyFunctions.leisure(_t([0.5, 1.0, 4.0]), _t([0.0, 0.0, 0.0]), params)
        np.testing.assert_allclose(l.numpy(), [0.7, 0.7, 0.7], rtol=1e-12)

    def test_full_consumption_weight_gives_no_leisure(self):
        params = _make_params(consumption_weight=1.0)
        l = LaborSupplyFunctions.leisure(_t([1.0, 2.0]), _t([0.3, -0.7]), params)
        np.testing.assert_allclose(l.numpy(), [0.0, 0.0])


class TestBudgetIdentity:
    """c + (1 - tau) * w * l = (1 - tau) * w + eps for model choices."""

    @pytest.mark.parametrize("gamma,tau", [
        (0.5, 0.2), (0.0, 0.0), (1.0, 0.5), (0.25, 0.9), (0.8, 0.0),
    ])
    def test_identity_holds(self, gamma, tau):
        params = _make_params(consumption_weight=gamma, tax_rate=tau)
        rng = np.random.default_rng(0)
        w = _t(rng.lognormal(0.0, 1.0, size=500))
        eps = _t(rng.normal(0.0, 2.0, size=500))
        c, l = LaborSupplyFunctions.choices(w, eps, params)
        lhs = c + (1.0 - tau) * w * l
        rhs = (1.0 - tau) * w + eps
        np.testing.assert_allclose(lhs.numpy(), rhs.numpy(), rtol=1e-9, atol=1e-9)

    def test_residual_is_zero(self):
        params = _make_params()
        w = _t([0.3, 1.0, 7.5])
        eps = _t([-1.0, 0.0, 2.5])
        c, l = LaborSupplyFunctions.choices(w, eps, params)
        res = LaborSupplyFunctions.budget_residual(w, eps, c, l, params)
        np.testing.assert_allclose(res.numpy(), 0.0, atol=1e-12)

    def test_residual_detects_off_budget_choice(self):
        params = _make_params()
        res = LaborSupplyFunctions.budget_residual(
            _t([1.0]), _t([0.0]), _t([1.0]), _t([1.0]), params
        )
        np.testing.assert_allclose(res.numpy(), [1.0], rtol=1e-12)


class TestZeroNetWage:
    """Leisure divides by (1 - tau) * w; no guard is applied."""

    def test_tax_rate_near_one_blows_up_leisure(self):
        params = _make_params(tax_rate=1.0 - 1e-12)
        l = LaborSupplyFunctions.leisure(_t([1.0]), _t([1.0]), params)
        assert np.isfinite(l.numpy()[0])
        assert l.numpy()[0] > 1e10

    def test_zero_wage_gives_non_finite_leisure(self):
        params = _make_params()
        l = LaborSupplyFunctions.leisure(_t([0.0, 0.0, 0.0]), _t([1.0, -1.0, 0.0]), params)
        out = l.numpy()
        assert np.isposinf(out[0])
        assert np.isneginf(out[1])
        assert np.isnan(out[2])

    def test_zero_wage_does_not_raise_and_consumption_stays_finite(self):
        params = _make_params()
        c = LaborSupplyFunctions.consumption(_t([0.0]), _t([1.0]), params)
        np.testing.assert_allclose(c.numpy(), [0.5])
