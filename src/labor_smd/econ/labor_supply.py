# labor_smd/econ/labor_supply.py
"""
Closed-form choices of the Cobb-Douglas labor-supply model.

An agent with wage w, income shock eps and time endowment 1 maximizes
c^gamma * l^(1 - gamma) subject to c = (1 - tau) * w * (1 - l) + eps.
The first-order conditions give consumption and leisure in closed form.
"""

import tensorflow as tf

from labor_smd.config.model_params import ModelParams
from labor_smd.core.types import Tensor


class LaborSupplyFunctions:
    """Static methods for the optimal consumption/leisure choice."""

    @staticmethod
    def after_tax_wage(wage: Tensor, params: ModelParams) -> Tensor:
        """Net wage (1 - tau) * w."""
        return (1.0 - params.tax_rate) * wage

    @staticmethod
    def consumption(
        wage: Tensor,
        shock: Tensor,
        params: ModelParams
    ) -> Tensor:
        """
        Compute optimal consumption.

        Formula: c = gamma * (1 - tau) * w + gamma * eps

        Args:
            wage: Wage tensor (w > 0).
            shock: Income shock tensor (eps), same shape as wage.
            params: Structural parameters.

        Returns:
            Consumption tensor.
        """
        gamma = params.consumption_weight
        return gamma * LaborSupplyFunctions.after_tax_wage(wage, params) + gamma * shock

    @staticmethod
    def leisure(
        wage: Tensor,
        shock: Tensor,
        params: ModelParams
    ) -> Tensor:
        """
        Compute optimal leisure.

        Formula: l = (1 - gamma) + (1 - gamma) * eps / ((1 - tau) * w)

        A zero net wage (tau = 1 or w = 0) is not guarded: the division
        follows IEEE semantics and returns inf or NaN.

        Args:
            wage: Wage tensor (w > 0).
            shock: Income shock tensor (eps), same shape as wage.
            params: Structural parameters.

        Returns:
            Leisure tensor.
        """
        one_minus_gamma = 1.0 - params.consumption_weight
        net_wage = LaborSupplyFunctions.after_tax_wage(wage, params)
        return one_minus_gamma + one_minus_gamma * tf.math.divide(shock, net_wage)

    @staticmethod
    def budget_residual(
        wage: Tensor,
        shock: Tensor,
        consumption: Tensor,
        leisure: Tensor,
        params: ModelParams
    ) -> Tensor:
        """
        Residual of the budget constraint.

        Formula: c + (1 - tau) * w * l - ((1 - tau) * w + eps)

        Zero (up to rounding) for choices produced by ``consumption`` and
        ``leisure``.
        """
        net_wage = LaborSupplyFunctions.after_tax_wage(wage, params)
        return consumption + net_wage * leisure - (net_wage + shock)

    @staticmethod
    def choices(
        wage: Tensor,
        shock: Tensor,
        params: ModelParams
    ) -> tuple[Tensor, Tensor]:
        """Return (consumption, leisure) for the given wages and shocks."""
        return (
            LaborSupplyFunctions.consumption(wage, shock, params),
            LaborSupplyFunctions.leisure(wage, shock, params),
        )
