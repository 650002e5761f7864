# labor_smd/simulator/model_simulator.py
"""Simulate the model's choices at the observed wages for a candidate theta."""

from dataclasses import dataclass

import tensorflow as tf

from labor_smd.config.model_params import ModelParams
from labor_smd.core.conversions import as_tensor
from labor_smd.core.types import Tensor
from labor_smd.econ.labor_supply import LaborSupplyFunctions
from labor_smd.simulator.shock_source import ShockSource


@dataclass(frozen=True)
class SimulatedData:
    """n x S simulated triples, flattened agent-major."""

    wage: Tensor
    consumption: Tensor
    leisure: Tensor


class LaborSupplySimulator:
    """Replicate every observed wage ``n_sim`` times with fresh shocks.

    Wages are never re-drawn: entry ``i * n_sim + s`` of the output pairs
    observed wage ``i`` with shock draw ``s``.

    Args:
        observed_wage: Observed wages, shape (n,).
        shock_source: Random source consumed by ``simulate``.
        n_sim: Replications per observed wage (S).
    """

    def __init__(self, observed_wage, shock_source: ShockSource, n_sim: int = 100):
        if n_sim < 1:
            raise ValueError(f"n_sim must be at least 1, got {n_sim}")
        self.observed_wage = as_tensor(observed_wage)
        self.shock_source = shock_source
        self.n_sim = int(n_sim)
        self.replicated_wage = tf.repeat(self.observed_wage, self.n_sim)

    @property
    def n_draws(self) -> int:
        """Total simulated observations n * S."""
        return int(self.replicated_wage.shape[0])

    def simulate(self, params: ModelParams) -> SimulatedData:
        """Draw n * S shocks with scale sigma and solve the model."""
        shock = self.shock_source.normal((self.n_draws,), scale=params.shock_std_dev)
        consumption, leisure = LaborSupplyFunctions.choices(
            self.replicated_wage, shock, params
        )
        return SimulatedData(
            wage=self.replicated_wage,
            consumption=consumption,
            leisure=leisure,
        )
