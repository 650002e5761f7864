# labor_smd/simulator/synthetic_data_gen.py
"""Generate the observed sample from known structural parameters."""

import logging
from dataclasses import dataclass
from typing import Any

from labor_smd.config.model_params import ModelParams
from labor_smd.core.conversions import as_tensor
from labor_smd.core.types import Tensor
from labor_smd.econ.labor_supply import LaborSupplyFunctions
from labor_smd.simulator.shock_source import ShockSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObservedData:
    """Cross-section of wages, consumption and leisure, one entry per agent."""

    wage: Tensor
    consumption: Tensor
    leisure: Tensor

    def __post_init__(self) -> None:
        n_w = int(self.wage.shape[0])
        if int(self.consumption.shape[0]) != n_w or int(self.leisure.shape[0]) != n_w:
            raise ValueError(
                "wage, consumption and leisure must have the same length, got "
                f"{n_w}, {int(self.consumption.shape[0])}, {int(self.leisure.shape[0])}"
            )

    @classmethod
    def from_arrays(cls, wage: Any, consumption: Any, leisure: Any) -> "ObservedData":
        """Wrap externally supplied 1-D arrays."""
        return cls(
            wage=as_tensor(wage),
            consumption=as_tensor(consumption),
            leisure=as_tensor(leisure),
        )

    @property
    def n_obs(self) -> int:
        return int(self.wage.shape[0])


class SyntheticDataGenerator:

    def __init__(
        self,
        params: ModelParams,
        n_obs: int = 10_000,
        seed: int = 2026,
        wage_log_mean: float = 0.0,
        wage_log_std: float = 1.0,
    ):
        """Initialize the generator of the observed sample.

        Args:
            params: True structural parameters.
            n_obs: Number of agents.
            seed: Seed of the random source used for wages and shocks.
            wage_log_mean: Mean of log wages.
            wage_log_std: Standard deviation of log wages.
        """
        self.params = params
        self.n_obs = n_obs
        self.wage_log_mean = wage_log_mean
        self.wage_log_std = wage_log_std
        self.shock_source = ShockSource(seed)

    def gen(self) -> ObservedData:
        """Draw log-normal wages and Gaussian shocks, then solve the model.

        Returns:
            ObservedData with tensors of shape (n_obs,).
        """
        wage = self.shock_source.lognormal(
            (self.n_obs,), log_scale=self.wage_log_std, log_loc=self.wage_log_mean
        )
        shock = self.shock_source.normal(
            (self.n_obs,), scale=self.params.shock_std_dev
        )
        consumption, leisure = LaborSupplyFunctions.choices(wage, shock, self.params)

        logger.info(
            "Generated observed sample: n=%d, θ=(%.4f, %.4f, %.4f)",
            self.n_obs,
            self.params.consumption_weight,
            self.params.tax_rate,
            self.params.shock_std_dev,
        )
        return ObservedData(wage=wage, consumption=consumption, leisure=leisure)
