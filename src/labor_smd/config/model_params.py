# labor_smd/config/model_params.py
"""
Structural parameter definitions for the labor-supply model.

The parameter vector theta = (gamma, tau, sigma) is held in an immutable
record so that a single objective evaluation can never modify the values
the optimizer proposed. Conversion to and from the flat vector used by
``scipy.optimize`` always goes through ``PARAM_ORDER``.

Example:
    >>> from labor_smd.config.model_params import ModelParams
    >>> params = ModelParams(consumption_weight=0.5, tax_rate=0.2, shock_std_dev=1.0)
    >>> params.to_vector()
    array([0.5, 0.2, 1. ])
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence
import logging

import numpy as np

from labor_smd.core.types import NUMPY_DTYPE

logger = logging.getLogger(__name__)


PARAM_ORDER: List[str] = [
    "consumption_weight",
    "tax_rate",
    "shock_std_dev",
]
"""Canonical parameter ordering: [γ, τ, σ]."""

PARAM_LABELS: List[str] = ["γ", "τ", "σ"]
"""Unicode labels for parameters."""


@dataclass(frozen=True)
class ModelParams:
    """
    Immutable container for the structural parameters theta.

    Attributes:
        consumption_weight: Relative preference for consumption (gamma),
            must be in [0, 1].
        tax_rate: Proportional labor-income tax rate (tau), must be in
            [0, 1). At tau = 1 after-tax wage income vanishes and leisure
            is undefined.
        shock_std_dev: Standard deviation of the Gaussian income shock
            (sigma), must be nonnegative.

    Raises:
        ValueError: If any parameter is outside its admissible range.
    """

    consumption_weight: float
    tax_rate: float
    shock_std_dev: float

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self._validate_consumption_weight()
        self._validate_tax_rate()
        self._validate_shock_std_dev()

    def _validate_consumption_weight(self) -> None:
        if not (0.0 <= self.consumption_weight <= 1.0):
            raise ValueError(
                f"Consumption weight must be in [0, 1], got {self.consumption_weight}"
            )

    def _validate_tax_rate(self) -> None:
        if not (0.0 <= self.tax_rate < 1.0):
            raise ValueError(
                f"Tax rate must be in [0, 1), got {self.tax_rate}"
            )

    def _validate_shock_std_dev(self) -> None:
        if not (self.shock_std_dev >= 0.0):
            raise ValueError(
                f"Shock standard deviation must be nonnegative, got {self.shock_std_dev}"
            )

    @classmethod
    def from_vector(cls, theta: Sequence[float]) -> "ModelParams":
        """Build a record from a flat vector ordered as ``PARAM_ORDER``."""
        theta = np.asarray(theta, dtype=NUMPY_DTYPE).ravel()
        if theta.shape[0] != len(PARAM_ORDER):
            raise ValueError(
                f"Expected {len(PARAM_ORDER)} parameters, got {theta.shape[0]}"
            )
        return cls(**{k: float(v) for k, v in zip(PARAM_ORDER, theta)})

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "ModelParams":
        """Build a record from a mapping keyed by ``PARAM_ORDER`` names."""
        missing = [k for k in PARAM_ORDER if k not in data]
        if missing:
            raise ValueError(f"Missing parameters: {missing}")
        return cls(**{k: float(data[k]) for k in PARAM_ORDER})

    def to_vector(self) -> np.ndarray:
        """Return theta as a float64 vector ordered as ``PARAM_ORDER``."""
        return np.array([getattr(self, k) for k in PARAM_ORDER], dtype=NUMPY_DTYPE)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
