"""Parameter records and run configuration."""

from labor_smd.config.model_params import ModelParams, PARAM_ORDER, PARAM_LABELS
from labor_smd.config.estimation_config import EstimationConfig, load_estimation_config

__all__ = [
    'ModelParams',
    'PARAM_ORDER',
    'PARAM_LABELS',
    'EstimationConfig',
    'load_estimation_config',
]
