# src/labor_smd/moment_calculator/__init__.py
"""Moment calculator module for computing moments from observed and simulated data."""

from .compute_mean import compute_global_mean
from .compute_variance import compute_global_variance
from .compute_correlation import compute_correlation
from .compute_smd_moments import compute_smd_moments, MOMENT_NAMES, K_MOMENTS

__all__ = [
    'compute_global_mean',
    'compute_global_variance',
    'compute_correlation',
    'compute_smd_moments',
    'MOMENT_NAMES',
    'K_MOMENTS',
]
