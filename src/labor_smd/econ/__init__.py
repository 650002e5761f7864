"""
Core economic logic module.

This package provides the closed-form solution of the labor-supply model
used both to generate observed data and inside the SMD objective.
"""

from labor_smd.econ.labor_supply import LaborSupplyFunctions


__all__ = [
    'LaborSupplyFunctions',
]
