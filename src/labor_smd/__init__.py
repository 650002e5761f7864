"""Simulated Minimum Distance estimation of a Cobb-Douglas labor-supply model."""

__version__ = "0.1.0"
