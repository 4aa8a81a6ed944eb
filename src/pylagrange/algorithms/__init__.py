"""
Core computational algorithms.

This module provides the Lagrange interpolation engine and the helpers that
turn evaluable functions into (x, y) series for display.
"""

from .lagrange import LagrangePolynomial, LagrangePolynomialBuilder, barycentric_weights, sample_nodes
from .sampling import compute_bounds, sample_function, evaluate_at_points
from .task import InterpolationTask

__all__ = [
    "LagrangePolynomial",
    "LagrangePolynomialBuilder",
    "barycentric_weights",
    "sample_nodes",
    "compute_bounds",
    "sample_function",
    "evaluate_at_points",
    "InterpolationTask"
]
