"""Validation utilities for interpolation inputs."""

from .node_validator import validate_node_coordinates, validate_node_values, validate_nodes

__all__ = [
    "validate_node_coordinates",
    "validate_node_values",
    "validate_nodes"
]
