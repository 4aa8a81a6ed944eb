"""
Parsing and configuration modules for pylagrange.

This package handles YAML task files and point-list parsing.
"""

from .api import create_interpolation, validate_yaml_file
from .config.interpolation_yaml_parser import InterpolationYAMLParser
from .utils.utilities import parse_points

__all__ = [
    'create_interpolation',
    'validate_yaml_file',
    'InterpolationYAMLParser',
    'parse_points'
]
