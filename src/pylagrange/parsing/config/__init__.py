"""Interpolation task file parsing and its YAML keys."""

from .interpolation_yaml_parser import BaseFileParser, InterpolationYAMLParser, YAMLFileParser
from .yaml_keys import (EXPERIMENTAL_FUNCTION_KEY, EXPERIMENTAL_POINTS_KEY, INTERPOLATION_POINTS_KEY, NAME_KEY,
                        OPTIONAL_KEYS, REQUIRED_KEYS, VARIABLE_KEY)

__all__ = [
    "InterpolationYAMLParser",
    "YAMLFileParser",
    "BaseFileParser",
    "NAME_KEY",
    "EXPERIMENTAL_FUNCTION_KEY",
    "VARIABLE_KEY",
    "EXPERIMENTAL_POINTS_KEY",
    "INTERPOLATION_POINTS_KEY",
    "REQUIRED_KEYS",
    "OPTIONAL_KEYS",
]
