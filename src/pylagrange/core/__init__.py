"""
Core data structures.

This module contains the dense Matrix type, the sympy-backed source
function and the exception hierarchy used throughout pylagrange.
"""

from .matrix import Matrix
from .function import SourceFunction
from .exceptions import (PyLagrangeError, MatrixError, InvalidDimensionError, DimensionMismatchError,
                         IndexOutOfRangeError, InterpolationError, DuplicateNodeError, UndefinedAtNodeError)

__all__ = [
    "Matrix",
    "SourceFunction",
    "PyLagrangeError",
    "MatrixError",
    "InvalidDimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InterpolationError",
    "DuplicateNodeError",
    "UndefinedAtNodeError"
]
