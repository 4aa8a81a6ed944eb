"""
pylagrange - Dense matrix algebra and Lagrange interpolation.

This library provides a small dense matrix type with the usual linear-algebra
primitives, and a Lagrange interpolation engine that builds the unique
minimal-degree polynomial through a sampled function and evaluates it at
arbitrary points.

Key Features:
- Immutable-shape float64 matrices (products, norms, submatrices, row division)
- Lagrange interpolation with cached node differences and O(n) evaluation
- Source functions parsed from SymPy expressions
- Series sampling for chart front-ends
- YAML task files

Main Components:
- Core: Matrix, SourceFunction and the exception hierarchy
- Algorithms: Lagrange polynomial, builder and sampling helpers
- Parsing: YAML configuration and point-list parsing
- Validation: Interpolation node checks
- Data: Processing constants
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("pylagrange")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"
except ImportError:
    __version__ = "0.1.0+unknown"

# Core definitions
from .core.matrix import Matrix
from .core.function import SourceFunction
from .core.exceptions import (PyLagrangeError, MatrixError, InvalidDimensionError, DimensionMismatchError,
                              IndexOutOfRangeError, InterpolationError, DuplicateNodeError, UndefinedAtNodeError)

# Algorithms
from .algorithms.lagrange import LagrangePolynomial, LagrangePolynomialBuilder
from .algorithms.sampling import compute_bounds, sample_function, evaluate_at_points
from .algorithms.task import InterpolationTask

# Main API functions
from .parsing.api import create_interpolation, validate_yaml_file
from .parsing.utils.utilities import parse_points

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Matrix',
    'SourceFunction',

    # Exceptions
    'PyLagrangeError',
    'MatrixError',
    'InvalidDimensionError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',
    'InterpolationError',
    'DuplicateNodeError',
    'UndefinedAtNodeError',

    # Algorithms
    'LagrangePolynomial',
    'LagrangePolynomialBuilder',
    'InterpolationTask',
    'compute_bounds',
    'sample_function',
    'evaluate_at_points',

    # Main API
    'create_interpolation',
    'validate_yaml_file',
    'parse_points'
]
