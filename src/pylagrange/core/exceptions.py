"""Custom exceptions for pylagrange core functionality."""
import logging
from typing import Sequence

logger = logging.getLogger(__name__)


class PyLagrangeError(Exception):
    """Base exception for all pylagrange errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class MatrixError(PyLagrangeError):
    """Base exception for matrix-related errors."""
    pass


class InvalidDimensionError(MatrixError, ValueError):
    """Exception raised for a non-positive row count, column count or identity size."""
    pass


class DimensionMismatchError(MatrixError, ValueError):
    """Exception raised when operand shapes do not conform."""
    pass


class IndexOutOfRangeError(MatrixError, IndexError):
    """Exception raised when an element or submatrix index exceeds the matrix shape."""
    pass


class InterpolationError(PyLagrangeError):
    """Base exception for interpolation errors."""
    pass


class DuplicateNodeError(InterpolationError, ValueError):
    """Exception raised when two interpolation nodes share an x-coordinate."""

    def __init__(self, value: float, indices: Sequence[int]):
        self.value = value
        self.indices = tuple(indices)
        message = (f"Duplicate interpolation node x={value!r} at indices "
                   f"{', '.join(str(i) for i in self.indices)}")
        super().__init__(message)


class UndefinedAtNodeError(InterpolationError, ValueError):
    """Exception raised when the source function is not finite at a node."""

    def __init__(self, x: float, value: float):
        self.x = x
        self.value = value
        message = f"Source function is undefined at node x={x!r} (got {value!r})"
        super().__init__(message)
