import logging
import numbers
import operator
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from pylagrange.core.exceptions import DimensionMismatchError, IndexOutOfRangeError, InvalidDimensionError
from pylagrange.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense double-precision matrix with a fixed shape.

    The backing numpy array is owned exclusively by the instance and is made
    read-only as soon as construction finishes. Every operation returns a new
    Matrix; none of them mutates the receiver or its operands.
    """

    def __init__(self, rows: int, columns: int):
        """Construct a rows x columns matrix of zeros."""
        self._check_dimensions(rows, columns)
        self._seal(np.zeros((rows, columns), dtype=float))

    # --- Construction helpers ---
    @staticmethod
    def _check_dimensions(rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise InvalidDimensionError(ErrorMessages.INVALID_DIMENSION.format(rows=rows, columns=columns))

    def _seal(self, elements: np.ndarray) -> None:
        elements.flags.writeable = False
        self._elements = elements
        self._rows, self._columns = elements.shape

    @classmethod
    def _wrap(cls, elements: np.ndarray) -> 'Matrix':
        """Adopt a freshly computed 2D array without copying it."""
        matrix = cls.__new__(cls)
        matrix._seal(elements)
        return matrix

    @classmethod
    def from_array(cls, data: Iterable[Iterable[float]], rows: Optional[int] = None,
                   columns: Optional[int] = None) -> 'Matrix':
        """
        Construct a matrix from a rectangular two-dimensional array.
        Args:
            data: Nested sequence (or 2D numpy array) of numbers, row by row
            rows: Expected number of rows; inferred from data when omitted
            columns: Expected number of columns; inferred from the first row when omitted
        Returns:
            Matrix: A new matrix holding a private copy of data
        Raises:
            InvalidDimensionError: If rows or columns is non-positive
            DimensionMismatchError: If data is not rows x columns
        """
        if (rows is not None and rows <= 0) or (columns is not None and columns <= 0):
            raise InvalidDimensionError(ErrorMessages.INVALID_DIMENSION.format(rows=rows, columns=columns))
        data_rows = [np.asarray(row, dtype=float) for row in data]
        if rows is None:
            rows = len(data_rows)
        elif len(data_rows) != rows:
            raise DimensionMismatchError(
                ErrorMessages.ROW_COUNT_MISMATCH.format(expected=rows, actual=len(data_rows)))
        if columns is None:
            columns = data_rows[0].size if data_rows else 0
        cls._check_dimensions(rows, columns)
        for i, row in enumerate(data_rows):
            if row.ndim != 1 or row.size != columns:
                actual = row.size if row.ndim == 1 else f"{row.ndim}-dimensional entry"
                raise DimensionMismatchError(
                    ErrorMessages.COLUMN_COUNT_MISMATCH.format(row=i, expected=columns, actual=actual))
        logger.debug("Constructed %dx%d matrix from array", rows, columns)
        return cls._wrap(np.array(data_rows, dtype=float))

    @classmethod
    def identity(cls, size: int) -> 'Matrix':
        """Construct a size x size identity matrix."""
        if size <= 0:
            raise InvalidDimensionError(ErrorMessages.INVALID_IDENTITY_SIZE.format(size=size))
        return cls._wrap(np.eye(size, dtype=float))

    # --- Shape and element access ---
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise IndexOutOfRangeError(
                ErrorMessages.INDEX_OUT_OF_RANGE.format(i=i, j=j, rows=self._rows, columns=self._columns))

    def get(self, i: int, j: int) -> float:
        """Return the element at zero-based row i, column j."""
        i, j = operator.index(i), operator.index(j)
        self._check_index(i, j)
        return float(self._elements[i, j])

    def __getitem__(self, key: Tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}")
        return self.get(*key)

    # --- Slicing ---
    def _submatrix_error(self, detail: str) -> IndexOutOfRangeError:
        return IndexOutOfRangeError(ErrorMessages.SUBMATRIX_OUT_OF_RANGE.format(
            rows=self._rows, columns=self._columns, detail=detail))

    def _check_column_range(self, j0: int, j1: int) -> None:
        if not (0 <= j0 < self._columns and 0 <= j1 < self._columns):
            raise self._submatrix_error(f"columns {j0}..{j1}")

    def sub_matrix(self, i0: int, j0: int, i1: int, j1: int) -> 'Matrix':
        """
        Extract rows i0..i1 and columns j0..j1 (both inclusive).
        Returns:
            Matrix: A new matrix M(i0:i1, j0:j1) re-indexed from (0, 0)
        Raises:
            InvalidDimensionError: If i1 < i0 or j1 < j0
            IndexOutOfRangeError: If any bound falls outside this matrix
        """
        i0, j0, i1, j1 = (operator.index(v) for v in (i0, j0, i1, j1))
        self._check_dimensions(i1 - i0 + 1, j1 - j0 + 1)
        if not (0 <= i0 < self._rows and 0 <= i1 < self._rows):
            raise self._submatrix_error(f"rows {i0}..{i1}")
        self._check_column_range(j0, j1)
        logger.debug("Extracting submatrix rows %d..%d, columns %d..%d", i0, i1, j0, j1)
        return self._wrap(self._elements[i0:i1 + 1, j0:j1 + 1].copy())

    def sub_matrix_rows(self, row_indices: Sequence[int], j0: int, j1: int) -> 'Matrix':
        """
        Extract an explicit list of rows (in the given order) and columns j0..j1.
        Returns:
            Matrix: A new matrix M(row_indices[:], j0:j1)
        Raises:
            InvalidDimensionError: If row_indices is empty or j1 < j0
            IndexOutOfRangeError: If a row index or column bound is out of range
        """
        indices = [operator.index(i) for i in row_indices]
        j0, j1 = operator.index(j0), operator.index(j1)
        self._check_dimensions(len(indices), j1 - j0 + 1)
        invalid = [i for i in indices if not 0 <= i < self._rows]
        if invalid:
            raise self._submatrix_error(f"rows {invalid}")
        self._check_column_range(j0, j1)
        return self._wrap(self._elements[np.ix_(indices, range(j0, j1 + 1))])

    # --- Reductions ---
    def norm(self) -> float:
        """Maximum absolute row sum (infinity norm)."""
        return float(np.max(np.sum(np.abs(self._elements), axis=1)))

    def abs_max(self) -> float:
        """Largest absolute value among all elements."""
        return float(np.max(np.abs(self._elements)))

    def diagonal(self) -> np.ndarray:
        """Return the min(rows, columns) main diagonal elements."""
        return np.diagonal(self._elements).copy()

    # --- Arithmetic ---
    def scale(self, lam: float) -> 'Matrix':
        """Multiply every element by the scalar lam."""
        return self._wrap(self._elements * float(lam))

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """
        Matrix product: M(i, j) = sum_k A(i, k) * B(k, j).
        Raises:
            DimensionMismatchError: If self.columns != other.rows
        """
        self._require_matrix(other)
        if self._columns != other._rows:
            raise DimensionMismatchError(ErrorMessages.INNER_DIMENSION_MISMATCH.format(
                left=self._shape_str(), right=other._shape_str()))
        logger.debug("Multiplying %s by %s", self._shape_str(), other._shape_str())
        return self._wrap(self._elements @ other._elements)

    def add(self, other: 'Matrix') -> 'Matrix':
        """Element-wise sum; shapes must agree."""
        self._check_same_shape(other)
        return self._wrap(self._elements + other._elements)

    def subtract(self, other: 'Matrix') -> 'Matrix':
        """Element-wise difference; shapes must agree."""
        self._check_same_shape(other)
        return self._wrap(self._elements - other._elements)

    def divide_rows(self, divisors: Sequence[float]) -> 'Matrix':
        """
        Divide row i element-wise by divisors[i].

        Division by zero follows IEEE-754 and yields +/-inf or nan.
        Raises:
            DimensionMismatchError: If len(divisors) != rows
        """
        divisors = np.asarray(divisors, dtype=float)
        if divisors.ndim != 1 or divisors.size != self._rows:
            raise DimensionMismatchError(
                ErrorMessages.DIVISOR_MISMATCH.format(count=divisors.size, rows=self._rows))
        with np.errstate(divide='ignore', invalid='ignore'):
            result = self._elements / divisors[:, np.newaxis]
        return self._wrap(result)

    def copy(self) -> 'Matrix':
        """Deep copy with identical shape and contents."""
        return self._wrap(self._elements.copy())

    @staticmethod
    def _require_matrix(other) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"Expected Matrix operand, got {type(other).__name__}")

    def _check_same_shape(self, other: 'Matrix') -> None:
        self._require_matrix(other)
        if self.shape != other.shape:
            raise DimensionMismatchError(ErrorMessages.SHAPE_MISMATCH.format(
                left=self._shape_str(), right=other._shape_str()))

    def _shape_str(self) -> str:
        return f"{self._rows}x{self._columns}"

    # --- Operators ---
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self.scale(-1.0)

    # --- Comparison and export ---
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._elements, other._elements))

    __hash__ = None

    def allclose(self, other: 'Matrix', tolerance: float = ProcessingConstants.DEFAULT_TOLERANCE) -> bool:
        """Element-wise comparison within an absolute tolerance."""
        self._require_matrix(other)
        return self.shape == other.shape and bool(
            np.allclose(self._elements, other._elements, rtol=0.0, atol=tolerance))

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the elements as a 2D numpy array."""
        return self._elements.copy()

    def to_list(self) -> List[List[float]]:
        return self._elements.tolist()

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
