from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used by the interpolation engine and samplers."""
    # Tolerance and precision
    DEFAULT_TOLERANCE: Final[float] = 1e-9
    # Interpolation
    MIN_NODES: Final[int] = 1
    HIGH_DEGREE_WARNING: Final[int] = 20
    DEFAULT_VARIABLE: Final[str] = 'x'
    # Series sampling
    DEFAULT_SERIES_STEPS: Final[int] = 4096
    DEFAULT_MARGIN_STEPS: Final[int] = 128
    DEGENERATE_RANGE_PADDING: Final[float] = 1.0
    # Point list parsing
    POINT_SEPARATOR_REGEX: Final[str] = r'[,;\s]+'


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INVALID_DIMENSION: Final[str] = "Matrix dimensions must be positive, got {rows}x{columns}"
    INVALID_IDENTITY_SIZE: Final[str] = "Identity size must be positive, got {size}"
    ROW_COUNT_MISMATCH: Final[str] = "Number of rows doesn't match: expected {expected}, got {actual}"
    COLUMN_COUNT_MISMATCH: Final[str] = "Number of columns doesn't match in row {row}: expected {expected}, got {actual}"
    INNER_DIMENSION_MISMATCH: Final[str] = "Matrix inner dimensions must agree: {left} @ {right}"
    SHAPE_MISMATCH: Final[str] = "Matrix dimensions must agree: {left} vs {right}"
    DIVISOR_MISMATCH: Final[str] = "Divisor count ({count}) must agree with row count ({rows})"
    INDEX_OUT_OF_RANGE: Final[str] = "Index ({i}, {j}) out of range for {rows}x{columns} matrix"
    SUBMATRIX_OUT_OF_RANGE: Final[str] = "Submatrix indices out of range for {rows}x{columns} matrix: {detail}"
    EMPTY_NODES: Final[str] = "At least {min_nodes} interpolation node is required"
    NON_FINITE_NODE: Final[str] = "Interpolation node at index {index} must be finite, got {value}"
    NODE_VALUE_MISMATCH: Final[str] = "Node count mismatch: x_nodes({x_count}) != y_values({y_count})"
