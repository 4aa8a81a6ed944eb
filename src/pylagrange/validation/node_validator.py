"""Validation of interpolation node sets."""

import logging
from typing import Tuple

import numpy as np

from pylagrange.core.exceptions import DuplicateNodeError, UndefinedAtNodeError
from pylagrange.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def validate_node_coordinates(x_nodes) -> np.ndarray:
    """
    Check that node coordinates form a non-empty, finite, pairwise-distinct set.
    Args:
        x_nodes: Node x-coordinates in any order
    Returns:
        np.ndarray: The coordinates as a one-dimensional float array (input order kept)
    Raises:
        ValueError: If the set is empty, not one-dimensional, or holds a non-finite value
        DuplicateNodeError: If two coordinates are equal
    """
    x_array = np.asarray(x_nodes, dtype=float)
    if x_array.ndim != 1:
        raise ValueError(f"Interpolation nodes must be one-dimensional, got shape {x_array.shape}")
    if x_array.size < ProcessingConstants.MIN_NODES:
        logger.error("Empty node set provided")
        raise ValueError(ErrorMessages.EMPTY_NODES.format(min_nodes=ProcessingConstants.MIN_NODES))
    non_finite = np.flatnonzero(~np.isfinite(x_array))
    if non_finite.size:
        index = int(non_finite[0])
        raise ValueError(ErrorMessages.NON_FINITE_NODE.format(index=index, value=x_array[index]))
    order = np.argsort(x_array, kind='stable')
    repeated = np.flatnonzero(np.diff(x_array[order]) == 0)
    if repeated.size:
        value = float(x_array[order[repeated[0]]])
        indices = np.flatnonzero(x_array == value).tolist()
        raise DuplicateNodeError(value, indices)
    logger.debug("Validated %d distinct nodes in [%.6g, %.6g]",
                 x_array.size, x_array[order[0]], x_array[order[-1]])
    return x_array


def validate_node_values(x_array: np.ndarray, y_values) -> np.ndarray:
    """
    Check that every sampled value is finite.
    Raises:
        ValueError: If the value count differs from the node count
        UndefinedAtNodeError: At the first node whose value is nan or infinite
    """
    y_array = np.asarray(y_values, dtype=float)
    if y_array.shape != x_array.shape:
        raise ValueError(ErrorMessages.NODE_VALUE_MISMATCH.format(x_count=x_array.size, y_count=y_array.size))
    undefined = np.flatnonzero(~np.isfinite(y_array))
    if undefined.size:
        index = int(undefined[0])
        raise UndefinedAtNodeError(float(x_array[index]), float(y_array[index]))
    return y_array


def validate_nodes(x_nodes, y_values) -> Tuple[np.ndarray, np.ndarray]:
    """Validate coordinates and values together; returns float arrays."""
    x_array = validate_node_coordinates(x_nodes)
    return x_array, validate_node_values(x_array, y_values)
