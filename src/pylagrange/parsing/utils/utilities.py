import logging
import numbers
import re

import numpy as np

from pylagrange.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def parse_points(value, name: str = "points") -> np.ndarray:
    """
    Convert a point list into a one-dimensional float array.

    Accepts a sequence of numbers, a single number, None (no points), or a
    string of numbers separated by commas, semicolons or whitespace.
    Examples:
        >>> parse_points("0, 0.5 1;2")
        array([0. , 0.5, 1. , 2. ])
    Raises:
        ValueError: If an entry is not a number
    """
    if value is None:
        return np.empty(0, dtype=float)
    if isinstance(value, str):
        tokens = [token for token in re.split(ProcessingConstants.POINT_SEPARATOR_REGEX, value.strip()) if token]
        points = []
        for token in tokens:
            try:
                points.append(float(token))
            except ValueError as e:
                logger.error("Invalid entry '%s' in %s", token, name)
                raise ValueError(f"Invalid number '{token}' in {name}: '{value}'") from e
        logger.debug("Parsed %d %s from string", len(points), name)
        return np.array(points, dtype=float)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return np.array([float(value)])
    if isinstance(value, (list, tuple, np.ndarray)):
        invalid = [v for v in value if isinstance(v, bool) or not isinstance(v, numbers.Real)]
        if invalid:
            logger.error("Non-numeric entries in %s: %s", name, invalid)
            raise ValueError(f"All {name} must be numbers, got invalid entries: {invalid}")
        return np.asarray(value, dtype=float).ravel()
    raise ValueError(f"{name} must be a list of numbers or a separated string, got {type(value).__name__}")
