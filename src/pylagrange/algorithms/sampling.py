import logging
from typing import Callable, Tuple

import numpy as np

from pylagrange.core.function import to_real
from pylagrange.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def _call_or_nan(function: Callable[[float], float], x: float) -> float:
    # Domain errors (math.log(-1), 1/0) and complex results ((-1) ** 0.5) mark undefined points
    try:
        return float(to_real(function(x)))
    except (ValueError, ZeroDivisionError, OverflowError):
        return float('nan')


def _evaluate(function: Callable[[float], float], xs: np.ndarray) -> np.ndarray:
    evaluate_many = getattr(function, 'evaluate_many', None)
    if evaluate_many is not None:
        return to_real(evaluate_many(xs))
    return np.array([_call_or_nan(function, float(x)) for x in xs], dtype=float)


def compute_bounds(*point_arrays) -> Tuple[float, float]:
    """Smallest and largest coordinate over all non-empty point arrays."""
    arrays = [np.asarray(points, dtype=float).ravel() for points in point_arrays]
    arrays = [points for points in arrays if points.size]
    if not arrays:
        logger.error("Cannot compute bounds: all point arrays are empty")
        raise ValueError("Cannot compute bounds of empty point arrays")
    combined = np.concatenate(arrays)
    lower, upper = float(np.min(combined)), float(np.max(combined))
    logger.debug("Computed bounds [%.6g, %.6g] from %d points", lower, upper, combined.size)
    return lower, upper


def sample_function(function: Callable[[float], float], lower: float, upper: float,
                    steps: int = ProcessingConstants.DEFAULT_SERIES_STEPS,
                    margin_steps: int = ProcessingConstants.DEFAULT_MARGIN_STEPS) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample function on an even grid for plotting.

    The grid divides [lower, upper] into steps intervals and extends
    margin_steps intervals past either end. Points where the function is
    nan or infinite are left out.
    Args:
        function: Callable mapping float to float (evaluate_many is used when available)
        lower: Lower bound of the displayed range
        upper: Upper bound of the displayed range
        steps: Number of intervals between lower and upper
        margin_steps: Extra intervals sampled beyond each bound
    Returns:
        Tuple[np.ndarray, np.ndarray]: x and y arrays of the defined points
    """
    if steps <= 0:
        raise ValueError(f"steps must be positive, got {steps}")
    if margin_steps < 0:
        raise ValueError(f"margin_steps must be non-negative, got {margin_steps}")
    if not (np.isfinite(lower) and np.isfinite(upper)):
        raise ValueError(f"Sampling bounds must be finite, got [{lower}, {upper}]")
    if lower > upper:
        logger.error("Invalid sampling range: lower=%.6g > upper=%.6g", lower, upper)
        raise ValueError(f"Lower bound ({lower}) must not exceed upper bound ({upper})")
    if lower == upper:
        padding = ProcessingConstants.DEGENERATE_RANGE_PADDING
        logger.debug("Degenerate range at %.6g, padding by %.6g", lower, padding)
        lower, upper = lower - padding, upper + padding
    step = (upper - lower) / steps
    xs = lower + step * np.arange(-margin_steps, steps + margin_steps + 1)
    with np.errstate(all='ignore'):
        ys = _evaluate(function, xs)
    defined = np.isfinite(ys)
    if not defined.any():
        logger.warning("Function is undefined on the whole sampled range [%.6g, %.6g]", xs[0], xs[-1])
    elif not defined.all():
        logger.debug("Dropped %d undefined points out of %d", (~defined).sum(), xs.size)
    return xs[defined], ys[defined]


def evaluate_at_points(function: Callable[[float], float], points) -> Tuple[np.ndarray, np.ndarray]:
    """Exact (x, f(x)) pairs at the given points, undefined values included."""
    xs = np.asarray(points, dtype=float).ravel()
    with np.errstate(all='ignore'):
        ys = _evaluate(function, xs)
    return xs, ys
