import logging
from dataclasses import dataclass, field
from typing import Callable, Tuple

import numpy as np

from pylagrange.algorithms.lagrange import LagrangePolynomial
from pylagrange.algorithms.sampling import compute_bounds, evaluate_at_points, sample_function

logger = logging.getLogger(__name__)

Series = Tuple[np.ndarray, np.ndarray]


@dataclass
class InterpolationTask:
    """
    A source function, its interpolating polynomial and the point sets to display.

    The bounds span both the experimental and the interpolation points. The
    series methods return the (x, y) arrays a chart front-end draws.
    """
    function: Callable[[float], float]
    experimental_points: np.ndarray
    interpolation_points: np.ndarray = field(default_factory=lambda: np.empty(0))
    name: str = "Unnamed task"
    polynomial: LagrangePolynomial = field(init=False)
    bounds: Tuple[float, float] = field(init=False)

    def __post_init__(self):
        self.experimental_points = np.asarray(self.experimental_points, dtype=float)
        self.interpolation_points = np.asarray(self.interpolation_points, dtype=float)
        self.polynomial = LagrangePolynomial.from_function(self.function, self.experimental_points)
        self.bounds = compute_bounds(self.experimental_points, self.interpolation_points)
        logger.info("Interpolation task '%s' ready: %d nodes, %d interpolation points, bounds [%.6g, %.6g]",
                    self.name, self.experimental_points.size, self.interpolation_points.size, *self.bounds)

    def function_series(self, **kwargs) -> Series:
        """Defined points of the source function over the bounds."""
        return sample_function(self.function, *self.bounds, **kwargs)

    def polynomial_series(self, **kwargs) -> Series:
        """The interpolating polynomial over the bounds."""
        return sample_function(self.polynomial, *self.bounds, **kwargs)

    def experimental_series(self) -> Series:
        """Polynomial values at the nodes."""
        return evaluate_at_points(self.polynomial, self.experimental_points)

    def interpolation_series(self) -> Series:
        """Polynomial values at the interpolation points (may be empty)."""
        return evaluate_at_points(self.polynomial, self.interpolation_points)
