import logging
from typing import Callable, Optional, Tuple

import numpy as np
import sympy as sp

from pylagrange.core.exceptions import UndefinedAtNodeError
from pylagrange.core.function import to_real
from pylagrange.core.matrix import Matrix
from pylagrange.data.constants import ProcessingConstants
from pylagrange.validation.node_validator import validate_node_coordinates, validate_nodes

logger = logging.getLogger(__name__)


def sample_nodes(function: Callable[[float], float], x_nodes: np.ndarray) -> np.ndarray:
    """
    Evaluate function at every node.

    Callables that signal a domain error by raising (as the math module does)
    or by returning a complex number (as x ** 0.5 does for negative x) are
    reported the same way as those returning nan.
    Raises:
        UndefinedAtNodeError: If function is not finite at some node
    """
    values = np.empty(len(x_nodes), dtype=float)
    for i, x in enumerate(x_nodes):
        try:
            values[i] = to_real(function(float(x)))
        except (ValueError, ZeroDivisionError, OverflowError) as e:
            raise UndefinedAtNodeError(float(x), float('nan')) from e
    logger.debug("Sampled source function at %d nodes", len(values))
    return values


def barycentric_weights(differences: Matrix) -> np.ndarray:
    """
    Barycentric weights w_i = 1 / prod_{k != i}(x_i - x_k), scaled so that max|w| = 1.

    The products are accumulated as sums of logarithms, so widely spaced,
    tightly spaced or numerous nodes neither overflow nor underflow. The
    common scale factor cancels in the barycentric formula.
    """
    factors = differences.to_array()
    np.fill_diagonal(factors, 1.0)
    log_magnitudes = np.sum(np.log(np.abs(factors)), axis=1)
    signs = np.prod(np.sign(factors), axis=1)
    return signs * np.exp(np.min(log_magnitudes) - log_magnitudes)


class LagrangePolynomial:
    """
    Interpolating polynomial of degree n-1 through n nodes, in Lagrange form.

    The pairwise node differences x_i - x_k are computed once at construction
    and kept in a Matrix; the barycentric weights w_i are derived from it.
    Evaluation uses the barycentric formula
        L(x) = sum_i w_i y_i / (x - x_i) / sum_i w_i / (x - x_i)
    which costs O(n) per point. At a node the stored value is returned as is.

    Instances are immutable and safe to evaluate from several threads.
    Examples:
        >>> p = LagrangePolynomial([0.0, 1.0, 2.0], [1.0, 2.0, 5.0])
        >>> p(2.0)
        5.0
    """

    def __init__(self, x_nodes, y_values):
        x_array, y_array = validate_nodes(x_nodes, y_values)
        self._x = self._freeze(x_array)
        self._y = self._freeze(y_array)
        n = self._x.size
        if n - 1 > ProcessingConstants.HIGH_DEGREE_WARNING:
            logger.warning("Building a degree-%d polynomial; high degree interpolation on "
                           "unevenly chosen nodes is prone to oscillation", n - 1)
        self._differences = Matrix.from_array(self._x[:, np.newaxis] - self._x[np.newaxis, :])
        factors = self._differences.to_array()
        np.fill_diagonal(factors, 1.0)
        # Unscaled products; these may overflow or underflow, the weights do not
        with np.errstate(over='ignore', under='ignore'):
            self._denominators = self._freeze(np.prod(factors, axis=1))
        self._weights = self._freeze(barycentric_weights(self._differences))
        logger.info("Built Lagrange polynomial of degree %d over [%.6g, %.6g]",
                    n - 1, self._x.min(), self._x.max())

    @staticmethod
    def _freeze(array: np.ndarray) -> np.ndarray:
        array = np.array(array, dtype=float)
        array.flags.writeable = False
        return array

    @classmethod
    def from_function(cls, function: Callable[[float], float], x_nodes) -> 'LagrangePolynomial':
        """
        Sample function at x_nodes and interpolate the resulting values.
        Args:
            function: Any callable mapping float to float
            x_nodes: Distinct, finite node coordinates
        Raises:
            DuplicateNodeError: If two coordinates are equal
            UndefinedAtNodeError: If function is not finite at some node
        """
        x_array = validate_node_coordinates(x_nodes)
        logger.info("Interpolating %s at %d nodes", function, x_array.size)
        return cls(x_array, sample_nodes(function, x_array))

    # --- Introspection ---
    @property
    def nodes(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only (x, y) node arrays in input order."""
        return self._x, self._y

    @property
    def pairwise_differences(self) -> Matrix:
        """Matrix D with D(i, k) = x_i - x_k."""
        return self._differences

    @property
    def denominators(self) -> np.ndarray:
        """Products prod_{k != i}(x_i - x_k), unscaled."""
        return self._denominators

    @property
    def weights(self) -> np.ndarray:
        """Barycentric weights, proportional to 1 / denominators and scaled to max|w| = 1."""
        return self._weights

    @property
    def degree(self) -> int:
        return self._x.size - 1

    def __len__(self) -> int:
        return self._x.size

    # --- Evaluation ---
    def evaluate(self, x: float) -> float:
        """Value of the polynomial at x; nan propagates."""
        if self._x.size == 1:
            return float(self._y[0])
        x = float(x)
        shifted = x - self._x
        hits = np.flatnonzero(shifted == 0)
        if hits.size:
            return float(self._y[hits[0]])
        with np.errstate(invalid='ignore', over='ignore'):
            terms = self._weights / shifted
            return float(np.sum(terms * self._y) / np.sum(terms))

    __call__ = evaluate

    def evaluate_many(self, xs) -> np.ndarray:
        """Vectorised evaluate; the result has the shape of xs."""
        xs = np.asarray(xs, dtype=float)
        if self._x.size == 1:
            return np.full(xs.shape, self._y[0])
        flat = xs.ravel()
        shifted = flat[:, np.newaxis] - self._x[np.newaxis, :]
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            terms = self._weights / shifted
            result = np.sum(terms * self._y, axis=1) / np.sum(terms, axis=1)
        point_idx, node_idx = np.nonzero(shifted == 0)
        result[point_idx] = self._y[node_idx]
        return result.reshape(xs.shape)

    # --- Symbolic form ---
    def to_sympy(self, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
        """Expanded polynomial as a SymPy expression in symbol (default x)."""
        if symbol is None:
            symbol = sp.Symbol(ProcessingConstants.DEFAULT_VARIABLE)
        n = self._x.size
        polynomial = sp.Integer(0)
        for i in range(n):
            basis = sp.Integer(1)
            for k in range(n):
                if k != i:
                    basis *= (symbol - sp.Float(self._x[k])) / sp.Float(self._differences.get(i, k))
            polynomial += sp.Float(self._y[i]) * basis
        return sp.expand(polynomial)

    def coefficients(self) -> np.ndarray:
        """Power-basis coefficients, highest degree first."""
        symbol = sp.Symbol(ProcessingConstants.DEFAULT_VARIABLE)
        coeffs = sp.Poly(self.to_sympy(symbol), symbol).all_coeffs()
        return np.array([float(c) for c in coeffs], dtype=float)

    def __repr__(self) -> str:
        return f"LagrangePolynomial(degree={self.degree}, nodes={self._x.tolist()!r})"


class LagrangePolynomialBuilder:
    """
    Fluent construction of a LagrangePolynomial from a source function.
    Examples:
        >>> polynomial = (LagrangePolynomialBuilder(SourceFunction("sin(x)"))
        ...               .experimental_data([0.0, 1.0, 2.0])
        ...               .build())
    """

    def __init__(self, function: Callable[[float], float]):
        if not callable(function):
            raise TypeError(f"Source function must be callable, got {type(function).__name__}")
        self._function = function
        self._points = None

    def experimental_data(self, points) -> 'LagrangePolynomialBuilder':
        """Set the node x-coordinates at which the function is sampled."""
        self._points = np.array(points, dtype=float)
        logger.debug("Builder received %d experimental points", self._points.size)
        return self

    def build(self) -> LagrangePolynomial:
        if self._points is None:
            logger.error("build() called before experimental_data()")
            raise ValueError("No experimental data provided; call experimental_data() first")
        return LagrangePolynomial.from_function(self._function, self._points)
