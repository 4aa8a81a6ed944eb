import logging
from typing import Union

import numpy as np
import sympy as sp

from pylagrange.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def to_real(value) -> np.ndarray:
    """Real part of value as float; entries with a non-zero imaginary part become nan."""
    value = np.asarray(value)
    if np.iscomplexobj(value):
        value = np.where(value.imag == 0, value.real, np.nan)
    return value.astype(float)


class SourceFunction:
    """
    Evaluable single-variable function parsed from a symbolic expression.

    The expression is parsed with SymPy and compiled with numpy so that points
    outside the function's domain evaluate to nan instead of raising.
    Examples:
        >>> f = SourceFunction("x**2 + 1")
        >>> f(2.0)
        5.0
        >>> np.isnan(SourceFunction("log(x)")(-1.0))
        True
    """

    def __init__(self, expression: Union[str, sp.Expr],
                 variable: str = ProcessingConstants.DEFAULT_VARIABLE):
        self.variable = sp.Symbol(variable)
        self.expression = self._parse(expression)
        self._func = sp.lambdify(self.variable, self.expression, modules='numpy')
        logger.info("Created source function f(%s) = %s", self.variable, self.expression)

    def _parse(self, expression: Union[str, sp.Expr]) -> sp.Expr:
        logger.debug("Parsing expression: %s", expression)
        try:
            expr = sp.sympify(expression, locals={str(self.variable): self.variable})
        except (sp.SympifyError, SyntaxError, TypeError) as e:
            logger.error("Failed to parse expression '%s': %s", expression, e)
            raise ValueError(f"Failed to parse expression '{expression}': {e}") from e
        if not isinstance(expr, sp.Expr):
            raise ValueError(f"Expression '{expression}' is not a scalar expression")
        invalid_symbols = sorted(str(sym) for sym in expr.free_symbols if sym != self.variable)
        if invalid_symbols:
            logger.error("Invalid symbols in expression '%s': %s (only '%s' allowed)",
                         expression, invalid_symbols, self.variable)
            raise ValueError(
                f"Invalid symbols {invalid_symbols} in expression '{expression}'. Only '{self.variable}' is allowed.")
        return expr

    def __call__(self, x: float) -> float:
        with np.errstate(all='ignore'):
            value = self._func(np.float64(x))
        return float(to_real(value))

    def evaluate_many(self, xs) -> np.ndarray:
        """Evaluate at every point of xs; undefined points give nan."""
        xs = np.asarray(xs, dtype=float)
        with np.errstate(all='ignore'):
            values = to_real(self._func(xs))
        # Constant expressions come back as a scalar
        return np.broadcast_to(values, xs.shape).copy()

    def __repr__(self) -> str:
        return f"SourceFunction({str(self.expression)!r}, variable={str(self.variable)!r})"

    def __str__(self) -> str:
        return f"f({self.variable}) = {self.expression}"
