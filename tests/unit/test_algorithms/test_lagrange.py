"""Unit tests for Lagrange interpolation."""

import logging
import math

import pytest
import numpy as np
import sympy as sp
from pylagrange.algorithms.lagrange import (LagrangePolynomial, LagrangePolynomialBuilder, barycentric_weights,
                                           sample_nodes)
from pylagrange.core.exceptions import DuplicateNodeError, UndefinedAtNodeError
from pylagrange.core.function import SourceFunction
from pylagrange.core.matrix import Matrix


class TestLagrangePolynomial:
    """Test cases for building and evaluating Lagrange polynomials."""
    def test_quadratic_reconstruction(self, quadratic_nodes):
        """Test nodes (0,1), (1,2), (2,5) reproduce x**2 + 1."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        assert polynomial.evaluate(0.0) == 1.0
        assert polynomial.evaluate(1.0) == 2.0
        assert polynomial.evaluate(2.0) == 5.0
        assert np.isclose(polynomial.evaluate(0.5), 1.25)
        assert np.isclose(polynomial.evaluate(-3.0), 10.0)

    def test_exact_at_nodes(self):
        """Test the polynomial returns the node values exactly at every node."""
        x_nodes = np.array([-2.3, -0.7, 0.1, 1.9, 3.4, 5.0])
        y_values = np.cos(x_nodes) * 10
        polynomial = LagrangePolynomial(x_nodes, y_values)
        for x, y in zip(x_nodes, y_values):
            assert polynomial(x) == y

    def test_unsorted_nodes(self):
        """Test node order does not matter."""
        polynomial = LagrangePolynomial([2.0, 0.0, 1.0], [5.0, 1.0, 2.0])
        assert np.isclose(polynomial(0.5), 1.25)
        assert np.isclose(polynomial(3.0), 10.0)

    def test_single_node(self):
        """Test a single node gives a constant polynomial."""
        polynomial = LagrangePolynomial([3.0], [7.5])
        assert polynomial.degree == 0
        for x in [-100.0, 0.0, 3.0, 42.0]:
            assert polynomial(x) == 7.5

    def test_linear(self):
        """Test two nodes give the line through them."""
        polynomial = LagrangePolynomial([1.0, 3.0], [2.0, 6.0])
        assert np.isclose(polynomial(2.0), 4.0)
        assert np.isclose(polynomial(-1.0), -2.0)

    def test_reproduces_polynomials(self):
        """Test a cubic sampled at four nodes is reproduced everywhere."""
        def cubic(x):
            return 2 * x ** 3 - x + 4
        x_nodes = np.array([-1.0, 0.5, 2.0, 3.0])
        polynomial = LagrangePolynomial.from_function(cubic, x_nodes)
        for x in np.linspace(-2, 4, 13):
            assert np.isclose(polynomial(x), cubic(x), atol=1e-9)

    def test_nan_propagates(self, quadratic_nodes):
        """Test a nan argument gives nan."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        assert np.isnan(polynomial(float('nan')))

    def test_repeated_evaluation_is_stable(self, quadratic_nodes):
        """Test evaluation is a pure function of x."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        first = polynomial(0.3)
        assert all(polynomial(0.3) == first for _ in range(10))

    def test_evaluate_many(self, quadratic_nodes):
        """Test vectorised evaluation matches scalar evaluation."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        xs = np.array([-1.0, 0.0, 0.5, 1.0, 1.5, 2.0, 4.0])
        values = polynomial.evaluate_many(xs)
        np.testing.assert_allclose(values, xs ** 2 + 1)
        assert values[1] == 1.0
        assert values[3] == 2.0
        assert values[5] == 5.0

    def test_evaluate_many_shape(self, quadratic_nodes):
        """Test vectorised evaluation keeps the input shape."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        assert polynomial.evaluate_many(np.zeros((2, 3))).shape == (2, 3)
        assert LagrangePolynomial([1.0], [2.0]).evaluate_many([0.0, 5.0]).tolist() == [2.0, 2.0]

    def test_duplicate_nodes(self):
        """Test equal x-coordinates are rejected."""
        with pytest.raises(DuplicateNodeError) as exc_info:
            LagrangePolynomial([1.0, 1.0], [2.0, 2.0])
        assert exc_info.value.indices == (0, 1)

    def test_non_finite_value(self):
        """Test a nan node value is rejected."""
        with pytest.raises(UndefinedAtNodeError):
            LagrangePolynomial([0.0, 1.0], [1.0, float('nan')])

    def test_empty_nodes(self):
        """Test an empty node set is rejected."""
        with pytest.raises(ValueError, match="At least 1"):
            LagrangePolynomial([], [])

    def test_value_count_mismatch(self):
        """Test x and y must have the same length."""
        with pytest.raises(ValueError, match="Node count mismatch"):
            LagrangePolynomial([0.0, 1.0], [1.0])


class TestLagrangeCache:
    """Test cases for the cached node tables."""
    def test_pairwise_differences(self, quadratic_nodes):
        """Test the difference table holds x_i - x_k."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        differences = polynomial.pairwise_differences
        assert isinstance(differences, Matrix)
        assert differences.shape == (3, 3)
        assert differences.get(0, 2) == -2.0
        assert differences.get(2, 1) == 1.0
        np.testing.assert_array_equal(differences.diagonal(), [0.0, 0.0, 0.0])

    def test_denominators(self, quadratic_nodes):
        """Test denominators are the products of differences to the other nodes."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        np.testing.assert_array_equal(polynomial.denominators, [2.0, -1.0, 2.0])

    def test_tables_are_read_only(self, quadratic_nodes):
        """Test the cached arrays cannot be modified."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        x_nodes, y_values = polynomial.nodes
        with pytest.raises(ValueError):
            x_nodes[0] = 10.0
        with pytest.raises(ValueError):
            polynomial.denominators[0] = 1.0
        with pytest.raises(ValueError):
            polynomial.weights[0] = 1.0

    def test_input_arrays_not_shared(self):
        """Test later changes to the caller's arrays have no effect."""
        x_nodes = np.array([0.0, 1.0])
        y_values = np.array([0.0, 1.0])
        polynomial = LagrangePolynomial(x_nodes, y_values)
        y_values[1] = 100.0
        assert polynomial(1.0) == 1.0

    def test_len_and_repr(self, quadratic_nodes):
        """Test size helpers."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        assert len(polynomial) == 3
        assert polynomial.degree == 2
        assert repr(polynomial) == "LagrangePolynomial(degree=2, nodes=[0.0, 1.0, 2.0])"


class TestLagrangeConditioning:
    """Test cases for accuracy on widely spaced, tightly spaced and large node sets."""
    def test_weights_are_scaled_reciprocals(self, quadratic_nodes):
        """Test weights are proportional to 1 / denominators with max |w| = 1."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        np.testing.assert_allclose(polynomial.weights, [0.5, -1.0, 0.5])

    def test_barycentric_weights_from_differences(self):
        """Test weights computed directly from a difference table."""
        x_nodes = np.array([0.0, 1.0, 3.0])
        differences = Matrix.from_array(x_nodes[:, np.newaxis] - x_nodes[np.newaxis, :])
        # Unscaled: 1/3, -1/2, 1/6
        np.testing.assert_allclose(barycentric_weights(differences), [2.0 / 3.0, -1.0, 1.0 / 3.0])

    def test_widely_spaced_nodes(self):
        """Test nodes a million units apart evaluate without overflow."""
        x_nodes = np.arange(60) * 1e6
        polynomial = LagrangePolynomial(x_nodes, np.ones(60))
        assert np.all(np.isfinite(polynomial.weights))
        assert np.max(np.abs(polynomial.weights)) == 1.0
        assert polynomial(1.5e6) == pytest.approx(1.0)
        np.testing.assert_allclose(polynomial.evaluate_many([2.5e6, 29.5e6, 57.5e6]), 1.0)

    def test_widely_spaced_linear(self):
        """Test a line through widely spaced nodes is reproduced between the nodes."""
        x_nodes = np.arange(60) * 1e6
        polynomial = LagrangePolynomial(x_nodes, 2.0 * x_nodes + 3.0)
        assert polynomial(29.5e6) == pytest.approx(2.0 * 29.5e6 + 3.0, rel=1e-6)

    def test_tightly_spaced_nodes(self):
        """Test nodes a few nanounits apart evaluate without underflow."""
        n = 300
        x_nodes = 1e-6 * np.cos(np.pi * (np.arange(n) + 0.5) / n)
        polynomial = LagrangePolynomial(x_nodes, np.full(n, 4.0))
        assert np.all(np.isfinite(polynomial.weights))
        assert polynomial(1.234e-7) == pytest.approx(4.0)
        np.testing.assert_allclose(polynomial.evaluate_many([-3e-7, 0.0, 5e-7]), 4.0)

    def test_many_chebyshev_nodes(self):
        """Test a thousand Chebyshev nodes interpolate a smooth function accurately."""
        n = 1000
        x_nodes = np.cos(np.pi * (np.arange(n) + 0.5) / n)
        polynomial = LagrangePolynomial(x_nodes, np.exp(x_nodes))
        assert polynomial(0.123456) == pytest.approx(np.exp(0.123456), rel=1e-9)
        xs = np.array([-0.987654, -0.5, 0.25, 0.75])
        np.testing.assert_allclose(polynomial.evaluate_many(xs), np.exp(xs), rtol=1e-9)

    def test_many_chebyshev_nodes_constant(self):
        """Test a constant is reproduced with 1200 nodes."""
        n = 1200
        x_nodes = np.cos(np.pi * (np.arange(n) + 0.5) / n)
        polynomial = LagrangePolynomial(x_nodes, np.ones(n))
        assert polynomial(0.123456) == pytest.approx(1.0)


class TestLagrangeSymbolic:
    """Test cases for the SymPy form of the polynomial."""
    def test_to_sympy(self, quadratic_nodes):
        """Test the expanded expression matches x**2 + 1."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        x = sp.Symbol('x')
        expr = polynomial.to_sympy()
        assert abs(float(expr.subs(x, 3)) - 10.0) < 1e-12
        assert sp.Poly(expr, x).degree() == 2

    def test_to_sympy_custom_symbol(self):
        """Test a caller-supplied symbol is used."""
        t = sp.Symbol('t')
        expr = LagrangePolynomial([0.0, 1.0], [1.0, 3.0]).to_sympy(t)
        assert expr.free_symbols == {t}

    def test_coefficients(self, quadratic_nodes):
        """Test power-basis coefficients, highest degree first."""
        polynomial = LagrangePolynomial(*quadratic_nodes)
        np.testing.assert_allclose(polynomial.coefficients(), [1.0, 0.0, 1.0], atol=1e-12)

    def test_coefficients_constant(self):
        """Test a single node gives a single coefficient."""
        np.testing.assert_array_equal(LagrangePolynomial([2.0], [4.0]).coefficients(), [4.0])


class TestLagrangeFromFunction:
    """Test cases for sampling a function at the nodes."""
    def test_from_source_function(self, square_plus_one):
        """Test interpolation of an expression-backed function."""
        polynomial = LagrangePolynomial.from_function(square_plus_one, [0.0, 1.0, 2.0])
        x_nodes, y_values = polynomial.nodes
        np.testing.assert_array_equal(y_values, [1.0, 2.0, 5.0])
        assert np.isclose(polynomial(0.5), 1.25)

    def test_from_function_duplicate_nodes(self, square_plus_one):
        """Test duplicate node rejection when sampling a function."""
        with pytest.raises(DuplicateNodeError):
            LagrangePolynomial.from_function(square_plus_one, [1.0, 1.0])

    def test_from_function_undefined(self):
        """Test a node outside the function's domain is rejected."""
        with pytest.raises(UndefinedAtNodeError) as exc_info:
            LagrangePolynomial.from_function(SourceFunction("log(x)"), [-1.0, 1.0, 2.0])
        assert exc_info.value.x == -1.0

    def test_from_function_raising_callable(self):
        """Test math-module domain errors are reported as undefined nodes."""
        with pytest.raises(UndefinedAtNodeError):
            LagrangePolynomial.from_function(math.log, [0.0, 1.0])

    def test_from_function_complex_result(self):
        """Test a callable returning a complex number is reported as undefined at that node."""
        with pytest.raises(UndefinedAtNodeError) as exc_info:
            LagrangePolynomial.from_function(lambda x: x ** 0.5, [-1.0, 1.0])
        assert exc_info.value.x == -1.0

    def test_undefined_node_logged_once(self, caplog):
        """Test an undefined node produces a single error record."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(UndefinedAtNodeError):
                sample_nodes(math.log, np.array([0.0, 1.0]))
        assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1

    def test_sample_nodes(self):
        """Test sampling a plain callable."""
        values = sample_nodes(lambda x: 3 * x, np.array([1.0, 2.0]))
        np.testing.assert_array_equal(values, [3.0, 6.0])


class TestLagrangePolynomialBuilder:
    """Test cases for the fluent builder."""
    def test_build(self, square_plus_one):
        """Test the builder protocol."""
        polynomial = (LagrangePolynomialBuilder(square_plus_one)
                      .experimental_data([0.0, 1.0, 2.0])
                      .build())
        assert polynomial(2.0) == 5.0
        assert np.isclose(polynomial(0.5), 1.25)

    def test_build_without_data(self, square_plus_one):
        """Test build() needs experimental data."""
        with pytest.raises(ValueError, match="No experimental data"):
            LagrangePolynomialBuilder(square_plus_one).build()

    def test_non_callable_function(self):
        """Test the source function must be callable."""
        with pytest.raises(TypeError, match="must be callable"):
            LagrangePolynomialBuilder("x**2")

    def test_builder_copies_points(self, square_plus_one):
        """Test later changes to the point list have no effect."""
        points = [0.0, 1.0]
        builder = LagrangePolynomialBuilder(square_plus_one).experimental_data(points)
        points.append(1.0)
        assert builder.build().degree == 1
