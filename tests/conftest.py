"""Shared pytest fixtures for pylagrange tests."""
import pytest
import numpy as np

from pylagrange.core.matrix import Matrix
from pylagrange.core.function import SourceFunction


@pytest.fixture
def square_matrix():
    """2x2 matrix [[1, 2], [3, 4]]."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def rectangular_matrix():
    """3x4 matrix with distinct entries 0..11."""
    return Matrix.from_array(np.arange(12, dtype=float).reshape(3, 4))


@pytest.fixture
def square_plus_one():
    """Source function f(x) = x**2 + 1."""
    return SourceFunction("x**2 + 1")


@pytest.fixture
def quadratic_nodes():
    """Nodes of f(x) = x**2 + 1 at x = 0, 1, 2."""
    return np.array([0.0, 1.0, 2.0]), np.array([1.0, 2.0, 5.0])


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file in a temporary directory and return its path."""
    def _write(content: str, name: str = "task.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def square_task_yaml(write_yaml):
    """Valid task file interpolating x**2 + 1."""
    return write_yaml("""
name: Square plus one
experimental_function: x**2 + 1
experimental_points: [0, 1, 2]
interpolation_points: 0.5, 1.5
""")
