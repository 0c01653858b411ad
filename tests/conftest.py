import pytest
from fractions import Fraction
from exactmatrix import Matrix
from exactmatrix.names import REF, RREF

# Integer and rational matrices of assorted shapes and ranks
sample_data = [
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[0, 2, 4], [1, 1, 1]],
    [[2, 1], [1, 1]],
    [[0, 0, 0], [0, 0, 0]],
    [[0, 0, 1, 10, 0], [5, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, -1, 0, 0, 0], [0, 1, 0, 0, 0]],
    [[3, 4], [7, 2], [1, 5]],
    [[1, 2, 3, 4, 5], [6, 7, 8, 9, 10], [11, 12, 13, 14, 15], [16, 17, 18, 19, 20], [21, 22, 23, 24, 25]],
    [[Fraction(1, 2), Fraction(-3, 4), 2], [Fraction(5, 3), 0, Fraction(-1, 6)], [1, 1, 1], [0, Fraction(7, 9), 3]],
    [[0, 3, -6, 6, 4, -5], [3, -7, 8, -5, 8, 9], [3, -9, 12, -9, 6, 15]],
    [[5]],
]


@pytest.fixture(params=sample_data, scope="session")
def sample_rows(request: pytest.FixtureRequest) -> list:
    """Provide session-level fixture for raw matrix data."""
    return request.param


@pytest.fixture
def sample_matrix(sample_rows) -> Matrix:
    """Provide a fresh Matrix built from the raw sample data."""
    return Matrix(sample_rows)


@pytest.fixture(params=[REF, RREF], scope="session")
def reduction_form(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for row reduction forms."""
    return request.param


@pytest.fixture
def m123() -> Matrix:
    """The 3x3 matrix holding 1..9 row by row."""
    return Matrix.from_ints([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
