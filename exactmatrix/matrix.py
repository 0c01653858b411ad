#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Matrices of exact rational numbers.

A Matrix is an ordered list of RowVec objects of equal width. Besides element
and row access it offers matrix addition, scalar and matrix multiplication, and
row reduction to (reduced) row echelon form by Gaussian elimination. All
arithmetic is exact, so the echelon forms are canonical and reproducible.
"""

import logging
from fractions import Fraction
from typing import Iterable, Iterator, List, Tuple

import numpy as np
from sympy import Matrix as SympyMatrix

from .errors import AdditionDimensionError, MalformedMatrixError, MultiplicationDimensionError
from .names import MAX_DENOMINATOR
from .rational import Numeric, is_zero, to_fraction, to_sympy_rational
from .row_vec import RowVec

LOG = logging.getLogger(__name__)


class Matrix:
    """
    A matrix (in the linear algebra sense) of rational numbers.

    The matrix owns its rows: rows handed to constructors, append_row and row
    assignment are copied. A matrix without rows is the canonical empty matrix;
    constructing from zero rows or from zero-width rows both give it.

    Example:
        >>> m = Matrix.from_ints([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        >>> m.rref()
        >>> m == Matrix.from_ints([[1, 0, -1], [0, 1, 2], [0, 0, 0]])
        True
    """

    __slots__ = ('_rows',)

    def __init__(self, rows: Iterable[Iterable[Numeric]] = ()):
        self._rows: List[RowVec] = self._canonical([RowVec(r) for r in rows])

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def _canonical(rows: List[RowVec]) -> List[RowVec]:
        """Check that all rows have the same width and map zero-width data to no rows."""
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise MalformedMatrixError(f"rows of different widths: {sorted(widths)}")
        if not rows or not len(rows[0]):
            return []
        return rows

    @classmethod
    def _wrap(cls, rows: List[RowVec]) -> 'Matrix':
        """Take ownership of a list of rows without checking it."""
        m = cls.__new__(cls)
        m._rows = rows
        return m

    @classmethod
    def from_row_vecs(cls, rows: Iterable[RowVec]) -> 'Matrix':
        """Create a matrix from RowVecs (each is copied)."""
        return cls._wrap(cls._canonical([r.clone() for r in rows]))

    @classmethod
    def from_ints(cls, rows: Iterable[Iterable[int]]) -> 'Matrix':
        """Create a matrix from nested lists of integers."""
        return cls._wrap(cls._canonical([RowVec.from_ints(r) for r in rows]))

    @classmethod
    def from_numpy(cls, array: np.ndarray, max_denominator: int = MAX_DENOMINATOR) -> 'Matrix':
        """
        Create a matrix from a 2-dimensional numpy array.

        Integer entries convert exactly; float entries are approximated by
        fractions with denominators up to max_denominator.
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise MalformedMatrixError(f"expected a 2-dimensional array, got {arr.ndim} dimension(s)")
        rows = [RowVec._wrap([to_fraction(v, max_denominator) for v in r]) for r in arr.tolist()]
        return cls._wrap(cls._canonical(rows))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> 'Matrix':
        """Zero matrix of the given shape, or the empty matrix if either dimension is 0."""
        if rows < 0:
            raise ValueError(f"negative row count: {rows}")
        if cols < 0:
            raise ValueError(f"negative column count: {cols}")
        if rows == 0 or cols == 0:
            return cls.empty()
        return cls._wrap([RowVec.zeros(cols) for _ in range(rows)])

    @classmethod
    def empty(cls) -> 'Matrix':
        """The canonical empty matrix (no rows)."""
        return cls._wrap([])

    def clone(self) -> 'Matrix':
        """Create a deep copy of this matrix."""
        return Matrix._wrap([r.clone() for r in self._rows])

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    def height(self) -> int:
        return len(self._rows)

    def width(self) -> int:
        if not self._rows:
            return 0
        return len(self._rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height(), self.width()

    def is_empty(self) -> bool:
        return not self._rows

    def is_zeros(self) -> bool:
        """True if every row is all zero. The empty matrix counts as all zero."""
        return all(r.is_zeros() for r in self._rows)

    # -------------------------------------------------------------------------
    # Row and column access
    # -------------------------------------------------------------------------

    def append_row(self, row: RowVec) -> None:
        """Append a copy of `row` to the bottom of the matrix."""
        if self._rows and len(row) != self.width():
            raise MalformedMatrixError(f"cannot append row of width {len(row)} to matrix of width {self.width()}")
        self._rows.append(row.clone())

    def remove_row(self, index: int) -> None:
        """Remove row `index`; the rows below move up."""
        del self._rows[index]

    def get_column(self, index: int) -> 'Matrix':
        """New single-column matrix holding a copy of column `index`."""
        return Matrix._wrap([RowVec._wrap([r[index]]) for r in self._rows])

    def rows(self) -> Iterator[RowVec]:
        """Iterate over the rows of the matrix."""
        return iter(self._rows)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add_assign(self, other: 'Matrix') -> None:
        """
        Add `other` element-wise into this matrix.

        Raises:
            AdditionDimensionError: If heights or widths differ. The matrix is
                left unchanged in that case.
        """
        if self.height() != other.height():
            raise AdditionDimensionError(
                f"addition of matrices of different heights: {self.height()} vs {other.height()}")
        if self.is_empty():
            return
        if self.width() != other.width():
            raise AdditionDimensionError(
                f"addition of matrices of different widths: {self.width()} vs {other.width()}")
        for row, other_row in zip(self._rows, other._rows):
            row.add_assign(other_row)

    def add(self, other: 'Matrix') -> 'Matrix':
        """Return the element-wise sum of this matrix and `other`."""
        out = self.clone()
        out.add_assign(other)
        return out

    def scalar_multiply_assign(self, factor: Numeric) -> None:
        """Multiply every entry by `factor`."""
        factor = to_fraction(factor)
        for row in self._rows:
            row.scalar_multiply_assign(factor)

    def scalar_multiply(self, factor: Numeric) -> 'Matrix':
        """Return a copy of this matrix with every entry multiplied by `factor`."""
        out = self.clone()
        out.scalar_multiply_assign(factor)
        return out

    def matrix_multiply(self, other: 'Matrix') -> 'Matrix':
        """
        Matrix product self * other.

        Returns:
            Matrix of shape (self.height(), other.width())

        Raises:
            MultiplicationDimensionError: If self is empty and other is not, or
                if self.width() != other.height()
        """
        if self.is_empty() and other.is_empty():
            return Matrix.empty()
        if self.is_empty():
            raise MultiplicationDimensionError("multiplication of empty matrix with non-empty matrix")
        if self.width() != other.height():
            raise MultiplicationDimensionError(
                f"multiplication of incompatible matrices: lhs width {self.width()} vs rhs height {other.height()}")

        out = Matrix.zeros(self.height(), other.width())
        for i in range(other.width()):
            for j in range(self.height()):
                lhs = self._rows[j]
                acc = out._rows[j][i]
                for k in range(self.width()):
                    acc += lhs[k] * other._rows[k][i]
                out._rows[j][i] = acc
        return out

    # -------------------------------------------------------------------------
    # Row reduction
    # -------------------------------------------------------------------------

    def leader_sort(self) -> None:
        """
        Sort the rows so that the ones with the leftmost leaders (first non-zero
        entries) come first and all-zero rows end up at the bottom.

        Rows are compared by their zero patterns: at the first column where only
        one of two rows is non-zero, that row goes first. The sort is stable, so
        rows with identical patterns keep their relative order.
        """
        self._rows.sort(key=lambda r: [is_zero(v) for v in r])

    def eliminate(self, selected_row: int, other_row: int, leader_col: int) -> None:
        """
        Eliminate the entry of `other_row` in column `leader_col` by adding a
        multiple of `selected_row` to it.

        `leader_col` must hold a non-zero entry in `selected_row`; a zero pivot
        raises ZeroDivisionError.
        """
        selected = self._rows[selected_row]
        other = self._rows[other_row]
        if is_zero(other[leader_col]):
            return
        pivot = selected[leader_col]
        if is_zero(pivot):
            raise ZeroDivisionError(f"zero pivot in row {selected_row}, column {leader_col}")
        factor = -other[leader_col] / pivot
        other.add_assign(selected.scalar_multiply(factor))

    def eliminate_below_leader(self, row: int) -> None:
        """Clear the column of `row`'s leader in all rows below `row`."""
        leader_col = self._rows[row].leader_col()
        if leader_col is None:
            return
        for i in range(row + 1, len(self._rows)):
            self.eliminate(row, i, leader_col)

    def eliminate_above_leader(self, row: int) -> None:
        """Clear the column of `row`'s leader in all rows above `row`."""
        leader_col = self._rows[row].leader_col()
        if leader_col is None:
            return
        for i in range(row):
            self.eliminate(row, i, leader_col)

    def normalize(self) -> None:
        """Divide every row by its leader so that each leader is 1."""
        for row in self._rows:
            row.normalize()

    def ref(self) -> None:
        """Put the matrix into (unreduced) row echelon form, in place."""
        LOG.debug(f"Row echelon form of {self.height()}x{self.width()} matrix.")
        self.leader_sort()
        for row in range(len(self._rows)):
            self.eliminate_below_leader(row)
        # elimination can move leaders to the right
        self.leader_sort()

    def rref(self) -> None:
        """Put the matrix into reduced row echelon form, in place."""
        self.ref()
        for row in range(len(self._rows)):
            self.eliminate_above_leader(row)
        self.leader_sort()
        self.normalize()
        if LOG.isEnabledFor(logging.DEBUG):
            LOG.debug(f"Reduced row echelon form has {sum(not r.is_zeros() for r in self._rows)} non-zero rows.")

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_lists(self) -> List[List[Fraction]]:
        """Entries as nested lists of Fractions."""
        return [r.to_list() for r in self._rows]

    def to_numpy(self) -> np.ndarray:
        """Object array of Fractions with shape (height, width)."""
        result = np.empty(self.shape, dtype=object)
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                result[i, j] = value
        return result

    def to_sympy(self) -> SympyMatrix:
        """sympy Matrix of Rationals with the same entries."""
        return SympyMatrix(self.height(), self.width(), [to_sympy_rational(v) for r in self._rows for v in r])

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[RowVec]:
        return iter(self._rows)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self._rows[row][col]
        return self._rows[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            row, col = key
            self._rows[row][col] = value
            return
        new_row = value.clone() if isinstance(value, RowVec) else RowVec(value)
        if len(new_row) != self.width():
            raise MalformedMatrixError(f"cannot set row of width {len(new_row)} in matrix of width {self.width()}")
        self._rows[key] = new_row

    def __eq__(self, other) -> bool:
        if isinstance(other, Matrix):
            return self._rows == other._rows
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add_assign(other)
        return self

    def __mul__(self, factor):
        try:
            factor = to_fraction(factor)
        except TypeError:
            return NotImplemented
        return self.scalar_multiply(factor)

    __rmul__ = __mul__

    def __imul__(self, factor):
        try:
            factor = to_fraction(factor)
        except TypeError:
            return NotImplemented
        self.scalar_multiply_assign(factor)
        return self

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matrix_multiply(other)

    def __str__(self) -> str:
        return "[ " + "\n  ".join(f"{r} " for r in self._rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({[[str(v) for v in r] for r in self._rows]!r})"
