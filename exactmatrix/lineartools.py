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
"""Functions for rank, basic columns and echelon-form checks of rational matrices"""

import logging
from typing import List

from .matrix import Matrix
from .names import REDUCTION_FORMS, REF, RREF
from .rational import ONE

__all__ = [
    "identity", "row_reduce", "basic_columns", "rank", "is_row_echelon", "is_reduced_row_echelon"
]

LOG = logging.getLogger(__name__)

# =============================================================================
# Construction
# =============================================================================


def identity(size: int) -> Matrix:
    """Identity matrix of the given size (the empty matrix for size 0)."""
    m = Matrix.zeros(size, size)
    for i in range(size):
        m[i, i] = ONE
    return m


# =============================================================================
# Row reduction
# =============================================================================


def row_reduce(matrix: Matrix, form: str = RREF, inplace: bool = False) -> Matrix:
    """Bring a matrix to row echelon form

    Reduces a copy of the matrix (or the matrix itself if inplace is set) to
    row echelon form (REF) or reduced row echelon form (RREF) by exact
    Gaussian elimination.

    Example:
        reduced = row_reduce(Matrix.from_ints([[1, 2], [3, 4]]), form=RREF)

    Args:
        matrix (Matrix):
            The matrix to be reduced.

        form (str): (Default: 'rref')
            Target form, either 'ref' or 'rref'.

        inplace (bool): (Default: False)
            If True, the given matrix is modified and returned. Otherwise the
            given matrix stays untouched and a reduced copy is returned.

    Returns:
        (Matrix):
        The reduced matrix.
    """
    if form not in REDUCTION_FORMS:
        raise ValueError(f"unknown reduction form '{form}', expected one of {REDUCTION_FORMS}")
    if not inplace:
        matrix = matrix.clone()
    if form == REF:
        matrix.ref()
    else:
        matrix.rref()
    return matrix


def basic_columns(matrix: Matrix) -> List[int]:
    """Find indices of basic (pivot) columns."""
    reduced = row_reduce(matrix, RREF)
    cols = []
    for row in reduced.rows():
        leader_col = row.leader_col()
        if leader_col is None:
            break
        cols.append(leader_col)
    LOG.debug(f"Basic columns of {matrix.height()}x{matrix.width()} matrix: {cols}")
    return cols


def rank(matrix: Matrix) -> int:
    """Exact rank of a rational matrix via Gaussian elimination."""
    return len(basic_columns(matrix))


# =============================================================================
# Echelon form checks
# =============================================================================


def _leader_cols(matrix: Matrix) -> List:
    return [row.leader_col() for row in matrix.rows()]


def is_row_echelon(matrix: Matrix) -> bool:
    """True if leaders move strictly right going down and zero rows are at the bottom."""
    previous = -1
    seen_zero_row = False
    for leader_col in _leader_cols(matrix):
        if leader_col is None:
            seen_zero_row = True
            continue
        if seen_zero_row or leader_col <= previous:
            return False
        previous = leader_col
    return True


def is_reduced_row_echelon(matrix: Matrix) -> bool:
    """True if the matrix is in row echelon form, every leader is 1 and is the only non-zero entry of its column."""
    if not is_row_echelon(matrix):
        return False
    for i, leader_col in enumerate(_leader_cols(matrix)):
        if leader_col is None:
            break
        if matrix[i, leader_col] != ONE:
            return False
        if not all(matrix[j, leader_col] == 0 for j in range(matrix.height()) if j != i):
            return False
    return True
