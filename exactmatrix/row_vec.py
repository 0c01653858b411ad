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
Row vectors of exact rational numbers.

A RowVec is a fixed-length sequence of fractions.Fraction values offering the
row-local operations needed by Gaussian elimination: addition, scalar
multiplication, leader lookup and normalization.
"""

from fractions import Fraction
from typing import Iterable, Iterator, List, Optional

from .errors import AdditionDimensionError
from .rational import Numeric, ONE, ZERO, int_to_fraction, is_zero, to_fraction


class RowVec:
    """A row vector (in the linear algebra sense) of rational numbers."""

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[Numeric] = ()):
        self._values: List[Fraction] = [to_fraction(v) for v in values]

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _wrap(cls, values: List[Fraction]) -> 'RowVec':
        """Take ownership of a list that already holds Fractions."""
        row = cls.__new__(cls)
        row._values = values
        return row

    @classmethod
    def zeros(cls, length: int) -> 'RowVec':
        """Row of `length` zeros."""
        if length < 0:
            raise ValueError(f"negative row length: {length}")
        return cls._wrap([ZERO] * length)

    @classmethod
    def from_ints(cls, values: Iterable[int]) -> 'RowVec':
        """Row whose entries are the given integers with denominator 1."""
        return cls._wrap([int_to_fraction(v) for v in values])

    @classmethod
    def empty(cls) -> 'RowVec':
        """Zero-length row."""
        return cls._wrap([])

    def clone(self) -> 'RowVec':
        """Create a copy of this row."""
        return RowVec._wrap(list(self._values))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add_assign(self, other: 'RowVec') -> None:
        """
        Add `other` element-wise into this row.

        Raises:
            AdditionDimensionError: If the rows have different lengths. The row
                is left unchanged in that case.
        """
        if len(self._values) != len(other._values):
            raise AdditionDimensionError(
                f"addition of RowVecs of different sizes: {len(self._values)} vs {len(other._values)}")
        self._values = [a + b for a, b in zip(self._values, other._values)]

    def add(self, other: 'RowVec') -> 'RowVec':
        """Return the element-wise sum of this row and `other`."""
        out = self.clone()
        out.add_assign(other)
        return out

    def scalar_multiply_assign(self, factor: Numeric) -> None:
        """Multiply every entry by `factor`."""
        factor = to_fraction(factor)
        self._values = [v * factor for v in self._values]

    def scalar_multiply(self, factor: Numeric) -> 'RowVec':
        """Return a copy of this row with every entry multiplied by `factor`."""
        out = self.clone()
        out.scalar_multiply_assign(factor)
        return out

    def normalize(self) -> None:
        """
        Divide the row by its leader (the first non-zero entry) so that the
        leader becomes 1. Rows without a leader are left alone.
        """
        leader_col = self.leader_col()
        if leader_col is None:
            return
        leader = self._values[leader_col]
        if leader != ONE:
            self.scalar_multiply_assign(1 / leader)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def leader_col(self) -> Optional[int]:
        """
        Column of the first non-zero entry, or None if the row is empty or
        all zero.
        """
        for col, value in enumerate(self._values):
            if not is_zero(value):
                return col
        return None

    def is_zeros(self) -> bool:
        """True if every entry is zero. An empty row counts as all zero."""
        return all(is_zero(value) for value in self._values)

    def to_list(self) -> List[Fraction]:
        """Entries as a new list of Fractions."""
        return list(self._values)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Fraction]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Fraction:
        return self._values[index]

    def __setitem__(self, index: int, value: Numeric) -> None:
        self._values[index] = to_fraction(value)

    def __eq__(self, other) -> bool:
        if isinstance(other, RowVec):
            return self._values == other._values
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, RowVec):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other):
        if not isinstance(other, RowVec):
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

    def __str__(self) -> str:
        return "[ " + "".join(f"{v} " for v in self._values) + "]"

    def __repr__(self) -> str:
        return f"RowVec({[str(v) for v in self._values]!r})"
