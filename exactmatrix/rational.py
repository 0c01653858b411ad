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
Rational number helpers for exact matrix arithmetic.

All entries of rows and matrices are stored as fractions.Fraction. This module
converts the numeric types callers hand in (Python ints, numpy scalars, sympy
Rationals, strings and floats) into Fractions and back.
"""

import logging
import math
import operator
from fractions import Fraction
from typing import Union

import numpy as np
from sympy import Rational

from .names import MAX_DENOMINATOR

LOG = logging.getLogger(__name__)

# Type alias for values that can be converted to Fraction
Numeric = Union[int, float, str, Fraction, Rational, np.integer, np.floating]

ZERO = Fraction(0)
ONE = Fraction(1)


def to_fraction(value: Numeric, max_denominator: int = MAX_DENOMINATOR) -> Fraction:
    """
    Convert a numeric value to a Fraction.

    Integers, sympy Rationals and strings such as "3/4" convert exactly. Floats
    are approximated by the closest fraction whose denominator does not exceed
    max_denominator.

    Args:
        value: An int, float, str, Fraction, sympy.Rational or numpy scalar
        max_denominator: Bound on the denominator used for float values

    Returns:
        Fraction representation of the value

    Raises:
        TypeError: If the value has no rational interpretation
        ValueError: If a float is not finite or a string cannot be parsed
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")
    if isinstance(value, (int, np.integer)):
        return Fraction(int(value))
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, str):
        return Fraction(value.strip())
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert non-finite value {value} to Fraction")
        frac = Fraction(float(value)).limit_denominator(max_denominator)
        if frac == ZERO and value != 0:
            LOG.warning(f"Non-zero float {value!r} rounded to 0 with max_denominator={max_denominator}.")
        elif float(frac) != float(value):
            LOG.debug(f"Approximated float {value!r} by {frac}.")
        return frac
    raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")


def int_to_fraction(value) -> Fraction:
    """Convert an integer (Python or numpy) to a Fraction with denominator 1."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    try:
        return Fraction(operator.index(value))
    except TypeError:
        raise TypeError(f"Expected an integer, got {type(value).__name__}") from None


def to_sympy_rational(value: Numeric) -> Rational:
    """Convert a Fraction (or any convertible value) to a sympy Rational."""
    if isinstance(value, Rational):
        return value
    frac = to_fraction(value)
    return Rational(frac.numerator, frac.denominator)


def is_zero(value: Fraction) -> bool:
    """True if a stored entry is exactly zero."""
    return not value.numerator
