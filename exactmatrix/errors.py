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
"""Exceptions raised by the exactmatrix package"""

__all__ = [
    "ExactMatrixError", "DimensionMismatchError", "AdditionDimensionError", "MultiplicationDimensionError",
    "MalformedMatrixError"
]


class ExactMatrixError(Exception):
    """Base class for recoverable errors of rational rows and matrices."""


class DimensionMismatchError(ExactMatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class AdditionDimensionError(DimensionMismatchError):
    """Rows of different lengths or matrices of different heights/widths were added."""


class MultiplicationDimensionError(DimensionMismatchError):
    """Left width does not match right height, or only one operand is empty."""


class MalformedMatrixError(ExactMatrixError, ValueError):
    """Matrix data is not rectangular (or not 2-dimensional)."""
