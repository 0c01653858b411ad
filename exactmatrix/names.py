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
"""Static strings and defaults used in the exactmatrix package

    Row reduction forms

        REF = 'ref'

        RREF = 'rref'

    Conversion

        MAX_DENOMINATOR = 1000000

"""

# row reduction forms
REF = 'ref'
RREF = 'rref'
REDUCTION_FORMS = (REF, RREF)

# largest denominator used when approximating float entries by fractions
MAX_DENOMINATOR = 1000000
