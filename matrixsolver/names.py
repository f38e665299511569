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
"""Static strings used in the matrixsolver package

    Error kinds (attached to log records as ``error_kind``)

        ROW_INDEX_OUT_OF_RANGE = 'row_index_out_of_range'

        DIMENSION_MISMATCH = 'dimension_mismatch'

        INVALID_FRACTION = 'invalid_fraction'

        INVALID_NUMBER = 'invalid_number'

        INVALID_ROW_LENGTH = 'invalid_row_length'

        ERROR_KIND = 'error_kind'

    Row reduction settings

        TOLERANCE = 'tolerance'

        STOP_AT_STUCK_ROW = 'stop_at_stuck_row'

        CALLBACK = 'callback'

    Sentinels

        OUT_OF_RANGE = -1.0
"""

# error kinds
ROW_INDEX_OUT_OF_RANGE = 'row_index_out_of_range'
DIMENSION_MISMATCH = 'dimension_mismatch'
INVALID_FRACTION = 'invalid_fraction'
INVALID_NUMBER = 'invalid_number'
INVALID_ROW_LENGTH = 'invalid_row_length'
ERROR_KIND = 'error_kind'

# row reduction settings
TOLERANCE = 'tolerance'
STOP_AT_STUCK_ROW = 'stop_at_stuck_row'
CALLBACK = 'callback'

# value returned by get_element for reads outside the matrix
OUT_OF_RANGE = -1.0
