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
"""Row reduction of augmented matrices to reduced row echelon form (RowReducer)"""

from typing import Callable, Optional
import numpy as np
import logging
from matrixsolver.names import *
from matrixsolver.matrix import Matrix, format_value


class RowReducer(object):
    """Gaussian elimination to reduced row echelon form
    
    The last column of a matrix is treated as the augmented (right hand side)
    column and never hosts a pivot. Reduction runs in two phases:
    
    1. Rows whose coefficient part is entirely zero are moved below all other
       rows. The order of the remaining rows is kept.
    2. Columns are processed left to right. The pivot for the current row is
       the first row at or below it with a non-zero entry in the current
       column; that row is swapped up if needed. The pivot row is scaled so
       that the pivot becomes 1 and the column is cleared in every other row,
       above and below. Columns without a pivot are skipped.

    Pivots are taken by position only, never by magnitude. An entry counts as
    zero if its magnitude is at most tolerance; the default of 0.0 only treats
    exact zeros as zero.

    With stop_at_stuck_row the pivot is searched along the current row only
    (no row exchanges), and the whole reduction stops at the first row without
    a pivot left of the augmented column, leaving the rows below unreduced.

    Args:
        tolerance (float): (Default: 0.0)
            Magnitude at or below which an entry is treated as zero.

        stop_at_stuck_row (bool): (Default: False)
            Use the row-wise pivot search that stops at the first row without
            a pivot instead of the column-wise search with row exchanges.
            
        callback (callable): (Default: None)
            Called as callback(description, matrix) after each elementary row
            operation applied during the reduction.
    """

    def __init__(self, tolerance: float = 0.0, stop_at_stuck_row: bool = False, callback: Optional[Callable] = None):
        if tolerance < 0:
            raise ValueError(f"Tolerance must not be negative, got {tolerance}.")
        self.tolerance = tolerance
        self.stop_at_stuck_row = stop_at_stuck_row
        self.callback = callback

    def _is_zero(self, value) -> bool:
        return abs(value) <= self.tolerance

    def _is_zero_row(self, matrix: Matrix, row: int) -> bool:
        """Check if the coefficient part (all but the last column) of a row is zero"""
        return bool(np.all(np.abs(matrix.cells[row, :matrix.columns - 1]) <= self.tolerance))

    def _trace(self, description: str, matrix: Matrix):
        if self.callback is not None:
            self.callback(description, matrix)

    def sink_zero_rows(self, matrix: Matrix) -> int:
        """Moves rows with an all-zero coefficient part to the bottom
        
        Args:
            matrix (Matrix):
                Matrix to rearrange (modified in place).
                
        Returns:
            (int):
            The number of rows with a non-zero coefficient part.
        """
        nonzero_row = 0
        for r in range(matrix.rows):
            if self._is_zero_row(matrix, r):
                continue
            if r != nonzero_row:
                matrix.swap_rows(r, nonzero_row)
                self._trace(f"Swapped row {r + 1} with row {nonzero_row + 1}.", matrix)
            nonzero_row += 1
        return nonzero_row

    def _find_pivot_row(self, matrix: Matrix, start_row: int, col: int) -> int:
        """First row at or below start_row with a non-zero entry in col, or -1"""
        for row in range(start_row, matrix.rows):
            if not self._is_zero(matrix.cells[row, col]):
                return row
        return -1

    def _eliminate_column(self, matrix: Matrix, pivot_row: int, col: int):
        """Scales the pivot row to a leading 1 and clears col in every other row"""
        multiplier = 1.0 / float(matrix.cells[pivot_row, col])
        matrix.multiply_row(multiplier, pivot_row)
        matrix.cells[pivot_row, col] = 1.0
        self._trace(f"Multiplied row {pivot_row + 1} by {format_value(multiplier)}.", matrix)

        for i in range(matrix.rows):
            if i == pivot_row:
                continue
            factor = -float(matrix.cells[i, col])
            matrix.add_rows(factor, i, pivot_row)
            if factor != 1:
                self._trace(f"Multiplied row {pivot_row + 1} by {format_value(factor)} and added it to row {i + 1}.", matrix)
            else:
                self._trace(f"Added row {pivot_row + 1} to row {i + 1}.", matrix)

    def reduce(self, matrix: Matrix) -> Matrix:
        """Reduces matrix in place to reduced row echelon form
        
        Args:
            matrix (Matrix):
                Augmented matrix [A | b] (modified in place).
                
        Returns:
            (Matrix):
            The same matrix object, for chaining.
        """
        last = matrix.columns - 1
        if matrix.rows == 0 or last < 1:
            return matrix
        logging.info(f"Reducing matrix {matrix.name} ({matrix.rows}x{matrix.columns}) to reduced row echelon form.")
        self.sink_zero_rows(matrix)
        if self.stop_at_stuck_row:
            self._reduce_stop_at_stuck_row(matrix, last)
            return matrix

        current_row = 0
        lead = 0
        while current_row < matrix.rows and lead < last:
            pivot_row = self._find_pivot_row(matrix, current_row, lead)
            if pivot_row == -1:
                lead += 1
                continue
            if pivot_row != current_row:
                matrix.swap_rows(pivot_row, current_row)
                self._trace(f"Swapped row {pivot_row + 1} with row {current_row + 1}.", matrix)
            self._eliminate_column(matrix, current_row, lead)
            current_row += 1
            lead += 1
        return matrix

    def _reduce_stop_at_stuck_row(self, matrix: Matrix, last: int):
        """Pivot search along each row only, stopping at the first row without a pivot"""
        lead = 0
        for r in range(matrix.rows):
            if lead >= last:
                break
            col = lead
            while col < last and self._is_zero(matrix.cells[r, col]):
                col += 1
            if col >= last:
                logging.info(f"  No pivot left in row {r + 1}, stopping.")
                break
            lead = col
            self._eliminate_column(matrix, r, lead)
            lead += 1


def attempt_solution(matrix: Matrix, **kwargs) -> Matrix:
    """Reduces an augmented matrix in place to reduced row echelon form

    For an invertible n x n system [A | b], the first n columns become the
    identity matrix and the last column holds the solution vector.

    Example:
        attempt_solution(A, tolerance=1e-6)

    Args:
        matrix (Matrix):
            Augmented matrix [A | b] (modified in place).

        tolerance (float): (Default: 0.0)
            Magnitude at or below which an entry is treated as zero.

        stop_at_stuck_row (bool): (Default: False)
            Search pivots along the current row only and stop the whole
            reduction at the first row without a pivot.

        callback (callable): (Default: None)
            Called as callback(description, matrix) after every row operation.

    Returns:
        (Matrix):
        The reduced matrix (the same object that was passed in).
    """
    allowed_keys = {TOLERANCE, STOP_AT_STUCK_ROW, CALLBACK}
    for key in kwargs:
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")
    reducer = RowReducer(tolerance=float(kwargs.get(TOLERANCE, 0.0)),
                         stop_at_stuck_row=bool(kwargs.get(STOP_AT_STUCK_ROW, False)),
                         callback=kwargs.get(CALLBACK))
    return reducer.reduce(matrix)


def extract_solution(matrix: Matrix, tolerance: float = 0.0) -> Optional[np.ndarray]:
    """Reads the solution vector from a reduced augmented matrix
    
    Args:
        matrix (Matrix):
            An augmented matrix [A | b] after attempt_solution.
            
        tolerance (float): (Default: 0.0)
            Allowed deviation from the identity and from zero rows.
            
    Returns:
        (numpy.ndarray or None):
        The last column of the first n rows if the coefficient part is the n x n
        identity followed by zero rows, None otherwise (singular or
        inconsistent system).
    """
    n = matrix.columns - 1
    if n < 1 or matrix.rows < n:
        return None
    coeff = matrix.cells[:n, :n]
    if not np.all(np.abs(coeff - np.eye(n, dtype=np.float32)) <= tolerance):
        return None
    if not np.all(np.abs(matrix.cells[n:, :]) <= tolerance):
        return None
    return matrix.cells[:n, n].copy()
