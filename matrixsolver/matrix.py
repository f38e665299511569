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
"""Dense single-precision matrix with elementary row operations (Matrix)"""

from typing import Iterable, List, Optional
from scipy import sparse
import numpy as np
import logging
import sys
from matrixsolver.names import *
from matrixsolver.parse_scalar import parse_row


def format_value(value) -> str:
    """Format a cell with 6 significant digits (printf %g)"""
    return f"{float(value):g}"


class Matrix(object):
    """Named matrix of single-precision real numbers
    
    A matrix owns a rows x columns grid of float32 values. The grid is always
    fully initialized (new matrices are zero-filled) and its dimensions never
    change after construction. Matrices behave as values: duplicate, transpose,
    add and multiply always return a matrix with its own storage.
    
    Element access and the three elementary row operations follow a
    no-exception boundary policy. Writes outside the matrix are ignored, reads
    outside the matrix return OUT_OF_RANGE (-1.0), and row operations with an
    invalid row index log an error and leave the matrix untouched. Because the
    index check happens before any cell is written, a row operation either
    applies to the whole row or not at all.
    
    Matrix instances are not safe for concurrent mutation from several threads.
    
    Example:
        A = Matrix('A', 2, 3)
        A.fill(['2 1 5', '1 -1 1'])
        A.swap_rows(0, 1)
    
    Args:
        name (str):
            Identifier of the matrix. Names are not required to be unique.
            
        rows (int):
            Number of rows (>= 0).
            
        columns (int):
            Number of columns (>= 0).
    """

    def __init__(self, name: str = '', rows: int = 0, columns: int = 0):
        if rows < 0:
            raise ValueError(f"negative row count: {rows}")
        if columns < 0:
            raise ValueError(f"negative column count: {columns}")
        self.name = name
        self.rows = rows
        self.columns = columns
        self.cells = np.zeros((rows, columns), dtype=np.float32)

    @classmethod
    def from_array(cls, name: str, data) -> 'Matrix':
        """Creates a matrix from a nested list, a numpy array or a scipy.sparse matrix"""
        if sparse.issparse(data):
            data = data.toarray()
        cells = np.array(data, dtype=np.float32)
        if cells.ndim == 1 and cells.size == 0:
            cells = cells.reshape(0, 0)
        if cells.ndim != 2:
            raise ValueError(f"Matrix data must be two-dimensional, got {cells.ndim} dimension(s).")
        matrix = cls(name, cells.shape[0], cells.shape[1])
        matrix.cells[:, :] = cells
        return matrix

    def get_name(self) -> str:
        return self.name

    def get_row_count(self) -> int:
        return self.rows

    def get_column_count(self) -> int:
        return self.columns

    def is_empty(self) -> bool:
        """True for a matrix without rows or without columns, the failure result of add and multiply"""
        return self.rows == 0 or self.columns == 0

    def _is_valid_row(self, row: int) -> bool:
        return 0 <= row < self.rows

    def _is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    # element access
    def set_element(self, row: int, col: int, value: float) -> bool:
        """Stores value at (row, col); positions outside the matrix are ignored
        
        Returns:
            (bool):
            True if the value was stored.
        """
        if not self._is_valid_position(row, col):
            return False
        self.cells[row, col] = value
        return True

    def get_element(self, row: int, col: int) -> float:
        """Returns the value at (row, col), or OUT_OF_RANGE (-1.0) outside the matrix"""
        if not self._is_valid_position(row, col):
            return OUT_OF_RANGE
        return float(self.cells[row, col])

    def try_get_element(self, row: int, col: int) -> Optional[float]:
        """Returns the value at (row, col), or None outside the matrix"""
        if not self._is_valid_position(row, col):
            return None
        return float(self.cells[row, col])

    # elementary row operations
    def multiply_row(self, multiplier: float, row: int) -> bool:
        """Scales every element of a row by multiplier
        
        Args:
            multiplier (float):
                Scaling factor.
                
            row (int):
                Index of the row (0-based).
                
        Returns:
            (bool):
            True if the row was scaled, False if the row index is invalid.
        """
        if not self._is_valid_row(row):
            logging.error(f"Row index {row + 1} is out of bounds.", extra={ERROR_KIND: ROW_INDEX_OUT_OF_RANGE})
            return False
        self.cells[row, :] *= np.float32(multiplier)
        logging.info(f"Multiplied row {row + 1} by {format_value(multiplier)}.")
        logging.debug(self.to_multiline_string())
        return True

    def add_rows(self, multiplier: float, dest_row: int, src_row: int) -> bool:
        """Adds multiplier times the source row to the destination row
        
        dest[c] += src[c] * multiplier is applied for every column c.
        
        Args:
            multiplier (float):
                Factor applied to the source row.
                
            dest_row (int):
                Index of the row that is modified (0-based).
                
            src_row (int):
                Index of the row that is added (0-based).
                
        Returns:
            (bool):
            True if the rows were combined, False if a row index is invalid.
        """
        if not (self._is_valid_row(dest_row) and self._is_valid_row(src_row)):
            logging.error(f"Row index {dest_row + 1} or {src_row + 1} is out of bounds.",
                          extra={ERROR_KIND: ROW_INDEX_OUT_OF_RANGE})
            return False
        self.cells[dest_row, :] += self.cells[src_row, :] * np.float32(multiplier)
        if multiplier != 1:
            logging.info(f"Multiplied row {src_row + 1} by {format_value(multiplier)} and added it to row {dest_row + 1}.")
        else:
            logging.info(f"Added row {src_row + 1} to row {dest_row + 1}.")
        logging.debug(self.to_multiline_string())
        return True

    def swap_rows(self, row1: int, row2: int) -> bool:
        """Exchanges two rows
        
        Returns:
            (bool):
            True if the rows were swapped, False if a row index is invalid.
        """
        if not (self._is_valid_row(row1) and self._is_valid_row(row2)):
            logging.error(f"Row index {row1 + 1} or {row2 + 1} is out of bounds.", extra={ERROR_KIND: ROW_INDEX_OUT_OF_RANGE})
            return False
        self.cells[[row1, row2], :] = self.cells[[row2, row1], :]
        logging.info(f"Swapped row {row1 + 1} with row {row2 + 1}.")
        logging.debug(self.to_multiline_string())
        return True

    # population from text
    def fill_row(self, row: int, text: str) -> bool:
        """Fills a row from a line of whitespace separated numbers
        
        Each entry may be written as a decimal or as a fraction ('3/4'). The row
        is only written if the line holds exactly one entry per column.
        
        Args:
            row (int):
                Index of the row (0-based).
                
            text (str):
                Line of entries, e.g. '1 -2 3/4'.
                
        Returns:
            (bool):
            True if the row was filled.
        """
        if not self._is_valid_row(row):
            logging.error(f"Row index {row + 1} is out of bounds.", extra={ERROR_KIND: ROW_INDEX_OUT_OF_RANGE})
            return False
        values = parse_row(text)
        if len(values) < self.columns:
            logging.error(f"Not enough elements provided for row {row + 1}.", extra={ERROR_KIND: INVALID_ROW_LENGTH})
            return False
        if len(values) > self.columns:
            logging.error(f"Too many elements provided for row {row + 1}.", extra={ERROR_KIND: INVALID_ROW_LENGTH})
            return False
        self.cells[row, :] = values
        return True

    def fill(self, lines: Iterable[str]) -> bool:
        """Fills the rows in order from an iterable of lines, see fill_row
        
        Returns:
            (bool):
            True if every row of the matrix was filled and no line was left
            over.
        """
        filled = 0
        row_count = 0
        for row, text in enumerate(lines):
            row_count += 1
            if self.fill_row(row, text):
                filled += 1
        return filled == self.rows and row_count == self.rows

    # linear combinators, implemented in matrix_operations
    def transpose(self) -> 'Matrix':
        from matrixsolver.matrix_operations import transpose
        return transpose(self)

    def add(self, other: 'Matrix') -> 'Matrix':
        from matrixsolver.matrix_operations import add
        return add(self, other)

    def multiply(self, other: 'Matrix') -> 'Matrix':
        from matrixsolver.matrix_operations import multiply
        return multiply(self, other)

    def duplicate(self, new_name: str) -> 'Matrix':
        from matrixsolver.matrix_operations import duplicate
        return duplicate(self, new_name)

    def copy(self) -> 'Matrix':
        return self.duplicate(self.name)

    def attempt_solution(self, **kwargs) -> 'Matrix':
        """Reduces this matrix in place to reduced row echelon form, see gauss.attempt_solution"""
        from matrixsolver.gauss import attempt_solution
        return attempt_solution(self, **kwargs)

    def to_array(self) -> np.ndarray:
        """Returns an independent copy of the cells"""
        return self.cells.copy()

    def get_rows(self) -> List[List[float]]:
        return [[float(v) for v in row] for row in self.cells]

    # output
    def to_multiline_string(self) -> str:
        """Renders the matrix as 'Matrix <name>:' followed by one tab separated line per row"""
        lines = [f"Matrix {self.name}:"]
        for row in self.cells:
            lines.append(''.join(format_value(v) + '\t' for v in row))
        return '\n'.join(lines) + '\n'

    def write_to_multiline(self, writer=None) -> None:
        """Writes the multi-line rendering to writer (default: sys.stdout)"""
        if writer is None:
            writer = sys.stdout
        writer.write(self.to_multiline_string())

    def __str__(self) -> str:
        rows = ', '.join('[' + ', '.join(format_value(v) for v in row) + ']' for row in self.cells)
        return f"{self.name}: [{rows}]"

    def __repr__(self) -> str:
        return f"Matrix(name={self.name!r}, rows={self.rows}, columns={self.columns})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows and self.columns == other.columns and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None


def create_matrix(name: str, rows: int, columns: int) -> Matrix:
    """Creates a zero-filled matrix with the given name and dimensions"""
    return Matrix(name, rows, columns)
