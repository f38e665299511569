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
"""Functions that combine matrices into new matrices (transpose, add, multiply, duplicate)

None of these functions modifies its inputs and every result has its own
storage. On a dimension mismatch, add and multiply log an error and return an
empty matrix (see Matrix.is_empty) instead of raising.
"""

import numpy as np
import logging
from matrixsolver.names import *
from matrixsolver.matrix import Matrix


def transpose(matrix: Matrix) -> Matrix:
    """Returns the transpose of matrix under the same name"""
    result = Matrix(matrix.name, matrix.columns, matrix.rows)
    for r in range(matrix.rows):
        for c in range(matrix.columns):
            result.cells[c, r] = matrix.cells[r, c]
    return result


def add(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """Element-wise sum of two matrices of equal dimensions
    
    Args:
        matrix_a (Matrix):
            First summand. The result carries its name.
            
        matrix_b (Matrix):
            Second summand.
            
    Returns:
        (Matrix):
        The sum, or an empty matrix if the dimensions differ.
    """
    if matrix_a.rows != matrix_b.rows or matrix_a.columns != matrix_b.columns:
        logging.error("Matrices must have the same dimensions to be added.", extra={ERROR_KIND: DIMENSION_MISMATCH})
        return Matrix()
    result = Matrix(matrix_a.name, matrix_a.rows, matrix_a.columns)
    result.cells[:, :] = matrix_a.cells + matrix_b.cells
    return result


def multiply(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """Matrix product matrix_a * matrix_b
    
    Each cell of the (matrix_a.rows x matrix_b.columns) result is the dot
    product of a row of matrix_a and a column of matrix_b, accumulated in single
    precision.
    
    Args:
        matrix_a (Matrix):
            Left factor. The result carries its name.
            
        matrix_b (Matrix):
            Right factor. Must have as many rows as matrix_a has columns.
            
    Returns:
        (Matrix):
        The product, or an empty matrix if the inner dimensions differ.
    """
    if matrix_a.columns != matrix_b.rows:
        logging.error("Number of columns in the first matrix must be equal to the number of rows in the second matrix.",
                      extra={ERROR_KIND: DIMENSION_MISMATCH})
        return Matrix()
    result = Matrix(matrix_a.name, matrix_a.rows, matrix_b.columns)
    for i in range(matrix_a.rows):
        for j in range(matrix_b.columns):
            total = np.float32(0.0)
            for k in range(matrix_a.columns):
                total += matrix_a.cells[i, k] * matrix_b.cells[k, j]
            result.cells[i, j] = total
    return result


def duplicate(matrix: Matrix, new_name: str) -> Matrix:
    """Returns an independent copy of matrix named new_name"""
    result = Matrix(new_name, matrix.rows, matrix.columns)
    result.cells[:, :] = matrix.cells
    return result
