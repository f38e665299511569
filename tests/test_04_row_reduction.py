"""Tests for row reduction to reduced row echelon form."""
import logging
import pytest
import numpy as np
import matrixsolver as ms


@pytest.mark.timeout(5)
def test_two_by_two_system(system_2x2, stop_at_stuck_row):
    ms.attempt_solution(system_2x2, stop_at_stuck_row=stop_at_stuck_row)
    assert np.allclose(system_2x2.cells, [[1, 0, 2], [0, 1, 1]], atol=1e-6)
    assert system_2x2.get_element(0, 0) == 1.0
    assert system_2x2.get_element(1, 1) == 1.0


@pytest.mark.timeout(5)
def test_three_by_three_system(system_3x3, stop_at_stuck_row):
    R = system_3x3.attempt_solution(stop_at_stuck_row=stop_at_stuck_row)
    assert R is system_3x3
    assert np.array_equal(R.cells[:, :3], np.eye(3, dtype=np.float32))
    x = ms.extract_solution(R)
    assert x == pytest.approx([5.0, 3.0, -2.0], abs=1e-5)


def test_zero_rows_are_sunk():
    A = ms.Matrix.from_array('A', [[0, 0, 0], [1, 1, 2], [0, 0, 7], [2, 0, 2]])
    assert ms.RowReducer().sink_zero_rows(A) == 2
    assert A.get_rows()[:2] == [[1.0, 1.0, 2.0], [2.0, 0.0, 2.0]]
    assert sorted(A.get_rows()[2:]) == [[0.0, 0.0, 0.0], [0.0, 0.0, 7.0]]


def test_zero_row_moves_to_bottom_before_elimination():
    A = ms.Matrix.from_array('A', [[0, 0, 0], [1, 1, 3], [1, -1, 1]])
    ms.attempt_solution(A)
    assert np.allclose(A.cells, [[1, 0, 2], [0, 1, 1], [0, 0, 0]], atol=1e-6)


def is_reduced_row_echelon(cells) -> bool:
    """Leading 1s move strictly right, pivot columns are cleared, zero rows come last."""
    coeff = np.asarray(cells)[:, :-1]
    last_lead = -1
    seen_zero_row = False
    for row in coeff:
        nonzero = np.flatnonzero(row)
        if len(nonzero) == 0:
            seen_zero_row = True
            continue
        lead = nonzero[0]
        if seen_zero_row or lead <= last_lead or row[lead] != 1:
            return False
        if np.count_nonzero(coeff[:, lead]) != 1:
            return False
        last_lead = lead
    return True


def test_dependent_row_moves_below_pivot_rows():
    """A row that becomes zero does not consume the pivot column and ends up last."""
    A = ms.Matrix.from_array('A', [[1, 1, 1, 3], [2, 2, 2, 6], [0, 1, 2, 3]])
    ms.attempt_solution(A)
    assert A.get_rows() == [[1.0, 0.0, -1.0, 0.0], [0.0, 1.0, 2.0, 3.0], [0.0, 0.0, 0.0, 0.0]]
    assert is_reduced_row_echelon(A.cells)


def test_zero_leading_entry():
    A = ms.Matrix.from_array('A', [[0, 1, 1], [1, 0, 2]])
    ms.attempt_solution(A)
    assert A.get_rows() == [[1.0, 0.0, 2.0], [0.0, 1.0, 1.0]]
    assert ms.extract_solution(A) == pytest.approx([2.0, 1.0])


def test_zero_diagonal_three_by_three():
    A = ms.Matrix.from_array('A', [[0, 2, 1, 5], [1, 0, 0, 1], [0, 0, 3, 3]])
    ms.attempt_solution(A)
    assert np.array_equal(A.cells[:, :3], np.eye(3, dtype=np.float32))
    assert ms.extract_solution(A) == pytest.approx([1.0, 2.0, 1.0], abs=1e-6)


def test_zero_leading_entry_stop_at_stuck_row():
    """The row-wise search never exchanges rows, so this system stays unsolved."""
    A = ms.Matrix.from_array('A', [[0, 1, 1], [1, 0, 2]])
    ms.attempt_solution(A, stop_at_stuck_row=True)
    assert A.get_rows() == [[0.0, 1.0, 1.0], [1.0, 0.0, 2.0]]
    assert ms.extract_solution(A) is None


def test_pivot_row_swap_is_traced():
    steps = []
    A = ms.Matrix.from_array('A', [[0, 1, 1], [1, 0, 2]])
    ms.attempt_solution(A, callback=lambda description, matrix: steps.append(description))
    assert steps[0] == "Swapped row 2 with row 1."
    assert steps[1] == "Multiplied row 1 by 1."


@pytest.mark.parametrize("data", [
    [[0, 1, 1], [1, 0, 2]],
    [[1, 2, 1, 0], [2, 4, 0, 2], [0, 0, 1, 1]],
    [[0, 0, 2, 4], [0, 3, 0, 6], [0, 1, 1, 1], [5, 0, 0, 0]],
    [[1, 1, 1, 3], [2, 2, 2, 6], [0, 1, 2, 3]],
    [[0, 0, 0], [1, 1, 3], [1, -1, 1]],
])
def test_result_is_reduced_row_echelon(data):
    A = ms.Matrix.from_array('A', data)
    ms.attempt_solution(A)
    assert is_reduced_row_echelon(A.cells)


def test_dependent_row_stop_at_stuck_row():
    """With stop_at_stuck_row the rows below the stuck row stay unreduced."""
    A = ms.Matrix.from_array('A', [[1, 1, 1, 3], [2, 2, 2, 6], [0, 1, 2, 3]])
    ms.attempt_solution(A, **{ms.STOP_AT_STUCK_ROW: True})
    assert A.get_rows() == [[1.0, 1.0, 1.0, 3.0], [0.0, 0.0, 0.0, 0.0], [0.0, 1.0, 2.0, 3.0]]


def test_singular_system_has_no_solution_vector():
    A = ms.Matrix.from_array('A', [[1, 1, 2], [2, 2, 4]])
    ms.attempt_solution(A)
    assert A.get_rows() == [[1.0, 1.0, 2.0], [0.0, 0.0, 0.0]]
    assert ms.extract_solution(A) is None


def test_inconsistent_system_has_no_solution_vector():
    A = ms.Matrix.from_array('A', [[1, 0, 1], [0, 1, 2], [0, 0, 1]])
    ms.attempt_solution(A)
    assert ms.extract_solution(A) is None


def test_tolerance():
    data = [[1e-8, 0, 5]]
    A = ms.Matrix.from_array('A', data)
    ms.attempt_solution(A, tolerance=1e-6)
    assert np.array_equal(A.cells, np.array(data, dtype=np.float32))
    B = ms.Matrix.from_array('B', data)
    ms.attempt_solution(B)
    assert B.get_element(0, 0) == 1.0


def test_degenerate_shapes_are_unchanged():
    column = ms.Matrix.from_array('C', [[2], [3]])
    ms.attempt_solution(column)
    assert column.get_rows() == [[2.0], [3.0]]
    empty = ms.Matrix()
    ms.attempt_solution(empty)
    assert empty.is_empty()


def test_callback_traces_row_operations(system_2x2):
    steps = []
    ms.attempt_solution(system_2x2, callback=lambda description, matrix: steps.append((description, matrix.to_array())))
    assert [s[0] for s in steps] == [
        "Multiplied row 1 by 0.5.",
        "Multiplied row 1 by -1 and added it to row 2.",
        "Multiplied row 2 by -0.666667.",
        "Multiplied row 2 by -0.5 and added it to row 1.",
    ]
    assert np.allclose(steps[0][1], [[1, 0.5, 2.5], [1, -1, 1]])
    assert np.allclose(steps[-1][1], system_2x2.cells)


def test_row_operations_are_logged(system_2x2, caplog):
    caplog.set_level(logging.INFO)
    ms.attempt_solution(system_2x2)
    assert "Multiplied row 1 by 0.5." in caplog.text
    assert "Multiplied row 1 by -1 and added it to row 2." in caplog.text


def test_unsupported_key():
    with pytest.raises(ValueError):
        ms.attempt_solution(ms.Matrix('A', 1, 2), pivoting='full')


def test_negative_tolerance():
    with pytest.raises(ValueError):
        ms.RowReducer(tolerance=-1.0)
