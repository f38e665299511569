"""Tests for parsing numbers and fractions from user input."""
import pytest
import numpy as np
import matrixsolver as ms


def test_parse_fraction():
    assert ms.parse_fraction('3/4') == 0.75
    assert ms.parse_fraction('-1/2') == -0.5
    assert ms.parse_fraction('1.5/0.5') == 3.0


def test_parse_plain_number():
    assert ms.parse_fraction('5') == 5.0
    assert ms.parse_fraction(' -1.25 ') == -1.25
    assert ms.parse_fraction('2.5e1') == 25.0
    assert ms.parse_fraction('.5') == 0.5


def test_fraction_is_divided_in_single_precision():
    assert ms.parse_fraction('1/3') == float(np.float32(1) / np.float32(3))
    assert ms.parse_fraction('1/3') != 1 / 3
    assert ms.parse_fraction('0.1') == float(np.float32(0.1))


def test_parse_reads_leading_number():
    """Trailing characters are ignored, only the first '/' splits."""
    assert ms.parse_fraction('2kg') == 2.0
    assert ms.parse_fraction('1/2/3') == 0.5


def test_zero_denominator(error_kinds):
    assert ms.parse_fraction('3/0') == 0.0
    assert error_kinds() == [ms.INVALID_FRACTION]


def test_invalid_fraction(error_kinds):
    assert ms.parse_fraction('x/2') == 0.0
    assert ms.parse_fraction('2/') == 0.0
    assert error_kinds() == [ms.INVALID_FRACTION, ms.INVALID_FRACTION]


def test_invalid_number(error_kinds):
    assert ms.parse_fraction('abc') == 0.0
    assert ms.parse_fraction('') == 0.0
    assert error_kinds() == [ms.INVALID_NUMBER, ms.INVALID_NUMBER]


def test_parse_row():
    assert ms.parse_row('1 -2 3/4') == [1.0, -2.0, 0.75]
    assert ms.parse_row('  7\t8  ') == [7.0, 8.0]
    assert ms.parse_row('') == []


def test_disable_logger(caplog):
    with ms.DisableLogger():
        assert ms.parse_fraction('3/0') == 0.0
    assert len(caplog.records) == 0
