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
"""Functions for parsing user-entered numbers and matrix rows"""

from typing import List
import numpy as np
import re
import logging
from matrixsolver.names import *

# leading decimal or inf/nan literal, trailing text is ignored
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))", re.IGNORECASE)


def _parse_float_prefix(text: str) -> np.float32:
    """Read the longest float literal at the start of text in single precision

    Leading whitespace is skipped and trailing characters are ignored, so
    '2.5kg' reads as 2.5.

    Raises:
        ValueError: if text does not start with a number.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"No number found in '{text}'.")
    return np.float32(match.group(1))


def parse_fraction(text: str) -> float:
    """Converts a number written as a decimal or as a fraction to a float

    The text is split at the first '/' into numerator and denominator. Both
    parts are read as decimal numbers and divided in single precision, the
    precision of matrix cells. Invalid input is not raised to the
    caller; an error is logged and 0.0 is returned instead.

    Example:
        parse_fraction('3/4') -> 0.75, parse_fraction('-2') -> -2.0

    Args:
        text (str):
            A number such as '5', '-1.25', '1e-3' or a fraction such as '3/4'.

    Returns:
        (float):
        The parsed value, or 0.0 if the text is not a valid number or the
        denominator is zero.
    """
    numerator_str, slash, denominator_str = text.partition('/')
    if slash:
        try:
            numerator = _parse_float_prefix(numerator_str)
            denominator = _parse_float_prefix(denominator_str)
            if denominator == 0:
                raise ValueError("Denominator cannot be zero.")
        except ValueError:
            logging.error(f"Invalid fraction format: '{text}'.", extra={ERROR_KIND: INVALID_FRACTION})
            return 0.0
        return float(numerator / denominator)
    try:
        return float(_parse_float_prefix(text))
    except ValueError:
        logging.error(f"Invalid number format: '{text}'.", extra={ERROR_KIND: INVALID_NUMBER})
        return 0.0


def parse_row(text: str) -> List[float]:
    """Parses a whitespace separated line of numbers (e.g. '1 -2 3/4')"""
    return [parse_fraction(token) for token in text.split()]
