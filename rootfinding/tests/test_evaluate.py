import math
from fractions import Fraction

import numpy as np
import pytest

from rootfinding import evaluate, validate_function, InvalidFunctionResult


# ======================================================================

@pytest.mark.parametrize('value, expected', [
    (2, 2.0),
    (-1.5, -1.5),
    (np.float32(0.25), 0.25),
    (np.int64(3), 3.0),
    (np.array(4.0), 4.0),  # 0-d array.
    (np.array([5.0]), 5.0),  # Single element.
    (Fraction(1, 4), 0.25),
])
def test_evaluate_valid(value, expected):
    y = evaluate(lambda x: value, 0.0)
    assert y == expected
    assert type(y) is float


@pytest.mark.parametrize('value', [
    math.nan, math.inf, -math.inf, np.float64('nan'),
    1 + 2j, 'one', None, True, [1.0], np.array([1.0, 2.0]),
    10 ** 400,  # Too large for a float.
])
def test_evaluate_invalid(value):
    with pytest.raises(InvalidFunctionResult):
        evaluate(lambda x: value, 0.0)


def test_evaluate_not_callable():
    with pytest.raises(InvalidFunctionResult) as exc_info:
        evaluate(3.0, 1.0)

    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.flag == 2
    assert exc_info.value.x == 1.0


def test_evaluate_passes_x():
    assert evaluate(lambda x: x ** 2, 3.0) == 9.0


def test_validate_function():
    validate_function(math.sin, 1.0)
    with pytest.raises(InvalidFunctionResult):
        validate_function(lambda x: math.copysign(math.inf, x), 0.0)


def test_callback_exception_propagates():
    # Errors raised by the callback itself are not converted.
    with pytest.raises(ValueError) as exc_info:
        evaluate(math.log, 0.0)
    assert not isinstance(exc_info.value, InvalidFunctionResult)
