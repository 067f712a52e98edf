from __future__ import annotations

from collections.abc import Callable
from numbers import Real

import numpy as np

from .exception import InvalidFunctionResult


# ======================================================================

def evaluate(func: Callable[[float], float], x: float) -> float:
    """
    Evaluate an equation callback at `x` and check that the result is a
    finite real number.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function, e.g. :math:`f(x)`, :math:`f'(x)` or
        :math:`g(x)`.
    x : float
        Point at which to evaluate `func`.

    Returns
    -------
    float
        ``func(x)`` converted to a Python float.

    Raises
    ------
    InvalidFunctionResult
        If `func` is not callable, or the value returned is not numeric,
        is complex, NaN or infinite.
    """
    if not callable(func):
        raise InvalidFunctionResult(f"Equation function {func!r} is not "
                                    f"callable.", x=x)

    y = func(x)

    # Unwrap single-element NumPy results (0-d arrays, size-1 arrays).
    if isinstance(y, np.ndarray):
        if y.size != 1:
            raise InvalidFunctionResult(
                f"Equation function returned an array of shape "
                f"{y.shape}, expected a scalar.", x=x)
        y = y.reshape(()).item()

    if isinstance(y, (bool, np.bool_)) or not isinstance(y, Real):
        raise InvalidFunctionResult(f"Equation function returned a "
                                    f"non-real value {y!r}.", x=x)

    try:
        y = float(y)
    except OverflowError:
        raise InvalidFunctionResult(f"Equation function returned a value "
                                    f"too large for a float.", x=x) from None

    if not np.isfinite(y):
        raise InvalidFunctionResult(f"Equation function returned a "
                                    f"non-finite value {y!r}.", x=x)

    return y


def validate_function(func: Callable[[float], float], x: float):
    """
    Precondition check run before iterating:  `func` must be callable
    and return a finite real number at the starting point `x`.

    Raises
    ------
    InvalidFunctionResult
        As for `evaluate`.
    """
    evaluate(func, x)
