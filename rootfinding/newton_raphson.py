from __future__ import annotations

from .base import EqFunction, RootFinder
from .evaluate import evaluate
from .exception import DivisionByZero


# ======================================================================

class NewtonRaphson(RootFinder):
    r"""
    Newton-Raphson method using the first derivative:

    .. math:: x_{i+1} = x_i - \frac{f(x_i)}{f'(x_i)}

    Examples
    --------
    >>> nr = NewtonRaphson()
    >>> x = nr.compute(lambda x: x**2 - 2, lambda x: 2 * x, 1.0)
    >>> round(x, 8)
    1.41421356

    Notes
    -----
    This method runs at most ``max_iteration - 1`` iterations.
    """
    name = 'newtonraphson'
    title = "Newton-Raphson"
    n_funcs = 2
    n_guesses = 1
    inclusive_limit = False

    def compute(self, f: EqFunction, df: EqFunction, x0: float, *,
                full_output: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function which we are searching for root.
        df : Callable[[float], float]
            First derivative :math:`f'(x)`.
        x0 : float
            Starting value.
        full_output : bool, default = False
            If True, also return the `RootResult`.
        """
        return super().compute(f, df, x0, full_output=full_output)

    def _step(self, funcs, x):
        (f, df), (x_i,) = funcs, x
        f_i, df_i = evaluate(f, x_i), evaluate(df, x_i)

        if df_i == 0:
            # Reached a level state -> df/dx = 0.
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.", details="Derivative "
                                 "was zero.")

        return x_i - f_i / df_i, x_i


# ----------------------------------------------------------------------

class NewtonRaphson2(RootFinder):
    r"""
    Modified Newton-Raphson method using the first and second
    derivatives.  This retains quadratic convergence at multiple roots
    where the standard method slows to linear convergence:

    .. math::
        x_{i+1} = x_i - \frac{f(x_i) f'(x_i)}{f'(x_i)^2 - f(x_i) f''(x_i)}

    Notes
    -----
    This method runs at most ``max_iteration - 1`` iterations.
    """
    name = 'newtonraphson2'
    title = "Newton-Raphson 2"
    n_funcs = 3
    n_guesses = 1
    inclusive_limit = False

    def compute(self, f: EqFunction, df: EqFunction, d2f: EqFunction,
                x0: float, *, full_output: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function which we are searching for root.
        df : Callable[[float], float]
            First derivative :math:`f'(x)`.
        d2f : Callable[[float], float]
            Second derivative :math:`f''(x)`.
        x0 : float
            Starting value.
        full_output : bool, default = False
            If True, also return the `RootResult`.
        """
        return super().compute(f, df, d2f, x0, full_output=full_output)

    def _step(self, funcs, x):
        (f, df, d2f), (x_i,) = funcs, x
        f_i, df_i, d2f_i = (evaluate(f, x_i), evaluate(df, x_i),
                            evaluate(d2f, x_i))

        denom = df_i * df_i - f_i * d2f_i
        if denom == 0:
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.")

        return x_i - f_i * df_i / denom, x_i
