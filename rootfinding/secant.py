from __future__ import annotations

from .base import EqFunction, RootFinder
from .evaluate import evaluate
from .exception import DivisionByZero


# ======================================================================

class Secant(RootFinder):
    r"""
    Secant method.  The derivative in Newton's method is replaced by a
    finite difference through the two most recent estimates:

    .. math::
        x_{i+1} = x_i - \frac{f(x_i)(x_{i-1} - x_i)}{f(x_{i-1}) - f(x_i)}

    After each step the oldest estimate is discarded.  The root is not
    required to lie between the two starting values.
    """
    name = 'secant'
    title = "Secant"
    n_funcs = 1
    n_guesses = 2

    def compute(self, f: EqFunction, x0: float, x1: float, *,
                full_output: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function which we are searching for root.
        x0, x1 : float
            First and second starting values.
        full_output : bool, default = False
            If True, also return the `RootResult`.
        """
        return super().compute(f, x0, x1, full_output=full_output)

    def _step(self, funcs, x):
        (f,), (x0, x1) = funcs, x
        f0, f1 = evaluate(f, x0), evaluate(f, x1)

        if f0 - f1 == 0:
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.")

        return x1 - f1 * (x0 - x1) / (f0 - f1), x1
