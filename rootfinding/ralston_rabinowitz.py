from __future__ import annotations

from .base import EqFunction, RootFinder
from .evaluate import evaluate
from .exception import DivisionByZero


# ======================================================================

class RalstonRabinowitz(RootFinder):
    r"""
    Ralston-Rabinowitz method.  This is the secant method applied to
    :math:`u(x) = f(x) / f'(x)` in place of :math:`f(x)`.  As `u` has
    only simple roots, convergence is not degraded at multiple roots of
    `f`:

    .. math::
        x_{i+1} = x_i - \frac{u(x_i)(x_{i-1} - x_i)}{u(x_{i-1}) - u(x_i)}
    """
    name = 'ralstonrabinowitz'
    title = "Ralston-Rabinowitz"
    n_funcs = 2
    n_guesses = 2

    def compute(self, f: EqFunction, df: EqFunction, x0: float,
                x1: float, *, full_output: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function which we are searching for root.
        df : Callable[[float], float]
            First derivative :math:`f'(x)`.
        x0, x1 : float
            First and second starting values.
        full_output : bool, default = False
            If True, also return the `RootResult`.
        """
        return super().compute(f, df, x0, x1, full_output=full_output)

    def _step(self, funcs, x):
        (f, df), (x0, x1) = funcs, x
        u0, u1 = self._u(f, df, x0), self._u(f, df, x1)

        if u0 - u1 == 0:
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.")

        return x1 - u1 * (x0 - x1) / (u0 - u1), x1

    def _u(self, f: EqFunction, df: EqFunction, x: float) -> float:
        df_x = evaluate(df, x)
        if df_x == 0:
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.", details="Derivative "
                                 "was zero.")

        return evaluate(f, x) / df_x
