from __future__ import annotations

from .base import EqFunction, RootFinder
from .evaluate import evaluate


# ======================================================================

class FixedPoint(RootFinder):
    r"""
    Fixed point iteration.  The equation :math:`f(x) = 0` is first
    rearranged by the caller into the form :math:`x = g(x)`, which is
    then iterated directly:

    .. math:: x_{i+1} = g(x_i)

    Convergence requires :math:`|g'(x)| < 1` near the root.

    Examples
    --------
    >>> def g(x): return (x + 10) ** 0.25
    >>> x = FixedPoint().compute(g, 1.0)
    >>> round(x, 6)
    1.855585
    """
    name = 'fixedpoint'
    title = "Fixed Point"
    n_funcs = 1
    n_guesses = 1

    def compute(self, g: EqFunction, x0: float, *,
                full_output: bool = False):
        """
        Parameters
        ----------
        g : Callable[[float], float]
            Function returning the next estimate of `x`.
        x0 : float
            Starting value.
        full_output : bool, default = False
            If True, also return the `RootResult`.
        """
        return super().compute(g, x0, full_output=full_output)

    def _step(self, funcs, x):
        (g,), (x_i,) = funcs, x
        return evaluate(g, x_i), x_i
