from __future__ import annotations

from .bracketing import BracketingRootFinder


# ======================================================================

class Bisection(BracketingRootFinder):
    """
    Bisection method.  The bracket is halved at each step, keeping the
    half across which :math:`f(x)` changes sign.  Convergence is slow
    (linear) but guaranteed for a continuous function once a valid
    bracket is given.

    Examples
    --------
    >>> def f(x): return x**2 - x - 1
    >>> x = Bisection(err_tolerance=1e-6).compute(f, 1.0, 2.0)
    >>> round(x, 4)
    1.618
    """
    name = 'bisection'
    title = "Bisection"

    def _estimate(self, x_a, x_b, f_a, f_b):
        return (x_a + x_b) / 2
