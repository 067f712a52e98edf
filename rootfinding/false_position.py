from __future__ import annotations

from .bracketing import BracketingRootFinder
from .exception import DivisionByZero


# ======================================================================

class FalsePosition(BracketingRootFinder):
    r"""
    False position (*regula falsi*) method.  The next estimate is where
    the chord joining the bracket ends crosses zero:

    .. math:: x_r = x_b - \frac{f(x_b)(x_a - x_b)}{f(x_a) - f(x_b)}

    The bracket is then narrowed in the same manner as bisection.
    """
    name = 'falseposition'
    title = "False Position"

    def _estimate(self, x_a, x_b, f_a, f_b):
        if f_a - f_b == 0:
            raise DivisionByZero(f"{self.title}: Iteration skipped, "
                                 f"division by zero.")

        return x_b - f_b * (x_a - x_b) / (f_a - f_b)
