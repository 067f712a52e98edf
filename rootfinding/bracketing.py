from __future__ import annotations

from abc import abstractmethod

import numpy as np

from .base import EqFunction, RootFinder
from .evaluate import evaluate
from .exception import InvalidBracket


# ======================================================================

class BracketingRootFinder(RootFinder):
    """
    Base class for methods that keep the root bracketed inside an
    interval :math:`[x_a, x_b]` across which :math:`f(x)` changes sign.
    Every estimate lies within the current bracket, and the bracket is
    narrowed at each step by checking which side the root is on.

    Derived classes implement `_estimate()` to place the next point
    inside the bracket.

    Notes
    -----
    - The first estimate is compared against `x_a` when computing the
      relative error; later estimates are compared against the previous
      estimate.
    - An estimate of exactly zero is not accepted as the root since the
      bracket may not contain zero as a root; the bracket is narrowed as
      usual instead.
    """
    n_funcs = 1
    n_guesses = 2
    zero_estimate_is_root = False

    def compute(self, f: EqFunction, x_a: float, x_b: float, *,
                full_output: bool = False):
        r"""
        Approximate solution of :math:`f(x) = 0` on the interval
        :math:`x \in [x_a, x_b]`.

        Parameters
        ----------
        f : Callable[[float], float]
            Function which we are searching for root.
        x_a, x_b : float
            Each end of the search interval, in any order.  ``f(x_a)``
            and ``f(x_b)`` must have opposite sign.
        full_output : bool, default = False
            If True, also return the `RootResult`.

        Raises
        ------
        InvalidBracket
            If `f` does not change sign across the interval, or either
            end is already a root.
        """
        return super().compute(f, x_a, x_b, full_output=full_output)

    # -- Protected Methods ---------------------------------------------

    def _advance(self, funcs, x, x_next):
        (f,) = funcs
        x_a, x_b, f_a, f_b, _ = x
        f_next = evaluate(f, x_next)

        if f_next == 0:
            return None

        # Check which side root is on, narrow interval.
        if np.sign(f_next) == np.sign(f_a):
            return x_next, x_b, f_next, f_b, x_next
        else:
            return x_a, x_next, f_a, f_next, x_next

    @abstractmethod
    def _estimate(self, x_a: float, x_b: float, f_a: float,
                  f_b: float) -> float:
        """Returns the next estimate within the bracket."""
        raise NotImplementedError

    def _initial_state(self, funcs, guesses):
        (f,) = funcs
        x_a, x_b = (float(g) for g in guesses)
        return x_a, x_b, evaluate(f, x_a), evaluate(f, x_b), x_a

    def _step(self, funcs, x):
        x_a, x_b, f_a, f_b, x_prev = x
        return self._estimate(x_a, x_b, f_a, f_b), x_prev

    def _validate(self, funcs, guesses):
        (f,) = funcs
        x_a, x_b = guesses
        if x_a == x_b:
            raise InvalidBracket("x_a, x_b must have different values.",
                                 method=self.name)

        f_a, f_b = evaluate(f, x_a), evaluate(f, x_b)
        if f_a == 0 or f_b == 0:
            raise InvalidBracket("One of the start points is already "
                                 "zero.", method=self.name, f_a=f_a,
                                 f_b=f_b)

        if np.sign(f_a) == np.sign(f_b):
            raise InvalidBracket("f(x_a) and f(x_b) must have opposite "
                                 "sign.", method=self.name, f_a=f_a,
                                 f_b=f_b)
