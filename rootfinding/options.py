from __future__ import annotations

import operator
from dataclasses import dataclass, fields


# ======================================================================

@dataclass(frozen=True)
class RootFinderOptions:
    """
    Settings shared by all root finding methods.  Instances are
    immutable; use `RootFinder.set()` or `dataclasses.replace()` to
    obtain a modified copy.

    Parameters
    ----------
    max_iteration : int, default = 50
        Upper bound on the number of iterations.
    err_tolerance : float, default = 1e-9
        Stop when the relative error :math:`|x' - x| / |x'|` is less
        than or equal to this value.
    divergent_skip : bool, default = True
        If True, raise `DivergentIteration` as soon as the relative
        errors show a divergent trend.
    raise_on_maxiter : bool, default = False
        If True, raise `DidNotConverge` when `max_iteration` is reached
        without satisfying `err_tolerance`.  Otherwise the last estimate
        is returned with status `Status.NOT_CONVERGED`.
    verbose : bool, default = False
        If True, print progress statements.

    Raises
    ------
    ValueError
        Illegal option values, including a non-numeric `err_tolerance`
        or a flag that is not a `bool`.
    """
    max_iteration: int = 50
    err_tolerance: float = 1e-9
    divergent_skip: bool = True
    raise_on_maxiter: bool = False
    verbose: bool = False

    def __post_init__(self):
        try:
            max_iteration = operator.index(self.max_iteration)
        except TypeError:
            raise ValueError(f"max_iteration must be an integer, got "
                             f"{self.max_iteration!r}.") from None
        if isinstance(self.max_iteration, bool) or max_iteration < 1:
            raise ValueError("max_iteration must be greater than 0.")

        # Frozen, so write through object.__setattr__.
        object.__setattr__(self, 'max_iteration', max_iteration)

        try:
            tol_ok = self.err_tolerance > 0  # Also rejects NaN.
        except TypeError:
            raise ValueError(f"err_tolerance must be a number, got "
                             f"{self.err_tolerance!r}.") from None
        if not tol_ok:
            raise ValueError(f"err_tolerance too small "
                             f"({self.err_tolerance} <= 0).")

        for name in ('divergent_skip', 'raise_on_maxiter', 'verbose'):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be True or False, got "
                                 f"{getattr(self, name)!r}.")

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Returns the names of all available options."""
        return tuple(f.name for f in fields(cls))
