"""
Exceptions raised by the root finding methods.  All derive from
`RootFindingError` so that callers can catch any solver failure with a
single ``except`` clause, while the more specific types also derive
from the matching builtin (e.g. `DivisionByZero` is a
`ZeroDivisionError`).
"""


# ======================================================================

class RootFindingError(RuntimeError):
    """
    This exception is raised when a root finding method fails to
    produce a root.  Additional information (optional) is included to
    allow the reason for the failure to be determined.

    Notes
    -----
    `RootFindingError` may also have additional attributes not listed
    here depending on the method being used.  Errors raised from inside
    the iteration loop generally include `method`, `iteration`,
    `guesses` and `errors`.  Errors from the precondition checks made
    before the loop starts carry none of these.
    """
    default_flag: int = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            failure.  If omitted, the class default is used.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag = flag if flag is not None else self.default_flag
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class UnknownMethod(RootFindingError, ValueError):
    """Requested method name is not registered."""
    default_flag = 1


class InvalidFunctionResult(RootFindingError, TypeError):
    """
    An equation callback is not callable or returned something other
    than a finite real number.
    """
    default_flag = 2


class DivisionByZero(RootFindingError, ZeroDivisionError):
    """
    The update formula of a method is undefined at the current guess
    (e.g. :math:`f'(x) = 0` for Newton-Raphson).
    """
    default_flag = 3


class DivergentIteration(RootFindingError):
    """The sequence of relative errors is moving away from a root."""
    default_flag = 4


class InvalidBracket(RootFindingError, ValueError):
    """:math:`f(x)` does not change sign across the given interval."""
    default_flag = 5


class DidNotConverge(RootFindingError):
    """
    Iteration limit reached before the error tolerance was satisfied.
    Only raised when ``raise_on_maxiter=True``.
    """
    default_flag = 6
