from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .base import RootFinder
from .bisection import Bisection
from .exception import UnknownMethod
from .false_position import FalsePosition
from .fixed_point import FixedPoint
from .newton_raphson import NewtonRaphson, NewtonRaphson2
from .options import RootFinderOptions
from .ralston_rabinowitz import RalstonRabinowitz
from .secant import Secant


# ======================================================================

class Method(str, Enum):
    """Names of the available root finding methods."""
    BISECTION = 'bisection'
    FALSE_POSITION = 'falseposition'
    FIXED_POINT = 'fixedpoint'
    NEWTON_RAPHSON = 'newtonraphson'
    NEWTON_RAPHSON_2 = 'newtonraphson2'
    RALSTON_RABINOWITZ = 'ralstonrabinowitz'
    SECANT = 'secant'


_METHODS = MappingProxyType({
    Method.BISECTION: Bisection,
    Method.FALSE_POSITION: FalsePosition,
    Method.FIXED_POINT: FixedPoint,
    Method.NEWTON_RAPHSON: NewtonRaphson,
    Method.NEWTON_RAPHSON_2: NewtonRaphson2,
    Method.RALSTON_RABINOWITZ: RalstonRabinowitz,
    Method.SECANT: Secant,
})


# ----------------------------------------------------------------------

def available_methods() -> tuple[str, ...]:
    """Returns the registered method names."""
    return tuple(m.value for m in _METHODS)


def create_method(name: str | Method,
                  options: RootFinderOptions | dict = None,
                  **kwargs) -> RootFinder:
    """
    Create a new root finding method object by name.

    Examples
    --------
    >>> rf = create_method('Newton-Raphson', max_iteration=20)
    >>> type(rf).__name__
    'NewtonRaphson'
    >>> rf.get('max_iteration')
    20

    Parameters
    ----------
    name : str or Method
        Method name.  Case, surrounding whitespace, underscores, hyphens
        and spaces are ignored, so ``'false_position'``, ``'False
        Position'`` and ``'falseposition'`` are equivalent.
    options : RootFinderOptions or dict, optional
        Starting options for the method.
    kwargs :
        Individual option overrides.

    Returns
    -------
    RootFinder
        New method object.

    Raises
    ------
    UnknownMethod
        If `name` is not a registered method.
    """
    if isinstance(name, Method):
        method = name
    else:
        if not isinstance(name, str):
            raise UnknownMethod(f"Method name must be a string, got "
                                f"{name!r}.")
        key = name.strip().lower()
        for ch in '_- ':
            key = key.replace(ch, '')

        try:
            method = Method(key)
        except ValueError:
            raise UnknownMethod(
                f"Unknown root finding method '{name}'.",
                details=f"Available methods: "
                        f"{', '.join(available_methods())}.") from None

    return _METHODS[method](options, **kwargs)
