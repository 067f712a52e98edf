"""
=============================================
Root Finding (:mod:`rootfinding`)
=============================================

.. currentmodule:: rootfinding

Classical iterative methods for finding a real root of a single
nonlinear equation :math:`f(x) = 0`.  All methods share the same
iteration loop, convergence test (relative error) and divergence
detection; only the update formula differs.

Methods
-------

.. autosummary::
    :toctree:

    Bisection
    FalsePosition
    FixedPoint
    NewtonRaphson
    NewtonRaphson2
    RalstonRabinowitz
    Secant

Construction / Options
----------------------

.. autosummary::
    :toctree:

    create_method
    available_methods
    Method
    RootFinderOptions

Results
-------

.. autosummary::
    :toctree:

    RootResult
    Status

Exceptions
----------

.. autosummary::
    :toctree:

    RootFindingError
    UnknownMethod
    InvalidFunctionResult
    DivisionByZero
    DivergentIteration
    InvalidBracket
    DidNotConverge

"""

__version__ = "0.1.0"

from .base import RootFinder, RootResult, Status
from .bisection import Bisection
from .convergence import is_divergent, relative_error
from .evaluate import evaluate, validate_function
from .exception import (
    RootFindingError, UnknownMethod, InvalidFunctionResult, DivisionByZero,
    DivergentIteration, InvalidBracket, DidNotConverge)
from .factory import Method, available_methods, create_method
from .false_position import FalsePosition
from .fixed_point import FixedPoint
from .newton_raphson import NewtonRaphson, NewtonRaphson2
from .options import RootFinderOptions
from .ralston_rabinowitz import RalstonRabinowitz
from .secant import Secant
