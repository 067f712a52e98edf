"""
Common machinery for the iterative root finding methods.  Each method
derives from `RootFinder` and supplies only its update formula; the
iteration loop, error accounting, divergence detection and stopping
logic are shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any

from .convergence import is_divergent, relative_error
from .evaluate import validate_function
from .exception import DidNotConverge, DivergentIteration, RootFindingError
from .options import RootFinderOptions

EqFunction = Callable[[float], float]


# ======================================================================

class Status(IntEnum):
    """How the iteration loop terminated."""
    CONVERGED = 0  # Relative error within err_tolerance.
    ZERO_ESTIMATE = 1  # Update formula produced exactly zero.
    EXACT_ROOT = 2  # f(x) == 0 exactly at a bracketing estimate.
    NOT_CONVERGED = 3  # max_iteration reached.


@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a single `RootFinder.compute()` call.

    Attributes
    ----------
    root : float or None
        Best estimate of the root.  For ``Status.NOT_CONVERGED`` this is
        the last estimate computed (`None` if no iterations were run).
    iterations : int
        Index of the last iteration run (``<= max_iteration``).
    rel_error : float or None
        Relative error of the last iteration, if any was computed.
    errors : tuple[float, ...]
        All relative errors in order of computation.
    status : Status
        Termination state.
    method : str
        Name of the method that produced the result.
    """
    root: float | None
    iterations: int
    rel_error: float | None
    errors: tuple[float, ...]
    status: Status
    method: str

    @property
    def converged(self) -> bool:
        """
        True unless the iteration limit was reached.  Note that
        ``Status.ZERO_ESTIMATE`` counts as converged although an estimate
        of exactly zero is not checked against :math:`f(0)` and need not
        be a root.
        """
        return self.status != Status.NOT_CONVERGED


@dataclass
class _IterationState:
    # Owned by one compute() call only.
    x: tuple
    errors: list[float] = field(default_factory=list)
    iteration: int = 0
    root: float | None = None
    status: Status = Status.NOT_CONVERGED


# ----------------------------------------------------------------------

class RootFinder(ABC):
    """
    Abstract base class for methods that solve :math:`f(x) = 0` by
    iteration.

    Derived classes set the class attributes below and implement
    `_step()`.  They may also override `_validate()`,
    `_initial_state()` and `_advance()`.

    Attributes
    ----------
    name : str
        Registered method name.
    title : str
        Human readable name used in progress output.
    n_funcs : int
        Number of equation callbacks taken by `compute()`.
    n_guesses : int
        Number of starting values taken by `compute()`.
    inclusive_limit : bool
        If True the loop runs for up to `max_iteration` iterations,
        otherwise for up to ``max_iteration - 1``.
    zero_estimate_is_root : bool
        If True an estimate of exactly zero is returned as the root
        (its relative error is undefined).  Otherwise the iteration
        continues from that estimate without recording an error.

    Parameters
    ----------
    options : RootFinderOptions or dict, optional
        Starting options.  Defaults are used if omitted.
    kwargs :
        Individual option overrides, applied after `options`.
    """
    name: str = None
    title: str = None
    n_funcs: int = 1
    n_guesses: int = 1
    inclusive_limit: bool = True
    zero_estimate_is_root: bool = True

    def __init__(self, options: RootFinderOptions | dict = None,
                 **kwargs):
        self._options = RootFinderOptions()
        self.result: RootResult | None = None
        self.set(options, **kwargs)

    def __repr__(self):
        return f"{type(self).__name__}({self._options!r})"

    # -- Public Methods ------------------------------------------------

    def compute(self, *args, full_output: bool = False
                ) -> float | None | tuple[float | None, RootResult]:
        """
        Find the root.  Positional arguments are the `n_funcs` equation
        callbacks followed by the `n_guesses` starting values; see the
        derived class for the exact signature.

        Parameters
        ----------
        args :
            Callbacks and starting values.
        full_output : bool, default = False
            If True, also return the `RootResult`.

        Returns
        -------
        root : float or None
            Root estimate.
        result : RootResult
            Only if ``full_output=True``.

        Raises
        ------
        TypeError
            Wrong number of arguments.
        InvalidFunctionResult
            A callback is not callable or returned a non-finite or
            non-real value.
        DivisionByZero
            The update formula is undefined at the current guess.
        DivergentIteration
            Divergence detected and ``divergent_skip=True``.
        DidNotConverge
            Iteration limit reached and ``raise_on_maxiter=True``.
        """
        n_args = self.n_funcs + self.n_guesses
        if len(args) != n_args:
            raise TypeError(f"{type(self).__name__}.compute() takes "
                            f"{n_args} positional arguments but "
                            f"{len(args)} were given.")

        funcs = tuple(args[:self.n_funcs])
        guesses = tuple(args[self.n_funcs:])

        self._validate(funcs, guesses)
        result = self._iterate(funcs, self._initial_state(funcs, guesses))
        self.result = result

        if full_output:
            return result.root, result
        return result.root

    def get(self, name: str) -> Any:
        """Returns the current value of option `name`."""
        if name not in RootFinderOptions.names():
            raise KeyError(f"Unknown option '{name}'.")
        return getattr(self._options, name)

    @property
    def iteration_count(self) -> int | None:
        """Iterations run by the last `compute()` call."""
        return self.result.iterations if self.result else None

    @property
    def last_relative_error(self) -> float | None:
        """Final relative error from the last `compute()` call."""
        return self.result.rel_error if self.result else None

    @property
    def options(self) -> RootFinderOptions:
        return self._options

    def reset(self):
        """Clear the result of any previous `compute()` call."""
        self.result = None

    @property
    def root(self) -> float | None:
        """Root found by the last `compute()` call."""
        return self.result.root if self.result else None

    def set(self, options: RootFinderOptions | dict = None, **kwargs):
        """
        Change options prior to calling `compute()`.

        Parameters
        ----------
        options : RootFinderOptions or dict, optional
            Replaces all current options (`RootFinderOptions`) or only
            those given (`dict`).
        kwargs :
            Individual option overrides.

        Raises
        ------
        KeyError
            Unknown option name.
        ValueError
            Illegal option value.
        """
        if isinstance(options, RootFinderOptions):
            new_opts = options
        elif options is None:
            new_opts = self._options
        elif isinstance(options, dict):
            new_opts = self._options
            kwargs = {**options, **kwargs}
        else:
            raise TypeError(f"Options must be a RootFinderOptions or dict, "
                            f"got {type(options).__name__}.")

        unknown = set(kwargs) - set(RootFinderOptions.names())
        if unknown:
            raise KeyError(f"Unknown option/s: {', '.join(sorted(unknown))}")

        self._options = replace(new_opts, **kwargs)

    # -- Protected Methods ---------------------------------------------

    def _advance(self, funcs: tuple[EqFunction, ...], x: tuple,
                 x_next: float) -> tuple | None:
        """
        Returns the guesses for the next iteration.  The default shifts
        the guesses along by one, so a single guess is replaced by
        `x_next` and two guesses `(x0, x1)` become `(x1, x_next)`.
        Bracketing methods narrow the bracket instead.  Returning `None`
        signals that `x_next` is an exact root.
        """
        return x[1:] + (x_next,)

    def _initial_state(self, funcs: tuple[EqFunction, ...],
                       guesses: tuple[float, ...]) -> tuple:
        """Returns the guesses used for the first iteration."""
        return tuple(float(g) for g in guesses)

    def _iterate(self, funcs: tuple[EqFunction, ...],
                 x0: tuple) -> RootResult:
        opts = self._options  # Held fixed for the whole run.
        state = _IterationState(x=x0)
        limit = (opts.max_iteration if self.inclusive_limit else
                 opts.max_iteration - 1)
        x_next = None

        def verbose_print(info):
            if opts.verbose:
                print(info)

        verbose_print(f"{self.title}:")

        try:
            while state.iteration < limit:
                state.iteration += 1
                x_next, x_current = self._step(funcs, state.x)

                if x_next == 0:
                    # Relative error is undefined at zero.
                    verbose_print(f"... Iteration {state.iteration}: "
                                  f"x = 0")
                    if self.zero_estimate_is_root:
                        state.root = x_next
                        state.status = Status.ZERO_ESTIMATE
                        verbose_print(f"... Reached zero estimate.")
                        break

                else:
                    eps = relative_error(x_next, x_current)
                    state.errors.append(eps)
                    verbose_print(f"... Iteration {state.iteration}: "
                                  f"x = {x_next:.9g}, "
                                  f"rel. error = {eps:.3e}")

                    if opts.divergent_skip and is_divergent(state.errors):
                        raise DivergentIteration(
                            f"{self.title}: Iteration skipped, divergent "
                            f"rows detected.")

                    if eps <= opts.err_tolerance:
                        state.root, state.status = x_next, Status.CONVERGED
                        verbose_print(f"... Converged.")
                        break

                x_adv = self._advance(funcs, state.x, x_next)
                if x_adv is None:
                    state.root, state.status = x_next, Status.EXACT_ROOT
                    verbose_print(f"... Converged (exact root).")
                    break

                state.x = x_adv

            else:
                state.root = x_next
                verbose_print(f"... Iteration limit reached.")
                if opts.raise_on_maxiter:
                    raise DidNotConverge(
                        f"{self.title}: Failed to converge after "
                        f"{state.iteration} iterations, value is {x_next}.")

        except RootFindingError as e:
            # Attach loop context for diagnosis.
            e.method = self.name
            e.iteration = state.iteration
            e.guesses = state.x
            e.errors = tuple(state.errors)
            raise

        return RootResult(
            root=state.root, iterations=state.iteration,
            rel_error=state.errors[-1] if state.errors else None,
            errors=tuple(state.errors), status=state.status,
            method=self.name)

    @abstractmethod
    def _step(self, funcs: tuple[EqFunction, ...],
              x: tuple) -> tuple[float, float]:
        """
        Apply the update formula.

        Returns
        -------
        x_next : float
            New estimate of the root.
        x_current : float
            Estimate that `x_next` is compared against when computing
            the relative error.

        Raises
        ------
        DivisionByZero
            If the formula is undefined at `x`.
        """
        raise NotImplementedError

    def _validate(self, funcs: tuple[EqFunction, ...],
                  guesses: tuple[float, ...]):
        """
        Precondition checks.  The default checks every callback at the
        first guess.
        """
        for func in funcs:
            validate_function(func, guesses[0])
