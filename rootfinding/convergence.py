from __future__ import annotations

from collections.abc import Sequence

DIVERGENCE_WINDOW = 3  # Number of trailing errors examined.


# ======================================================================

def relative_error(x_next: float, x_current: float) -> float:
    r"""
    Relative change between successive estimates,
    :math:`\epsilon = |(x' - x) / x'|`.  `x_next` must be non-zero.
    """
    return abs((x_next - x_current) / x_next)


def is_divergent(errors: Sequence[float],
                 window: int = DIVERGENCE_WINDOW) -> bool:
    """
    Heuristic check for a divergent iteration.  The iteration is taken
    to be moving away from a root if the last `window` relative errors
    are strictly increasing.

    Examples
    --------
    >>> is_divergent([0.5, 0.1])  # Not enough history.
    False
    >>> is_divergent([0.5, 0.1, 0.2, 0.3])
    True
    >>> is_divergent([0.1, 0.2, 0.2])
    False

    Parameters
    ----------
    errors : Sequence[float]
        Relative errors in order of computation.
    window : int, default = 3
        Number of trailing errors that must be increasing.

    Returns
    -------
    bool
        True if divergence is suspected.  Always False while fewer than
        `window` errors are available.
    """
    if window < 2:
        raise ValueError("window must be at least 2.")

    if len(errors) < window:
        return False

    tail = errors[-window:]
    return all(e_prev < e for e_prev, e in zip(tail, tail[1:]))
