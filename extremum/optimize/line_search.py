"""One-dimensional bracketing and bisection.

Both routines assume the restricted function is unimodal on the explored
range. ``bound`` locates an interval around the extremum by exponential
expansion; ``bisect`` then halves that interval using the sign of the
derivative. The ``goal`` argument flips every comparison so the same code
serves minimization and maximization.

Reference: K. Deb, *Optimization for Engineering Design* (2012), ch. 2.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from ..logging import get_logger
from .core import DERIVATIVE_TOL, MAX_LINE_SEARCH_ITER, Goal, ScalarFunction

logger = get_logger(__name__)


@dataclass(frozen=True)
class Bracket:
    """Closed interval ``[lo, hi]`` produced by a line-search phase."""

    lo: float
    hi: float
    nit: int = 0
    converged: bool = True

    def __iter__(self) -> Iterator[float]:
        yield self.lo
        yield self.hi

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lo + self.hi)

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi


def bound(
    phi: ScalarFunction,
    x0: float,
    delta: float,
    goal: Goal = Goal.MINIMIZE,
    max_iter: int = MAX_LINE_SEARCH_ITER,
) -> Bracket:
    """Bounding phase: bracket the extremum of ``phi`` starting from ``x0``.

    The three probes ``x0 - |delta|``, ``x0`` and ``x0 + |delta|`` decide
    the direction. Only when ``x0`` is strictly better than both neighbours
    is the trivial bracket ``[x0 - |delta|, x0 + |delta|]`` returned;
    otherwise the search moves toward the better neighbour, which also walks
    away from an extremum of the wrong kind. The k-th move is
    ``2**k * delta`` and expansion stops at the first point that does not
    improve; the bracket spans the points on either side of the best one
    seen. A non-finite function value ends the expansion with
    ``converged=False``.
    """
    goal = Goal.parse(goal)
    delta = abs(float(delta))
    if delta == 0:
        raise ValueError("delta must be nonzero")
    x0 = float(x0)
    f_minus, f0, f_plus = phi(x0 - delta), phi(x0), phi(x0 + delta)
    if not all(math.isfinite(f) for f in (f_minus, f0, f_plus)):
        logger.warning("Objective is not finite near x0=%g; bounding phase stopped", x0)
        return Bracket(x0 - delta, x0 + delta, converged=False)

    if goal.better(f0, f_minus) and goal.better(f0, f_plus):
        return Bracket(x0 - delta, x0 + delta)
    if goal.better(f_minus, f_plus):
        delta = -delta
        f_next = f_minus
    else:
        f_next = f_plus

    x_before, x_best, x_next = x0 - delta, x0, x0 + delta
    f_best = f0
    k = 0
    while goal.better(f_next, f_best):
        k += 1
        if k > max_iter:
            logger.warning(
                "Bounding phase did not converge after %d expansions from x0=%g",
                max_iter,
                x0,
            )
            return Bracket(*sorted((x_before, x_next)), nit=max_iter, converged=False)
        x_before, x_best, f_best = x_best, x_next, f_next
        x_next = x_best + 2**k * delta
        f_next = phi(x_next)
        if not math.isfinite(f_next):
            logger.warning(
                "Objective is not finite at x=%g; bounding phase stopped after %d expansions",
                x_next,
                k,
            )
            return Bracket(*sorted((x_before, x_next)), nit=k, converged=False)
    lo, hi = sorted((x_before, x_next))
    logger.debug("Bounding phase bracket [%g, %g] after %d expansions", lo, hi, k)
    return Bracket(lo, hi, nit=k)


def bisect(
    dphi: ScalarFunction,
    a: float,
    b: float,
    eps: float,
    goal: Goal = Goal.MINIMIZE,
    max_iter: int = MAX_LINE_SEARCH_ITER,
) -> Bracket:
    """Bisect on the derivative ``dphi`` to shrink ``[a, b]`` around a stationary point.

    Halves the interval until it is narrower than ``eps`` or ``|dphi(mid)|``
    drops below ``DERIVATIVE_TOL`` (the bracket then collapses to
    ``[mid, mid]``). Without a sign change across ``[a, b]`` the degenerate
    bracket at the endpoint with the smaller ``|dphi|`` is returned. A
    non-finite endpoint derivative yields the other endpoint, unconverged.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    goal = Goal.parse(goal)
    lo, hi = sorted((float(a), float(b)))
    d_lo, d_hi = dphi(lo), dphi(hi)
    if not (math.isfinite(d_lo) and math.isfinite(d_hi)):
        point = lo if math.isfinite(d_lo) else hi
        logger.warning("Derivative is not finite on [%g, %g]; using %g", lo, hi, point)
        return Bracket(point, point, converged=False)
    if d_lo * d_hi >= 0:
        point = lo if abs(d_lo) < abs(d_hi) else hi
        logger.debug("No derivative sign change on [%g, %g]; using %g", lo, hi, point)
        return Bracket(point, point)

    nit = 0
    while hi - lo >= eps:
        if nit >= max_iter:
            logger.warning(
                "Bisection did not converge after %d halvings; width %g", max_iter, hi - lo
            )
            return Bracket(lo, hi, nit=nit, converged=False)
        nit += 1
        mid = 0.5 * (lo + hi)
        d_mid = dphi(mid)
        if abs(d_mid) < DERIVATIVE_TOL:
            return Bracket(mid, mid, nit=nit)
        # Derivative still improving at mid: the optimum lies to the right.
        if goal.better(d_mid, 0.0):
            lo = mid
        else:
            hi = mid
    return Bracket(lo, hi, nit=nit)


__all__ = ["Bracket", "bound", "bisect"]
