"""Single-variable optimization: one bounding phase followed by one bisection."""

from __future__ import annotations

from ..logging import get_logger
from .core import (
    MAX_LINE_SEARCH_ITER,
    Goal,
    ScalarFunction,
    ScalarResult,
    Status,
)
from .line_search import bisect, bound

logger = get_logger(__name__)


def scalar_search(
    fun: ScalarFunction,
    derivative: ScalarFunction,
    x0: float,
    delta: float = 0.1,
    eps: float = 1e-6,
    goal: Goal | str = Goal.MINIMIZE,
    max_iter: int = MAX_LINE_SEARCH_ITER,
) -> ScalarResult:
    """Locate a local extremum of ``fun`` near ``x0``.

    :func:`bound` brackets the extremum with initial step ``delta`` and
    :func:`bisect` shrinks the bracket on ``derivative`` until it is
    narrower than ``eps``. The reported optimum is the midpoint of the final
    bracket. Hitting either iteration cap yields ``Status.NOT_CONVERGED``
    together with the best bracket found so far.
    """
    goal = Goal.parse(goal)
    nfev = 0

    def counted_fun(x: float) -> float:
        nonlocal nfev
        nfev += 1
        return fun(x)

    bracket = bound(counted_fun, x0, delta, goal=goal, max_iter=max_iter)
    final = bisect(derivative, bracket.lo, bracket.hi, eps, goal=goal, max_iter=max_iter)
    x_opt = final.midpoint
    f_opt = float(counted_fun(x_opt))

    if bracket.converged and final.converged:
        status = Status.CONVERGED
        message = "Bracket narrower than tolerance."
    else:
        status = Status.NOT_CONVERGED
        phase = "Bounding phase" if not bracket.converged else "Bisection"
        message = f"{phase} did not converge."
        logger.warning("%s (x0=%g, goal=%s)", message, x0, goal.value)
    logger.debug(
        "Scalar search from %g: bracket [%g, %g], x*=%.10g f*=%.10g",
        x0,
        final.lo,
        final.hi,
        x_opt,
        f_opt,
    )
    return ScalarResult(
        x=x_opt,
        fun=f_opt,
        bracket=final,
        status=status,
        message=message,
        nfev=nfev,
    )


__all__ = ["scalar_search"]
