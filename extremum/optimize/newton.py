"""Newton's method with a bracketing line search along the Newton direction."""

from __future__ import annotations

import numpy as np

from ..logging import get_logger
from .core import (
    DimensionMismatchError,
    Goal,
    IterationRecord,
    OptimizeResult,
    Problem,
    Status,
    check_convergence,
)
from .line_search import bisect, bound
from .utils import approx_grad, approx_hessian, invert

logger = get_logger(__name__)

_MESSAGES = {
    Status.CONVERGED: "Gradient tolerance satisfied.",
    Status.SINGULAR: "Hessian is singular; no usable Newton direction.",
    Status.MAX_ITER: "Maximum iterations reached.",
}


def _compute_gradient(problem: Problem, x: np.ndarray) -> tuple[np.ndarray, int]:
    if problem.grad is not None:
        return np.asarray(problem.grad(x), dtype=float), 0
    grad, evals = approx_grad(problem.fun, x, return_evals=True)
    return grad, int(evals)


def _compute_hessian(problem: Problem, x: np.ndarray) -> tuple[np.ndarray, int]:
    if problem.hess is not None:
        return np.asarray(problem.hess(x), dtype=float), 0
    hess, evals = approx_hessian(problem.fun, x, return_evals=True)
    return hess, int(evals)


def newton_descent(
    problem: Problem,
    x0: np.ndarray,
    maxiter: int = 100,
    tol: float = 1e-6,
    alpha_step: float = 0.1,
    goal: Goal | str = Goal.MINIMIZE,
) -> OptimizeResult:
    """Newton's method where every step length comes from a 1-D line search.

    Each iteration computes the gradient (stopping once its norm is below
    ``tol``), the Hessian and its inverse (stopping if it is singular), and
    the direction ``s = -H^-1 g``. The step length is the midpoint of the
    bracket obtained by :func:`bound` on ``phi(a) = f(x + a s)`` starting at
    ``a = 0`` with step ``alpha_step``, refined by :func:`bisect` to ``tol``.

    The last point reached is always returned; non-convergence shows up in
    ``status`` and in a short ``trace``.
    """
    goal = Goal.parse(goal)
    x = np.asarray(x0, dtype=float).copy()
    if problem.dim is not None and x.size != problem.dim:
        raise DimensionMismatchError(f"x0 has {x.size} coordinates, problem expects {problem.dim}")
    trace: list[IterationRecord] = []
    nfev = 0
    nit = 0
    status = Status.MAX_ITER
    line_search_ok = True
    grad = np.zeros_like(x)

    def counted(fun):
        def wrapper(alpha: float) -> float:
            nonlocal nfev
            nfev += 1
            return fun(alpha)

        return wrapper

    while nit < maxiter:
        grad, grad_fev = _compute_gradient(problem, x)
        nfev += grad_fev
        grad_norm = float(np.linalg.norm(grad))
        if check_convergence(grad_norm, tol):
            status = Status.CONVERGED
            break
        hess, hess_fev = _compute_hessian(problem, x)
        nfev += hess_fev
        hess_inv = invert(hess)
        if hess_inv is None:
            logger.warning("Singular Hessian at iteration %d; stopping at x=%s", nit, x)
            status = Status.SINGULAR
            break
        step = -(hess_inv @ grad)

        # phi'(a) is taken from the local quadratic model f(x) + a g.s + a^2 s.Hs/2,
        # not from differencing phi, so the search is exact only for locally
        # quadratic f. Intentional; do not swap in a numerical derivative.
        coeff_a = 0.5 * float(step @ (hess @ step))
        coeff_b = float(grad @ step)
        base = x

        @counted
        def phi(alpha: float) -> float:
            return problem.fun(base + alpha * step)

        def phi_prime(alpha: float) -> float:
            return 2.0 * coeff_a * alpha + coeff_b

        bracket = bound(phi, 0.0, alpha_step, goal=goal)
        refined = bisect(phi_prime, bracket.lo, bracket.hi, tol, goal=goal)
        if not (bracket.converged and refined.converged):
            line_search_ok = False
        alpha = refined.midpoint

        x = x + alpha * step
        fx = problem.fun(x)
        nfev += 1
        trace.append(IterationRecord(iteration=nit, x=x, fun=float(fx)))
        logger.debug(
            "iter %d: alpha=%.6g f=%.10g |g|=%.3g", nit, alpha, fx, grad_norm
        )
        nit += 1

    if status is Status.MAX_ITER:
        grad, grad_fev = _compute_gradient(problem, x)
        nfev += grad_fev
        if check_convergence(float(np.linalg.norm(grad)), tol):
            status = Status.CONVERGED
        else:
            logger.warning("Newton descent stopped after %d iterations", nit)

    fx = problem.fun(x)
    nfev += 1
    return OptimizeResult(
        x=x,
        fun=float(fx),
        nit=nit,
        status=status,
        message=_MESSAGES[status],
        grad_norm=float(np.linalg.norm(grad)),
        nfev=nfev,
        trace=trace,
        line_search_ok=line_search_ok,
    )


__all__ = ["newton_descent"]
