"""Entry points combining catalog or expression objectives with the optimizers."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..logging import get_logger
from .catalog import MultiObjective, ScalarObjective, get_multi_objective, get_scalar_objective
from .core import (
    DimensionMismatchError,
    Goal,
    OptimizationConfig,
    OptimizeResult,
    Problem,
    ScalarResult,
)
from .expression import ExpressionEngine, compile_objective
from .newton import newton_descent
from .scalar import scalar_search

logger = get_logger(__name__)


def run(config: OptimizationConfig) -> OptimizeResult | ScalarResult:
    """Run the optimizer matching ``config.objective``.

    Multi-variable objectives go through :func:`newton_descent`, whose line
    search uses ``config.delta`` as its initial step and
    ``config.gradient_tolerance`` for both the stopping test and the
    bisection. Scalar objectives go through :func:`scalar_search` with
    ``config.delta`` and ``config.bisection_tolerance``.
    """
    objective = config.objective
    if isinstance(objective, MultiObjective):
        x0 = np.atleast_1d(np.asarray(config.start_point, dtype=float))
        if x0.ndim != 1:
            raise DimensionMismatchError("start_point must be a flat vector")
        logger.info("Running %s from %s", objective.name, x0)
        problem = Problem(fun=objective.fun, dim=x0.size)
        return newton_descent(
            problem,
            x0,
            maxiter=config.max_iterations,
            tol=config.gradient_tolerance,
            alpha_step=config.delta,
            goal=config.goal,
        )
    if isinstance(objective, ScalarObjective):
        if np.ndim(config.start_point) != 0:
            raise DimensionMismatchError("Single-variable objectives need a scalar start point")
        logger.info("Running %s from %s", objective.name, config.start_point)
        return scalar_search(
            objective.fun,
            objective.derivative,
            float(config.start_point),
            delta=config.delta,
            eps=config.bisection_tolerance,
            goal=config.goal,
        )
    raise TypeError(f"Unsupported objective type: {type(objective).__name__}")


def run_multi_variable_optimization(
    problem_id: int,
    dimension: int,
    start_point: Sequence[float],
    max_iterations: int = 100,
) -> OptimizeResult:
    """Minimize catalog function ``problem_id`` (1-5) with Newton descent.

    Raises:
        DimensionMismatchError: If ``len(start_point) != dimension``.
        ValueError: If ``problem_id`` is not in the catalog.
    """
    config = OptimizationConfig(
        objective=get_multi_objective(problem_id),
        start_point=start_point,
        dimension=dimension,
        max_iterations=max_iterations,
    )
    return run(config)


def run_single_variable_optimization(
    problem_id: int,
    start_point: Optional[float] = None,
    delta: float = 0.1,
    epsilon: float = 1e-6,
) -> ScalarResult:
    """Optimize catalog function ``problem_id`` (1-6) in the direction it defines.

    ``start_point`` defaults to the catalog's suggested start.
    """
    objective = get_scalar_objective(problem_id)
    config = OptimizationConfig(
        objective=objective,
        start_point=objective.start if start_point is None else start_point,
        bisection_tolerance=epsilon,
        delta=delta,
        goal=objective.goal,
    )
    return run(config)


def run_custom_single_variable_optimization(
    expression: str,
    start_point: float,
    goal: Goal | str = Goal.MINIMIZE,
    delta: float = 0.1,
    epsilon: float = 1e-7,
    engine: Optional[ExpressionEngine] = None,
) -> ScalarResult:
    """Optimize a function of ``x`` given as an expression string.

    The expression is parsed and differentiated by ``engine`` (sympy by
    default) and both are evaluated at ``start_point`` before searching.

    Raises:
        InvalidExpressionError: If the expression cannot be parsed,
            differentiated or evaluated at ``start_point``.
    """
    if not math.isfinite(start_point):
        raise ValueError(f"start_point must be finite, got {start_point!r}")
    goal = Goal.parse(goal)
    fun, derivative = compile_objective(expression, start_point, engine=engine)
    objective = ScalarObjective(
        name=expression,
        equation=f"f(x) = {expression}",
        fun=fun,
        derivative=derivative,
        goal=goal,
    )
    config = OptimizationConfig(
        objective=objective,
        start_point=start_point,
        bisection_tolerance=epsilon,
        delta=delta,
        goal=goal,
    )
    return run(config)


__all__ = [
    "run",
    "run_custom_single_variable_optimization",
    "run_multi_variable_optimization",
    "run_single_variable_optimization",
]
