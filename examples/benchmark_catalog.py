"""
Example: running every benchmark in the extremum catalog

Multi-variable functions are minimized by Newton descent from a start point
near the classic test locations; single-variable functions are optimized in
the direction the catalog prescribes, from their suggested start points. A
custom expression closes the tour.
"""

import logging

import numpy as np

from extremum import (
    configure_logging,
    run_custom_single_variable_optimization,
    run_multi_variable_optimization,
    run_single_variable_optimization,
)
from extremum.optimize import (
    MultiVariableProblem,
    SingleVariableProblem,
    get_multi_objective,
    get_scalar_objective,
)

MULTI_STARTS = {
    MultiVariableProblem.SUM_SQUARES: [1.0, 1.0, 1.0],
    MultiVariableProblem.ROSENBROCK: [-1.2, 1.0],
    MultiVariableProblem.DIXON_PRICE: [1.0, 1.0],
    MultiVariableProblem.TRID: [0.0, 0.0, 0.0],
    MultiVariableProblem.ZAKHAROV: [1.0, -0.5],
}


def example_multi_variable():
    print("=" * 60)
    print("Multi-variable benchmarks (Newton descent)")
    print("=" * 60)
    for problem, start in MULTI_STARTS.items():
        objective = get_multi_objective(problem)
        result = run_multi_variable_optimization(int(problem), len(start), start)
        expected = objective.minimizer(len(start))
        print(f"{objective.name}: {objective.equation}")
        print(f"  status: {result.status.value}, iterations: {result.nit}")
        print(f"  x = {np.round(result.x, 6)}  (known minimizer {np.round(expected, 6)})")
        print(f"  f(x) = {result.fun:.6g}")
        print()


def example_single_variable():
    print("=" * 60)
    print("Single-variable benchmarks (bounding phase + bisection)")
    print("=" * 60)
    for problem in SingleVariableProblem:
        objective = get_scalar_objective(problem)
        result = run_single_variable_optimization(int(problem))
        lo, hi = result.bracket
        print(f"{objective.name}")
        print(f"  x* = {result.x:.6f}, f(x*) = {result.fun:.6f}")
        print(f"  final interval: [{lo:.6f}, {hi:.6f}]")
        print()


def example_custom_expression():
    print("=" * 60)
    print("Custom expression")
    print("=" * 60)
    expression = "x^4 - 3x^2 + x"
    result = run_custom_single_variable_optimization(expression, 1.0, goal="min")
    print(f"min of {expression} near x=1: x* = {result.x:.6f}, f(x*) = {result.fun:.6f}")


if __name__ == "__main__":
    configure_logging(level=logging.INFO)
    example_multi_variable()
    example_single_variable()
    example_custom_expression()
