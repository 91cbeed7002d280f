import math

import pytest
import sympy as sp

from extremum.optimize import (
    Goal,
    SingleVariableProblem,
    Status,
    get_scalar_objective,
    run_single_variable_optimization,
    scalar_search,
)

X = sp.Symbol("x")

SYMBOLIC = {
    SingleVariableProblem.QUARTIC_MINUS_CUBIC: (2 * X - 5) ** 4 - (X**2 - 1) ** 3,
    SingleVariableProblem.CUBIC_EXPONENTIAL: 8 + X**3 - 2 * X - 2 * sp.exp(X),
    SingleVariableProblem.X_SIN_X: 4 * X * sp.sin(X),
    SingleVariableProblem.QUADRATIC_GAUSSIAN: 2 * (X - 3) ** 2 + sp.exp(X**2 / 2),
    SingleVariableProblem.QUADRATIC_EXPONENTIAL: X**2 - 10 * sp.exp(X / 10),
    SingleVariableProblem.SINE_PARABOLA: 20 * sp.sin(X) - 15 * X**2,
}


def stationary_point(expr: sp.Expr, guess: float) -> float:
    return float(sp.nsolve(sp.diff(expr, X), X, guess))


def test_quadratic_gaussian_minimizer():
    res = run_single_variable_optimization(4, start_point=0.0, delta=0.1, epsilon=1e-6)
    oracle = stationary_point(SYMBOLIC[SingleVariableProblem.QUADRATIC_GAUSSIAN], 1.5)
    assert res.status is Status.CONVERGED
    assert res.x == pytest.approx(oracle, abs=1e-4)
    assert res.fun == pytest.approx(2 * (oracle - 3) ** 2 + math.exp(0.5 * oracle**2), abs=1e-6)
    assert res.bracket.width < 1e-6


@pytest.mark.parametrize("problem", list(SingleVariableProblem))
def test_catalog_problem_reaches_extremum_of_its_kind(problem: SingleVariableProblem):
    objective = get_scalar_objective(problem)
    res = run_single_variable_optimization(int(problem))
    expr = SYMBOLIC[problem]
    oracle = stationary_point(expr, res.x)
    curvature = float(sp.diff(expr, X, 2).subs(X, oracle))

    assert res.success
    assert res.x == pytest.approx(oracle, abs=1e-4)
    assert objective.interval[0] <= res.x <= objective.interval[1]
    if objective.goal is Goal.MAXIMIZE:
        assert curvature < 0
    else:
        assert curvature > 0


def test_scalar_search_maximizes():
    res = scalar_search(
        lambda x: -((x + 2.0) ** 2),
        lambda x: -2.0 * (x + 2.0),
        x0=1.0,
        goal="max",
    )
    assert res.x == pytest.approx(-2.0, abs=1e-6)
    assert res.fun == pytest.approx(0.0, abs=1e-10)


def test_scalar_search_reports_non_convergence():
    res = scalar_search(lambda x: -x, lambda x: -1.0, x0=0.0, max_iter=5)
    assert res.status is Status.NOT_CONVERGED
    assert "Bounding phase" in res.message
    assert math.isfinite(res.x)


def test_scalar_search_counts_function_evaluations():
    res = scalar_search(lambda x: (x - 1.0) ** 2, lambda x: 2.0 * (x - 1.0), x0=0.0)
    assert res.nfev >= 4


def test_single_variable_run_is_repeatable():
    first = run_single_variable_optimization(6, start_point=0.0)
    second = run_single_variable_optimization(6, start_point=0.0)
    assert first.x == second.x
    assert first.fun == second.fun
    assert first.bracket == second.bracket


def test_unknown_single_variable_problem():
    with pytest.raises(ValueError):
        run_single_variable_optimization(7)
