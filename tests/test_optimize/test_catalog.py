import numpy as np
import pytest

from extremum.optimize import catalog
from extremum.optimize.catalog import (
    MULTI_VARIABLE_OBJECTIVES,
    SINGLE_VARIABLE_OBJECTIVES,
    MultiVariableProblem,
    SingleVariableProblem,
    get_multi_objective,
    get_scalar_objective,
)


def test_tables_cover_every_problem_id():
    assert set(MULTI_VARIABLE_OBJECTIVES) == set(MultiVariableProblem)
    assert set(SINGLE_VARIABLE_OBJECTIVES) == set(SingleVariableProblem)
    assert [int(p) for p in MultiVariableProblem] == [1, 2, 3, 4, 5]
    assert [int(p) for p in SingleVariableProblem] == [1, 2, 3, 4, 5, 6]


def test_lookup_by_plain_integer():
    assert get_multi_objective(2) is MULTI_VARIABLE_OBJECTIVES[MultiVariableProblem.ROSENBROCK]
    assert get_scalar_objective(4).name.startswith("Minimize")


@pytest.mark.parametrize("bad_id", [0, 6, -1])
def test_unknown_multi_variable_id(bad_id: int):
    with pytest.raises(ValueError):
        get_multi_objective(bad_id)


def test_unknown_single_variable_id():
    with pytest.raises(ValueError):
        get_scalar_objective(7)


def test_closed_forms_at_sample_points():
    x = np.array([1.0, 2.0, 3.0])
    assert catalog.sum_squares(x) == pytest.approx(1 + 8 + 27)
    assert catalog.rosenbrock(x) == pytest.approx(100 + 0 + 100 + 1)
    assert catalog.dixon_price(x) == pytest.approx(0 + 2 * 49 + 3 * 256)
    assert catalog.trid(x) == pytest.approx(0 + 1 + 4 - (2 + 6))
    s = 0.5 * (1 + 4 + 9)
    assert catalog.zakharov(x) == pytest.approx(14 + s**2 + s**4)


@pytest.mark.parametrize("problem", list(MultiVariableProblem))
@pytest.mark.parametrize("dim", [2, 3, 5])
def test_minimizers_are_stationary(problem: MultiVariableProblem, dim: int):
    objective = get_multi_objective(problem)
    x_star = objective.minimizer(dim)
    assert x_star.shape == (dim,)
    h = 1e-6
    for i in range(dim):
        step = np.zeros(dim)
        step[i] = h
        slope = (objective.fun(x_star + step) - objective.fun(x_star - step)) / (2 * h)
        assert slope == pytest.approx(0.0, abs=1e-4)


@pytest.mark.parametrize("dim", [2, 3, 4, 6])
def test_trid_minimum_formula(dim: int):
    objective = get_multi_objective(MultiVariableProblem.TRID)
    assert objective.minimum(dim) == pytest.approx(-dim * (dim + 4) * (dim - 1) / 6)


@pytest.mark.parametrize(
    "problem",
    [
        MultiVariableProblem.SUM_SQUARES,
        MultiVariableProblem.ROSENBROCK,
        MultiVariableProblem.DIXON_PRICE,
        MultiVariableProblem.ZAKHAROV,
    ],
)
def test_zero_minimum(problem: MultiVariableProblem):
    assert get_multi_objective(problem).minimum(4) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("problem", list(SingleVariableProblem))
def test_scalar_derivatives_match_central_differences(problem: SingleVariableProblem):
    objective = get_scalar_objective(problem)
    lo, hi = objective.interval
    h = 1e-6
    for x in np.linspace(lo, hi, 7):
        numeric = (objective.fun(x + h) - objective.fun(x - h)) / (2 * h)
        assert objective.derivative(x) == pytest.approx(numeric, rel=1e-5, abs=1e-4)


@pytest.mark.parametrize("problem", list(SingleVariableProblem))
def test_default_start_lies_in_recommended_interval(problem: SingleVariableProblem):
    objective = get_scalar_objective(problem)
    assert objective.interval[0] <= objective.start <= objective.interval[1]
