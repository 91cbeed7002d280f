import math

import pytest

from extremum.optimize import Goal
from extremum.optimize.line_search import Bracket, bisect, bound


def parabola(x: float) -> float:
    return (x - 3.0) ** 2


def parabola_prime(x: float) -> float:
    return 2.0 * (x - 3.0)


def test_bound_expands_toward_minimum():
    bracket = bound(parabola, 0.0, 0.1)
    assert bracket.converged
    assert bracket.lo == pytest.approx(1.5)
    assert bracket.hi == pytest.approx(6.3)
    assert bracket.contains(3.0)


def test_bound_and_bisect_locate_parabola_minimum():
    lo, hi = bound(parabola, 0.0, 0.1)
    final = bisect(parabola_prime, lo, hi, 1e-6)
    assert final.converged
    assert final.width < 1e-6
    assert final.lo - 1e-12 <= 3.0 <= final.hi + 1e-12


def test_bound_walks_left_when_function_decreases_left():
    bracket = bound(parabola, 10.0, 0.1)
    assert bracket.contains(3.0)
    assert bracket.lo < bracket.hi


def test_bound_returns_trivial_bracket_at_extremum():
    bracket = bound(parabola, 3.0, 0.1)
    assert bracket.lo == pytest.approx(2.9)
    assert bracket.hi == pytest.approx(3.1)
    assert bracket.nit == 0


def test_bound_leaves_maximum_when_minimizing():
    bracket = bound(lambda x: -x * x, 0.0, 0.1, max_iter=20)
    assert not bracket.converged
    assert bracket.lo > 0.0


def test_bound_walks_from_cosine_peak_to_trough():
    bracket = bound(math.cos, 0.0, 0.1)
    assert bracket.converged
    assert bracket.lo == pytest.approx(1.5)
    assert bracket.hi == pytest.approx(6.3)
    assert bracket.contains(math.pi)


def test_bound_leaves_local_maximum_of_double_well():
    bracket = bound(lambda x: (x * x - 1.0) ** 2, 0.0, 0.1)
    assert bracket.converged
    assert bracket.lo == pytest.approx(0.3)
    assert bracket.hi == pytest.approx(1.5)
    assert bracket.contains(1.0)


def test_bound_stops_on_non_finite_value():
    bracket = bound(lambda x: -x if x < 5.0 else math.nan, 0.0, 0.1)
    assert not bracket.converged
    assert bracket.lo == pytest.approx(1.5)
    assert bracket.hi == pytest.approx(6.3)


def test_bisect_stops_on_non_finite_derivative():
    final = bisect(lambda x: math.nan if x > 1.0 else -1.0, 0.0, 2.0, 1e-6)
    assert not final.converged
    assert final.lo == final.hi == 0.0


def test_bound_ignores_sign_of_delta():
    assert bound(parabola, 0.0, -0.1) == bound(parabola, 0.0, 0.1)


def test_maximize_mirrors_minimize():
    def hill(x: float) -> float:
        return -parabola(x)

    def hill_prime(x: float) -> float:
        return -parabola_prime(x)

    bracket = bound(hill, 0.0, 0.1, goal=Goal.MAXIMIZE)
    assert bracket.contains(3.0)
    final = bisect(hill_prime, bracket.lo, bracket.hi, 1e-6, goal="max")
    assert final.midpoint == pytest.approx(3.0, abs=1e-6)


def test_bound_reports_non_convergence_on_unbounded_function():
    bracket = bound(lambda x: -x, 0.0, 0.1, max_iter=10)
    assert not bracket.converged
    assert bracket.nit == 10
    assert bracket.lo < bracket.hi


def test_bound_rejects_zero_delta():
    with pytest.raises(ValueError):
        bound(parabola, 0.0, 0.0)


def test_bisect_without_sign_change_returns_closer_endpoint():
    final = bisect(lambda x: x + 10.0, 0.0, 1.0, 1e-6)
    assert final.lo == final.hi == 0.0
    assert final.width == 0.0


def test_bisect_accepts_reversed_endpoints():
    final = bisect(parabola_prime, 6.3, 1.5, 1e-8)
    assert final.midpoint == pytest.approx(3.0, abs=1e-8)


def test_bisect_collapses_on_vanishing_derivative():
    final = bisect(lambda x: x, -1.0, 1.0, 1e-6)
    assert final.lo == final.hi == 0.0
    assert final.nit == 1


def test_bisect_iteration_cap():
    final = bisect(lambda x: x - 1.0 / 3.0, 0.0, 1.0, 1e-300, max_iter=5)
    assert not final.converged
    assert final.nit == 5
    assert final.contains(1.0 / 3.0)


def test_bisect_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        bisect(parabola_prime, 0.0, 5.0, 0.0)


def test_bracket_unpacks_and_reports_geometry():
    bracket = Bracket(1.0, 3.0)
    lo, hi = bracket
    assert (lo, hi) == (1.0, 3.0)
    assert bracket.width == 2.0
    assert bracket.midpoint == 2.0
    assert not bracket.contains(3.5)
