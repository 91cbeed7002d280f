"""
Benchmark objectives with known optima.

Multi-variable functions follow the definitions of the Virtual Library of
Simulation Experiments (Surjanovic & Bingham); indices in the formulas are
1-based. Single-variable functions come with hand-derived derivatives and
the goal, interval and start point they are meant to be run with.

Lookups go through :class:`MultiVariableProblem` / :class:`SingleVariableProblem`
so an unknown id fails with ``ValueError`` before any computation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

import numpy as np

from .core import Array, Goal, Objective, ScalarFunction


class MultiVariableProblem(IntEnum):
    SUM_SQUARES = 1
    ROSENBROCK = 2
    DIXON_PRICE = 3
    TRID = 4
    ZAKHAROV = 5


class SingleVariableProblem(IntEnum):
    QUARTIC_MINUS_CUBIC = 1
    CUBIC_EXPONENTIAL = 2
    X_SIN_X = 3
    QUADRATIC_GAUSSIAN = 4
    QUADRATIC_EXPONENTIAL = 5
    SINE_PARABOLA = 6


@dataclass(frozen=True)
class MultiObjective:
    """Closed-form n-dimensional objective and its global minimizer."""

    name: str
    equation: str
    fun: Objective
    minimizer: Callable[[int], Array]

    def minimum(self, dim: int) -> float:
        return float(self.fun(self.minimizer(dim)))


@dataclass(frozen=True)
class ScalarObjective:
    """Single-variable objective paired with its derivative."""

    name: str
    equation: str
    fun: ScalarFunction
    derivative: ScalarFunction
    goal: Goal = Goal.MINIMIZE
    interval: tuple[float, float] = (-math.inf, math.inf)
    start: float = 0.0


def _index(x: Array) -> Array:
    return np.arange(1, x.size + 1, dtype=float)


def sum_squares(x: Array) -> float:
    x = np.asarray(x, dtype=float)
    return float(np.sum(_index(x) * x**2))


def rosenbrock(x: Array) -> float:
    x = np.asarray(x, dtype=float)
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (x[:-1] - 1.0) ** 2))


def dixon_price(x: Array) -> float:
    x = np.asarray(x, dtype=float)
    i = _index(x)[1:]
    return float((x[0] - 1.0) ** 2 + np.sum(i * (2.0 * x[1:] ** 2 - x[:-1]) ** 2))


def trid(x: Array) -> float:
    x = np.asarray(x, dtype=float)
    return float(np.sum((x - 1.0) ** 2) - np.sum(x[1:] * x[:-1]))


def zakharov(x: Array) -> float:
    x = np.asarray(x, dtype=float)
    s = float(np.sum(0.5 * _index(x) * x))
    return float(np.sum(x**2)) + s**2 + s**4


def _dixon_price_minimizer(dim: int) -> Array:
    i = np.arange(1, dim + 1, dtype=float)
    return 2.0 ** (-(2.0**i - 2.0) / 2.0**i)


def _trid_minimizer(dim: int) -> Array:
    i = np.arange(1, dim + 1, dtype=float)
    return i * (dim + 1 - i)


MULTI_VARIABLE_OBJECTIVES: dict[MultiVariableProblem, MultiObjective] = {
    MultiVariableProblem.SUM_SQUARES: MultiObjective(
        "Sum Squares Function",
        "f(x) = sum_i i * x_i^2",
        sum_squares,
        lambda dim: np.zeros(dim),
    ),
    MultiVariableProblem.ROSENBROCK: MultiObjective(
        "Rosenbrock Function",
        "f(x) = sum_i [100(x_{i+1} - x_i^2)^2 + (x_i - 1)^2]",
        rosenbrock,
        lambda dim: np.ones(dim),
    ),
    MultiVariableProblem.DIXON_PRICE: MultiObjective(
        "Dixon-Price Function",
        "f(x) = (x_1 - 1)^2 + sum_{i>=2} i(2x_i^2 - x_{i-1})^2",
        dixon_price,
        _dixon_price_minimizer,
    ),
    MultiVariableProblem.TRID: MultiObjective(
        "Trid Function",
        "f(x) = sum_i (x_i - 1)^2 - sum_{i>=2} x_i x_{i-1}",
        trid,
        _trid_minimizer,
    ),
    MultiVariableProblem.ZAKHAROV: MultiObjective(
        "Zakharov Function",
        "f(x) = sum_i x_i^2 + (sum_i 0.5 i x_i)^2 + (sum_i 0.5 i x_i)^4",
        zakharov,
        lambda dim: np.zeros(dim),
    ),
}

SINGLE_VARIABLE_OBJECTIVES: dict[SingleVariableProblem, ScalarObjective] = {
    SingleVariableProblem.QUARTIC_MINUS_CUBIC: ScalarObjective(
        "Maximize (2x-5)^4 - (x^2-1)^3",
        "f(x) = (2x-5)^4 - (x^2-1)^3",
        lambda x: (2 * x - 5) ** 4 - (x**2 - 1) ** 3,
        lambda x: 8 * (2 * x - 5) ** 3 - 6 * x * (x**2 - 1) ** 2,
        Goal.MAXIMIZE,
        (-10.0, 0.0),
        -1.0,
    ),
    SingleVariableProblem.CUBIC_EXPONENTIAL: ScalarObjective(
        "Maximize 8 + x^3 - 2x - 2e^x",
        "f(x) = 8 + x^3 - 2x - 2e^x",
        lambda x: 8 + x**3 - 2 * x - 2 * math.exp(x),
        lambda x: 3 * x**2 - 2 - 2 * math.exp(x),
        Goal.MAXIMIZE,
        (-2.0, 1.0),
        0.0,
    ),
    SingleVariableProblem.X_SIN_X: ScalarObjective(
        "Maximize 4x sin(x)",
        "f(x) = 4x sin(x)",
        lambda x: 4 * x * math.sin(x),
        lambda x: 4 * math.sin(x) + 4 * x * math.cos(x),
        Goal.MAXIMIZE,
        (0.5, math.pi),
        2.0,
    ),
    SingleVariableProblem.QUADRATIC_GAUSSIAN: ScalarObjective(
        "Minimize 2(x-3)^2 + e^(0.5x^2)",
        "f(x) = 2(x-3)^2 + e^(0.5x^2)",
        lambda x: 2 * (x - 3) ** 2 + math.exp(0.5 * x**2),
        lambda x: 4 * (x - 3) + x * math.exp(0.5 * x**2),
        Goal.MINIMIZE,
        (-2.0, 3.0),
        0.0,
    ),
    SingleVariableProblem.QUADRATIC_EXPONENTIAL: ScalarObjective(
        "Minimize x^2 - 10e^(0.1x)",
        "f(x) = x^2 - 10e^(0.1x)",
        lambda x: x**2 - 10 * math.exp(0.1 * x),
        lambda x: 2 * x - math.exp(0.1 * x),
        Goal.MINIMIZE,
        (-6.0, 6.0),
        0.0,
    ),
    SingleVariableProblem.SINE_PARABOLA: ScalarObjective(
        "Maximize 20sin(x) - 15x^2",
        "f(x) = 20sin(x) - 15x^2",
        lambda x: 20 * math.sin(x) - 15 * x**2,
        lambda x: 20 * math.cos(x) - 30 * x,
        Goal.MAXIMIZE,
        (-4.0, 4.0),
        0.0,
    ),
}

if set(MULTI_VARIABLE_OBJECTIVES) != set(MultiVariableProblem):
    raise RuntimeError("Multi-variable catalog is missing entries")
if set(SINGLE_VARIABLE_OBJECTIVES) != set(SingleVariableProblem):
    raise RuntimeError("Single-variable catalog is missing entries")


def get_multi_objective(problem_id: int | MultiVariableProblem) -> MultiObjective:
    """Return the multi-variable objective for ``problem_id`` (1-5)."""
    return MULTI_VARIABLE_OBJECTIVES[MultiVariableProblem(problem_id)]


def get_scalar_objective(problem_id: int | SingleVariableProblem) -> ScalarObjective:
    """Return the single-variable objective for ``problem_id`` (1-6)."""
    return SINGLE_VARIABLE_OBJECTIVES[SingleVariableProblem(problem_id)]


__all__ = [
    "MultiVariableProblem",
    "SingleVariableProblem",
    "MultiObjective",
    "ScalarObjective",
    "MULTI_VARIABLE_OBJECTIVES",
    "SINGLE_VARIABLE_OBJECTIVES",
    "dixon_price",
    "get_multi_objective",
    "get_scalar_objective",
    "rosenbrock",
    "sum_squares",
    "trid",
    "zakharov",
]
