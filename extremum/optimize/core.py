"""Core interfaces shared across the optimization routines."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Optional

import numpy as np

if TYPE_CHECKING:
    from .line_search import Bracket

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
Hessian = Callable[[Array], Array]
ScalarFunction = Callable[[float], float]

ATOL = 1e-10

# Central-difference step used for gradients and Hessians.
FD_STEP = 1e-5
# Gauss-Jordan pivots smaller than this mark the matrix as singular.
PIVOT_TOL = 1e-10
# |phi'(mid)| below this ends a bisection early.
DERIVATIVE_TOL = 1e-9
MAX_LINE_SEARCH_ITER = 100


class InvalidExpressionError(ValueError):
    """Raised when an expression cannot be parsed, differentiated or evaluated."""


class DimensionMismatchError(ValueError):
    """Raised when a start point does not have the declared dimension."""


class Goal(Enum):
    """Direction of the search."""

    MINIMIZE = "min"
    MAXIMIZE = "max"

    @classmethod
    def parse(cls, value: "Goal | str") -> "Goal":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("min", "minimize"):
            return cls.MINIMIZE
        if key in ("max", "maximize"):
            return cls.MAXIMIZE
        raise ValueError(f"Unknown goal {value!r}; expected 'min' or 'max'.")

    def better(self, a: float, b: float) -> bool:
        """Return True if ``a`` strictly improves on ``b`` for this goal."""
        if self is Goal.MINIMIZE:
            return a < b
        return a > b


class Status(Enum):
    """Terminal state of an optimization call."""

    CONVERGED = "converged"
    SINGULAR = "singular"
    MAX_ITER = "max_iter"
    NOT_CONVERGED = "not_converged"


@dataclass(frozen=True)
class Problem:
    """Container describing a multi-variable optimization problem."""

    fun: Objective
    grad: Optional[Gradient] = None
    hess: Optional[Hessian] = None
    dim: Optional[int] = None


@dataclass(frozen=True)
class IterationRecord:
    """One completed Newton step: the new point and its objective value."""

    iteration: int
    x: Array
    fun: float

    def __post_init__(self) -> None:
        point = np.array(self.x, dtype=float, copy=True)
        point.setflags(write=False)
        object.__setattr__(self, "x", point)


@dataclass
class OptimizeResult:
    """Result of a multi-variable run.

    Attributes:
        x: Last point reached, whatever the terminal state.
        fun: Objective value at ``x``.
        nit: Number of completed Newton steps.
        status: Terminal state.
        message: Human-readable description of ``status``.
        grad_norm: Euclidean norm of the gradient at ``x``.
        nfev: Number of objective evaluations.
        trace: One :class:`IterationRecord` per completed step.
        line_search_ok: False if any line search hit its iteration cap.
    """

    x: Array
    fun: float
    nit: int
    status: Status
    message: str
    grad_norm: float
    nfev: int
    trace: List[IterationRecord] = field(default_factory=list)
    line_search_ok: bool = True

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED


@dataclass
class ScalarResult:
    """Result of a single-variable run; ``bracket`` is the final interval."""

    x: float
    fun: float
    bracket: Bracket
    status: Status
    message: str
    nfev: int = 0

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED


@dataclass(frozen=True)
class OptimizationConfig:
    """
    Everything needed to run one optimization.

    ``objective`` is either a catalog entry (see :mod:`extremum.optimize.catalog`)
    or a :class:`~extremum.optimize.catalog.ScalarObjective` built from an
    expression. ``dimension`` only applies to multi-variable objectives and,
    when given, must match ``len(start_point)``.
    """

    objective: Any
    start_point: Any
    dimension: Optional[int] = None
    max_iterations: int = 100
    gradient_tolerance: float = 1e-6
    bisection_tolerance: float = 1e-6
    delta: float = 0.1
    goal: Goal = Goal.MINIMIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "goal", Goal.parse(self.goal))
        for name in ("gradient_tolerance", "bisection_tolerance", "delta"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if self.gradient_tolerance <= 0 or self.bisection_tolerance <= 0:
            raise ValueError("Tolerances must be positive.")
        if self.delta == 0:
            raise ValueError("delta must be nonzero.")
        if not isinstance(self.max_iterations, numbers.Integral) or self.max_iterations < 0:
            raise ValueError(
                f"max_iterations must be a non-negative integer, got {self.max_iterations!r}"
            )
        point = np.atleast_1d(np.asarray(self.start_point, dtype=float))
        if not np.all(np.isfinite(point)):
            raise ValueError("start_point must contain only finite values.")
        if self.dimension is not None:
            if not isinstance(self.dimension, numbers.Integral) or self.dimension < 1:
                raise ValueError(f"dimension must be a positive integer, got {self.dimension!r}")
            if point.size != self.dimension:
                raise DimensionMismatchError(
                    f"Start point has {point.size} coordinates but dimension is "
                    f"{self.dimension}."
                )


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if gradient norm satisfies tolerance."""
    return grad_norm < max(tol, ATOL)


__all__ = [
    "Array",
    "Objective",
    "Gradient",
    "Hessian",
    "ScalarFunction",
    "ATOL",
    "FD_STEP",
    "PIVOT_TOL",
    "DERIVATIVE_TOL",
    "MAX_LINE_SEARCH_ITER",
    "InvalidExpressionError",
    "DimensionMismatchError",
    "Goal",
    "Status",
    "Problem",
    "IterationRecord",
    "OptimizeResult",
    "ScalarResult",
    "OptimizationConfig",
    "check_convergence",
]
