"""Local optimization by Newton descent and bracketing line searches.

Example
-------
>>> from extremum.optimize import run_multi_variable_optimization
>>> res = run_multi_variable_optimization(1, 3, [1.0, 1.0, 1.0])
>>> bool(abs(res.fun) < 1e-8)
True
>>> from extremum.optimize import run_custom_single_variable_optimization
>>> res = run_custom_single_variable_optimization("x^2 - 4x", 0.0, goal="min")
>>> round(res.x, 4)
2.0
"""

from .api import (
    run,
    run_custom_single_variable_optimization,
    run_multi_variable_optimization,
    run_single_variable_optimization,
)
from .catalog import (
    MultiObjective,
    MultiVariableProblem,
    ScalarObjective,
    SingleVariableProblem,
    get_multi_objective,
    get_scalar_objective,
)
from .core import (
    DimensionMismatchError,
    Goal,
    InvalidExpressionError,
    IterationRecord,
    OptimizationConfig,
    OptimizeResult,
    Problem,
    ScalarResult,
    Status,
    check_convergence,
)
from .expression import ExpressionEngine, SympyEngine, compile_objective
from .line_search import Bracket, bisect, bound
from .newton import newton_descent
from .scalar import scalar_search
from .utils import approx_grad, approx_hessian, invert

__all__ = [
    "Bracket",
    "DimensionMismatchError",
    "ExpressionEngine",
    "Goal",
    "InvalidExpressionError",
    "IterationRecord",
    "MultiObjective",
    "MultiVariableProblem",
    "OptimizationConfig",
    "OptimizeResult",
    "Problem",
    "ScalarObjective",
    "ScalarResult",
    "SingleVariableProblem",
    "Status",
    "SympyEngine",
    "approx_grad",
    "approx_hessian",
    "bisect",
    "bound",
    "check_convergence",
    "compile_objective",
    "get_multi_objective",
    "get_scalar_objective",
    "invert",
    "newton_descent",
    "run",
    "run_custom_single_variable_optimization",
    "run_multi_variable_optimization",
    "run_single_variable_optimization",
    "scalar_search",
]
