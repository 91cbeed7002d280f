"""extremum - local extrema of scalar functions by Newton descent and line search."""

__version__ = "0.1.0"

from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    Bracket,
    DimensionMismatchError,
    Goal,
    InvalidExpressionError,
    OptimizationConfig,
    OptimizeResult,
    ScalarResult,
    Status,
    run,
    run_custom_single_variable_optimization,
    run_multi_variable_optimization,
    run_single_variable_optimization,
)

__all__ = [
    "Bracket",
    "DimensionMismatchError",
    "Goal",
    "InvalidExpressionError",
    "OptimizationConfig",
    "OptimizeResult",
    "ScalarResult",
    "Status",
    "__version__",
    "configure_logging",
    "get_logger",
    "run",
    "run_custom_single_variable_optimization",
    "run_multi_variable_optimization",
    "run_single_variable_optimization",
    "set_log_level",
]
