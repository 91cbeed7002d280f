"""Runtime expression parsing for the custom single-variable mode.

The optimizers only need two things from an expression: a way to evaluate
it at a point and a way to evaluate its derivative. :class:`ExpressionEngine`
captures that contract; :class:`SympyEngine` is the default implementation.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from .core import InvalidExpressionError, ScalarFunction

_TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)
_CONSTANTS = {"e": sp.E, "pi": sp.pi}


def _real_symbol(name: str) -> sp.Symbol:
    return sp.Symbol(name, real=True)


class ExpressionEngine(ABC):
    """Turns expression strings into callables of one variable."""

    @abstractmethod
    def compile(self, expr: str, variable: str = "x") -> ScalarFunction:
        """Return a float-valued callable evaluating ``expr`` at a point."""

    @abstractmethod
    def differentiate(self, expr: str, variable: str = "x") -> str:
        """Return the derivative of ``expr`` with respect to ``variable``."""


class SympyEngine(ExpressionEngine):
    """Expression engine backed by sympy.

    ``^`` is accepted as exponentiation, implicit multiplication (``2x``)
    is allowed and ``e``/``pi`` denote the usual constants. Expressions may
    not reference any symbol other than the variable.
    """

    def parse(self, expr: str, variable: str = "x") -> sp.Expr:
        if not isinstance(expr, str) or not expr.strip():
            raise InvalidExpressionError("Invalid function syntax: empty expression")
        symbol = _real_symbol(variable)
        local_dict = dict(_CONSTANTS)
        local_dict[variable] = symbol
        try:
            parsed = parse_expr(expr, local_dict=local_dict, transformations=_TRANSFORMATIONS)
        except Exception as exc:
            raise InvalidExpressionError(f"Invalid function syntax: {exc}") from exc
        if not isinstance(parsed, sp.Expr):
            raise InvalidExpressionError(f"Invalid function syntax: {expr!r} is not an expression")
        extra = parsed.free_symbols - {symbol}
        if extra:
            names = ", ".join(sorted(str(s) for s in extra))
            raise InvalidExpressionError(f"Unknown symbols in expression: {names}")
        return parsed

    def compile(self, expr: str, variable: str = "x") -> ScalarFunction:
        """Compile ``expr`` to a callable on floats.

        Overflow evaluates to ``nan`` so the line search can stop on it;
        any other evaluation failure raises :class:`InvalidExpressionError`.
        """
        parsed = self.parse(expr, variable)
        try:
            func = sp.lambdify(_real_symbol(variable), parsed, modules="math")
        except Exception as exc:
            raise InvalidExpressionError(f"Cannot compile {expr!r}: {exc}") from exc

        def evaluate(x: float) -> float:
            try:
                return float(func(x))
            except OverflowError:
                return math.nan
            except (ArithmeticError, ValueError, TypeError, NameError) as exc:
                raise InvalidExpressionError(
                    f"Cannot evaluate {expr!r} at {variable}={x}: {exc}"
                ) from exc

        return evaluate

    def differentiate(self, expr: str, variable: str = "x") -> str:
        parsed = self.parse(expr, variable)
        try:
            derivative = sp.diff(parsed, _real_symbol(variable))
        except Exception as exc:
            raise InvalidExpressionError(f"Cannot differentiate {expr!r}: {exc}") from exc
        return sp.sstr(derivative)


def compile_objective(
    expr: str,
    start: float,
    variable: str = "x",
    engine: Optional[ExpressionEngine] = None,
) -> tuple[ScalarFunction, ScalarFunction]:
    """Compile ``expr`` and its derivative, evaluating both at ``start``.

    Raises:
        InvalidExpressionError: If parsing or differentiation fails, or if
            either callable cannot produce a finite real value at ``start``.
    """
    engine = engine or SympyEngine()
    fun = engine.compile(expr, variable)
    derivative = engine.compile(engine.differentiate(expr, variable), variable)
    for label, func in (("function", fun), ("derivative", derivative)):
        try:
            value = func(start)
        except InvalidExpressionError:
            raise
        except (ArithmeticError, ValueError, TypeError, NameError) as exc:
            raise InvalidExpressionError(
                f"Cannot evaluate {label} of {expr!r} at {start}: {exc}"
            ) from exc
        if not math.isfinite(value):
            raise InvalidExpressionError(
                f"The {label} of {expr!r} is not finite at {start}"
            )
    return fun, derivative


__all__ = ["ExpressionEngine", "SympyEngine", "compile_objective"]
