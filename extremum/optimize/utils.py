"""Finite differences and dense linear algebra helpers.

These utilities are deterministic, pure NumPy implementations intended for
the small dense problems the Newton driver works with. No adaptive step
selection is attempted: every derivative uses the fixed step ``FD_STEP``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import FD_STEP, PIVOT_TOL, Array, Objective


def approx_grad(
    fun: Objective, x: Array, eps: float = FD_STEP, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    return_evals:
        Also return the number of objective evaluations (``2 * d``).
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).copy()
    grad = np.zeros_like(x, dtype=float)
    evals = 0
    for i in range(x.size):
        ei = np.zeros_like(x)
        ei[i] = eps
        grad[i] = (fun(x + ei) - fun(x - ei)) / (2.0 * eps)
        evals += 2
    if return_evals:
        return grad, evals
    return grad


def approx_hessian(
    fun: Objective, x: Array, eps: float = FD_STEP, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Approximate the Hessian with the four-point central difference.

    Every entry, diagonal included, is computed independently from
    ``f(x+ei+ej) - f(x+ei-ej) - f(x-ei+ej) + f(x-ei-ej)``; the result is not
    symmetrized. This costs ``4 d**2`` evaluations.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    n = x.size
    hess = np.zeros((n, n), dtype=float)
    evals = 0
    for i in range(n):
        ei = np.zeros_like(x)
        ei[i] = eps
        for j in range(n):
            ej = np.zeros_like(x)
            ej[j] = eps
            f_pp = fun(x + ei + ej)
            f_pm = fun(x + ei - ej)
            f_mp = fun(x - ei + ej)
            f_mm = fun(x - ei - ej)
            evals += 4
            hess[i, j] = (f_pp - f_pm - f_mp + f_mm) / (4 * eps**2)
    if return_evals:
        return hess, evals
    return hess


def invert(mat: Array, pivot_tol: float = PIVOT_TOL) -> Optional[Array]:
    """Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Returns ``None`` when a pivot smaller than ``pivot_tol`` in absolute value
    is met, i.e. when the matrix is numerically singular.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}")
    n = mat.shape[0]
    aug = np.hstack([mat, np.eye(n)])
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(aug[col:, col])))
        if pivot_row != col:
            aug[[col, pivot_row]] = aug[[pivot_row, col]]
        pivot = aug[col, col]
        if abs(pivot) < pivot_tol:
            return None
        aug[col, col:] /= pivot
        for row in range(n):
            if row != col:
                aug[row, col:] -= aug[row, col] * aug[col, col:]
    return aug[:, n:].copy()


__all__ = ["approx_grad", "approx_hessian", "invert"]
