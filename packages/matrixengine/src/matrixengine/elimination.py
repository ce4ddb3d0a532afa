"""
Row elimination: Gauss-Jordan inverse and forward-elimination rank.

Both work on a private float64 copy and share the row-swap and pivot
search helpers below. The two routines pick pivots differently:

    inverse  largest |x| in the column at or below the diagonal (partial pivoting)
    rank     first |x| > tol at or below the current pivot row
"""

from typing import Optional

import numpy as np

from matrixengine import config
from matrixengine.cofactor import determinant
from matrixengine.errors import NotSquare, Singular
from matrixengine.matrix import Matrix


# ---------------------------------------------------------------------------
# Pivot helpers
# ---------------------------------------------------------------------------

def _swap_rows(a: np.ndarray, i: int, k: int):
    if i != k:
        a[[i, k]] = a[[k, i]]


def _largest_pivot(a: np.ndarray, col: int, start: int) -> int:
    """Row index >= start with the largest |a[row, col]|. First one wins ties."""
    return start + int(np.argmax(np.abs(a[start:, col])))


def _first_pivot(a: np.ndarray, col: int, start: int, tol: float) -> Optional[int]:
    """First row index >= start with |a[row, col]| > tol, or None."""
    candidates = np.flatnonzero(np.abs(a[start:, col]) > tol)
    if len(candidates) == 0:
        return None
    return start + int(candidates[0])


# ---------------------------------------------------------------------------
# Inverse
# ---------------------------------------------------------------------------

def inverse(matrix: Matrix) -> Matrix:
    """
    Gauss-Jordan inverse of [A | I] with partial pivoting.

    Singularity is decided once, from the cofactor determinant, before any
    elimination. Pivot magnitudes are not re-checked afterwards.

    Raises
    ------
    NotSquare
        If the matrix is not square.
    Singular
        If |det| < 1e-10.
    """
    if not matrix.is_square:
        raise NotSquare(
            f"Inverse only defined for square matrices, got {matrix.rows}x{matrix.cols}"
        )

    det = determinant(matrix)
    if abs(det) < config.get('tolerance.singular'):
        raise Singular(f"Matrix is singular (determinant is {det:g})")

    n = matrix.rows
    augmented = np.hstack([matrix.data, np.eye(n)])

    for i in range(n):
        _swap_rows(augmented, i, _largest_pivot(augmented, i, i))

        # Pivot becomes exactly 1
        augmented[i] /= augmented[i, i]

        for k in range(n):
            if k != i:
                factor = augmented[k, i]
                augmented[k] -= factor * augmented[i]

    return Matrix(n, n, augmented[:, n:])


# ---------------------------------------------------------------------------
# Rank
# ---------------------------------------------------------------------------

def rank(matrix: Matrix) -> int:
    """
    Number of pivots found by forward elimination.

    No back-substitution and no row normalisation. Works for any shape.
    """
    work = matrix.data.copy()
    m, n = work.shape
    tol = config.get('tolerance.rank_pivot')
    pivots = 0

    for col in range(n):
        if pivots >= m:
            break

        pivot_row = _first_pivot(work, col, pivots, tol)
        if pivot_row is None:
            continue

        _swap_rows(work, pivots, pivot_row)

        for row in range(pivots + 1, m):
            factor = work[row, col] / work[pivots, col]
            work[row, col:] -= factor * work[pivots, col:]

        pivots += 1

    return pivots
