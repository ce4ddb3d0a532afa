"""
Determinant by Laplace (cofactor) expansion along the first row.

    det(M) = Σ_j (-1)^j · M[0][j] · det(minor(0, j))

O(n!). Callers that care about latency bound the size before calling.
The expansion is kept instead of an LU factorisation so the sign pattern
and the exact-zero behaviour on degenerate input stay those of the
cofactor sum.
"""

import numpy as np

from matrixengine.errors import NotSquare
from matrixengine.matrix import Matrix


def determinant(matrix: Matrix) -> float:
    if not matrix.is_square:
        raise NotSquare(
            f"Determinant only defined for square matrices, got {matrix.rows}x{matrix.cols}"
        )
    return float(_cofactor_expansion(matrix.data))


def _cofactor_expansion(a: np.ndarray) -> float:
    n = a.shape[0]

    if n == 1:
        return a[0, 0]
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]

    det = 0.0
    below = a[1:]
    for j in range(n):
        minor = np.delete(below, j, axis=1)
        det += (-1) ** j * a[0, j] * _cofactor_expansion(minor)
    return det
