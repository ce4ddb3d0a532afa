"""
Eigenvalue approximation by the unshifted QR algorithm.

    A_0 = A
    A_k = Q_k R_k          (classical Gram-Schmidt)
    A_{k+1} = R_k Q_k

Stops after 100 iterations, or earlier once the absolute sum of the
off-diagonal entries drops below 1e-10. The diagonal of the last iterate
is returned in matrix-position order (not sorted).

Limitations:
- Real eigenvalues only. Complex pairs never converge; the 100th iterate's
  diagonal is returned as-is.
- No shifts, so repeated or close eigenvalues converge slowly or stall.
- Classical Gram-Schmidt loses orthogonality on ill-conditioned or nearly
  dependent columns. Results for borderline matrices depend on that loss.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from matrixengine import config
from matrixengine.errors import NotSquare
from matrixengine.matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass
class QRDecomposition:
    """Result of a Gram-Schmidt QR decomposition."""
    q: Matrix  # (m, n) orthonormal columns; zero where the column was degenerate
    r: Matrix  # (n, n) upper triangular; diagonal holds the column norms


def qr_decomposition(matrix: Matrix) -> QRDecomposition:
    """
    Classical Gram-Schmidt QR of an (m, n) matrix.

    Each column v = A[:, j] is orthogonalised in turn against the already
    computed Q[:, k], k < j: R[k][j] = Q[:, k] · v, then v -= R[k][j] · Q[:, k].
    No re-orthogonalisation pass. A column whose remaining norm is at most
    1e-10 is left as zeros in Q.
    """
    a = matrix.data
    m, n = a.shape
    tol = config.get('tolerance.qr_norm')

    q = np.zeros((m, n), dtype=np.float64)
    r = np.zeros((n, n), dtype=np.float64)

    for j in range(n):
        v = a[:, j].copy()

        for k in range(j):
            projection = np.dot(q[:, k], v)
            r[k, j] = projection
            v -= projection * q[:, k]

        norm = np.sqrt(np.dot(v, v))
        r[j, j] = norm

        if norm > tol:
            q[:, j] = v / norm

    return QRDecomposition(q=Matrix(m, n, q), r=Matrix(n, n, r))


def _off_diagonal_sum(a: np.ndarray) -> float:
    mask = ~np.eye(a.shape[0], dtype=bool)
    return float(np.sum(np.abs(a[mask])))


def approximate_eigenvalues(matrix: Matrix) -> Dict[str, Any]:
    """
    Run the unshifted QR iteration and report how it ended.

    Parameters
    ----------
    matrix : Matrix
        Square input. Not modified.

    Returns
    -------
    dict with:
        eigenvalues : list of float — diagonal of the final iterate
        iterations : int — QR steps performed (1..100)
        converged : bool — off-diagonal sum fell below tolerance
        off_diagonal : float — off-diagonal absolute sum of the final iterate
    """
    if not matrix.is_square:
        raise NotSquare(
            f"Eigenvalues only defined for square matrices, got {matrix.rows}x{matrix.cols}"
        )

    max_iterations = config.get('eigen.max_iterations')
    tol = config.get('tolerance.eigen_convergence')

    current = matrix.clone()
    iterations = 0
    converged = False
    off_diagonal = _off_diagonal_sum(current.data)

    for iterations in range(1, max_iterations + 1):
        qr = qr_decomposition(current)
        current = qr.r.multiply(qr.q)

        off_diagonal = _off_diagonal_sum(current.data)
        if off_diagonal < tol:
            converged = True
            break

    if converged:
        logger.debug(f"QR iteration converged after {iterations} steps")
    else:
        logger.debug(
            f"QR iteration stopped at cap ({max_iterations}) "
            f"with off-diagonal sum {off_diagonal:.3e}"
        )

    return {
        'eigenvalues': [float(x) for x in np.diag(current.data)],
        'iterations': iterations,
        'converged': converged,
        'off_diagonal': off_diagonal,
    }


def eigenvalues(matrix: Matrix) -> List[float]:
    """Approximated real eigenvalues, in diagonal-position order."""
    return approximate_eigenvalues(matrix)['eigenvalues']
