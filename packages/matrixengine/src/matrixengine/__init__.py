"""
Matrix engine.

A 2-D numeric matrix value type and the algorithms that operate on it.
Pure computation: no I/O, no callbacks out, no shared state between
instances.

Modules:
    matrixengine.matrix       Matrix type, arithmetic, factories, records
    matrixengine.cofactor     Laplace cofactor expansion
    matrixengine.elimination  Gauss-Jordan inverse, forward-elimination rank
    matrixengine.eigen        Gram-Schmidt QR, unshifted QR eigenvalues
    matrixengine.errors       IndexOutOfRange, DimensionMismatch, NotSquare, Singular

Usage:
    from matrixengine import Matrix

    a = Matrix(2, 2, [[4, 7], [2, 6]])
    a.determinant()     # → 10.0
    a.inverse()         # → [[0.6, -0.7], [-0.2, 0.4]]
"""

__version__ = '0.1.0'

from matrixengine.matrix import Matrix
from matrixengine.cofactor import determinant
from matrixengine.elimination import inverse, rank
from matrixengine.eigen import (
    QRDecomposition,
    approximate_eigenvalues,
    eigenvalues,
    qr_decomposition,
)
from matrixengine.errors import (
    DimensionMismatch,
    IndexOutOfRange,
    MatrixError,
    NotSquare,
    Singular,
)

__all__ = [
    '__version__',
    'Matrix',
    'determinant',
    'inverse',
    'rank',
    'eigenvalues',
    'approximate_eigenvalues',
    'qr_decomposition',
    'QRDecomposition',
    'MatrixError',
    'IndexOutOfRange',
    'DimensionMismatch',
    'NotSquare',
    'Singular',
]
