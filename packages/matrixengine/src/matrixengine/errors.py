"""
Matrix engine errors.

Four kinds, all raised synchronously at the call that caused them:

    IndexOutOfRange     get/set outside [0, rows) x [0, cols)
    DimensionMismatch   incompatible shapes (add, subtract, multiply, construction)
    NotSquare           determinant / inverse / eigenvalues on a non-square matrix
    Singular            inverse of a matrix with |det| below tolerance

Each also derives from the builtin (or numpy) exception a caller would
naturally catch for that situation.
"""

import numpy as np


class MatrixError(Exception):
    """Base class for every error raised by the engine."""


class IndexOutOfRange(MatrixError, IndexError):
    pass


class DimensionMismatch(MatrixError, ValueError):
    pass


class NotSquare(MatrixError, ValueError):
    pass


class Singular(MatrixError, np.linalg.LinAlgError):
    pass
