"""
Matrix value type.

A 2-D float64 matrix that exclusively owns its buffer. Every operation
except `set` returns a new Matrix; nothing aliases another Matrix's storage.

Arithmetic lives here. The heavier analysis routines live in their own
modules and are reached through the delegating methods at the bottom:

    determinant  → matrixengine.cofactor
    inverse/rank → matrixengine.elimination
    eigenvalues  → matrixengine.eigen
"""

import operator
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from matrixengine import config
from matrixengine.errors import DimensionMismatch, IndexOutOfRange


class Matrix:
    """
    Row-major 2-D matrix of floats.

    Parameters
    ----------
    rows, cols : int
        Shape, both >= 1.
    data : array-like, optional
        (rows, cols) values. Copied, never referenced. Zeros if None.
    """

    __hash__ = None  # mutable through set()

    def __init__(self, rows: int, cols: int, data: Any = None):
        rows, cols = int(rows), int(cols)
        if rows < 1 or cols < 1:
            raise DimensionMismatch(f"Matrix shape must be at least 1x1, got {rows}x{cols}")

        if data is None:
            buffer = np.zeros((rows, cols), dtype=np.float64)
        else:
            try:
                buffer = np.array(data, dtype=np.float64)
            except ValueError as e:
                raise DimensionMismatch(
                    f"Data does not form a ({rows}, {cols}) grid: {e}"
                ) from e
            if buffer.shape != (rows, cols):
                raise DimensionMismatch(
                    f"Data of shape {buffer.shape} does not match declared shape ({rows}, {cols})"
                )
        self.data = buffer

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def _check_index(self, i: int, j: int) -> Tuple[int, int]:
        try:
            i, j = operator.index(i), operator.index(j)
        except TypeError as e:
            raise IndexOutOfRange(f"Index ({i!r}, {j!r}) is not an integer pair") from e
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexOutOfRange(
                f"Index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix"
            )
        return i, j

    def get(self, i: int, j: int) -> float:
        i, j = self._check_index(i, j)
        return float(self.data[i, j])

    def set(self, i: int, j: int, value: float):
        i, j = self._check_index(i, j)
        self.data[i, j] = value

    def clone(self) -> 'Matrix':
        return Matrix(self.rows, self.cols, self.data)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_record(self) -> Dict[str, Any]:
        """Plain structural form: {'rows', 'cols', 'data'} with nested float lists."""
        return {
            'rows': self.rows,
            'cols': self.cols,
            'data': self.data.tolist(),
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Matrix':
        return cls(record['rows'], record['cols'], record['data'])

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def _require_same_shape(self, other: 'Matrix', operation: str):
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"Matrices must have the same dimensions for {operation}: "
                f"{self.rows}x{self.cols} vs {other.rows}x{other.cols}"
            )

    def add(self, other: 'Matrix') -> 'Matrix':
        self._require_same_shape(other, 'addition')
        return Matrix(self.rows, self.cols, self.data + other.data)

    def subtract(self, other: 'Matrix') -> 'Matrix':
        self._require_same_shape(other, 'subtraction')
        return Matrix(self.rows, self.cols, self.data - other.data)

    def scalar_multiply(self, scalar: float) -> 'Matrix':
        return Matrix(self.rows, self.cols, self.data * scalar)

    def multiply(self, other: 'Matrix') -> 'Matrix':
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"Cannot multiply: columns of first matrix ({self.cols}) "
                f"must equal rows of second matrix ({other.rows})"
            )
        return Matrix(self.rows, other.cols, self.data @ other.data)

    def transpose(self) -> 'Matrix':
        return Matrix(self.cols, self.rows, self.data.T)

    def apply_function(self, func: Callable[[float, int, int], float]) -> 'Matrix':
        """
        Map every cell through func(value, row, col).

        func must be pure: it sees one cell at a time and its result
        becomes the corresponding cell of a new Matrix.
        """
        result = Matrix(self.rows, self.cols)
        for i in range(self.rows):
            for j in range(self.cols):
                result.data[i, j] = func(float(self.data[i, j]), i, j)
        return result

    # ------------------------------------------------------------------
    # Analysis (delegated)
    # ------------------------------------------------------------------

    def determinant(self) -> float:
        from matrixengine.cofactor import determinant
        return determinant(self)

    def inverse(self) -> 'Matrix':
        from matrixengine.elimination import inverse
        return inverse(self)

    def rank(self) -> int:
        from matrixengine.elimination import rank
        return rank(self)

    def eigenvalues(self) -> List[float]:
        from matrixengine.eigen import eigenvalues
        return eigenvalues(self)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def allclose(self, other: 'Matrix', atol: float = 1e-9) -> bool:
        """Same shape and every cell within atol."""
        return self.shape == other.shape and bool(
            np.allclose(self.data, other.data, rtol=0.0, atol=atol)
        )

    def __str__(self) -> str:
        precision = config.get('display.precision')
        lines = []
        for row in self.data:
            cells = ' '.join(f'{value:.{precision}f}' for value in row)
            lines.append(f'[ {cells} ]')
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Matrix(rows={self.rows}, cols={self.cols})'

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls, n: int) -> 'Matrix':
        return cls(n, n, np.eye(n))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> 'Matrix':
        return cls(rows, cols)

    @classmethod
    def ones(cls, rows: int, cols: int) -> 'Matrix':
        return cls(rows, cols, np.ones((rows, cols)))

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        low: float,
        high: float,
        rng: Optional[np.random.Generator] = None,
    ) -> 'Matrix':
        """
        Uniform values from [low, high), rounded to 2 decimals.

        Rounding can land a cell exactly on `high`.
        """
        if not low < high:
            raise ValueError(f"low must be less than high, got low={low}, high={high}")
        if rng is None:
            rng = np.random.default_rng()
        values = rng.uniform(low, high, size=(int(rows), int(cols)))
        return cls(rows, cols, np.round(values, config.get('random.decimals')))
