"""
Square matrices for affine transforms.

4x4 matrices carry every transform in the tracer; 3x3 and 2x2 matrices only
appear as submatrices while the determinant is expanded by cofactors.
"""

from __future__ import annotations
from typing import Optional, Sequence, Union
import numpy as np

from .tuples import EPSILON, Tuple4


class NonInvertibleMatrixError(ValueError):
    """A transform that must be inverted has a zero determinant."""
    pass


class Matrix:
    """A fixed-size square matrix of floats (2x2, 3x3 or 4x4)."""

    __slots__ = ('_data',)

    def __init__(self, rows: Sequence[Sequence[float]]):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] not in (2, 3, 4):
            raise ValueError(f"Matrix must be 2x2, 3x3 or 4x4, got shape {data.shape}")
        self._data = data

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Matrix:
        m = cls.__new__(cls)
        m._data = np.asarray(arr, dtype=np.float64)
        return m

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls.from_array(np.identity(size, dtype=np.float64))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._data[key])

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(f"{v:.5f}" for v in row) + "]" for row in self._data
        )
        return f"Matrix([{rows}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.allclose(self._data, other._data, atol=EPSILON))

    __hash__ = None

    def __mul__(self, other: Union[Matrix, Tuple4]) -> Union[Matrix, Tuple4]:
        """Matrix product, or transform of a Point/Vector (same kind returned)."""
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix.from_array(self._data @ other._data)
        if isinstance(other, Tuple4):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices transform points and vectors")
            return type(other).from_array(self._data @ other._data)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self) -> Matrix:
        return Matrix.from_array(self._data.T.copy())

    def submatrix(self, row: int, col: int) -> Matrix:
        """Copy of this matrix with one row and one column removed."""
        if self.size == 2:
            raise ValueError("A 2x2 matrix has no square submatrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix.from_array(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if self.size == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(
            float(self._data[0, col]) * self.cofactor(0, col)
            for col in range(self.size)
        )

    @property
    def invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> Optional[Matrix]:
        """Inverse via the adjugate, or None when the determinant is zero."""
        det = self.determinant()
        if det == 0:
            return None

        n = self.size
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # transposed: cofactor(row, col) lands at [col, row]
                result[col, row] = self.cofactor(row, col) / det
        return Matrix.from_array(result)

    def inverse_or_raise(self) -> Matrix:
        """Inverse of a transform that is required to be invertible."""
        inv = self.inverse()
        if inv is None:
            raise NonInvertibleMatrixError(f"Transform is not invertible: {self!r}")
        return inv

    # Fluent transforms: each primitive is left-multiplied onto this matrix,
    # so a chain applies its steps in the order they are written.

    def translation(self, x: float, y: float, z: float) -> Matrix:
        from . import transformations
        return transformations.translation(x, y, z) * self

    def scaling(self, x: float, y: float, z: float) -> Matrix:
        from . import transformations
        return transformations.scaling(x, y, z) * self

    def rotation_x(self, radians: float) -> Matrix:
        from . import transformations
        return transformations.rotation_x(radians) * self

    def rotation_y(self, radians: float) -> Matrix:
        from . import transformations
        return transformations.rotation_y(radians) * self

    def rotation_z(self, radians: float) -> Matrix:
        from . import transformations
        return transformations.rotation_z(radians) * self

    def shearing(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        from . import transformations
        return transformations.shearing(xy, xz, yx, yz, zx, zy) * self

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


IDENTITY = Matrix.identity(4)
