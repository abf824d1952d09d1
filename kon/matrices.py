"""Square row-major matrices of size two, three and four."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from kon.vectors import Vector2, Vector3, Vector4

SUPPORTED_SIZES = (2, 3, 4)

_VECTOR_BY_SIZE = {2: Vector2, 3: Vector3, 4: Vector4}


class Matrix:
    """An immutable square matrix stored row by row."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        table = tuple(tuple(row) for row in rows)
        n = len(table)
        if n not in SUPPORTED_SIZES:
            raise ValueError(f"matrix size must be one of {SUPPORTED_SIZES}")
        if any(len(row) != n for row in table):
            raise ValueError("matrix must be square")
        self._rows = table

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    @property
    def size(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self._rows == other._rows
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """The product ``a * b`` of two matrices of the same size."""
    if a.size != b.size:
        raise ValueError("matrices must have the same size")
    columns = tuple(zip(*b.rows))
    return Matrix(
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    )


def matrix_multiply_vec(matrix: Matrix, vector):
    """The product of ``matrix`` with a column vector of the same size."""
    expected = _VECTOR_BY_SIZE[matrix.size]
    if not isinstance(vector, expected):
        raise TypeError(f"a {matrix.size}x{matrix.size} matrix needs a {expected.__name__}")
    components = tuple(vector)
    return expected(*(sum(m * v for m, v in zip(row, components)) for row in matrix))


def matrix_identity(size: int) -> Matrix:
    """The identity matrix of the given size."""
    if size not in SUPPORTED_SIZES:
        raise ValueError(f"matrix size must be one of {SUPPORTED_SIZES}")
    return Matrix([1 if i == j else 0 for j in range(size)] for i in range(size))


def matrix_norm(matrix: Matrix) -> float:
    """The Frobenius norm: the root of the sum of squared entries."""
    return math.sqrt(sum(v * v for row in matrix for v in row))


def format_matrix(matrix: Matrix) -> str:
    """Render each row as comma-terminated entries, one row per line."""
    return "".join(
        "".join(f"{value:g}, " for value in row) + "\n" for row in matrix
    )