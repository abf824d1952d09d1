import math

import pytest

from kon.matrices import (
    Matrix,
    format_matrix,
    matrix_identity,
    matrix_multiply,
    matrix_multiply_vec,
    matrix_norm,
)
from kon.vectors import Vector2, Vector3, Vector4

SAMPLES = [
    Matrix([[1.0, 2.0], [3.0, 4.0]]),
    Matrix([[1.0, -2.0, 0.5], [0.0, 3.0, 1.0], [2.0, 2.0, -1.0]]),
    Matrix([[float(i * 4 + j) for j in range(4)] for i in range(4)]),
]


@pytest.mark.parametrize("m", SAMPLES)
def test_identity_is_neutral(m):
    identity = matrix_identity(m.size)
    assert matrix_multiply(identity, m) == m
    assert matrix_multiply(m, identity) == m


def test_multiply_two_by_two():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert matrix_multiply(a, b) == Matrix([[19, 22], [43, 50]])


@pytest.mark.parametrize("size", [2, 3, 4])
def test_identity_norm_is_root_of_size(size):
    assert matrix_norm(matrix_identity(size)) == pytest.approx(math.sqrt(size))


def test_norm_scales_with_entries():
    m = SAMPLES[1]
    doubled = Matrix([[2 * v for v in row] for row in m])
    assert matrix_norm(doubled) == pytest.approx(2 * matrix_norm(m))


@pytest.mark.parametrize(
    "vector", [Vector2(1.0, -2.0), Vector3(3.0, 0.5, 1.0), Vector4(1.0, 2.0, 3.0, 4.0)]
)
def test_identity_times_vector_is_vector(vector):
    assert matrix_multiply_vec(matrix_identity(len(vector)), vector) == vector


def test_multiply_vec_rejects_wrong_size():
    with pytest.raises(TypeError):
        matrix_multiply_vec(matrix_identity(4), Vector3(1, 2, 3))


def test_format_matrix_layout():
    assert format_matrix(matrix_identity(2)) == "1, 0, \n0, 1, \n"


def test_rows_are_indexable():
    m = Matrix([[1, 2], [3, 4]])
    assert m[1] == (3, 4)
    assert m.size == 2
    assert list(m) == [(1, 2), (3, 4)]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3], [4, 5, 6]])


def test_unsupported_size_rejected():
    with pytest.raises(ValueError):
        matrix_identity(5)


def test_multiply_size_mismatch_rejected():
    with pytest.raises(ValueError):
        matrix_multiply(matrix_identity(2), matrix_identity(3))