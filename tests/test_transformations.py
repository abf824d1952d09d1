import math

import pytest

from kon.matrices import matrix_identity, matrix_multiply, matrix_multiply_vec
from kon.transformations import (
    trfm_orthographic,
    trfm_perspective,
    trfm_rotate_x,
    trfm_rotate_y,
    trfm_rotate_z,
    trfm_scale,
    trfm_translation,
)
from kon.vectors import Vector3, Vector4

ROTATIONS = [trfm_rotate_x, trfm_rotate_y, trfm_rotate_z]


def _assert_close(a, b):
    for row_a, row_b in zip(a, b):
        assert list(row_a) == pytest.approx(list(row_b), abs=1e-12)


@pytest.mark.parametrize("rotate", ROTATIONS)
def test_zero_rotation_is_identity(rotate):
    assert rotate(0.0) == matrix_identity(4)


@pytest.mark.parametrize("rotate", ROTATIONS)
@pytest.mark.parametrize("angle", [0.3, 1.2, -2.5])
def test_opposite_rotations_cancel(rotate, angle):
    _assert_close(matrix_multiply(rotate(angle), rotate(-angle)), matrix_identity(4))


def test_rotation_preserves_homogeneous_row():
    assert trfm_rotate_x(0.7)[3] == (0, 0, 0, 1)
    assert trfm_rotate_y(0.7)[3] == (0, 0, 0, 1)
    assert trfm_rotate_z(0.7)[3] == (0, 0, 0, 1)


def test_translation_stores_delta_in_bottom_row():
    m = trfm_translation(Vector3(1.0, 2.0, 3.0))
    assert m[3] == (1.0, 2.0, 3.0, 1.0)
    assert m[0] == (1.0, 0.0, 0.0, 0.0)


def test_scale_multiplies_each_axis():
    m = trfm_scale(Vector3(2.0, 3.0, 4.0))
    assert matrix_multiply_vec(m, Vector4(1.0, 1.0, 1.0, 1.0)) == Vector4(2.0, 3.0, 4.0, 1.0)


def test_perspective_layout():
    m = trfm_perspective(math.pi / 2, 2.0, 0.1, 100.0)
    assert m[0][0] == pytest.approx(0.5)
    assert m[1][1] == pytest.approx(1.0)
    assert m[2][3] == 1
    assert m[3][3] == 0


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        trfm_perspective(1.0, 1.0, 5.0, 5.0)


def test_orthographic_keeps_homogeneous_one():
    m = trfm_orthographic(0.1, 10.0, -1.0, 1.0, 1.0, -1.0)
    assert m[3][3] == 1
    assert m[0][1] == 0


def test_orthographic_rejects_degenerate_box():
    with pytest.raises(ValueError):
        trfm_orthographic(0.1, 10.0, 1.0, 1.0, 1.0, -1.0)