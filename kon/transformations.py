"""Matrices for translating, scaling, rotating and projecting points."""

from __future__ import annotations

import math

from kon.matrices import Matrix


def trfm_translation(delta) -> Matrix:
    """A translation by ``delta``, stored in the bottom row."""
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [delta.x, delta.y, delta.z, 1.0],
    ])


def trfm_scale(delta) -> Matrix:
    """A scale by ``delta`` along each axis."""
    return Matrix([
        [delta.x, 0, 0, 0],
        [0, delta.y, 0, 0],
        [0, 0, delta.z, 0],
        [0, 0, 0, 1],
    ])


def trfm_rotate_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [1, 0, 0, 0],
        [0, c, s, 0],
        [0, -s, c, 0],
        [0, 0, 0, 1],
    ])


def trfm_rotate_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, 0, -s, 0],
        [0, 1, 0, 0],
        [s, 0, c, 0],
        [0, 0, 0, 1],
    ])


def trfm_rotate_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([
        [c, s, 0, 0],
        [-s, c, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def trfm_orthographic(near: float, far: float, left: float, right: float,
                      top: float, bottom: float) -> Matrix:
    """An orthographic projection of the given box."""
    if left == right or top == bottom or far == near:
        raise ValueError("projection planes must not coincide")
    return Matrix([
        [2 / (left - right), 0, 0, 0],
        [0, 2 / (top - bottom), 0, 0],
        [0, 0, 2 / (far - near), 0],
        [
            -(right + left) / (right - left),
            -(top + bottom) / (top - bottom),
            -(far + near) / (far - near),
            1,
        ],
    ])


def trfm_perspective(fov: float, aspect_ratio: float, near: float,
                     far: float) -> Matrix:
    """A perspective projection with vertical field of view ``fov`` in radians."""
    rad = math.tan(fov / 2)
    if rad == 0 or aspect_ratio == 0:
        raise ValueError("field of view and aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must not coincide")
    return Matrix([
        [1 / (aspect_ratio * rad), 0, 0, 0],
        [0, 1 / rad, 0, 0],
        [0, 0, (far + near) / (far - near), 1],
        [0, 0, (-2 * far * near) / (far - near), 0],
    ])