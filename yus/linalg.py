"""Right-handed 4x4 matrix helpers for the cube renderer.

Matrices are numpy arrays of shape (4, 4) in standard mathematical layout
(``m[row, col]``) and act on column vectors. The GPU expects column-major
``float32`` data, which :func:`cols_array_2d` and :func:`matrix_bytes` provide.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_EPSILON = 1e-12


def _vec3(value: Sequence[float]) -> np.ndarray:
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
    return vec


def _mat4(matrix) -> np.ndarray:
    mat = np.asarray(matrix, dtype=np.float64)
    if mat.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
    return mat


def _normalize(vec: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length < _EPSILON:
        raise ValueError(f"cannot normalize a zero-length {what}")
    return vec / length


def perspective_rh_gl(fov_y: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to the [-1, 1] range."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if z_near == z_far:
        raise ValueError("near and far planes must differ")
    half_tan = math.tan(0.5 * fov_y)
    if half_tan == 0:
        raise ValueError("field of view must be non-zero")

    f = 1.0 / half_tan
    inv_length = 1.0 / (z_near - z_far)
    result = np.zeros((4, 4), dtype=np.float64)
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = (z_near + z_far) * inv_length
    result[2, 3] = 2.0 * z_near * z_far * inv_length
    result[3, 2] = -1.0
    return result


def look_at_rh(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(target) - eye_v, "view direction")
    side = _normalize(np.cross(forward, _vec3(up)), "side vector (up is parallel to view direction)")
    upward = np.cross(side, forward)

    result = np.identity(4, dtype=np.float64)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -float(np.dot(eye_v, side))
    result[1, 3] = -float(np.dot(eye_v, upward))
    result[2, 3] = float(np.dot(eye_v, forward))
    return result


def translation(offset: Sequence[float]) -> np.ndarray:
    """Matrix that moves points by ``offset``."""
    result = np.identity(4, dtype=np.float64)
    result[:3, 3] = _vec3(offset)
    return result


def cols_array_2d(matrix) -> list[list[float]]:
    """The matrix as a list of its four columns."""
    mat = _mat4(matrix)
    return [[float(value) for value in column] for column in mat.T]


def matrix_bytes(matrix) -> bytes:
    """Column-major little-endian ``float32`` bytes of the matrix (64 bytes)."""
    mat = _mat4(matrix)
    return np.ascontiguousarray(mat.astype("<f4").T).tobytes()