"""Small OpenGL math helpers: vectors and 4x4 column-major matrices.

Matrices are flat ``float32`` arrays of 16 elements stored column by
column, the layout OpenGL expects for ``glUniformMatrix4fv`` with
``transpose=False``.  Elements 12..15 hold the translation column.
Vectors are ``float32`` arrays of length 2, 3 or 4.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

Number = Union[int, float]
VectorLike = Union[Sequence[float], np.ndarray]

_DTYPE = np.float32


def _vec(v: VectorLike, sizes: tuple[int, ...] = (2, 3, 4)) -> np.ndarray:
    arr = np.asarray(v, dtype=_DTYPE)
    if arr.ndim != 1 or arr.shape[0] not in sizes:
        raise ValueError(
            f"expected a vector with one of {sizes} components, got shape {arr.shape}"
        )
    return arr


def _mat(m: VectorLike) -> np.ndarray:
    arr = np.array(m, dtype=_DTYPE)
    if arr.shape == (4, 4):
        arr = arr.reshape(16)
    if arr.shape != (16,):
        raise ValueError(f"expected a 16-element matrix, got shape {arr.shape}")
    return arr


def clamp(value, min_val, max_val):
    """Clamp a number or each component of a vector between two bounds.

    The bounds may be numbers or, for vectors, vectors of the same size.
    """
    if np.ndim(value) == 0:
        lower = value if value > min_val else min_val
        return float(lower if lower < max_val else max_val)
    v = _vec(value)
    lo = min_val if np.ndim(min_val) == 0 else _vec(min_val, (v.shape[0],))
    hi = max_val if np.ndim(max_val) == 0 else _vec(max_val, (v.shape[0],))
    lower = np.where(v > lo, v, lo)
    return np.where(lower < hi, lower, hi).astype(_DTYPE)


def translate(m, v) -> np.ndarray:
    """Return matrix ``m`` translated by the 3-vector ``v``."""
    result = _mat(m)
    x, y, z = _vec(v, (3,))
    result[12:16] = result[12:16] + result[0:4] * x + result[4:8] * y + result[8:12] * z
    return result


def dot(a, b) -> float:
    """Dot product of two vectors of equal size."""
    va = _vec(a)
    vb = _vec(b, (va.shape[0],))
    return float(np.dot(va, vb))


def norm2(v) -> float:
    """Squared Euclidean length of a vector."""
    return dot(v, v)


def norm(v) -> float:
    """Euclidean length of a vector."""
    return float(np.sqrt(_DTYPE(norm2(v))))


def length(v) -> float:
    """Euclidean length of a vector."""
    return norm(v)


def identity() -> np.ndarray:
    """Return a 4x4 identity matrix."""
    return np.eye(4, dtype=_DTYPE).reshape(16)


def normalize(v) -> np.ndarray:
    """Return the unit vector of a 2- or 3-vector; the zero vector stays zero."""
    arr = _vec(v, (2, 3))
    n = _DTYPE(norm(arr))
    if n == 0.0:
        return np.zeros_like(arr)
    return (arr * (_DTYPE(1.0) / n)).astype(_DTYPE)


def scale(m, v) -> np.ndarray:
    """Return matrix ``m`` scaled along its first three axes by the 3-vector ``v``."""
    result = _mat(m)
    x, y, z = _vec(v, (3,))
    result[0:4] *= x
    result[4:8] *= y
    result[8:12] *= z
    return result


def ortho(left, right, bottom, top, near_val, far_val) -> np.ndarray:
    """Build an orthographic projection matrix."""
    left, right, bottom, top = (_DTYPE(x) for x in (left, right, bottom, top))
    near_val, far_val = _DTYPE(near_val), _DTYPE(far_val)
    if right == left or top == bottom or far_val == near_val:
        raise ValueError("clipping planes must not coincide")
    proj = identity()
    proj[0] = 2 / (right - left)
    proj[5] = 2 / (top - bottom)
    proj[10] = -1
    proj[12] = -(right + left) / (right - left)
    proj[13] = -(top + bottom) / (top - bottom)
    proj[14] = -near_val / (far_val - near_val)
    return proj


def mat_mul(a, b) -> np.ndarray:
    """Multiply two 16-element matrices as 4x4 matrices."""
    ma = _mat(a).reshape(4, 4)
    mb = _mat(b).reshape(4, 4)
    return (ma @ mb).astype(_DTYPE).reshape(16)


def rotate(m, angle, axis) -> np.ndarray:
    """Rotate matrix ``m`` by ``angle`` radians around ``axis``."""
    src = _mat(m)
    c = _DTYPE(math.cos(angle))
    s = _DTYPE(math.sin(angle))
    ax = normalize(_vec(axis, (3,)))
    temp = (_DTYPE(1) - c) * ax

    r0 = c + temp[0] * ax[0]
    r1 = temp[0] * ax[1] + s * ax[2]
    r2 = temp[0] * ax[2] - s * ax[1]

    r4 = temp[1] * ax[0] - s * ax[2]
    r5 = c + temp[1] * ax[1]
    r6 = temp[1] * ax[2] + s * ax[0]

    r8 = temp[2] * ax[0] + s * ax[1]
    r9 = temp[2] * ax[1] - s * ax[0]
    ra = c + temp[2] * ax[2]

    col0, col1, col2 = src[0:4], src[4:8], src[8:12]
    result = np.empty(16, dtype=_DTYPE)
    result[0:4] = col0 * r0 + col1 * r1 + col2 * r2
    result[4:8] = col0 * r4 + col1 * r5 + col2 * r6
    result[8:12] = col0 * r8 + col1 * r9 + col2 * ra
    result[12:16] = src[12:16]
    return result


def rotate_z(m, angle) -> np.ndarray:
    """Rotate matrix ``m`` around the Z axis by ``angle`` radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    r = [
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    return mat_mul(m, r)


def rotate_y(m, angle) -> np.ndarray:
    """Rotate matrix ``m`` around the Y axis by ``angle`` radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    r = [
        c, 0.0, -s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    return mat_mul(m, r)


def sprite_model(position, size, angle) -> np.ndarray:
    """Model matrix for a unit quad placed at ``position``, scaled to ``size``
    and rotated by ``angle`` radians around its centre."""
    px, py = _vec(position, (2,))
    sx, sy = _vec(size, (2,))
    model = identity()
    model = translate(model, (px, py, 0.0))
    model = translate(model, (0.5 * sx, 0.5 * sy, 0.0))
    model = rotate(model, angle, (0.0, 0.0, 1.0))
    model = translate(model, (-0.5 * sx, -0.5 * sy, 0.0))
    return scale(model, (sx, sy, 1.0))