"""Affine transforms as 4x4 numpy matrices."""

from __future__ import annotations

import math
from functools import reduce

import numpy as np

from .tuples import cross, normalize


def identity() -> np.ndarray:
    return np.eye(4)


def translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = (x, y, z)
    return m


def scaling(x: float, y: float | None = None, z: float | None = None) -> np.ndarray:
    """Scale by ``(x, y, z)``; with one argument the scale is uniform."""
    if y is None:
        y = x
    if z is None:
        z = x
    return np.diag([x, y, z, 1.0]).astype(float)


def rotation_x(rad: float) -> np.ndarray:
    c, s = math.cos(rad), math.sin(rad)
    m = np.eye(4)
    m[1:3, 1:3] = [[c, -s], [s, c]]
    return m


def rotation_y(rad: float) -> np.ndarray:
    c, s = math.cos(rad), math.sin(rad)
    m = np.eye(4)
    m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
    return m


def rotation_z(rad: float) -> np.ndarray:
    c, s = math.cos(rad), math.sin(rad)
    m = np.eye(4)
    m[0:2, 0:2] = [[c, -s], [s, c]]
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> np.ndarray:
    m = np.eye(4)
    m[0, 1], m[0, 2] = xy, xz
    m[1, 0], m[1, 2] = yx, yz
    m[2, 0], m[2, 1] = zx, zy
    return m


def chain(*args: np.ndarray) -> np.ndarray:
    """Multiply transforms left to right; the rightmost is applied first."""
    return reduce(np.matmul, args, identity())


def view_transform(from_point: np.ndarray, to_point: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Transform that orients the world as seen from ``from_point`` towards ``to_point``."""
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.eye(4)
    orientation[0, :3] = left[:3]
    orientation[1, :3] = true_up[:3]
    orientation[2, :3] = -forward[:3]
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])