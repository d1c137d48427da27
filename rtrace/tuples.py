"""Homogeneous points and vectors stored as 4-element numpy arrays."""

from __future__ import annotations

import math

import numpy as np

PI = math.pi
SQRT2 = math.sqrt(2.0)
SQRT3 = math.sqrt(3.0)
EPS = 1e-6
INF = math.inf


def point(x: float, y: float, z: float) -> np.ndarray:
    """Return a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=float)


def vector(x: float, y: float, z: float) -> np.ndarray:
    """Return a vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=float)


def is_point(t: np.ndarray) -> bool:
    return bool(t[3] == 1.0)


def is_vector(t: np.ndarray) -> bool:
    return bool(t[3] == 0.0)


def magnitude(t: np.ndarray) -> float:
    return float(np.linalg.norm(t))


def normalize(v: np.ndarray) -> np.ndarray:
    """Return the unit vector along ``v``; a zero vector is returned unchanged."""
    norm = np.linalg.norm(v)
    if norm == 0:
        return np.array(v, dtype=float)
    return v / norm


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(a, b))


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cross product of the xyz parts; the result is a vector."""
    c = np.cross(a[:3], b[:3])
    return vector(c[0], c[1], c[2])


def reflect(incoming: np.ndarray, normal: np.ndarray) -> np.ndarray:
    """Reflect ``incoming`` about ``normal``."""
    return incoming - normal * 2 * dot(incoming, normal)