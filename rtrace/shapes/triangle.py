"""Flat and smooth triangles."""

from __future__ import annotations

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import EPS, cross, dot, normalize, point, vector
from .shape import Shape


class Triangle(Shape):
    """A flat triangle through three points."""

    def __init__(
        self,
        p1: np.ndarray,
        p2: np.ndarray,
        p3: np.ndarray,
        *,
        material=None,
        transform=None,
    ) -> None:
        super().__init__(material=material, transform=transform)
        self.p1 = np.asarray(p1, dtype=float)
        self.p2 = np.asarray(p2, dtype=float)
        self.p3 = np.asarray(p3, dtype=float)
        self.e1 = self.p2 - self.p1
        self.e2 = self.p3 - self.p1
        self.normal = normalize(cross(self.e2, self.e1))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dir_cross_e2 = cross(ray.direction, self.e2)
        det = dot(self.e1, dir_cross_e2)
        if abs(det) < EPS:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * dot(p1_to_origin, dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = cross(p1_to_origin, self.e1)
        v = f * dot(ray.direction, origin_cross_e1)
        if v < 0 or u + v > 1:
            return []

        t = f * dot(self.e2, origin_cross_e1)
        return [Intersection(t, self, u, v)]

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        return self.normal


class SmoothTriangle(Triangle):
    """A triangle carrying a normal at each vertex."""

    def __init__(
        self,
        p1: np.ndarray,
        p2: np.ndarray,
        p3: np.ndarray,
        n1: np.ndarray,
        n2: np.ndarray,
        n3: np.ndarray,
        *,
        material=None,
        transform=None,
    ) -> None:
        super().__init__(p1, p2, p3, material=material, transform=transform)
        self.n1 = np.asarray(n1, dtype=float)
        self.n2 = np.asarray(n2, dtype=float)
        self.n3 = np.asarray(n3, dtype=float)

    @staticmethod
    def default() -> SmoothTriangle:
        return SmoothTriangle(
            point(0, 1, 0),
            point(-1, 0, 0),
            point(1, 0, 0),
            vector(0, 1, 0),
            vector(-1, 0, 0),
            vector(1, 0, 0),
        )

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        return vector(0, 0, 0)