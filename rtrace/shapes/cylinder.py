"""Cylinders of radius 1 around the y axis, optionally truncated and capped."""

from __future__ import annotations

import math

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import EPS, INF, vector
from .shape import Shape, ShapeType


class CylinderBase(Shape):
    """Shared state of shapes bounded between ``min`` and ``max`` along y."""

    def __init__(
        self,
        minimum: float = -INF,
        maximum: float = INF,
        closed: bool = False,
        *,
        material=None,
        transform=None,
    ) -> None:
        super().__init__(material=material, transform=transform)
        self.min = minimum
        self.max = maximum
        self.closed = closed

    @staticmethod
    def check_cap(ray: Ray, t: float, cap: float = 1.0) -> bool:
        """Whether the ray at ``t`` lies within radius ``cap`` of the y axis."""
        x = ray.origin[0] + t * ray.direction[0]
        z = ray.origin[2] + t * ray.direction[2]
        return bool(x * x + z * z <= cap * cap)


class Cylinder(CylinderBase):
    type = ShapeType.CYLINDER

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dx, dy, dz = ray.direction[0], ray.direction[1], ray.direction[2]
        ox, oy, oz = ray.origin[0], ray.origin[1], ray.origin[2]

        a = dx * dx + dz * dz
        # Parallel to the y axis: only the caps can be hit.
        if a < EPS:
            return self.intersect_caps(ray)

        b = 2 * ox * dx + 2 * oz * dz
        c = ox * ox + oz * oz - 1
        disc = b * b - 4 * a * c
        if disc < 0:
            return []

        root = math.sqrt(disc)
        t0 = (-b - root) / (2 * a)
        t1 = (-b + root) / (2 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        xs: list[Intersection] = []
        y0 = oy + t0 * dy
        if self.min < y0 < self.max:
            xs.append(Intersection(t0, self))
        y1 = oy + t1 * dy
        if self.min < y1 < self.max:
            xs.append(Intersection(t1, self))

        xs.extend(self.intersect_caps(ray))
        return xs

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        dist_sq = point[0] ** 2 + point[2] ** 2
        if dist_sq < 1 and point[1] >= self.max - EPS:
            return vector(0, 1, 0)
        if dist_sq < 1 and point[1] <= self.min + EPS:
            return vector(0, -1, 0)
        return vector(point[0], 0, point[2])

    def intersect_caps(self, ray: Ray) -> list[Intersection]:
        """Intersections with the end caps of a closed cylinder."""
        if not self.closed or abs(ray.direction[1]) < EPS:
            return []
        xs: list[Intersection] = []
        tmin = (self.min - ray.origin[1]) / ray.direction[1]
        if self.check_cap(ray, tmin):
            xs.append(Intersection(tmin, self))
        tmax = (self.max - ray.origin[1]) / ray.direction[1]
        if self.check_cap(ray, tmax):
            xs.append(Intersection(tmax, self))
        return xs