"""Double-napped cones around the y axis."""

from __future__ import annotations

import math

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import EPS, INF, vector
from .cylinder import CylinderBase
from .shape import ShapeType


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero gives an infinity or NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


class Cone(CylinderBase):
    type = ShapeType.CONE

    def __init__(
        self,
        minimum: float = -INF,
        maximum: float = INF,
        closed: bool = False,
        *,
        material=None,
        transform=None,
    ) -> None:
        super().__init__(minimum, maximum, closed, material=material, transform=transform)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dx, dy, dz = ray.direction[0], ray.direction[1], ray.direction[2]
        ox, oy, oz = ray.origin[0], ray.origin[1], ray.origin[2]

        a = dx * dx - dy * dy + dz * dz
        b = 2 * (ox * dx - oy * dy + oz * dz)
        c = ox * ox - oy * oy + oz * oz

        xs: list[Intersection] = []

        # The ray is parallel to one of the cone's halves.
        if abs(a) < EPS and abs(b) > EPS:
            xs.append(Intersection(float(-c / (2 * b)), self))

        disc = b * b - 4 * a * c
        if disc >= 0:
            root = math.sqrt(disc)
            t0 = _ieee_div(-b - root, 2 * a)
            t1 = _ieee_div(-b + root, 2 * a)
            if t0 > t1:
                t0, t1 = t1, t0

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
        y = math.sqrt(dist_sq)
        if point[1] > 0:
            y = -y
        return vector(point[0], y, point[2])

    def intersect_caps(self, ray: Ray) -> list[Intersection]:
        """Intersections with the end caps of a closed cone."""
        if not self.closed or abs(ray.direction[1]) < EPS:
            return []
        xs: list[Intersection] = []
        tmin = (self.min - ray.origin[1]) / ray.direction[1]
        if self.check_cap(ray, tmin, self.min):
            xs.append(Intersection(tmin, self))
        tmax = (self.max - ray.origin[1]) / ray.direction[1]
        if self.check_cap(ray, tmax, self.max):
            xs.append(Intersection(tmax, self))
        return xs