"""The infinite xz plane."""

from __future__ import annotations

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import EPS, vector
from .shape import Shape, ShapeType


class Plane(Shape):
    type = ShapeType.PLANE

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        return vector(0, 1, 0)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        if abs(ray.direction[1]) < EPS:
            return []
        return [Intersection(-ray.origin[1] / ray.direction[1], self)]