"""Axis-aligned cubes spanning -1..1 on every axis."""

from __future__ import annotations

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import vector
from .shape import Shape, ShapeType


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero gives an infinity or NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _max(a: float, b: float) -> float:
    return b if a < b else a


def _min(a: float, b: float) -> float:
    return b if b < a else a


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Entry and exit distances of a ray against the slab -1..1 on one axis."""
    tmin = _ieee_div(-1 - origin, direction)
    tmax = _ieee_div(1 - origin, direction)
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    type = ShapeType.CUBE

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xt = check_axis(ray.origin[0], ray.direction[0])
        yt = check_axis(ray.origin[1], ray.direction[1])
        zt = check_axis(ray.origin[2], ray.direction[2])

        tmin = _max(xt[0], _max(yt[0], zt[0]))
        tmax = _min(xt[1], _min(yt[1], zt[1]))

        if tmin > tmax:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        ax, ay, az = abs(point[0]), abs(point[1]), abs(point[2])
        maxc = _max(ax, _max(ay, az))
        if maxc == ax:
            return vector(point[0], 0, 0)
        if maxc == ay:
            return vector(0, point[1], 0)
        return vector(0, 0, point[2])