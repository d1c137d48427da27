"""Unit spheres centred at the origin."""

from __future__ import annotations

import math

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from ..tuples import dot
from ..tuples import point as make_point
from .shape import Shape, ShapeType


class Sphere(Shape):
    type = ShapeType.SPHERE

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_to_ray = ray.origin - make_point(0, 0, 0)
        a = dot(ray.direction, ray.direction)
        b = dot(ray.direction, sphere_to_ray) * 2
        c = dot(sphere_to_ray, sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []
        root = math.sqrt(discriminant)
        two_a = 2 * a
        return [Intersection((-b - root) / two_a, self), Intersection((-b + root) / two_a, self)]

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        return point - make_point(0, 0, 0)


def glass_sphere() -> Sphere:
    """A fully transparent sphere with the refractive index of glass."""
    s = Sphere()
    s.material.transparency = 1.0
    s.material.refractive_index = 1.5
    return s