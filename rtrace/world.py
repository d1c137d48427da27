"""A scene: shapes plus a light, and the shading of rays through it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .color import black, color, white
from .intersection import Computations, Intersection, hit
from .light import PointLight
from .material import lighting
from .ray import Ray
from .shapes.shape import Shape
from .shapes.sphere import Sphere
from .transform import scaling
from .tuples import dot, magnitude, normalize
from .tuples import point as make_point


def _no_light() -> PointLight:
    return PointLight(make_point(0, 0, 0), black())


@dataclass(eq=False)
class World:
    """Shapes lit by a single point light."""

    light: PointLight = field(default_factory=_no_light)
    shapes: list[Shape] = field(default_factory=list)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def __len__(self) -> int:
        return len(self.shapes)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of ``ray`` with every shape, unsorted."""
        return [x for shape in self.shapes for x in shape.intersect(ray)]

    def color_at(self, ray: Ray, remaining: int = 1) -> np.ndarray:
        """Colour seen along ``ray``; black when nothing is hit."""
        h = hit(self.intersect(ray))
        if h is None:
            return black()
        return self.shade_hit(Computations(h, ray), remaining)

    def is_shadowed(self, point: np.ndarray) -> bool:
        """Whether some shape lies between ``point`` and the light."""
        v = self.light.position - point
        distance = magnitude(v)
        h = hit(self.intersect(Ray(point, normalize(v))))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = 1) -> np.ndarray:
        """Colour at a precomputed hit, with reflection and refraction."""
        # over_point keeps rays from starting just below the surface.
        in_shadow = self.is_shadowed(comps.over_point)
        m = comps.obj.material
        surface = lighting(
            m, comps.obj, self.light, comps.over_point, comps.eyev, comps.normal, in_shadow
        )
        reflected = self.reflected(comps, remaining)
        refracted = self.refracted(comps, remaining)

        if m.reflective > 0 and m.transparency > 0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1 - reflectance)
        return surface + reflected + refracted

    def reflected(self, comps: Computations, remaining: int = 1) -> np.ndarray:
        """Colour contributed by reflection off the hit surface."""
        reflective = comps.obj.material.reflective
        if remaining <= 0 or reflective == 0:
            return black()
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted(self, comps: Computations, remaining: int = 1) -> np.ndarray:
        """Colour contributed by light passing through the hit surface."""
        transparency = comps.obj.material.transparency
        if remaining <= 0 or transparency == 0:
            return black()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normal)
        sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
        # Total internal reflection.
        if sin2_t > 1:
            return black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def default_world(ambient: float = 0.1) -> World:
    """Two concentric spheres lit from the upper left front."""
    world = World()

    outer = Sphere()
    outer.material.color = color(0.8, 1.0, 0.6)
    outer.material.diffuse = 0.7
    outer.material.specular = 0.2
    outer.material.ambient = ambient
    world.add_shape(outer)

    inner = Sphere(transform=scaling(0.5))
    inner.material.ambient = ambient
    world.add_shape(inner)

    world.light = PointLight(make_point(-10, 10, -10), white())
    return world