"""Ray-shape intersections and the quantities derived from a hit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from .tuples import EPS, dot, reflect

if TYPE_CHECKING:
    from .ray import Ray
    from .shapes.shape import Shape


@dataclass(eq=False)
class Intersection:
    """A hit at distance ``t`` on ``obj``; ``u``/``v`` are surface coordinates."""

    t: float
    obj: Shape
    u: float = -1.0
    v: float = -1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.obj is other.obj

    __hash__ = None  # type: ignore[assignment]


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """The intersection with the lowest non-negative ``t``, or None."""
    return next((i for i in sorted(intersections, key=lambda i: i.t) if i.t >= 0), None)


def compute_n1_n2(hit: Intersection, intersections: Iterable[Intersection]) -> tuple[float, float]:
    """Refractive indices on either side of ``hit``."""
    containers: list[Shape] = []
    n1, n2 = 1.0, 1.0

    for inter in intersections:
        if inter == hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if inter.obj in containers:
            containers.remove(inter.obj)
        else:
            containers.append(inter.obj)

        if inter == hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


class Computations:
    """Precomputed state at the point where a ray hits a shape."""

    def __init__(self, hit: Intersection, ray: Ray, intersections: Sequence[Intersection] = ()) -> None:
        self.t = hit.t
        self.obj = hit.obj
        self.point = ray.position(self.t)
        self.eyev = -ray.direction
        self.normal = self.obj.normal_at(self.point)

        self.inside = dot(self.normal, self.eyev) < 0
        if self.inside:
            self.normal = -self.normal

        self.over_point = self.point + self.normal * EPS
        self.under_point = self.point - self.normal * EPS
        self.reflectv = reflect(ray.direction, self.normal)
        self.n1, self.n2 = compute_n1_n2(hit, intersections)

    def schlick(self) -> float:
        """Schlick's approximation of the reflectance."""
        cos = dot(self.eyev, self.normal)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1 - r0) * (1 - cos) ** 5