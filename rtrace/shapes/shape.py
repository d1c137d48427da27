"""The base class for everything that can be hit by a ray."""

from __future__ import annotations

import itertools
from enum import Enum, auto
from typing import TYPE_CHECKING

import numpy as np

from ..intersection import Intersection
from ..material import Material
from ..transform import identity
from ..tuples import normalize, vector

if TYPE_CHECKING:
    from ..ray import Ray
    from .group import Group


class ShapeType(Enum):
    BASE = auto()
    SPHERE = auto()
    PLANE = auto()
    CUBE = auto()
    CYLINDER = auto()
    CONE = auto()
    GROUP = auto()


class Shape:
    """A transformable shape; subclasses supply the local geometry.

    Shapes compare equal by ``id``, so a copy stands for the same shape.
    Assign a new matrix to ``transform`` rather than editing it in place.
    """

    type = ShapeType.BASE
    _ids = itertools.count()

    def __init__(self, *, material: Material | None = None, transform: np.ndarray | None = None) -> None:
        self.id = next(Shape._ids)
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else identity()
        self.parent: Group | None = None

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, matrix: np.ndarray) -> None:
        self._transform = np.asarray(matrix, dtype=float)
        self._inverse = np.linalg.inv(self._transform)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections of a world-space ray with this shape."""
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, point: np.ndarray) -> np.ndarray:
        """World-space surface normal at a world-space point."""
        local_point = self.world_to_object(point)
        return self.normal_to_world(self.local_normal_at(local_point))

    def world_to_object(self, point: np.ndarray) -> np.ndarray:
        """Convert a world point to object space, through all parent groups."""
        if self.parent is not None:
            point = self.parent.world_to_object(point)
        return self._inverse @ point

    def normal_to_world(self, normal: np.ndarray) -> np.ndarray:
        """Convert an object-space normal to world space, through all parent groups."""
        n = self._inverse.T @ normal
        n[3] = 0.0
        n = normalize(n)
        if self.parent is not None:
            n = self.parent.normal_to_world(n)
        return n

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        return []

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        return vector(0, 0, 0)

    def make_intersection(self, t: float) -> Intersection:
        return Intersection(t, self)