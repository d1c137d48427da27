"""Groups of shapes sharing one transform."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..intersection import Intersection
from ..ray import Ray
from .shape import Shape, ShapeType


class Group(Shape):
    """A shape made of child shapes; children see the group as their parent."""

    type = ShapeType.GROUP

    def __init__(self, *, material=None, transform=None) -> None:
        super().__init__(material=material, transform=transform)
        self.shapes: list[Shape] = []

    def add_child(self, shape: Shape) -> Shape:
        """Add ``shape`` as a child and return it."""
        shape.parent = self
        self.shapes.append(shape)
        return shape

    def add_children(self, shapes: Iterable[Shape]) -> None:
        for shape in shapes:
            self.add_child(shape)

    def __len__(self) -> int:
        return len(self.shapes)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xs = [x for child in self.shapes for x in child.intersect(ray)]
        xs.sort(key=lambda i: i.t)
        return xs

    def local_normal_at(self, point: np.ndarray) -> np.ndarray:
        raise TypeError("a group has no surface normal of its own")