"""A pinhole camera that maps canvas pixels to rays."""

from __future__ import annotations

import math

import numpy as np

from .ray import Ray
from .transform import identity
from .tuples import normalize, point


class Camera:
    """Camera looking down -z in its own space; ``fov`` is horizontal."""

    def __init__(self, width: int, height: int, fov: float, transform: np.ndarray | None = None) -> None:
        self.width = width
        self.height = height
        self.fov = fov
        self.half_view = math.tan(fov / 2)
        self.pixel_size = self.half_view * 2 / width
        self.transform = transform if transform is not None else identity()

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, matrix: np.ndarray) -> None:
        self._transform = np.asarray(matrix, dtype=float)
        self._inverse = np.linalg.inv(self._transform)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def half_width(self) -> float:
        return self.half_view

    @property
    def half_height(self) -> float:
        return self.half_view / self.aspect

    def ray_at(self, x: int, y: int) -> Ray:
        """Ray from the camera through pixel column ``x``, row ``y``."""
        world_x = self.half_width - x * self.pixel_size
        world_y = self.half_height - y * self.pixel_size
        pixel = self._inverse @ point(world_x, world_y, -1)
        origin = self._inverse @ point(0, 0, 0)
        return Ray(origin, normalize(pixel - origin))