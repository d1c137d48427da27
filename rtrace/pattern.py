"""Colour patterns that vary over space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .color import black, color, white
from .transform import identity

if TYPE_CHECKING:
    from .shapes.shape import Shape


@dataclass(eq=False)
class Pattern:
    """Base pattern; it maps a point's coordinates straight to a colour."""

    transform: np.ndarray = field(default_factory=identity, kw_only=True)

    def pattern_at(self, point: np.ndarray) -> np.ndarray:
        """Colour at ``point`` given in pattern space."""
        return color(point[0], point[1], point[2])

    def pattern_at_shape(self, shape: Shape, point: np.ndarray) -> np.ndarray:
        """Colour at world ``point`` on ``shape``."""
        object_point = shape.world_to_object(point)
        pattern_point = np.linalg.inv(self.transform) @ object_point
        return self.pattern_at(pattern_point)


@dataclass(eq=False)
class TwoColorPattern(Pattern):
    """A pattern alternating between colours ``a`` and ``b``."""

    a: np.ndarray = field(default_factory=white)
    b: np.ndarray = field(default_factory=black)


@dataclass(eq=False)
class StripePattern(TwoColorPattern):
    """Stripes alternating along x."""

    def pattern_at(self, point: np.ndarray) -> np.ndarray:
        return self.a if math.floor(point[0]) % 2 == 0 else self.b


@dataclass(eq=False)
class GradientPattern(TwoColorPattern):
    """Linear blend from ``a`` to ``b`` along x, repeating every unit."""

    def pattern_at(self, point: np.ndarray) -> np.ndarray:
        fraction = point[0] - math.floor(point[0])
        return self.a + (self.b - self.a) * fraction


@dataclass(eq=False)
class RingPattern(TwoColorPattern):
    """Concentric rings around the y axis."""

    def pattern_at(self, point: np.ndarray) -> np.ndarray:
        return self.a if math.floor(math.hypot(point[0], point[2])) % 2 == 0 else self.b


@dataclass(eq=False)
class CheckerPattern(TwoColorPattern):
    """Three-dimensional checkerboard of unit cubes."""

    def pattern_at(self, point: np.ndarray) -> np.ndarray:
        total = math.floor(point[0]) + math.floor(point[1]) + math.floor(point[2])
        return self.a if total % 2 == 0 else self.b