"""Rays with an origin point and a direction vector."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .tuples import point, vector


@dataclass(frozen=True)
class Ray:
    origin: np.ndarray = field(default_factory=lambda: point(0, 0, 0))
    direction: np.ndarray = field(default_factory=lambda: vector(0, 0, 0))

    def position(self, t: float) -> np.ndarray:
        """Point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: np.ndarray) -> Ray:
        """Return the ray transformed by ``matrix``."""
        return Ray(matrix @ self.origin, matrix @ self.direction)