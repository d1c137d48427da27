"""Light sources."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class PointLight:
    """A light with no size, at a single position."""

    position: np.ndarray
    intensity: np.ndarray