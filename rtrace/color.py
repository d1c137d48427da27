"""RGB colours as 3-element numpy arrays; ``*`` multiplies channel-wise."""

from __future__ import annotations

import numpy as np


def color(r: float, g: float, b: float) -> np.ndarray:
    return np.array([r, g, b], dtype=float)


def white() -> np.ndarray:
    return color(1.0, 1.0, 1.0)


def black() -> np.ndarray:
    return color(0.0, 0.0, 0.0)