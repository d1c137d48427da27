"""A floating-point RGB canvas that can be exported as an image."""

from __future__ import annotations

from os import PathLike

import numpy as np
from PIL import Image


class Canvas:
    """Grid of RGB pixels, all black at creation."""

    def __init__(self, width: int, height: int) -> None:
        self.pixels = np.zeros((height, width, 3), dtype=float)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def write_pixel(self, x: int, y: int, color: np.ndarray) -> None:
        """Set the pixel at column ``x``, row ``y``; points outside are ignored."""
        if self.is_inside(y, x):
            self.pixels[y, x] = color[:3]

    def pixel_at(self, x: int, y: int) -> np.ndarray:
        return self.pixels[y, x].copy()

    def to_image(self) -> Image.Image:
        """Return an 8-bit RGB image, channel values saturated to 0..255."""
        data = np.clip(np.rint(self.pixels * 255), 0, 255).astype(np.uint8)
        return Image.fromarray(data)


def save_canvas(canvas: Canvas, filename: str | PathLike) -> None:
    """Write the canvas to an image file; the format follows the extension."""
    canvas.to_image().save(filename)