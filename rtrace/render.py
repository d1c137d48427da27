"""Rendering a world through a camera onto a canvas."""

from __future__ import annotations

from .camera import Camera
from .canvas import Canvas
from .world import World


def render(camera: Camera, world: World, recursive_depth: int = 1) -> Canvas:
    """Trace one ray per pixel and return the filled canvas."""
    canvas = Canvas(camera.width, camera.height)
    for y in range(camera.height):
        for x in range(camera.width):
            canvas.write_pixel(x, y, world.color_at(camera.ray_at(x, y), recursive_depth))
    return canvas