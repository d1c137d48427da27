"""Surface materials and the Phong lighting model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .color import white
from .light import PointLight
from .pattern import Pattern
from .tuples import dot, normalize, reflect

if TYPE_CHECKING:
    from .shapes.shape import Shape


@dataclass(eq=False)
class Material:
    """Surface properties of a shape."""

    color: np.ndarray = field(default_factory=white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None


def lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    point: np.ndarray,
    eyev: np.ndarray,
    normal: np.ndarray,
    in_shadow: bool = False,
) -> np.ndarray:
    """Phong shading of ``point`` on ``shape`` lit by ``light``."""
    if material.pattern is not None:
        surface_color = material.pattern.pattern_at_shape(shape, point)
    else:
        surface_color = material.color
    effective = surface_color * light.intensity

    lightv = normalize(light.position - point)
    ambient = effective * material.ambient

    light_dot_normal = dot(lightv, normal)
    if light_dot_normal < 0 or in_shadow:
        return ambient

    diffuse = effective * material.diffuse * light_dot_normal
    reflect_dot_eye = dot(reflect(-lightv, normal), eyev)
    if reflect_dot_eye <= 0:
        return ambient + diffuse

    factor = reflect_dot_eye ** material.shininess
    specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular