# rtrace

A compact ray tracer built on NumPy. It renders scenes made of spheres,
planes, cubes, cylinders, cones, triangles and nested groups, with Phong
lighting, hard shadows from a single point light, reflection, refraction
(with the Schlick approximation for surfaces that are both reflective and
transparent) and procedural patterns (stripes, gradients, rings,
checkers). Triangle meshes can be read from a subset of the Wavefront OBJ
format. Rendered canvases are saved as image files through Pillow.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
import math

from rtrace.camera import Camera
from rtrace.canvas import save_canvas
from rtrace.color import color, white
from rtrace.light import PointLight
from rtrace.render import render
from rtrace.shapes.plane import Plane
from rtrace.shapes.sphere import Sphere
from rtrace.transform import translation, view_transform
from rtrace.tuples import point, vector
from rtrace.world import World

world = World()
world.light = PointLight(point(-10, 10, -10), white())

world.add_shape(Plane())

ball = Sphere()
ball.transform = translation(0, 1, 0)
ball.material.color = color(0.1, 1, 0.5)
world.add_shape(ball)

camera = Camera(
    320, 200, math.pi / 3,
    view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
)
canvas = render(camera, world, 4)
save_canvas(canvas, "scene.png")
```

The third argument of `render` is the recursion depth for reflected and
refracted rays (default 1).

## Building blocks

- `rtrace.tuples` – points and vectors as homogeneous 4-element NumPy
  arrays (`point`, `vector`, `is_point`, `is_vector`), with `dot`,
  `cross`, `normalize`, `reflect` and `magnitude`.
- `rtrace.color` – RGB colours as 3-element arrays: `color`, `white`,
  `black`.
- `rtrace.transform` – 4×4 affine matrices: `identity`, `translation`,
  `scaling` (one argument for a uniform scale), `rotation_x`,
  `rotation_y`, `rotation_z`, `shearing`, `chain` (the rightmost
  transform is applied first) and `view_transform`.
- `rtrace.ray` – `Ray` with `position(t)` and `transform(matrix)`.
- `rtrace.light` – `PointLight`.
- `rtrace.canvas` – `Canvas` (`write_pixel`, `pixel_at`, `to_image`) and
  `save_canvas`, which picks the image format from the file extension.
- `rtrace.shapes` – `Sphere` (and `glass_sphere()`), `Plane`, `Cube`,
  `Cylinder`, `Cone`, `Triangle`, `SmoothTriangle` and `Group`. Every
  shape has a `transform`, a `material` and an optional parent group;
  shapes compare equal by their `id`.
- `rtrace.pattern` – `Pattern`, `StripePattern`, `GradientPattern`,
  `RingPattern`, `CheckerPattern`, each with its own `transform`.
- `rtrace.material` – `Material` and the `lighting` function.
- `rtrace.intersection` – `Intersection`, `hit`, `compute_n1_n2` and
  `Computations` (with `schlick()`).
- `rtrace.world` – `World` (`intersect`, `color_at`, `is_shadowed`,
  `shade_hit`, `reflected`, `refracted`) and `default_world`.
- `rtrace.camera` / `rtrace.render` – `Camera` (horizontal field of view)
  and `render`, which traces one ray per pixel into a `Canvas`.
- `rtrace.parser` – `parse` reads OBJ lines into a `ParseResult`
  (vertices, a default group, named groups and a count of skipped
  lines); `to_group()` gathers everything into one `Group`.
- `rtrace.stats` / `rtrace.timer` – `Stats` for running statistics and
  `TimerSummary` for named wall-clock timers (`manual`, `scoped`,
  `report`, `report_all`, `summary_all`).

## Demos

```
rtrace-demo --help
rtrace-demo scene -o scene.png
```

`rtrace-demo` takes one of these demo names:

- `trajectory` – prints the positions of a projectile until it lands.
- `projectile` – plots a projectile's path in red.
- `silhouette` – the red silhouette of a squashed sphere.
- `shading` – a Phong-shaded sphere.
- `scene` – a checkered corner with a sphere, cone, cylinder and cube;
  the render time is logged.
- `hexagon` – a hexagon built from nested groups of spheres and cylinders.
- `triangle` – a single triangle.
- `obj` – a mesh read from the OBJ file given with `--obj`.

Options: `-o/--output` (default `<demo>.png`), `--width`, `--height`,
`--depth` (recursion depth) and `--obj`. Every demo except `trajectory`
writes its picture to the output file.

## What it does not do

- It has no window or viewer; pictures are only written to image files.
- `SmoothTriangle` stores vertex normals but does not interpolate them;
  its `local_normal_at` returns a zero vector.
- A `Group` has no surface normal of its own; asking for one raises
  `TypeError`.
- The OBJ reader understands only `v`, `f` and `g` lines, and faces made
  of plain integer vertex indices; other lines are counted as skipped.