"""Small scenes and pictures that exercise the renderer, with a command to run them."""

from __future__ import annotations

import argparse
import copy
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .camera import Camera
from .canvas import Canvas, save_canvas
from .color import color, white
from .intersection import hit
from .light import PointLight
from .material import lighting
from .parser import parse
from .pattern import CheckerPattern
from .ray import Ray
from .render import render
from .shapes.cone import Cone
from .shapes.cube import Cube
from .shapes.cylinder import Cylinder
from .shapes.group import Group
from .shapes.plane import Plane
from .shapes.sphere import Sphere
from .shapes.triangle import Triangle
from .timer import TimerSummary
from .transform import chain, rotation_x, rotation_y, rotation_z, scaling, translation, view_transform
from .tuples import PI, normalize, point, vector
from .world import World

_log = logging.getLogger(__name__)

_RED = color(1, 0, 0)


@dataclass(frozen=True)
class Projectile:
    position: np.ndarray
    velocity: np.ndarray


@dataclass(frozen=True)
class Environment:
    gravity: np.ndarray
    wind: np.ndarray


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(proj.position + proj.velocity, proj.velocity + env.gravity + env.wind)


def trajectory(env: Environment, proj: Projectile) -> Iterator[Projectile]:
    """Yield the projectile after each tick until it is no longer above y = 0."""
    while proj.position[1] > 0:
        proj = tick(env, proj)
        yield proj


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def projectile_canvas(width: int = 900, height: int = 550) -> Canvas:
    """Plot the path of a fast projectile in red."""
    proj = Projectile(point(0, 1, 0), normalize(vector(1, 1.8, 0)) * 11.25)
    env = Environment(vector(0, -0.1, 0), vector(-0.01, 0, 0))
    canvas = Canvas(width, height)
    for p in trajectory(env, proj):
        _log.debug("y: %s", p.position[1])
        canvas.write_pixel(_round_half_away(p.position[0]), _round_half_away(p.position[1]), _RED)
    return canvas


def _wall_rays(size: int, flip_y: bool) -> Iterator[tuple[int, int, Ray]]:
    """Rays from a fixed eye through each pixel of a wall behind the origin."""
    ray_origin = point(0, 0, -5)
    wall_z = 10.0
    wall_size = 7.0
    pixel_size = wall_size / size
    half = wall_size / 2
    for y in range(size):
        world_y = half - pixel_size * y if flip_y else -half + pixel_size * y
        for x in range(size):
            world_x = -half + pixel_size * x
            position = point(world_x, world_y, wall_z)
            yield x, y, Ray(ray_origin, normalize(position - ray_origin))


def sphere_silhouette(size: int = 256) -> Canvas:
    """The red silhouette of a sphere squashed along y."""
    canvas = Canvas(size, size)
    sphere = Sphere(transform=scaling(1, 0.5, 1))
    for x, y, ray in _wall_rays(size, flip_y=False):
        if hit(sphere.intersect(ray)) is not None:
            canvas.write_pixel(x, y, _RED)
    return canvas


def shaded_sphere(size: int = 512) -> Canvas:
    """A Phong-shaded magenta sphere lit from the upper left."""
    canvas = Canvas(size, size)
    sphere = Sphere()
    sphere.material.color = color(1, 0.2, 1)
    light = PointLight(point(-10, 10, -10), white())
    for x, y, ray in _wall_rays(size, flip_y=True):
        h = hit(sphere.intersect(ray))
        if h is None:
            continue
        p = ray.position(h.t)
        normal = sphere.normal_at(p)
        canvas.write_pixel(x, y, lighting(sphere.material, sphere, light, p, -ray.direction, normal))
    return canvas


def hexagon_corner() -> Sphere:
    return Sphere(transform=chain(translation(0, 0, -1), scaling(0.25)))


def hexagon_edge() -> Cylinder:
    return Cylinder(
        0,
        1,
        transform=chain(
            translation(0, 0, -1),
            rotation_y(-PI / 6),
            rotation_z(-PI / 2),
            scaling(0.25, 1, 0.25),
        ),
    )


def hexagon_side() -> Group:
    side = Group()
    side.add_child(hexagon_corner())
    side.add_child(hexagon_edge())
    return side


def hexagon() -> Group:
    """Six corner spheres joined by cylinder edges, raised one unit."""
    h = Group()
    for i in range(6):
        side = hexagon_side()
        side.transform = rotation_y(i * PI / 3)
        h.add_child(side)
    h.transform = translation(0, 1, 0)
    return h


def showcase_world() -> World:
    """A checkered corner holding a sphere, cone, cylinder and cube."""
    floor = Plane()
    floor.material.color = color(1, 0.9, 0.9)
    floor.material.specular = 0
    floor.material.pattern = CheckerPattern()
    floor.material.reflective = 0.1

    left_wall = Plane(transform=chain(translation(0, 0, 5), rotation_y(-PI / 4), rotation_x(PI / 2)))
    left_wall.material = copy.copy(floor.material)

    right_wall = Plane(transform=chain(translation(0, 0, 5), rotation_y(PI / 4), rotation_x(PI / 2)))
    right_wall.material = copy.copy(floor.material)

    middle = Sphere(transform=translation(-0.5, 1, 0.5))
    middle.material.color = color(0.1, 1, 0.5)
    middle.material.diffuse = 0.7
    middle.material.specular = 0.3
    middle.material.refractive_index = 1.0
    middle.material.reflective = 0.5

    right = Cone(-1, 0, True, transform=chain(translation(1.5, 1, -0.5), scaling(1.0, 2.0, 1.0)))
    right.material = copy.copy(middle.material)
    right.material.color = color(0.5, 1, 0.1)

    left = Cylinder(0, 1, True, transform=chain(translation(-1.5, 0.0, -0.75), scaling(0.5)))
    left.material = copy.copy(middle.material)
    left.material.color = color(1, 0.8, 0.1)

    cube = Cube(transform=chain(translation(0.5, 0.25, -0.5), scaling(0.25)))
    cube.material.color = color(0.3, 0.4, 1.0)
    cube.material.reflective = 0.5
    cube.material.specular = 0.4
    cube.material.diffuse = 0.5
    cube.material.transparency = 0

    world = World(light=PointLight(point(-10, 10, -10), white()))
    for shape in (floor, left_wall, right_wall, middle, left, right, cube):
        world.add_shape(shape)
    return world


def _single_shape_world(shape) -> World:
    world = World(light=PointLight(point(-10, 10, -10), white()))
    world.add_shape(shape)
    return world


def _overhead_camera(width: int, height: int, fov: float) -> Camera:
    return Camera(width, height, fov, view_transform(point(0, 5, -5), point(0, 1, 0), vector(0, 1, 0)))


_DEFAULTS = {
    "trajectory": (0, 0, 0),
    "projectile": (900, 550, 0),
    "silhouette": (256, 256, 0),
    "shading": (512, 512, 0),
    "scene": (1024, 512, 4),
    "hexagon": (512, 512, 4),
    "triangle": (512, 512, 4),
    "obj": (256, 256, 2),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rtrace-demo", description="Render one of the demo pictures.")
    parser.add_argument("demo", choices=sorted(_DEFAULTS))
    parser.add_argument("-o", "--output", help="image file to write (default: <demo>.png)")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--height", type=int, help="image height in pixels")
    parser.add_argument("--depth", type=int, help="recursion depth for reflection and refraction")
    parser.add_argument("--obj", default="../data/teapot.obj", help="OBJ file for the obj demo")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _build_parser().parse_args(argv)
    width, height, depth = _DEFAULTS[args.demo]
    width = args.width if args.width is not None else width
    height = args.height if args.height is not None else height
    depth = args.depth if args.depth is not None else depth
    output = args.output or f"{args.demo}.png"

    if args.demo == "trajectory":
        proj = Projectile(point(0, 1, 0), normalize(vector(1, 1, 0)))
        env = Environment(vector(0, -0.1, 0), vector(-0.01, 0, 0))
        for p in trajectory(env, proj):
            x, y, z = p.position[:3]
            print(f"position: {x} {y} {z}")
        return 0

    if args.demo == "projectile":
        canvas = projectile_canvas(width, height)
    elif args.demo == "silhouette":
        canvas = sphere_silhouette(width)
    elif args.demo == "shading":
        canvas = shaded_sphere(width)
    elif args.demo == "scene":
        timers = TimerSummary("render_demo")
        camera = Camera(
            width,
            height,
            PI / 3,
            view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
        )
        world = showcase_world()
        with timers.scoped("render"):
            canvas = render(camera, world, depth)
        _log.info("%s", timers.report_all())
    elif args.demo == "hexagon":
        _log.info("Group demo")
        canvas = render(_overhead_camera(width, height, PI / 6), _single_shape_world(hexagon()), depth)
    elif args.demo == "triangle":
        _log.info("Triangle demo")
        triangle = Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))
        canvas = render(_overhead_camera(width, height, PI / 6), _single_shape_world(triangle), depth)
    else:
        _log.info("Parser demo")
        try:
            with open(args.obj, encoding="utf-8") as stream:
                obj = parse(stream).to_group()
        except OSError:
            _log.warning("Bad file from: %s", args.obj)
            return 0
        _log.info("obj: %d", len(obj))
        canvas = render(_overhead_camera(width, height, PI / 3), _single_shape_world(obj), depth)

    save_canvas(canvas, output)
    return 0