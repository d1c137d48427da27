import numpy as np
import pytest
from PIL import Image

from rtrace.demos import (
    Environment,
    Projectile,
    hexagon,
    hexagon_corner,
    hexagon_edge,
    hexagon_side,
    main,
    projectile_canvas,
    shaded_sphere,
    showcase_world,
    sphere_silhouette,
    tick,
    trajectory,
)
from rtrace.pattern import CheckerPattern
from rtrace.ray import Ray
from rtrace.shapes.shape import ShapeType
from rtrace.tuples import is_point, is_vector, normalize, point, vector


@pytest.fixture
def env():
    return Environment(vector(0, -0.1, 0), vector(-0.01, 0, 0))


def test_tick_moves_by_velocity_and_keeps_kinds(env):
    p = Projectile(point(0, 1, 0), normalize(vector(1, 1, 0)))
    nxt = tick(env, p)
    assert np.allclose(nxt.position, p.position + p.velocity)
    assert np.allclose(nxt.velocity, p.velocity + env.gravity + env.wind)
    assert is_point(nxt.position)
    assert is_vector(nxt.velocity)


def test_trajectory_ends_at_ground(env):
    path = list(trajectory(env, Projectile(point(0, 1, 0), normalize(vector(1, 1, 0)))))
    assert len(path) > 1
    assert path[-1].position[1] <= 0
    assert all(p.position[1] > 0 for p in path[:-1])


def test_trajectory_empty_when_starting_on_ground(env):
    assert list(trajectory(env, Projectile(point(0, 0, 0), vector(1, 1, 0)))) == []


def test_projectile_canvas_only_red_pixels():
    canvas = projectile_canvas()
    assert (canvas.width, canvas.height) == (900, 550)
    lit = canvas.pixels[np.any(canvas.pixels != 0, axis=2)]
    assert len(lit) > 0
    assert np.all(lit == np.array([1.0, 0.0, 0.0]))


def test_sphere_silhouette_center_hit_corner_miss():
    canvas = sphere_silhouette(32)
    assert np.array_equal(canvas.pixel_at(16, 16), np.array([1.0, 0.0, 0.0]))
    assert np.array_equal(canvas.pixel_at(0, 0), np.zeros(3))


def test_shaded_sphere_keeps_red_equal_to_blue():
    canvas = shaded_sphere(32)
    center = canvas.pixel_at(16, 16)
    assert center[0] > 0
    assert center[0] == pytest.approx(center[2])
    assert center[1] <= center[0]
    assert np.array_equal(canvas.pixel_at(0, 0), np.zeros(3))


def test_hexagon_corner_sits_at_unit_distance():
    corner = hexagon_corner()
    assert corner.type == ShapeType.SPHERE
    assert np.allclose(corner.world_to_object(point(0, 0, -1)), point(0, 0, 0))


def test_hexagon_edge_is_truncated_cylinder():
    edge = hexagon_edge()
    assert edge.type == ShapeType.CYLINDER
    assert (edge.min, edge.max) == (0, 1)


def test_hexagon_side_children_point_to_side():
    side = hexagon_side()
    assert len(side) == 2
    assert all(child.parent is side for child in side.shapes)


def test_hexagon_has_six_sides_and_hits_corner():
    h = hexagon()
    assert len(h) == 6
    assert all(side.parent is h for side in h.shapes)
    xs = h.intersect(Ray(point(0, 5, -1), vector(0, -1, 0)))
    assert len(xs) >= 2
    ts = [x.t for x in xs]
    assert ts == sorted(ts)


def test_hexagon_centre_is_empty():
    h = hexagon()
    assert h.intersect(Ray(point(0, 5, 0), vector(0, -1, 0))) == []


def test_showcase_world_contents():
    world = showcase_world()
    assert len(world) == 7
    assert np.array_equal(world.light.position, point(-10, 10, -10))
    types = [s.type for s in world.shapes]
    assert types.count(ShapeType.PLANE) == 3
    assert ShapeType.CONE in types and ShapeType.CUBE in types
    assert isinstance(world.shapes[0].material.pattern, CheckerPattern)
    cone = world.shapes[5]
    assert cone.closed and (cone.min, cone.max) == (-1, 0)


def test_main_trajectory_prints_positions(capsys):
    assert main(["trajectory"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) > 1
    assert all(line.startswith("position: ") for line in lines)
    last_y = float(lines[-1].split()[2])
    assert last_y <= 0


def test_main_silhouette_writes_image(tmp_path):
    out = tmp_path / "s.png"
    assert main(["silhouette", "--width", "16", "-o", str(out)]) == 0
    with Image.open(out) as img:
        assert img.size == (16, 16)


def test_main_obj_missing_file_writes_nothing(tmp_path):
    out = tmp_path / "obj.png"
    assert main(["obj", "--obj", str(tmp_path / "missing.obj"), "-o", str(out)]) == 0
    assert not out.exists()


def test_main_obj_renders_file(tmp_path):
    obj = tmp_path / "tri.obj"
    obj.write_text("v -1 1 0\nv -1 0 0\nv 1 0 0\nf 1 2 3\n", encoding="utf-8")
    out = tmp_path / "obj.png"
    args = ["obj", "--obj", str(obj), "-o", str(out), "--width", "6", "--height", "4", "--depth", "1"]
    assert main(args) == 0
    with Image.open(out) as img:
        assert img.size == (6, 4)


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonsense"])