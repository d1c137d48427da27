import numpy as np
import pytest

from rtrace.ray import Ray
from rtrace.shapes.group import Group
from rtrace.shapes.shape import ShapeType
from rtrace.shapes.sphere import Sphere
from rtrace.transform import scaling, translation
from rtrace.tuples import point, vector


def test_new_group_is_empty():
    g = Group()
    assert len(g) == 0
    assert g.type is ShapeType.GROUP
    assert np.array_equal(g.transform, np.eye(4))


def test_adding_child():
    g = Group()
    s = Sphere()
    returned = g.add_child(s)
    assert len(g) == 1
    assert returned is s
    assert g.shapes[0].parent.id == g.id


def test_add_children():
    g = Group()
    children = [Sphere(), Sphere(), Sphere()]
    g.add_children(children)
    assert len(g) == 3
    assert all(c.parent is g for c in children)


def test_empty_group_intersection():
    assert Group().local_intersect(Ray()) == []


def test_nonempty_group_intersection():
    g = Group()
    s1 = Sphere()
    s2 = Sphere()
    s2.transform = translation(0, 0, -3)
    s3 = Sphere()
    s3.transform = translation(5, 0, 0)
    g.add_children([s1, s2, s3])
    xs = g.local_intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    assert len(xs) == 4
    assert [x.obj.id for x in xs] == [s2.id, s2.id, s1.id, s1.id]


def test_transformed_group():
    g = Group()
    g.transform = scaling(2)
    s = Sphere()
    s.transform = translation(5, 0, 0)
    g.add_child(s)
    xs = g.intersect(Ray(point(10, 0, -10), vector(0, 0, 1)))
    assert len(xs) == 2


def test_group_has_no_normal():
    with pytest.raises(TypeError):
        Group().local_normal_at(point(0, 0, 0))