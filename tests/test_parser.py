import io

import numpy as np
import pytest

from rtrace.parser import fan_triangulation, parse, parse_vertex
from rtrace.shapes.group import Group
from rtrace.shapes.triangle import Triangle
from rtrace.tuples import point


def _parse(text):
    return parse(io.StringIO(text))


def _same_points(tri, a, b, c):
    return (
        np.array_equal(tri.p1, a)
        and np.array_equal(tri.p2, b)
        and np.array_equal(tri.p3, c)
    )


def test_ignoring_unrecognized_lines():
    gibberish = (
        "\u200bThere was a young lady named Bright\u200b\n"
        "who traveled much faster than light.\n"
        " She set out one day\u200b\u200b\n"
        " in a relative way,\n"
        " and came back the previous night.\u200b"
    )
    assert _parse(gibberish).num_lines_skipped == 5


def test_vertex_records():
    res = _parse("v -1 1 0\nv -1.0000 0.5000 0.000\nv 1 0 0\nv 1 1 0\n")
    expected = [point(-1, 1, 0), point(-1, 0.5, 0), point(1, 0, 0), point(1, 1, 0)]
    assert len(res.vertices) == 4
    for got, want in zip(res.vertices, expected):
        assert np.array_equal(got, want)


def test_parsing_triangle_faces():
    res = _parse("v -1 1 0\nv -1.0 0 0\nv 1 0 0\nv 1 1 0\nf 1 2 3\nf 1 3 4\n")
    v = res.vertices
    assert len(v) == 4
    g = res.default_group
    assert len(g.shapes) == 2
    t1, t2 = g.shapes
    assert isinstance(t1, Triangle) and isinstance(t2, Triangle)
    assert _same_points(t1, v[0], v[1], v[2])
    assert _same_points(t2, v[0], v[2], v[3])


def test_triangulating_polygons():
    res = _parse("v -1 1 0\nv -1 0 0\nv 1 0 0\nv 1 1 0\nv 0 2 0\nf 1 2 3 4 5\n")
    v = res.vertices
    g = res.default_group
    assert len(v) == 5
    assert len(g.shapes) == 3
    t1, t2, t3 = g.shapes
    assert _same_points(t1, v[0], v[1], v[2])
    assert _same_points(t2, v[0], v[2], v[3])
    assert _same_points(t3, v[0], v[3], v[4])


GROUPED = (
    "v -1 1 0\n"
    "v -1 0 0\n"
    "v 1 0 0\n"
    "v 1 1 0\n"
    "v 0 2 0\n"
    "g FirstGroup\n"
    "f 1 2 3\n"
    "g SecondGroup\n"
    "f 1 3 4\n"
)


def test_triangles_in_groups():
    res = _parse(GROUPED)
    v = res.vertices
    assert len(res.named_groups) == 2
    g1 = res.get_group("FirstGroup")
    g2 = res.get_group("SecondGroup")
    assert g1 is not None and len(g1.shapes) == 1
    assert g2 is not None and len(g2.shapes) == 1
    assert _same_points(g1.shapes[0], v[0], v[1], v[2])
    assert _same_points(g2.shapes[0], v[0], v[2], v[3])
    assert len(res.default_group) == 0


def test_get_group_missing_name():
    assert _parse(GROUPED).get_group("NoSuchGroup") is None


def test_converting_obj_to_group():
    res = _parse(GROUPED)
    group = res.to_group()
    assert len(group.shapes) == 2
    for sub in group.shapes:
        assert isinstance(sub, Group)
        assert sub.parent is group
        assert sub.shapes[0].parent is sub


def test_to_group_keeps_default_group_shapes():
    res = _parse("v 0 1 0\nv -1 0 0\nv 1 0 0\nf 1 2 3\ng Named\nf 1 2 3\n")
    group = res.to_group()
    assert len(group.shapes) == 2
    assert isinstance(group.shapes[0], Triangle)
    assert group.shapes[0].parent is group
    assert isinstance(group.shapes[1], Group)


def test_face_with_slashes_is_rejected():
    res = _parse("v 0 1 0\nv -1 0 0\nv 1 0 0\nf 1/1/1 2/2/2 3/3/3\n")
    assert len(res.default_group) == 0
    assert res.num_lines_skipped == 0


def test_bad_vertex_is_not_stored():
    res = _parse("v 1 2\nv 1 2 3\n")
    assert len(res.vertices) == 1
    assert np.array_equal(res.vertices[0], point(1, 2, 3))


def test_group_line_without_name_keeps_default_group():
    res = _parse("v 0 1 0\nv -1 0 0\nv 1 0 0\ng\nf 1 2 3\n")
    assert res.named_groups == {}
    assert len(res.default_group) == 1


def test_empty_lines_are_not_counted():
    res = _parse("\n\nv 1 2 3\n\n")
    assert res.num_lines_skipped == 0
    assert len(res.vertices) == 1


def test_parse_vertex_values():
    assert np.array_equal(parse_vertex(" -1.0000 0.5000 0.000"), point(-1, 0.5, 0))
    assert parse_vertex("1 2") is None
    assert parse_vertex("a b c") is None


def test_fan_triangulation_needs_three_indices():
    with pytest.raises(ValueError):
        fan_triangulation([1, 2], [point(0, 0, 0), point(1, 0, 0)])


def test_fan_triangulation_index_out_of_range():
    vertices = [point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0)]
    with pytest.raises(ValueError):
        fan_triangulation([1, 2, 4], vertices)
    with pytest.raises(ValueError):
        fan_triangulation([0, 1, 2], vertices)


def test_fan_triangulation_result():
    vertices = [point(-1, 1, 0), point(-1, 0, 0), point(1, 0, 0), point(1, 1, 0)]
    tris = fan_triangulation([1, 2, 3, 4], vertices)
    assert len(tris) == 2
    assert _same_points(tris[1], vertices[0], vertices[2], vertices[3])