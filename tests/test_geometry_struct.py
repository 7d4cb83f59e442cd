import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.geometry_struct import (
    Circle,
    Line,
    Plane,
    Point,
    Point3D,
    Vector,
    Vector3D,
    key_xy,
    key_yx,
)

coords = st.integers(-1000, 1000)
points = st.builds(Point, coords, coords)
points3d = st.builds(Point3D, coords, coords, coords)

TRIANGLES = [
    (Point(0, 0), Point(4, 0), Point(0, 3)),
    (Point(1, 1), Point(-2, 5), Point(7, -3)),
    (Point(0, 0), Point(1, 0), Point(0, 1)),
    (Point(-10, 2), Point(3, 3), Point(6, -8)),
]

TRIPLES_3D = [
    (Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)),
    (Point3D(1, 2, 3), Point3D(-4, 0, 2), Point3D(5, 5, -1)),
    (Point3D(2, -3, 7), Point3D(0, 0, 0), Point3D(1, 1, 1)),
]


@given(points, points)
def test_vector_between_leads_from_first_to_second(p1, p2):
    v = Vector.between(p1, p2)
    assert Point(p1.x + v.x, p1.y + v.y) == p2


@given(points3d, points3d)
def test_vector3d_between_leads_from_first_to_second(p1, p2):
    v = Vector3D.between(p1, p2)
    assert Point3D(p1.x + v.x, p1.y + v.y, p1.z + v.z) == p2


@given(points, points)
def test_line_through_contains_both_points(p1, p2):
    line = Line.through(p1, p2)
    for p in (p1, p2):
        assert line.a * p.x + line.b * p.y + line.c == 0


@given(points, points)
def test_from_vectors_mode_zero_is_line_through(p1, p2):
    assert Line.from_vectors(p1, p2, 0) == Line.through(p1, p2)


@given(points, points)
def test_from_vectors_mode_one_has_first_as_normal(p1, p2):
    line = Line.from_vectors(p1, p2, 1)
    assert (line.a, line.b) == (p1.x, p1.y)
    assert line.a * p2.x + line.b * p2.y + line.c == 0


@given(points, points)
def test_from_vectors_mode_two_has_second_as_normal(p1, p2):
    line = Line.from_vectors(p1, p2, 2)
    assert (line.a, line.b) == (p2.x, p2.y)
    assert line.a * p1.x + line.b * p1.y + line.c == 0


def test_from_vectors_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Line.from_vectors(Point(1, 2), Point(3, 4), 3)


@pytest.mark.parametrize("triangle", TRIANGLES)
def test_circle_through_is_equidistant(triangle):
    circle = Circle.through(*triangle)
    for p in triangle:
        assert math.isclose(
            math.hypot(p.x - circle.x, p.y - circle.y), circle.r, rel_tol=1e-9
        )


def test_circle_through_right_triangle_radius_is_half_hypotenuse():
    circle = Circle.through(Point(0, 0), Point(4, 0), Point(0, 3))
    assert math.isclose(circle.r, 2.5)


def test_circle_through_collinear_points_raises():
    with pytest.raises(ValueError):
        Circle.through(Point(0, 0), Point(1, 1), Point(2, 2))


@pytest.mark.parametrize("triple", TRIPLES_3D)
def test_plane_through_contains_points(triple):
    plane = Plane.through(*triple)
    for p in triple:
        assert plane.a * p.x + plane.b * p.y + plane.c * p.z + plane.d == 0


@pytest.mark.parametrize("triple", TRIPLES_3D)
def test_plane_normal_is_orthogonal_to_edges(triple):
    plane = Plane.through(*triple)
    normal = plane.normal()
    assert normal == Vector3D(plane.a, plane.b, plane.c)
    p1, p2, p3 = triple
    for q in (p2, p3):
        edge = Vector3D.between(p1, q)
        assert normal.x * edge.x + normal.y * edge.y + normal.z * edge.z == 0


def test_key_xy_orders_by_x_then_y():
    pts = [Point(1, 2), Point(0, 5), Point(1, 0), Point(0, 1)]
    assert sorted(pts, key=key_xy) == [Point(0, 1), Point(0, 5), Point(1, 0), Point(1, 2)]


def test_key_yx_orders_by_y_then_x():
    pts = [Point(1, 2), Point(0, 5), Point(1, 0), Point(0, 1)]
    assert sorted(pts, key=key_yx) == [Point(1, 0), Point(0, 1), Point(1, 2), Point(0, 5)]


def test_points_compare_and_hash_by_coordinates():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_string_forms_list_fields_separated_by_spaces():
    assert str(Point(1.5, -2.0)) == "1.5 -2"
    assert str(Line(1, 2, 3)) == "1 2 3"
    assert str(Plane(1, 0, -1, 4)) == "1 0 -1 4"