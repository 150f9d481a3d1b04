"""Tests for the geometry kernel."""

import math

import pytest

from tanglelab.geometry import (LineSegment, Point, Polar, Polygon, Range, get_int, get_value,
                                max_value, min_value, rng_from_seed)


def test_range_normalizes_reversed_bounds():
    r = Range(5, 2)
    assert (r.min, r.max) == (2, 5)


def test_range_rand_stays_in_bounds(rng):
    r = Range(5, 2)
    samples = [r.rand(rng) for _ in range(10_000)]
    assert all(2 <= s <= 5 for s in samples)


def test_range_rand_int_is_inclusive(rng):
    r = Range(1, 3)
    seen = {r.rand_int(rng) for _ in range(2_000)}
    assert seen == {1, 2, 3}


def test_get_value_and_get_int(rng):
    assert get_value(7, rng) == 7
    assert get_int(7.9, rng) == 7
    assert 10 <= get_value(Range(10, 20), rng) <= 20
    assert get_int(Range(4, 4), rng) == 4
    assert min_value(Range(3, 9)) == 3
    assert max_value(Range(3, 9)) == 9
    assert min_value(12) == max_value(12) == 12


def test_rng_from_seed_is_reproducible():
    a = rng_from_seed(99)
    b = rng_from_seed(99)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_point_add_and_rotate():
    p = Point(1, 0)
    p.add(Point(2, 3))
    assert (p.x, p.y) == (3, 3)

    q = Point(1, 0).rotate(90, Point(0, 0))
    assert q.x == pytest.approx(0, abs=1e-12)
    assert q.y == pytest.approx(1)

    r = Point(2, 1).rotate(180, Point(1, 1))
    assert (r.x, r.y) == (pytest.approx(0), pytest.approx(1))


def test_point_vary_is_bounded(rng):
    for _ in range(200):
        p = Point(10, 10).vary(2, rng)
        assert 8 <= p.x <= 12
        assert 8 <= p.y <= 12


def test_polar_to_point():
    p = Polar(2, math.pi / 2).to_point()
    assert p.x == pytest.approx(0, abs=1e-12)
    assert p.y == pytest.approx(2)

    q = Polar(3, 0).to_point(Point(10, 10))
    assert (q.x, q.y) == (pytest.approx(13), pytest.approx(10))


def test_line_divide():
    points = LineSegment(Point(0, 0), Point(10, 0)).divide(5)
    assert [p.x for p in points] == [0, 2, 4, 6, 8, 10]
    assert all(p.y == 0 for p in points)


def test_line_divide_keeps_begin_reference():
    begin = Point(0, 0)
    points = LineSegment(begin, Point(4, 4)).divide(2)
    assert points[0] is begin
    assert points[1] == Point(2, 2)


def test_line_length():
    assert LineSegment(Point(0, 0), Point(3, 4)).length() == 5


def test_intersection_of_diagonals():
    p = LineSegment(Point(0, 0), Point(10, 10)).intersection(LineSegment(Point(0, 10), Point(10, 0)))
    assert (p.x, p.y) == (pytest.approx(5), pytest.approx(5))


def test_intersection_outside_segments():
    p = LineSegment(Point(0, 0), Point(1, 0)).intersection(LineSegment(Point(5, -1), Point(5, 1)))
    assert (p.x, p.y) == (pytest.approx(5), pytest.approx(0))


def test_intersection_parallel_is_none():
    a = LineSegment(Point(0, 0), Point(10, 0))
    assert a.intersection(LineSegment(Point(0, 5), Point(10, 5))) is None
    assert a.intersection(LineSegment(Point(2, 0), Point(8, 0))) is None


def test_hand_drawn_short_segment_is_untouched(rng):
    begin, end = Point(0, 0), Point(5, 0)
    assert LineSegment(begin, end).hand_drawn(rng) == [begin, end]


def test_hand_drawn_jitters_only_interior_points(rng):
    begin, end = Point(0, 0), Point(60, 0)
    points = LineSegment(begin, end).hand_drawn(rng)
    assert len(points) == 11
    assert points[0] is begin
    assert points[-1] == end
    for i, p in enumerate(points[1:-1], start=1):
        assert abs(p.x - 6 * i) <= 1
        assert abs(p.y) <= 1


def test_hand_drawn_respects_divisions_and_variation(rng):
    points = LineSegment(Point(0, 0), Point(10, 0)).hand_drawn(rng, divisions=2, variation=0)
    assert points == [Point(0, 0), Point(5, 0), Point(10, 0)]


def test_bounding_rectangle():
    poly = Polygon([(1, 1), (5, 1), (5, 5), (1, 5)])
    rect = poly.get_bounding_rectangle()
    assert [v.as_tuple() for v in rect] == [(1, 1), (5, 1), (5, 5), (1, 5)]
    assert poly.get_origin() == Point(1, 1)
    assert poly.get_width() == 4
    assert poly.get_height() == 4
    assert poly.get_center() == Point(3, 3)


def test_bounding_rectangle_of_irregular_polygon():
    poly = Polygon([(3, 0), (6, 4), (0, 7)])
    assert [v.as_tuple() for v in poly.get_bounding_rectangle()] == [(0, 0), (6, 0), (6, 7), (0, 7)]


def test_rotate_invalidates_bounds():
    poly = Polygon.from_box(0, 0, 4, 4)
    assert poly.get_width() == 4
    poly.rotate(45)
    assert poly.get_width() == pytest.approx(4 * math.sqrt(2))
    assert poly.get_center().x == pytest.approx(2)


def test_add_vertex_invalidates_bounds():
    poly = Polygon.from_box(0, 0, 4, 4)
    poly.get_bounding_rectangle()
    poly.add_vertex(Point(10, 2))
    assert poly.get_width() == 10


def test_copy_is_deep():
    poly = Polygon.from_box(0, 0, 4, 4)
    clone = poly.copy()
    clone.translate(10, 0)
    assert poly[0] == Point(0, 0)
    assert clone[0] == Point(10, 0)


def test_area():
    assert Polygon.from_box(0, 0, 4, 3).area() == 12
    assert Polygon([(1, 1), (1, 1), (1, 1)]).area() == 0


def test_polygon_hand_drawn_keeps_corners(rng):
    square = Polygon.from_box(0, 0, 60, 60)
    wobbly = square.hand_drawn(rng)
    assert len(wobbly) > len(square)
    assert wobbly[0] == Point(0, 0)
    assert wobbly[0] is not square[0]
    assert square[1] == Point(60, 0)
