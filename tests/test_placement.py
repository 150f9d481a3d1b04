"""Tests for randomized motif placement."""

from tanglelab.geometry import Polygon
from tanglelab.placement import never_overlap, place, polygons_overlap, sample_center, scatter


class Square:
    def __init__(self, center, size):
        h = size / 2
        self.footprint = Polygon.from_box(center.x - h, center.y - h, size, size)

    def draw(self, surface):
        pass


def squares(size):
    return lambda rng, center: Square(center, size)


def test_overlap_predicate():
    a = Polygon.from_box(0, 0, 10, 10)
    assert not polygons_overlap(a, [])
    assert not polygons_overlap(a, [Polygon.from_box(20, 20, 5, 5)])
    assert polygons_overlap(a, [Polygon.from_box(5, 5, 10, 10)])
    assert polygons_overlap(a, [Polygon.from_box(2, 2, 2, 2)])


def test_region_saturates(rng):
    drawn = []
    result = place(Polygon.from_box(0, 0, 10, 10), 5, squares(100), rng, render=drawn.append)
    assert result.placed == 1
    assert result.failures == 16
    assert len(result.footprints) == 1
    assert len(drawn) == 1


def test_placed_footprints_do_not_overlap(rng):
    result = place(Polygon.from_box(0, 0, 200, 200), 30, squares(15), rng)
    shapes = [f.to_shapely() for f in result.footprints]
    for i, a in enumerate(shapes):
        for b in shapes[i + 1:]:
            assert not a.intersects(b)


def test_shared_footprints_block_later_passes(rng):
    blocker = [Polygon.from_box(-50, -50, 300, 300)]
    result = place(Polygon.from_box(0, 0, 100, 100), 3, squares(5), rng, footprints=blocker)
    assert result.placed == 0
    assert result.footprints is blocker


def test_never_overlap_places_everything(rng):
    result = place(Polygon.from_box(0, 0, 10, 10), 8, squares(100), rng, overlap=never_overlap)
    assert result.placed == 8
    assert result.failures == 0


def test_sample_center_respects_margin(rng):
    region = Polygon.from_box(10, 20, 100, 50)
    for _ in range(500):
        p = sample_center(region, rng, margin=5)
        assert 15 <= p.x <= 105
        assert 25 <= p.y <= 65


def test_scatter_tries_exactly_n(rng):
    result = scatter(Polygon.from_box(0, 0, 50, 50), 40, squares(10), rng)
    assert result.placed + result.failures == 40
    assert result.placed >= 1
