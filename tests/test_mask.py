"""Tests for mask preparation and clipping."""

import numpy as np
import pytest

from tanglelab.geometry import Polygon
from tanglelab.mask import apply_mask, prepare_surface
from tanglelab.surface import DrawParams, Surface


@pytest.fixture
def drawn(white_surface):
    s = white_surface
    s.draw_line((0, 5), (19, 5), DrawParams(outline="red", width=2))
    return s


def test_full_mask_leaves_pixels_unchanged(drawn):
    s = drawn
    out = apply_mask(s, Polygon.from_box(0, 0, 20, 10))
    assert np.array_equal(np.asarray(out.image), np.asarray(s.image))


def test_zero_area_mask_clears_everything(drawn):
    out = apply_mask(drawn, Polygon([(5, 5), (5, 5), (5, 5)]))
    assert out.alpha().max() == 0


def test_self_intersecting_mask_fills_both_lobes():
    bowtie = Polygon([(0, 0), (19, 19), (19, 0), (0, 19)])
    a = apply_mask(Surface.allocate(20, 20, "white"), bowtie).alpha()
    assert a[10, 2] == 255
    assert a[10, 17] == 255
    assert a[2, 10] == 0


def test_two_vertex_mask_clears_everything(drawn):
    out = apply_mask(drawn, Polygon([(0, 0), (19, 9)]))
    assert out.alpha().max() == 0


def test_ignore_mask_returns_surface_untouched(drawn):
    s = drawn
    assert apply_mask(s, Polygon([(5, 5), (5, 5), (5, 5)]), ignore_mask=True) is s


def test_outside_of_mask_is_transparent():
    out = apply_mask(Surface.allocate(20, 20, "white"), Polygon.from_box(0, 0, 10, 20))
    a = out.alpha()
    assert a[10, 4] == 255
    assert a[10, 15] == 0


def test_add_strings_strokes_the_outline():
    out = apply_mask(Surface.allocate(20, 20, "white"), Polygon.from_box(4, 4, 10, 10), add_strings=True)
    assert out.image.getpixel((4, 8)) == (0, 0, 0, 255)
    assert out.image.getpixel((9, 9)) == (255, 255, 255, 255)
    assert out.alpha()[0, 0] == 0


def test_prepare_surface_without_rotation():
    frame = prepare_surface(Polygon.from_box(10, 20, 30, 40))
    assert frame.offset == (10, 20)
    assert frame.surface.size == (30, 40)
    assert frame.mask.get_origin().as_tuple() == (0, 0)
    assert frame.surface.alpha().max() == 0


def test_prepare_surface_with_rotation_grows():
    frame = prepare_surface(Polygon.from_box(0, 0, 100, 100), rotation=45)
    assert frame.offset == (-21, -21)
    assert frame.surface.size == (142, 142)
    assert frame.mask.get_origin().as_tuple() == (21, 21)
    x, y = frame.surface.transform_point((71, 71))
    assert abs(x - 71) < 1e-9 and abs(y - 71) < 1e-9


def test_frame_apply_clips_to_mask():
    frame = prepare_surface(Polygon.from_box(0, 0, 40, 40), rotation=30, background="white")
    frame.apply()
    a = frame.surface.alpha()
    assert a[0, 0] == 0
    cy, cx = frame.height // 2, frame.width // 2
    assert a[cy, cx] == 255
