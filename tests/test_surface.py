"""Tests for the Pillow drawing surface."""

import dataclasses

import numpy as np
import pytest

from tanglelab.geometry import Point
from tanglelab.surface import DEFAULT_PARAMS, DrawParams, Surface, catmull_rom, to_rgba


@pytest.mark.parametrize("color, expected", [
    (255, (255, 255, 255, 255)),
    (0, (0, 0, 0, 255)),
    ("black", (0, 0, 0, 255)),
    ("#ff0000", (255, 0, 0, 255)),
    ((1, 2, 3), (1, 2, 3, 255)),
    ((1, 2, 3, 4), (1, 2, 3, 4)),
    (None, None),
])
def test_to_rgba(color, expected):
    assert to_rgba(color) == expected


def test_unknown_color_name_raises():
    with pytest.raises(ValueError):
        to_rgba("not-a-colour")


def test_allocate_is_transparent_by_default():
    s = Surface.allocate(8, 4)
    assert s.size == (8, 4)
    assert s.alpha().max() == 0


def test_allocate_with_background():
    s = Surface.allocate(8, 4, "white")
    assert s.image.getpixel((3, 2)) == (255, 255, 255, 255)


def test_rotate_transform():
    s = Surface.allocate(100, 100)
    s.rotate(90, Point(50, 50))
    x, y = s.transform_point((60, 50))
    assert (x, y) == (pytest.approx(50), pytest.approx(60))
    assert s.transform_point((50, 50)) == (pytest.approx(50), pytest.approx(50))
    s.reset_transform()
    assert s.transform_point((60, 50)) == (60, 50)


def test_draw_line_goes_through_transform():
    s = Surface.allocate(20, 20)
    s.translate(5, 0)
    s.draw_line(Point(0, 10), Point(4, 10))
    a = s.alpha()
    assert a[10, 7] == 255
    assert a[10, 0] == 0


def test_draw_circle_ignores_zero_diameter():
    s = Surface.allocate(10, 10)
    s.draw_circle((5, 5), 0, DrawParams(fill="black"))
    assert s.alpha().max() == 0


def test_fill_polygon():
    s = Surface.allocate(20, 20)
    s.fill_polygon([(2, 2), (18, 2), (18, 18), (2, 18)], "red")
    assert s.image.getpixel((10, 10)) == (255, 0, 0, 255)
    assert s.image.getpixel((0, 0))[3] == 0


def test_mask_multiplies_alpha():
    s = Surface.allocate(4, 4, "white")
    matte = Surface.allocate(4, 4)
    matte.fill_polygon([(0, 0), (1, 0), (1, 3), (0, 3)], (255, 255, 255, 255))
    out = s.mask(matte)
    assert out is not s
    assert out.alpha()[0, 0] == 255
    assert out.alpha()[0, 3] == 0
    assert s.alpha()[0, 3] == 255


def test_paste_at_offset():
    base = Surface.allocate(10, 10, "white")
    dot = Surface.allocate(2, 2, "black")
    base.paste(dot, (4, 6))
    assert base.image.getpixel((4, 6)) == (0, 0, 0, 255)
    assert base.image.getpixel((0, 0)) == (255, 255, 255, 255)


def test_catmull_rom_passes_through_end_points():
    pts = catmull_rom((0, 0), (10, 0), (20, 10), (30, 10), samples=8)
    assert len(pts) == 8
    assert pts[0] == pytest.approx((10, 0))
    assert pts[-1] == pytest.approx((20, 10))


def test_save_png(tmp_path):
    s = Surface.allocate(5, 5, 128)
    path = tmp_path / "s.png"
    s.save(str(path))
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert isinstance(s.alpha(), np.ndarray)


def test_draw_params_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMS.outline = "red"
    assert DEFAULT_PARAMS == DrawParams()
