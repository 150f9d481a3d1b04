"""
surface.py
==========

Pillow-backed rendering surface. Patterns only ever see this small API:
lines, polylines, circles, rectangles, Catmull-Rom curves, polygon fill and
stroke, alpha masking and pasting.

Drawing calls go through an affine transform (identity by default) so a
pattern can be drawn in its own coordinate system and land rotated on the
surface. Masking and pasting work in raw pixel space.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageChops, ImageColor, ImageDraw

from .geometry import Point

Color = Union[int, str, Tuple[int, int, int], Tuple[int, int, int, int]]
XY = Union[Point, Tuple[float, float]]


def to_rgba(color: Optional[Color]) -> Optional[Tuple[int, int, int, int]]:
    """Normalize a grey level, hex/named string or RGB(A) tuple."""
    if color is None:
        return None
    if isinstance(color, int):
        return (color, color, color, 255)
    if isinstance(color, str):
        return ImageColor.getcolor(color, "RGBA")
    if len(color) == 3:
        return tuple(color) + (255,)
    return tuple(color)


@dataclass(frozen=True)
class DrawParams:
    fill: Optional[Color] = None
    outline: Optional[Color] = "black"
    width: int = 1  # stroke width in pixels


DEFAULT_PARAMS = DrawParams()


class Surface:
    """An RGBA image plus a drawing transform."""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image
        self._draw = ImageDraw.Draw(self.image)
        self._matrix = np.eye(3)

    @classmethod
    def allocate(cls, width: int, height: int, background: Optional[Color] = None) -> "Surface":
        """New surface; transparent unless a background is given."""
        bg = to_rgba(background) or (0, 0, 0, 0)
        return cls(Image.new("RGBA", (int(width), int(height)), color=bg))

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.size[0]

    @property
    def height(self) -> int:
        return self.image.size[1]

    # -- transform -------------------------------------------------------

    def translate(self, dx: float, dy: float) -> None:
        m = np.array([[1, 0, dx], [0, 1, dy], [0, 0, 1]], dtype=float)
        self._matrix = self._matrix @ m

    def rotate(self, degrees: float, pivot: Optional[XY] = None) -> None:
        """Rotate subsequent drawing by ``degrees`` around ``pivot``."""
        px, py = (0.0, 0.0) if pivot is None else tuple(pivot)
        r = math.radians(degrees)
        ca, sa = math.cos(r), math.sin(r)
        self.translate(px, py)
        self._matrix = self._matrix @ np.array([[ca, -sa, 0], [sa, ca, 0], [0, 0, 1]], dtype=float)
        self.translate(-px, -py)

    def reset_transform(self) -> None:
        self._matrix = np.eye(3)

    def transform_point(self, p: XY) -> Tuple[float, float]:
        x, y = tuple(p)
        v = self._matrix @ np.array([x, y, 1.0])
        return (float(v[0]), float(v[1]))

    def _xy(self, points: Iterable[XY]):
        return [self.transform_point(p) for p in points]

    # -- drawing ---------------------------------------------------------

    def draw_line(self, p1: XY, p2: XY, params: DrawParams = DEFAULT_PARAMS) -> None:
        self.draw_polyline([p1, p2], params)

    def draw_polyline(self, points: Sequence[XY], params: DrawParams = DEFAULT_PARAMS) -> None:
        if params.outline is None or len(points) < 2:
            return
        self._draw.line(self._xy(points), fill=to_rgba(params.outline), width=params.width, joint="curve")

    def draw_circle(self, center: XY, diameter: float, params: DrawParams = DEFAULT_PARAMS) -> None:
        if diameter <= 0:
            return
        cx, cy = self.transform_point(center)
        r = diameter / 2
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r],
                           fill=to_rgba(params.fill), outline=to_rgba(params.outline), width=params.width)

    def draw_polygon(self, points: Sequence[XY], params: DrawParams = DEFAULT_PARAMS) -> None:
        pts = self._xy(points)
        if len(pts) < 2:
            return
        if params.fill is not None:
            self._draw.polygon(pts, fill=to_rgba(params.fill))
        if params.outline is not None:
            # Polygon outline width support is limited; stroke as a closed polyline.
            self._draw.line(pts + [pts[0]], fill=to_rgba(params.outline), width=params.width, joint="curve")

    def fill_polygon(self, points: Sequence[XY], fill: Color) -> None:
        self.draw_polygon(points, DrawParams(fill=fill, outline=None))

    def stroke_polygon(self, points: Sequence[XY], params: DrawParams = DEFAULT_PARAMS) -> None:
        self.draw_polygon(points, DrawParams(fill=None, outline=params.outline, width=params.width))

    def draw_rect(self, origin: XY, width: float, height: float, params: DrawParams = DEFAULT_PARAMS) -> None:
        x, y = tuple(origin)
        self.draw_polygon([(x, y), (x + width, y), (x + width, y + height), (x, y + height)], params)

    def draw_curve(self, c1: XY, p1: XY, p2: XY, c2: XY,
                   params: DrawParams = DEFAULT_PARAMS, samples: int = 24) -> None:
        """Catmull-Rom segment from p1 to p2, shaped by control points c1 and c2."""
        self.draw_polyline(catmull_rom(c1, p1, p2, c2, samples), params)

    # -- compositing -----------------------------------------------------

    def mask(self, matte: "Surface") -> "Surface":
        """New surface whose alpha is this alpha scaled by ``matte``'s alpha."""
        alpha = ImageChops.multiply(self.image.getchannel("A"), matte.image.getchannel("A"))
        out = self.image.copy()
        out.putalpha(alpha)
        return Surface(out)

    def paste(self, other: "Surface", offset: Tuple[int, int] = (0, 0)) -> None:
        """Alpha-composite ``other`` on top of this surface at ``offset``."""
        layer = Image.new("RGBA", self.size, (0, 0, 0, 0))
        layer.paste(other.image, (int(offset[0]), int(offset[1])))
        self.image.alpha_composite(layer)

    def alpha(self) -> np.ndarray:
        return np.asarray(self.image.getchannel("A"))

    def save(self, path: str) -> None:
        self.image.save(path, format="PNG", optimize=True)


def catmull_rom(c1: XY, p1: XY, p2: XY, c2: XY, samples: int = 24):
    """Sample a uniform Catmull-Rom segment between p1 and p2."""
    t = np.linspace(0.0, 1.0, samples)[:, None]
    a, b, c, d = (np.array(tuple(p), dtype=float) for p in (c1, p1, p2, c2))
    pts = 0.5 * (2*b + (-a + c)*t + (2*a - 5*b + 4*c - d)*t**2 + (-a + 3*b - 3*c + d)*t**3)
    return list(map(tuple, pts.tolist()))
