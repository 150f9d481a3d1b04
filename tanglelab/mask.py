"""
mask.py
=======

Restrict a rendered tangle to an arbitrary polygon.

Rotated tangles are handled before anything is drawn: ``prepare_surface``
grows the working surface until it holds both the mask's bounding rectangle
and the rotated mask's bounding rectangle, then sets the drawing transform to
rotate about the center of that larger surface. Patterns fill the whole
working surface and ``apply_mask`` cuts the result down to the polygon.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import Point, Polygon
from .surface import Color, DrawParams, Surface

logger = logging.getLogger(__name__)

OPAQUE = (255, 255, 255, 255)


@dataclass
class MaskFrame:
    """A working surface together with the mask expressed in its pixels."""
    surface: Surface
    offset: Tuple[int, int]      # surface origin, in mask coordinates
    mask: Polygon                # mask translated into surface coordinates
    rotation: Optional[float] = None

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def height(self) -> int:
        return self.surface.height

    def apply(self, add_strings: bool = False, ignore_mask: bool = False,
              stroke: Optional[DrawParams] = None) -> Surface:
        self.surface = apply_mask(self.surface, self.mask, add_strings, ignore_mask, stroke)
        return self.surface


def _pixel_bounds(*rects: Polygon) -> Tuple[int, int, int, int]:
    x0 = math.floor(min(r[0].x for r in rects))
    y0 = math.floor(min(r[0].y for r in rects))
    x1 = math.ceil(max(r[2].x for r in rects))
    y1 = math.ceil(max(r[2].y for r in rects))
    return x0, y0, x1, y1


def prepare_surface(mask: Polygon, rotation: Optional[float] = None,
                    background: Optional[Color] = None) -> MaskFrame:
    """Allocate the working surface for a tangle clipped to ``mask``."""
    rects = [mask.get_bounding_rectangle()]
    if rotation:
        rects.append(mask.copy().rotate(rotation).get_bounding_rectangle())
    x0, y0, x1, y1 = _pixel_bounds(*rects)
    width, height = max(1, x1 - x0), max(1, y1 - y0)

    surface = Surface.allocate(width, height, background)
    if rotation:
        surface.rotate(rotation, Point(width / 2, height / 2))
    logger.debug("Working surface %dx%d at (%d, %d), rotation %s", width, height, x0, y0, rotation)
    return MaskFrame(surface, (x0, y0), mask.copy().translate(-x0, -y0), rotation)


def apply_mask(surface: Surface, mask: Polygon, add_strings: bool = False,
               ignore_mask: bool = False, stroke: Optional[DrawParams] = None) -> Surface:
    """Make everything outside ``mask`` fully transparent.

    With ``add_strings`` the mask outline is stroked back onto the result.
    With ``ignore_mask`` the surface is returned untouched.
    """
    if ignore_mask:
        return surface

    matte = Surface.allocate(surface.width, surface.height)
    if len(mask) >= 3 and mask.to_shapely().area > 0:
        matte.fill_polygon(mask, OPAQUE)
    clipped = surface.mask(matte)
    if add_strings:
        clipped.stroke_polygon(mask, stroke or DrawParams())
    return clipped
