"""
zentangle.py
============

A complete Zentangle tile: a square, triangle or circle with a hand-drawn
border, filled by compositing several masked tangles.

>>> z = Zentangle(600, "square", rng=rng_from_seed(7))
>>> z.add_tangle(render_tangle(Ambler(), z.full_mask(), rng=z.rng))
>>> z.render().save("tile.png")
"""

import logging
import math
import random
from typing import List, Optional

import numpy as np

from .geometry import Point, Polar, Polygon, rng_from_seed
from .mask import MaskFrame, apply_mask
from .surface import Color, DrawParams, Surface

logger = logging.getLogger(__name__)

SHAPES = ("square", "triangle", "circle")


class Zentangle:
    def __init__(self, size: int, shape: str = "square", background: Color = 255,
                 border_size: float = 20, rng: Optional[random.Random] = None,
                 stroke: Optional[DrawParams] = None):
        if shape not in SHAPES:
            raise ValueError(f"Unknown Zentangle shape: {shape!r}. Choose from {list(SHAPES)}")
        self.rng = rng or rng_from_seed(None)
        self.shape = shape
        self.background = background
        self.border_size = border_size
        self.stroke = stroke or DrawParams(outline=0)
        self.width = int(size)
        self.height = int(round(size * 0.87)) if shape == "triangle" else int(size)
        self.surface = Surface.allocate(self.width, self.height)
        self.areas: List[MaskFrame] = []

        center = Point(self.width / 2, self.height / 2)
        if shape == "circle":
            angles = np.radians(np.arange(360))
            self.edge = Polygon(Polar(self.width / 2 - 1, a).to_point(center) for a in angles.tolist())
            self.border = Polygon(
                Polar(self.width / 2 - border_size, a).to_point(center).vary(1, self.rng) for a in angles.tolist()
            )
        elif shape == "triangle":
            center = Point(self.width / 2, 2 * self.height / 3)
            self.edge = Polygon([(0, self.height), (self.width / 2, 0), (self.width, self.height)])
            distance = 2 * self.height / 3 - 2 * border_size
            self.border = Polygon(
                Polar(distance, math.radians(a)).to_point(center) for a in (270, 30, 150)
            ).hand_drawn(self.rng)
        else:
            self.edge = self.full_mask()
            b = border_size
            self.border = Polygon.from_box(b, b, self.width - 2 * b, self.height - 2 * b).hand_drawn(self.rng)

    def full_mask(self) -> Polygon:
        """A mask covering the entire tile."""
        return Polygon.from_box(0, 0, self.width, self.height)

    def add_tangle(self, frame: MaskFrame) -> None:
        """Composite a rendered tangle at its position on the tile."""
        self.areas.append(frame)
        self.surface.paste(frame.surface, frame.offset)

    def render(self) -> Surface:
        """Background, the tangles cut to the border, then the border and edge lines."""
        out = Surface.allocate(self.width, self.height, self.background)
        out.paste(apply_mask(self.surface, self.border))
        out.stroke_polygon(self.border, self.stroke)
        out.stroke_polygon(self.edge, self.stroke)
        logger.debug("Rendered %s Zentangle with %d tangles", self.shape, len(self.areas))
        return out
