"""
aahs.py
=======

Aahs: star-burst motifs ("aahs") packed without overlap, then small dots
scattered into the gaps that are left.

Each aah has ``arm_count`` arms. Arm length, angle and the gap at the center
are Gaussian around their nominal values, and each arm ends in a small tip
circle. Its footprint alternates a vertex beyond every tip with a vertex
pulled in between arms, so neighbours can nest into each other's gaps.
"""

import math
import random
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from ..config import load_options
from ..geometry import Point, Polar, Polygon, Value, get_value, max_value
from ..placement import never_overlap, place, polygons_overlap, scatter
from ..presets import get_preset
from ..surface import Color, DrawParams, Surface
from .base import Pattern, TangleContext


DEBUG_FILL = (128, 0, 0, 128)


# ---------------------------- Motifs ----------------------------------------

@dataclass
class AahOptions:
    enable: bool = True
    size: Optional[float] = None          # default min(width, height) / 8
    size_sdp: float = 15                  # size standard deviation, % of size
    desired_count: Optional[int] = None
    arm_count: int = 8
    theta_sd: float = 5                   # arm angle standard deviation, degrees
    length_sdp: float = 15                # arm length standard deviation, % of length
    gap_sdp: float = 10                   # center gap, % of length
    rotate: bool = True
    tip_distance_percent: float = 100
    tip_diameter: Union[float, str] = "gap"
    fill_color: Color = 0
    stroke_color: Color = 0
    stroke_width: int = 1

    def __post_init__(self):
        self.arm_count = max(3, int(self.arm_count))


@dataclass
class DotOptions:
    enable: bool = True
    size: Value = 3
    spacing: float = 400                  # footprint radius, % of size
    fill_color: Color = 0
    stroke_color: Color = 0

    def __post_init__(self):
        self.spacing = max(100, self.spacing)


@dataclass
class AahArm:
    start: Point
    stop: Point
    tip_center: Point
    tip_diameter: float


class Aah:
    def __init__(self, size: float, center: Point, rng: random.Random, options: Optional[AahOptions] = None):
        o = options or AahOptions()
        self.options = o
        self.center = center
        self.size = size
        self.arms: List[AahArm] = []
        self.footprint = Polygon()

        length = size / 2
        d_angle = 2 * math.pi / o.arm_count
        rotation = rng.uniform(0, d_angle) if o.rotate else 0
        for i in range(o.arm_count):
            angle = i * d_angle
            c = Polar(rng.gauss(length, o.length_sdp / 100 * length),
                      rng.gauss(angle + rotation, o.theta_sd * math.pi / 180))
            gap = rng.gauss(o.gap_sdp, o.gap_sdp / 7) / 100 * length
            tip_diameter = self.tip_diameter(gap)
            self.arms.append(AahArm(
                start=Polar(gap, c.a).to_point(center),
                stop=c.to_point(center),
                tip_center=Polar(c.r * (o.tip_distance_percent / 100), c.a).to_point(center),
                tip_diameter=tip_diameter,
            ))
            reach = max(c.r, c.r * (o.tip_distance_percent / 100)) + tip_diameter / 2
            self.footprint.add_vertex(Polar(reach + 5 * gap, c.a).to_point(center))
            self.footprint.add_vertex(Polar(0.6 * c.r, c.a + d_angle / 2).to_point(center))

    def tip_diameter(self, gap: float) -> float:
        tip = self.options.tip_diameter
        if tip == "gap":
            return gap
        if isinstance(tip, (int, float)):
            return tip
        return 10

    def draw(self, surface: Surface) -> None:
        o = self.options
        params = DrawParams(fill=o.fill_color, outline=o.stroke_color, width=o.stroke_width)
        for arm in self.arms:
            surface.draw_line(arm.start, arm.stop, params)
            surface.draw_circle(arm.tip_center, arm.tip_diameter, params)


class Dot:
    def __init__(self, size: float, center: Point, options: Optional[DotOptions] = None):
        o = options or DotOptions()
        self.options = o
        self.size = size
        self.center = center
        radius = o.spacing / 100 * size
        self.footprint = Polygon(Polar(radius, i * math.pi / 4).to_point(center) for i in range(8))

    def draw(self, surface: Surface) -> None:
        o = self.options
        surface.draw_circle(self.center, self.size, DrawParams(fill=o.fill_color, outline=o.stroke_color))


# ---------------------------- Tangle ----------------------------------------

@dataclass
class AahsOptions:
    aah: Any = None
    dot: Any = None
    margin: Optional[float] = None        # default aah size / 6
    avoid_collisions: bool = True
    debug: bool = False                   # shade footprints


def _as_options(cls, value):
    if isinstance(value, cls):
        return value
    return load_options(cls, value)


class Aahs(Pattern):
    name = "aahs"
    options_class = AahsOptions

    def __init__(self, options=None, **overrides):
        super().__init__(options, **overrides)
        plan = get_preset("aahs").options
        aah = plan["aah"] if self.options.aah is None else self.options.aah
        dot = plan["dot"] if self.options.dot is None else self.options.dot
        self.aah = _as_options(AahOptions, aah)
        self.dot = _as_options(DotOptions, dot)

    def build(self, ctx: TangleContext) -> None:
        region = ctx.region
        overlap = polygons_overlap if self.options.avoid_collisions else never_overlap
        size = self.aah.size if self.aah.size is not None else min(ctx.width, ctx.height) / 8
        margin = self.options.margin if self.options.margin is not None else size / 6

        def render(motif):
            motif.draw(ctx.surface)
            if self.options.debug:
                ctx.surface.fill_polygon(motif.footprint, DEBUG_FILL)

        if self.aah.enable:
            desired = self.aah.desired_count
            if desired is None:
                desired = int((ctx.width / size) * (ctx.height / size) * 10)
            sd = self.aah.size_sdp / 100 * size

            def make_aah(rng, center):
                return Aah(rng.gauss(size, sd), center, rng, self.aah)

            place(region, desired, make_aah, ctx.rng, overlap, ctx.footprints, render, margin)

        if self.dot.enable:
            ds = max_value(self.dot.size) * 2
            attempts = int((ctx.width / ds) * (ctx.height / ds))

            def make_dot(rng, center):
                return Dot(get_value(self.dot.size, rng), center, self.dot)

            scatter(region, attempts, make_dot, ctx.rng, overlap, ctx.footprints, render, margin)
