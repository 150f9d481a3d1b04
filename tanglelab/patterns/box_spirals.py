"""BoxSpirals: free-standing box spirals of random size and turn, packed without overlap."""

from dataclasses import dataclass
from typing import Optional

from ..geometry import Value, min_value
from ..placement import place
from ..spiral import random_box_spiral
from ..surface import Color, DrawParams
from .base import Pattern, TangleContext


@dataclass
class BoxSpiralsOptions:
    size: Value = 40
    divisions: Value = 6
    start_corner: str = "random"
    rotation: str = "random"
    angle: Value = 0.0                    # degrees
    desired_count: Optional[int] = None   # default: enough to tile the area at the smallest size
    margin: float = 0.0
    outline: bool = True
    variation: float = 0.5
    stroke_color: Color = "black"
    stroke_width: int = 1


class BoxSpirals(Pattern):
    name = "box_spirals"
    options_class = BoxSpiralsOptions

    def build(self, ctx: TangleContext) -> None:
        o = self.options
        params = DrawParams(outline=o.stroke_color, width=o.stroke_width)
        desired = o.desired_count
        if desired is None:
            smallest = min_value(o.size)
            desired = int((ctx.width / smallest) * (ctx.height / smallest))

        def make_spiral(rng, center):
            return random_box_spiral(rng, center, o.size, o.divisions, o.start_corner, o.rotation,
                                     o.angle, params=params, outline=o.outline)

        def render(spiral):
            spiral.draw(ctx.surface, ctx.rng, o.variation)

        place(ctx.region, desired, make_spiral, ctx.rng, footprints=ctx.footprints,
              render=render, margin=o.margin)
