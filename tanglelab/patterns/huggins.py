"""Huggins: lattice holes joined by curves that weave over and under each other."""

import math
from dataclasses import dataclass
from typing import Any, List, Union

from ..geometry import Point, Polar, min_value
from ..surface import Color, DrawParams
from .base import GridPattern, TangleContext

# Offsets of the control points around each hole, in degrees.
CORNERS = (225, 315, 45, 135)


@dataclass
class HugginsOptions:
    grid: Any = None
    hole_diameter: Union[float, str] = "proportional"   # 1/4 of the smallest grid spacing
    hole_fill_color: Color = "black"
    holes_show: bool = True
    curve: float = 5    # 1 gives straight connectors, larger values bow them
    stroke_color: Color = "black"
    stroke_width: int = 1


class Huggins(GridPattern):
    name = "huggins"
    options_class = HugginsOptions

    def hole_diameter(self) -> float:
        if self.options.hole_diameter == "proportional":
            return min(min_value(self.grid.x.spacing), min_value(self.grid.y.spacing)) / 4
        return self.options.hole_diameter

    def build_grid(self, ctx: TangleContext) -> None:
        o = self.options
        lattice = ctx.lattice
        diameter = self.hole_diameter()
        radius = diameter / 2
        control = o.curve * radius
        params = DrawParams(outline=o.stroke_color, width=o.stroke_width)

        # Per point: 4 points on the hole rim, then 4 control points further out.
        cp: List[List[List[Point]]] = [
            [[Polar(d, math.radians(a)).to_point(p) for d in (radius, control) for a in CORNERS] for p in row]
            for row in lattice
        ]

        col_ind = 0
        row_ind = 1
        for r in range(len(lattice)):
            for c in range(len(lattice[r]) - 1):
                if col_ind % 2:
                    c1, p1, p2, c2 = cp[r][c][4], cp[r][c][3], cp[r][c + 1][2], cp[r][c + 1][5]
                else:
                    c1, p1, p2, c2 = cp[r][c][7], cp[r][c][0], cp[r][c + 1][1], cp[r][c + 1][6]
                col_ind += 1
                ctx.surface.draw_curve(c1, p1, p2, c2, params)
            col_ind = row_ind
            row_ind += 1

        col_ind = 0
        row_ind = 1
        for r in range(len(lattice) - 1):
            for c in range(len(lattice[r])):
                if col_ind % 2:
                    c1, p1, p2, c2 = cp[r][c][5], cp[r][c][0], cp[r + 1][c][3], cp[r + 1][c][6]
                else:
                    c1, p1, p2, c2 = cp[r][c][4], cp[r][c][1], cp[r + 1][c][2], cp[r + 1][c][7]
                col_ind += 1
                ctx.surface.draw_curve(c1, p1, p2, c2, params)
            col_ind = row_ind
            row_ind += 1

        if o.holes_show:
            hole = DrawParams(fill=o.hole_fill_color, outline=o.stroke_color, width=o.stroke_width)
            for row in lattice:
                for p in row:
                    ctx.surface.draw_circle(p, diameter, hole)
