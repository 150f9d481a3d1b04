"""W2: square holes on a lattice joined by straight lines in an over-under weave."""

from dataclasses import dataclass
from typing import Any, Union

from ..geometry import Point, min_value
from ..surface import Color, DrawParams
from .base import GridPattern, TangleContext


@dataclass
class W2Options:
    grid: Any = None
    hole_size: Union[float, str] = "proportional"   # 1/4 of the smallest grid spacing
    hole_fill_color: Color = "black"
    holes_show: bool = True
    stroke_color: Color = "black"
    stroke_width: int = 1


class W2(GridPattern):
    name = "w2"
    options_class = W2Options

    def hole_size(self) -> float:
        if self.options.hole_size == "proportional":
            return min(min_value(self.grid.x.spacing), min_value(self.grid.y.spacing)) / 4
        return self.options.hole_size

    def build_grid(self, ctx: TangleContext) -> None:
        o = self.options
        lattice = ctx.lattice
        size = self.hole_size()
        h = size / 2
        params = DrawParams(outline=o.stroke_color, width=o.stroke_width)

        # Square corners around each point: nw, ne, se, sw.
        cp = [[[Point(p.x - h, p.y - h), Point(p.x + h, p.y - h), Point(p.x + h, p.y + h), Point(p.x - h, p.y + h)]
               for p in row] for row in lattice]

        col_ind = 0
        row_ind = 1
        for r in range(len(lattice)):
            for c in range(len(lattice[r]) - 1):
                if col_ind % 2:
                    p1, p2 = cp[r][c][2], cp[r][c + 1][3]
                else:
                    p1, p2 = cp[r][c][1], cp[r][c + 1][0]
                col_ind += 1
                ctx.surface.draw_line(p1, p2, params)
            col_ind = row_ind
            row_ind += 1

        col_ind = 0
        row_ind = 1
        for r in range(len(lattice) - 1):
            for c in range(len(lattice[r])):
                if col_ind % 2:
                    p1, p2 = cp[r][c][3], cp[r + 1][c][0]
                else:
                    p1, p2 = cp[r][c][2], cp[r + 1][c][1]
                col_ind += 1
                ctx.surface.draw_line(p1, p2, params)
            col_ind = row_ind
            row_ind += 1

        if o.holes_show:
            hole = DrawParams(fill=o.hole_fill_color, outline=o.stroke_color, width=o.stroke_width)
            for row in cp:
                for corners in row:
                    ctx.surface.draw_rect(corners[0], size, size, hole)
