"""Ambler: a lattice of interior box spirals whose start corner turns from cell to cell."""

from dataclasses import dataclass
from typing import Any

from ..spiral import START_CORNERS, BoxSpiral
from ..surface import Color, DrawParams
from .base import GridPattern, TangleContext


@dataclass
class AmblerOptions:
    grid: Any = None
    divisions: int = 6
    stroke_color: Color = "black"
    stroke_width: int = 1
    variation: float = 0.0


class Ambler(GridPattern):
    name = "ambler"
    options_class = AmblerOptions
    show_grid = True

    def build_grid(self, ctx: TangleContext) -> None:
        o = self.options
        params = DrawParams(outline=o.stroke_color, width=o.stroke_width)
        lattice = ctx.lattice
        col_rotate = 0
        row_rotate = col_rotate + 1
        for r in range(len(lattice) - 1):
            for c in range(len(lattice[r]) - 1):
                spiral = BoxSpiral(lattice[r][c], lattice[r][c + 1], lattice[r + 1][c + 1], lattice[r + 1][c],
                                   divisions=o.divisions, start_corner=START_CORNERS[col_rotate % 4],
                                   interior=True, params=params)
                spiral.draw(ctx.surface, ctx.rng, o.variation)
                col_rotate += 1
            col_rotate = row_rotate
            row_rotate += 1
