"""Emingle: a grid with an interior box spiral in every cell, all starting from one corner."""

from dataclasses import dataclass
from typing import Any

from ..spiral import BoxSpiral, resolve_start_corner
from ..surface import Color, DrawParams
from .base import GridPattern, TangleContext, draw_grid


@dataclass
class EmingleOptions:
    grid: Any = None
    start_corner: str = "nw"     # nw, ne, se, sw or random
    divisions: int = 6
    stroke_color: Color = "black"
    stroke_width: int = 1


class Emingle(GridPattern):
    name = "emingle"
    options_class = EmingleOptions

    def build_grid(self, ctx: TangleContext) -> None:
        o = self.options
        params = DrawParams(outline=o.stroke_color, width=o.stroke_width)
        start = resolve_start_corner(o.start_corner, ctx.rng)
        lattice = ctx.lattice
        for r in range(len(lattice) - 1):
            for c in range(len(lattice[r]) - 1):
                BoxSpiral(lattice[r][c], lattice[r][c + 1], lattice[r + 1][c + 1], lattice[r + 1][c],
                          divisions=o.divisions, start_corner=start, interior=True,
                          params=params).draw(ctx.surface)
        if not self.grid.show:
            # Emingle always shows its cells.
            draw_grid(ctx.surface, lattice, params)
