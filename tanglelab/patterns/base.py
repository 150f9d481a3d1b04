"""Shared plumbing for patterns: the build context, base classes and the render pipeline."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Type

from ..config import load_options
from ..geometry import Polygon
from ..grid import GridOptions, Lattice, build_lattice, grid_segments
from ..mask import MaskFrame, prepare_surface
from ..surface import Color, DrawParams, Surface

logger = logging.getLogger(__name__)


@dataclass
class TangleContext:
    """Everything a pattern needs while it draws. One per tangle instance."""
    surface: Surface
    rng: random.Random
    width: int
    height: int
    lattice: Lattice = field(default_factory=list)
    footprints: List[Polygon] = field(default_factory=list)

    @property
    def region(self) -> Polygon:
        return Polygon.from_box(0, 0, self.width, self.height)


class Pattern:
    """A tangle design. Subclasses set ``options_class`` and implement ``build``."""
    name = "pattern"
    options_class: Type = None

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any):
        self.options = load_options(self.options_class, options, **overrides)

    def build(self, ctx: TangleContext) -> None:
        raise NotImplementedError


class GridPattern(Pattern):
    """A pattern anchored on a lattice; the lattice is built before ``build_grid`` runs."""
    show_grid = False

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any):
        super().__init__(options, **overrides)
        grid = self.options.grid
        if not isinstance(grid, GridOptions):
            grid = GridOptions.from_options({"show": self.show_grid, **dict(grid or {})})
        self.grid = grid

    def build(self, ctx: TangleContext) -> None:
        ctx.lattice = build_lattice(ctx.width, ctx.height, self.grid, ctx.rng)
        self.build_grid(ctx)
        if self.grid.show:
            draw_grid(ctx.surface, ctx.lattice, DrawParams(outline=self.options.stroke_color))

    def build_grid(self, ctx: TangleContext) -> None:
        raise NotImplementedError


def draw_grid(surface: Surface, lattice: Lattice, params: DrawParams) -> None:
    for a, b in grid_segments(lattice):
        surface.draw_line(a, b, params)


def render_tangle(pattern: Pattern, mask: Polygon, rng: Optional[random.Random] = None,
                  rotation: Optional[float] = None, add_strings: bool = False,
                  ignore_mask: bool = False, background: Optional[Color] = None) -> MaskFrame:
    """Prepare a working surface for ``mask``, draw ``pattern`` into it and clip."""
    if rng is None:
        rng = random.Random()
    frame = prepare_surface(mask, rotation, background)
    ctx = TangleContext(frame.surface, rng, frame.width, frame.height)
    pattern.build(ctx)
    frame.apply(add_strings=add_strings, ignore_mask=ignore_mask)
    logger.debug("Rendered %s into %dx%d", pattern.name, frame.width, frame.height)
    return frame
