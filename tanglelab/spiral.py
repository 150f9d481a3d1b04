"""
spiral.py
=========

Square spirals inside an arbitrary quadrilateral.

The quadrilateral is cut into ``divisions x divisions`` cells by two families
of transversal lines; their pairwise intersections form a point pool indexed
``row * (divisions + 1) + col``. The spiral itself is pure index arithmetic
over that pool, so it works the same for squares and for the skewed cells of a
jittered lattice.

    nw +--+--+--+ ne        direction  0 down
       |  .  .  |                      1 right
       +  .  .  +                      2 up
       |  .  .  |                      3 left
    sw +--+--+--+ se

``ccw`` turns +1 after every segment (nw: down, right, up, left, ...), ``cw``
turns -1. The first ring takes three segments, every ring after it two, and
each ring is one cell shorter than the last. ``interior`` skips the outer
ring of the pool.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .geometry import LineSegment, Point, Polygon, Value, get_int, get_value
from .surface import DEFAULT_PARAMS, DrawParams, Surface

logger = logging.getLogger(__name__)

START_CORNERS = ("nw", "sw", "se", "ne")
ROTATIONS = ("ccw", "cw")

DOWN, RIGHT, UP, LEFT = range(4)


# ---------------------------- Point pool ------------------------------------

def clamp_divisions(divisions: int, interior: bool = False) -> int:
    return max(3 if interior else 2, int(divisions))


def point_pool(nw: Point, ne: Point, se: Point, sw: Point, divisions: int) -> List[Optional[Point]]:
    """(divisions+1)^2 proportionally spaced points inside the quadrilateral.

    Entries are None where two transversals are parallel.
    """
    west = LineSegment(nw, sw).divide(divisions)
    east = LineSegment(ne, se).divide(divisions)
    north = LineSegment(nw, ne).divide(divisions)
    south = LineSegment(sw, se).divide(divisions)
    verticals = [LineSegment(north[i], south[i]) for i in range(divisions + 1)]
    horizontals = [LineSegment(west[i], east[i]) for i in range(divisions + 1)]
    return [h.intersection(v) for h in horizontals for v in verticals]


# ---------------------------- Path ------------------------------------------

@dataclass
class SpiralState:
    current: int
    direction: int
    step: int
    level_count: int


def initial_state(divisions: int, start_corner: str = "nw", rotation: str = "ccw",
                  interior: bool = False) -> SpiralState:
    if start_corner not in START_CORNERS:
        raise ValueError(f"Unknown start corner: {start_corner!r}. Choose from {list(START_CORNERS)}")
    if rotation not in ROTATIONS:
        raise ValueError(f"Unknown rotation: {rotation!r}. Choose from {list(ROTATIONS)}")
    d = divisions
    o = 1 if interior else 0
    row, col = {
        "nw": (o, o),
        "sw": (d - o, o),
        "se": (d - o, d - o),
        "ne": (o, d - o),
    }[start_corner]
    direction = START_CORNERS.index(start_corner)
    if rotation == "cw":
        direction = (direction + 1) % 4
    return SpiralState(current=row * (d + 1) + col, direction=direction,
                       step=2 if interior else 0, level_count=3)


def spiral_pairs(divisions: int, start_corner: str = "nw", rotation: str = "ccw",
                 interior: bool = False) -> List[Tuple[int, int]]:
    """Ordered pool index pairs, one per segment of the spiral."""
    d = clamp_divisions(divisions, interior)
    state = initial_state(d, start_corner, rotation, interior)
    turn = 1 if rotation == "ccw" else -1
    moves = {DOWN: d + 1, RIGHT: 1, UP: -(d + 1), LEFT: -1}
    limit = 5 * d

    pairs: List[Tuple[int, int]] = []
    while True:
        interval = d - state.step
        if interval == 0:
            break
        if len(pairs) >= limit:
            logger.warning("Box spiral exceeded %d segments (divisions=%d, %s/%s); stopping",
                           limit, d, start_corner, rotation)
            break
        candidate = state.current + interval * moves[state.direction]
        pairs.append((state.current, candidate))
        state.level_count -= 1
        if state.level_count == 0:
            state.step += 1
            state.level_count = 2
        state.direction = (state.direction + turn) % 4
        state.current = candidate
    return pairs


@dataclass
class SpiralPath:
    pool: List[Optional[Point]]
    pairs: List[Tuple[int, int]]
    divisions: int

    def segments(self) -> Iterator[Tuple[Point, Point]]:
        """Point pairs for drawing; pairs touching a degenerate pool entry are skipped."""
        for a, b in self.pairs:
            pa, pb = self.pool[a], self.pool[b]
            if pa is None or pb is None:
                continue
            yield pa, pb


def compute_spiral_path(quad: Sequence[Point], divisions: int, start_corner: str = "nw",
                        rotation: str = "ccw", interior: bool = False) -> SpiralPath:
    """Spiral over the quadrilateral given as (nw, ne, se, sw)."""
    d = clamp_divisions(divisions, interior)
    nw, ne, se, sw = quad
    return SpiralPath(point_pool(nw, ne, se, sw, d), spiral_pairs(d, start_corner, rotation, interior), d)


# ---------------------------- Motif -----------------------------------------

def resolve_start_corner(start_corner: str, rng: random.Random) -> str:
    if start_corner == "random":
        return START_CORNERS[int(rng.uniform(0, 4)) % 4]
    return start_corner


def resolve_rotation(rotation: str, rng: random.Random) -> str:
    if rotation == "random":
        return ROTATIONS[int(rng.uniform(0, 2)) % 2]
    return rotation


class BoxSpiral:
    """A square spiral drawn inside a quadrilateral; the quad is its footprint."""

    def __init__(self, nw: Point, ne: Point, se: Point, sw: Point, divisions: int = 6,
                 start_corner: str = "nw", rotation: str = "ccw", interior: bool = False,
                 params: DrawParams = DEFAULT_PARAMS, outline: bool = False):
        self.footprint = Polygon([nw, ne, se, sw])
        self.path = compute_spiral_path((nw, ne, se, sw), divisions, start_corner, rotation, interior)
        self.params = params
        self.outline = outline

    @classmethod
    def around(cls, center: Point, size: float, angle: float = 0.0, **kwargs) -> "BoxSpiral":
        """A square spiral of side ``size`` centered on ``center``, turned by ``angle`` degrees."""
        h = size / 2
        square = Polygon([(center.x - h, center.y - h), (center.x + h, center.y - h),
                          (center.x + h, center.y + h), (center.x - h, center.y + h)])
        if angle:
            square.rotate(angle, center)
        return cls(*square.vertices, **kwargs)

    def draw(self, surface: Surface, rng: Optional[random.Random] = None, variation: float = 0.0) -> None:
        """Draw the spiral; a non-zero ``variation`` with an rng gives a hand-drawn line."""
        if self.outline:
            surface.stroke_polygon(self.footprint, self.params)
        for a, b in self.path.segments():
            if rng is not None and variation:
                surface.draw_polyline(LineSegment(a, b).hand_drawn(rng, variation=variation), self.params)
            else:
                surface.draw_line(a, b, self.params)


def random_box_spiral(rng: random.Random, center: Point, size: Value, divisions: Value,
                      start_corner: str = "random", rotation: str = "random",
                      angle: Value = 0.0, **kwargs) -> BoxSpiral:
    """Sample every free parameter of a free-standing box spiral."""
    return BoxSpiral.around(
        center, get_value(size, rng), get_value(angle, rng),
        divisions=get_int(divisions, rng),
        start_corner=resolve_start_corner(start_corner, rng),
        rotation=resolve_rotation(rotation, rng),
        **kwargs,
    )
