"""
grid.py
=======

Lattice generator for grid based tangles.

A lattice is a row-major list of rows of Points covering a rectangular
extent, padded by roughly one extra row and column so motifs at the edges are
not clipped early. Each axis has its own spacing strategy:

    static       constant spacing (re-sampled per cell when given a Range)
    linear       spacing grows linearly from the Range minimum to its maximum
    wave         rows/columns bowed by a sine driven by the orthogonal index
    compression  spacing itself modulated by a sine of the axis' own index

After the unperturbed ("meta") coordinate of a cell is computed, every point
gets a small independent jitter on each axis.

The wave and compression strategies chain column c from ``lattice[0][c-1]``
(and row r from ``lattice[r-1][0]``) instead of the previous cell of the same
row/column. That anchoring shapes the resulting pattern and is kept as is.
"""

import logging
import math
import random
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .config import load_options
from .geometry import Point, Range, Value, get_value, max_value, min_value

logger = logging.getLogger(__name__)

Lattice = List[List[Point]]

SPACING_MODES = ("static", "linear", "wave", "compression")


# ---------------------------- Options ---------------------------------------

def _positive_spacing(spacing: Value) -> Value:
    if isinstance(spacing, Range):
        if spacing.min <= 0:
            logger.warning("Grid spacing %r must be positive; clamping", spacing)
            return Range(1.0, max(1.0, spacing.max))
        return spacing
    if spacing <= 0:
        logger.warning("Grid spacing %r must be positive; using 1", spacing)
        return 1.0
    return spacing


@dataclass
class AxisOptions:
    """Spacing configuration for one axis."""
    spacing: Value = 40
    mode: str = "static"
    divisions: Optional[float] = None
    origin: Optional[Value] = None
    vary: Optional[float] = None
    frequency: Optional[Value] = None
    amplitude: Optional[Value] = None

    def __post_init__(self):
        if self.mode not in SPACING_MODES:
            logger.warning("Unknown spacing mode %r; using 'static'", self.mode)
            self.mode = "static"
        self.spacing = _positive_spacing(self.spacing)

    def resolve(self, extent: float) -> "AxisOptions":
        """Fill in the defaults that depend on the extent being covered.

        ``divisions`` may stay fractional: the linear, wave and compression
        formulas use it as is, only the row and column counts round up.
        """
        min_spacing = min_value(self.spacing)
        divisions = self.divisions
        if divisions is None:
            divisions = extent / min_spacing + 2
        divisions = max(2, divisions)
        origin = -min_spacing / 2 if self.origin is None else self.origin
        vary = 0.02 * min_spacing if self.vary is None else self.vary
        return replace(self, divisions=divisions, origin=origin, vary=vary)


@dataclass
class GridOptions:
    x: AxisOptions = field(default_factory=AxisOptions)
    y: AxisOptions = field(default_factory=AxisOptions)
    show: bool = False

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "GridOptions":
        """Build from flat keys.

        ``spacing``, ``mode``, ``vary`` and ``divisions`` apply to both axes;
        ``x_<key>`` / ``y_<key>`` set one axis. Unknown keys are logged and
        ignored.
        """
        values = dict(options or {})
        values.update(overrides)
        show = values.pop("show", False)
        x_opts: Dict[str, Any] = {}
        y_opts: Dict[str, Any] = {}
        for key in ("spacing", "mode", "vary", "divisions"):
            if key in values:
                x_opts[key] = y_opts[key] = values.pop(key)
        for key, value in values.items():
            if key.startswith("x_"):
                x_opts[key[2:]] = value
            elif key.startswith("y_"):
                y_opts[key[2:]] = value
            else:
                x_opts[key] = value  # Reported as unknown by load_options
        return cls(x=load_options(AxisOptions, x_opts), y=load_options(AxisOptions, y_opts), show=show)


# ---------------------------- Spacing strategies -----------------------------

class StaticSpacing:
    """Even spacing; each cell chains from the previous one in its row/column."""

    def __init__(self, builder: "LatticeBuilder"):
        self.b = builder

    def x(self, r: int, c: int) -> float:
        ax = self.b.x
        spacing = get_value(ax.spacing, self.b.rng)
        x = get_value(ax.origin, self.b.rng) - spacing / 2
        if c:
            x = self.b.points[r][c - 1].x + spacing
        return x

    def y(self, r: int, c: int) -> float:
        ay = self.b.y
        spacing = get_value(ay.spacing, self.b.rng)
        y = get_value(ay.origin, self.b.rng) - spacing / 2
        if r:
            y = self.b.points[r - 1][c].y + spacing
        return y


class LinearSpacing:
    """Spacing growing linearly across the lattice."""

    def __init__(self, builder: "LatticeBuilder"):
        self.b = builder
        self.x_min = min_value(builder.x.spacing)
        self.x_range = max_value(builder.x.spacing) - self.x_min
        self.y_min = min_value(builder.y.spacing)
        self.y_range = max_value(builder.y.spacing) - self.y_min

    def x(self, r: int, c: int) -> float:
        x = get_value(self.b.x.origin, self.b.rng) - self.x_min / 2
        if c:
            x = self.b.points[r][c - 1].x + self.x_min + self.x_range * (c / self.b.x.divisions)
        return x

    def y(self, r: int, c: int) -> float:
        y = get_value(self.b.y.origin, self.b.rng) - self.y_min / 2
        if r:
            y = self.b.points[r - 1][c].y + self.y_min + self.y_range * (r / self.b.y.divisions)
        return y


class _Oscillating:
    default_amplitude = 1.0

    def __init__(self, builder: "LatticeBuilder"):
        self.b = builder
        rng = builder.rng
        ax, ay = builder.x, builder.y
        self.x_amplitude = self.default_amplitude if ax.amplitude is None else get_value(ax.amplitude, rng)
        self.y_amplitude = self.default_amplitude if ay.amplitude is None else get_value(ay.amplitude, rng)
        self.x_frequency = 360 / ax.divisions if ax.frequency is None else get_value(ax.frequency, rng)
        self.y_frequency = 360 / ay.divisions if ay.frequency is None else get_value(ay.frequency, rng)


class WaveSpacing(_Oscillating):
    """Rows and columns bent into sine waves."""

    def x(self, r: int, c: int) -> float:
        spacing = get_value(self.b.x.spacing, self.b.rng)
        wave = math.sin(math.radians(self.x_frequency * r)) * spacing * self.x_amplitude
        x = get_value(self.b.x.origin, self.b.rng) + wave
        if c:
            x = self.b.points[0][c - 1].x + spacing + wave
        return x

    def y(self, r: int, c: int) -> float:
        spacing = get_value(self.b.y.spacing, self.b.rng)
        wave = math.sin(math.radians(self.y_frequency * c)) * spacing * self.y_amplitude
        y = get_value(self.b.y.origin, self.b.rng) + wave
        if r:
            y = self.b.points[r - 1][0].y + spacing + wave
        return y


class CompressionSpacing(_Oscillating):
    """Alternating bands of compressed and expanded spacing."""
    default_amplitude = 0.5

    def x(self, r: int, c: int) -> float:
        spacing = get_value(self.b.x.spacing, self.b.rng)
        x = get_value(self.b.x.origin, self.b.rng) - spacing / 2
        if c:
            x = self.b.points[0][c - 1].x + spacing \
                + math.sin(math.radians(self.x_frequency * c)) * spacing * self.x_amplitude
        return x

    def y(self, r: int, c: int) -> float:
        spacing = get_value(self.b.y.spacing, self.b.rng)
        y = get_value(self.b.y.origin, self.b.rng) - spacing / 2
        if r:
            y = self.b.points[r - 1][0].y + spacing \
                + math.sin(math.radians(self.y_frequency * r)) * spacing * self.y_amplitude
        return y


STRATEGIES = {
    "static": StaticSpacing,
    "linear": LinearSpacing,
    "wave": WaveSpacing,
    "compression": CompressionSpacing,
}


# ---------------------------- Builder ---------------------------------------

class LatticeBuilder:
    """Builds the lattice once; keeps both the meta and the jittered points."""

    def __init__(self, width: float, height: float, options: GridOptions, rng: random.Random):
        self.width = width
        self.height = height
        self.rng = rng
        self.x = options.x.resolve(width)
        self.y = options.y.resolve(height)
        self.points: Lattice = []
        self.meta: Lattice = []

    @property
    def rows(self) -> int:
        return math.ceil(self.y.divisions)

    @property
    def cols(self) -> int:
        return math.ceil(self.x.divisions)

    def build(self) -> Lattice:
        self.points = []
        self.meta = []
        col_gen = STRATEGIES[self.x.mode](self)
        row_gen = col_gen if self.x.mode == self.y.mode else STRATEGIES[self.y.mode](self)
        for r in range(self.rows):
            self.points.append([])
            self.meta.append([])
            for c in range(self.cols):
                m = Point(col_gen.x(r, c), row_gen.y(r, c))
                self.meta[r].append(m)
                self.points[r].append(Point(
                    self.rng.uniform(m.x - self.x.vary, m.x + self.x.vary),
                    self.rng.uniform(m.y - self.y.vary, m.y + self.y.vary),
                ))
        logger.debug("Built %dx%d lattice (%s/%s) over %gx%g",
                     self.rows, self.cols, self.x.mode, self.y.mode, self.width, self.height)
        return self.points


def build_lattice(width: float, height: float, options: Optional[GridOptions] = None,
                  rng: Optional[random.Random] = None) -> Lattice:
    """Return a lattice of points covering ``width`` x ``height``."""
    if options is None:
        options = GridOptions()
    if rng is None:
        rng = random.Random()
    return LatticeBuilder(width, height, options, rng).build()


def grid_segments(lattice: Lattice) -> Iterator[Tuple[Point, Point]]:
    """Yield the horizontal and vertical edges between neighbouring points."""
    for r, row in enumerate(lattice):
        for c, p in enumerate(row):
            if c + 1 < len(row):
                yield p, row[c + 1]
            if r + 1 < len(lattice):
                yield p, lattice[r + 1][c]
