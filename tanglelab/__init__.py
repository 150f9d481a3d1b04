"""
tanglelab
=========

Procedural, hand-drawn style line-art fill patterns ("tangles") clipped to
arbitrary polygons, rendered with Pillow.

>>> from tanglelab import Ambler, Polygon, render_tangle, rng_from_seed
>>> frame = render_tangle(Ambler(), Polygon.from_box(0, 0, 400, 300), rng_from_seed(3))
>>> frame.surface.save("ambler.png")
"""

from .geometry import LineSegment, Point, Polar, Polygon, Range, get_int, get_value, rng_from_seed
from .grid import AxisOptions, GridOptions, build_lattice
from .mask import MaskFrame, apply_mask, prepare_surface
from .patterns import (PATTERNS, Aahs, Ambler, BoxSpirals, Emingle, Huggins, Pattern, TangleContext, W2,
                       make_pattern, render_tangle)
from .placement import PlacementResult, place, polygons_overlap
from .presets import PRESETS, get_preset
from .spiral import BoxSpiral, SpiralPath, compute_spiral_path, spiral_pairs
from .surface import DrawParams, Surface
from .zentangle import Zentangle

__version__ = "0.1.0"
