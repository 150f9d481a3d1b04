"""
cli.py
======

Render a tangle (optionally inside a Zentangle tile) to PNG.

Quick start
-----------
>>> from tanglelab.cli import generate
>>> generate("ambler.png", 600, 600, pattern="ambler", seed=42)

Command line
------------
$ tanglelab --out /tmp/huggins.png --size 800x600 --pattern huggins --seed 7
$ tanglelab --out /tmp/tile.png --size 600x600 --preset aahs --zentangle circle --rotation 20
"""

import argparse
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .config import configure_logging
from .geometry import Polygon, rng_from_seed
from .patterns import PATTERNS, make_pattern, render_tangle
from .presets import PRESETS, get_preset
from .surface import Color, Surface
from .zentangle import SHAPES, Zentangle

logger = logging.getLogger(__name__)


def merge_options(base: Mapping[str, Any], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Overlay ``overrides`` on ``base``; nested mappings such as ``grid`` merge key by key."""
    merged = dict(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_options(merged[key], value)
        else:
            merged[key] = value
    return merged


def generate(
    out_path: str,
    width: int,
    height: int,
    pattern: str = "ambler",
    options: Optional[Mapping[str, Any]] = None,
    preset: Optional[str] = None,
    seed: Optional[int] = None,
    rotation: Optional[float] = None,
    zentangle: Optional[str] = None,
    background: Color = 255,
) -> str:
    """High-level convenience. Returns the out_path after saving."""
    if preset is not None:
        pattern, preset_options = get_preset(preset)
        options = merge_options(preset_options, options)
    tangle = make_pattern(pattern, options)
    rng = rng_from_seed(seed)

    if zentangle is not None:
        tile = Zentangle(width, zentangle, background=background, rng=rng)
        tile.add_tangle(render_tangle(tangle, tile.full_mask(), rng, rotation))
        img = tile.render()
    else:
        frame = render_tangle(tangle, Polygon.from_box(0, 0, width, height), rng, rotation)
        img = Surface.allocate(width, height, background)
        img.paste(frame.surface, frame.offset)

    img.save(out_path)
    logger.info("Wrote %s (%s, %dx%d)", out_path, pattern, img.width, img.height)
    return out_path


# ---------------------------- CLI -------------------------------------------

def parse_size(s: str) -> Tuple[int, int]:
    if "x" not in s.lower():
        raise argparse.ArgumentTypeError("Size must be like 600x600")
    a, b = s.lower().split("x")
    try:
        return (int(a), int(b))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size: {s!r}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate hand-drawn style tangle patterns as PNG")
    ap.add_argument("--out", required=True, help="Output PNG path")
    ap.add_argument("--size", type=parse_size, default=(600, 600), help="WIDTHxHEIGHT (e.g., 800x600)")
    ap.add_argument("--pattern", default="ambler", choices=sorted(PATTERNS))
    ap.add_argument("--preset", default=None, choices=sorted(PRESETS), help="Named option bundle; overrides --pattern")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--rotation", type=float, default=None, help="Rotate the pattern by this many degrees")
    ap.add_argument("--zentangle", default=None, choices=SHAPES, help="Draw inside a Zentangle tile of this shape")
    ap.add_argument("--grid-spacing", type=float, default=None, help="Lattice spacing for grid patterns")
    ap.add_argument("--log-level", default="warning")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)
    width, height = args.size
    options = None
    if args.grid_spacing is not None:
        options = {"grid": {"spacing": args.grid_spacing}}

    out = generate(
        out_path=args.out, width=width, height=height,
        pattern=args.pattern, options=options, preset=args.preset,
        seed=args.seed, rotation=args.rotation, zentangle=args.zentangle,
    )
    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
