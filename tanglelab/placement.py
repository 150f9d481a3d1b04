"""
placement.py
============

Randomized, collision-avoiding packing of motifs into a region.

A motif is any object with a ``footprint`` Polygon and a ``draw(surface)``
method. Candidates are sampled one at a time and rejected when their
footprint overlaps one already accepted. The loop gives up once failures
exceed three times the desired count: the region is considered full and the
caller gets however many motifs fit.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence

from shapely.prepared import prep

from .geometry import Point, Polygon

logger = logging.getLogger(__name__)


class Motif(Protocol):
    footprint: Polygon

    def draw(self, surface) -> None: ...


MotifFactory = Callable[[random.Random, Point], Motif]
OverlapPredicate = Callable[[Polygon, Sequence[Polygon]], bool]


def polygons_overlap(candidate: Polygon, footprints: Sequence[Polygon]) -> bool:
    """True if ``candidate`` touches, crosses or contains any footprint."""
    if not footprints:
        return False
    shape = prep(candidate.to_shapely())
    return any(shape.intersects(f.to_shapely()) for f in footprints)


def never_overlap(candidate: Polygon, footprints: Sequence[Polygon]) -> bool:
    return False


@dataclass
class PlacementResult:
    footprints: List[Polygon] = field(default_factory=list)
    placed: int = 0
    failures: int = 0


def sample_center(region: Polygon, rng: random.Random, margin: float = 0.0) -> Point:
    """Uniform point in the region's bounding rectangle shrunk by ``margin``."""
    o = region.get_origin()
    return Point(rng.uniform(o.x + margin, o.x + region.get_width() - margin),
                 rng.uniform(o.y + margin, o.y + region.get_height() - margin))


def place(region: Polygon, desired_count: int, factory: MotifFactory, rng: random.Random,
          overlap: OverlapPredicate = polygons_overlap,
          footprints: Optional[List[Polygon]] = None,
          render: Optional[Callable[[Motif], None]] = None,
          margin: float = 0.0) -> PlacementResult:
    """Place up to ``desired_count`` non-overlapping motifs.

    ``footprints`` is extended in place, so a list shared between passes
    keeps later motifs clear of earlier ones.
    """
    result = PlacementResult(footprints=[] if footprints is None else footprints)
    max_failures = 3 * desired_count
    while result.placed < desired_count:
        motif = factory(rng, sample_center(region, rng, margin))
        if overlap(motif.footprint, result.footprints):
            result.failures += 1
            if result.failures > max_failures:
                logger.debug("Region saturated after %d failures", result.failures)
                break
            continue
        if render is not None:
            render(motif)
        result.footprints.append(motif.footprint)
        result.placed += 1
    logger.info("Placed %d of %d motifs (%d rejected)", result.placed, desired_count, result.failures)
    return result


def scatter(region: Polygon, attempts: int, factory: MotifFactory, rng: random.Random,
            overlap: OverlapPredicate = polygons_overlap,
            footprints: Optional[List[Polygon]] = None,
            render: Optional[Callable[[Motif], None]] = None,
            margin: float = 0.0) -> PlacementResult:
    """Single-shot variant: try ``attempts`` candidates, keep those that fit."""
    result = PlacementResult(footprints=[] if footprints is None else footprints)
    for _ in range(attempts):
        motif = factory(rng, sample_center(region, rng, margin))
        if overlap(motif.footprint, result.footprints):
            result.failures += 1
            continue
        if render is not None:
            render(motif)
        result.footprints.append(motif.footprint)
        result.placed += 1
    logger.debug("Scattered %d of %d attempts", result.placed, attempts)
    return result
