"""
geometry.py
===========

Small geometry kernel used by every tangle: points, polar vectors, line
segments, polygons and value ranges.

Coordinates follow the raster convention (y grows downward), so a positive
rotation angle turns clockwise on screen.

Everything that needs randomness takes a ``random.Random`` explicitly; nothing
here touches the module-level ``random`` state.
"""

import math
import random
from typing import Iterable, List, Optional, Tuple, Union

from shapely.geometry import Polygon as ShapelyPolygon


# ---------------------------- Randomness ------------------------------------

def rng_from_seed(seed: Optional[int]) -> random.Random:
    """Return a Random instance from seed (or system)."""
    r = random.Random()
    if seed is not None:
        r.seed(int(seed))
    else:
        r.seed()
    return r


# ---------------------------- Ranges ----------------------------------------

class Range:
    """A closed interval a value may be drawn from."""

    def __init__(self, min: float, max: float):
        if min > max:
            min, max = max, min
        self.min = min
        self.max = max

    def rand(self, rng: random.Random) -> float:
        """Return a value evenly distributed over [min, max]."""
        return rng.uniform(self.min, self.max)

    def rand_int(self, rng: random.Random) -> int:
        """Return an integer in [min, max], each with equal probability."""
        return min(math.floor(rng.uniform(self.min, self.max + 1)), math.floor(self.max))

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Range({self.min!r}, {self.max!r})"


Value = Union[float, Range]


def get_value(v: Value, rng: random.Random) -> float:
    """Choose a value: numbers pass through, Ranges are sampled."""
    if isinstance(v, Range):
        return v.rand(rng)
    return v


def get_int(v: Value, rng: random.Random) -> int:
    """Choose an integer value from a number or a Range."""
    if isinstance(v, Range):
        return v.rand_int(rng)
    return math.floor(v)


def min_value(v: Value) -> float:
    return v.min if isinstance(v, Range) else v


def max_value(v: Value) -> float:
    return v.max if isinstance(v, Range) else v


# ---------------------------- Points ----------------------------------------

class Point:
    """A mutable cartesian coordinate."""

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def add(self, p: "Point") -> "Point":
        self.x += p.x
        self.y += p.y
        return self

    def rotate(self, degrees: float, pivot: "Point") -> "Point":
        """Rotate this point in place around ``pivot``."""
        r = math.radians(degrees)
        ca, sa = math.cos(r), math.sin(r)
        x = self.x - pivot.x
        y = self.y - pivot.y
        self.x = x*ca - y*sa + pivot.x
        self.y = x*sa + y*ca + pivot.y
        return self

    def vary(self, amount: float, rng: random.Random) -> "Point":
        """Move the point by up to ``amount`` on each axis, independently."""
        self.x += rng.uniform(-amount, amount)
        self.y += rng.uniform(-amount, amount)
        return self

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class Polar:
    """A vector in polar form. ``a`` is in radians."""

    __slots__ = ("r", "a")

    def __init__(self, r: float, a: float):
        self.r = r
        self.a = a

    def to_point(self, center: Optional[Point] = None) -> Point:
        p = Point(self.r * math.cos(self.a), self.r * math.sin(self.a))
        if center is not None:
            p.add(center)
        return p

    def __repr__(self) -> str:
        return f"Polar({self.r!r}, {self.a!r})"


# ---------------------------- Line segments ---------------------------------

class LineSegment:
    """Two referenced Points. Mutating either endpoint moves the segment."""

    def __init__(self, begin: Point, end: Point):
        self.begin = begin
        self.end = end

    def length(self) -> float:
        return math.hypot(self.begin.x - self.end.x, self.begin.y - self.end.y)

    def divide(self, segments: int) -> List[Point]:
        """Split into ``segments`` equal parts; returns segments+1 points.

        The first entry is ``begin`` itself, the rest are new Points.
        """
        points = [self.begin]
        x_diff = self.begin.x - self.end.x
        y_diff = self.begin.y - self.end.y
        for i in range(1, segments + 1):
            points.append(Point(self.begin.x - i * x_diff / segments,
                                self.begin.y - i * y_diff / segments))
        return points

    def hand_drawn(self, rng: random.Random, divisions: Optional[int] = None,
                   variation: float = 1.0) -> List[Point]:
        """Points along the segment with the interior ones jittered.

        Both ends stay exact so consecutive segments still meet.
        """
        if divisions is None:
            divisions = math.floor(self.length() / 6)
        if divisions <= 0:
            return [self.begin, self.end]

        points = self.divide(divisions)
        last = len(points) - 1
        return [p if i in (0, last) else p.vary(variation, rng) for i, p in enumerate(points)]

    def intersection(self, other: "LineSegment") -> Optional[Point]:
        """Intersection of the infinite lines through both segments.

        The point may lie outside either segment. Returns None for parallel
        or coincident lines.
        """
        d = ((other.end.y - other.begin.y) * (self.end.x - self.begin.x)) \
            - ((other.end.x - other.begin.x) * (self.end.y - self.begin.y))
        if d == 0:
            return None
        a = self.begin.y - other.begin.y
        b = self.begin.x - other.begin.x
        n1 = ((other.end.x - other.begin.x) * a) - ((other.end.y - other.begin.y) * b)
        t = n1 / d
        return Point(self.begin.x + t * (self.end.x - self.begin.x),
                     self.begin.y + t * (self.end.y - self.begin.y))

    def __repr__(self) -> str:
        return f"LineSegment({self.begin!r}, {self.end!r})"


# ---------------------------- Polygons --------------------------------------

PointLike = Union[Point, Tuple[float, float]]


def _as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    return Point(p[0], p[1])


class Polygon:
    """An ordered list of vertices.

    Vertex order matters: it is the drawing order and the order used when the
    outline is rebuilt hand-drawn.
    """

    def __init__(self, vertices: Iterable[PointLike] = ()):
        self.vertices: List[Point] = [_as_point(v) for v in vertices]
        self._bounds: Optional["Polygon"] = None
        self._shape: Optional[ShapelyPolygon] = None

    @classmethod
    def from_box(cls, x: float, y: float, width: float, height: float) -> "Polygon":
        return cls([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Point:
        return self.vertices[i]

    def __repr__(self) -> str:
        return f"Polygon({self.vertices!r})"

    def invalidate(self) -> None:
        self._bounds = None
        self._shape = None

    def add_vertex(self, p: PointLike) -> None:
        self.vertices.append(_as_point(p))
        self.invalidate()

    def get_bounding_rectangle(self) -> "Polygon":
        """[topLeft, topRight, bottomRight, bottomLeft] of the vertices."""
        if self._bounds is None:
            xs = [v.x for v in self.vertices]
            ys = [v.y for v in self.vertices]
            min_x, max_x = min(xs), max(xs)
            min_y, max_y = min(ys), max(ys)
            self._bounds = Polygon([(min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)])
        return self._bounds

    def get_origin(self) -> Point:
        return self.get_bounding_rectangle()[0].copy()

    def get_width(self) -> float:
        r = self.get_bounding_rectangle()
        return r[1].x - r[0].x

    def get_height(self) -> float:
        r = self.get_bounding_rectangle()
        return r[3].y - r[0].y

    def get_center(self) -> Point:
        o = self.get_bounding_rectangle()[0]
        return Point(o.x + self.get_width() / 2, o.y + self.get_height() / 2)

    def rotate(self, degrees: float, pivot: Optional[Point] = None) -> "Polygon":
        """Rotate every vertex in place; pivot defaults to the bounding center."""
        if pivot is None:
            pivot = self.get_center()
        for v in self.vertices:
            v.rotate(degrees, pivot)
        self.invalidate()
        return self

    def translate(self, dx: float, dy: float) -> "Polygon":
        for v in self.vertices:
            v.x += dx
            v.y += dy
        self.invalidate()
        return self

    def copy(self) -> "Polygon":
        return Polygon([v.copy() for v in self.vertices])

    def area(self) -> float:
        """Absolute shoelace area; lobes of a self-intersecting outline cancel."""
        n = len(self.vertices)
        s = 0.0
        for i in range(n):
            a, b = self.vertices[i], self.vertices[(i + 1) % n]
            s += a.x * b.y - b.x * a.y
        return abs(s) / 2

    def hand_drawn(self, rng: random.Random, variation: float = 1.0) -> "Polygon":
        """A new polygon whose edges wobble like a pen line."""
        poly = Polygon()
        n = len(self.vertices)
        for i in range(n):
            edge = LineSegment(self.vertices[i], self.vertices[(i + 1) % n])
            poly.vertices.extend(p.copy() for p in edge.hand_drawn(rng, variation=variation))
        return poly

    def as_tuples(self) -> List[Tuple[float, float]]:
        return [v.as_tuple() for v in self.vertices]

    def to_shapely(self) -> ShapelyPolygon:
        """Shapely view of the outline, cached until the next mutation."""
        if self._shape is None:
            shape = ShapelyPolygon(self.as_tuples())
            if not shape.is_valid:
                shape = shape.buffer(0)  # Clean self-intersecting outlines
            self._shape = shape
        return self._shape
