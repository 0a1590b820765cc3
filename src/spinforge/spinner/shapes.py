"""Primitive generation for the drawable spinner shapes."""

import math
import random
from dataclasses import dataclass
from typing import Union

from ..config import ShapeType
from ..constants import HEART_UNIT, STAR_POINTS

Point = tuple[float, float]
CubicSegment = tuple[Point, Point, Point]  # control 1, control 2, end

CONCRETE_SHAPES: tuple[ShapeType, ...] = (
    ShapeType.CIRCLE,
    ShapeType.SQUARE,
    ShapeType.LINE,
    ShapeType.TRIANGLE,
    ShapeType.STAR,
    ShapeType.HEART,
)


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    r: float

    def bounds(self) -> tuple[float, float, float, float]:
        return (self.cx - self.r, self.cy - self.r, self.cx + self.r, self.cy + self.r)


@dataclass(frozen=True)
class RectPrimitive:
    """Box with its top-left corner at (x, y), optionally rotated about its center."""

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0  # degrees

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def corners(self) -> tuple[Point, ...]:
        cx, cy = self.center
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        corners = []
        for dx, dy in (
            (-self.width / 2, -self.height / 2),
            (self.width / 2, -self.height / 2),
            (self.width / 2, self.height / 2),
            (-self.width / 2, self.height / 2),
        ):
            corners.append((cx + dx * cos_t - dy * sin_t, cy + dx * sin_t + dy * cos_t))
        return tuple(corners)

    def bounds(self) -> tuple[float, float, float, float]:
        return _points_bounds(self.corners())


@dataclass(frozen=True)
class PolygonPrimitive:
    points: tuple[Point, ...]

    def bounds(self) -> tuple[float, float, float, float]:
        return _points_bounds(self.points)


@dataclass(frozen=True)
class BezierPathPrimitive:
    """Closed path made of cubic Bezier segments."""

    start: Point
    segments: tuple[CubicSegment, ...]

    def flatten(self, steps: int = 16) -> tuple[Point, ...]:
        """Approximate the outline with straight segments."""
        points = [self.start]
        current = self.start
        for c1, c2, end in self.segments:
            for step in range(1, steps + 1):
                t = step / steps
                points.append(_cubic_point(current, c1, c2, end, t))
            current = end
        return tuple(points)

    def bounds(self) -> tuple[float, float, float, float]:
        return _points_bounds(self.flatten())


Primitive = Union[CirclePrimitive, RectPrimitive, PolygonPrimitive, BezierPathPrimitive]


def _points_bounds(points: tuple[Point, ...]) -> tuple[float, float, float, float]:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def _cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    u = 1 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def sample_shapes(rng: random.Random, n: int) -> tuple[ShapeType, ...]:
    """Draw ``n`` concrete shapes for the random shape mode."""
    return tuple(rng.choice(CONCRETE_SHAPES) for _ in range(n))


def circle(x: float, y: float, size: float) -> CirclePrimitive:
    return CirclePrimitive(cx=x, cy=y, r=size / 2)


def square(x: float, y: float, size: float) -> RectPrimitive:
    return RectPrimitive(x=x - size / 2, y=y - size / 2, width=size, height=size)


def line(x: float, y: float, size: float, rotation: float) -> RectPrimitive:
    """Narrow bar rotated to follow its angular position."""
    return RectPrimitive(
        x=x - size / 8,
        y=y - size / 2,
        width=size / 4,
        height=size,
        rotation=rotation,
    )


def triangle(x: float, y: float, size: float) -> PolygonPrimitive:
    height = size * (math.sqrt(3) / 2)
    return PolygonPrimitive(
        points=(
            (x, y - 2 * height / 3),
            (x - size / 2, y + height / 3),
            (x + size / 2, y + height / 3),
        )
    )


def star(x: float, y: float, size: float) -> PolygonPrimitive:
    """Star with alternating outer/inner vertices, first vertex pointing up."""
    points = []
    for k in range(STAR_POINTS):
        r = size / 2 if k % 2 == 0 else size / 4
        angle = (k / STAR_POINTS) * 2 * math.pi - math.pi / 2
        points.append((x + r * math.cos(angle), y + r * math.sin(angle)))
    return PolygonPrimitive(points=tuple(points))


def heart(x: float, y: float, size: float) -> BezierPathPrimitive:
    s = size * HEART_UNIT
    bottom = (x, y + s * 2)
    top = (x, y - s * 5)
    return BezierPathPrimitive(
        start=bottom,
        segments=(
            ((x + s * 4, y - s * 2), (x + s * 9, y - s * 0.5), top),
            ((x - s * 9, y - s * 0.5), (x - s * 4, y - s * 2), bottom),
        ),
    )


def build_primitive(
    shape: ShapeType, x: float, y: float, size: float, rotation: float = 0.0
) -> Primitive:
    """
    Build the primitive for a concrete shape.

    Args:
        shape: Concrete shape kind (``random`` must be resolved beforehand)
        x: Center x
        y: Center y
        size: Element size
        rotation: Angular position in degrees (used by ``line`` only)

    Raises:
        ValueError: If ``shape`` is ``random``
    """
    if shape == ShapeType.SQUARE:
        return square(x, y, size)
    if shape == ShapeType.LINE:
        return line(x, y, size, rotation)
    if shape == ShapeType.TRIANGLE:
        return triangle(x, y, size)
    if shape == ShapeType.STAR:
        return star(x, y, size)
    if shape == ShapeType.HEART:
        return heart(x, y, size)
    if shape == ShapeType.CIRCLE:
        return circle(x, y, size)
    raise ValueError(f"Shape '{shape.value}' must be resolved to a concrete shape first")
