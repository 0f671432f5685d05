"""Geometry shapes that make up a rigid body."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum

from rigidscene.vectors import Vec2f, Vec3f


class BodyType(IntEnum):
    """Kind of geometry a shape describes."""

    CIRCLE = 0
    RECTANGLE = 1
    UNDEFINED = 2


@dataclass
class Polygon2D:
    """Base shape: a position relative to the body's centre and a colour."""

    relative_position: Vec2f = field(default_factory=Vec2f, kw_only=True)
    color: Vec3f = field(default_factory=Vec3f, kw_only=True)

    @property
    def body_type(self) -> BodyType:
        return BodyType.UNDEFINED


@dataclass
class Rect(Polygon2D):
    """Axis-aligned rectangle given by its extents."""

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @classmethod
    def from_points(cls, p1: Vec2f, p2: Vec2f) -> Rect:
        """Build a rectangle from two opposite corner points."""
        rect = cls()
        rect.set(p1, p2)
        return rect

    def set(self, p1: Vec2f, p2: Vec2f) -> None:
        """Reset the extents from two opposite corner points."""
        self.min_x = min(p1.x, p2.x)
        self.max_x = max(p1.x, p2.x)
        self.min_y = min(p1.y, p2.y)
        self.max_y = max(p1.y, p2.y)

    def corners(self) -> list[Vec2f]:
        """Corners counter-clockwise, starting at the minimum corner."""
        return [
            Vec2f(self.min_x, self.min_y),
            Vec2f(self.max_x, self.min_y),
            Vec2f(self.max_x, self.max_y),
            Vec2f(self.min_x, self.max_y),
        ]

    @property
    def body_type(self) -> BodyType:
        return BodyType.RECTANGLE


@dataclass
class Circle(Polygon2D):
    """Circle given by its radius and centre."""

    radius: float = 0.0
    center: Vec2f = field(default_factory=Vec2f)

    def set(self, radius: float, center: Vec2f) -> None:
        self.radius = radius
        self.center = replace(center)

    @property
    def body_type(self) -> BodyType:
        return BodyType.CIRCLE