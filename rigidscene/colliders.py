"""Collision volumes attached to a rigid body, separate from its geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from rigidscene.vectors import Vec2f


class ColliderType(IntEnum):
    """Kind of collision volume."""

    CIRCLE = 0
    RECTANGLE = 1
    UNDEFINED = 2


@dataclass
class Collider2D:
    """Base collision volume."""

    @property
    def collider_type(self) -> ColliderType:
        return ColliderType.UNDEFINED


@dataclass
class CircleCollider(Collider2D):
    """Circular collision volume."""

    radius: float = 0.0
    position: Vec2f = field(default_factory=Vec2f)

    @property
    def collider_type(self) -> ColliderType:
        return ColliderType.CIRCLE


@dataclass
class RectangleCollider(Collider2D):
    """Axis-aligned rectangular collision volume."""

    min_corner: Vec2f = field(default_factory=Vec2f)
    max_corner: Vec2f = field(default_factory=Vec2f)

    @property
    def collider_type(self) -> ColliderType:
        return ColliderType.RECTANGLE

    def set(self, p1: Vec2f, p2: Vec2f) -> None:
        """Reset the corners from two opposite corner points."""
        self.min_corner = Vec2f(min(p1.x, p2.x), min(p1.y, p2.y))
        self.max_corner = Vec2f(max(p1.x, p2.x), max(p1.y, p2.y))

    def center(self) -> Vec2f:
        return Vec2f(
            (self.min_corner.x + self.max_corner.x) / 2.0,
            (self.min_corner.y + self.max_corner.y) / 2.0,
        )