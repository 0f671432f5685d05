"""Composite rigid bodies made of geometry shapes and colliders."""

from __future__ import annotations

from dataclasses import dataclass, field

from rigidscene.colliders import Collider2D
from rigidscene.shapes import Polygon2D
from rigidscene.vectors import Vec2f


@dataclass
class RigidBody2D:
    """A container of shapes and colliders placed around a common centre.

    Geometry (what is drawn) and colliders (what takes part in collision
    tests) are kept apart, both positioned relative to ``position``.
    """

    position: Vec2f = field(default_factory=Vec2f)
    velocity: Vec2f = field(default_factory=Vec2f)
    id: str = ""
    orientation: float = 0.0
    polygons: list[Polygon2D] = field(default_factory=list)
    colliders: list[Collider2D] = field(default_factory=list)