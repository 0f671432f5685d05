"""Small mutable 2D and 3D float vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2f:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Vec3f:
    """A three-component vector, also used for RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z