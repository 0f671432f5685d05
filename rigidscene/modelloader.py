"""Loading rigid bodies from JSON model files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rigidscene.colliders import CircleCollider, Collider2D, RectangleCollider
from rigidscene.rigidbody import RigidBody2D
from rigidscene.shapes import Circle, Polygon2D, Rect
from rigidscene.sj import Reader, Value, ValueType
from rigidscene.vectors import Vec2f, Vec3f

DEFAULT_MODEL_DIR = "../../resources/"

_log = logging.getLogger(__name__)


class ModelFormatError(ValueError):
    """The model text does not have the expected layout."""


def _components(reader: Reader, value: Value, count: int) -> list[float]:
    """Read up to ``count`` numbers from an array, padding with zeros."""
    result = [0.0] * count
    if value.type is ValueType.ARRAY:
        for index, element in enumerate(reader.iter_array(value)):
            if index < count:
                result[index] = element.number()
    return result


def _vec2(reader: Reader, value: Value) -> Vec2f:
    return Vec2f(*_components(reader, value, 2))


def _vec3(reader: Reader, value: Value) -> Vec3f:
    return Vec3f(*_components(reader, value, 3))


@dataclass
class _ShapeSpec:
    kind: str = ""
    role: str = "geometry"
    radius: float = 0.0
    p1: Vec2f = field(default_factory=Vec2f)
    p2: Vec2f = field(default_factory=Vec2f)
    relative_position: Vec2f = field(default_factory=Vec2f)
    color: Vec3f = field(default_factory=Vec3f)

    @property
    def has_circle(self) -> bool:
        return self.kind == "circle" and self.radius > 0

    @property
    def has_rectangle(self) -> bool:
        return self.kind == "rectangle" and any(
            (self.p1.x, self.p1.y, self.p2.x, self.p2.y)
        )

    def geometry(self) -> Polygon2D | None:
        if self.has_circle:
            return Circle(
                radius=self.radius,
                relative_position=self.relative_position,
                color=self.color,
            )
        if self.has_rectangle:
            rect = Rect.from_points(self.p1, self.p2)
            rect.relative_position = self.relative_position
            rect.color = self.color
            return rect
        return None

    def collider(self) -> Collider2D | None:
        if self.has_circle:
            return CircleCollider(radius=self.radius, position=self.relative_position)
        if self.has_rectangle:
            collider = RectangleCollider()
            collider.set(self.p1, self.p2)
            return collider
        return None


def _parse_shape(reader: Reader, shape_obj: Value) -> _ShapeSpec:
    spec = _ShapeSpec()
    for key, value in reader.iter_object(shape_obj):
        if key.key_equals("type"):
            spec.kind = value.text()
        elif key.key_equals("role"):
            spec.role = value.text()
        elif key.key_equals("radius"):
            spec.radius = value.number()
        elif key.key_equals("points"):
            if value.type is ValueType.ARRAY:
                for index, point in enumerate(reader.iter_array(value)):
                    if index == 0:
                        spec.p1 = _vec2(reader, point)
                    elif index == 1:
                        spec.p2 = _vec2(reader, point)
        elif key.key_equals("relative_position"):
            spec.relative_position = _vec2(reader, value)
        elif key.key_equals("color"):
            spec.color = _vec3(reader, value)
    return spec


def _parse_shapes(reader: Reader, shapes: Value, body: RigidBody2D) -> None:
    for shape_obj in reader.iter_array(shapes):
        if shape_obj.type is not ValueType.OBJECT:
            continue
        spec = _parse_shape(reader, shape_obj)
        _log.debug("shape type: %s, role: %s", spec.kind, spec.role)
        if spec.role == "geometry":
            shape = spec.geometry()
            if shape is not None:
                body.polygons.append(shape)
        elif spec.role == "collision":
            collider = spec.collider()
            if collider is not None:
                body.colliders.append(collider)


def _parse_body(reader: Reader, obj: Value) -> RigidBody2D:
    body = RigidBody2D()
    for key, value in reader.iter_object(obj):
        if key.key_equals("id"):
            body.id = value.text()
        elif key.key_equals("position"):
            if value.type is ValueType.ARRAY:
                for index, element in enumerate(reader.iter_array(value)):
                    if index == 0:
                        body.position.x = element.number()
                    elif index == 1:
                        body.position.y = element.number()
        elif key.key_equals("orientation"):
            body.orientation = value.number()
        elif key.key_equals("shapes"):
            if value.type is ValueType.ARRAY:
                _parse_shapes(reader, value, body)
    return body


class ModelLoader:
    """Builds rigid bodies from model descriptions."""

    def parse_model_from_json(self, json_str: str) -> list[RigidBody2D]:
        """Parse a JSON array of body objects; non-objects are skipped."""
        reader = Reader(json_str)
        root = reader.read()
        if root.type is not ValueType.ARRAY:
            raise ModelFormatError(f"expected root array, got {root.type.name}")

        bodies: list[RigidBody2D] = []
        for obj in reader.iter_array(root):
            if obj.type is not ValueType.OBJECT:
                _log.debug("skipping non-object element")
                continue
            body = _parse_body(reader, obj)
            _log.debug("parsed body %r", body.id)
            bodies.append(body)
        return bodies

    def load_models(self, path: str | Path = DEFAULT_MODEL_DIR) -> list[RigidBody2D]:
        """Parse every regular file in a directory, in name order.

        Files that cannot be read or whose root is not an array are skipped.
        """
        directory = Path(path)
        if not directory.is_dir():
            raise NotADirectoryError(f"Invalid path or not a directory: {path}")

        bodies: list[RigidBody2D] = []
        for entry in sorted(directory.iterdir()):
            if not entry.is_file():
                continue
            try:
                text = entry.read_text(encoding="utf-8", errors="replace")
            except OSError:
                _log.warning("Could not open file: %s", entry)
                continue
            try:
                bodies.extend(self.parse_model_from_json(text))
            except ModelFormatError as exc:
                _log.warning("Skipping %s: %s", entry, exc)
        return bodies


_instance = ModelLoader()


def get_instance() -> ModelLoader:
    """The shared loader."""
    return _instance