# rigidscene

Building blocks for 2D scenes made of composite rigid bodies:

- `Vec2f` and `Vec3f`, small mutable vector dataclasses (`rigidscene.vectors`)
- geometry shapes `Rect` and `Circle`, with their kind given by `BodyType`
  (`rigidscene.shapes`)
- collision volumes `CircleCollider` and `RectangleCollider`, with their kind
  given by `ColliderType` (`rigidscene.colliders`)
- the checks `aabb_collision_check` and `circle_collision_check`
  (`rigidscene.collision`)
- `Reader`, a small streaming JSON tokenizer (`rigidscene.sj`)
- `RigidBody2D`, a container of shapes and colliders around a position
  (`rigidscene.rigidbody`)
- `ModelLoader`, which builds rigid bodies from JSON model files
  (`rigidscene.modelloader`)
- `Scene`, which loads the models of one scene directory (`rigidscene.scene`)

No third-party libraries are needed.

## Installing

```
pip install .
```

## Shapes and overlap checks

```python
from rigidscene.vectors import Vec2f
from rigidscene.shapes import Rect
from rigidscene.collision import aabb_collision_check

a = Rect.from_points(Vec2f(0, 0), Vec2f(4, 3))
b = Rect.from_points(Vec2f(2, 1), Vec2f(5, 4))
print(aabb_collision_check(a, b))  # True
print(a.corners())                 # min corner first, counter-clockwise
```

`aabb_collision_check` counts rectangles that only touch along an edge or at
a corner as overlapping.

`circle_collision_check(c1, c2)` returns `False` when `c1.radius` is not
positive or `c2.radius` is negative. Otherwise it returns whether the
squared sum of the radii is strictly greater than `dy² + dx²`, where `dy` is
the difference of the two centres' `y` values and `dx` is taken from the
first circle's centre alone (`c1.center.y - c1.center.x`).

`RectangleCollider.set(p1, p2)` orders two corner points into `min_corner`
and `max_corner`; `center()` returns their midpoint.

## Model files

A model file is a JSON array of bodies. Each body may carry an `id`, a
`position`, an `orientation` and a list of `shapes`. A shape has a `type`
(`"circle"` or `"rectangle"`), a `role` (`"geometry"`, the default, or
`"collision"`), and `radius`, `points`, `relative_position` and `color` as
it needs:

```json
[
  {
    "id": "rigidBody1",
    "position": [10, 5],
    "orientation": 0.785,
    "shapes": [
      { "type": "circle", "radius": 2, "relative_position": [0, 1], "color": [1, 0, 0] },
      { "type": "rectangle", "role": "collision", "points": [[0, 0], [4, 3]] }
    ]
  }
]
```

Geometry shapes end up in a body's `polygons`, collision shapes in its
`colliders`. A circle needs a positive radius and a rectangle needs at least
one non-zero corner coordinate; otherwise the shape is left out. Elements of
the root array that are not objects, and unknown keys, are skipped.

```python
from pathlib import Path
from rigidscene.modelloader import get_instance

loader = get_instance()
bodies = loader.parse_model_from_json(Path("model.json").read_text())
for body in bodies:
    print(body.id, body.position, body.orientation, len(body.polygons), len(body.colliders))

bodies = loader.load_models("resources/")
```

`parse_model_from_json` raises `ModelFormatError` (a `ValueError`) when the
root of the document is not an array. `load_models` reads every regular file
in a directory in name order and returns all their bodies; files that cannot
be read or whose root is not an array are skipped with a logged warning. It
raises `NotADirectoryError` when the path is not a directory.

## Scenes

```python
from rigidscene.scene import Scene

scene = Scene(1, "resources/testScenes/scene1")
scene.populate_paths()   # register the directory under the scene id
bodies = scene.init()    # load the bodies; nothing happens if unregistered
```

## The JSON reader

`Reader` walks JSON text token by token without building a tree:

```python
from rigidscene.sj import Reader, ValueType

reader = Reader('[{"id": "a", "orientation": 0.5}]')
root = reader.read()
assert root.type is ValueType.ARRAY
for obj in reader.iter_array(root):
    for key, value in reader.iter_object(obj):
        print(key.text(), value.text())
```

`Value.text()` gives the raw text (strings without their quotes),
`Value.number()` the leading decimal number of the text, and
`Value.key_equals(name)` compares the text with a name. Errors are sticky:
once `Reader.error` is set, every read returns an `ERROR` value and iteration
stops. `Reader.location()` gives the current line and column.

## Command line

```
rigidscene [PATH]
```

loads every model file in the directory `PATH` and prints the id of each
body, one per line. Without `PATH` it prints nothing. It exits with status 1
and a message when `PATH` is not a directory.

## What it does not do

The package only describes and loads bodies and tests shapes for overlap.
It draws nothing, and it does not move bodies: `velocity` and `orientation`
are stored on `RigidBody2D` but no simulation step uses them.

## Running the tests

```
pip install .[test]
pytest
```