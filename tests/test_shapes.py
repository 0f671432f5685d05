from rigidscene.shapes import BodyType, Circle, Polygon2D, Rect
from rigidscene.vectors import Vec2f, Vec3f


def test_base_polygon_type_is_undefined():
    assert Polygon2D().body_type is BodyType.UNDEFINED


def test_shape_types():
    assert Rect().body_type is BodyType.RECTANGLE
    assert Circle().body_type is BodyType.CIRCLE


def test_body_type_values_follow_declaration_order():
    assert Circle().body_type.value == 0
    assert Rect().body_type.value == 1
    assert Polygon2D().body_type.value == 2


def test_from_points_orders_extents():
    rect = Rect.from_points(Vec2f(4.0, -1.0), Vec2f(-2.0, 3.0))
    assert (rect.min_x, rect.max_x) == (-2.0, 4.0)
    assert (rect.min_y, rect.max_y) == (-1.0, 3.0)


def test_from_points_is_symmetric_in_its_arguments():
    a, b = Vec2f(1.0, 5.0), Vec2f(3.0, 2.0)
    assert Rect.from_points(a, b) == Rect.from_points(b, a)


def test_set_replaces_previous_extents():
    rect = Rect.from_points(Vec2f(0.0, 0.0), Vec2f(1.0, 1.0))
    rect.set(Vec2f(10.0, 20.0), Vec2f(5.0, 15.0))
    assert rect == Rect.from_points(Vec2f(5.0, 15.0), Vec2f(10.0, 20.0))


def test_corners_order():
    rect = Rect.from_points(Vec2f(0.0, 0.0), Vec2f(2.0, 3.0))
    assert rect.corners() == [
        Vec2f(0.0, 0.0),
        Vec2f(2.0, 0.0),
        Vec2f(2.0, 3.0),
        Vec2f(0.0, 3.0),
    ]


def test_corners_stay_within_extents():
    rect = Rect.from_points(Vec2f(-3.0, 7.0), Vec2f(4.0, -2.0))
    for corner in rect.corners():
        assert rect.min_x <= corner.x <= rect.max_x
        assert rect.min_y <= corner.y <= rect.max_y


def test_circle_positional_construction():
    circle = Circle(2.5, Vec2f(1.0, 1.0))
    assert circle.radius == 2.5
    assert circle.center == Vec2f(1.0, 1.0)
    assert circle.relative_position == Vec2f()


def test_circle_set_copies_center():
    center = Vec2f(3.0, 4.0)
    circle = Circle()
    circle.set(1.5, center)
    center.x = 100.0
    assert circle.radius == 1.5
    assert circle.center == Vec2f(3.0, 4.0)


def test_shapes_hold_position_and_colour():
    rect = Rect(relative_position=Vec2f(1.0, 2.0), color=Vec3f(0.1, 0.2, 0.3))
    assert rect.relative_position == Vec2f(1.0, 2.0)
    assert rect.color == Vec3f(0.1, 0.2, 0.3)