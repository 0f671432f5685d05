import pytest

from rigidscene.sj import Reader, ValueType

SAMPLE = """[
  { "id": "rigidBody1", "position": [10, 5], "orientation": 0.785 },
  { "id": "rigidBody2", "position": [20, 15], "orientation": 0.0 }
  ]"""


def test_parses_sample_bodies():
    reader = Reader(SAMPLE)
    root = reader.read()
    assert root.type is ValueType.ARRAY
    records = []
    for obj in reader.iter_array(root):
        fields = {}
        for key, value in reader.iter_object(obj):
            if key.key_equals("id"):
                fields["id"] = value.text()
            elif key.key_equals("orientation"):
                fields["orientation"] = value.number()
        records.append(fields)
    assert records == [
        {"id": "rigidBody1", "orientation": pytest.approx(0.785)},
        {"id": "rigidBody2", "orientation": 0.0},
    ]


def test_nested_arrays_are_read_element_by_element():
    reader = Reader(SAMPLE)
    root = reader.read()
    first = next(reader.iter_array(root))
    positions = [
        [element.number() for element in reader.iter_array(value)]
        for key, value in reader.iter_object(first)
        if key.key_equals("position")
    ]
    assert positions == [[10.0, 5.0]]


def test_root_that_is_not_array_is_reported():
    reader = Reader('{"id": "x"}')
    root = reader.read()
    assert root.type is ValueType.OBJECT
    assert root.type is not ValueType.ARRAY


def test_value_type_codes():
    assert Reader("").read().type == 0
    assert Reader("[").read().type == 2
    assert Reader("null").read().type == 7


def test_literals():
    reader = Reader("[true, false, null]")
    root = reader.read()
    values = [(v.type, v.text()) for v in reader.iter_array(root)]
    assert values == [
        (ValueType.BOOL, "true"),
        (ValueType.BOOL, "false"),
        (ValueType.NULL, "null"),
    ]
    assert reader.error is None


def test_string_text_keeps_escapes():
    value = Reader('"a\\"b"').read()
    assert value.type is ValueType.STRING
    assert value.text() == 'a\\"b'


def test_number_with_exponent():
    value = Reader("1.5e2").read()
    assert value.type is ValueType.NUMBER
    assert value.number() == 150.0


def test_number_without_digits_raises():
    value = Reader("-").read()
    with pytest.raises(ValueError):
        value.number()


def test_key_equals_exact_match_only():
    key = Reader('"id"').read()
    assert key.key_equals("id")
    assert not key.key_equals("i")
    assert not key.key_equals("ids")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "unexpected eof"),
        ('"abc', "unclosed string"),
        ("]", "stray ']'"),
        ("}", "stray '}'"),
        ("x", "unknown token"),
        ("nul", "unknown token"),
    ],
)
def test_errors(text, message):
    reader = Reader(text)
    assert reader.read().type is ValueType.ERROR
    assert reader.error == message


def test_errors_are_sticky():
    reader = Reader("x 1")
    reader.read()
    assert reader.read().type is ValueType.ERROR
    assert reader.error == "unknown token"


def test_unknown_token_stops_array_iteration():
    reader = Reader("[1, x, 2]")
    root = reader.read()
    assert [v.text() for v in reader.iter_array(root)] == ["1"]
    assert reader.error == "unknown token"


def test_unexpected_object_end():
    reader = Reader('{"a"}')
    obj = reader.read()
    assert list(reader.iter_object(obj)) == []
    assert reader.error == "unexpected object end"


def test_location_counts_lines_and_columns():
    reader = Reader("[\n 1")
    reader.read()
    reader.read()
    assert reader.location() == (2, 3)


def test_location_at_start():
    assert Reader("[]").location() == (1, 1)