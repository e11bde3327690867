import pytest

from leptjson.value import JsonValue, ValueType


def build(data):
    v = JsonValue()
    if data is None:
        v.set_null()
    elif isinstance(data, bool):
        v.set_boolean(data)
    elif isinstance(data, (int, float)):
        v.set_number(data)
    elif isinstance(data, str):
        v.set_string(data)
    elif isinstance(data, list):
        v.set_array(0)
        for item in data:
            v.append().move_from(build(item))
    else:
        v.set_object(0)
        for k, item in data.items():
            v.set_member(k).move_from(build(item))
    return v


SAMPLE = {"t": True, "f": False, "n": None, "d": 1.5, "a": [1, 2, 3]}


def test_new_value_is_null():
    assert JsonValue().type is ValueType.NULL


@pytest.mark.parametrize(
    "a, b, equal",
    [
        (True, True, True),
        (True, False, False),
        (False, False, True),
        (None, None, True),
        (None, 0, False),
        (123, 123, True),
        (123, 456, False),
        ("abc", "abc", True),
        ("abc", "abcd", False),
        ([], [], True),
        ([], None, False),
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 2, 3], [1, 2, 3, 4], False),
        ([[]], [[]], True),
        ({}, {}, True),
        ({}, None, False),
        ({}, [], False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ({"a": 1, "b": 2}, {"a": 1, "b": 3}, False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2, "c": 3}, False),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": {}}}}, True),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": []}}}, False),
    ],
)
def test_equal(a, b, equal):
    assert (build(a) == build(b)) is equal


def test_copy():
    v1 = build(SAMPLE)
    v2 = JsonValue()
    v2.copy_from(v1)
    assert v2 == v1
    v2.find("a").pop()
    assert len(v1.find("a")) == 3


def test_copy_onto_self_rejected():
    v = build(SAMPLE)
    with pytest.raises(ValueError):
        v.copy_from(v)


def test_move():
    v1 = build(SAMPLE)
    v2 = JsonValue()
    v2.copy_from(v1)
    v3 = JsonValue()
    v3.move_from(v2)
    assert v2.type is ValueType.NULL
    assert v3 == v1


def test_swap():
    v1 = JsonValue()
    v2 = JsonValue()
    v1.set_string("Hello")
    v2.set_string("World!")
    v1.swap(v2)
    assert v1.string == "World!"
    assert v2.string == "Hello"


def test_access_null():
    v = JsonValue()
    v.set_string("a")
    v.set_null()
    assert v.type is ValueType.NULL


def test_access_boolean():
    v = JsonValue()
    v.set_string("a")
    v.set_boolean(True)
    assert v.boolean is True
    v.set_boolean(False)
    assert v.boolean is False


def test_access_number():
    v = JsonValue()
    v.set_string("a")
    v.set_number(1234.5)
    assert v.number == 1234.5


def test_access_string():
    v = JsonValue()
    v.set_string("")
    assert v.string == ""
    assert len(v) == 0
    v.set_string("Hello")
    assert v.string == "Hello"
    assert len(v) == len("Hello")


def test_wrong_type_accessors_raise():
    v = JsonValue()
    v.set_number(1.5)
    with pytest.raises(TypeError):
        v.boolean
    with pytest.raises(TypeError):
        v.string
    with pytest.raises(TypeError):
        v.append()


def test_access_array():
    a = JsonValue()
    for j in (0, 5):
        a.set_array(j)
        assert len(a) == 0
        assert a.capacity == j
        for i in range(10):
            e = JsonValue()
            e.set_number(i)
            a.append().move_from(e)
            assert e.type is ValueType.NULL
        assert len(a) == 10
        assert [a[i].number for i in range(10)] == list(range(10))

    a.pop()
    assert len(a) == 9
    assert [a[i].number for i in range(9)] == list(range(9))

    a.erase(4, 0)
    assert [a[i].number for i in range(len(a))] == list(range(9))

    a.erase(8, 1)
    assert [a[i].number for i in range(len(a))] == list(range(8))

    a.erase(0, 2)
    assert [a[i].number for i in range(len(a))] == list(range(2, 8))

    for i in range(2):
        e = JsonValue()
        e.set_number(i)
        a.insert(i).move_from(e)
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == list(range(8))

    assert a.capacity > 8
    a.shrink()
    assert a.capacity == 8
    assert len(a) == 8

    e = JsonValue()
    e.set_string("Hello")
    a.append().move_from(e)

    capacity = a.capacity
    a.clear()
    assert len(a) == 0
    assert a.capacity == capacity
    a.shrink()
    assert a.capacity == 0


def test_array_bounds():
    a = build([1, 2])
    with pytest.raises(IndexError):
        a[2]
    with pytest.raises(IndexError):
        a.erase(1, 2)
    with pytest.raises(IndexError):
        a.insert(3)
    empty = build([])
    with pytest.raises(IndexError):
        empty.pop()


def test_access_object():
    o = JsonValue()
    letters = "abcdefghij"
    for j in (0, 5):
        o.set_object(j)
        assert len(o) == 0
        assert o.capacity == j
        for i, k in enumerate(letters):
            v = JsonValue()
            v.set_number(i)
            o.set_member(k).move_from(v)
        assert len(o) == 10
        for i, k in enumerate(letters):
            index = o.find_index(k)
            assert index is not None
            assert o.member_value(index).number == i

    index = o.find_index("j")
    assert index is not None
    o.remove_member(index)
    assert o.find_index("j") is None
    assert len(o) == 9

    index = o.find_index("a")
    assert index is not None
    o.remove_member(index)
    assert o.find_index("a") is None
    assert len(o) == 8

    assert o.capacity > 8
    o.shrink()
    assert o.capacity == 8
    assert len(o) == 8
    for i, k in enumerate(letters[1:9]):
        assert o.member_value(o.find_index(k)).number == i + 1

    v = JsonValue()
    v.set_string("Hello")
    o.set_member("World").move_from(v)
    found = o.find("World")
    assert found is not None
    assert found.string == "Hello"

    capacity = o.capacity
    o.clear()
    assert len(o) == 0
    assert o.capacity == capacity
    o.shrink()
    assert o.capacity == 0


def test_object_keys_keep_insertion_order():
    o = build({"n": None, "f": False, "t": True})
    assert [o.key(i) for i in range(len(o))] == ["n", "f", "t"]
    assert o.member_value(1).type is ValueType.FALSE


def test_set_member_returns_existing_value():
    o = build({"a": 1})
    same = o.set_member("a")
    assert same.number == 1
    assert len(o) == 1


def test_object_missing_key():
    o = build({"a": 1})
    assert o.find("b") is None
    with pytest.raises(IndexError):
        o.key(1)
    with pytest.raises(IndexError):
        o.remove_member(5)