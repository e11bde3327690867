# leptjson

A small, strict JSON library. It parses JSON text into a mutable value
tree, compares values, and turns them back into compact JSON text.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Parsing

`leptjson.parser.parse` takes a string holding one JSON document and
returns a `JsonValue`.

```python
from leptjson.parser import parse, ParseError, ParseErrorCode
from leptjson.value import ValueType

v = parse('{"n": null, "a": [1, 2, 3], "s": "abc"}')
assert v.type is ValueType.OBJECT
assert len(v) == 3
assert v.key(1) == "a"
assert v.member_value(1)[2].number == 3.0
assert v.find("s").string == "abc"

try:
    parse("[1,]")
except ParseError as err:
    assert err.code is ParseErrorCode.INVALID_VALUE
    print(err.position)
```

Parsing is strict: only the standard JSON grammar is accepted, there
must be exactly one value at the root (otherwise
`ParseErrorCode.ROOT_NOT_SINGULAR`), and numbers that overflow a double
raise `ParseErrorCode.NUMBER_TOO_BIG`. String escapes, including
`\uXXXX` surrogate pairs, are decoded. `ParseError` is a subclass of
`ValueError` and carries the `code` and the `position` in the text.
Object members keep the order in which they appear, duplicate keys
included.

## The value tree

`leptjson.value.JsonValue` holds one JSON value; its `type` property is
a `ValueType` (`NULL`, `FALSE`, `TRUE`, `NUMBER`, `STRING`, `ARRAY`,
`OBJECT`). A new `JsonValue()` is null.

- Scalars: `set_null()`, `set_boolean(b)`, `set_number(n)`,
  `set_string(s)`, and the read-only properties `boolean`, `number` and
  `string`. Reading a property of the wrong type raises `TypeError`.
- Arrays: `set_array(capacity)`, `len()`, indexing with `v[i]`,
  iteration, `append()`, `insert(index)`, `pop()`, `erase(index, count)`.
  `append` and `insert` add a null element and return it for you to set.
- Objects: `set_object(capacity)`, `len()`, `key(index)`,
  `member_value(index)`, `find_index(key)` and `find(key)` (both return
  `None` when the key is absent), `set_member(key)` (returns the existing
  value or adds a null one), `remove_member(index)`.
- Both containers track a `capacity` property and offer `reserve(n)`,
  `shrink()` and `clear()` (which keeps the capacity).
- Out-of-range indices raise `IndexError`.

```python
from leptjson.value import JsonValue

arr = JsonValue()
arr.set_array(0)
for i in range(3):
    arr.append().set_number(i)
arr.insert(0).set_string("first")
arr.erase(1, 1)
arr.pop()
arr.shrink()
assert len(arr) == arr.capacity == 2

obj = JsonValue()
obj.set_object(0)
obj.set_member("greeting").set_string("Hello")
obj.set_member("count").set_number(2)
obj.remove_member(obj.find_index("count"))
assert obj.find("count") is None
```

Values can also be deep-copied with `copy_from`, moved with
`move_from` (leaving the source null) and exchanged with `swap`. Two
values compare equal with `==` when they hold the same data; object
members are compared regardless of order.

## Writing JSON

```python
from leptjson.parser import parse
from leptjson.stringify import stringify

text = '{"n":null,"a":[1,2,3],"s":"abc"}'
assert stringify(parse(text)) == text
```

Output is compact, with no whitespace. Numbers are written with up to 17
significant digits (`"%.17g"`) so that they read back exactly; control
characters in strings are written as `\b`, `\f`, `\n`, `\r`, `\t` or
`\u00XX`.

## What it does not do

The package is a library only: it has no command-line tool, does not
read or write files itself, and has no pretty-printing or indentation
option for output.