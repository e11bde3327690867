"""In-memory JSON values: a tagged value with typed accessors and container operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class ValueType(enum.Enum):
    """The kind of data a :class:`JsonValue` currently holds."""

    NULL = 0
    FALSE = 1
    TRUE = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


@dataclass
class _Member:
    key: str
    value: "JsonValue"


_CONTAINERS = (ValueType.ARRAY, ValueType.OBJECT)


class JsonValue:
    """A mutable JSON value. A new value is null."""

    __slots__ = ("_type", "_data", "_capacity")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._type = ValueType.NULL
        self._data: Any = None
        self._capacity = 0

    def __repr__(self) -> str:
        return f"JsonValue({self._type.name}, {self._data!r})"

    # ----- internal helpers -------------------------------------------------

    def _require(self, *types: ValueType) -> None:
        if self._type not in types:
            wanted = " or ".join(t.name for t in types)
            raise TypeError(f"expected {wanted} value, got {self._type.name}")

    def _reset(self, type_: ValueType, data: Any = None, capacity: int = 0) -> None:
        self._type = type_
        self._data = data
        self._capacity = capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")

    def _grow(self) -> None:
        if len(self._data) == self._capacity:
            self.reserve(1 if self._capacity == 0 else self._capacity * 2)

    def _clone(self) -> JsonValue:
        result = JsonValue()
        if self._type is ValueType.ARRAY:
            data: Any = [element._clone() for element in self._data]
        elif self._type is ValueType.OBJECT:
            data = [_Member(m.key, m.value._clone()) for m in self._data]
        else:
            data = self._data
        result._reset(self._type, data, self._capacity)
        return result

    # ----- comparison and whole-value operations ----------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is ValueType.ARRAY:
            return len(self._data) == len(other._data) and all(
                a == b for a, b in zip(self._data, other._data)
            )
        if self._type is ValueType.OBJECT:
            if len(self._data) != len(other._data):
                return False
            for member in self._data:
                found = other.find(member.key)
                if found is None or not member.value == found:
                    return False
            return True
        return self._data == other._data

    @property
    def type(self) -> ValueType:
        """The kind of data held."""
        return self._type

    def copy_from(self, src: JsonValue) -> None:
        """Replace this value with a deep copy of ``src``."""
        if src is self:
            raise ValueError("cannot copy a value onto itself")
        clone = src._clone()
        self._reset(clone._type, clone._data, clone._capacity)

    def move_from(self, src: JsonValue) -> None:
        """Take over the contents of ``src``, leaving ``src`` null."""
        if src is self:
            raise ValueError("cannot move a value onto itself")
        self._reset(src._type, src._data, src._capacity)
        src._reset(ValueType.NULL)

    def swap(self, other: JsonValue) -> None:
        """Exchange contents with ``other``."""
        if other is self:
            return
        mine = (self._type, self._data, self._capacity)
        self._reset(other._type, other._data, other._capacity)
        other._reset(*mine)

    # ----- scalars ----------------------------------------------------------

    def set_null(self) -> None:
        self._reset(ValueType.NULL)

    def set_boolean(self, b: Any) -> None:
        self._reset(ValueType.TRUE if b else ValueType.FALSE)

    def set_number(self, n: float) -> None:
        self._reset(ValueType.NUMBER, float(n))

    def set_string(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("string value must be str")
        self._reset(ValueType.STRING, s)

    @property
    def boolean(self) -> bool:
        self._require(ValueType.TRUE, ValueType.FALSE)
        return self._type is ValueType.TRUE

    @property
    def number(self) -> float:
        self._require(ValueType.NUMBER)
        return self._data

    @property
    def string(self) -> str:
        self._require(ValueType.STRING)
        return self._data

    # ----- containers -------------------------------------------------------

    def set_array(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._reset(ValueType.ARRAY, [], capacity)

    def set_object(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._reset(ValueType.OBJECT, [], capacity)

    def __len__(self) -> int:
        self._require(ValueType.STRING, *_CONTAINERS)
        return len(self._data)

    @property
    def capacity(self) -> int:
        self._require(*_CONTAINERS)
        return self._capacity

    def reserve(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` entries."""
        self._require(*_CONTAINERS)
        if self._capacity < capacity:
            self._capacity = capacity

    def shrink(self) -> None:
        """Reduce capacity to the current size."""
        self._require(*_CONTAINERS)
        if self._capacity > len(self._data):
            self._capacity = len(self._data)

    def clear(self) -> None:
        """Remove every entry, keeping the capacity."""
        self._require(*_CONTAINERS)
        self._data.clear()

    # ----- arrays -----------------------------------------------------------

    def __getitem__(self, index: int) -> JsonValue:
        self._require(ValueType.ARRAY)
        self._check_index(index)
        return self._data[index]

    def append(self) -> JsonValue:
        """Add a null element at the end and return it."""
        self._require(ValueType.ARRAY)
        self._grow()
        element = JsonValue()
        self._data.append(element)
        return element

    def pop(self) -> JsonValue:
        """Remove and return the last element."""
        self._require(ValueType.ARRAY)
        if not self._data:
            raise IndexError("pop from empty array")
        return self._data.pop()

    def insert(self, index: int) -> JsonValue:
        """Insert a null element before ``index`` and return it."""
        self._require(ValueType.ARRAY)
        if not 0 <= index <= len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")
        self._grow()
        element = JsonValue()
        self._data.insert(index, element)
        return element

    def erase(self, index: int, count: int) -> None:
        """Remove ``count`` elements starting at ``index``."""
        self._require(ValueType.ARRAY)
        if index < 0 or count < 0 or index + count > len(self._data):
            raise IndexError(f"range {index}+{count} out of range for size {len(self._data)}")
        del self._data[index:index + count]

    # ----- objects ----------------------------------------------------------

    def key(self, index: int) -> str:
        self._require(ValueType.OBJECT)
        self._check_index(index)
        return self._data[index].key

    def member_value(self, index: int) -> JsonValue:
        self._require(ValueType.OBJECT)
        self._check_index(index)
        return self._data[index].value

    def find_index(self, key: str) -> int | None:
        """Position of the member named ``key``, or None."""
        self._require(ValueType.OBJECT)
        for position, member in enumerate(self._data):
            if member.key == key:
                return position
        return None

    def find(self, key: str) -> JsonValue | None:
        """Value of the member named ``key``, or None."""
        position = self.find_index(key)
        return None if position is None else self._data[position].value

    def set_member(self, key: str) -> JsonValue:
        """Return the value stored under ``key``, adding a null member if absent."""
        existing = self.find(key)
        if existing is not None:
            return existing
        self._grow()
        member = _Member(key, JsonValue())
        self._data.append(member)
        return member.value

    def remove_member(self, index: int) -> None:
        self._require(ValueType.OBJECT)
        self._check_index(index)
        del self._data[index]