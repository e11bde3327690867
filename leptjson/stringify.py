"""Serialise :class:`JsonValue` trees into compact JSON text."""

from __future__ import annotations

from collections.abc import Iterator

from .value import JsonValue, ValueType

__all__ = ["stringify"]

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ESCAPE_TABLE = {code: f"\\u{code:04X}" for code in range(0x20)}
_ESCAPE_TABLE.update({ord(ch): escaped for ch, escaped in _SHORT_ESCAPES.items()})

_LITERALS = {
    ValueType.NULL: "null",
    ValueType.FALSE: "false",
    ValueType.TRUE: "true",
}


def _quote(text: str) -> str:
    return '"' + text.translate(_ESCAPE_TABLE) + '"'


def _pieces(value: JsonValue) -> Iterator[str]:
    kind = value.type
    if kind in _LITERALS:
        yield _LITERALS[kind]
    elif kind is ValueType.NUMBER:
        yield "%.17g" % value.number
    elif kind is ValueType.STRING:
        yield _quote(value.string)
    elif kind is ValueType.ARRAY:
        yield "["
        for position, element in enumerate(value):
            if position:
                yield ","
            yield from _pieces(element)
        yield "]"
    elif kind is ValueType.OBJECT:
        yield "{"
        for position in range(len(value)):
            if position:
                yield ","
            yield _quote(value.key(position))
            yield ":"
            yield from _pieces(value.member_value(position))
        yield "}"
    else:
        raise TypeError(f"cannot stringify value of type {kind!r}")


def stringify(value: JsonValue) -> str:
    """Return the compact JSON text for ``value``."""
    if not isinstance(value, JsonValue):
        raise TypeError("stringify expects a JsonValue")
    return "".join(_pieces(value))