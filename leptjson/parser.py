"""Recursive-descent parser turning JSON text into :class:`JsonValue` trees."""

from __future__ import annotations

import enum
import math
from string import hexdigits

from .value import JsonValue, _Member

__all__ = ["ParseErrorCode", "ParseError", "parse"]

# Input is read as if it were NUL-terminated: the first "\0" ends the text.
_END = "\0"
_WHITESPACE = " \t\n\r"
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class ParseErrorCode(enum.Enum):
    """Why a piece of JSON text could not be parsed."""

    EXPECT_VALUE = 1
    INVALID_VALUE = 2
    ROOT_NOT_SINGULAR = 3
    NUMBER_TOO_BIG = 4
    MISS_QUOTATION_MARK = 5
    INVALID_STRING_ESCAPE = 6
    INVALID_STRING_CHAR = 7
    INVALID_UNICODE_HEX = 8
    INVALID_UNICODE_SURROGATE = 9
    MISS_COMMA_OR_SQUARE_BRACKET = 10
    MISS_KEY = 11
    MISS_COLON = 12
    MISS_COMMA_OR_CURLY_BRACKET = 13


class ParseError(ValueError):
    """Raised when JSON text is malformed."""

    def __init__(self, code: ParseErrorCode, position: int) -> None:
        self.code = code
        self.position = position
        description = code.name.lower().replace("_", " ")
        super().__init__(f"{description} at position {position}")


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _char_at(self, index: int) -> str:
        return self.text[index] if index < len(self.text) else _END

    def _peek(self) -> str:
        return self._char_at(self.pos)

    def _fail(self, code: ParseErrorCode, position: int | None = None) -> ParseError:
        return ParseError(code, self.pos if position is None else position)

    def skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE and self._peek() != _END:
            self.pos += 1

    def _skip_digits(self, index: int) -> int:
        while "0" <= self._char_at(index) <= "9":
            index += 1
        return index

    # ----- values -------------------------------------------------------

    def parse_value(self) -> JsonValue:
        ch = self._peek()
        if ch == "t":
            return self._parse_literal("true", True)
        if ch == "f":
            return self._parse_literal("false", False)
        if ch == "n":
            return self._parse_literal("null", None)
        if ch == '"':
            value = JsonValue()
            value.set_string(self._parse_string_raw())
            return value
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_object()
        if ch == _END:
            raise self._fail(ParseErrorCode.EXPECT_VALUE)
        return self._parse_number()

    def _parse_literal(self, literal: str, boolean: bool | None) -> JsonValue:
        if not self.text.startswith(literal, self.pos):
            raise self._fail(ParseErrorCode.INVALID_VALUE)
        self.pos += len(literal)
        value = JsonValue()
        if boolean is not None:
            value.set_boolean(boolean)
        return value

    def _parse_number(self) -> JsonValue:
        start = p = self.pos
        if self._char_at(p) == "-":
            p += 1
        if self._char_at(p) == "0":
            p += 1
        else:
            if not "1" <= self._char_at(p) <= "9":
                raise self._fail(ParseErrorCode.INVALID_VALUE)
            p = self._skip_digits(p + 1)
        if self._char_at(p) == ".":
            p += 1
            if not "0" <= self._char_at(p) <= "9":
                raise self._fail(ParseErrorCode.INVALID_VALUE)
            p = self._skip_digits(p + 1)
        if self._char_at(p) in ("e", "E"):
            p += 1
            if self._char_at(p) in ("+", "-"):
                p += 1
            if not "0" <= self._char_at(p) <= "9":
                raise self._fail(ParseErrorCode.INVALID_VALUE)
            p = self._skip_digits(p + 1)
        number = float(self.text[start:p])
        if math.isinf(number):
            raise self._fail(ParseErrorCode.NUMBER_TOO_BIG)
        self.pos = p
        value = JsonValue()
        value.set_number(number)
        return value

    # ----- strings ------------------------------------------------------

    def _parse_hex4(self, index: int) -> int | None:
        digits = self.text[index:index + 4]
        if len(digits) != 4 or any(ch not in hexdigits for ch in digits):
            return None
        return int(digits, 16)

    def _parse_string_raw(self) -> str:
        start = self.pos
        p = self.pos + 1
        pieces: list[str] = []
        while True:
            ch = self._char_at(p)
            p += 1
            if ch == '"':
                self.pos = p
                return "".join(pieces)
            if ch == "\\":
                escape = self._char_at(p)
                p += 1
                if escape in _ESCAPES and escape != _END:
                    pieces.append(_ESCAPES[escape])
                elif escape == "u":
                    pieces.append(chr(self._parse_unicode_escape(p, start)))
                    p += 4
                    if self._is_high_surrogate(self.text[p - 4:p]):
                        p += 6
                else:
                    raise self._fail(ParseErrorCode.INVALID_STRING_ESCAPE, start)
            elif ch == _END:
                raise self._fail(ParseErrorCode.MISS_QUOTATION_MARK, start)
            elif ord(ch) < 0x20:
                raise self._fail(ParseErrorCode.INVALID_STRING_CHAR, start)
            else:
                pieces.append(ch)

    @staticmethod
    def _is_high_surrogate(digits: str) -> bool:
        return 0xD800 <= int(digits, 16) <= 0xDBFF

    def _parse_unicode_escape(self, p: int, start: int) -> int:
        """Decode the escape whose hex digits begin at ``p``, joining surrogate pairs."""
        high = self._parse_hex4(p)
        if high is None:
            raise self._fail(ParseErrorCode.INVALID_UNICODE_HEX, start)
        if not 0xD800 <= high <= 0xDBFF:
            return high
        p += 4
        if self._char_at(p) != "\\" or self._char_at(p + 1) != "u":
            raise self._fail(ParseErrorCode.INVALID_UNICODE_SURROGATE, start)
        low = self._parse_hex4(p + 2)
        if low is None:
            raise self._fail(ParseErrorCode.INVALID_UNICODE_HEX, start)
        if not 0xDC00 <= low <= 0xDFFF:
            raise self._fail(ParseErrorCode.INVALID_UNICODE_SURROGATE, start)
        return (((high - 0xD800) << 10) | (low - 0xDC00)) + 0x10000

    # ----- containers ---------------------------------------------------

    def _parse_array(self) -> JsonValue:
        self.pos += 1
        self.skip_whitespace()
        elements: list[JsonValue] = []
        if self._peek() == "]":
            self.pos += 1
        else:
            while True:
                elements.append(self.parse_value())
                self.skip_whitespace()
                ch = self._peek()
                if ch == ",":
                    self.pos += 1
                    self.skip_whitespace()
                elif ch == "]":
                    self.pos += 1
                    break
                else:
                    raise self._fail(ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET)
        result = JsonValue()
        result.set_array(len(elements))
        for element in elements:
            result.append().move_from(element)
        return result

    def _parse_object(self) -> JsonValue:
        self.pos += 1
        self.skip_whitespace()
        members: list[_Member] = []
        if self._peek() == "}":
            self.pos += 1
        else:
            while True:
                if self._peek() != '"':
                    raise self._fail(ParseErrorCode.MISS_KEY)
                key = self._parse_string_raw()
                self.skip_whitespace()
                if self._peek() != ":":
                    raise self._fail(ParseErrorCode.MISS_COLON)
                self.pos += 1
                self.skip_whitespace()
                members.append(_Member(key, self.parse_value()))
                self.skip_whitespace()
                ch = self._peek()
                if ch == ",":
                    self.pos += 1
                    self.skip_whitespace()
                elif ch == "}":
                    self.pos += 1
                    break
                else:
                    raise self._fail(ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET)
        result = JsonValue()
        result.set_object(len(members))
        # Duplicate keys are kept in order, as they appear in the text.
        result._data.extend(members)
        return result


def parse(json: str) -> JsonValue:
    """Parse one JSON document and return its value.

    Raises :class:`ParseError` when the text is not a single valid JSON value.
    """
    parser = _Parser(json)
    parser.skip_whitespace()
    value = parser.parse_value()
    parser.skip_whitespace()
    if parser._peek() != _END:
        raise ParseError(ParseErrorCode.ROOT_NOT_SINGULAR, parser.pos)
    return value