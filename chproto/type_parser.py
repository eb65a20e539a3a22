"""Parser for type name strings such as ``Array(Nullable(FixedString(16)))``."""

from __future__ import annotations

import string
import threading
from dataclasses import dataclass, field
from enum import Enum, auto
from functools import lru_cache
from typing import Iterator, NamedTuple

from .types import TypeCode

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class TypeParseError(ValueError):
    """Raised when a type name cannot be parsed into a valid type tree."""


class TypeAstMeta(Enum):
    """Category of a node in a parsed type tree."""

    Array = auto()
    Assign = auto()
    Null = auto()
    Nullable = auto()
    Number = auto()
    String = auto()
    Terminal = auto()
    Tuple = auto()
    Enum = auto()
    LowCardinality = auto()
    SimpleAggregateFunction = auto()
    Map = auto()


@dataclass
class TypeAst:
    """A node of a parsed type name.

    ``value`` holds numeric parameters (fixed widths, enum values),
    ``value_string`` holds quoted parameters (timezones, enum names).
    Equality ignores ``value_string``.
    """

    meta: TypeAstMeta = TypeAstMeta.Terminal
    code: TypeCode = TypeCode.Void
    name: str = ""
    value: int = 0
    value_string: str = field(default="", compare=False)
    elements: list[TypeAst] = field(default_factory=list)


_TYPE_CODES: dict[str, TypeCode] = {
    "Void": TypeCode.Void,
    "Int8": TypeCode.Int8,
    "Int16": TypeCode.Int16,
    "Int32": TypeCode.Int32,
    "Int64": TypeCode.Int64,
    "UInt8": TypeCode.UInt8,
    "UInt16": TypeCode.UInt16,
    "UInt32": TypeCode.UInt32,
    "UInt64": TypeCode.UInt64,
    "Float32": TypeCode.Float32,
    "Float64": TypeCode.Float64,
    "String": TypeCode.String,
    "FixedString": TypeCode.FixedString,
    "DateTime": TypeCode.DateTime,
    "DateTime64": TypeCode.DateTime64,
    "Date": TypeCode.Date,
    "Date32": TypeCode.Date32,
    "Array": TypeCode.Array,
    "Nullable": TypeCode.Nullable,
    "Tuple": TypeCode.Tuple,
    "Enum8": TypeCode.Enum8,
    "Enum16": TypeCode.Enum16,
    "UUID": TypeCode.UUID,
    "IPv4": TypeCode.IPv4,
    "IPv6": TypeCode.IPv6,
    "Int128": TypeCode.Int128,
    "Decimal": TypeCode.Decimal,
    "Decimal32": TypeCode.Decimal32,
    "Decimal64": TypeCode.Decimal64,
    "Decimal128": TypeCode.Decimal128,
    "LowCardinality": TypeCode.LowCardinality,
    "Map": TypeCode.Map,
    "Point": TypeCode.Point,
    "Ring": TypeCode.Ring,
    "Polygon": TypeCode.Polygon,
    "MultiPolygon": TypeCode.MultiPolygon,
}

_TYPE_METAS: dict[str, TypeAstMeta] = {
    "Array": TypeAstMeta.Array,
    "Null": TypeAstMeta.Null,
    "Nullable": TypeAstMeta.Nullable,
    "Tuple": TypeAstMeta.Tuple,
    "Enum8": TypeAstMeta.Enum,
    "Enum16": TypeAstMeta.Enum,
    "LowCardinality": TypeAstMeta.LowCardinality,
    "SimpleAggregateFunction": TypeAstMeta.SimpleAggregateFunction,
    "Map": TypeAstMeta.Map,
}


class _TokenKind(Enum):
    INVALID = auto()
    ASSIGN = auto()
    NAME = auto()
    NUMBER = auto()
    LPAR = auto()
    RPAR = auto()
    COMMA = auto()
    QUOTED_STRING = auto()  # quotation marks included
    EOS = auto()


class _Token(NamedTuple):
    kind: _TokenKind
    value: str


_WHITESPACE = frozenset(" \n\t\0")
_PUNCTUATION = {
    "=": _TokenKind.ASSIGN,
    "(": _TokenKind.LPAR,
    ")": _TokenKind.RPAR,
    ",": _TokenKind.COMMA,
}
_NAME_START = frozenset(string.ascii_letters + "_")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)


def validate_ast(ast: TypeAst) -> bool:
    """Reject terminals of unknown type (they carry the Void code but another name)."""
    return not (
        ast.meta is TypeAstMeta.Terminal
        and ast.code == TypeCode.Void
        and ast.name.lower() != "void"
    )


def _parse_number(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise TypeParseError(f"invalid number {text!r}") from None
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise TypeParseError(f"number {text!r} is out of range")
    return number


class TypeParser:
    """Turns a type name into a tree of :class:`TypeAst` nodes."""

    def __init__(self, name: str) -> None:
        self._name = name

    def _tokens(self) -> Iterator[_Token]:
        text = self._name
        end = len(text)
        pos = 0
        while pos < end:
            ch = text[pos]
            if ch in _WHITESPACE:
                pos += 1
                continue
            if ch in _PUNCTUATION:
                yield _Token(_PUNCTUATION[ch], ch)
                pos += 1
                continue
            if ch == "'":
                start = pos
                pos += 1
                # The closing quote is never looked for in the last character.
                while pos < end - 1:
                    if text[pos] == "'":
                        pos += 1
                        yield _Token(_TokenKind.QUOTED_STRING, text[start:pos])
                        break
                    pos += 1
                else:
                    yield _Token(_TokenKind.QUOTED_STRING, text[pos : pos + 1])
                    pos += 1
                continue
            if ch in _NAME_START:
                start = pos
                while pos < end and text[pos] in _NAME_CHARS:
                    pos += 1
                yield _Token(_TokenKind.NAME, text[start:pos])
                continue
            if ch in _DIGITS or ch == "-":
                start = pos
                pos += 1
                while pos < end and text[pos] in _DIGITS:
                    pos += 1
                yield _Token(_TokenKind.NUMBER, text[start:pos])
                continue
            yield _Token(_TokenKind.INVALID, "")
            return
        yield _Token(_TokenKind.EOS, "")

    def _pop(self, open_elements: list[TypeAst]) -> TypeAst:
        if not open_elements:
            raise TypeParseError(f"unbalanced brackets in {self._name!r}")
        return open_elements.pop()

    def parse(self) -> TypeAst:
        """Parse the type name, raising :class:`TypeParseError` on failure."""
        root = TypeAst()
        current = root
        open_elements = [root]
        processed_tokens = 0

        for token in self._tokens():
            kind = token.kind
            if kind is _TokenKind.QUOTED_STRING:
                current.meta = TypeAstMeta.Terminal
                current.value_string = token.value[1:-1]
                current.code = TypeCode.String
            elif kind is _TokenKind.NAME:
                current.meta = _TYPE_METAS.get(token.value, TypeAstMeta.Terminal)
                current.name = token.value
                current.code = _TYPE_CODES.get(token.value, TypeCode.Void)
            elif kind is _TokenKind.NUMBER:
                current.meta = TypeAstMeta.Number
                current.value = _parse_number(token.value)
            elif kind is _TokenKind.LPAR:
                child = TypeAst()
                current.elements.append(child)
                open_elements.append(current)
                current = child
            elif kind is _TokenKind.RPAR:
                current = self._pop(open_elements)
            elif kind in (_TokenKind.ASSIGN, _TokenKind.COMMA):
                current = self._pop(open_elements)
                child = TypeAst()
                current.elements.append(child)
                open_elements.append(current)
                current = child
            elif kind is _TokenKind.EOS:
                if len(open_elements) != 1:
                    raise TypeParseError(f"unbalanced brackets in {self._name!r}")
                if processed_tokens == 0:
                    raise TypeParseError("empty type name")
                if not validate_ast(root):
                    raise TypeParseError(f"unsupported type: {root.name}")
                return root
            else:
                raise TypeParseError(f"invalid character in type name {self._name!r}")
            processed_tokens += 1

        raise TypeParseError(f"unexpected end of type name {self._name!r}")


_cache_lock = threading.Lock()


@lru_cache(maxsize=None)
def _cached_parse(type_name: str) -> TypeAst:
    return TypeParser(type_name).parse()


def parse_type_name(type_name: str) -> TypeAst:
    """Parse a type name, caching successful results by name."""
    with _cache_lock:
        return _cached_parse(type_name)