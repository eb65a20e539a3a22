"""Column type descriptions: codes, parametrised types and their canonical names."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, Sequence


class ValidationError(ValueError):
    """Raised when a type is constructed with invalid parameters."""


class TypeCode(IntEnum):
    """Codes identifying every supported column type."""

    Void = 0
    Int8 = 1
    Int16 = 2
    Int32 = 3
    Int64 = 4
    UInt8 = 5
    UInt16 = 6
    UInt32 = 7
    UInt64 = 8
    Float32 = 9
    Float64 = 10
    String = 11
    FixedString = 12
    DateTime = 13
    Date = 14
    Array = 15
    Nullable = 16
    Tuple = 17
    Enum8 = 18
    Enum16 = 19
    UUID = 20
    IPv4 = 21
    IPv6 = 22
    Int128 = 23
    Decimal = 24
    Decimal32 = 25
    Decimal64 = 26
    Decimal128 = 27
    LowCardinality = 28
    DateTime64 = 29
    Date32 = 30
    Map = 31
    Point = 32
    Ring = 33
    Polygon = 34
    MultiPolygon = 35


_SIMPLE_NUMERIC_CODES = frozenset(
    {
        TypeCode.Int8,
        TypeCode.Int16,
        TypeCode.Int32,
        TypeCode.Int64,
        TypeCode.Int128,
        TypeCode.UInt8,
        TypeCode.UInt16,
        TypeCode.UInt32,
        TypeCode.UInt64,
        TypeCode.Float32,
        TypeCode.Float64,
    }
)


class Type:
    """A column type. Plain types are instances of this class; parametrised ones subclass it."""

    def __init__(self, code: TypeCode) -> None:
        self._code = TypeCode(code)

    @property
    def code(self) -> TypeCode:
        return self._code

    @staticmethod
    def type_name(code: int) -> str:
        """Simple name of a type code, independent of any parameters."""
        try:
            return TypeCode(code).name
        except ValueError:
            return "Unknown type"

    @property
    def name(self) -> str:
        """Full string representation of the type."""
        return self.type_name(self._code)

    def is_equal(self, other: Type) -> bool:
        """Types are equal when their codes and full names match."""
        return self is other or (self._code == other._code and self.name == other.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        if self is other:
            return True
        return type(self) is type(other) and self.is_equal(other)

    def __hash__(self) -> int:
        return hash((int(self._code), self.name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __str__(self) -> str:
        return self.name


class ArrayType(Type):
    def __init__(self, item_type: Type) -> None:
        super().__init__(TypeCode.Array)
        self._item_type = item_type

    @property
    def item_type(self) -> Type:
        return self._item_type

    @property
    def name(self) -> str:
        return f"Array({self._item_type.name})"


class DecimalType(Type):
    def __init__(self, precision: int, scale: int) -> None:
        super().__init__(TypeCode.Decimal)
        self._precision = precision
        self._scale = scale

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def name(self) -> str:
        if self.code == TypeCode.Decimal:
            return f"Decimal({self._precision},{self._scale})"
        if self.code in (TypeCode.Decimal32, TypeCode.Decimal64, TypeCode.Decimal128):
            return f"{self.code.name}({self._scale})"
        return ""


class DateTimeType(Type):
    def __init__(self, timezone: str = "") -> None:
        super().__init__(TypeCode.DateTime)
        self._timezone = timezone

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def name(self) -> str:
        if self._timezone:
            return f"DateTime('{self._timezone}')"
        return "DateTime"


class DateTime64Type(Type):
    def __init__(self, precision: int, timezone: str = "") -> None:
        super().__init__(TypeCode.DateTime64)
        if precision > 18:
            raise ValidationError("DateTime64 precision is > 18")
        self._precision = precision
        self._timezone = timezone

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def name(self) -> str:
        if self._timezone:
            return f"DateTime64({self._precision}, '{self._timezone}')"
        return f"DateTime64({self._precision})"


class EnumType(Type):
    """Enum8 or Enum16 with its name/value mapping."""

    def __init__(self, code: TypeCode, items: Iterable[tuple[str, int]]) -> None:
        super().__init__(code)
        self._name_to_value: dict[str, int] = {}
        self._value_to_name: dict[int, str] = {}
        for item_name, value in items:
            # An already-known name keeps its first value, but the new value still maps to it.
            self._name_to_value.setdefault(item_name, value)
            self._value_to_name[value] = item_name

    def get_enum_name(self, value: int) -> str:
        return self._value_to_name[value]

    def get_enum_value(self, name: str) -> int:
        return self._name_to_value[name]

    def has_enum_name(self, name: str) -> bool:
        return name in self._name_to_value

    def has_enum_value(self, value: int) -> bool:
        return value in self._value_to_name

    def items(self) -> Iterator[tuple[int, str]]:
        """(value, name) pairs ordered by value."""
        return iter(sorted(self._value_to_name.items()))

    @property
    def name(self) -> str:
        prefix = "Enum8" if self.code == TypeCode.Enum8 else "Enum16"
        body = ", ".join(f"'{item_name}' = {value}" for value, item_name in self.items())
        return f"{prefix}({body})"


class FixedStringType(Type):
    def __init__(self, size: int) -> None:
        super().__init__(TypeCode.FixedString)
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def name(self) -> str:
        return f"FixedString({self._size})"


class NullableType(Type):
    def __init__(self, nested_type: Type) -> None:
        super().__init__(TypeCode.Nullable)
        self._nested_type = nested_type

    @property
    def nested_type(self) -> Type:
        return self._nested_type

    @property
    def name(self) -> str:
        return f"Nullable({self._nested_type.name})"


class TupleType(Type):
    def __init__(self, item_types: Sequence[Type]) -> None:
        super().__init__(TypeCode.Tuple)
        self._item_types = list(item_types)

    @property
    def item_types(self) -> list[Type]:
        return list(self._item_types)

    @property
    def name(self) -> str:
        return "Tuple(" + ", ".join(t.name for t in self._item_types) + ")"


class LowCardinalityType(Type):
    def __init__(self, nested_type: Type) -> None:
        super().__init__(TypeCode.LowCardinality)
        self._nested_type = nested_type

    @property
    def nested_type(self) -> Type:
        return self._nested_type

    @property
    def name(self) -> str:
        return f"LowCardinality({self._nested_type.name})"


class MapType(Type):
    def __init__(self, key_type: Type, value_type: Type) -> None:
        super().__init__(TypeCode.Map)
        self._key_type = key_type
        self._value_type = value_type

    @property
    def key_type(self) -> Type:
        return self._key_type

    @property
    def value_type(self) -> Type:
        return self._value_type

    @property
    def name(self) -> str:
        return f"Map({self._key_type.name}, {self._value_type.name})"


def create_array(item_type: Type) -> Type:
    return ArrayType(item_type)


def create_date() -> Type:
    return Type(TypeCode.Date)


def create_date32() -> Type:
    return Type(TypeCode.Date32)


def create_datetime(timezone: str = "") -> Type:
    return DateTimeType(timezone)


def create_datetime64(precision: int, timezone: str = "") -> Type:
    return DateTime64Type(precision, timezone)


def create_decimal(precision: int, scale: int) -> Type:
    return DecimalType(precision, scale)


def create_ipv4() -> Type:
    return Type(TypeCode.IPv4)


def create_ipv6() -> Type:
    return Type(TypeCode.IPv6)


def create_nothing() -> Type:
    return Type(TypeCode.Void)


def create_nullable(nested_type: Type) -> Type:
    return NullableType(nested_type)


def create_simple(code: TypeCode) -> Type:
    """Create a plain numeric type (integers and floats)."""
    code = TypeCode(code)
    if code not in _SIMPLE_NUMERIC_CODES:
        raise ValueError(f"{code.name} is not a simple numeric type")
    return Type(code)


def create_string() -> Type:
    return Type(TypeCode.String)


def create_fixed_string(size: int) -> Type:
    return FixedStringType(size)


def create_tuple(item_types: Sequence[Type]) -> Type:
    return TupleType(item_types)


def create_enum8(items: Iterable[tuple[str, int]]) -> Type:
    return EnumType(TypeCode.Enum8, items)


def create_enum16(items: Iterable[tuple[str, int]]) -> Type:
    return EnumType(TypeCode.Enum16, items)


def create_uuid() -> Type:
    return Type(TypeCode.UUID)


def create_low_cardinality(item_type: Type) -> Type:
    return LowCardinalityType(item_type)


def create_map(key_type: Type, value_type: Type) -> Type:
    return MapType(key_type, value_type)


def create_point() -> Type:
    return Type(TypeCode.Point)


def create_ring() -> Type:
    return Type(TypeCode.Ring)


def create_polygon() -> Type:
    return Type(TypeCode.Polygon)


def create_multi_polygon() -> Type:
    return Type(TypeCode.MultiPolygon)