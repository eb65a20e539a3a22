import pytest

from chproto.type_parser import (
    TypeAst,
    TypeAstMeta,
    TypeParseError,
    TypeParser,
    parse_type_name,
    validate_ast,
)
from chproto.types import TypeCode, create_decimal, create_enum8


@pytest.mark.parametrize(
    "name",
    ["Int8", "Int16", "Int32", "Int64", "UInt8", "UInt16", "UInt32", "UInt64",
     "String", "Date", "DateTime", "UUID", "Int128"],
)
def test_simple_names(name):
    ast = TypeParser(name).parse()
    assert ast.meta is TypeAstMeta.Terminal
    assert ast.code == TypeCode[name]
    assert ast.name == name
    assert ast.elements == []


def test_fixed_string():
    ast = TypeParser("FixedString(10000)").parse()
    assert ast.code == TypeCode.FixedString
    assert len(ast.elements) == 1
    assert ast.elements[0].meta is TypeAstMeta.Number
    assert ast.elements[0].value == 10000


def test_datetime_with_timezone():
    ast = TypeParser("DateTime('UTC')").parse()
    assert ast.code == TypeCode.DateTime
    assert len(ast.elements) == 1
    tz = ast.elements[0]
    assert tz.meta is TypeAstMeta.Terminal
    assert tz.code == TypeCode.String
    assert tz.value_string == "UTC"


def test_datetime64_with_timezone():
    ast = TypeParser("DateTime64(3, 'UTC')").parse()
    assert ast.code == TypeCode.DateTime64
    assert [e.meta for e in ast.elements] == [TypeAstMeta.Number, TypeAstMeta.Terminal]
    assert ast.elements[0].value == 3
    assert ast.elements[1].value_string == "UTC"


def test_enum8_items():
    ast = TypeParser("Enum8('ONE' = 1, 'TWO' = 2)").parse()
    assert ast.meta is TypeAstMeta.Enum
    assert ast.code == TypeCode.Enum8
    assert len(ast.elements) == 4
    assert [e.value_string for e in ast.elements[0::2]] == ["ONE", "TWO"]
    assert [e.value for e in ast.elements[1::2]] == [1, 2]


def test_enum_negative_value():
    ast = TypeParser("Enum8('a' = -1)").parse()
    assert ast.elements[1].value == -1


def test_enum_roundtrip_with_type_name():
    enum_type = create_enum8([("One", 1), ("Two", 2)])
    ast = TypeParser(enum_type.name).parse()
    names = [e.value_string for e in ast.elements[0::2]]
    values = [e.value for e in ast.elements[1::2]]
    assert list(zip(values, names)) == list(enum_type.items())


def test_decimal_roundtrip_with_type_name():
    decimal_type = create_decimal(9, 3)
    ast = TypeParser(decimal_type.name).parse()
    assert ast.code == TypeCode.Decimal
    assert [e.value for e in ast.elements] == [decimal_type.precision, decimal_type.scale]


def test_simple_aggregate_function():
    ast = TypeParser("SimpleAggregateFunction(funt, Int32)").parse()
    assert ast.meta is TypeAstMeta.SimpleAggregateFunction
    assert ast.code == TypeCode.Void
    assert ast.elements[0].name == "funt"
    assert ast.elements[1].code == TypeCode.Int32


def test_nested_types():
    ast = TypeParser("Array(Nullable(LowCardinality(FixedString(10000))))").parse()
    assert ast.meta is TypeAstMeta.Array
    nullable = ast.elements[0]
    assert nullable.meta is TypeAstMeta.Nullable
    low_cardinality = nullable.elements[0]
    assert low_cardinality.meta is TypeAstMeta.LowCardinality
    fixed = low_cardinality.elements[0]
    assert fixed.code == TypeCode.FixedString
    assert fixed.elements[0].value == 10000


def test_map():
    ast = TypeParser("Map(String, UInt64)").parse()
    assert ast.meta is TypeAstMeta.Map
    assert [e.code for e in ast.elements] == [TypeCode.String, TypeCode.UInt64]


def test_whitespace_is_ignored():
    assert TypeParser("Array(\n\tInt8 )").parse() == TypeParser("Array(Int8)").parse()


@pytest.mark.parametrize(
    "name",
    [
        "FixedString(10",
        "Nullable(FixedString(10000",
        "Nullable(FixedString(10000)",
        "LowCardinality(Nullable(FixedString(10000",
        "LowCardinality(Nullable(FixedString(10000)",
        "LowCardinality(Nullable(FixedString(10000))",
        "Array(LowCardinality(Nullable(FixedString(10000",
        "Array(LowCardinality(Nullable(FixedString(10000)",
        "Array(LowCardinality(Nullable(FixedString(10000))",
        "Array(LowCardinality(Nullable(FixedString(10000)))",
    ],
)
def test_unmatched_brackets(name):
    with pytest.raises(TypeParseError):
        parse_type_name(name)


@pytest.mark.parametrize("name", ["Int8)", "Int8))", "", "   ", "Int8$", "-"])
def test_malformed_names(name):
    with pytest.raises(TypeParseError):
        TypeParser(name).parse()


@pytest.mark.parametrize(
    "name",
    [
        "AggregateFunction(argMax, Int32, DateTime64(3))",
        "AggregateFunction(argMax, FIxedString(10), DateTime64(3, 'UTC'))",
        "Foo",
    ],
)
def test_unknown_types_rejected(name):
    with pytest.raises(TypeParseError):
        parse_type_name(name)


def test_void_accepted_case_insensitively():
    assert parse_type_name("void").code == TypeCode.Void
    assert validate_ast(TypeAst(meta=TypeAstMeta.Terminal, code=TypeCode.Void, name="VOID"))


def test_validate_ast_rejects_unknown_terminal():
    assert not validate_ast(TypeAst(meta=TypeAstMeta.Terminal, code=TypeCode.Void, name="Foo"))
    assert validate_ast(TypeAst(meta=TypeAstMeta.Array, code=TypeCode.Void, name="Foo"))


def test_equality_ignores_value_string():
    assert TypeAst(value_string="a") == TypeAst(value_string="b")
    assert TypeAst(value=1) != TypeAst(value=2)


def test_parse_type_name_caches():
    first = parse_type_name("Array(UInt64)")
    assert parse_type_name("Array(UInt64)") is first
    assert first == TypeParser("Array(UInt64)").parse()


def test_failed_parse_not_cached():
    for _ in range(2):
        with pytest.raises(TypeParseError):
            parse_type_name("Tuple(Int8")