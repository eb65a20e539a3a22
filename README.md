# chproto

Pure-Python building blocks for the ClickHouse native protocol. The package
needs nothing outside the standard library.

## What it provides

- `chproto.types`: column types. `Type` covers the plain types, and its
  subclasses cover the parametrised ones: `ArrayType`, `DecimalType`,
  `DateTimeType`, `DateTime64Type`, `EnumType`, `FixedStringType`,
  `NullableType`, `TupleType`, `LowCardinalityType` and `MapType`. Every type
  has a `code` (a `TypeCode`) and a `name` property that gives the canonical
  type name, for example `Array(Nullable(FixedString(10)))`. Two types compare
  equal when they are of the same class and have the same code and name. The
  `create_*` functions build types, for example `create_array`,
  `create_nullable`, `create_fixed_string`, `create_datetime64`,
  `create_enum8` and `create_simple(TypeCode.Int32)`. A `DateTime64Type` with a
  precision above 18 raises `ValidationError`.
- `chproto.type_parser`: parses type-name strings into a tree of `TypeAst`
  nodes. `parse_type_name` caches successful results. `TypeParser(name).parse()`
  parses without the cache. Unbalanced brackets, empty input, invalid
  characters and unknown terminal types raise `TypeParseError`.
  `validate_ast` checks a single node.
- `chproto.protocol`: the enumerations `ServerCode`, `ClientCode`,
  `CompressionState`, `Stage` and the server's `ErrorCode`.
- `chproto.query`: `Query` holds the query text, the query id, per-query
  settings (`QuerySettingsField` with `QuerySettingsFlag`), an optional tracing
  context, and the callbacks for data, cancelable data, exceptions, progress,
  server logs and profile events. The `set_*` and `on_*` methods return the
  query, so you can chain calls. The `handle_*` methods pass incoming events to
  the callbacks. `QueryEvents` is the abstract interface that `Query`
  implements. `Profile` and `Progress` are plain dataclasses.
- `chproto.columns`: `ColumnUUID` stores UUIDs as `(first, second)` pairs of
  unsigned 64-bit halves. It supports `append`, `append_column`, `at`,
  indexing, `len`, iteration, `slice`, `clone_empty`, `swap` and `clear`.
  `load_body` and `save_body` read and write its body as little-endian 64-bit
  integers on a binary stream. `slice_vector` is the slicing helper it uses.

## Example

```python
import io

from chproto.types import create_array, create_nullable, create_fixed_string
from chproto.type_parser import parse_type_name
from chproto.query import Query, QuerySettingsField
from chproto.columns import ColumnUUID

t = create_array(create_nullable(create_fixed_string(10)))
print(t.name)                       # Array(Nullable(FixedString(10)))

ast = parse_type_name("Decimal(9,3)")
print(ast.name, [e.value for e in ast.elements])   # Decimal [9, 3]

query = Query("SELECT 1", "my-query-id")
query.set_setting("join_use_nulls", QuerySettingsField("1"))
query.on_data(lambda block: print(block))

col = ColumnUUID()
col.append((1, 2))
buf = io.BytesIO()
col.save_body(buf)
print(len(col), col[0], len(buf.getvalue()))       # 1 (1, 2) 16
```

## What it does not do

This package does not connect to a server. It has no client, no sockets, no
compression, no data blocks, and no column classes other than `ColumnUUID`.
It also does not build columns from parsed type names. It gives you the types,
the parser, the codes and the query object that such a client would be built
on.

## Running the tests

```
pip install -e ".[test]"
pytest
```