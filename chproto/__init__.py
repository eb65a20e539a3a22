"""Building blocks of the ClickHouse native protocol: types, type parsing, codes, queries and UUID columns."""

__version__ = "0.1.0"
__all__ = ["types", "type_parser", "protocol", "query", "columns"]