"""Columns of values stored in the native block layout."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from .types import Type, ValidationError, create_uuid

T = TypeVar("T")

UUID = Tuple[int, int]

_UINT64_MAX = 2**64 - 1
_UINT64_SIZE = 8


def slice_vector(values: Sequence[T], begin: int, length: int) -> list[T]:
    """Return up to ``length`` items starting at ``begin``; empty if ``begin`` is past the end."""
    if begin < 0 or length < 0:
        raise ValueError("begin and length must be non-negative")
    if begin >= len(values):
        return []
    return list(values[begin : begin + length])


def _check_uint64(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"{value!r} is not an unsigned 64-bit integer")
    return value


class ColumnUUID:
    """A column of UUIDs, each held as a pair of unsigned 64-bit halves."""

    def __init__(self, data: Optional[Iterable[int]] = None) -> None:
        halves = [_check_uint64(v) for v in data] if data is not None else []
        if len(halves) % 2 != 0:
            raise ValidationError(
                "number of entries must be even (two 64-bit numbers for each UUID)"
            )
        self._data = halves

    @property
    def type(self) -> Type:
        return create_uuid()

    def append(self, value: UUID) -> None:
        """Append one UUID given as its (first, second) halves."""
        first, second = value
        self._data.extend((_check_uint64(first), _check_uint64(second)))

    def append_column(self, other: object) -> None:
        """Append the content of another UUID column; other columns are ignored."""
        if isinstance(other, ColumnUUID):
            self._data.extend(other._data)

    def at(self, n: int) -> UUID:
        """Return the UUID at row ``n``."""
        if not 0 <= n < len(self):
            raise IndexError(f"row {n} out of range for column of {len(self)} rows")
        return (self._data[n * 2], self._data[n * 2 + 1])

    def __getitem__(self, n: int) -> UUID:
        if n < 0:
            n += len(self)
        return self.at(n)

    def __len__(self) -> int:
        return len(self._data) // 2

    def __iter__(self) -> Iterator[UUID]:
        halves = iter(self._data)
        return zip(halves, halves)

    def clear(self) -> None:
        self._data.clear()

    def slice(self, begin: int, length: int) -> ColumnUUID:
        """Return a new column with up to ``length`` rows starting at ``begin``."""
        return ColumnUUID(slice_vector(self._data, begin * 2, length * 2))

    def clone_empty(self) -> ColumnUUID:
        return ColumnUUID()

    def swap(self, other: ColumnUUID) -> None:
        if not isinstance(other, ColumnUUID):
            raise TypeError(f"cannot swap ColumnUUID with {type(other).__name__}")
        self._data, other._data = other._data, self._data

    def load_body(self, stream: BinaryIO, rows: int) -> None:
        """Replace the content with ``rows`` UUIDs read from a binary stream."""
        count = rows * 2
        size = count * _UINT64_SIZE
        raw = stream.read(size)
        if raw is None or len(raw) != size:
            raise EOFError(f"expected {size} bytes, got {0 if raw is None else len(raw)}")
        self._data = list(struct.unpack(f"<{count}Q", raw))

    def save_body(self, stream: BinaryIO) -> None:
        """Write the column's halves as little-endian unsigned 64-bit integers."""
        stream.write(struct.pack(f"<{len(self._data)}Q", *self._data))