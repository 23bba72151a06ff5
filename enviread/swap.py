"""Byte-order conversion of field element values."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterable

from enviread.record import DataType, EprError, Field


def _swap(values: Iterable, code: str) -> list:
    items = list(values)
    fmt = f"{len(items)}{code}"
    try:
        raw = struct.pack("<" + fmt, *items)
    except struct.error as exc:
        raise ValueError(f"value out of range for type '{code}': {exc}") from exc
    return list(struct.unpack(">" + fmt, raw))


def byte_swap_short(values: Iterable[int]) -> list[int]:
    """Swap the bytes of each signed 16-bit value."""
    return _swap(values, "h")


def byte_swap_ushort(values: Iterable[int]) -> list[int]:
    """Swap the bytes of each unsigned 16-bit value."""
    return _swap(values, "H")


def byte_swap_int(values: Iterable[int]) -> list[int]:
    """Swap the bytes of each signed 32-bit value."""
    return _swap(values, "i")


def byte_swap_uint(values: Iterable[int]) -> list[int]:
    """Swap the bytes of each unsigned 32-bit value."""
    return _swap(values, "I")


def byte_swap_float(values: Iterable[float]) -> list[float]:
    """Swap the bytes of each 32-bit floating point value."""
    return _swap(values, "f")


def is_little_endian_order() -> bool:
    """Return True if this machine stores values in little endian order."""
    return sys.byteorder == "little"


def is_big_endian_order() -> bool:
    """Return True if this machine stores values in big endian order."""
    return sys.byteorder == "big"


_SWAPPERS = {
    DataType.USHORT: byte_swap_ushort,
    DataType.SHORT: byte_swap_short,
    DataType.UINT: byte_swap_uint,
    DataType.INT: byte_swap_int,
    DataType.FLOAT: byte_swap_float,
}

_UNCHANGED = frozenset({DataType.UCHAR, DataType.CHAR, DataType.STRING, DataType.SPARE})


def swap_endian_order(field: Field) -> None:
    """Swap the byte order of the field's elements in place."""
    data_type = field.info.data_type
    if data_type in _UNCHANGED:
        return
    if data_type is DataType.TIME:
        field.elems[:3] = byte_swap_uint(field.elems[:3])
        return
    if data_type is DataType.DOUBLE:
        raise EprError("swap_endian_order: DOUBLE type was not yet processed")
    swapper = _SWAPPERS.get(data_type)
    if swapper is None:
        raise EprError("swap_endian_order: unknown data type")
    count = field.info.num_elems
    field.elems[:count] = swapper(field.elems[:count])