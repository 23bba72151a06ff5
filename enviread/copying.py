"""Copying field elements into lists of a requested numeric type."""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import Any

from enviread.record import DataType, EprError, Field

_SMALL_INTS = frozenset(
    {DataType.UCHAR, DataType.CHAR, DataType.USHORT, DataType.SHORT}
)


def _to_float32(value: Any) -> float:
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


def _to_uint(value: Any) -> int:
    return int(value) & 0xFFFFFFFF


def _copy(
    field: Field | None,
    num_elems: int,
    func_name: str,
    accepted: frozenset[DataType],
    convert: Callable[[Any], Any],
) -> list:
    """Convert the first ``min(num_elems, field size)`` elements of a field."""
    if field is None:
        raise EprError(f"{func_name}: invalid field name")
    if num_elems < 0:
        raise ValueError(f"{func_name}: num_elems must not be negative")
    if field.info.data_type not in accepted:
        raise EprError(f"{func_name}: invalid type")
    count = min(num_elems, field.info.num_elems)
    return [convert(value) for value in field.elems[:count]]


def copy_field_elems_as_doubles(field: Field, num_elems: int) -> list[float]:
    """Return up to ``num_elems`` elements of any numeric field as doubles."""
    return _copy(
        field, num_elems, "copy_field_elems_as_doubles",
        _SMALL_INTS | {DataType.UINT, DataType.INT, DataType.FLOAT, DataType.DOUBLE},
        float,
    )


def copy_field_elems_as_floats(field: Field, num_elems: int) -> list[float]:
    """Return up to ``num_elems`` elements of an integer or ``float`` field
    in single precision."""
    return _copy(
        field, num_elems, "copy_field_elems_as_floats",
        _SMALL_INTS | {DataType.UINT, DataType.INT, DataType.FLOAT},
        _to_float32,
    )


def copy_field_elems_as_longs(field: Field, num_elems: int) -> list[int]:
    """Return up to ``num_elems`` elements of a narrow or ``int`` field as ints."""
    return _copy(
        field, num_elems, "copy_field_elems_as_longs",
        _SMALL_INTS | {DataType.INT},
        int,
    )


def copy_field_elems_as_uints(field: Field, num_elems: int) -> list[int]:
    """Return up to ``num_elems`` elements of a narrow or ``int`` field as
    unsigned 32-bit values; negative values wrap around."""
    return _copy(
        field, num_elems, "copy_field_elems_as_uints",
        _SMALL_INTS | {DataType.INT},
        _to_uint,
    )