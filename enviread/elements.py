"""Typed access to the element values of a field."""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import Any

from enviread.record import DataType, EprError, Field

_SMALL_INTS = frozenset({DataType.UCHAR, DataType.CHAR})


def _to_ushort(value: int) -> int:
    return int(value) & 0xFFFF


def _to_uint(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


def _to_double(value: float) -> float:
    return float(value)


def _require_field(field: Field | None, func_name: str) -> Field:
    if field is None:
        raise EprError(f"{func_name}: invalid field name")
    return field


def _element(
    field: Field | None,
    elem_index: int,
    func_name: str,
    accepted: frozenset[DataType],
    convert: Callable[[Any], Any],
) -> Any:
    """Fetch one element after checking field, index and data type."""
    field = _require_field(field, func_name)
    if not 0 <= elem_index < field.info.num_elems:
        raise EprError(f"{func_name}: invalid elem_index parameter")
    if field.info.data_type not in accepted:
        raise EprError(f"{func_name}: invalid type")
    return convert(field.elems[elem_index])


def _elements(field: Field | None, func_name: str, data_type: DataType) -> tuple:
    """Return all elements of a field that must have exactly the given type."""
    field = _require_field(field, func_name)
    if field.info.data_type is not data_type:
        raise EprError(f"{func_name}: invalid type")
    return tuple(field.elems)


def get_field_elem_as_char(field: Field, elem_index: int) -> int:
    """Return the element at ``elem_index`` of a ``char`` field."""
    return _element(field, elem_index, "get_field_elem_as_char",
                    frozenset({DataType.CHAR}), int)


def get_field_elems_char(field: Field) -> tuple[int, ...]:
    """Return all elements of a ``char`` field."""
    return _elements(field, "get_field_elems_char", DataType.CHAR)


def get_field_elem_as_uchar(field: Field, elem_index: int) -> int:
    """Return the element at ``elem_index`` of a ``uchar`` field."""
    return _element(field, elem_index, "get_field_elem_as_uchar",
                    frozenset({DataType.UCHAR}), int)


def get_field_elems_uchar(field: Field) -> tuple[int, ...]:
    """Return all elements of a ``uchar`` field."""
    return _elements(field, "get_field_elems_uchar", DataType.UCHAR)


def get_field_elem_as_short(field: Field, elem_index: int) -> int:
    """Return an element of a ``uchar``, ``char`` or ``short`` field as a short."""
    return _element(field, elem_index, "get_field_elem_as_short",
                    _SMALL_INTS | {DataType.SHORT}, int)


def get_field_elems_short(field: Field) -> tuple[int, ...]:
    """Return all elements of a ``short`` field."""
    return _elements(field, "get_field_elems_short", DataType.SHORT)


def get_field_elem_as_ushort(field: Field, elem_index: int) -> int:
    """Return an element of a ``uchar``, ``char`` or ``ushort`` field as an unsigned short."""
    return _element(field, elem_index, "get_field_elem_as_ushort",
                    _SMALL_INTS | {DataType.USHORT}, _to_ushort)


def get_field_elems_ushort(field: Field) -> tuple[int, ...]:
    """Return all elements of a ``ushort`` field."""
    return _elements(field, "get_field_elems_ushort", DataType.USHORT)


def get_field_elem_as_int(field: Field, elem_index: int) -> int:
    """Return an element of any signed or narrow integer field as an int."""
    return _element(
        field, elem_index, "get_field_elem_as_int",
        _SMALL_INTS | {DataType.USHORT, DataType.SHORT, DataType.INT}, int,
    )


def get_field_elems_int(field: Field) -> tuple[int, ...]:
    """Return all elements of an ``int`` field."""
    return _elements(field, "get_field_elems_int", DataType.INT)


def get_field_elem_as_uint(field: Field, elem_index: int) -> int:
    """Return an element of a ``uint`` or narrow integer field as an unsigned int."""
    return _element(
        field, elem_index, "get_field_elem_as_uint",
        _SMALL_INTS | {DataType.UINT, DataType.USHORT, DataType.SHORT}, _to_uint,
    )


def get_field_elems_uint(field: Field) -> tuple[int, ...]:
    """Return all elements of a ``uint`` field."""
    return _elements(field, "get_field_elems_uint", DataType.UINT)


def get_field_elem_as_float(field: Field, elem_index: int) -> float:
    """Return an element of any integer or ``float`` field in single precision."""
    return _element(
        field, elem_index, "get_field_elem_as_float",
        _SMALL_INTS | {DataType.FLOAT, DataType.USHORT, DataType.SHORT,
                       DataType.UINT, DataType.INT},
        _to_float32,
    )


def get_field_elems_float(field: Field) -> tuple[float, ...]:
    """Return all elements of a ``float`` field."""
    return _elements(field, "get_field_elems_float", DataType.FLOAT)


def get_field_elem_as_double(field: Field, elem_index: int) -> float:
    """Return an element of any numeric field as a double."""
    return _element(
        field, elem_index, "get_field_elem_as_double",
        _SMALL_INTS | {DataType.DOUBLE, DataType.FLOAT, DataType.USHORT,
                       DataType.SHORT, DataType.UINT, DataType.INT},
        _to_double,
    )


def get_field_elems_double(field: Field) -> tuple[float, ...]:
    """Return all elements of a ``double`` field."""
    return _elements(field, "get_field_elems_double", DataType.DOUBLE)


def get_field_elem_as_mjd(field: Field) -> tuple[int, int, int]:
    """Return a time field as ``(days, seconds, microseconds)``."""
    field = _require_field(field, "get_field_elem_as_mjd")
    if field.info.data_type is not DataType.TIME:
        raise EprError("get_field_elem_as_mjd: invalid type")
    days, seconds, microseconds = field.elems[:3]
    return days, seconds, microseconds


def get_field_elem_as_str(field: Field) -> str:
    """Return the text of a string field."""
    field = _require_field(field, "get_field_elem_as_str")
    if field.info.data_type is not DataType.STRING:
        raise EprError("get_field_elem_as_str: invalid type")
    return field.elems