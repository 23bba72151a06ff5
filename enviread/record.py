"""Record and field structures: field layouts, record layouts and record instances."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field as dc_field
from typing import Any


class EprError(Exception):
    """Raised when a product, record or field operation fails."""


class DataType(enum.IntEnum):
    """Data types of field elements."""

    UNKNOWN = 0
    UCHAR = 1
    CHAR = 2
    USHORT = 3
    SHORT = 4
    UINT = 5
    INT = 6
    FLOAT = 7
    DOUBLE = 8
    STRING = 11
    SPARE = 13
    TIME = 21


_INTEGER_TYPES = frozenset(
    {DataType.UCHAR, DataType.CHAR, DataType.USHORT, DataType.SHORT, DataType.UINT, DataType.INT}
)
_REAL_TYPES = frozenset({DataType.FLOAT, DataType.DOUBLE})


@dataclass
class FieldInfo:
    """Layout of one field within a record."""

    data_type: DataType
    description: str
    name: str
    num_elems: int
    num_bytes: int
    more_count: int = 1
    unit: str = ""

    @property
    def data_type_id(self) -> DataType:
        return self.data_type

    @property
    def tot_size(self) -> int:
        """Total size in bytes of all elements of this field."""
        return self.num_bytes * self.num_elems * self.more_count


@dataclass
class Field:
    """A field instance holding the element values described by its info."""

    info: FieldInfo
    elems: Any

    @classmethod
    def from_info(cls, info: FieldInfo) -> Field:
        """Create a field with zero-initialised elements for the given info."""
        if info is None:
            raise EprError("field info must not be None")
        data_type = info.data_type
        count = info.num_elems * info.more_count
        if data_type is DataType.STRING:
            elems: Any = ""
        elif data_type is DataType.SPARE:
            elems = bytes(info.tot_size)
        elif data_type is DataType.TIME:
            elems = [0, 0, 0]
        elif data_type in _REAL_TYPES:
            elems = [0.0] * count
        elif data_type in _INTEGER_TYPES:
            elems = [0] * count
        else:
            elems = [0] * count
        return cls(info=info, elems=elems)

    @property
    def name(self) -> str:
        return self.info.name


@dataclass
class RecordInfo:
    """Layout of the records of one dataset."""

    dataset_name: str
    field_infos: list[FieldInfo] = dc_field(default_factory=list)

    @property
    def tot_size(self) -> int:
        """Total size in bytes of all fields of a record."""
        return sum(info.tot_size for info in self.field_infos)


def create_record_info(dataset_name: str, field_infos: Iterable[FieldInfo]) -> RecordInfo:
    """Create the record layout for the named dataset from its field layouts."""
    if dataset_name is None:
        raise EprError("create_record_info: dataset name must not be None")
    if field_infos is None:
        raise EprError("create_record_info: field infos must not be None")
    return RecordInfo(dataset_name=dataset_name, field_infos=list(field_infos))


class Record:
    """A record instance: one field per field info of its (shared) record info."""

    def __init__(self, info: RecordInfo, fields: list[Field]) -> None:
        self.info = info
        self.fields = fields

    @classmethod
    def from_info(cls, info: RecordInfo) -> Record:
        """Create a record whose fields follow the given record layout."""
        if info is None:
            raise EprError("Record.from_info: record info must not be None")
        return cls(info, [Field.from_info(fi) for fi in info.field_infos])

    def field_at(self, index: int) -> Field:
        """Return the field at the given position."""
        if not 0 <= index < len(self.fields):
            raise EprError("field_at: field_index out of range")
        return self.fields[index]

    def num_fields(self) -> int:
        """Return the number of fields in this record."""
        return len(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __repr__(self) -> str:
        return f"Record(dataset={self.info.dataset_name!r}, fields={len(self.fields)})"