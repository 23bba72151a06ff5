# enviread

Pure-Python building blocks for handling the records of ENVISAT (MERIS,
AATSR, ASAR) products: record and field layouts, typed access to field
elements, byte-order conversion, the string helpers used when parsing
headers, and a small command that swaps the byte order of whole files.

## Modules

- `enviread.record` describes records and fields: the `DataType` enum,
  `FieldInfo` (the layout of one field), `Field` (a field holding its
  element values), `RecordInfo` (the layout of a dataset's records, with
  `tot_size` summed over its fields) and `Record`. `create_record_info`
  builds a `RecordInfo`; `Field.from_info` and `Record.from_info` create
  zero-initialised instances. `Record.field_at` and `Record.num_fields`
  give access to the fields. Failures raise `EprError`.
- `enviread.elements` reads one element (`get_field_elem_as_char`,
  `..._as_short`, `..._as_uint`, `..._as_float`, `..._as_double`, ...) or
  all elements (`get_field_elems_int`, `get_field_elems_float`, ...) of a
  field. The single-element readers also accept narrower integer types
  and widen them; the all-element readers require the exact type.
  `get_field_elem_as_mjd` returns `(days, seconds, microseconds)` of a time
  field and `get_field_elem_as_str` the text of a string field. A bad
  index or type raises `EprError`.
- `enviread.copying` returns up to a given number of field elements
  converted to doubles, floats, longs or uints
  (`copy_field_elems_as_doubles` and friends).
- `enviread.swap` swaps the bytes of 16- and 32-bit values
  (`byte_swap_short`, `byte_swap_ushort`, `byte_swap_int`,
  `byte_swap_uint`, `byte_swap_float`), reports the host byte order
  (`is_little_endian_order`, `is_big_endian_order`) and swaps a field's
  elements in place with `swap_endian_order`. Double fields are not
  handled and raise `EprError`.
- `enviread.strings` holds name and token helpers: `equal_names` and
  `stricmp` compare ignoring case, `str_tok` and `str_tok_tok` return the
  next token together with the position after it (or `None` at the end),
  and `trim_string`, `strip_string_r`, `sub_string`,
  `find_first_not_white`, `find_last_not_white`, `if_no_letters`,
  `get_positive_int` and `numeral_suspicion` inspect or clean up text.
- `enviread.swpeo` implements the `swpeo` command (`main`), with
  `swap_file_bytes` and `check_elem_size` for use from Python. Failures
  raise `SwapError`, whose `code` is the command's exit status.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Example

```python
from enviread.record import DataType, FieldInfo, Record, create_record_info
from enviread.elements import get_field_elem_as_double

info = create_record_info("Scaling_Factor_GADS", [
    FieldInfo(DataType.FLOAT, "Solar spectral flux", "sun_spec_flux",
              num_elems=15, num_bytes=4, unit="mW.m-2.nm-1"),
])
print(info.tot_size)          # 60

record = Record.from_info(info)
field = record.field_at(0)
field.elems[0] = 1.5
print(get_field_elem_as_double(field, 0))   # 1.5
```

## The `swpeo` command

`swpeo` swaps the byte order of whole files in place. It treats each file
as a sequence of elements of the given size, which must be 2, 4 or 8 bytes:

```
swpeo 4 band_1.raw band_2.raw
```

Without arguments it prints its usage and exits with status 1. It stops at
the first file whose size is not a multiple of the element size, or that
cannot be opened, read or written, writes the error to standard error and
exits with a non-zero status; files processed before that are already
swapped.

## What it does not do

The package does not open product files or read records, datasets or
bands from disk, and it carries no record descriptor tables for the
MERIS, AATSR or ASAR products. Record layouts have to be built with
`create_record_info` and field values filled in by the caller.