"""Swap the endian order of the elements stored in binary files.

Usage: swpeo <element-size> <file-1> <file-2> ...
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

ARG_ERROR = 1
ELEMSIZE_ERROR = 2
FILESIZE_ERROR = 3
SETPOS_ERROR = 4
WRITE_ERROR = 5
READ_ERROR = 6
OPEN_ERROR = 7

_VALID_ELEM_SIZES = (2, 4, 8)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SwapError(Exception):
    """Raised when a file cannot be swapped; ``code`` is the exit status."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def check_elem_size(elem_size: int) -> int:
    """Return ``elem_size`` if it is 2, 4 or 8, otherwise raise SwapError."""
    if elem_size not in _VALID_ELEM_SIZES:
        raise SwapError(ELEMSIZE_ERROR, "element size must be 2, 4 or 8")
    return elem_size


def swap_file_bytes(path: str | Path, elem_size: int) -> None:
    """Reverse the byte order of every ``elem_size``-byte element of a file in place."""
    check_elem_size(elem_size)
    try:
        handle = open(path, "rb+")
    except OSError as exc:
        raise SwapError(OPEN_ERROR, f"failed to open file '{path}'") from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise SwapError(READ_ERROR, f"file '{path}': I/O error") from exc
        size = len(data)
        modulo = size % elem_size
        if modulo:
            raise SwapError(
                FILESIZE_ERROR,
                f"file '{path}': file size ({size}) modulo element size "
                f"({elem_size}) should be zero, but was {modulo}",
            )
        swapped = b"".join(
            data[start:start + elem_size][::-1] for start in range(0, size, elem_size)
        )
        try:
            handle.seek(0)
        except OSError as exc:
            raise SwapError(SETPOS_ERROR, f"file '{path}': I/O error") from exc
        try:
            handle.write(swapped)
            handle.flush()
        except OSError as exc:
            raise SwapError(WRITE_ERROR, f"file '{path}': I/O error") from exc


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: swpeo <element size> <file 1> <file 2> ...")
        return ARG_ERROR
    try:
        elem_size = check_elem_size(_atoi(args[0]))
        for path in args[1:]:
            swap_file_bytes(path, elem_size)
    except SwapError as exc:
        sys.stderr.write(f"Error: {exc.message}")
        return exc.code
    return 0


if __name__ == "__main__":
    sys.exit(main())